# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Conf - Typed key-value store persisted in a tree of value nodes.

A lightweight, zero-dependency library storing named values of different
types as value nodes under a root node, so that the same name can hold a
boolean, a number and a string at the same time.
"""

__version__ = "0.1.0"

from .conf import Conf
from .datatypes import BrickColor, CFrame, Color3, Ray, Vector3
from .exceptions import (
    ConfError,
    InvalidKeyError,
    TreeError,
    UnsupportedTypeError,
)
from .tree import Configuration, Folder, TreeNode, ValueBase, create_node
from .valuetypes import TYPED_KEY_SEP, ValueType, node_kind, type_of

__all__ = [
    # Core classes
    "Conf",
    # Value types
    "ValueType",
    "TYPED_KEY_SEP",
    "node_kind",
    "type_of",
    "Vector3",
    "Color3",
    "Ray",
    "BrickColor",
    "CFrame",
    # Tree
    "TreeNode",
    "ValueBase",
    "Configuration",
    "Folder",
    "create_node",
    # Exceptions
    "ConfError",
    "UnsupportedTypeError",
    "InvalidKeyError",
    "TreeError",
]
