# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree package - in-memory tree of value nodes.

The package is organized into:
- node: TreeNode base class, container kinds and the create_node() factory
- values: ValueBase and one value node kind per persisted type
- subscription: Child insert/delete notifications

Example:
    >>> from genro_conf.tree import Configuration, create_node
    >>> root = Configuration()
    >>> node = create_node('NumberValue')
    >>> node.name = 'speed'
    >>> node.value = 16
    >>> node.parent = root
    >>> [child.name for child in root.get_children()]
    ['speed']
"""

from .node import Configuration, Folder, TreeNode, create_node
from .subscription import SubscriberCallback, SubscriptionMixin
from .values import (
    BoolValue,
    BrickColorValue,
    CFrameValue,
    Color3Value,
    IntValue,
    NumberValue,
    ObjectValue,
    RayValue,
    StringValue,
    ValueBase,
    Vector3Value,
)

__all__ = [
    "TreeNode",
    "Configuration",
    "Folder",
    "create_node",
    "SubscriberCallback",
    "SubscriptionMixin",
    "ValueBase",
    "BoolValue",
    "NumberValue",
    "IntValue",
    "StringValue",
    "ObjectValue",
    "Vector3Value",
    "Color3Value",
    "RayValue",
    "BrickColorValue",
    "CFrameValue",
]
