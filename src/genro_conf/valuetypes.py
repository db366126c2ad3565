# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value type registry.

Maps the closed set of supported value type tags to the node kind that
persists each of them, and recovers a tag from an arbitrary runtime value.

Typed keys join a plain name with a node kind so that the same name can be
associated with nodes holding different types of values::

    >>> typed_key('apples', ValueType.BOOLEAN)
    'apples:__conf:BoolValue'
    >>> untyped_key('apples:__conf:BoolValue')
    'apples'
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .datatypes import MAX_SAFE_INTEGER, BrickColor, CFrame, Color3, Ray, Vector3
from .exceptions import InvalidKeyError
from .tree.node import TreeNode

TYPED_KEY_SEP = ':__conf:'


class ValueType(str, Enum):
    """Supported value type tags."""

    BOOLEAN = 'boolean'
    NUMBER = 'number'
    BIGINT = 'bigint'
    STRING = 'string'
    INSTANCE = 'Instance'
    NIL = 'nil'
    VECTOR3 = 'Vector3'
    COLOR3 = 'Color3'
    RAY = 'Ray'
    BRICKCOLOR = 'BrickColor'
    CFRAME = 'CFrame'


TYPE_TO_KIND: dict[ValueType, str] = {
    ValueType.BOOLEAN: 'BoolValue',
    ValueType.NUMBER: 'NumberValue',
    ValueType.BIGINT: 'IntValue',
    ValueType.STRING: 'StringValue',
    ValueType.INSTANCE: 'ObjectValue',
    ValueType.NIL: 'ObjectValue',
    ValueType.VECTOR3: 'Vector3Value',
    ValueType.COLOR3: 'Color3Value',
    ValueType.RAY: 'RayValue',
    ValueType.BRICKCOLOR: 'BrickColorValue',
    ValueType.CFRAME: 'CFrameValue',
}

# First tag wins, so ObjectValue reports as Instance rather than nil.
KIND_TO_TYPE: dict[str, ValueType] = {}
for _tag, _kind in TYPE_TO_KIND.items():
    KIND_TO_TYPE.setdefault(_kind, _tag)


def node_kind(tag: ValueType | str) -> str:
    """Return the node kind persisting the given value type tag.

    Args:
        tag: A ValueType member or its string value (e.g. 'boolean').

    Raises:
        ValueError: If tag is not a known value type tag.
    """
    return TYPE_TO_KIND[ValueType(tag)]


def type_of(value: Any) -> ValueType | None:
    """Return the value type tag describing value, or None if unsupported.

    None maps to ``nil``: only an ObjectValue can hold an empty value.
    bool is checked before int since it is an int subclass.
    """
    if value is None:
        return ValueType.NIL
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, int):
        if abs(value) > MAX_SAFE_INTEGER:
            return ValueType.BIGINT
        return ValueType.NUMBER
    if isinstance(value, float):
        return ValueType.NUMBER
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, Vector3):
        return ValueType.VECTOR3
    if isinstance(value, Color3):
        return ValueType.COLOR3
    if isinstance(value, Ray):
        return ValueType.RAY
    if isinstance(value, BrickColor):
        return ValueType.BRICKCOLOR
    if isinstance(value, CFrame):
        return ValueType.CFRAME
    if isinstance(value, TreeNode):
        return ValueType.INSTANCE
    return None


def type_name(value: Any) -> str:
    """Describe the runtime type of value for error messages."""
    tag = type_of(value)
    if tag is not None:
        return tag.value
    return type(value).__name__


def typed_key(key: str, tag: ValueType | str) -> str:
    """Join key with the node kind of tag.

    Raises:
        InvalidKeyError: If key contains TYPED_KEY_SEP.
    """
    if TYPED_KEY_SEP in key:
        raise InvalidKeyError(key, TYPED_KEY_SEP)
    return f"{key}{TYPED_KEY_SEP}{node_kind(tag)}"


def untyped_key(typed: str) -> str:
    """Return the plain name part of a key built by typed_key.

    Splits on the last separator: a name may end with a prefix of the
    separator (e.g. 'a:__conf'), but a node kind never contains it.
    """
    return typed.rsplit(TYPED_KEY_SEP, 1)[0]
