# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value node kinds.

Each kind holds a single typed ``value``. Assigning a value of the wrong
runtime type raises TypeError, so the persisted representation always
matches the kind.
"""

from __future__ import annotations

from typing import Any, ClassVar

from ..datatypes import MAX_SAFE_INTEGER, BrickColor, CFrame, Color3, Ray, Vector3
from .node import TreeNode


class ValueBase(TreeNode):
    """Base class for nodes holding a single typed value.

    Subclasses declare the accepted runtime types and the default value::

        class BoolValue(ValueBase):
            value_types = (bool,)
            default = False
    """

    __slots__ = ('_value',)

    abstract: ClassVar[bool] = True
    value_types: ClassVar[tuple[type, ...]] = ()
    nullable: ClassVar[bool] = False
    default: ClassVar[Any] = None

    def __init__(
        self,
        name: str | None = None,
        parent: TreeNode | None = None,
        value: Any = None,
    ) -> None:
        """Initialize a value node.

        Args:
            name: The node's name. Defaults to the class name.
            parent: Optional parent to attach to right away.
            value: Initial value. None means the kind's default.
        """
        self._value = self.default
        if value is not None:
            self.value = value
        super().__init__(name, parent)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, value={self._value!r})"

    @property
    def value(self) -> Any:
        """The held value."""
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        if not self.accepts(value):
            raise TypeError(
                f"{type(self).__name__}.value cannot hold "
                f"{type(value).__name__} ({value!r})"
            )
        self._value = value

    @classmethod
    def accepts(cls, value: Any) -> bool:
        """True if value can be stored by this kind."""
        if value is None:
            return cls.nullable
        if isinstance(value, bool) and bool not in cls.value_types:
            return False
        return isinstance(value, cls.value_types)


class BoolValue(ValueBase):
    __slots__ = ()
    value_types = (bool,)
    default = False


class NumberValue(ValueBase):
    """Holds a double: ints beyond MAX_SAFE_INTEGER belong in an IntValue."""

    __slots__ = ()
    value_types = (int, float)
    default = 0

    @classmethod
    def accepts(cls, value: Any) -> bool:
        if isinstance(value, int) and abs(value) > MAX_SAFE_INTEGER:
            return False
        return super().accepts(value)


class IntValue(ValueBase):
    __slots__ = ()
    value_types = (int,)
    default = 0


class StringValue(ValueBase):
    __slots__ = ()
    value_types = (str,)
    default = ''


class ObjectValue(ValueBase):
    """Holds a reference to another node, or None."""

    __slots__ = ()
    value_types = (TreeNode,)
    nullable = True
    default = None


class Vector3Value(ValueBase):
    __slots__ = ()
    value_types = (Vector3,)
    default = Vector3()


class Color3Value(ValueBase):
    __slots__ = ()
    value_types = (Color3,)
    default = Color3()


class RayValue(ValueBase):
    __slots__ = ()
    value_types = (Ray,)
    default = Ray()


class BrickColorValue(ValueBase):
    __slots__ = ()
    value_types = (BrickColor,)
    default = BrickColor()


class CFrameValue(ValueBase):
    __slots__ = ()
    value_types = (CFrame,)
    default = CFrame()
