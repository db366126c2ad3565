# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree node classes.

A TreeNode has a name, a parent and an ordered list of children. Unlike a
dict keyed by label, sibling names are not unique: two children may share a
name as long as the caller can tell them apart (e.g. by kind).

Setting ``parent`` moves the node and notifies subscribers of both the old
and the new parent. Renaming a node is not notified.
"""

from __future__ import annotations

from typing import Any, ClassVar

from ..exceptions import TreeError
from .subscription import SubscriberCallback, SubscriptionMixin


class TreeNode(SubscriptionMixin):
    """A node in a value tree.

    Each node has:
    - name: The node's name (not unique among siblings)
    - parent: The containing node, or None if detached
    - children: Ordered list of child nodes, see get_children()

    Concrete subclasses are registered by class name and can be created
    with create_node(). Subclasses setting ``abstract = True`` are not.

    Example:
        >>> root = Configuration()
        >>> folder = Folder('settings')
        >>> folder.parent = root
        >>> folder.get_full_name()
        'Configuration.settings'
    """

    __slots__ = (
        'name', '_parent', '_children', '_destroyed',
        '_ins_subscribers', '_del_subscribers',
    )

    abstract: ClassVar[bool] = True
    _creatable: ClassVar[dict[str, type[TreeNode]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Register concrete subclasses by class name."""
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get('abstract', False):
            TreeNode._creatable[cls.__name__] = cls

    def __init__(self, name: str | None = None, parent: TreeNode | None = None) -> None:
        """Initialize a TreeNode.

        Args:
            name: The node's name. Defaults to the class name.
            parent: Optional parent to attach to right away.
        """
        self.name = name if name is not None else type(self).__name__
        self._parent: TreeNode | None = None
        self._children: list[TreeNode] = []
        self._destroyed = False
        self._ins_subscribers: dict[str, SubscriberCallback] = {}
        self._del_subscribers: dict[str, SubscriberCallback] = {}
        if parent is not None:
            self.parent = parent

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @property
    def kind(self) -> str:
        """The node kind (class name)."""
        return type(self).__name__

    @property
    def destroyed(self) -> bool:
        """True once destroy() has been called."""
        return self._destroyed

    # ==================== Structure ====================

    @property
    def parent(self) -> TreeNode | None:
        """The containing node, or None if detached."""
        return self._parent

    @parent.setter
    def parent(self, new_parent: TreeNode | None) -> None:
        if self._destroyed:
            raise TreeError(
                f"The parent property of {self.get_full_name()} is locked, "
                "the node has been destroyed"
            )
        if new_parent is self._parent:
            return
        if new_parent is not None:
            if new_parent._destroyed:
                raise TreeError(f"Cannot parent {self.name!r} under a destroyed node")
            ancestor: TreeNode | None = new_parent
            while ancestor is not None:
                if ancestor is self:
                    raise TreeError(
                        f"Attempt to set parent of {self.get_full_name()} "
                        f"to {new_parent.get_full_name()} would result in circular reference"
                    )
                ancestor = ancestor._parent

        old_parent = self._parent
        if old_parent is not None:
            ind = old_parent._children.index(self)
            del old_parent._children[ind]
            self._parent = None
            old_parent._on_node_deleted(self, ind)

        self._parent = new_parent
        if new_parent is not None:
            new_parent._children.append(self)
            new_parent._on_node_inserted(self, len(new_parent._children) - 1)

    def get_children(self) -> list[TreeNode]:
        """Return a snapshot of the child nodes in insertion order."""
        return list(self._children)

    def find_first_child(self, name: str, kind: str | None = None) -> TreeNode | None:
        """Return the first child called name (and of kind, if given)."""
        for child in self._children:
            if child.name == name and (kind is None or child.is_a(kind)):
                return child
        return None

    def is_a(self, kind: str) -> bool:
        """True if this node is of kind or of a subclass of it."""
        return any(cls.__name__ == kind for cls in type(self).__mro__)

    def get_full_name(self) -> str:
        """Return the dotted path of names from the top-most ancestor."""
        names = []
        node: TreeNode | None = self
        while node is not None:
            names.append(node.name)
            node = node._parent
        return '.'.join(reversed(names))

    def destroy(self) -> None:
        """Detach this node, lock its parent and destroy all descendants.

        Subscribers of the former parent receive a delete event. Calling
        destroy() twice is harmless.
        """
        if self._destroyed:
            return
        self.parent = None
        self._destroyed = True
        self._ins_subscribers.clear()
        self._del_subscribers.clear()
        for child in list(self._children):
            child.destroy()


class Configuration(TreeNode):
    """Container node used as default root of a Conf."""

    __slots__ = ()


class Folder(TreeNode):
    """Generic container node."""

    __slots__ = ()


def create_node(kind: str) -> TreeNode:
    """Create a detached node of the given kind.

    Args:
        kind: Class name of a concrete node (e.g. 'BoolValue', 'Folder').

    Raises:
        ValueError: If kind is unknown or not creatable.
    """
    try:
        cls = TreeNode._creatable[kind]
    except KeyError:
        raise ValueError(f"Unable to create a node of kind {kind!r}") from None
    return cls()
