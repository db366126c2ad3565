# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Conf - typed key-value store persisted in a tree of value nodes.

Conf wraps a root node (a Configuration by default) and reads and writes
values stored in value nodes under it. Every (name, type) pair maps to one
child node, so the same name can hold independent values of different
types::

    conf = Conf()
    conf.set('apples', True)
    conf.set('apples', 10)

    conf.get('apples', 'boolean')  # True
    conf.get('apples', 'number')   # 10

    conf.delete('apples')          # removes both nodes

Nodes are indexed by a typed key (see valuetypes.typed_key). Nodes already
present under the root are adopted at construction time. Structural changes
made by others are picked up with sync(), or continuously with watch().
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Iterator

from .exceptions import InvalidKeyError, UnsupportedTypeError
from .tree import Configuration, TreeNode, ValueBase, create_node
from .valuetypes import (
    KIND_TO_TYPE,
    TYPED_KEY_SEP,
    ValueType,
    node_kind,
    type_name,
    type_of,
    typed_key,
    untyped_key,
)

logger = logging.getLogger(__name__)

_subscriber_ids = itertools.count()


class Conf:
    """A typed key-value store backed by the children of a tree node.

    Conf provides:
    - get(key, type): Read the value of a given type at key
    - set(key, value): Write a value, creating its node if needed
    - ensure(key, fallback): Read a value without ever creating a node
    - delete(key): Remove every value stored at key, whatever its type
    - sync() / watch(): Keep the index consistent with the tree

    get() and ensure() never create nodes: only set() and adoption mutate
    the index or the tree.

    Example:
        >>> conf = Conf()
        >>> conf.set('title', 'Main')
        >>> conf.ensure('title', 'Untitled')
        'Main'
        >>> conf.ensure('subtitle', 'none')
        'none'
    """

    __slots__ = ('_root', '_stores', '_subscriber_id', '_watching')

    def __init__(self, root: TreeNode | None = None, watch: bool = False) -> None:
        """Initialize a Conf.

        Args:
            root: Existing node whose value children are adopted. If None,
                a new empty Configuration node is created.
            watch: If True, start watching the root right away.
        """
        self._root = root if root is not None else Configuration()
        self._stores: dict[str, ValueBase] = {}
        self._subscriber_id = f"conf_{next(_subscriber_ids)}"
        self._watching = False

        for child in self._root.get_children():
            if child.is_a('ValueBase'):
                self.register_existing(child)

        if watch:
            self.watch()

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"Conf({self._root.get_full_name()!r}, {self.keys()})"

    def __len__(self) -> int:
        """Return the number of registered (key, type) entries."""
        return len(self._stores)

    def __contains__(self, key: str) -> bool:
        """Check if a value of any type is registered at key."""
        return any(untyped_key(typed) == key for typed in self._stores)

    def __enter__(self) -> Conf:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.unwatch()

    @property
    def root(self) -> TreeNode:
        """The node whose children hold the values."""
        return self._root

    @property
    def watching(self) -> bool:
        """True while watch() is active."""
        return self._watching

    # ==================== Core API ====================

    def get(self, key: str, type_: ValueType | str) -> Any:
        """Get the value of the given type at key.

        Args:
            key: The key to get.
            type_: The type of value expected, a ValueType or its name
                (e.g. 'boolean', 'number', 'string').

        Returns:
            The held value, or None if there is no such value.
        """
        store = self._get_store(key, type_)
        if store is None:
            return None
        return store.value

    def set(self, key: str, value: Any) -> None:
        """Set the value at key.

        The type is inferred from value. A node holding that type is
        created under the root if none exists yet, otherwise it is
        overwritten. None is stored in an ObjectValue, the only kind that
        can hold an empty value.

        Raises:
            UnsupportedTypeError: If value's type is not supported.
            InvalidKeyError: If key contains the internal separator.
        """
        value_type = type_of(value)
        if value_type is None:
            raise UnsupportedTypeError(key, type_name(value))

        store = self._get_store(key, value_type)
        if store is None:
            self._create_store(key, value_type, value)
        else:
            store.value = value

    def ensure(self, key: str, fallback: Any) -> Any:
        """Get the value at key, falling back if there is none.

        The type looked up is inferred from fallback. Unlike set(), no node
        is ever created. A node holding None counts as no value.

        Raises:
            UnsupportedTypeError: If fallback's type is not supported.
            InvalidKeyError: If key contains the internal separator.
        """
        value_type = type_of(fallback)
        if value_type is None:
            raise UnsupportedTypeError(key, type_name(fallback))

        store = self._get_store(key, value_type)
        if store is None:
            return fallback
        saved = store.value
        return saved if saved is not None else fallback

    def delete(self, key: str) -> None:
        """Delete every value (and node) stored at key, whatever its type.

        Deleting a key that holds nothing is a no-op.
        """
        matching = [
            (typed, store) for typed, store in self._stores.items()
            if untyped_key(typed) == key
        ]
        for typed, store in matching:
            del self._stores[typed]
            store.destroy()
            logger.debug(f"Deleted {typed}")

    # ==================== Registration ====================

    def register_existing(self, node: TreeNode) -> bool:
        """Register an existing value node.

        The type is inferred from the node's current value. Nodes that are
        not value nodes, whose value has no supported type, or whose name
        contains the internal separator, are skipped with a warning.

        Returns:
            True if the node was registered.
        """
        if not node.is_a('ValueBase'):
            logger.warning(f"Not a value store {node.get_full_name()}.")
            return False

        value_type = type_of(node.value)
        if value_type is None:
            logger.warning(f"Unsupported store found {node.get_full_name()}.")
            return False

        try:
            key = typed_key(node.name, value_type)
        except InvalidKeyError as e:
            logger.warning(f"Skipping store {node.get_full_name()}: {e}")
            return False

        self._stores[key] = node
        return True

    def sync(self) -> None:
        """Rebuild the index from the root's current children.

        Picks up nodes added, removed or renamed since they were registered.
        """
        self._stores.clear()
        for child in self._root.get_children():
            if child.is_a('ValueBase'):
                self.register_existing(child)
        logger.debug(f"Synced {self._root.get_full_name()}: {len(self._stores)} stores")

    def watch(self) -> None:
        """Keep the index updated as children are added to or removed from root.

        Renames are still only picked up by sync().
        """
        if self._watching:
            return
        self._root.subscribe(
            self._subscriber_id,
            insert=self._on_child_added,
            delete=self._on_child_removed,
        )
        self._watching = True

    def unwatch(self) -> None:
        """Stop watching the root. No-op if not watching."""
        if not self._watching:
            return
        self._root.unsubscribe(self._subscriber_id, any=True)
        self._watching = False

    def _on_child_added(self, node: TreeNode, **kwargs: Any) -> None:
        if node.is_a('ValueBase'):
            self.register_existing(node)

    def _on_child_removed(self, node: TreeNode, **kwargs: Any) -> None:
        stale = [typed for typed, store in self._stores.items() if store is node]
        for typed in stale:
            del self._stores[typed]

    # ==================== Iteration ====================

    def iter_keys(self) -> Iterator[str]:
        """Yield distinct keys in registration order."""
        seen: set[str] = set()
        for typed in self._stores:
            key = untyped_key(typed)
            if key not in seen:
                seen.add(key)
                yield key

    def keys(self) -> list[str]:
        """Return the list of distinct keys in registration order."""
        return list(self.iter_keys())

    def types_of(self, key: str) -> list[ValueType]:
        """Return the value types registered at key.

        ObjectValue entries report as ValueType.INSTANCE.
        """
        return [
            KIND_TO_TYPE[typed.rsplit(TYPED_KEY_SEP, 1)[1]] for typed in self._stores
            if untyped_key(typed) == key
        ]

    # ==================== Internals ====================

    def _get_store(self, key: str, type_: ValueType | str) -> ValueBase | None:
        store = self._stores.get(typed_key(key, type_))
        if store is not None and store.is_a(node_kind(type_)):
            return store
        return None

    def _create_store(self, key: str, type_: ValueType, value: Any) -> ValueBase:
        # Value is set before parenting so watchers infer the right type.
        store = create_node(node_kind(type_))
        store.name = key
        store.value = value
        store.parent = self._root
        self._stores[typed_key(key, type_)] = store
        logger.debug(f"Created {type(store).__name__} {store.get_full_name()}")
        return store
