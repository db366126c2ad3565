# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Child insert/delete notifications for tree nodes.

Subscribers are registered under an id, so the same owner can replace or
remove its callbacks without keeping references to them::

    >>> root.subscribe('conf', insert=on_insert, delete=on_delete)
    >>> root.unsubscribe('conf', any=True)

Callbacks are invoked synchronously, in subscription order, as::

    callback(node=child, parent=parent, ind=index, evt='ins' | 'del')
"""

from __future__ import annotations

from typing import Any, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import TreeNode

SubscriberCallback = Callable[..., Any]


class SubscriptionMixin:
    """Mixin adding subscribe/unsubscribe and event dispatch to a node.

    The host class must define ``_ins_subscribers`` and ``_del_subscribers``
    slots, both ``dict[str, SubscriberCallback]``.
    """

    __slots__ = ()

    _ins_subscribers: dict[str, SubscriberCallback]
    _del_subscribers: dict[str, SubscriberCallback]

    def subscribe(
        self,
        subscriber_id: str,
        insert: SubscriberCallback | None = None,
        delete: SubscriberCallback | None = None,
        any: SubscriberCallback | None = None,
    ) -> None:
        """Register callbacks for child insert and/or delete events.

        Args:
            subscriber_id: Identifier of the subscriber. Subscribing again
                with the same id replaces the previous callback.
            insert: Called when a child is parented under this node.
            delete: Called when a child leaves this node.
            any: Shortcut registering the same callback for both events.
        """
        if any is not None:
            insert = insert or any
            delete = delete or any
        if insert is not None:
            self._ins_subscribers[subscriber_id] = insert
        if delete is not None:
            self._del_subscribers[subscriber_id] = delete

    def unsubscribe(
        self,
        subscriber_id: str,
        insert: bool = False,
        delete: bool = False,
        any: bool = False,
    ) -> None:
        """Remove callbacks registered under subscriber_id.

        Unknown ids are ignored.
        """
        if insert or any:
            self._ins_subscribers.pop(subscriber_id, None)
        if delete or any:
            self._del_subscribers.pop(subscriber_id, None)

    def is_subscribed(self, subscriber_id: str) -> bool:
        """True if subscriber_id has at least one callback registered."""
        return (subscriber_id in self._ins_subscribers
                or subscriber_id in self._del_subscribers)

    def _on_node_inserted(self, node: TreeNode, ind: int) -> None:
        for callback in list(self._ins_subscribers.values()):
            callback(node=node, parent=self, ind=ind, evt='ins')

    def _on_node_deleted(self, node: TreeNode, ind: int) -> None:
        for callback in list(self._del_subscribers.values()):
            callback(node=node, parent=self, ind=ind, evt='del')
