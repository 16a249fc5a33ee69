from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional

from nodelist.node import Node, free_node

logger = logging.getLogger(__name__)

Sink = Callable[[str], object]


class NodeList:
    """Singly linked list that owns every node reachable from its head."""

    def __init__(self):
        self._head: Optional[Node] = None

    # ---- basics ----
    @property
    def head(self) -> Optional[Node]:
        return self._head

    def empty(self) -> bool:
        return self._head is None

    def size(self) -> int:
        count = 0
        n = self._head
        while n is not None:
            count += 1
            n = n.next
        return count

    # ---- append ----
    def insert_at_end(self, node: Optional[Node]) -> bool:
        """Link ``node`` after the terminal node; ownership moves into the list."""
        if node is None:
            return False
        if node.released or node.linked or node.next is not None:
            logger.debug("insert_at_end: refusing node that is released or already linked")
            return False
        node._owner = self
        if self._head is None:
            self._head = node
            return True
        current = self._head
        while current.next is not None:
            current = current.next
        current.next = node
        return True

    # ---- indexed removal ----
    def remove_node(self, index: int) -> Optional[Node]:
        """Detach the node at ``index`` and hand it to the caller.

        Returns ``None`` and leaves the list untouched when the list is empty
        or the index is out of bounds. The returned node is not freed.
        """
        if self._head is None:
            return None
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            logger.debug("remove_node: invalid index %r", index)
            return None
        if index == 0:
            victim = self._head
            self._head = victim.next
            return _detach(victim)
        prev = self._head
        for _ in range(index - 1):
            if prev.next is None:
                break
            prev = prev.next
        victim = prev.next
        if victim is None:
            logger.debug("remove_node: index %d out of bounds", index)
            return None
        prev.next = victim.next
        return _detach(victim)

    # ---- traversal ----
    def traverse(self, sink: Sink = print) -> None:
        n = self._head
        while n is not None:
            sink(n.data)
            n = n.next

    def __iter__(self) -> Iterator[str]:
        n = self._head
        while n is not None:
            yield n.data
            n = n.next

    def to_list(self) -> List[str]:
        return list(self)

    # ---- teardown / ownership ----
    def free_list(self) -> None:
        """Release every node in the chain and reset the head."""
        current = self._head
        self._head = None
        while current is not None:
            nxt = current.next
            current._owner = None
            free_node(current)
            current = nxt

    def steal_from(self, other: "NodeList") -> None:
        """Move ``other``'s whole chain into ``self``, leaving ``other`` empty."""
        if other is self:
            return
        self.free_list()
        self._head, other._head = other._head, None
        n = self._head
        while n is not None:
            n._owner = self
            n = n.next

    def __repr__(self) -> str:
        return f"NodeList({self.to_list()!r})"


def _detach(node: Node) -> Node:
    node.next = None
    node._owner = None
    return node


# ---- functions over a possibly-missing list reference ----

def insert_at_end(lst: Optional[NodeList], node: Optional[Node]) -> bool:
    if lst is None:
        logger.debug("insert_at_end: missing list")
        return False
    return lst.insert_at_end(node)


def remove_node(lst: Optional[NodeList], index: int) -> Optional[Node]:
    if lst is None:
        logger.debug("remove_node: missing list")
        return None
    return lst.remove_node(index)


def traverse(lst: Optional[NodeList], sink: Sink = print) -> None:
    if lst is not None:
        lst.traverse(sink)


def free_list(lst: Optional[NodeList]) -> None:
    if lst is not None:
        lst.free_list()
