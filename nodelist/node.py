from __future__ import annotations

import logging
from typing import Optional, Union

from nodelist.config import get_settings

logger = logging.getLogger(__name__)

Payload = Union[str, bytes, bytearray, memoryview]


class Node:
    __slots__ = ("data", "next", "_owner", "_released")

    def __init__(self, data: str):
        self.data: Optional[str] = data
        self.next: Optional["Node"] = None
        self._owner = None
        self._released: bool = False

    @property
    def released(self) -> bool:
        return self._released

    @property
    def linked(self) -> bool:
        return self._owner is not None

    def __repr__(self) -> str:
        if self._released:
            return "Node(<released>)"
        return f"Node({self.data!r})"


def _copy_payload(data: Payload, encoding: str) -> str:
    if isinstance(data, str):
        # str is immutable
        return str(data)
    return bytes(data).decode(encoding)


def create_node(data: Optional[Payload]) -> Optional[Node]:
    """Create a detached node holding its own copy of ``data``.

    Bytes-like buffers are decoded into a new ``str``, so mutating the
    caller's buffer afterwards never shows through. Returns ``None`` when
    ``data`` is missing or unsupported, or when the node or its payload
    cannot be allocated.
    """
    if data is None or not isinstance(data, (str, bytes, bytearray, memoryview)):
        logger.debug("create_node: unsupported payload %r", type(data).__name__)
        return None
    try:
        node = Node("")
    except MemoryError:
        logger.error("create_node: node allocation failed")
        return None
    try:
        node.data = _copy_payload(data, get_settings().encoding)
    except (MemoryError, UnicodeDecodeError) as exc:
        free_node(node)
        logger.error("create_node: payload copy failed: %s", exc)
        return None
    return node


def free_node(node: Optional[Node]) -> None:
    """Release one node: payload first, then the node itself.

    The node should already be detached. Freeing a linked node drops its
    successor link, orphaning the rest of that chain.
    """
    if node is None or node._released:
        return
    if node._owner is not None:
        logger.warning("free_node: releasing a node that is still linked into a list")
    node.data = None
    node.next = None
    node._owner = None
    node._released = True
