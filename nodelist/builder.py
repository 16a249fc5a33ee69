"""Bulk construction of a NodeList from a line source.

A build that hits a failure part-way through is aborted: every node built
so far is released and ``None`` is returned. A partial list is never
handed back.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Union

from nodelist.config import Settings, get_settings
from nodelist.linked_list import NodeList
from nodelist.node import Node, create_node, free_node

logger = logging.getLogger(__name__)

Line = Union[str, bytes]
NodeFactory = Callable[[str], Optional[Node]]


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def _bounded(line: str, lineno: int, settings: Settings) -> Optional[str]:
    if len(line) <= settings.max_line_len:
        return line
    if settings.long_line_policy == "reject":
        logger.error(
            "line %d is %d characters, limit is %d",
            lineno, len(line), settings.max_line_len,
        )
        return None
    logger.warning("line %d truncated to %d characters", lineno, settings.max_line_len)
    return line[: settings.max_line_len]


def create_list(
    source: Optional[Iterable[Line]],
    *,
    settings: Optional[Settings] = None,
    node_factory: NodeFactory = create_node,
) -> Optional[NodeList]:
    """Read ``source`` line by line and build a list with one node per line.

    Returns an empty list for an empty source, and ``None`` for a missing
    source or an aborted build.
    """
    if source is None:
        logger.debug("create_list: missing source")
        return None
    settings = settings or get_settings()

    lst = NodeList()
    try:
        for lineno, raw in enumerate(source, start=1):
            if isinstance(raw, (bytes, bytearray, memoryview)):
                raw = bytes(raw).decode(settings.encoding)
            elif not isinstance(raw, str):
                logger.error("line %d is %s, not text; aborting", lineno, type(raw).__name__)
                lst.free_list()
                return None
            line = _bounded(_strip_terminator(raw), lineno, settings)
            if line is None:
                lst.free_list()
                return None

            node = node_factory(line)
            if node is None or not lst.insert_at_end(node):
                logger.error("create_list: node for line %d could not be built; aborting", lineno)
                if node is not None and not node.linked:
                    free_node(node)
                lst.free_list()
                return None
    except (UnicodeDecodeError, OSError) as exc:
        logger.error("create_list: reading the source failed after %d nodes: %s", lst.size(), exc)
        lst.free_list()
        return None

    return lst
