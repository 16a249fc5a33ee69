"""Singly linked list of owned text records."""

from nodelist.builder import create_list
from nodelist.config import Settings, configure_logging, get_settings
from nodelist.linked_list import NodeList, free_list, insert_at_end, remove_node, traverse
from nodelist.node import Node, create_node, free_node

__all__ = [
    "Node",
    "NodeList",
    "Settings",
    "configure_logging",
    "create_list",
    "create_node",
    "free_list",
    "free_node",
    "get_settings",
    "insert_at_end",
    "remove_node",
    "traverse",
]
