"""
Pytest configuration and global fixtures.
"""
import pytest

from nodelist import NodeList, create_node
from nodelist.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings so every test sees its own environment."""
    for name in ("MAX_LINE_LEN", "LONG_LINE_POLICY", "ENCODING", "LOG_LEVEL"):
        monkeypatch.delenv(f"NODELIST_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_list():
    """Build a NodeList from payloads, returning the list and its nodes in order."""
    def _make(*payloads):
        lst = NodeList()
        nodes = []
        for payload in payloads:
            node = create_node(payload)
            assert lst.insert_at_end(node)
            nodes.append(node)
        return lst, nodes
    return _make
