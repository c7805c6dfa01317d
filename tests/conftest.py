"""
Shared fixtures: the bundled knowledge base and a resolver built from it.
"""
from pathlib import Path

import pytest

from troubleshoot_kb.canonicalizer import build_index
from troubleshoot_kb.data_loader import KnowledgeBaseLoader
from troubleshoot_kb.resolution import create_knowledge_resolver

KB_PATH = Path(__file__).parent.parent / "data" / "kb.json"


@pytest.fixture(scope="session")
def kb_path():
    return str(KB_PATH)


@pytest.fixture(scope="session")
def sample_entries(kb_path):
    return KnowledgeBaseLoader(kb_path).load_entries()


@pytest.fixture(scope="session")
def indexed_entries(sample_entries):
    return build_index(sample_entries)


@pytest.fixture(scope="session")
def resolver(sample_entries):
    return create_knowledge_resolver(sample_entries)
