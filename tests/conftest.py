# tests/conftest.py

import pytest

from core.config import GradebookConfig
from models.gradebook import Gradebook
from models.node import Node
from models.trie import Trie


@pytest.fixture
def empty_trie():
    return Trie()


@pytest.fixture
def sample_trie():
    trie = Trie()
    trie.insert("John", {"Database": 70, "Mathematics": 85})
    trie.insert("Joan", {"Database": 90})
    trie.insert("Jo", {"System Design": 60})
    trie.insert("Mary", {"Database": 70, "Mathematics": 90})
    return trie


@pytest.fixture
def sample_node():
    node = Node("n")
    node.merge_fields({"Database": 70, "Mathematics": 90})
    node.is_record = True
    return node


@pytest.fixture
def sample_gradebook():
    gradebook = Gradebook()
    gradebook.add_or_update_student("John", {"Database": 70, "Mathematics": 85})
    gradebook.add_or_update_student("Joan", {"Database": 90})
    gradebook.add_or_update_student("Mary", {"Database": 70, "Mathematics": 90})
    return gradebook


@pytest.fixture
def sample_config():
    return GradebookConfig()

