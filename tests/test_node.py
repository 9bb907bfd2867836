# tests/test_node.py

from models.node import ROOT_CHARACTER, Node


def test_new_node_is_empty_leaf():
    node = Node("a")

    assert node.character == "a"
    assert node.children == {}
    assert node.fields == {}
    assert node.is_leaf
    assert not node.is_record


def test_root_uses_sentinel_character():
    assert Node().character == ROOT_CHARACTER


def test_add_child_clears_leaf_flag():
    node = Node("a")
    child = node.add_child("b")

    assert child.character == "b"
    assert node.children == {"b": child}
    assert not node.is_leaf


def test_add_child_returns_existing_child():
    node = Node("a")
    first = node.add_child("b")

    assert node.add_child("b") is first
    assert len(node.children) == 1


def test_delete_child_restores_leaf_flag():
    node = Node("a")
    node.add_child("b")
    node.add_child("c")

    node.delete_child("b")
    assert not node.is_leaf

    node.delete_child("c")
    assert node.is_leaf
    assert node.children == {}


def test_delete_missing_child_is_noop():
    node = Node("a")
    node.add_child("b")

    node.delete_child("z")

    assert list(node.children) == ["b"]
    assert not node.is_leaf


def test_delete_fields_counts_removed(sample_node):
    removed = sample_node.delete_fields(["Database", "Operating System"])

    assert removed == 1
    assert sample_node.fields == {"Mathematics": 90}
    assert sample_node.is_record


def test_delete_fields_counts_zero_marks(sample_node):
    sample_node.merge_fields({"System Design": 0})

    assert sample_node.delete_fields(["System Design"]) == 1


def test_delete_fields_none_present(sample_node):
    assert sample_node.delete_fields(["Operating System"]) == 0
    assert len(sample_node.fields) == 2


def test_merge_fields_overrides(sample_node):
    sample_node.merge_fields({"Database": 55, "System Design": 80})

    assert sample_node.fields == {
        "Database": 55,
        "Mathematics": 90,
        "System Design": 80,
    }


def test_get_mark(sample_node):
    assert sample_node.get_mark("Mathematics") == 90
    assert sample_node.get_mark("Operating System") is None


def test_marks_as_text(sample_node):
    assert sample_node.marks_as_text() == "\tDatabase: \t70\n\tMathematics: \t90\n"


def test_reset_fields(sample_node):
    sample_node.reset_fields()
    assert sample_node.fields == {}
