# models/node.py

"""
A single vertex of the student trie.

Each node stands for one character of one or more student names. The node where a
name ends is flagged as a record and carries that student's course -> mark pairs.

The `is_leaf` flag is stored rather than computed, and is only written by the methods
that attach or detach a child, so it always agrees with `children`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

# the root stands for no character at all
ROOT_CHARACTER = ""


class Node:

    def __init__(self, character: str = ROOT_CHARACTER):
        self._character: str = character
        self._children: dict[str, Node] = {}
        self._is_record: bool = False
        self._is_leaf: bool = True
        self._fields: dict[str, int] = {}

    # === properties ===

    @property
    def character(self) -> str:
        return self._character

    @property
    def children(self) -> dict[str, Node]:
        return self._children

    @property
    def fields(self) -> dict[str, int]:
        return self._fields

    @property
    def is_record(self) -> bool:
        return self._is_record

    @is_record.setter
    def is_record(self, value: bool) -> None:
        self._is_record = value

    @property
    def is_leaf(self) -> bool:
        return self._is_leaf

    # === data accessors ===

    def get_mark(self, course: str) -> int | None:
        return self._fields.get(course)

    def marks_as_text(self) -> str:
        return "".join(
            f"\t{course}: \t{mark}\n" for course, mark in self._fields.items()
        )

    # === data manipulators ===

    # --- payload methods ---

    def merge_fields(self, fields: Mapping[str, int]) -> None:
        self._fields.update(fields)

    def reset_fields(self) -> None:
        self._fields = {}

    def delete_fields(self, names: Iterable[str]) -> int:
        """
        Removes the given courses from this node's marks.

        Args:
            names (Iterable[str]): Course names to remove. Courses the node does not hold are skipped.

        Returns:
            int: The number of course -> mark pairs actually removed.

        Notes:
            - Only `fields` is mutated; record status and children are left alone.
        """
        removed = 0

        for name in names:
            if self._fields.pop(name, None) is not None:
                removed += 1

        return removed

    # --- structural methods ---

    def add_child(self, character: str) -> Node:
        """
        Returns the child for `character`, creating and attaching it if it does not exist yet.
        """
        child = self._children.get(character)

        if child is None:
            child = Node(character)
            self._children[character] = child
            self._is_leaf = False

        return child

    def delete_child(self, character: str) -> None:
        self._children.pop(character, None)
        self._is_leaf = not self._children

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Node({self._character!r}, record={self._is_record}, leaf={self._is_leaf}, fields={self._fields})"
