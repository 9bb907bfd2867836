# models/trie.py

"""
Character-indexed prefix tree holding every student record of the register.

A student's name is the path from the root down to the node flagged as a record; that
node owns the student's course -> mark pairs. Names sharing a prefix share nodes.

Provides functions for:
- Inserting new students and merging marks into existing ones
- Exact-name lookup (prefixes of stored names are not matches)
- Removing a whole student, pruning every node no other name still needs
- Removing selected courses from a student without touching the tree shape
- Ranking every student who takes a course, with the course average

Insert, lookup, and both removals are O(k) in the length of the name. The ranked listing
walks the whole tree and sorts the m matching students in O(m log m).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from models.node import ROOT_CHARACTER, Node


@dataclass
class RankedListing:
    """
    Students taking one course, best mark first, and the course average.

    Attributes:
        course (str): The course that was ranked.
        entries (list[tuple[int, str]]): (mark, name) pairs, descending by mark, then ascending by name.
        mean (int): The average mark, truncated toward zero.
    """

    course: str
    entries: list[tuple[int, str]] = field(default_factory=list)
    mean: int = 0


class Trie:

    def __init__(self):
        self._root: Node = Node(ROOT_CHARACTER)

    # === properties ===

    @property
    def root(self) -> Node:
        return self._root

    # === data manipulators ===

    def insert(self, name: str, fields: Mapping[str, int]) -> None:
        """
        Adds a student to the trie, or merges new marks into an existing student.

        Args:
            name (str): The student's name, used character by character as the path.
            fields (Mapping[str, int]): Course -> mark pairs. Marks for courses the student already has are overwritten.

        Raises:
            ValueError: If `name` is empty. The root never holds a record.

        Notes:
            - Every node that gains a child on the way down stops being a leaf.
        """
        self.require_name(name)

        node = self._root

        for character in name:
            node = node.add_child(character)

        node.merge_fields(fields)
        node.is_record = True

    def remove_record(self, name: str) -> bool:
        """
        Removes a student and prunes every node left without a purpose.

        Args:
            name (str): The student's name.

        Returns:
            bool: True if the student existed and was removed, False if no such student exists.

        Notes:
            - Nodes still leading to other students, or holding a record themselves, are kept.
            - The root is never detached.
        """
        if self.lookup(name) is None:
            return False

        path: list[tuple[Node, str]] = []
        node = self._root

        for character in name:
            path.append((node, character))
            node = node.children[character]

        node.reset_fields()
        node.is_record = False

        # unwind towards the root, detaching nodes that no longer serve any name
        while path and node.is_leaf and not node.is_record:
            parent, character = path.pop()
            parent.delete_child(character)
            node = parent

        return True

    def remove_courses(self, name: str, course_names: Iterable[str]) -> int:
        """
        Removes selected courses from a student, leaving the student in the trie.

        Args:
            name (str): The student's name.
            course_names (Iterable[str]): The courses to remove.

        Returns:
            int:
                - -1 if the student does not exist.
                - 0 if the student takes none of the given courses.
                - Otherwise, the number of courses removed.

        Notes:
            - A student whose last course is removed is still a record, with no marks.
        """
        student = self.lookup(name)

        if student is None:
            return -1

        return student.delete_fields(course_names)

    # === data accessors ===

    def lookup(self, name: str) -> Node | None:
        """
        Returns the record node for `name`, or None if there is no student with exactly that name.
        """
        node = self._root
        matched = 0

        for character in name:
            child = node.children.get(character)

            if child is None:
                break

            node = child
            matched += 1

        if matched == len(name) and node.is_record:
            return node

        return None

    def ranked_list_by_course(self, course: str) -> RankedListing | None:
        """
        Ranks every student holding a mark for `course`.

        Args:
            course (str): The course to rank by.

        Returns:
            RankedListing: (mark, name) pairs sorted by descending mark, ties by ascending name, plus the average mark.
            None: If no student takes the course, so there is no average to compute.
        """
        entries = [
            (node.fields[course], name)
            for name, node in self.records()
            if course in node.fields
        ]

        if not entries:
            return None

        entries.sort(key=lambda entry: (-entry[0], entry[1]))

        total = sum(mark for mark, _ in entries)
        mean = abs(total) // len(entries)

        return RankedListing(
            course=course,
            entries=entries,
            mean=mean if total >= 0 else -mean,
        )

    def records(self) -> Iterator[tuple[str, Node]]:
        """
        Yields (name, node) for every student, depth first, rebuilding names from the path.
        """
        stack: list[tuple[str, Node]] = [("", self._root)]

        while stack:
            prefix, node = stack.pop()

            if node.is_record:
                yield prefix, node

            for character, child in node.children.items():
                stack.append((prefix + character, child))

    # === data validators ===

    @staticmethod
    def require_name(name: str) -> None:
        """
        Validates that a student name can be used as a trie key.

        Raises:
            ValueError: If `name` is empty.
        """
        if not name:
            raise ValueError("Student name must not be empty.")

    # === dunder methods ===

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self.records())
