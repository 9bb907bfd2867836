# models/gradebook.py

"""
The Gradebook model is the central data object of the program and the single entry point the CLI uses.

All student records live in an in-memory `Trie` keyed by student name; nothing is written to disk and
everything is lost when the program exits.

Provides functions for adding and updating students, looking up a student's marks, removing whole students
or selected courses, and ranking all students of a course. Every method returns a structured `Response`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from core.response import ErrorCode, Response
from models.trie import Trie

logger = logging.getLogger(__name__)


class Gradebook:

    def __init__(self):
        self._students: Trie = Trie()

    # === properties ===

    @property
    def student_count(self) -> int:
        return len(self._students)

    # === data accessors ===

    def has_student(self, name: str) -> bool:
        return name in self._students

    def find_student(self, name: str) -> Response:
        """
        Looks up a student by exact name.

        Args:
            name (str): The student's name.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a student with exactly this name exists.
                    - False if no such student exists or if unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the student does not exist.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student cannot be found
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Node): The trie node holding the student's marks.
                    - On failure:
                        - None

        Notes:
            - This method is read-only.
            - A name that is only a prefix of a stored name is not a match.
        """
        try:
            record = self._students.lookup(name)

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        if record is None:
            logger.debug("Lookup missed for student %r", name)
            return Response.fail(
                detail=f"Student {name} not found.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": record,
            },
        )

    def get_selected_marks(self, name: str, courses: Iterable[str]) -> Response:
        """
        Returns a student's marks for the requested courses only.

        Args:
            name (str): The student's name.
            courses (Iterable[str]): The courses to report. Courses the student does not take are left out.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student exists, even if none of the courses match.
                    - False if the student cannot be found.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the student does not exist.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "marks" (dict[str, int]): Course -> mark, in the order the courses were requested.
                    - On failure:
                        - None

        Notes:
            - This method is read-only.
        """
        find_response = self.find_student(name)

        if not find_response.success:
            return find_response

        record = find_response.data["record"]
        marks = {
            course: record.fields[course]
            for course in courses
            if course in record.fields
        }

        return Response.succeed(
            data={
                "marks": marks,
            },
        )

    def list_course(self, course: str) -> Response:
        """
        Ranks every student who has a mark in the given course.

        Args:
            course (str): The course to rank by.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if at least one student takes the course.
                    - False if nobody takes it or if unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NO_DATA` if no student takes the course.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if there is no data
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "listing" (RankedListing): Ordered (mark, name) pairs and the course mean.
                    - On failure:
                        - None

        Notes:
            - This method is read-only.
            - The course is not checked against any catalog here; that is the caller's job.
        """
        try:
            listing = self._students.ranked_list_by_course(course)

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        if listing is None:
            return Response.fail(
                detail=f"No student has a mark for {course}.",
                error=ErrorCode.NO_DATA,
                status_code=404,
            )

        return Response.succeed(
            data={
                "listing": listing,
            },
        )

    # === data manipulators ===

    def add_or_update_student(self, name: str, marks: Mapping[str, int]) -> Response:
        """
        Adds a new student, or merges the given marks into an existing one.

        Args:
            name (str): The student's name.
            marks (Mapping[str, int]): Course -> mark pairs. Existing marks for the same course are overwritten.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was added or updated.
                    - False if the name is blank or if unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if the name is blank.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Node): The trie node holding the student's marks.
                        - "created" (bool): True if the student did not exist before.
                    - On failure:
                        - None

        Notes:
            - Marks are not range-checked here; the CLI only passes values from 0 to 100.
        """
        try:
            self.require_student_name(name)

            created = name not in self._students
            self._students.insert(name, marks)

        except ValueError as e:
            return Response.fail(
                detail=f"Missing required field: {e}",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.info(
                "%s student %r with %d course(s)",
                "Added" if created else "Updated",
                name,
                len(marks),
            )

            action = "added to" if created else "updated in"

            return Response.succeed(
                detail=f"Student {name} {action} the gradebook with {len(marks)} course(s).",
                data={
                    "record": self._students.lookup(name),
                    "created": created,
                },
            )

    def remove_student(self, name: str) -> Response:
        """
        Removes a student and all of their marks.

        Args:
            name (str): The student's name.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was removed.
                    - False if the student cannot be found or if unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the student does not exist.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student cannot be found
                    - 400 for other failures
                - data (dict | None):
                    - Always None, this method does not return any payload.

        Notes:
            - Trie nodes used only by this student are pruned; other students sharing a prefix are untouched.
        """
        try:
            removed = self._students.remove_record(name)

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        if not removed:
            logger.warning("Cannot remove student %r: not found", name)
            return Response.fail(
                detail=f"Student {name} not found.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        logger.info("Removed student %r", name)

        return Response.succeed(
            detail=f"Student {name} removed from the gradebook.",
        )

    def remove_courses(self, name: str, courses: Iterable[str]) -> Response:
        """
        Removes selected courses from a student.

        Args:
            name (str): The student's name.
            courses (Iterable[str]): The courses to remove.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if at least one course was removed.
                    - False if the student cannot be found, takes none of the courses, or if unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a confirmation with the number of courses removed.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the student does not exist.
                    - `ErrorCode.NO_OP` if the student takes none of the given courses.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student cannot be found
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - "removed" (int): The number of courses removed (0 on NO_OP, absent otherwise on failure).

        Notes:
            - The student stays in the gradebook even if no courses are left.
        """
        try:
            removed = self._students.remove_courses(name, list(courses))

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        if removed < 0:
            logger.warning("Cannot remove courses from %r: student not found", name)
            return Response.fail(
                detail=f"Student {name} not found.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        if removed == 0:
            return Response.fail(
                detail="Student does not have any of the given courses.",
                error=ErrorCode.NO_OP,
                data={
                    "removed": 0,
                },
            )

        logger.info("Removed %d course(s) from student %r", removed, name)

        return Response.succeed(
            detail=f"{removed} course(s) removed from {name}.",
            data={
                "removed": removed,
            },
        )

    # === data validators ===

    def require_student_name(self, name: str) -> None:
        """
        Validates that a student name is not blank.

        Args:
            name (str): The name to validate.

        Raises:
            ValueError: If the name is empty or only whitespace.
        """
        if not name or not name.strip():
            raise ValueError("Student name must not be blank.")

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Gradebook(students={self.student_count})"
