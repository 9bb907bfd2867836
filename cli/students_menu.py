# cli/students_menu.py

"""
Student actions for the Gradebook CLI.

This module defines the interface for managing student records, including:
- Adding new students, or updating existing ones with new marks
- Removing whole students or selected courses
- Viewing all or selected marks of a student
- Listing the students of a course, best mark first

All operations are routed through the `Gradebook` API; failures are reported with `display_response_failure()`.
Every action takes the active `Gradebook` and the course catalog.
"""

from typing import cast

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.gradebook import Gradebook

# === add and update ===


def add_student(gradebook: Gradebook, catalog: tuple[str, ...]) -> None:
    """
    Prompts for a new student and their marks.

    Notes:
        - If the student already exists, the entered marks are merged into their record instead.
    """
    name = helpers.prompt_user_input_or_cancel(
        f"Enter the student's name (leave blank or type {helpers.EXIT_KEYWORD} to cancel):"
    )

    if name is MenuSignal.CANCEL:
        return
    name = cast(str, name)

    if gradebook.has_student(name):
        print(
            f"\nStudent {name} is already in the gradebook, so their courses will be updated."
        )

    save_marks(gradebook, name, catalog)


def update_student(gradebook: Gradebook, catalog: tuple[str, ...]) -> None:
    name = helpers.prompt_user_input_or_cancel(
        f"Enter the name of the student to update (leave blank or type {helpers.EXIT_KEYWORD} to cancel):"
    )

    if name is MenuSignal.CANCEL:
        return
    name = cast(str, name)

    save_marks(gradebook, name, catalog)


def save_marks(gradebook: Gradebook, name: str, catalog: tuple[str, ...]) -> None:
    marks = helpers.prompt_marks_input(catalog)

    gradebook_response = gradebook.add_or_update_student(name, marks)

    if not gradebook_response.success:
        helpers.display_response_failure(gradebook_response)
        print(f"\n{name} was not saved.")
        return

    print(f"\n{gradebook_response.detail}")


# === remove ===


def remove_student_or_courses(gradebook: Gradebook, catalog: tuple[str, ...]) -> None:
    """
    Removes a whole student, or only the courses listed after their name.

    Notes:
        - Input is "<name>" to remove the student, or "<name>,<course>,<course>" to remove courses.
        - Course names are not checked against the catalog; unknown courses simply match nothing.
    """
    selection = helpers.prompt_name_and_courses_or_cancel(
        "Enter the student's name to remove them, or their name followed by the courses to remove,\n"
        "separated by commas (e.g. John,Database,Operating System):"
    )

    if selection is MenuSignal.CANCEL:
        return
    name, courses = cast(tuple[str, list[str]], selection)

    if courses:
        gradebook_response = gradebook.remove_courses(name, courses)
    else:
        gradebook_response = gradebook.remove_student(name)

    if not gradebook_response.success:
        helpers.display_response_failure(gradebook_response)
        return

    print(f"\n{gradebook_response.detail}")


# === view ===


def search_student(gradebook: Gradebook, catalog: tuple[str, ...]) -> None:
    """
    Shows all marks of a student, or only those for the courses listed after their name.
    """
    selection = helpers.prompt_name_and_courses_or_cancel(
        "Enter the student's name, optionally followed by the courses to show,\n"
        "separated by commas (e.g. John,Database,Operating System):"
    )

    if selection is MenuSignal.CANCEL:
        return
    name, courses = cast(tuple[str, list[str]], selection)

    if not courses:
        gradebook_response = gradebook.find_student(name)

        if not gradebook_response.success:
            helpers.display_response_failure(gradebook_response)
            return

        record = gradebook_response.data["record"]
        print(f"\n{name}'s marks are:\n{record.marks_as_text()}")
        return

    gradebook_response = gradebook.get_selected_marks(name, courses)

    if not gradebook_response.success:
        helpers.display_response_failure(gradebook_response)
        return

    print(f"\n{name}'s selected marks are:")
    helpers.display_results(
        gradebook_response.data["marks"].items(),
        formatter=lambda item: formatters.format_mark_line(*item),
    )


def list_course(gradebook: Gradebook, catalog: tuple[str, ...]) -> None:
    """
    Prints the average mark of a course and every student taking it, best mark first.

    Notes:
        - The course must be one of the catalog courses.
    """
    course = helpers.prompt_user_input_or_cancel(
        f"Enter one of {formatters.format_list_with_and(list(catalog))} (leave blank to cancel):"
    )

    if course is MenuSignal.CANCEL:
        return
    course = cast(str, course)

    if course not in catalog:
        print("\nCourse not found.")
        return

    gradebook_response = gradebook.list_course(course)

    if not gradebook_response.success:
        helpers.display_response_failure(gradebook_response)
        return

    listing = gradebook_response.data["listing"]

    print(f"\n{formatters.format_course_average(course, listing.mean)}")
    helpers.display_results(
        listing.entries,
        formatter=lambda entry: formatters.format_ranked_entry(*entry),
    )
