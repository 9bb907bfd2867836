# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Gradebook application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input (names, course lists, marks)
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.response import Response

MIN_MARK = 0
MAX_MARK = 100

# typed in any name prompt to go back to the menu, same as leaving it blank
EXIT_KEYWORD = "EXIT"


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index or, case-insensitively, by the first word of the label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option: ")

        if choice == "0" or choice.lower() == zero_option.split()[0].lower():
            return MenuSignal.EXIT

        for label, action in options:
            if choice.lower() == label.split()[0].lower():
                return action

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)

            # retrieves action from tuple
            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")


# === prompt user input methods ===


# Prompt Helpers
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty responses, and `EXIT_KEYWORD` where a name is expected, return `MenuSignal.CANCEL`.
# - `confirm_action()` loops until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response in ("", EXIT_KEYWORD) else response


def prompt_name_and_courses_or_cancel(prompt: str) -> tuple[str, list[str]] | MenuSignal:
    """
    Prompts for a student name optionally followed by course names, separated by commas.

    Args:
        prompt (str): The instruction shown to the user.

    Returns:
        tuple[str, list[str]]: The name and the (possibly empty) list of courses, e.g. "John,Database" gives ("John", ["Database"]).
        MenuSignal.CANCEL: If the input is blank or the name is `EXIT_KEYWORD`.
    """
    response = prompt_user_input_or_cancel(prompt)

    if response is MenuSignal.CANCEL:
        return MenuSignal.CANCEL

    name, courses = parse_name_and_courses(str(response))

    if not name or name == EXIT_KEYWORD:
        return MenuSignal.CANCEL

    return name, courses


def parse_name_and_courses(text: str) -> tuple[str, list[str]]:
    name, *courses = (part.strip() for part in text.split(","))
    return name, [course for course in courses if course]


def prompt_mark_input(course: str) -> int:
    while True:
        response = prompt_user_input(f"Enter the student's {course} mark ({MIN_MARK}-{MAX_MARK}):")

        try:
            mark = int(response)

        except ValueError:
            print("Invalid input, please try again...")
            continue

        if MIN_MARK <= mark <= MAX_MARK:
            return mark

        print("Invalid grade, please try again...")


def prompt_marks_input(catalog: tuple[str, ...]) -> dict[str, int]:
    """
    Collects course -> mark pairs for a student, at most one per catalog course.

    Args:
        catalog (tuple[str, ...]): The courses a student can be marked in.

    Returns:
        dict[str, int]: The entered marks, possibly empty.

    Notes:
        - Entry stops at a blank course name, a course outside the catalog, or a course already entered.
        - Marks are re-prompted until they are whole numbers within range.
    """
    print(f"\nAvailable courses: {formatters.format_list_with_and(list(catalog))}.")

    marks: dict[str, int] = {}

    for i in range(1, len(catalog) + 1):
        course = prompt_user_input(f"Enter the student's course {i} (leave blank to finish):")

        if course not in catalog or course in marks:
            break

        marks[course] = prompt_mark_input(course)

    return marks
