# core/formatters.py

# all pure text utilities
# must never import from models!

from typing import Any

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_list_with_and(items: list[Any]) -> str:
    if not items:
        return ""

    if len(items) == 1:
        return items[0]

    if len(items) == 2:
        return " and ".join(items)

    return ", ".join(items[:-1]) + ", and " + items[-1]


# === marks formatters ===


def format_mark_line(course: str, mark: int) -> str:
    return f"{course}: \t{mark}"


def format_ranked_entry(mark: int, name: str) -> str:
    return f"{mark}\t{name}"


def format_course_average(course: str, mean: int) -> str:
    return f"The average for the {course} course is {mean}"
