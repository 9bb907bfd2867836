# core/config.py

"""Configuration parser for the Gradebook CLI."""

import logging
from pathlib import Path

DEFAULT_COURSES: tuple[str, ...] = (
    "Database",
    "Data Structure",
    "Operating System",
    "Mathematics",
    "System Design",
)

DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigValueError(Exception):
    """Raised when a setting in the configuration file has an unusable value."""


class GradebookConfig:
    """A class to save Gradebook configuration settings."""

    def __init__(
        self,
        courses: tuple[str, ...] = DEFAULT_COURSES,
        log_level: str = DEFAULT_LOG_LEVEL,
        log_file: Path | None = None,
    ) -> None:
        """Initialize the configuration.

        Args:
            courses (tuple[str, ...]): The catalog of courses students can be marked in.
            log_level (str): The name of the logging level, e.g. "INFO".
            log_file (Path | None): Where to write logs. None logs to stderr.

        """
        self.courses = courses
        self.log_level = log_level
        self.log_file = log_file

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level)

    def __repr__(self) -> str:
        return (
            f"GradebookConfig(courses={list(self.courses)}, "
            f"log_level={self.log_level}, log_file={self.log_file})"
        )


def parse_courses(value: str) -> tuple[str, ...]:
    """Split a comma-separated course list, dropping blanks and duplicates.

    Raises:
        ConfigValueError: If no course names remain.

    """
    courses: list[str] = []
    for course in value.split(","):
        course = course.strip()
        if course and course not in courses:
            courses.append(course)

    if not courses:
        raise ConfigValueError(
            "The 'courses' setting must name at least one course.",
        )

    return tuple(courses)


def parse_log_level(value: str) -> str:
    """Normalize a log level name.

    Raises:
        ConfigValueError: If the value is not a standard logging level name.

    """
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ConfigValueError(
            f"Invalid log level '{value}' in the configuration file. "
            f"Expected one of {', '.join(sorted(_LOG_LEVELS))}.",
        )
    return level


def load_config_file(config_file_path: Path | None = None) -> GradebookConfig:
    """Load and parse the configuration file.

    Settings missing from the file keep their defaults. Without a path the
    defaults are returned as they are.

    Args:
        config_file_path (Path | None): Path to the config file.

    Raises:
        FileNotFoundError: If the given file does not exist.
        ConfigValueError: If a setting has an invalid value.

    Returns:
        GradebookConfig: Parsed config object.

    """
    if config_file_path is None:
        return GradebookConfig()

    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    config = GradebookConfig()

    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "courses":
                config.courses = parse_courses(value)
            elif key == "log_level":
                config.log_level = parse_log_level(value)
            elif key == "log_file":
                config.log_file = Path(value).expanduser() if value else None

    return config
