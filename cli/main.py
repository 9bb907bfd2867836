# cli/main.py

"""
Main Menu for the Gradebook CLI.

Loads the configuration, sets up logging, and runs the menu loop over a fresh in-memory `Gradebook`.
"""

import argparse
import logging
from pathlib import Path

import cli.menu_helpers as helpers
import cli.students_menu as students_menu
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.config import ConfigValueError, GradebookConfig, load_config_file
from core.logger import setup_logging
from models.gradebook import Gradebook

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """
    Console entry point: parses arguments, loads the configuration, and starts the menu loop.
    """
    parser = argparse.ArgumentParser(description="Run the Gradebook CLI.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a key = value configuration file.",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config_file(args.config)

    except (FileNotFoundError, ConfigValueError) as e:
        parser.error(str(e))

    setup_logging(config.numeric_log_level, config.log_file)
    logger.debug("Loaded configuration: %r", config)

    run_cli(config)


def run_cli(config: GradebookConfig) -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Args:
        config (GradebookConfig): Settings for this session, including the course catalog.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - All records are kept in memory and are lost on exit.
    """
    gradebook = Gradebook()

    title = formatters.format_banner_text("GRADEBOOK MANAGER")
    options = [
        ("Add a student or their courses", students_menu.add_student),
        ("Delete a student or their courses", students_menu.remove_student_or_courses),
        ("Search a student's marks", students_menu.search_student),
        ("Update a student's marks", students_menu.update_student),
        ("List the students of a course", students_menu.list_course),
    ]
    zero_option = "Quit (all data will be lost)"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            if helpers.confirm_action("Are you sure you want to quit?"):
                exit_program()

        elif callable(menu_response):
            menu_response(gradebook, config.courses)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit
