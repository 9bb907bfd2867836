# tests/test_config.py

import logging
from pathlib import Path

import pytest

from core.config import (
    DEFAULT_COURSES,
    ConfigValueError,
    GradebookConfig,
    load_config_file,
    parse_courses,
    parse_log_level,
)
from core.logger import setup_logging

VALID_CONFIG = """
# Gradebook configuration
courses = Database, Mathematics, Physics
log_level = info
log_file = {log_file}
"""

INVALID_LEVEL_CONFIG = """
log_level = chatty
"""

EMPTY_COURSES_CONFIG = """
courses = , ,
"""


def write_config(tmp_path: Path, text: str) -> Path:
    config_path = tmp_path / "gradebook.conf"
    config_path.write_text(text, encoding="utf-8")
    return config_path


def test_defaults_without_path():
    config = load_config_file(None)

    assert config.courses == DEFAULT_COURSES
    assert len(config.courses) == 5
    assert config.log_level == "WARNING"
    assert config.numeric_log_level == logging.WARNING
    assert config.log_file is None


def test_load_valid_config(tmp_path):
    log_file = tmp_path / "logs" / "gradebook.log"
    config = load_config_file(
        write_config(tmp_path, VALID_CONFIG.format(log_file=log_file))
    )

    assert config.courses == ("Database", "Mathematics", "Physics")
    assert config.log_level == "INFO"
    assert config.numeric_log_level == logging.INFO
    assert config.log_file == log_file


def test_missing_keys_keep_defaults(tmp_path):
    config = load_config_file(write_config(tmp_path, "# nothing set\nnot a setting\n"))

    assert config.courses == DEFAULT_COURSES
    assert config.log_level == "WARNING"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config_file(tmp_path / "missing.conf")


def test_invalid_log_level_raises(tmp_path):
    with pytest.raises(ConfigValueError):
        load_config_file(write_config(tmp_path, INVALID_LEVEL_CONFIG))


def test_empty_courses_raises(tmp_path):
    with pytest.raises(ConfigValueError):
        load_config_file(write_config(tmp_path, EMPTY_COURSES_CONFIG))


def test_parse_courses_drops_duplicates():
    assert parse_courses("Database,Database, Mathematics") == (
        "Database",
        "Mathematics",
    )


@pytest.mark.parametrize("value", ["debug", "INFO", " Error "])
def test_parse_log_level_valid(value):
    assert parse_log_level(value) == value.strip().upper()


def test_repr_lists_settings():
    assert "Database" in repr(GradebookConfig())


def test_setup_logging_to_file(tmp_path):
    log_file = tmp_path / "logs" / "gradebook.log"
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    try:
        setup_logging(logging.INFO, log_file)
        logging.getLogger("models.gradebook").info("hello from the test")

        for handler in root_logger.handlers:
            handler.flush()

        assert "message=hello from the test" in log_file.read_text(encoding="utf-8")

    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)
