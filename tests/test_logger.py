import logging

from src import settings
from src.logger import LOGGER, ColourConsoleFormatter, ConsoleFormat, get_logger


def test_component_logger_is_named_child_of_bridge_logger():
    child = get_logger("lifecycle")

    assert child.name == f"{settings.LOGGER_NAME}.lifecycle"
    assert child.parent is LOGGER
    assert child.propagate


def test_component_level_does_not_change_bridge_level():
    child = get_logger("translator-level")
    before = LOGGER.level

    child.setLevel(logging.ERROR)

    assert LOGGER.level == before
    assert child.getEffectiveLevel() == logging.ERROR


def test_colour_formatter_wraps_line_in_level_colour():
    record = logging.LogRecord("hive-phoenix.jdbc", logging.WARNING, __file__, 1, "slow", None, None)
    line = ColourConsoleFormatter().format(record)

    assert line.startswith(ConsoleFormat.YELLOW)
    assert line.endswith(ConsoleFormat.RESET)
    assert "hive-phoenix.jdbc - WARNING - slow" in line
