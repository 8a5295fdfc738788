import logging

from src.logger import (
    ColourConsoleFormatter,
    ConsoleFormat,
    DefaultConsoleFormatter,
    build_console_handler,
)


def _record(level=logging.INFO, message="hello"):
    return logging.LogRecord("statement-engine", level, __file__, 1, message, None, None)


def test_default_formatter_renders_name_level_and_message():
    text = DefaultConsoleFormatter().format(_record())
    assert text.endswith(" - statement-engine - INFO - hello")


def test_colour_formatter_wraps_line_in_level_colour():
    text = ColourConsoleFormatter().format(_record(level=logging.WARNING))
    assert text.startswith(ConsoleFormat.YELLOW)
    assert text.endswith(ConsoleFormat.RESET)


def test_build_console_handler_picks_formatter():
    assert isinstance(build_console_handler("INFO", colour=True).formatter, ColourConsoleFormatter)
    plain = build_console_handler("DEBUG", colour=False)
    assert type(plain.formatter) is DefaultConsoleFormatter
    assert plain.level == logging.DEBUG
