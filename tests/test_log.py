import pytest

from filehttpd import log
from filehttpd.log import LogLevel


@pytest.fixture(autouse=True)
def restore_filter():
    saved = log.get_filter()
    yield
    log.set_filter(saved)


def test_filter_round_trip():
    log.set_filter(LogLevel.WARNING)
    assert log.get_filter() == LogLevel.WARNING
    log.set_filter(LogLevel.DEBUG)
    assert log.get_filter() == LogLevel.DEBUG


@pytest.mark.parametrize(
    "level, prefix",
    [
        (LogLevel.DEBUG, "\033[36m[DEBUG]"),
        (LogLevel.INFO, "\033[0m[INFO]"),
        (LogLevel.WARNING, "\033[33m[WARNING]"),
        (LogLevel.ERROR, "\033[31m[ERROR]"),
    ],
)
def test_level_prefix(level, prefix):
    assert log.level_prefix(level) == prefix


def test_unknown_level_uses_info_prefix():
    assert log.level_prefix(42) == log.level_prefix(LogLevel.INFO)


def test_info_output_format(capsys):
    log.set_filter(LogLevel.DEBUG)
    log.info("hello")
    assert capsys.readouterr().out == "\033[0m[INFO] hello\033[0m\n"


def test_messages_below_filter_are_dropped(capsys):
    log.set_filter(LogLevel.WARNING)
    log.debug("quiet")
    log.info("quiet")
    assert capsys.readouterr().out == ""


def test_messages_at_or_above_filter_are_printed(capsys):
    log.set_filter(LogLevel.WARNING)
    log.warning("careful")
    log.error("broken")
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        log.level_prefix(LogLevel.WARNING) + " careful" + log.RESET,
        log.level_prefix(LogLevel.ERROR) + " broken" + log.RESET,
    ]


def test_debug_printed_when_filter_is_debug(capsys):
    log.set_filter(LogLevel.DEBUG)
    log.debug("trace")
    out = capsys.readouterr().out
    assert out.startswith("\033[36m[DEBUG] trace")