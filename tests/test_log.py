import inspect
import io
import re

import pytest

from ingresskit.log import (
    Logger,
    LoggerPanic,
    LogLevel,
    get_k8s_api_logger,
    get_logger,
)

STAMP = re.compile(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} ")


def make(level=LogLevel.TRACE, file_name=False):
    stream = io.StringIO()
    return Logger(level=level, file_name=file_name, stream=stream), stream


def lines(stream):
    return stream.getvalue().splitlines()


def strip_stamp(line):
    match = STAMP.match(line)
    assert match is not None, line
    return line[match.end():]


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.PANIC, ["ERROR   e"]),
        (LogLevel.ERROR, ["ERROR   e"]),
        (LogLevel.WARNING, ["WARNING w", "ERROR   e"]),
        (LogLevel.INFO, ["INFO    i", "WARNING w", "ERROR   e"]),
        (LogLevel.DEBUG, ["DEBUG   d", "INFO    i", "WARNING w", "ERROR   e"]),
        (
            LogLevel.TRACE,
            ["TRACE   t", "DEBUG   d", "INFO    i", "WARNING w", "ERROR   e"],
        ),
    ],
)
def test_level_ordering_matches_source(level, expected):
    logger, stream = make(level=level)
    logger.trace("t")
    logger.debug("d")
    logger.info("i")
    logger.warning("w")
    logger.error("e")
    assert [strip_stamp(line) for line in lines(stream)] == expected


def test_print_without_filename_has_timestamp_and_message():
    logger, stream = make()
    logger.print("hello")
    [line] = lines(stream)
    assert strip_stamp(line) == "hello"


def test_none_arguments_are_skipped():
    logger, stream = make()
    logger.error(None, "boom", None)
    assert len(lines(stream)) == 1
    assert lines(stream)[0].endswith("ERROR   boom")


def test_level_filters_lower_severity():
    logger, stream = make(level=LogLevel.WARNING)
    logger.info("hidden")
    logger.debug("hidden")
    logger.trace("hidden")
    logger.warning("shown")
    assert [line.split(" ", 2)[2] for line in lines(stream)] == ["WARNING shown"]


def test_error_always_written():
    logger, stream = make(level=LogLevel.PANIC)
    logger.error("always")
    logger.errorf("code %d", 7)
    out = lines(stream)
    assert out[0].endswith("ERROR   always")
    assert out[1].endswith("ERROR   code 7")


def test_format_variants():
    logger, stream = make()
    logger.infof("%s=%s", "a", "b")
    logger.printf("plain %%")
    out = lines(stream)
    assert out[0].endswith("INFO    a=b")
    assert out[1].endswith("plain %%")


def test_filename_includes_parent_dir_and_line():
    logger, stream = make(file_name=True)
    lineno = inspect.currentframe().f_lineno + 1
    logger.warning("located")
    [line] = lines(stream)
    assert strip_stamp(line) == f"WARNING tests/test_log.py:{lineno} located"


def test_print_with_filename_has_no_prefix():
    logger, stream = make(file_name=True)
    lineno = inspect.currentframe().f_lineno + 1
    logger.print("x")
    [line] = lines(stream)
    assert strip_stamp(line) == f"tests/test_log.py:{lineno} x"


def test_err_returns_only_exceptions():
    logger, stream = make()
    problem = ValueError("bad")
    result = logger.err(None, "text", problem)
    assert result == [problem]
    assert len(lines(stream)) == 2
    assert logger.err("only text") == []


def test_panic_raises_exception_argument():
    logger, stream = make()
    with pytest.raises(ValueError, match="bad"):
        logger.panic(None, ValueError("bad"))
    assert lines(stream)[0].endswith("PANIC   bad")


def test_panic_wraps_non_exception_value():
    logger, _ = make()
    with pytest.raises(LoggerPanic) as info:
        logger.panic("plain")
    assert info.value.value == "plain"


def test_panicf_without_args_does_not_raise():
    logger, stream = make()
    logger.panicf("just a message")
    assert lines(stream)[0].endswith("PANIC   just a message")


def test_set_level_and_show_filename():
    logger, stream = make(level=LogLevel.ERROR, file_name=True)
    logger.set_level(LogLevel.DEBUG)
    logger.show_filename(False)
    logger.debug("now visible")
    assert lines(stream)[0].endswith("DEBUG   now visible")
    assert logger.level is LogLevel.DEBUG


def test_singletons():
    assert get_logger() is get_logger()
    assert get_k8s_api_logger() is get_k8s_api_logger()
    assert get_k8s_api_logger().level == LogLevel.TRACE