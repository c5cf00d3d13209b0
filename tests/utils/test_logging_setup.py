"""Unit tests for loguru setup and the timing decorator."""

import io
import sys
from collections.abc import Iterator

import pytest
from loguru import logger

from imgconv.utils.logging_setup import setup_logging
from imgconv.utils.profiling import timed


@pytest.fixture
def stream() -> Iterator[io.StringIO]:
    buf = io.StringIO()
    yield buf
    logger.remove()
    _ = logger.add(sys.stderr)


def test_level_tags(stream: io.StringIO):
    _ = setup_logging(color=False, sink=stream)

    logger.info("reading")
    logger.success("done")
    logger.warning("careful")
    logger.error("broken")

    assert stream.getvalue().splitlines() == [
        "[INFO] reading",
        "[✓] done",
        "[WARN] careful",
        "[ERROR] broken",
    ]


def test_debug_hidden_unless_verbose(stream: io.StringIO):
    _ = setup_logging(color=False, sink=stream)
    logger.debug("hidden")
    assert stream.getvalue() == ""

    _ = setup_logging(verbose=True, color=False, sink=stream)
    logger.debug("shown")
    assert stream.getvalue() == "[DEBUG] shown\n"


def test_color_markup(stream: io.StringIO):
    _ = setup_logging(color=True, sink=stream)
    logger.info("hello")

    output = stream.getvalue()
    assert "\x1b[" in output
    assert "hello" in output


def test_message_braces_are_not_formatted(stream: io.StringIO):
    _ = setup_logging(color=False, sink=stream)
    logger.info("path {name} <tag>")
    assert stream.getvalue() == "[INFO] path {name} <tag>\n"


def test_timed_returns_result_and_logs(stream: io.StringIO):
    _ = setup_logging(verbose=True, color=False, sink=stream)

    @timed
    def add(a: int, b: int) -> int:
        return a + b

    assert add(2, 3) == 5
    assert "[DEBUG] [PROFILE] test_timed_returns_result_and_logs.<locals>.add took" in (
        stream.getvalue()
    )


def test_timed_logs_on_exception(stream: io.StringIO):
    _ = setup_logging(verbose=True, color=False, sink=stream)

    @timed
    def fail() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        fail()

    assert "[PROFILE]" in stream.getvalue()
