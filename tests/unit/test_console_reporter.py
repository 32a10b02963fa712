import io
import inspect
from pathlib import Path

from rich.console import Console

from casetable import ConsoleReporter, assert_custom, assert_equal, pair


def make_reporter(verbosity: int = 0) -> tuple[ConsoleReporter, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    return ConsoleReporter(console=console, verbosity=verbosity), buffer


def test_reporter_prints_failure_location_and_detail():
    reporter, buffer = make_reporter()

    here = inspect.currentframe().f_lineno
    failures = assert_equal([pair(1, 1), pair(1, 2, "off by one")], sink=reporter)

    output = buffer.getvalue()
    assert reporter.failures == failures
    assert f"{Path(__file__).name}:{here + 1}" in output
    assert "Equal" in output
    assert "FAILED" in output
    assert "(1) is not equal to (2)" in output
    assert "off by one" in output
    assert "left:" not in output


def test_reporter_verbose_shows_operands():
    reporter, buffer = make_reporter(verbosity=1)

    assert_equal([pair("abc", "abd")], sink=reporter)

    output = buffer.getvalue()
    assert "left:  'abc'" in output
    assert "right: 'abd'" in output


def test_reporter_marks_errors():
    reporter, buffer = make_reporter()

    def explode(p, location):
        raise ValueError("bad [input]")

    assert_custom([pair(1, 1)], explode, sink=reporter)

    output = buffer.getvalue()
    assert "ERROR" in output
    assert "custom check raised ValueError: bad [input]" in output


def test_summary_counts_failures_and_errors():
    reporter, buffer = make_reporter()

    assert_equal([pair(1, 2), pair(lambda: 1 / 0, 1), pair(3, 3)], sink=reporter)
    reporter.print_summary()

    assert buffer.getvalue().splitlines()[-1] == "1 failed, 1 error"


def test_summary_when_everything_passed():
    reporter, buffer = make_reporter()

    assert_equal([pair(1, 1)], sink=reporter)
    reporter.print_summary()

    assert buffer.getvalue().strip() == "all pairs passed"
