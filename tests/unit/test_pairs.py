"""Tests for pair construction, laziness and location capture."""

import dataclasses
import inspect
from pathlib import Path
from types import SimpleNamespace

import pytest

from casetable.outcomes import LocationUnavailableError
from casetable.pairs import Affinity, SourceLocation, TestPair, fpair, pair, xpair


CONSTRUCTORS = [
    pytest.param(pair, None, id="pair"),
    pytest.param(xpair, Affinity.EXCLUDED, id="xpair"),
    pytest.param(fpair, Affinity.FOCUSED, id="fpair"),
]


@pytest.mark.parametrize("make, affinity", CONSTRUCTORS)
def test_constructor_stamps_affinity(make, affinity):
    p = make(1, 2)
    assert isinstance(p, TestPair)
    assert p.affinity is affinity


@pytest.mark.parametrize("make, affinity", CONSTRUCTORS)
def test_construction_does_not_call_producers(make, affinity):
    calls = []

    make(lambda: calls.append("left"), lambda: calls.append("right"), lambda: calls.append("msg"))

    assert calls == []


@pytest.mark.parametrize("make, affinity", CONSTRUCTORS)
def test_message_is_lazy_and_memoized(make, affinity):
    call_count = 0

    def make_message():
        nonlocal call_count
        call_count += 1
        return "the message"

    p = make(1, 2, make_message)
    assert call_count == 0
    assert p.message == "the message"
    assert call_count == 1
    assert p.message == "the message"
    assert call_count == 1


def test_message_defaults_to_empty_string():
    assert pair(1, 2).message == ""


def test_plain_message_is_kept():
    assert pair(1, 2, "two is not one").message == "two is not one"


def test_operands_are_memoized():
    calls = []

    def left():
        calls.append("left")
        return 3

    p = pair(left, 4)
    assert p.left == 3
    assert p.left == 3
    assert p.right == 4
    assert calls == ["left"]


def test_plain_values_are_used_as_is():
    p = pair("Hello", ["a", "b"])
    assert p.left == "Hello"
    assert p.right == ["a", "b"]


def test_wrapped_callable_is_compared_as_value():
    p = pair(lambda: len, lambda: len)
    assert p.left is len
    assert p.right is len


@pytest.mark.parametrize("make, affinity", CONSTRUCTORS)
def test_every_constructor_calls_bare_callables(make, affinity):
    p = make(list, lambda: list)
    assert p.left == []
    assert p.right is list


def test_bare_callable_is_a_producer():
    p = pair(list, tuple)
    assert p.left == []
    assert p.right == ()


def test_raising_producer_is_not_memoized():
    attempts = []

    def flaky():
        attempts.append(1)
        raise ZeroDivisionError("boom")

    p = pair(flaky, 1)
    with pytest.raises(ZeroDivisionError):
        _ = p.left
    with pytest.raises(ZeroDivisionError):
        _ = p.left
    assert len(attempts) == 2


def test_pair_is_immutable():
    p = pair(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.affinity = Affinity.FOCUSED  # type: ignore[misc]


class TestLocationCapture:
    def test_captures_call_site_line_and_file(self):
        here = inspect.currentframe().f_lineno
        p = pair(1, 2)

        assert p.line == here + 1
        assert Path(p.file).resolve() == Path(__file__).resolve()

    def test_captures_line_inside_multiline_list(self):
        here = inspect.currentframe().f_lineno
        pairs = [
            pair(1, 1),
            xpair(2, 2),
            fpair(3, 3),
        ]

        assert [p.line for p in pairs] == [here + 2, here + 3, here + 4]

    def test_explicit_location_overrides_capture(self):
        p = pair(1, 2, file="cases.py", line=42)
        assert p.location == SourceLocation(file="cases.py", line=42)
        assert str(p.location) == "cases.py:42"

    @pytest.mark.parametrize("kwargs", [{"file": "cases.py"}, {"line": 3}])
    def test_partial_location_is_rejected(self, kwargs):
        with pytest.raises(ValueError, match="together"):
            pair(1, 2, **kwargs)

    def test_missing_frame_support_is_a_configuration_error(self, monkeypatch):
        monkeypatch.setattr("casetable.pairs.inspect", SimpleNamespace(currentframe=lambda: None))
        with pytest.raises(LocationUnavailableError):
            pair(1, 2)

    def test_missing_frame_support_with_explicit_location(self, monkeypatch):
        monkeypatch.setattr("casetable.pairs.inspect", SimpleNamespace(currentframe=lambda: None))
        p = fpair(1, 2, file="cases.py", line=7)
        assert p.line == 7
