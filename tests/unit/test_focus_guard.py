"""Tests for the focus warning, forbid_focused and environment settings."""

import inspect
import warnings
from pathlib import Path

import pytest

from casetable import (
    CaseTableSettings,
    FocusedPairError,
    FocusedPairWarning,
    assert_equal,
    fpair,
    get_settings,
    pair,
    xpair,
)


def test_settings_defaults():
    settings = CaseTableSettings()
    assert settings.forbid_focused is False
    assert settings.warn_focused is True
    assert settings.max_repr_length == 120


def test_settings_load_from_environment(monkeypatch):
    monkeypatch.setenv("CASETABLE_FORBID_FOCUSED", "1")
    monkeypatch.setenv("CASETABLE_MAX_REPR_LENGTH", "40")

    settings = get_settings()

    assert settings.forbid_focused is True
    assert settings.max_repr_length == 40
    assert get_settings() is settings


def test_focus_warning_points_at_first_focused_pair():
    here = inspect.currentframe().f_lineno
    with pytest.warns(FocusedPairWarning) as record:
        assert_equal([
            pair(1, 1),
            fpair(2, 2),
            fpair(3, 3),
            xpair(4, 5),
        ])

    assert len(record) == 1
    warning = record[0]
    assert warning.lineno == here + 4
    assert Path(warning.filename).resolve() == Path(__file__).resolve()
    assert "2 focused pair(s) active, 2 other pair(s) skipped" in str(warning.message)


def test_no_warning_without_focus():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert_equal([pair(1, 1), xpair(2, 3)])


def test_warning_can_be_disabled():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert_equal([fpair(1, 1), pair(2, 3)], settings=CaseTableSettings(warn_focused=False))


def test_forbid_focused_raises_before_evaluation(monkeypatch):
    monkeypatch.setenv("CASETABLE_FORBID_FOCUSED", "true")
    calls = []

    focused = fpair(lambda: calls.append("left"), None)
    with pytest.raises(FocusedPairError) as excinfo:
        assert_equal([pair(lambda: calls.append("other"), None), focused])

    assert calls == []
    assert excinfo.value.locations == [focused.location]
    assert str(focused.location) in str(excinfo.value)


def test_forbid_focused_ignores_lists_without_focus():
    settings = CaseTableSettings(forbid_focused=True)
    assert assert_equal([pair(1, 1), xpair(1, 2)], settings=settings) == []
