"""Comparators that run one assertion over a whole list of pairs.

Every function filters the list with ``pairs_to_test`` before evaluating
anything, attributes each failure to the line its pair was built on, and
either raises ``PairAssertionError`` at the end (default) or hands failures
to ``sink``.

Examples
--------
>>> assert_equal([
...     pair(lambda: slugify("Hello World"), "hello-world"),
...     pair(lambda: slugify(""), ""),
...     xpair(lambda: slugify("Ünïcode"), "unicode"),  # not ready yet
... ])
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from casetable.comparisons import (
    ApproxEqual,
    Boolean,
    Equal,
    GreaterEqual,
    GreaterThan,
    LessEqual,
    LessThan,
    NotApproxEqual,
    NotEqual,
)
from casetable.config import CaseTableSettings
from casetable.engine import CustomCheck, run_custom, run_pairs
from casetable.pairs import TestPair
from casetable.results import PairFailure
from casetable.sinks import FailureSink


Pairs = Iterable[TestPair[Any, Any]]


def assert_equal(
    pairs: Pairs, *, sink: FailureSink | None = None, settings: CaseTableSettings | None = None
) -> list[PairFailure]:
    """Assert ``left == right`` for every selected pair."""
    return run_pairs(pairs, Equal(), sink=sink, settings=settings)


def assert_not_equal(
    pairs: Pairs, *, sink: FailureSink | None = None, settings: CaseTableSettings | None = None
) -> list[PairFailure]:
    """Assert ``left != right`` for every selected pair."""
    return run_pairs(pairs, NotEqual(), sink=sink, settings=settings)


def assert_approx_equal(
    pairs: Pairs,
    tolerance: float,
    *,
    sink: FailureSink | None = None,
    settings: CaseTableSettings | None = None,
) -> list[PairFailure]:
    """Assert ``abs(left - right) <= tolerance`` for every selected pair.

    Parameters
    ----------
    pairs
        Pairs of numeric operands.
    tolerance
        Largest difference still considered equal. Must be non-negative.

    Raises
    ------
    ValueError
        If ``tolerance`` is negative or NaN. Raised before any pair runs.
    """
    return run_pairs(pairs, ApproxEqual(tolerance), sink=sink, settings=settings)


def assert_not_approx_equal(
    pairs: Pairs,
    tolerance: float,
    *,
    sink: FailureSink | None = None,
    settings: CaseTableSettings | None = None,
) -> list[PairFailure]:
    """Assert ``abs(left - right) > tolerance`` for every selected pair."""
    return run_pairs(pairs, NotApproxEqual(tolerance), sink=sink, settings=settings)


def assert_less_than(
    pairs: Pairs, *, sink: FailureSink | None = None, settings: CaseTableSettings | None = None
) -> list[PairFailure]:
    return run_pairs(pairs, LessThan(), sink=sink, settings=settings)


def assert_greater_than(
    pairs: Pairs, *, sink: FailureSink | None = None, settings: CaseTableSettings | None = None
) -> list[PairFailure]:
    return run_pairs(pairs, GreaterThan(), sink=sink, settings=settings)


def assert_less_equal(
    pairs: Pairs, *, sink: FailureSink | None = None, settings: CaseTableSettings | None = None
) -> list[PairFailure]:
    return run_pairs(pairs, LessEqual(), sink=sink, settings=settings)


def assert_greater_equal(
    pairs: Pairs, *, sink: FailureSink | None = None, settings: CaseTableSettings | None = None
) -> list[PairFailure]:
    return run_pairs(pairs, GreaterEqual(), sink=sink, settings=settings)


def assert_boolean(
    pairs: Pairs, *, sink: FailureSink | None = None, settings: CaseTableSettings | None = None
) -> list[PairFailure]:
    """Assert that each left operand has the truth value given on the right."""
    return run_pairs(pairs, Boolean(), sink=sink, settings=settings)


def assert_custom(
    pairs: Pairs,
    check: CustomCheck,
    *,
    sink: FailureSink | None = None,
    settings: CaseTableSettings | None = None,
) -> list[PairFailure]:
    """Run ``check(pair, location)`` on every selected pair.

    A plain ``assert`` inside ``check`` is enough: the resulting failure is
    attributed to the pair's line, not to ``check``.

    Examples
    --------
    >>> def same_length(p, location):
    ...     assert len(p.left) == len(p.right), f"{p.left!r} vs {p.right!r}"
    >>> assert_custom([pair("One", "Two"), xpair("Three", "Four")], same_length)
    """
    return run_custom(pairs, check, sink=sink, settings=settings)
