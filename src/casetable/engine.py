"""Select pairs, then evaluate the survivors and attribute their failures."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable, Iterable
from typing import Any

from casetable.comparisons import Comparison
from casetable.config import CaseTableSettings, get_settings
from casetable.outcomes import FocusedPairError, FocusedPairWarning, PairAssertionError
from casetable.pairs import Affinity, SourceLocation, TestPair, pairs_to_test
from casetable.results import FailureKind, PairFailure
from casetable.sinks import FailureSink


logger = logging.getLogger(__name__)

CustomCheck = Callable[[TestPair[Any, Any], SourceLocation], object]
_PairEvaluator = Callable[[TestPair[Any, Any]], PairFailure | None]


def _truncate(text: str, max_len: int) -> str:
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def _safe_repr(value: Any, max_len: int) -> str:
    try:
        text = repr(value)
    except Exception as exc:
        text = f"<repr raised {type(exc).__name__}>"
    return _truncate(text, max_len)


def _describe_error(exc: BaseException) -> str:
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__


def _force_message(test_pair: TestPair[Any, Any]) -> str:
    try:
        return test_pair.message
    except Exception as exc:
        return f"<message raised {_describe_error(exc)}>"


def _error(
    test_pair: TestPair[Any, Any],
    comparison: str,
    detail: str,
    left_repr: str | None = None,
    right_repr: str | None = None,
) -> PairFailure:
    return PairFailure(
        location=test_pair.location,
        comparison=comparison,
        kind=FailureKind.ERROR,
        detail=detail,
        message=_force_message(test_pair),
        left_repr=left_repr,
        right_repr=right_repr,
    )


def select_pairs(
    pairs: Iterable[TestPair[Any, Any]],
    settings: CaseTableSettings,
) -> list[TestPair[Any, Any]]:
    """Apply ``pairs_to_test`` and the focus guard; evaluates nothing.

    Raises
    ------
    FocusedPairError
        If ``settings.forbid_focused`` is set and any pair is focused.
    """
    candidates = list(pairs)
    selected = pairs_to_test(candidates)
    focused = [candidate for candidate in candidates if candidate.affinity is Affinity.FOCUSED]

    if focused:
        locations = [candidate.location for candidate in focused]
        if settings.forbid_focused:
            raise FocusedPairError(locations)
        if settings.warn_focused:
            skipped = len(candidates) - len(selected)
            first = locations[0]
            warnings.warn_explicit(
                FocusedPairWarning(
                    f"{len(focused)} focused pair(s) active, {skipped} other pair(s) skipped"
                ),
                FocusedPairWarning,
                first.file,
                first.line,
            )

    logger.debug(
        "Selected %d of %d pairs (focused=%s)", len(selected), len(candidates), bool(focused)
    )
    return selected


def _run(
    pairs: Iterable[TestPair[Any, Any]],
    name: str,
    evaluate: _PairEvaluator,
    sink: FailureSink | None,
    settings: CaseTableSettings,
) -> list[PairFailure]:
    selected = select_pairs(pairs, settings)

    failures: list[PairFailure] = []
    for test_pair in selected:
        failure = evaluate(test_pair)
        if failure is None:
            continue
        logger.debug("%s failed at %s", name, failure.location)
        failures.append(failure)
        if sink is not None:
            sink(failure)

    if sink is None and failures:
        raise PairAssertionError(failures, name)
    return failures


def run_pairs(
    pairs: Iterable[TestPair[Any, Any]],
    comparison: Comparison,
    *,
    sink: FailureSink | None = None,
    settings: CaseTableSettings | None = None,
) -> list[PairFailure]:
    """Apply ``comparison`` to every selected pair.

    Parameters
    ----------
    pairs
        Pairs in the order they were written.
    comparison
        Comparison applied to each selected pair.
    sink
        Receives each failure as it happens. When omitted, a
        ``PairAssertionError`` carrying all failures is raised once every
        selected pair has run.
    settings
        Overrides the settings loaded from the environment.

    Returns
    -------
    list of PairFailure
        Failures in pair order; empty when every selected pair passed.

    Notes
    -----
    Only selected pairs are evaluated: ``left`` first, then ``right``, then
    the comparison. ``message`` is read only for a failing pair. An
    ``Exception`` raised by an operand or by the comparison becomes an
    ``ERROR`` failure for that pair and the run continues.
    """
    settings = settings or get_settings()
    max_len = settings.max_repr_length

    def evaluate(test_pair: TestPair[Any, Any]) -> PairFailure | None:
        try:
            left = test_pair.left
        except Exception as exc:
            return _error(
                test_pair, comparison.name, f"evaluating left operand raised {_describe_error(exc)}"
            )

        try:
            right = test_pair.right
        except Exception as exc:
            return _error(
                test_pair,
                comparison.name,
                f"evaluating right operand raised {_describe_error(exc)}",
                left_repr=_safe_repr(left, max_len),
            )

        try:
            passed = comparison.passes(left, right)
        except Exception as exc:
            return _error(
                test_pair,
                comparison.name,
                f"comparison raised {_describe_error(exc)}",
                left_repr=_safe_repr(left, max_len),
                right_repr=_safe_repr(right, max_len),
            )
        if passed:
            return None

        # reprs only for failures
        left_repr = _safe_repr(left, max_len)
        right_repr = _safe_repr(right, max_len)
        return PairFailure(
            location=test_pair.location,
            comparison=comparison.name,
            kind=FailureKind.FAILED,
            detail=comparison.describe(left_repr, right_repr),
            message=_force_message(test_pair),
            left_repr=left_repr,
            right_repr=right_repr,
        )

    return _run(pairs, comparison.name, evaluate, sink, settings)


def run_custom(
    pairs: Iterable[TestPair[Any, Any]],
    check: CustomCheck,
    *,
    sink: FailureSink | None = None,
    settings: CaseTableSettings | None = None,
) -> list[PairFailure]:
    """Hand every selected pair and its location to ``check``.

    ``check`` reads ``pair.left`` / ``pair.right`` itself. Raising
    ``AssertionError`` records a ``FAILED`` failure; any other ``Exception``
    records an ``ERROR`` failure. Both are attributed to the pair's location.
    """
    settings = settings or get_settings()
    name = getattr(check, "__name__", type(check).__name__)

    def evaluate(test_pair: TestPair[Any, Any]) -> PairFailure | None:
        try:
            check(test_pair, test_pair.location)
        except AssertionError as exc:
            return PairFailure(
                location=test_pair.location,
                comparison=name,
                kind=FailureKind.FAILED,
                detail=str(exc) or "custom check failed",
                message=_force_message(test_pair),
            )
        except Exception as exc:
            return _error(test_pair, name, f"custom check raised {_describe_error(exc)}")
        return None

    return _run(pairs, name, evaluate, sink, settings)
