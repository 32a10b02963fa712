"""Pairs of deferred operands and the rule that selects which of them run."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict

from casetable.outcomes import LocationUnavailableError


L = TypeVar("L")
R = TypeVar("R")


class Affinity(Enum):
    """Whether a pair is excluded from, or focused in, a run.

    A pair without an affinity (``None``) is a normal pair.
    """

    EXCLUDED = "excluded"
    FOCUSED = "focused"


class SourceLocation(BaseModel):
    """File and line on which a pair was constructed."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


class HasAffinity(Protocol):
    """Anything that can ask to be focused or skipped."""

    @property
    def affinity(self) -> Affinity | None: ...


def _as_thunk(value: Any) -> Callable[[], Any]:
    if callable(value):
        return value
    return lambda: value


@dataclass(frozen=True)
class TestPair(Generic[L, R]):
    """A left/right pair whose operands are only computed when read.

    Attributes
    ----------
    produce_left : Callable[[], L]
        Zero-argument producer for the left operand (usually the observed value).
    produce_right : Callable[[], R]
        Zero-argument producer for the right operand (usually the expected value).
    produce_message : Callable[[], str]
        Zero-argument producer for the failure annotation.
    affinity : Affinity or None
        ``EXCLUDED``, ``FOCUSED``, or ``None`` for a normal pair.
    location : SourceLocation
        Where the pair was constructed. Failures are reported here.

    Notes
    -----
    ``left``, ``right`` and ``message`` call their producer on first read and
    memoize the value. A producer that raises is not memoized.
    """

    __test__ = False

    produce_left: Callable[[], L] = field(repr=False)
    produce_right: Callable[[], R] = field(repr=False)
    produce_message: Callable[[], str] = field(repr=False)
    affinity: Affinity | None
    location: SourceLocation

    @cached_property
    def left(self) -> L:
        return self.produce_left()

    @cached_property
    def right(self) -> R:
        return self.produce_right()

    @cached_property
    def message(self) -> str:
        return str(self.produce_message())

    @property
    def file(self) -> str:
        return self.location.file

    @property
    def line(self) -> int:
        return self.location.line


def _capture_location(file: str | None, line: int | None, stacklevel: int = 2) -> SourceLocation:
    """Resolve the location of a pair constructor's caller.

    Parameters
    ----------
    file, line
        Explicit location. Both or neither must be given.
    stacklevel
        Number of frames between this function and the caller to record.

    Raises
    ------
    ValueError
        If only one of ``file`` and ``line`` is given.
    LocationUnavailableError
        If no explicit location is given and the interpreter exposes no frames.
    """
    if file is not None and line is not None:
        return SourceLocation(file=str(file), line=line)
    if file is not None or line is not None:
        raise ValueError("file and line must be passed together")

    frame = inspect.currentframe()
    if frame is None:
        raise LocationUnavailableError("interpreter has no stack frame support")
    try:
        for _ in range(stacklevel):
            frame = frame.f_back
            if frame is None:
                raise LocationUnavailableError("call stack is shallower than expected")
        return SourceLocation(file=frame.f_code.co_filename, line=frame.f_lineno)
    finally:
        del frame


def pair(
    left: L | Callable[[], L],
    right: R | Callable[[], R],
    message: str | Callable[[], str] = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> TestPair[L, R]:
    """Create a pair that runs unless focused pairs sit in the same list.

    ``left``, ``right`` and ``message`` may be zero-argument callables, which
    are not called here. Any other value is used as is. To compare a callable
    itself, wrap it: ``pair(lambda: fn, expected_fn)``.

    Examples
    --------
    >>> assert_equal([
    ...     pair(lambda: square(3), 9),
    ...     pair(lambda: square(-2), 4, "negative input"),
    ... ])
    """
    return TestPair(
        produce_left=_as_thunk(left),
        produce_right=_as_thunk(right),
        produce_message=_as_thunk(message),
        affinity=None,
        location=_capture_location(file, line),
    )


def xpair(
    left: L | Callable[[], L],
    right: R | Callable[[], R],
    message: str | Callable[[], str] = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> TestPair[L, R]:
    """Create a pair that is skipped. Its producers are never called.

    As with ``pair``, any callable is a producer. Wrap a callable in a lambda
    to compare it as a value.
    """
    return TestPair(
        produce_left=_as_thunk(left),
        produce_right=_as_thunk(right),
        produce_message=_as_thunk(message),
        affinity=Affinity.EXCLUDED,
        location=_capture_location(file, line),
    )


def fpair(
    left: L | Callable[[], L],
    right: R | Callable[[], R],
    message: str | Callable[[], str] = "",
    *,
    file: str | None = None,
    line: int | None = None,
) -> TestPair[L, R]:
    """Create a focused pair.

    When a list holds any focused pair, only the focused pairs run. Several
    focused pairs in one list all run.

    As with ``pair``, any callable is a producer. Wrap a callable in a lambda
    to compare it as a value.
    """
    return TestPair(
        produce_left=_as_thunk(left),
        produce_right=_as_thunk(right),
        produce_message=_as_thunk(message),
        affinity=Affinity.FOCUSED,
        location=_capture_location(file, line),
    )


AffinityT = TypeVar("AffinityT", bound=HasAffinity)


def pairs_to_test(pairs: Iterable[AffinityT]) -> list[AffinityT]:
    """Return the pairs a run should evaluate, in their original order.

    If any pair is focused, only focused pairs are returned. Otherwise every
    pair that is not excluded is returned. No operand is evaluated.
    """
    candidates = list(pairs)
    if any(candidate.affinity is Affinity.FOCUSED for candidate in candidates):
        return [candidate for candidate in candidates if candidate.affinity is Affinity.FOCUSED]
    return [candidate for candidate in candidates if candidate.affinity is not Affinity.EXCLUDED]
