"""Comparisons applied to every selected pair of a list."""

import math
from abc import ABC, abstractmethod
from typing import Any


class Comparison(ABC):
    """Base class for a comparison between a left and a right operand.

    Attributes
    ----------
    name : str
        Identifier used in failure records; defaults to the subclass name.

    Notes
    -----
    Subclasses implement ``passes`` and ``describe``. ``describe`` receives
    the operands' reprs, already truncated by the caller, and explains a
    mismatch.
    """

    name: str

    def __init_subclass__(cls, **kwargs):
        """Auto-generate name from class name if not provided."""
        super().__init_subclass__(**kwargs)
        if "name" not in cls.__dict__:
            cls.name = cls.__name__

    @abstractmethod
    def passes(self, left: Any, right: Any) -> bool:
        """Return True when the pair satisfies the comparison."""

    @abstractmethod
    def describe(self, left_repr: str, right_repr: str) -> str:
        """Explain why the pair did not satisfy the comparison."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Equal(Comparison):
    def passes(self, left: Any, right: Any) -> bool:
        return bool(left == right)

    def describe(self, left_repr: str, right_repr: str) -> str:
        return f"({left_repr}) is not equal to ({right_repr})"


class NotEqual(Comparison):
    def passes(self, left: Any, right: Any) -> bool:
        return bool(left != right)

    def describe(self, left_repr: str, right_repr: str) -> str:
        return f"({left_repr}) is equal to ({right_repr})"


class _WithTolerance(Comparison):
    """Shared validation for comparisons that accept a numeric tolerance."""

    def __init__(self, tolerance: float) -> None:
        if isinstance(tolerance, float) and math.isnan(tolerance):
            raise ValueError("tolerance must not be NaN")
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance!r}")
        self.tolerance = tolerance

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tolerance={self.tolerance!r})"


class ApproxEqual(_WithTolerance):
    """Equal when the operands differ by at most ``tolerance``."""

    def passes(self, left: Any, right: Any) -> bool:
        return abs(left - right) <= self.tolerance

    def describe(self, left_repr: str, right_repr: str) -> str:
        return f"({left_repr}) is not equal to ({right_repr}) +/- ({self.tolerance!r})"


class NotApproxEqual(_WithTolerance):
    """Not equal when the operands differ by more than ``tolerance``."""

    def passes(self, left: Any, right: Any) -> bool:
        return abs(left - right) > self.tolerance

    def describe(self, left_repr: str, right_repr: str) -> str:
        return f"({left_repr}) is not farther than ({self.tolerance!r}) from ({right_repr})"


class LessThan(Comparison):
    def passes(self, left: Any, right: Any) -> bool:
        return bool(left < right)

    def describe(self, left_repr: str, right_repr: str) -> str:
        return f"({left_repr}) is not less than ({right_repr})"


class GreaterThan(Comparison):
    def passes(self, left: Any, right: Any) -> bool:
        return bool(left > right)

    def describe(self, left_repr: str, right_repr: str) -> str:
        return f"({left_repr}) is not greater than ({right_repr})"


class LessEqual(Comparison):
    def passes(self, left: Any, right: Any) -> bool:
        return bool(left <= right)

    def describe(self, left_repr: str, right_repr: str) -> str:
        return f"({left_repr}) is greater than ({right_repr})"


class GreaterEqual(Comparison):
    def passes(self, left: Any, right: Any) -> bool:
        return bool(left >= right)

    def describe(self, left_repr: str, right_repr: str) -> str:
        return f"({left_repr}) is less than ({right_repr})"


class Boolean(Comparison):
    """The right operand is the expected truth value of the left operand."""

    def passes(self, left: Any, right: Any) -> bool:
        return bool(left) is bool(right)

    def describe(self, left_repr: str, right_repr: str) -> str:
        return f"({left_repr}) does not have truth value ({right_repr})"
