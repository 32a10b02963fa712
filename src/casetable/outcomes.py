"""Failure and misconfiguration outcomes raised by casetable."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from casetable.pairs import SourceLocation
    from casetable.results import PairFailure


class PairAssertionError(AssertionError):
    """AssertionError carrying every failure from one comparator call.

    The message lists one ``file:line: detail`` line per failed pair, in the
    order the pairs were written.
    """

    def __init__(self, failures: list[PairFailure], comparison: str = "") -> None:
        self.failures = list(failures)
        self.comparison = comparison
        noun = "pair" if len(self.failures) == 1 else "pairs"
        header = f"{len(self.failures)} {noun} failed"
        if comparison:
            header += f" in {comparison}"
        lines = [header + ":"]
        lines.extend(f"  {failure}" for failure in self.failures)
        super().__init__("\n".join(lines))


class FocusedPairError(AssertionError):
    """Focused pairs were found while focusing is forbidden."""

    def __init__(self, locations: list[SourceLocation]) -> None:
        self.locations = list(locations)
        where = ", ".join(str(location) for location in self.locations)
        super().__init__(
            f"focused pairs are forbidden (forbid_focused is enabled): {where}"
        )


class LocationUnavailableError(RuntimeError):
    """The caller's source location could not be captured."""

    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        msg = "cannot capture the call site; pass file= and line= explicitly"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class FocusedPairWarning(UserWarning):
    """A comparator ran with focus active, so non-focused pairs were skipped."""
