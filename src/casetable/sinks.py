"""Destinations for failures reported by comparator runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from casetable.results import PairFailure


class FailureSink(Protocol):
    """Callable protocol for anything that receives failures as they happen.

    Failures arrive in the order the pairs were written. A sink that raises
    stops the run at that pair.
    """

    def __call__(self, failure: PairFailure) -> None: ...


@dataclass
class CollectingSink:
    """Sink that keeps every failure it receives."""

    failures: list[PairFailure] = field(default_factory=list)

    def __call__(self, failure: PairFailure) -> None:
        self.failures.append(failure)

    def __len__(self) -> int:
        return len(self.failures)

    def clear(self) -> None:
        self.failures.clear()
