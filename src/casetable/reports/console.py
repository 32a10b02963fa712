"""Console reporter for pair failures using Rich."""

from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from casetable.results import FailureKind, PairFailure


_KIND_CONFIG: dict[FailureKind, tuple[str, str, str]] = {
    FailureKind.FAILED: ("✗", "red", "FAILED"),
    FailureKind.ERROR: ("!", "yellow", "ERROR"),
}


class ConsoleReporter:
    """Failure sink that prints each failed pair as it is reported."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console(file=sys.__stdout__)
        self.verbosity = verbosity
        self.failures: list[PairFailure] = []

    def _safe_relative_path(self, path: Path) -> Path:
        try:
            return path.relative_to(Path.cwd())
        except ValueError:
            return path

    def _format_location(self, failure: PairFailure) -> str:
        relative = self._safe_relative_path(Path(failure.file))
        return f"{relative.as_posix()}:{failure.line}"

    def __call__(self, failure: PairFailure) -> None:
        self.failures.append(failure)
        symbol, color, label = _KIND_CONFIG[failure.kind]
        location = escape(self._format_location(failure))
        self.console.print(
            f"[{color}]{symbol}[/{color}] {location} "
            f"[dim]{escape(failure.comparison)}[/dim] [{color}]{label}[/{color}]"
        )
        self.console.print(f"    {escape(failure.detail)}")
        if failure.message:
            self.console.print(f"    [italic]{escape(failure.message)}[/italic]")
        if self.verbosity > 0 and failure.left_repr is not None:
            self.console.print(f"    [dim]left:  {escape(failure.left_repr)}[/dim]")
            if failure.right_repr is not None:
                self.console.print(f"    [dim]right: {escape(failure.right_repr)}[/dim]")

    def print_summary(self) -> None:
        failed = sum(1 for f in self.failures if f.kind is FailureKind.FAILED)
        errors = sum(1 for f in self.failures if f.kind is FailureKind.ERROR)
        if not self.failures:
            self.console.print("[green]all pairs passed[/green]")
            return
        parts = []
        if failed:
            parts.append(f"[red]{failed} failed[/red]")
        if errors:
            parts.append(f"[yellow]{errors} error[/yellow]")
        self.console.print(", ".join(parts))
