"""Reporters for pair failures."""

from casetable.reports.console import ConsoleReporter

__all__ = ["ConsoleReporter"]
