"""casetable - table-driven assertions with per-case failure attribution."""

from .assertions import (
    assert_approx_equal,
    assert_boolean,
    assert_custom,
    assert_equal,
    assert_greater_equal,
    assert_greater_than,
    assert_less_equal,
    assert_less_than,
    assert_not_approx_equal,
    assert_not_equal,
)
from .config import CaseTableSettings, get_settings
from .outcomes import FocusedPairError, FocusedPairWarning, LocationUnavailableError, PairAssertionError
from .pairs import Affinity, HasAffinity, SourceLocation, TestPair, fpair, pair, pairs_to_test, xpair
from .reports import ConsoleReporter
from .results import FailureKind, PairFailure
from .sinks import CollectingSink, FailureSink
from .version import __version__


__all__ = [
    # Pairs
    "Affinity",
    "HasAffinity",
    "SourceLocation",
    "TestPair",
    "pair",
    "xpair",
    "fpair",
    "pairs_to_test",
    # Comparators
    "assert_equal",
    "assert_not_equal",
    "assert_approx_equal",
    "assert_not_approx_equal",
    "assert_less_than",
    "assert_greater_than",
    "assert_less_equal",
    "assert_greater_equal",
    "assert_boolean",
    "assert_custom",
    # Results and outcomes
    "FailureKind",
    "PairFailure",
    "PairAssertionError",
    "FocusedPairError",
    "FocusedPairWarning",
    "LocationUnavailableError",
    # Reporting
    "FailureSink",
    "CollectingSink",
    "ConsoleReporter",
    # Configuration
    "CaseTableSettings",
    "get_settings",
]
