"""Demonstrates how to write table-driven tests with casetable.

* Each case is a `pair(left, right, message)` built inline in a list.
    - Wrap an expression in a `lambda` to defer it until the pair runs.
    - `xpair` skips a case without deleting it; its lambdas never run.
    - `fpair` focuses a case; while any focused pair exists, only focused pairs run.
* One comparator runs over the whole list and reports each failing case at its own line.
* Run with `pytest examples/casetable_example_pairs.py`.
"""

import math

from casetable import (
    CollectingSink,
    ConsoleReporter,
    assert_approx_equal,
    assert_boolean,
    assert_custom,
    assert_equal,
    pair,
    xpair,
)


def slugify(text: str) -> str:
    return "-".join(text.lower().split())


# =============================================================================
# Equality
# =============================================================================

def test_slugify():
    assert_equal([
        pair(lambda: slugify("Hello World"), "hello-world"),
        pair(lambda: slugify("  spaced   out "), "spaced-out"),
        pair(lambda: slugify(""), "", "empty input stays empty"),
        xpair(lambda: slugify("Ünïcode"), "unicode"),  # transliteration not supported yet
    ])


def test_trig_within_tolerance():
    assert_approx_equal([
        pair(lambda: math.sin(math.pi / 6), 0.5),
        pair(lambda: math.cos(0), 1),
    ], tolerance=1e-9)


# =============================================================================
# Truth values and custom checks
# =============================================================================

def test_is_palindrome():
    assert_boolean([
        pair(lambda: "racecar" == "racecar"[::-1], True),
        pair(lambda: "casetable" == "casetable"[::-1], False),
    ])


def test_same_word_count():
    def same_word_count(p, location):
        assert len(p.left.split()) == len(p.right.split()), f"{p.left!r} vs {p.right!r}"

    assert_custom([
        pair("one two", "uno dos"),
        pair("a b c", "x y z"),
    ], same_word_count)


# =============================================================================
# Reporting without raising
# =============================================================================

def test_collect_then_report():
    sink = CollectingSink()
    assert_equal([pair(lambda: slugify("A B"), "a-b")], sink=sink)
    assert not sink.failures

    reporter = ConsoleReporter()
    assert_equal([pair(lambda: slugify("A B"), "a-b")], sink=reporter)
    reporter.print_summary()
