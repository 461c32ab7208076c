"""Tests for lint orchestration."""

from __future__ import annotations

import pytest

from code_linter.linting import lint_units
from code_linter.matcher import Matcher
from code_linter.output import Aggregator
from code_linter.rules import default_rule_set
from code_linter.traversal import SourceUnit


def test_parallel_scan_matches_sequential_order() -> None:
    units = [
        SourceUnit(source_id=f"file{index}.js", text=f"var v{index} = 1;\n\tx == y\n")
        for index in range(20)
    ]
    matcher = Matcher(default_rule_set())

    sequential = lint_units(units, matcher)
    parallel = lint_units(units, matcher, jobs=4)

    assert parallel.issues == sequential.issues
    assert parallel.units_scanned == sequential.units_scanned == 20


def test_units_are_added_to_given_aggregator() -> None:
    aggregator = Aggregator()
    units = [
        SourceUnit(source_id="a.py", text="print(1)\n"),
        SourceUnit(source_id="b.txt", text=""),
    ]

    result = lint_units(units, Matcher(default_rule_set()), aggregator)

    assert result is aggregator
    assert aggregator.units_scanned == 2
    assert [issue.rule_id for issue in aggregator.issues] == ["print-call"]


def test_no_units_means_no_issues() -> None:
    result = lint_units([], Matcher(default_rule_set()))

    assert result.units_scanned == 0
    assert result.exit_code == 0


def test_jobs_must_be_positive() -> None:
    with pytest.raises(ValueError, match="jobs must be >= 1"):
        lint_units([], Matcher(default_rule_set()), jobs=0)
