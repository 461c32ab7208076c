"""Tests for issue aggregation and report rendering."""

from __future__ import annotations

import json
from pathlib import Path

import click
import pytest

from code_linter.output import (
    Aggregator,
    deserialize_issues,
    render_pull_request,
    serialize_issues,
)
from code_linter.rules import Issue


def test_summary_counts_each_severity() -> None:
    aggregator = Aggregator()
    aggregator.add([_issue("error"), _issue("warning"), _issue("warning")], source_id="a.py")
    aggregator.add([_issue("info")], source_id="b.py")
    aggregator.add([], source_id="c.py")

    summary = aggregator.summary()
    assert summary.counts == {"error": 1, "warning": 2, "info": 1}
    assert (summary.errors, summary.warnings, summary.infos) == (1, 2, 1)
    assert summary.total == 4
    assert summary.units_scanned == 3


def test_add_without_source_id_does_not_count_a_unit() -> None:
    aggregator = Aggregator()
    aggregator.add([_issue("info")])

    assert aggregator.units_scanned == 0
    assert aggregator.summary().total == 1


def test_exit_code_depends_only_on_errors() -> None:
    aggregator = Aggregator()
    aggregator.add([_issue("warning"), _issue("info")], source_id="a.py")
    assert aggregator.has_errors is False
    assert aggregator.exit_code == 0

    aggregator.add([_issue("error")], source_id="b.py")
    assert aggregator.has_errors is True
    assert aggregator.exit_code == 1


def test_render_lists_issues_in_append_order_with_summary() -> None:
    aggregator = Aggregator()
    aggregator.add(
        [
            _issue("warning", source_id="src/app.js", line=3, message="Use === instead of =="),
            _issue("error", source_id="src/app.js", line=9, message="Broken"),
        ],
        source_id="src/app.js",
    )

    output = click.unstyle(aggregator.render())

    assert "Linted 1 files" in output
    assert "Found 2 issues" in output
    assert "LINT RESULTS" in output
    assert output.index("[warning] src/app.js:3") < output.index("[error] src/app.js:9")
    assert "\n   Use === instead of ==\n" in output
    assert "Errors: 1" in output
    assert "Warnings: 1" in output
    assert "Info: 0" in output


def test_render_without_issues_says_so() -> None:
    aggregator = Aggregator()
    aggregator.add([], source_id="clean.py")

    output = click.unstyle(aggregator.render())

    assert "Linted 1 files" in output
    assert "No issues found!" in output
    assert "SUMMARY" not in output


def test_render_pull_request_previews_three_issues_per_file() -> None:
    issues = [_issue("info", source_id="a.js", line=n, message=f"m{n}") for n in range(1, 5)]
    issues.append(_issue("warning", source_id="b.py", line=2, message="other"))

    output = click.unstyle(render_pull_request(issues))

    assert "📄 a.js" in output
    assert "info: m3 (line 3)" in output
    assert "m4" not in output
    assert "... 1 more" in output
    assert "warning: other (line 2)" in output
    assert "Found 5 lint issues" in output


def test_serialized_issues_round_trip_in_order() -> None:
    issues = [
        _issue("error", source_id="src/ü.py", line=10, column=4, message="naïve ✓"),
        _issue("info", source_id="b.js", line=1, column=1, fixable=True),
        _issue("warning", source_id="b.js", line=1, column=7),
    ]

    assert deserialize_issues(serialize_issues(issues)) == issues


def test_serialized_payload_is_a_json_array_of_issue_objects() -> None:
    payload = json.loads(serialize_issues([_issue("warning", line=2, column=5)]))

    assert payload == [
        {
            "column": 5,
            "file": "x.py",
            "fixable": False,
            "issue": "message",
            "line": 2,
            "rule_id": "rule",
            "severity": "warning",
        }
    ]


@pytest.mark.parametrize(
    "data",
    [
        b"not json",
        b'{"file": "x"}',
        b'[{"file": "x"}]',
        b'[{"file": "x", "line": 1, "column": 1, "severity": "fatal", '
        b'"issue": "m", "rule_id": "r", "fixable": false}]',
        b'[{"file": "x", "line": "1", "column": 1, "severity": "info", '
        b'"issue": "m", "rule_id": "r", "fixable": false}]',
    ],
)
def test_deserialize_rejects_malformed_payloads(data: bytes) -> None:
    with pytest.raises(ValueError):
        deserialize_issues(data)


def test_write_creates_parent_directories(tmp_path: Path) -> None:
    aggregator = Aggregator()
    aggregator.add([_issue("info")], source_id="x.py")

    saved = aggregator.write(tmp_path / "reports" / "lint.json")

    assert saved.exists()
    assert deserialize_issues(saved.read_bytes()) == aggregator.issues


def test_fixable_count() -> None:
    aggregator = Aggregator()
    aggregator.add([_issue("info", fixable=True), _issue("warning"), _issue("info", fixable=True)])

    assert aggregator.fixable_count() == 2


def _issue(
    severity: str,
    *,
    source_id: str = "x.py",
    line: int = 1,
    column: int = 1,
    message: str = "message",
    fixable: bool = False,
) -> Issue:
    return Issue(
        source_id=source_id,
        line=line,
        column=column,
        message=message,
        severity=severity,
        rule_id="rule",
        fixable=fixable,
    )
