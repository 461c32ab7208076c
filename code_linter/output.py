"""Issue aggregation and report rendering."""

from __future__ import annotations

import json
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click

from code_linter.rules import SEVERITIES, Issue, Severity, severity_rank

RULE_WIDTH = 60
PR_PREVIEW_LIMIT = 3

_ICONS: dict[str, str] = {"error": "❌", "warning": "⚠️", "info": "ℹ️"}
_COLORS: dict[str, str] = {"error": "red", "warning": "yellow", "info": "blue"}
_LABELS: dict[str, str] = {"error": "Errors", "warning": "Warnings", "info": "Info"}

_ISSUE_KEYS = {"file", "line", "column", "severity", "issue", "rule_id", "fixable"}


@dataclass(frozen=True, slots=True)
class Summary:
    """Issue counts derived from an aggregator."""

    counts: dict[str, int]
    total: int
    units_scanned: int

    @property
    def errors(self) -> int:
        return self.counts["error"]

    @property
    def warnings(self) -> int:
        return self.counts["warning"]

    @property
    def infos(self) -> int:
        return self.counts["info"]


class Aggregator:
    """Append-only collection of issues across all scanned units."""

    def __init__(self) -> None:
        self._issues: list[Issue] = []
        self._units: list[str] = []
        self._lock = threading.Lock()

    def add(self, issues: Iterable[Issue], *, source_id: str | None = None) -> None:
        """Record issues; a ``source_id`` also counts one scanned unit."""
        batch = list(issues)
        with self._lock:
            if source_id is not None:
                self._units.append(source_id)
            self._issues.extend(batch)

    @property
    def issues(self) -> list[Issue]:
        with self._lock:
            return list(self._issues)

    @property
    def units_scanned(self) -> int:
        with self._lock:
            return len(self._units)

    def summary(self) -> Summary:
        issues = self.issues
        counts = {severity: 0 for severity in SEVERITIES}
        for issue in issues:
            counts[issue.severity] += 1
        return Summary(counts=counts, total=len(issues), units_scanned=self.units_scanned)

    @property
    def has_errors(self) -> bool:
        return self.summary().errors > 0

    @property
    def exit_code(self) -> int:
        """Return 1 when any error-severity issue was found, else 0."""
        return 1 if self.has_errors else 0

    def fixable_count(self) -> int:
        return sum(1 for issue in self.issues if issue.fixable)

    def render(self) -> str:
        return render_human(self.issues, self.summary())

    def render_pull_request(self) -> str:
        return render_pull_request(self.issues)

    def serialize(self) -> bytes:
        return serialize_issues(self.issues)

    def write(self, path: Path) -> Path:
        """Write serialized issues to ``path`` and return the resolved path."""
        out_path = path.resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(self.serialize())
        return out_path


def render_human(issues: list[Issue], summary: Summary) -> str:
    """Render the lint report with a banner, one entry per issue and totals."""
    lines: list[str] = [
        click.style("🔍 Code Quality Linter", bold=True),
        "",
        f"Linted {summary.units_scanned} files",
        f"Found {summary.total} issues",
        "",
    ]
    if not issues:
        lines.append(click.style("✅ No issues found!", fg="green"))
        return "\n".join(lines)

    lines.extend(_section("LINT RESULTS"))
    for issue in issues:
        header = f"{_ICONS[issue.severity]} [{issue.severity}] {issue.source_id}:{issue.line}"
        lines.append(click.style(header, fg=_COLORS[issue.severity]))
        lines.append(f"   {issue.message}")
        lines.append("")

    lines.extend(_section("SUMMARY"))
    for severity in SEVERITIES:
        lines.append(f"{_LABELS[severity]}: {summary.counts[severity]}")
    return "\n".join(lines)


def render_pull_request(issues: list[Issue], *, limit: int = PR_PREVIEW_LIMIT) -> str:
    """Render a per-file preview of pull-request issues."""
    by_file: dict[str, list[Issue]] = {}
    for issue in issues:
        by_file.setdefault(issue.source_id, []).append(issue)

    lines: list[str] = [click.style("🔍 Linting PR...", bold=True)]
    for source_id, file_issues in by_file.items():
        lines.append("")
        lines.append(f"📄 {source_id}")
        for issue in file_issues[:limit]:
            lines.append(
                "   "
                + click.style(f"{issue.severity}:", fg=_COLORS[issue.severity])
                + f" {issue.message} (line {issue.line})"
            )
        hidden = len(file_issues) - limit
        if hidden > 0:
            lines.append(f"   ... {hidden} more")
    lines.append("")
    lines.append(click.style(f"✅ Found {len(issues)} lint issues", fg="green"))
    return "\n".join(lines)


def serialize_issues(issues: list[Issue]) -> bytes:
    """Encode issues as a JSON array, one object per issue, in order."""
    payload = [_serialize_issue(issue) for issue in issues]
    return (json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n").encode(
        "utf-8"
    )


def deserialize_issues(data: bytes) -> list[Issue]:
    """Decode the output of ``serialize_issues``."""
    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError(f"Invalid issue payload: {exc}") from exc
    if not isinstance(payload, list):
        raise ValueError("Issue payload must be a JSON array")
    return [_deserialize_issue(item) for item in payload]


def _serialize_issue(issue: Issue) -> dict[str, Any]:
    return {
        "file": issue.source_id,
        "line": issue.line,
        "column": issue.column,
        "severity": issue.severity,
        "issue": issue.message,
        "rule_id": issue.rule_id,
        "fixable": issue.fixable,
    }


def _deserialize_issue(item: Any) -> Issue:
    if not isinstance(item, dict) or not _ISSUE_KEYS <= set(item):
        raise ValueError(f"Issue entry must be an object with keys: {sorted(_ISSUE_KEYS)}")
    line, column = item["line"], item["column"]
    if not isinstance(line, int) or not isinstance(column, int):
        raise ValueError("Issue line and column must be integers")
    return Issue(
        source_id=str(item["file"]),
        line=line,
        column=column,
        message=str(item["issue"]),
        severity=_as_severity(item["severity"]),
        rule_id=str(item["rule_id"]),
        fixable=bool(item["fixable"]),
    )


def _as_severity(value: Any) -> Severity:
    try:
        return SEVERITIES[severity_rank(value)]
    except ValueError as exc:
        raise ValueError(f"Unknown severity in issue payload: {value}") from exc


def _section(title: str) -> list[str]:
    bar = "═" * RULE_WIDTH
    return [bar, click.style(title, bold=True), bar]
