"""Rule and issue models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning", "info"]

SEVERITIES: tuple[Severity, ...] = ("error", "warning", "info")


def severity_rank(severity: str) -> int:
    """Return the ordinal of a severity; lower is more severe."""
    for index, known in enumerate(SEVERITIES):
        if known == severity:
            return index
    raise ValueError(f"Unknown severity: {severity}")


@dataclass(frozen=True, slots=True)
class Rule:
    """A line pattern plus the metadata reported when it matches.

    ``languages`` is ``None`` for rules that apply to every file, otherwise the
    set of lower-cased file extensions the rule is limited to.
    """

    rule_id: str
    pattern: str
    message: str
    severity: Severity
    languages: frozenset[str] | None = None
    fixable: bool = False

    @property
    def is_universal(self) -> bool:
        return self.languages is None

    def applies_to(self, language: str | None) -> bool:
        if self.is_universal:
            return True
        return language is not None and language in self.languages


@dataclass(frozen=True, slots=True)
class Issue:
    """A single rule match at a source location."""

    source_id: str
    line: int
    column: int
    message: str
    severity: Severity
    rule_id: str
    fixable: bool = False
