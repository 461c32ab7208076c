"""Rules package."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from code_linter.rules import general, javascript, python
from code_linter.rules.base import SEVERITIES, Issue, Rule, Severity, severity_rank

__all__ = [
    "SEVERITIES",
    "CompiledRule",
    "Issue",
    "Rule",
    "RuleInfo",
    "RuleSet",
    "RuleSetError",
    "Severity",
    "build_rule_set",
    "builtin_rules",
    "default_rule_set",
    "list_rule_info",
    "severity_rank",
]

logger = logging.getLogger(__name__)


class RuleSetError(ValueError):
    """Raised when a rule set cannot be constructed."""


@dataclass(frozen=True, slots=True)
class CompiledRule:
    """A rule paired with its compiled pattern."""

    rule: Rule
    regex: re.Pattern[str]


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Rule metadata for listing."""

    rule_id: str
    severity: Severity
    languages: tuple[str, ...] | None
    message: str
    fixable: bool


class RuleSet:
    """Ordered, immutable collection of compiled rules.

    Patterns are compiled once here, so a malformed pattern fails at
    construction rather than during a scan. Compiled patterns carry no match
    cursor, which keeps every scan independent of the previous one.
    """

    def __init__(self, rules: Iterable[Rule]) -> None:
        compiled: list[CompiledRule] = []
        seen: set[str] = set()
        for rule in rules:
            if rule.rule_id in seen:
                raise RuleSetError(f"Duplicate rule id: {rule.rule_id}")
            seen.add(rule.rule_id)
            try:
                severity_rank(rule.severity)
            except ValueError as exc:
                raise RuleSetError(
                    f"Rule '{rule.rule_id}' has unknown severity '{rule.severity}'"
                ) from exc
            try:
                regex = re.compile(rule.pattern)
            except re.error as exc:
                raise RuleSetError(
                    f"Rule '{rule.rule_id}' has an invalid pattern {rule.pattern!r}: {exc}"
                ) from exc
            compiled.append(CompiledRule(rule=rule, regex=regex))

        self._compiled: tuple[CompiledRule, ...] = tuple(compiled)
        self._by_language: dict[str | None, tuple[CompiledRule, ...]] = {}

    def __len__(self) -> int:
        return len(self._compiled)

    def __iter__(self):
        return (item.rule for item in self._compiled)

    @property
    def rule_ids(self) -> list[str]:
        return [item.rule.rule_id for item in self._compiled]

    def applicable_rules(self, language: str | None) -> tuple[CompiledRule, ...]:
        """Return rules that apply to ``language`` in registration order."""
        cached = self._by_language.get(language)
        if cached is None:
            cached = tuple(item for item in self._compiled if item.rule.applies_to(language))
            self._by_language[language] = cached
        return cached


def builtin_rules() -> list[Rule]:
    """Return the built-in rule catalogue in registration order."""
    return [*javascript.RULES, *python.RULES, *general.RULES]


def default_rule_set() -> RuleSet:
    """Return a rule set holding every built-in rule."""
    return build_rule_set()


def build_rule_set(
    *,
    enabled_rule_ids: list[str] | None = None,
    disabled_rule_ids: list[str] | None = None,
    rules: list[Rule] | None = None,
) -> RuleSet:
    """Build a rule set applying enable/disable filters to a catalogue."""
    catalogue = rules if rules is not None else builtin_rules()
    registry = {rule.rule_id: rule for rule in catalogue}
    disabled_set = set(disabled_rule_ids or [])
    requested_ids = set(enabled_rule_ids or []) | disabled_set

    unknown = [rule_id for rule_id in requested_ids if rule_id not in registry]
    if unknown:
        joined = ", ".join(sorted(unknown))
        raise RuleSetError(f"Unknown rule ids: {joined}")

    if enabled_rule_ids is None:
        selected = [rule for rule in catalogue if rule.rule_id not in disabled_set]
    else:
        selected = [
            registry[rule_id]
            for rule_id in _dedupe(enabled_rule_ids)
            if rule_id not in disabled_set
        ]

    rule_set = RuleSet(selected)
    logger.debug("Built rule set with %d rules: %s", len(rule_set), ", ".join(rule_set.rule_ids))
    return rule_set


def list_rule_info(rules: list[Rule] | None = None) -> list[RuleInfo]:
    """Return metadata for every rule in the catalogue."""
    catalogue = rules if rules is not None else builtin_rules()
    return [
        RuleInfo(
            rule_id=rule.rule_id,
            severity=rule.severity,
            languages=tuple(sorted(rule.languages)) if rule.languages is not None else None,
            message=rule.message,
            fixable=rule.fixable,
        )
        for rule in catalogue
    ]


def _dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        output.append(item)
    return output
