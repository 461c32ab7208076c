"""Python style rules."""

from __future__ import annotations

from code_linter.rules.base import Rule

LANGUAGES = frozenset({"py"})

RULES: tuple[Rule, ...] = (
    Rule(
        rule_id="bare-except",
        pattern=r"except\s*:",
        message='Use "except Exception:"',
        severity="warning",
        languages=LANGUAGES,
    ),
    Rule(
        rule_id="print-call",
        pattern=r"print\s*\(",
        message="Consider using logging",
        severity="info",
        languages=LANGUAGES,
    ),
    Rule(
        rule_id="wildcard-import",
        pattern=r"from\s+\w+\s+import\s+\*",
        message="Avoid wildcard imports",
        severity="warning",
        languages=LANGUAGES,
    ),
)
