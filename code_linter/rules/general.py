"""Language-independent layout rules."""

from __future__ import annotations

from code_linter.rules.base import Rule

MAX_LINE_LENGTH = 120

RULES: tuple[Rule, ...] = (
    Rule(
        rule_id="max-line-length",
        # A trailing "\r" from CRLF input does not count toward the length.
        pattern=rf"[^\r\n]{{{MAX_LINE_LENGTH},}}",
        message=f"Line exceeds {MAX_LINE_LENGTH} characters",
        severity="info",
    ),
    Rule(
        rule_id="trailing-whitespace",
        pattern=r"\s+$",
        message="Trailing whitespace",
        severity="info",
        fixable=True,
    ),
    Rule(
        rule_id="no-tabs",
        pattern=r"\t",
        message="Use spaces instead of tabs",
        severity="warning",
        fixable=True,
    ),
)
