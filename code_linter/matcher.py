"""Line-oriented rule matching."""

from __future__ import annotations

from pathlib import PurePosixPath

from code_linter.rules import Issue, RuleSet


def language_for(source_id: str) -> str | None:
    """Return the lower-cased extension of ``source_id``, or None without one."""
    suffix = PurePosixPath(source_id.replace("\\", "/")).suffix
    if not suffix:
        return None
    return suffix[1:].lower()


class Matcher:
    """Applies a rule set to units of text."""

    def __init__(self, rule_set: RuleSet) -> None:
        self.rule_set = rule_set

    def scan(self, source_id: str, text: str, language: str | None = None) -> list[Issue]:
        """Scan ``text`` and return issues ordered by line, rule, then column.

        Lines are split on ``"\\n"`` only, so a trailing ``"\\r"`` stays part of
        the line. When ``language`` is omitted it is derived from ``source_id``.
        """
        if not text:
            return []

        if language is None:
            language = language_for(source_id)
        applicable = self.rule_set.applicable_rules(language)
        if not applicable:
            return []

        issues: list[Issue] = []
        for line_number, line in enumerate(text.split("\n"), start=1):
            for compiled in applicable:
                rule = compiled.rule
                # finditer advances past empty matches, so zero-width patterns terminate.
                for match in compiled.regex.finditer(line):
                    issues.append(
                        Issue(
                            source_id=source_id,
                            line=line_number,
                            column=match.start() + 1,
                            message=rule.message,
                            severity=rule.severity,
                            rule_id=rule.rule_id,
                            fixable=rule.fixable,
                        )
                    )
        return issues
