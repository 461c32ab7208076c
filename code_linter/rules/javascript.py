"""JavaScript and TypeScript style rules."""

from __future__ import annotations

from code_linter.rules.base import Rule

LANGUAGES = frozenset({"js", "ts", "jsx", "tsx"})

RULES: tuple[Rule, ...] = (
    Rule(
        rule_id="no-var",
        pattern=r"\bvar\s+\w+",
        message='Use "let" or "const" instead of "var"',
        severity="warning",
        languages=LANGUAGES,
    ),
    Rule(
        rule_id="no-debug-statements",
        pattern=r"console\.(log|debug|info)\(",
        message="Remove debug statements",
        severity="warning",
        languages=LANGUAGES,
    ),
    Rule(
        rule_id="todo-comment",
        pattern=r"TODO|FIXME|HACK:",
        message="TODO/FIXME comment found",
        severity="info",
        languages=LANGUAGES,
    ),
    Rule(
        rule_id="eqeqeq",
        # Unlike a bare "==(?!=)", the lookbehind keeps the inner "==" of
        # "===" and "!==" from being reported.
        pattern=r"(?<![=!])==(?!=)",
        message="Use === instead of ==",
        severity="warning",
        languages=LANGUAGES,
        fixable=True,
    ),
    Rule(
        rule_id="array-literal",
        pattern=r"new\s+Array\(",
        message="Use array literal []",
        severity="info",
        languages=LANGUAGES,
        fixable=True,
    ),
    Rule(
        rule_id="throw-error",
        pattern=r"throw\s+new\s+Error",
        message='Just "throw Error" is enough',
        severity="info",
        languages=LANGUAGES,
    ),
)
