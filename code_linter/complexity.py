"""Cyclomatic complexity approximation.

The score is lexical: it starts at 1 and adds 1 for every line containing a
branching keyword as a whole word. Several keywords on one line count once,
and keywords inside strings, comments or reused as identifiers still count,
so the result drifts from a parser-accurate branch count in both directions.
"""

from __future__ import annotations

import re
from typing import Literal

ComplexityLevel = Literal["low", "moderate", "high"]

BRANCH_KEYWORD_RE = re.compile(r"\b(?:if|for|while|switch|catch|case)\b")

MODERATE_THRESHOLD = 10
HIGH_THRESHOLD = 20

_ADVICE: dict[ComplexityLevel, str] = {
    "low": "Low complexity - easy to understand",
    "moderate": "Moderate complexity - consider refactoring",
    "high": "High complexity - needs refactoring",
}


def score(text: str) -> int:
    """Return the approximate complexity of ``text``; always at least 1."""
    total = 1
    for line in text.split("\n"):
        if BRANCH_KEYWORD_RE.search(line):
            total += 1
    return total


def classify(value: int) -> ComplexityLevel:
    if value < MODERATE_THRESHOLD:
        return "low"
    if value < HIGH_THRESHOLD:
        return "moderate"
    return "high"


def describe(level: ComplexityLevel) -> str:
    """Return the advice line shown for a complexity level."""
    return _ADVICE[level]
