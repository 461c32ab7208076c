"""Lint orchestration."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from code_linter.matcher import Matcher
from code_linter.output import Aggregator
from code_linter.rules import Issue
from code_linter.traversal import SourceUnit

logger = logging.getLogger(__name__)


def lint_units(
    units: Iterable[SourceUnit],
    matcher: Matcher,
    aggregator: Aggregator | None = None,
    *,
    jobs: int = 1,
) -> Aggregator:
    """Scan every unit and collect its issues.

    With ``jobs > 1`` units are scanned on a thread pool. Results are still
    added in input order, so the report does not depend on scheduling.
    """
    if jobs < 1:
        raise ValueError(f"jobs must be >= 1, got {jobs}")
    collected = aggregator if aggregator is not None else Aggregator()

    def scan(unit: SourceUnit) -> tuple[str, list[Issue]]:
        return unit.source_id, matcher.scan(unit.source_id, unit.text)

    if jobs == 1:
        for source_id, issues in map(scan, units):
            _collect(collected, source_id, issues)
        return collected

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        for source_id, issues in executor.map(scan, units):
            _collect(collected, source_id, issues)
    return collected


def _collect(aggregator: Aggregator, source_id: str, issues: list[Issue]) -> None:
    logger.debug("%s: %d issues", source_id, len(issues))
    aggregator.add(issues, source_id=source_id)
