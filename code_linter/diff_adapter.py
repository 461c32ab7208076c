"""Source units built from pull-request patch fragments."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from code_linter.traversal import SourceUnit

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PullRequestFile:
    """A changed file as reported by the hosting provider."""

    filename: str
    patch: str | None


def iter_patch_units(files: Iterable[PullRequestFile]) -> Iterator[SourceUnit]:
    """Yield one unit per file that carries a patch.

    The patch is linted verbatim: hunk headers and the ``+``/``-``/space
    markers stay on each line and count toward rules like line length.
    """
    for item in files:
        if not item.patch:
            logger.debug("No patch for %s, skipping", item.filename)
            continue
        yield SourceUnit(source_id=item.filename, text=item.patch)
