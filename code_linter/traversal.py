"""Filesystem traversal feeding source units to the matcher."""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceUnit:
    """One piece of text to lint and the identifier it is reported under."""

    source_id: str
    text: str


def iter_source_units(
    paths: list[Path],
    *,
    recursive: bool = False,
    exclude: list[str] | None = None,
) -> Iterator[SourceUnit]:
    """Yield a unit for every readable file reachable from ``paths``.

    A file path always yields itself. A directory is walked only when
    ``recursive`` is set; otherwise it yields nothing. Entries that cannot be
    read are logged and skipped so one bad file never ends the run.
    """
    excludes = exclude or []
    for path in paths:
        if _is_excluded(path, excludes):
            logger.debug("Excluded %s", path)
            continue
        try:
            is_dir = path.is_dir()
            is_file = path.is_file()
        except OSError as exc:
            logger.warning("Skipping %s: %s", path, exc)
            continue

        if is_file:
            unit = _read_unit(path)
            if unit is not None:
                yield unit
        elif is_dir:
            if recursive:
                yield from _walk(path, excludes)
            else:
                logger.info("Skipping directory %s (use --recursive to lint it)", path)
        else:
            logger.warning("Skipping %s: no such file or directory", path)


def read_text(path: Path) -> str:
    """Read ``path`` as UTF-8 without newline translation."""
    return path.read_bytes().decode("utf-8", errors="replace")


def _walk(directory: Path, excludes: list[str]) -> Iterator[SourceUnit]:
    try:
        children = sorted(directory.iterdir(), key=lambda item: item.name)
    except OSError as exc:
        logger.warning("Skipping directory %s: %s", directory, exc)
        return

    for child in children:
        if _is_excluded(child, excludes):
            logger.debug("Excluded %s", child)
            continue
        try:
            if child.is_dir():
                if child.is_symlink():
                    logger.debug("Not following symlinked directory %s", child)
                    continue
                yield from _walk(child, excludes)
                continue
            if not child.is_file():
                continue
        except OSError as exc:
            logger.warning("Skipping %s: %s", child, exc)
            continue

        unit = _read_unit(child)
        if unit is not None:
            yield unit


def _read_unit(path: Path) -> SourceUnit | None:
    try:
        text = read_text(path)
    except OSError as exc:
        logger.warning("Skipping %s: %s", path, exc)
        return None
    return SourceUnit(source_id=str(path), text=text)


def _is_excluded(path: Path, patterns: list[str]) -> bool:
    if not patterns:
        return False
    posix = path.as_posix()
    return any(
        fnmatch.fnmatch(posix, pattern) or fnmatch.fnmatch(path.name, pattern)
        for pattern in patterns
    )
