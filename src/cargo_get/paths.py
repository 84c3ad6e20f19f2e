"""Filesystem helpers for finding the governing manifest."""

from __future__ import annotations

import logging
from pathlib import Path

from cargo_get.errors import EntryPointError, ManifestNotLocated

MANIFEST_FILENAME = "Cargo.toml"

logger = logging.getLogger(__name__)


def resolve_entry_point(root: str | Path | None = None) -> Path:
    if root is None:
        return Path.cwd().resolve()
    try:
        return Path(root).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise EntryPointError(root) from exc


def _manifest_exists(candidate: Path) -> bool:
    # An unreadable ancestor counts as having no manifest; the walk goes on.
    try:
        return candidate.exists()
    except OSError as exc:
        logger.debug("Skipping %s: %s", candidate, exc)
        return False


def locate_manifest(start: Path, filename: str = MANIFEST_FILENAME) -> Path:
    current = start
    if current.is_file():
        current = current.parent

    for candidate_dir in (current, *current.parents):
        candidate = candidate_dir / filename
        logger.debug("Probing %s", candidate)
        if _manifest_exists(candidate):
            return candidate

    raise ManifestNotLocated(start)
