"""Sequence the writer operations for a full regeneration."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Iterable

from .models import ManifestEntry
from .writer import ManifestWriter

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GenerationResult:
    """Outcome of a manifest regeneration."""

    path: Path
    entry_count: int
    replaced: bool


def regenerate(
    writer: ManifestWriter,
    entries: Iterable[ManifestEntry],
    *,
    force: bool = False,
) -> GenerationResult:
    """Write a fresh manifest: header followed by one line per entry.

    An existing manifest is removed first only when ``force`` is set;
    otherwise ``initialize`` reports it as ``ManifestExistsError``. Errors
    propagate without cleanup, so a partial file may remain.
    """
    replaced = False
    if force and writer.exists():
        logger.info("Replacing existing manifest %s", writer.path)
        writer.remove()
        replaced = True
    writer.initialize()
    count = writer.append_entries(entries)
    return GenerationResult(path=writer.path, entry_count=count, replaced=replaced)
