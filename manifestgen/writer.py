"""Create, extend, and remove the generated manifest file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from .errors import wrap_os_error
from .header import DEFAULT_HEADER
from .models import ManifestEntry

logger = logging.getLogger(__name__)


def _open_existing(path: str, flags: int) -> int:
    # Drop O_CREAT: a missing manifest is reported instead of recreated.
    return os.open(path, flags & ~os.O_CREAT)


def format_entry(entry: ManifestEntry) -> str:
    """Render a single feature line."""
    return f"{entry.name} = []\n"


class ManifestWriter:
    """Sequential, non-overwriting writer for one manifest file.

    The writer does not track which stage the file is in (absent, header only,
    header plus entries). Callers invoke ``initialize``, ``append_entries`` and
    ``remove`` in order and receive whatever the filesystem reports, wrapped as
    a ``ManifestError``.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        header: str = DEFAULT_HEADER,
        log: logging.Logger | None = None,
    ) -> None:
        self.path = Path(path)
        self.header = header
        self._log = log or logger

    def __repr__(self) -> str:
        return f"ManifestWriter(path={self.path!r})"

    def exists(self) -> bool:
        return self.path.is_file()

    def initialize(self) -> None:
        """Create the manifest exclusively and write the header."""
        self._log.info("Creating manifest %s", self.path)
        try:
            with self.path.open("x", encoding="utf-8", newline="") as handle:
                handle.write(self.header)
        except OSError as exc:
            self._log.error("Could not create manifest %s: %s", self.path, exc)
            raise wrap_os_error(exc, self.path, "create") from exc
        self._log.debug("Wrote %d header characters to %s", len(self.header), self.path)

    def append_entries(self, entries: Iterable[ManifestEntry]) -> int:
        """Append one ``<name> = []`` line per entry and flush.

        The file must already exist. A failure part way through leaves the
        lines written so far in place.
        """
        entries = list(entries)
        self._log.info("Appending %d feature(s) to %s", len(entries), self.path)
        try:
            with open(self.path, "a", encoding="utf-8", newline="", opener=_open_existing) as handle:
                for entry in entries:
                    handle.write(format_entry(entry))
                handle.flush()
        except OSError as exc:
            self._log.error("Could not append features to %s: %s", self.path, exc)
            raise wrap_os_error(exc, self.path, "append to") from exc
        self._log.debug("Flushed %d feature line(s) to %s", len(entries), self.path)
        return len(entries)

    def remove(self) -> None:
        """Delete the manifest."""
        self._log.info("Removing manifest %s", self.path)
        try:
            self.path.unlink()
        except OSError as exc:
            self._log.error("Could not remove manifest %s: %s", self.path, exc)
            raise wrap_os_error(exc, self.path, "remove") from exc
