"""Read feature names supplied by upstream discovery."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .models import Feature


def read_feature_names(path: Path) -> list[str]:
    """Return feature names listed one per line in ``path``.

    Blank lines and ``#`` comments are skipped. Names are not validated or
    escaped.
    """
    names: list[str] = []
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            text = line.strip()
            if not text or text.startswith("#"):
                continue
            names.append(text)
    return names


def features_from_names(names: Iterable[str]) -> list[Feature]:
    return [Feature(name=name) for name in names]
