"""Fixed preamble written at the top of every generated manifest."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

DEFAULT_HEADER = dedent(
    """\
    # ------------------------------------------------------------------------------------------
    # THIS FILE WAS GENERATED BY THE "BUILD" CRATE.
    # ------------------------------------------------------------------------------------------

    [package]
    name = "leptos-icons"
    version = "0.0.1"
    authors = ["Charles Edward Gagnon"]
    edition = "2021"
    description = "Icons library for the leptos web framework"
    readme = "./README.md"
    repository = "https://github.com/Carlosted/leptos-icons"
    license = "MIT"
    keywords = ["leptos", "icons"]
    categories = ["web-programming"]

    [dependencies]
    leptos = { version = "0.2", default-features = false }

    [features]
    """
)


def load_header(path: Path | None = None) -> str:
    """Return the default header, or the contents of ``path`` when given."""
    if path is None:
        return DEFAULT_HEADER
    return path.read_text(encoding="utf-8")
