from __future__ import annotations

from pathlib import Path

import pytest

from manifestgen.header import DEFAULT_HEADER, load_header
from manifestgen.sources import features_from_names, read_feature_names


def test_read_feature_names_skips_blanks_and_comments(tmp_path: Path) -> None:
    source = tmp_path / "features.txt"
    source.write_text("# icon packs\nbs\n\n  fa  \n# trailing\nio\n", encoding="utf-8")

    assert read_feature_names(source) == ["bs", "fa", "io"]


def test_read_feature_names_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_feature_names(tmp_path / "absent.txt")


def test_features_from_names_keeps_order_and_duplicates() -> None:
    features = features_from_names(["search", "home", "search"])

    assert [feature.name for feature in features] == ["search", "home", "search"]


def test_load_header_defaults_and_override(tmp_path: Path) -> None:
    override = tmp_path / "header.toml"
    override.write_text("[features]\n", encoding="utf-8")

    assert load_header() == DEFAULT_HEADER
    assert load_header(override) == "[features]\n"
