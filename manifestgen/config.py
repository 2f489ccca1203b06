from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .sources import read_feature_names

CONFIG_FILENAME = "manifestgen.yml"


class Config(BaseModel):
    manifest_path: Path = Field(default=Path("Cargo.toml"), description="Location of the generated manifest.")
    header_path: Path | None = Field(
        default=None,
        description="Optional file whose contents replace the built-in manifest header.",
    )
    features: list[str] = Field(
        default_factory=list,
        description="Feature names appended in order after the header.",
    )
    features_file: Path | None = Field(
        default=None,
        description="Optional text file listing additional feature names, one per line.",
    )

    @field_validator("manifest_path", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    @field_validator("header_path", "features_file", mode="before")
    def _ensure_optional_path(cls, value: Any) -> Path | None:
        if value is None or value == "":
            return None
        return Path(value)

    def feature_names(self) -> list[str]:
        """Inline features first, then those listed in ``features_file``."""
        names = list(self.features)
        if self.features_file is not None:
            names.extend(read_feature_names(self.features_file))
        return names


def load_config(path: str | Path) -> Config:
    """Load configuration and resolve relative paths based on the config location.

    ``path`` may point at a config file or at a directory holding
    ``manifestgen.yml``. A directory without that file yields the defaults.
    """
    candidate = Path(path)
    data: dict[str, Any] = {}
    if candidate.is_dir():
        config_file = candidate / CONFIG_FILENAME
        if config_file.exists():
            with config_file.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        base_dir = candidate.resolve()
    else:
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        with candidate.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        base_dir = candidate.parent.resolve()

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {candidate} should define a mapping.")

    cfg = Config(**data)

    def _abs_required(value: Path) -> Path:
        return value if value.is_absolute() else (base_dir / value).resolve()

    def _abs_optional(value: Path | None) -> Path | None:
        if value is None:
            return None
        return _abs_required(value)

    cfg.manifest_path = _abs_required(cfg.manifest_path)
    cfg.header_path = _abs_optional(cfg.header_path)
    cfg.features_file = _abs_optional(cfg.features_file)
    return cfg
