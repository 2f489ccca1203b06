"""manifestgen: generate the feature manifest for the icons crate."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as load_pkg_version
from pathlib import Path
import tomllib

from .errors import ManifestError, ManifestExistsError, ManifestNotFoundError, ManifestPermissionError
from .header import DEFAULT_HEADER
from .models import Feature
from .writer import ManifestWriter

__all__ = [
    "DEFAULT_HEADER",
    "Feature",
    "ManifestError",
    "ManifestExistsError",
    "ManifestNotFoundError",
    "ManifestPermissionError",
    "ManifestWriter",
    "__version__",
]


def _read_local_project_version() -> str:
    """Read the project version from pyproject.toml when the package is uninstalled."""
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return "0.0.0"
    return data.get("project", {}).get("version", "0.0.0")


try:
    __version__ = load_pkg_version("manifestgen")
except PackageNotFoundError:
    __version__ = _read_local_project_version()
