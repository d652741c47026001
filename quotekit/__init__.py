"""quotekit: read, add and delete quotes in a plain-text file."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Tuple

try:
    import tomllib  # Python 3.11+
except ImportError:  # pragma: no cover
    import tomli as tomllib


def _version_and_summary() -> Tuple[str, str]:
    """Prefer installed metadata; fall back to the checkout's pyproject."""
    try:
        dist = importlib_metadata.metadata("quotekit")
        return dist["Version"], dist.get("Summary") or ""
    except importlib_metadata.PackageNotFoundError:  # pragma: no cover - dev checkout
        pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
        if not pyproject.is_file():
            return "0.0.0", ""
        with pyproject.open("rb") as handle:
            project = tomllib.load(handle).get("project", {})
        return project.get("version", "0.0.0"), project.get("description", "")


__version__, __description__ = _version_and_summary()

__all__ = ["__version__", "__description__"]
