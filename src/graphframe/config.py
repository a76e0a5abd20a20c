"""Project-level configuration from pyproject.toml.

Reads the [tool.graphframe] section to choose how deferred plans are
materialized and how many rows a rendered table shows.

Example::

    [tool.graphframe]
    engine = "streaming"
    tbl_rows = 20
"""

from __future__ import annotations

import functools
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

ENGINES = ("auto", "in-memory", "streaming", "gpu")


@dataclass(frozen=True)
class GraphFrameConfig:
    """Configuration from [tool.graphframe] in pyproject.toml."""

    engine: str = "auto"
    tbl_rows: int | None = None

    def __post_init__(self) -> None:
        if self.engine not in ENGINES:
            raise ValueError(
                f"Invalid engine: '{self.engine}'\n\n"
                f"  -> Expected one of: {', '.join(ENGINES)}"
            )
        if self.tbl_rows is not None and (
            isinstance(self.tbl_rows, bool)
            or not isinstance(self.tbl_rows, int)
            or self.tbl_rows < 0
        ):
            raise ValueError(
                f"Invalid tbl_rows: {self.tbl_rows!r}\n\n"
                f"  -> Expected a non-negative integer"
            )


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> GraphFrameConfig:
    """Load [tool.graphframe] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.graphframe] section.
    """
    path = find_pyproject(start)
    if path is None:
        return GraphFrameConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("graphframe", {})
    if not section:
        return GraphFrameConfig()

    unknown = sorted(set(section) - {"engine", "tbl_rows"})
    if unknown:
        logger.warning("Ignoring unknown [tool.graphframe] keys in %s: %s", path, unknown)

    return GraphFrameConfig(
        engine=section.get("engine", "auto"),
        tbl_rows=section.get("tbl_rows"),
    )


@functools.lru_cache(maxsize=1)
def get_config() -> GraphFrameConfig:
    """Config for the current process, loaded once from the working directory."""
    return load_config()


def reset_config() -> None:
    """Forget the cached config so the next get_config() reloads it."""
    get_config.cache_clear()
