"""graphframe - Directed graphs as lazily evaluated vertex and edge tables."""

from graphframe.columns import DST, EDGE, ID, IN_DEGREE, MSG, OUT_DEGREE, SRC
from graphframe.config import GraphFrameConfig, get_config, load_config, reset_config
from graphframe.engine import collect
from graphframe.exceptions import (
    EngineError,
    GraphFrameError,
    MissingColumn,
    MissingColumnError,
)
from graphframe.frame import GraphFrame

__all__ = [
    # Graph
    "GraphFrame",
    "collect",
    # Column names
    "ID",
    "SRC",
    "DST",
    "EDGE",
    "MSG",
    "OUT_DEGREE",
    "IN_DEGREE",
    # Errors
    "GraphFrameError",
    "MissingColumn",
    "MissingColumnError",
    "EngineError",
    # Config
    "GraphFrameConfig",
    "get_config",
    "load_config",
    "reset_config",
]
