"""Materialization of deferred query plans.

Every place graphframe evaluates a LazyFrame goes through this module, so
engine failures always surface as EngineError.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import polars as pl

from graphframe.config import get_config
from graphframe.exceptions import EngineError

logger = logging.getLogger(__name__)


@contextmanager
def engine_errors() -> Iterator[None]:
    """Re-raise polars failures inside the block as EngineError."""
    try:
        yield
    except pl.exceptions.PolarsError as exc:
        logger.warning("Query engine failed: %s", exc)
        raise EngineError(exc) from exc


def collect(plan: pl.LazyFrame, *, engine: str | None = None) -> pl.DataFrame:
    """Execute a deferred plan and return the materialized table.

    Args:
        plan: The LazyFrame to evaluate. It is not modified and can be
            collected again.
        engine: polars engine name; defaults to the configured engine

    Returns:
        The materialized DataFrame

    Raises:
        EngineError: If polars fails while evaluating the plan

    Examples:
        >>> from graphframe import GraphFrame
        >>> g = GraphFrame.from_edges({"src": ["a"], "dst": ["b"]})
        >>> collect(g.out_degrees()).to_dicts()
        [{'id': 'a', 'out_degree': 1}]
    """
    engine = engine or get_config().engine
    logger.debug("Collecting plan with engine=%s", engine)
    with engine_errors():
        return plan.collect(engine=engine)
