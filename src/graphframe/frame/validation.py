"""Schema validation for vertex and edge tables.

Checks are fail-fast and look at column names only, never at row contents.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphframe.exceptions import MissingColumn, MissingColumnError

if TYPE_CHECKING:
    import polars as pl


def validate_tables(vertices: "pl.DataFrame", edges: "pl.DataFrame") -> None:
    """Run all construction-time checks, in priority order.

    Args:
        vertices: Materialized vertex table
        edges: Materialized edge table

    Raises:
        MissingColumnError: For the first required column that is absent
    """
    validate_vertices(vertices)
    validate_edges(edges)


def validate_vertices(vertices: "pl.DataFrame") -> None:
    """Vertex tables need an ``id`` column."""
    _require(vertices.columns, MissingColumn.ID)


def validate_edges(edges: "pl.DataFrame") -> None:
    """Edge tables need ``src`` and then ``dst`` columns."""
    _require(edges.columns, MissingColumn.SRC)
    _require(edges.columns, MissingColumn.DST)


def _require(columns: list[str], column: MissingColumn) -> None:
    if column.value not in columns:
        raise MissingColumnError(column, available=list(columns))
