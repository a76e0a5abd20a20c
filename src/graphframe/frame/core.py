"""GraphFrame class for graphframe."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import networkx as nx
import polars as pl

from graphframe.columns import DST, ID, IN_DEGREE, OUT_DEGREE, SRC
from graphframe.config import get_config
from graphframe.engine import collect, engine_errors
from graphframe.frame.validation import validate_edges, validate_tables

logger = logging.getLogger(__name__)


def _as_dataframe(table: Any, name: str) -> pl.DataFrame:
    """Accept a polars DataFrame or a column-name -> values mapping."""
    if isinstance(table, pl.DataFrame):
        return table
    if isinstance(table, Mapping):
        with engine_errors():
            return pl.DataFrame(dict(table))
    raise TypeError(
        f"{name} must be a polars DataFrame or a mapping of column name to values, "
        f"got {type(table).__name__}"
    )


@dataclass(frozen=True, eq=False, repr=False)
class GraphFrame:
    """A directed graph held as a vertex table and an edge table.

    Both tables are kept as deferred polars plans (LazyFrames). Nothing is
    evaluated until a plan is collected.

    Attributes:
        vertices: Vertex plan, guaranteed at construction to have an ``id`` column
        edges: Edge plan, guaranteed at construction to have ``src`` and ``dst``

    Example:
        >>> g = GraphFrame(
        ...     {"id": ["a", "b", "c"]},
        ...     {"src": ["a", "a", "b"], "dst": ["b", "c", "c"]},
        ... )
        >>> collect(g.out_degrees().sort("id")).to_dicts()
        [{'id': 'a', 'out_degree': 2}, {'id': 'b', 'out_degree': 1}]
    """

    vertices: pl.LazyFrame
    edges: pl.LazyFrame

    def __post_init__(self) -> None:
        """Validate the materialized tables and hold them as deferred plans.

        ``vertices`` needs an ``id`` column and ``edges`` needs ``src`` and
        ``dst``; other columns are attributes. Either table may be a polars
        DataFrame or a mapping of column name to values. Endpoints are not
        checked against vertex ids.

        Raises:
            MissingColumnError: ``id`` missing from vertices, then ``src``
                or ``dst`` missing from edges (first failure only)
            TypeError: If a table is neither a DataFrame nor a mapping
        """
        vertices = _as_dataframe(self.vertices, "vertices")
        edges = _as_dataframe(self.edges, "edges")
        validate_tables(vertices, edges)
        logger.debug(
            "Building GraphFrame: vertices=%s edges=%s", vertices.columns, edges.columns
        )
        object.__setattr__(self, "vertices", vertices.lazy())
        object.__setattr__(self, "edges", edges.lazy())

    @classmethod
    def from_edges(cls, edges: pl.DataFrame | Mapping[str, Any]) -> GraphFrame:
        """Create a graph whose vertices are every distinct edge endpoint.

        The vertex table has a single ``id`` column. When an id appears more
        than once the first occurrence wins, and all ``src`` values come
        before all ``dst`` values.

        Raises:
            MissingColumnError: If ``src`` or ``dst`` is missing
            EngineError: If polars fails to derive the vertex table, e.g.
                when ``src`` and ``dst`` have incompatible dtypes
        """
        edges = _as_dataframe(edges, "edges")
        validate_edges(edges)

        plan = edges.lazy()
        with engine_errors():
            endpoints = pl.concat(
                [plan.select(pl.col(SRC).alias(ID)), plan.select(pl.col(DST).alias(ID))],
                how="vertical",
                parallel=True,
            )
        vertices = collect(endpoints.unique(subset=[ID], keep="first", maintain_order=True))
        logger.debug("Derived %d vertices from %d edges", vertices.height, edges.height)
        return cls(vertices, edges)

    # =========================================================================
    # Degrees
    # =========================================================================

    def out_degrees(self) -> pl.LazyFrame:
        """Number of edges leaving each vertex, as columns ``id`` and ``out_degree``.

        Vertices without outgoing edges do not appear in the result.
        """
        return self.edges.group_by(pl.col(SRC).alias(ID)).agg(pl.len().alias(OUT_DEGREE))

    def in_degrees(self) -> pl.LazyFrame:
        """Number of edges entering each vertex, as columns ``dst`` and ``in_degree``.

        The key column keeps the name ``dst`` (unlike out_degrees, which
        renames ``src`` to ``id``). Vertices without incoming edges do not
        appear in the result.
        """
        return self.edges.group_by(pl.col(DST)).agg(pl.len().alias(IN_DEGREE))

    # =========================================================================
    # Materialization
    # =========================================================================

    def collect(self, *, engine: str | None = None) -> tuple[pl.DataFrame, pl.DataFrame]:
        """Materialize both plans.

        Returns:
            ``(vertices, edges)`` as DataFrames

        Raises:
            EngineError: If either plan fails to evaluate
        """
        return collect(self.vertices, engine=engine), collect(self.edges, engine=engine)

    def render(self) -> str:
        """Render both tables as text.

        Tables follow the active polars formatting options unless
        [tool.graphframe] sets ``tbl_rows``.

        Raises:
            EngineError: If either plan fails to evaluate. The failure is
                never substituted for the table text.
        """
        vertices, edges = self.collect()
        tbl_rows = get_config().tbl_rows
        if tbl_rows is None:
            return f"Vertices: {vertices}\nEdges: {edges}"
        with pl.Config(tbl_rows=tbl_rows):
            return f"Vertices: {vertices}\nEdges: {edges}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        with engine_errors():
            vertex_cols = self.vertices.collect_schema().names()
            edge_cols = self.edges.collect_schema().names()
        return f"GraphFrame(vertices={vertex_cols}, edges={edge_cols})"

    # =========================================================================
    # Interop
    # =========================================================================

    def to_networkx(self) -> nx.MultiDiGraph:
        """Materialize the graph as a NetworkX MultiDiGraph.

        Vertex columns other than ``id`` become node attributes and edge
        columns other than ``src``/``dst`` become edge attributes. Parallel
        edges are kept. Edge endpoints missing from the vertex table are
        added as nodes without attributes.

        Raises:
            EngineError: If either plan fails to evaluate
        """
        vertices, edges = self.collect()
        G = nx.MultiDiGraph()
        G.add_nodes_from(
            (row.pop(ID), row) for row in vertices.iter_rows(named=True)
        )
        G.add_edges_from(
            (row.pop(SRC), row.pop(DST), row) for row in edges.iter_rows(named=True)
        )
        return G
