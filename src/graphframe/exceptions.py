"""Exceptions for graphframe construction and evaluation."""

from __future__ import annotations

from enum import Enum

from graphframe import columns


class GraphFrameError(Exception):
    """Base class for every error raised by graphframe."""

    pass


class MissingColumn(str, Enum):
    """Required columns a graph table can be missing."""

    ID = columns.ID
    SRC = columns.SRC
    DST = columns.DST

    @property
    def table(self) -> str:
        """Name of the table the column belongs to."""
        return "vertices" if self is MissingColumn.ID else "edges"


class MissingColumnError(GraphFrameError):
    """A required column is absent from the vertex or edge table.

    Raised synchronously while building a GraphFrame. Only the first
    missing column is reported: ``id`` on vertices, then ``src`` and
    ``dst`` on edges.

    Attributes:
        column: Which required column is missing
        table: ``"vertices"`` or ``"edges"``
        available: Column names the table actually has
        message: Human-readable error message
    """

    def __init__(
        self,
        column: MissingColumn,
        available: list[str] | None = None,
        message: str | None = None,
    ) -> None:
        self.column = column
        self.table = column.table
        self.available = available or []
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        msg = (
            f"The {self.table} table must contain a '{self.column.value}' "
            f"column for the graph to be created"
        )
        if self.available:
            available_str = ", ".join(f"'{c}'" for c in self.available)
            msg += f"\n\n  -> Available columns: {available_str}"
        msg += (
            f"\n\nHow to fix:\n"
            f"  Rename the matching column, e.g. "
            f"df.rename({{'<name>': '{self.column.value}'}})"
        )
        return msg


class EngineError(GraphFrameError):
    """Wraps a failure raised by the query engine while materializing a plan.

    The engine exception is chained as ``__cause__`` and kept on
    ``cause``; it is not classified further.

    Attributes:
        cause: The original polars exception
    """

    def __init__(self, cause: BaseException, message: str | None = None) -> None:
        self.cause = cause
        super().__init__(message or str(cause))
        self.__cause__ = cause
