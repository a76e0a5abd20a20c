"""Tests for rendering GraphFrames as text."""

import polars as pl
import pytest

from graphframe import EngineError, GraphFrame


def _with_broken_vertices(g: GraphFrame) -> GraphFrame:
    """Swap in a vertex plan that fails when collected."""
    broken = pl.LazyFrame({"id": ["A"]}).select(pl.col("missing"))
    object.__setattr__(g, "vertices", broken)
    return g


class TestRender:
    def test_contains_both_tables(self, abc_vertices, abc_edges):
        text = GraphFrame(abc_vertices, abc_edges).render()

        assert text.startswith("Vertices: ")
        assert "\nEdges: " in text
        assert "alpha" in text
        assert "src" in text

    def test_str_matches_render(self, abc_vertices, abc_edges):
        g = GraphFrame(abc_vertices, abc_edges)

        assert str(g) == g.render()

    def test_failure_raises_instead_of_rendering(self, abc_vertices, abc_edges):
        g = _with_broken_vertices(GraphFrame(abc_vertices, abc_edges))

        with pytest.raises(EngineError):
            g.render()

    def test_str_failure_raises(self, abc_vertices, abc_edges):
        g = _with_broken_vertices(GraphFrame(abc_vertices, abc_edges))

        with pytest.raises(EngineError):
            str(g)

    def test_tbl_rows_from_config(self, tmp_path, monkeypatch):
        (tmp_path / "pyproject.toml").write_text("[tool.graphframe]\ntbl_rows = 2\n")
        monkeypatch.chdir(tmp_path)
        g = GraphFrame({"id": [f"v{i}" for i in range(10)]}, {"src": ["v0"], "dst": ["v9"]})

        text = g.render()

        assert "v0" in text
        assert "v5" not in text

    def test_respects_active_polars_config(self, tmp_path, monkeypatch):
        """Without [tool.graphframe] tbl_rows, the caller's polars options apply."""
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n")
        monkeypatch.chdir(tmp_path)
        g = GraphFrame({"id": [f"v{i}" for i in range(10)]}, {"src": ["v0"], "dst": ["v9"]})

        with pl.Config(tbl_rows=2):
            text = g.render()

        assert "v0" in text
        assert "v5" not in text

    def test_default_shows_all_rows_of_small_tables(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        g = GraphFrame({"id": [f"v{i}" for i in range(5)]}, {"src": ["v0"], "dst": ["v4"]})

        text = g.render()

        assert all(f"v{i}" in text for i in range(5))


class TestRepr:
    def test_shows_columns(self, abc_vertices, abc_edges):
        text = repr(GraphFrame(abc_vertices, abc_edges))

        assert text == "GraphFrame(vertices=['id', 'name'], edges=['src', 'dst'])"

    def test_unresolvable_schema_raises_engine_error(self, abc_vertices, abc_edges):
        g = _with_broken_vertices(GraphFrame(abc_vertices, abc_edges))

        with pytest.raises(EngineError) as exc_info:
            repr(g)

        assert isinstance(exc_info.value.cause, pl.exceptions.PolarsError)
