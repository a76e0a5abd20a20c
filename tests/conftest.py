"""Shared fixtures for graphframe tests."""

import polars as pl
import pytest

from graphframe import reset_config


@pytest.fixture(autouse=True)
def _fresh_config():
    """Each test loads config from its own working directory."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def abc_edges() -> pl.DataFrame:
    """A->B, A->C, B->C."""
    return pl.DataFrame({"src": ["A", "A", "B"], "dst": ["B", "C", "C"]})


@pytest.fixture
def abc_vertices() -> pl.DataFrame:
    return pl.DataFrame({"id": ["A", "B", "C"], "name": ["alpha", "beta", "gamma"]})
