"""
Pytest fixtures for skill tree tests.
"""

from typing import Callable, Dict, List

import pytest

from skilltree.engines.graph.pipeline import build_graph
from skilltree.pedagogy.default_catalog import default_catalog
from skilltree.schemas.catalog import Catalog
from skilltree.schemas.graph import GraphData
from tests.helpers import make_catalog, random_dag


@pytest.fixture
def catalog_factory() -> Callable[..., Catalog]:
    """Build catalogs from a prerequisite map."""
    return make_catalog


@pytest.fixture
def linear_catalog() -> Catalog:
    """A (starting) -> B -> C."""
    return make_catalog({"A": [], "B": ["A"], "C": ["B"]}, starting=["A"], final=["C"])


@pytest.fixture
def linear_graph(linear_catalog: Catalog) -> GraphData:
    return build_graph(linear_catalog)


@pytest.fixture
def diamond_catalog() -> Catalog:
    """A -> (B, C) -> D, listed out of topological order."""
    return make_catalog(
        {"D": ["B", "C"], "C": ["A"], "B": ["A"], "A": []},
        starting=["A"],
    )


@pytest.fixture
def sample_catalog() -> Catalog:
    return default_catalog()


@pytest.fixture
def sample_graph(sample_catalog: Catalog) -> GraphData:
    return build_graph(sample_catalog)


@pytest.fixture(params=[1, 7, 42, 1234, 9001])
def random_prerequisites(request) -> Dict[str, List[str]]:
    """Seeded random DAGs for property checks."""
    return random_dag(request.param)
