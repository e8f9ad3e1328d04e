"""
Graph pipeline - catalog -> validated, closed, leveled GraphData.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from skilltree.engines.graph.closure_resolver import ClosureResolver
from skilltree.engines.graph.errors import CatalogError
from skilltree.engines.graph.graph_builder import GraphBuilder, validate_catalog
from skilltree.engines.graph.leveler import Leveler
from skilltree.logging_config import get_logger
from skilltree.schemas.catalog import Catalog
from skilltree.schemas.graph import GraphData

logger = get_logger(__name__)


class GraphBuildResult(BaseModel):
    """Tagged build result: a graph on success, the catalog error otherwise."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    ok: bool
    graph: Optional[GraphData] = None
    error: Optional[CatalogError] = None


def build_graph(catalog: Catalog) -> GraphData:
    """
    Build the static graph for one catalog snapshot.

    Raises:
        CatalogError: duplicate IDs, dangling prerequisites or a cycle
    """
    validate_catalog(catalog)
    nodes, links = GraphBuilder.build(catalog)
    nodes = ClosureResolver.resolve(nodes)
    nodes = Leveler.assign_levels(nodes)
    graph = GraphData(
        nodes=tuple(nodes),
        links=tuple(links),
        max_level=Leveler.max_level(nodes),
    )
    logger.debug(
        "Built graph",
        extra={"node_count": len(graph.nodes), "link_count": len(graph.links), "max_level": graph.max_level},
    )
    return graph


def try_build_graph(catalog: Catalog) -> GraphBuildResult:
    """Like build_graph, but returns catalog errors instead of raising them."""
    try:
        return GraphBuildResult(ok=True, graph=build_graph(catalog))
    except CatalogError as exc:
        return GraphBuildResult(ok=False, error=exc)
