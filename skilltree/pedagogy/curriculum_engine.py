"""
Curriculum engine - Catalog-backed prerequisite graph and progression.

Holds one catalog snapshot and the GraphData built from it. Catalog changes
build a complete new graph; the previous instance is never mutated, so
readers holding it stay consistent.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from skilltree.config import Settings
from skilltree.engines.graph.errors import CatalogError
from skilltree.engines.graph.pipeline import build_graph
from skilltree.engines.graph.queries import (
    get_direct_dependents,
    get_direct_prerequisites,
    get_node,
    get_progress_ratio,
)
from skilltree.logging_config import catalog_context, get_logger
from skilltree.orchestration.progress_view import build_node_views, get_available_courses
from skilltree.orchestration.state_machine import complete_course, evaluate_state, evaluate_states
from skilltree.pedagogy.default_catalog import default_catalog
from skilltree.schemas.catalog import Catalog
from skilltree.schemas.graph import GraphData, GraphNode, NodeState, NodeView
from skilltree.schemas.progress import CompletionResult

logger = get_logger(__name__)


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Parse a JSON catalog document."""
    return Catalog.model_validate_json(Path(path).read_text(encoding="utf-8"))


class CurriculumEngine:
    """Prerequisite DAG for one catalog, queried per user completed set."""

    def __init__(self, catalog: Catalog):
        self._catalog: Catalog
        self._graph: GraphData
        self.set_catalog(catalog)

    @classmethod
    def from_settings(cls, settings: Settings) -> "CurriculumEngine":
        """Load the configured catalog file, or the bundled default."""
        if settings.catalog_path:
            logger.info("Loading catalog from %s", settings.catalog_path)
            return cls(load_catalog(settings.catalog_path))
        return cls(default_catalog())

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def graph(self) -> GraphData:
        return self._graph

    def set_catalog(self, catalog: Catalog) -> GraphData:
        """
        Rebuild the graph for a new catalog snapshot.

        The new graph replaces the current one only if the build succeeds.

        Raises:
            CatalogError: the catalog cannot form a DAG
        """
        with catalog_context(catalog.id or None):
            try:
                graph = build_graph(catalog)
            except CatalogError as exc:
                logger.warning("Catalog rejected: %s", exc)
                raise
            self._catalog = catalog.model_copy(deep=True)
            self._graph = graph
            logger.info(
                "Graph rebuilt: %d courses, %d links, max level %d",
                len(graph.nodes),
                len(graph.links),
                graph.max_level,
            )
        return graph

    # Per-user queries

    def get_node(self, course_id: str) -> Optional[GraphNode]:
        return get_node(course_id, self._graph)

    def evaluate_state(self, course_id: str, completed: Iterable[str]) -> Optional[NodeState]:
        """State of one course, or None if the course does not exist."""
        node = get_node(course_id, self._graph)
        if node is None:
            return None
        return evaluate_state(node, completed)

    def evaluate_states(self, completed: Iterable[str]) -> Dict[str, NodeState]:
        return evaluate_states(self._graph, completed)

    def complete_course(self, course_id: str, completed: Iterable[str]) -> CompletionResult:
        with catalog_context(self._catalog.id or None):
            return complete_course(course_id, completed, self._graph)

    def node_views(self, completed: Iterable[str]) -> List[NodeView]:
        return build_node_views(self._graph, completed)

    def available_courses(self, completed: Iterable[str]) -> List[GraphNode]:
        return get_available_courses(self._graph, completed)

    def progress_ratio(self, completed: Iterable[str]) -> float:
        return get_progress_ratio(self._graph, completed)

    def direct_prerequisites(self, course_id: str) -> List[str]:
        return get_direct_prerequisites(course_id, self._graph)

    def direct_dependents(self, course_id: str) -> List[str]:
        return get_direct_dependents(course_id, self._graph)
