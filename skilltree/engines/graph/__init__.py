"""
Graph Engine - Catalog to prerequisite DAG.

Stages:
1. Graph Builder - flatten years/categories/courses into nodes and links
2. Transitive Closure Resolver - all_prerequisites per node
3. Leveler - topological depth per node, max_level per graph

Both fixed-point stages are bounded by the node count and raise
CyclicDependencyError instead of looping on a cyclic catalog.
"""

from skilltree.engines.graph.closure_resolver import ClosureResolver
from skilltree.engines.graph.errors import (
    CatalogError,
    CyclicDependencyError,
    DuplicateCourseError,
    UnresolvedPrerequisiteError,
)
from skilltree.engines.graph.graph_builder import GraphBuilder, validate_catalog
from skilltree.engines.graph.leveler import Leveler
from skilltree.engines.graph.pipeline import GraphBuildResult, build_graph, try_build_graph
from skilltree.engines.graph.queries import (
    get_completion_percentage,
    get_direct_dependents,
    get_direct_prerequisites,
    get_node,
    get_nodes_by_level,
    get_progress_ratio,
)

__all__ = [
    "ClosureResolver",
    "CatalogError",
    "CyclicDependencyError",
    "DuplicateCourseError",
    "UnresolvedPrerequisiteError",
    "GraphBuilder",
    "validate_catalog",
    "Leveler",
    "GraphBuildResult",
    "build_graph",
    "try_build_graph",
    "get_completion_percentage",
    "get_direct_dependents",
    "get_direct_prerequisites",
    "get_node",
    "get_nodes_by_level",
    "get_progress_ratio",
]
