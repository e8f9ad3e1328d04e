"""
Pydantic schemas for catalog input, graph output and progression results.
"""

from skilltree.schemas.catalog import Catalog, Category, Course, Year
from skilltree.schemas.graph import (
    GraphData,
    GraphLink,
    GraphNode,
    NodeState,
    NodeView,
)
from skilltree.schemas.progress import CompletionError, CompletionResult

__all__ = [
    # Catalog
    "Catalog",
    "Category",
    "Course",
    "Year",
    # Graph
    "GraphData",
    "GraphLink",
    "GraphNode",
    "NodeState",
    "NodeView",
    # Progression
    "CompletionError",
    "CompletionResult",
]
