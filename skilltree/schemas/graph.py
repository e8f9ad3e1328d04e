"""
Pydantic schemas for the derived prerequisite graph.

Graph models are frozen: a GraphData built from one catalog snapshot may be
shared by any number of readers. Per-user state lives in NodeView.
"""

from enum import Enum
from typing import FrozenSet, List, Tuple

from skilltree.schemas.common import CamelModel, FrozenCamelModel


class NodeState(str, Enum):
    """Runtime state of a course for one completed set."""
    LOCKED = "locked"
    UNLOCKED = "unlocked"
    COMPLETED = "completed"


class GraphNode(FrozenCamelModel):
    """One course in the graph."""

    id: str
    name: str
    group: str
    year: int
    description: str = ""
    is_starting_node: bool = False
    is_final_node: bool = False
    prerequisites: Tuple[str, ...] = ()

    # Filled by the closure resolver and the leveler
    all_prerequisites: FrozenSet[str] = frozenset()
    level: int = 0


class GraphLink(FrozenCamelModel):
    """Edge from a prerequisite (source) to its dependent (target)."""

    source: str
    target: str
    is_direct_prerequisite: bool = True


class GraphData(FrozenCamelModel):
    """Complete static graph for one catalog snapshot."""

    nodes: Tuple[GraphNode, ...] = ()
    links: Tuple[GraphLink, ...] = ()
    max_level: int = 0


class NodeView(CamelModel):
    """A node plus the state derived from one user's completed set."""

    id: str
    name: str
    group: str
    year: int
    description: str = ""
    is_starting_node: bool = False
    is_final_node: bool = False
    prerequisites: List[str] = []
    all_prerequisites: List[str] = []
    level: int = 0
    is_unlocked: bool
    is_completed: bool
    state: NodeState

