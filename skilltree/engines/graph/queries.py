"""
Graph Query Facade - Read-only helpers over a built GraphData.
"""

import math
from typing import AbstractSet, Dict, Iterable, List, Optional

from skilltree.schemas.graph import GraphData, GraphNode


def get_node(course_id: str, graph: GraphData) -> Optional[GraphNode]:
    """Return the node for ``course_id``, or None."""
    for node in graph.nodes:
        if node.id == course_id:
            return node
    return None


def get_direct_prerequisites(course_id: str, graph: GraphData) -> List[str]:
    """IDs of courses linked directly into ``course_id``."""
    return [link.source for link in graph.links if link.target == course_id]


def get_direct_dependents(course_id: str, graph: GraphData) -> List[str]:
    """IDs of courses that list ``course_id`` as a direct prerequisite."""
    return [link.target for link in graph.links if link.source == course_id]


def get_progress_ratio(graph: GraphData, completed: Iterable[str]) -> float:
    """Fraction of graph courses present in ``completed``; 0.0 for an empty graph."""
    if not graph.nodes:
        return 0.0
    completed_ids: AbstractSet[str] = frozenset(completed)
    done = sum(1 for node in graph.nodes if node.id in completed_ids)
    return done / len(graph.nodes)


def get_completion_percentage(graph: GraphData, completed: Iterable[str]) -> int:
    """Progress ratio as a whole percentage, halves rounded up."""
    return math.floor(get_progress_ratio(graph, completed) * 100 + 0.5)


def get_nodes_by_level(graph: GraphData) -> Dict[int, List[GraphNode]]:
    """Group nodes by level (0..max_level), keeping node order within a level."""
    groups: Dict[int, List[GraphNode]] = {level: [] for level in range(graph.max_level + 1)}
    for node in graph.nodes:
        groups[node.level].append(node)
    return groups
