"""
Per-request progress views.

NodeView records pair each shared GraphNode with the state derived from one
user's completed set; build them per request and discard them afterwards.
"""

from typing import Iterable, List

from skilltree.orchestration.state_machine import evaluate_state, is_unlocked
from skilltree.schemas.graph import GraphData, GraphNode, NodeState, NodeView


def build_node_views(graph: GraphData, completed: Iterable[str]) -> List[NodeView]:
    """One NodeView per node, in graph order."""
    completed_ids = frozenset(completed)
    views = []
    for node in graph.nodes:
        state = evaluate_state(node, completed_ids)
        views.append(
            NodeView(
                id=node.id,
                name=node.name,
                group=node.group,
                year=node.year,
                description=node.description,
                is_starting_node=node.is_starting_node,
                is_final_node=node.is_final_node,
                prerequisites=list(node.prerequisites),
                all_prerequisites=sorted(node.all_prerequisites),
                level=node.level,
                is_unlocked=is_unlocked(node, completed_ids),
                is_completed=state == NodeState.COMPLETED,
                state=state,
            )
        )
    return views


def get_unlocked_course_ids(graph: GraphData, completed: Iterable[str]) -> List[str]:
    """IDs of every unlocked course, completed ones included."""
    completed_ids = frozenset(completed)
    return [node.id for node in graph.nodes if is_unlocked(node, completed_ids)]


def get_available_courses(graph: GraphData, completed: Iterable[str]) -> List[GraphNode]:
    """Courses the user can take next: unlocked and not yet completed."""
    completed_ids = frozenset(completed)
    return [
        node
        for node in graph.nodes
        if evaluate_state(node, completed_ids) == NodeState.UNLOCKED
    ]
