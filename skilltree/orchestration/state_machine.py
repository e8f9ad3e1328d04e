"""
State machine for course progression.

A course is locked until every transitive prerequisite is completed (or it
is a starting course), then unlocked, then completed by an explicit
request. State is derived from a completed set on every call and never
stored on the shared graph.
"""

from typing import Dict, FrozenSet, Iterable, List, Tuple

from skilltree.engines.graph.queries import get_node
from skilltree.logging_config import get_logger
from skilltree.schemas.graph import GraphData, GraphNode, NodeState
from skilltree.schemas.progress import CompletionError, CompletionResult

logger = get_logger(__name__)


# Valid transitions: (from_state, to_state) -> what triggers them
_TRANSITIONS: Dict[Tuple[NodeState, NodeState], str] = {
    (NodeState.LOCKED, NodeState.UNLOCKED): "prerequisites_completed",
    (NodeState.UNLOCKED, NodeState.COMPLETED): "complete_course",
}


def valid_transitions(from_state: NodeState) -> List[NodeState]:
    """Return list of valid target states from given state."""
    return [t for (f, t) in _TRANSITIONS if f == from_state]


def can_transition(from_state: NodeState, to_state: NodeState) -> bool:
    """Check if from_state -> to_state is a legal move."""
    return (from_state, to_state) in _TRANSITIONS


def is_unlocked(node: GraphNode, completed: Iterable[str]) -> bool:
    """True if ``node`` is a starting course or all its ancestors are completed."""
    if node.is_starting_node:
        return True
    return node.all_prerequisites <= frozenset(completed)


def evaluate_state(node: GraphNode, completed: Iterable[str]) -> NodeState:
    """Derive the state of ``node`` for one completed set."""
    completed_ids = frozenset(completed)
    if node.id in completed_ids:
        return NodeState.COMPLETED
    if is_unlocked(node, completed_ids):
        return NodeState.UNLOCKED
    return NodeState.LOCKED


def evaluate_states(graph: GraphData, completed: Iterable[str]) -> Dict[str, NodeState]:
    """State of every node in ``graph`` keyed by course ID."""
    completed_ids = frozenset(completed)
    return {node.id: evaluate_state(node, completed_ids) for node in graph.nodes}


def complete_course(
    course_id: str,
    completed: Iterable[str],
    graph: GraphData,
) -> CompletionResult:
    """
    Mark ``course_id`` completed if it is currently unlocked.

    Refusals are returned, not raised, so callers can show a message.
    The input set is never modified; on success the result carries
    ``completed | {course_id}``.
    """
    completed_ids: FrozenSet[str] = frozenset(completed)
    node = get_node(course_id, graph)
    if node is None:
        logger.info("Completion refused: unknown course %s", course_id)
        return CompletionResult(
            success=False,
            completed_ids=completed_ids,
            error=CompletionError.COURSE_NOT_FOUND,
            message=f"Course '{course_id}' not found",
        )

    state = evaluate_state(node, completed_ids)
    if state == NodeState.COMPLETED:
        return CompletionResult(success=True, completed_ids=completed_ids)

    if not can_transition(state, NodeState.COMPLETED):
        missing = node.all_prerequisites - completed_ids
        logger.info(
            "Completion refused: prerequisites not met for %s",
            course_id,
            extra={"missing": sorted(missing)},
        )
        return CompletionResult(
            success=False,
            completed_ids=completed_ids,
            error=CompletionError.PREREQUISITES_NOT_MET,
            message=f"Prerequisites not met for '{course_id}'",
            missing_prerequisites=missing,
        )

    return CompletionResult(success=True, completed_ids=completed_ids | {course_id})


def reset_progress() -> FrozenSet[str]:
    """The empty completed set a user starts from."""
    return frozenset()
