"""
Progression orchestration - per-user course state over a shared graph.
"""

from skilltree.orchestration.progress_view import (
    build_node_views,
    get_available_courses,
    get_unlocked_course_ids,
)
from skilltree.orchestration.state_machine import (
    can_transition,
    complete_course,
    evaluate_state,
    evaluate_states,
    is_unlocked,
    reset_progress,
    valid_transitions,
)

__all__ = [
    "build_node_views",
    "get_available_courses",
    "get_unlocked_course_ids",
    "can_transition",
    "complete_course",
    "evaluate_state",
    "evaluate_states",
    "is_unlocked",
    "reset_progress",
    "valid_transitions",
]
