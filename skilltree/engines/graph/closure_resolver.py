"""
Transitive Closure Resolver - Full ancestor set for every node.
"""

from typing import Dict, List, Set

from skilltree.engines.graph.errors import CyclicDependencyError, UnresolvedPrerequisiteError
from skilltree.logging_config import get_logger
from skilltree.schemas.graph import GraphNode

logger = get_logger(__name__)


class ClosureResolver:
    """
    Computes all_prerequisites by iterative relaxation.

    Each pass unions every direct prerequisite's known set into the
    dependent's set; passes repeat until one changes nothing. A node that
    ends up in its own closure sits on a cycle.
    """

    @classmethod
    def resolve(cls, nodes: List[GraphNode]) -> List[GraphNode]:
        """Return copies of ``nodes`` with all_prerequisites populated."""
        known: Dict[str, Set[str]] = {node.id: set(node.prerequisites) for node in nodes}
        unresolved = [(node.id, p) for node in nodes for p in node.prerequisites if p not in known]
        if unresolved:
            raise UnresolvedPrerequisiteError(unresolved)
        max_passes = len(nodes) + 1

        for pass_number in range(1, max_passes + 1):
            last_changed = None
            for node in nodes:
                current = known[node.id]
                before = len(current)
                for prereq_id in node.prerequisites:
                    current |= known[prereq_id]
                if len(current) != before:
                    last_changed = node.id
            if last_changed is None:
                logger.debug("Closure reached fixed point after %d passes", pass_number)
                break
        else:
            raise CyclicDependencyError(last_changed, stage="closure")

        for node in nodes:
            if node.id in known[node.id]:
                raise CyclicDependencyError(node.id, stage="closure")

        return [
            node.model_copy(update={"all_prerequisites": frozenset(known[node.id])})
            for node in nodes
        ]
