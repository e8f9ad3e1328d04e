"""
Leveler - Topological depth for every node.
"""

from typing import Dict, List, Optional

from skilltree.engines.graph.errors import CyclicDependencyError, UnresolvedPrerequisiteError
from skilltree.logging_config import get_logger
from skilltree.schemas.graph import GraphNode

logger = get_logger(__name__)


class Leveler:
    """
    Assigns level = 1 + max(level of direct prerequisites).

    Starting nodes are pinned at 0. Other nodes are re-evaluated in full
    passes until a pass changes nothing; on an acyclic graph that takes at
    most len(nodes) passes, so a node still changing after len(nodes) + 1
    passes is on a cycle.
    """

    @classmethod
    def assign_levels(cls, nodes: List[GraphNode]) -> List[GraphNode]:
        """Return copies of ``nodes`` with level populated."""
        levels: Dict[str, int] = {node.id: 0 for node in nodes}
        unresolved = [(node.id, p) for node in nodes for p in node.prerequisites if p not in levels]
        if unresolved:
            raise UnresolvedPrerequisiteError(unresolved)
        max_passes = len(nodes) + 1

        for pass_number in range(1, max_passes + 1):
            last_changed: Optional[str] = None
            for node in nodes:
                if node.is_starting_node:
                    continue
                if node.prerequisites:
                    new_level = 1 + max(levels[p] for p in node.prerequisites)
                else:
                    new_level = 0
                if new_level != levels[node.id]:
                    levels[node.id] = new_level
                    last_changed = node.id
            if last_changed is None:
                logger.debug("Levels stable after %d passes", pass_number)
                break
        else:
            raise CyclicDependencyError(last_changed, stage="leveling")

        return [node.model_copy(update={"level": levels[node.id]}) for node in nodes]

    @staticmethod
    def max_level(nodes: List[GraphNode]) -> int:
        """Highest level over ``nodes``; 0 for an empty graph."""
        return max((node.level for node in nodes), default=0)
