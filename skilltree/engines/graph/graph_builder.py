"""
Graph Builder - Flattens a catalog into graph nodes and direct links.
"""

from collections import Counter
from typing import List, Tuple

from skilltree.engines.graph.errors import DuplicateCourseError, UnresolvedPrerequisiteError
from skilltree.logging_config import get_logger
from skilltree.schemas.catalog import Catalog
from skilltree.schemas.graph import GraphLink, GraphNode

logger = get_logger(__name__)


def validate_catalog(catalog: Catalog) -> None:
    """
    Check catalog integrity before any graph is built.

    Raises:
        DuplicateCourseError: two courses share an ID
        UnresolvedPrerequisiteError: a prerequisite ID matches no course
    """
    counts = Counter(
        course.id
        for year in catalog.years
        for category in year.categories
        for course in category.courses
    )
    duplicates = [course_id for course_id, n in counts.items() if n > 1]
    if duplicates:
        raise DuplicateCourseError(duplicates)

    unresolved = [
        (course.id, prereq_id)
        for year in catalog.years
        for category in year.categories
        for course in category.courses
        for prereq_id in course.prerequisites
        if prereq_id not in counts
    ]
    if unresolved:
        raise UnresolvedPrerequisiteError(unresolved)


class GraphBuilder:
    """
    Emits one GraphNode per course and one GraphLink per prerequisite.

    Levels and transitive closures are left at their defaults; later
    stages fill them in.
    """

    @classmethod
    def build(cls, catalog: Catalog) -> Tuple[List[GraphNode], List[GraphLink]]:
        nodes: List[GraphNode] = []
        links: List[GraphLink] = []

        for year in catalog.years:
            for category in year.categories:
                for course in category.courses:
                    nodes.append(
                        GraphNode(
                            id=course.id,
                            name=course.title,
                            group=category.name,
                            year=year.number,
                            description=course.description,
                            is_starting_node=course.is_starting_node,
                            is_final_node=course.is_final_node,
                            prerequisites=tuple(course.prerequisites),
                        )
                    )
                    for prereq_id in course.prerequisites:
                        links.append(GraphLink(source=prereq_id, target=course.id))

        logger.debug("Flattened catalog: %d nodes, %d links", len(nodes), len(links))
        return nodes, links
