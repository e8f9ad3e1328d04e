"""Catalog builders and brute-force oracles shared by the unit tests."""

import random
from typing import Dict, Iterable, List, Optional, Set

from skilltree.schemas.catalog import Catalog, Category, Course, Year


def make_catalog(
    prerequisites: Dict[str, List[str]],
    starting: Iterable[str] = (),
    final: Iterable[str] = (),
    catalog_id: str = "test",
) -> Catalog:
    """Single-year, single-category catalog from a {course_id: [prereq_ids]} map."""
    starting_ids = set(starting)
    final_ids = set(final)
    courses = [
        Course(
            id=course_id,
            title=f"Course {course_id}",
            prerequisites=list(prereqs),
            is_starting_node=course_id in starting_ids,
            is_final_node=course_id in final_ids,
        )
        for course_id, prereqs in prerequisites.items()
    ]
    return Catalog(
        id=catalog_id,
        program_name="Test Program",
        years=[
            Year(
                id="y1",
                number=1,
                title="Year 1",
                categories=[Category(id="cat1", name="Core", courses=courses)],
            )
        ],
    )


def random_dag(seed: int, size: int = 25, max_prereqs: int = 3) -> Dict[str, List[str]]:
    """
    Random acyclic prerequisite map.

    Courses only depend on lower-numbered courses, and the result is
    shuffled so catalog order is not a topological order.
    """
    rng = random.Random(seed)
    ids = [f"c{i}" for i in range(size)]
    prereqs: Dict[str, List[str]] = {}
    for i, course_id in enumerate(ids):
        k = rng.randint(0, min(i, max_prereqs))
        prereqs[course_id] = rng.sample(ids[:i], k)
    items = list(prereqs.items())
    rng.shuffle(items)
    return dict(items)


def reachable(prerequisites: Dict[str, List[str]], course_id: str, seen: Optional[Set[str]] = None) -> Set[str]:
    """Brute-force ancestor set by depth-first search."""
    seen = set() if seen is None else seen
    for prereq_id in prerequisites[course_id]:
        if prereq_id not in seen:
            seen.add(prereq_id)
            reachable(prerequisites, prereq_id, seen)
    return seen
