"""
Structural catalog errors, raised eagerly at graph build time.
"""

from typing import Iterable, List, Tuple


class CatalogError(ValueError):
    """Base class for catalogs that cannot be turned into a graph."""


class UnresolvedPrerequisiteError(CatalogError):
    """One or more courses list a prerequisite ID absent from the catalog."""

    def __init__(self, unresolved: Iterable[Tuple[str, str]]):
        self.unresolved: List[Tuple[str, str]] = list(unresolved)
        details = ", ".join(f"{course} -> {missing}" for course, missing in self.unresolved)
        super().__init__(f"Unresolved prerequisite references: {details}")


class DuplicateCourseError(CatalogError):
    """Two or more courses share an ID."""

    def __init__(self, course_ids: Iterable[str]):
        self.course_ids: List[str] = sorted(set(course_ids))
        super().__init__(f"Duplicate course IDs: {', '.join(self.course_ids)}")


class CyclicDependencyError(CatalogError):
    """The prerequisite relation contains a cycle."""

    def __init__(self, course_id: str, stage: str):
        self.course_id = course_id
        self.stage = stage
        super().__init__(
            f"Cyclic prerequisites detected during {stage} at course '{course_id}'"
        )
