"""
Catalog editor - Authoring operations over a catalog document.

Every operation returns a new Catalog and leaves its input untouched, so a
graph built from the old catalog stays valid until the host rebuilds.
Removing a course (directly, or with its category or year) also strips it
from every remaining prerequisite list.
"""

import uuid
from typing import Any, Iterable, Iterator, List, Optional, Set, Tuple

from pydantic import BaseModel

from skilltree.schemas.catalog import Catalog, Category, Course, Year


class CatalogLookupError(KeyError):
    """A year, category or course ID was not found in the catalog."""


class AvailablePrerequisite(BaseModel):
    """A course that may be offered as a prerequisite choice."""

    id: str
    title: str
    year_number: int


def iter_courses(catalog: Catalog) -> Iterator[Tuple[Year, Category, Course]]:
    """Yield (year, category, course) for every course in catalog order."""
    for year in catalog.years:
        for category in year.categories:
            for course in category.courses:
                yield year, category, course


def _find_year(catalog: Catalog, year_id: str) -> Year:
    for year in catalog.years:
        if year.id == year_id:
            return year
    raise CatalogLookupError(f"Year '{year_id}' not found")


def _find_category(year: Year, category_id: str) -> Category:
    for category in year.categories:
        if category.id == category_id:
            return category
    raise CatalogLookupError(f"Category '{category_id}' not found in year '{year.id}'")


def _find_course(catalog: Catalog, course_id: str) -> Tuple[Category, Course]:
    for _, category, course in iter_courses(catalog):
        if course.id == course_id:
            return category, course
    raise CatalogLookupError(f"Course '{course_id}' not found")


def _strip_prerequisites(catalog: Catalog, removed_ids: Iterable[str]) -> None:
    removed: Set[str] = set(removed_ids)
    for _, _, course in iter_courses(catalog):
        course.prerequisites = [p for p in course.prerequisites if p not in removed]


def add_year(catalog: Catalog, title: Optional[str] = None, year_id: Optional[str] = None) -> Catalog:
    """Append an empty year numbered after the last one."""
    updated = catalog.model_copy(deep=True)
    number = len(updated.years) + 1
    updated.years.append(
        Year(
            id=year_id or str(uuid.uuid4()),
            number=number,
            title=title or f"Year {number}",
        )
    )
    return updated


def add_category(
    catalog: Catalog,
    year_id: str,
    name: str = "New Category",
    category_id: Optional[str] = None,
) -> Catalog:
    """Append an empty category to a year."""
    updated = catalog.model_copy(deep=True)
    _find_year(updated, year_id).categories.append(
        Category(id=category_id or str(uuid.uuid4()), name=name)
    )
    return updated


def add_course(
    catalog: Catalog,
    year_id: str,
    category_id: str,
    title: str = "New Course",
    description: str = "Course description",
    prerequisites: Optional[List[str]] = None,
    course_id: Optional[str] = None,
) -> Catalog:
    """Append a course to a category."""
    updated = catalog.model_copy(deep=True)
    category = _find_category(_find_year(updated, year_id), category_id)
    category.courses.append(
        Course(
            id=course_id or str(uuid.uuid4()),
            title=title,
            description=description,
            prerequisites=list(prerequisites or []),
        )
    )
    return updated


def update_course(catalog: Catalog, course_id: str, **changes: Any) -> Catalog:
    """
    Change fields of one course.

    The course ID itself is immutable; rename by removing and re-adding.
    """
    if "id" in changes:
        raise ValueError("Course IDs cannot be changed")
    unknown = set(changes) - set(Course.model_fields)
    if unknown:
        raise ValueError(f"Unknown course fields: {', '.join(sorted(unknown))}")

    updated = catalog.model_copy(deep=True)
    category, course = _find_course(updated, course_id)
    replacement = Course.model_validate({**course.model_dump(), **changes})
    category.courses = [replacement if c.id == course_id else c for c in category.courses]
    return updated


def remove_year(catalog: Catalog, year_id: str) -> Catalog:
    """Drop a year, renumber the rest from 1, and strip references to its courses."""
    year = _find_year(catalog, year_id)
    removed = [course.id for category in year.categories for course in category.courses]

    updated = catalog.model_copy(deep=True)
    updated.years = [y for y in updated.years if y.id != year_id]
    for index, remaining in enumerate(updated.years, start=1):
        remaining.number = index
    _strip_prerequisites(updated, removed)
    return updated


def remove_category(catalog: Catalog, year_id: str, category_id: str) -> Catalog:
    """Drop a category and strip references to its courses."""
    category = _find_category(_find_year(catalog, year_id), category_id)
    removed = [course.id for course in category.courses]

    updated = catalog.model_copy(deep=True)
    year = _find_year(updated, year_id)
    year.categories = [c for c in year.categories if c.id != category_id]
    _strip_prerequisites(updated, removed)
    return updated


def remove_course(catalog: Catalog, course_id: str) -> Catalog:
    """Drop a course and strip it from every prerequisite list."""
    updated = catalog.model_copy(deep=True)
    category, _ = _find_course(updated, course_id)
    category.courses = [c for c in category.courses if c.id != course_id]
    _strip_prerequisites(updated, [course_id])
    return updated


def toggle_prerequisite(
    catalog: Catalog,
    course_id: str,
    prerequisite_id: str,
    checked: bool,
) -> Catalog:
    """Add (checked) or remove (unchecked) one direct prerequisite."""
    if checked and course_id == prerequisite_id:
        raise ValueError("A course cannot be its own prerequisite")
    if checked:
        _find_course(catalog, prerequisite_id)
    updated = catalog.model_copy(deep=True)
    _, course = _find_course(updated, course_id)
    if checked:
        if prerequisite_id not in course.prerequisites:
            course.prerequisites.append(prerequisite_id)
    else:
        course.prerequisites = [p for p in course.prerequisites if p != prerequisite_id]
    return updated


def get_available_prerequisites(catalog: Catalog, course_id: str) -> List[AvailablePrerequisite]:
    """Every course except ``course_id``, for building a prerequisite picker."""
    return [
        AvailablePrerequisite(id=course.id, title=course.title, year_number=year.number)
        for year, _, course in iter_courses(catalog)
        if course.id != course_id
    ]
