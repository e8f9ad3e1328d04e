"""
Pydantic schemas for the curriculum catalog (years -> categories -> courses).
"""

from typing import List

from skilltree.schemas.common import CamelModel


class Course(CamelModel):
    """A course and the IDs of its direct prerequisites."""

    id: str
    title: str
    description: str = ""
    prerequisites: List[str] = []
    is_starting_node: bool = False
    is_final_node: bool = False


class Category(CamelModel):
    """Organizational grouping of courses within a year."""

    id: str
    name: str
    courses: List[Course] = []


class Year(CamelModel):
    """A program year."""

    id: str
    number: int
    title: str
    categories: List[Category] = []


class Catalog(CamelModel):
    """The whole curriculum document."""

    id: str = ""
    program_name: str = ""
    years: List[Year] = []
