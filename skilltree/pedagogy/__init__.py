"""
Pedagogy layer - catalog authoring and the host-facing curriculum engine.
"""

from skilltree.pedagogy.catalog_editor import CatalogLookupError
from skilltree.pedagogy.curriculum_engine import CurriculumEngine, load_catalog
from skilltree.pedagogy.default_catalog import default_catalog

__all__ = [
    "CatalogLookupError",
    "CurriculumEngine",
    "load_catalog",
    "default_catalog",
]
