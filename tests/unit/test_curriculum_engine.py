"""Unit tests for the curriculum engine service."""

import json

import pytest

from skilltree.config import Settings
from skilltree.engines.graph.errors import CyclicDependencyError
from skilltree.pedagogy.catalog_editor import remove_course
from skilltree.pedagogy.curriculum_engine import CurriculumEngine, load_catalog
from skilltree.schemas.graph import NodeState
from skilltree.schemas.progress import CompletionError
from tests.helpers import make_catalog


CATALOG_DOCUMENT = {
    "id": "doc-1",
    "programName": "Tiny Program",
    "years": [
        {
            "id": "y1",
            "number": 1,
            "title": "Basics",
            "categories": [
                {
                    "id": "cat1",
                    "name": "Core",
                    "courses": [
                        {"id": "intro", "title": "Intro", "description": "", "prerequisites": [], "isStartingNode": True},
                        {"id": "next", "title": "Next", "description": "", "prerequisites": ["intro"], "isFinalNode": True},
                    ],
                }
            ],
        }
    ],
}


@pytest.fixture
def engine(linear_catalog) -> CurriculumEngine:
    return CurriculumEngine(linear_catalog)


class TestCurriculumEngine:
    """Tests for CurriculumEngine."""

    def test_builds_on_init(self, engine):
        assert engine.graph.max_level == 2
        assert engine.catalog.program_name == "Test Program"

    def test_per_user_queries(self, engine):
        assert engine.evaluate_state("C", {"A"}) == NodeState.LOCKED
        assert engine.evaluate_state("missing", set()) is None
        assert engine.evaluate_states({"A"})["B"] == NodeState.UNLOCKED
        assert [n.id for n in engine.available_courses({"A"})] == ["B"]
        assert engine.progress_ratio({"A", "B", "C"}) == 1.0
        assert engine.direct_prerequisites("C") == ["B"]
        assert engine.direct_dependents("A") == ["B"]
        assert engine.get_node("A").is_starting_node is True
        assert len(engine.node_views(set())) == 3

    def test_complete_course(self, engine):
        result = engine.complete_course("C", {"A"})
        assert result.error == CompletionError.PREREQUISITES_NOT_MET
        result = engine.complete_course("B", {"A"})
        assert result.completed_ids == {"A", "B"}

    def test_rebuild_replaces_graph(self, engine, linear_catalog):
        """A catalog change yields a new graph; the old one is untouched."""
        old_graph = engine.graph
        engine.set_catalog(remove_course(linear_catalog, "B"))
        assert engine.graph is not old_graph
        assert [n.id for n in engine.graph.nodes] == ["A", "C"]
        assert engine.graph.max_level == 0
        assert [n.id for n in old_graph.nodes] == ["A", "B", "C"]

    def test_rejected_catalog_keeps_current_graph(self, engine):
        """A failed rebuild leaves the engine serving the previous graph."""
        old_graph = engine.graph
        with pytest.raises(CyclicDependencyError):
            engine.set_catalog(make_catalog({"A": ["B"], "B": ["A"]}))
        assert engine.graph is old_graph
        assert engine.catalog.program_name == "Test Program"

    def test_catalog_copy_is_private(self, linear_catalog):
        """Editing the caller's catalog afterwards does not leak in."""
        engine = CurriculumEngine(linear_catalog)
        linear_catalog.program_name = "Changed"
        assert engine.catalog.program_name == "Test Program"


class TestCatalogLoading:
    """Tests for catalog files and settings."""

    def test_load_catalog(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(CATALOG_DOCUMENT), encoding="utf-8")
        catalog = load_catalog(path)
        assert catalog.program_name == "Tiny Program"
        course = catalog.years[0].categories[0].courses[0]
        assert course.is_starting_node is True

    def test_from_settings_with_path(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(CATALOG_DOCUMENT), encoding="utf-8")
        engine = CurriculumEngine.from_settings(Settings(catalog_path=str(path)))
        assert [n.id for n in engine.graph.nodes] == ["intro", "next"]
        assert engine.graph.nodes[1].is_final_node is True

    def test_from_settings_default(self):
        engine = CurriculumEngine.from_settings(Settings(catalog_path=None))
        assert engine.graph.max_level == 8
        assert len(engine.graph.nodes) == 23
