"""Unit tests for catalog authoring operations."""

import pytest

from skilltree.engines.graph.pipeline import build_graph
from skilltree.pedagogy.catalog_editor import (
    CatalogLookupError,
    add_category,
    add_course,
    add_year,
    get_available_prerequisites,
    iter_courses,
    remove_category,
    remove_course,
    remove_year,
    toggle_prerequisite,
    update_course,
)


def _course(catalog, course_id):
    return next(c for _, _, c in iter_courses(catalog) if c.id == course_id)


def _course_ids(catalog):
    return {c.id for _, _, c in iter_courses(catalog)}


class TestAddOperations:
    """Tests for adding years, categories and courses."""

    def test_add_year_numbers_sequentially(self, sample_catalog):
        updated = add_year(sample_catalog, year_id="y3")
        assert updated.years[-1].number == 3
        assert updated.years[-1].title == "Year 3"
        assert len(sample_catalog.years) == 2

    def test_add_category_and_course(self, sample_catalog):
        updated = add_category(sample_catalog, "y2", name="Electives", category_id="cat11")
        updated = add_course(
            updated, "y2", "cat11", title="Compilers", prerequisites=["data-structures"], course_id="compilers"
        )
        course = _course(updated, "compilers")
        assert course.title == "Compilers"
        assert course.prerequisites == ["data-structures"]
        graph = build_graph(updated)
        assert next(n for n in graph.nodes if n.id == "compilers").group == "Electives"

    def test_generated_ids_are_unique(self, sample_catalog):
        updated = add_year(add_year(sample_catalog))
        assert updated.years[-1].id != updated.years[-2].id

    def test_unknown_year(self, sample_catalog):
        with pytest.raises(CatalogLookupError):
            add_category(sample_catalog, "y99")


class TestRemoveOperations:
    """Tests for removals and prerequisite cleanup."""

    def test_remove_course_strips_references(self, sample_catalog):
        updated = remove_course(sample_catalog, "python")
        assert "python" not in _course_ids(updated)
        assert _course(updated, "javascript").prerequisites == ["web-dev-basics"]
        assert "python" in _course_ids(sample_catalog)
        build_graph(updated)

    def test_remove_category(self, sample_catalog):
        updated = remove_category(sample_catalog, "y1", "cat5")
        assert "discrete-math" not in _course_ids(updated)
        assert _course(updated, "data-structures").prerequisites == ["c-programming"]
        build_graph(updated)

    def test_remove_year_renumbers(self, sample_catalog):
        updated = remove_year(sample_catalog, "y1")
        assert [(y.id, y.number) for y in updated.years] == [("y2", 1)]
        assert _course(updated, "devops").prerequisites == ["system-admin", "backend"]
        assert _course(updated, "system-admin").prerequisites == ["network-programming"]
        build_graph(updated)

    def test_remove_unknown_course(self, sample_catalog):
        with pytest.raises(CatalogLookupError):
            remove_course(sample_catalog, "basket-weaving")


class TestPrerequisiteEditing:
    """Tests for prerequisite toggles and the picker list."""

    def test_toggle_on_and_off(self, linear_catalog):
        updated = toggle_prerequisite(linear_catalog, "C", "A", True)
        assert _course(updated, "C").prerequisites == ["B", "A"]
        again = toggle_prerequisite(updated, "C", "A", True)
        assert _course(again, "C").prerequisites == ["B", "A"]
        removed = toggle_prerequisite(again, "C", "B", False)
        assert _course(removed, "C").prerequisites == ["A"]

    def test_toggle_unknown_prerequisite(self, linear_catalog):
        with pytest.raises(CatalogLookupError):
            toggle_prerequisite(linear_catalog, "C", "ghost", True)

    def test_toggle_self_rejected(self, linear_catalog):
        """A course cannot be offered as its own prerequisite."""
        with pytest.raises(ValueError):
            toggle_prerequisite(linear_catalog, "A", "A", True)
        assert _course(linear_catalog, "A").prerequisites == []

    def test_available_prerequisites(self, linear_catalog):
        options = get_available_prerequisites(linear_catalog, "B")
        assert [(o.id, o.year_number) for o in options] == [("A", 1), ("C", 1)]


class TestUpdateCourse:
    """Tests for update_course."""

    def test_update_fields(self, linear_catalog):
        updated = update_course(linear_catalog, "B", title="Intermediate", is_final_node=True)
        course = _course(updated, "B")
        assert course.title == "Intermediate"
        assert course.is_final_node is True
        assert _course(linear_catalog, "B").title == "Course B"

    def test_id_is_immutable(self, linear_catalog):
        with pytest.raises(ValueError):
            update_course(linear_catalog, "B", id="B2")

    def test_unknown_field(self, linear_catalog):
        with pytest.raises(ValueError):
            update_course(linear_catalog, "B", colour="red")
