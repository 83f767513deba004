"""Tests for filter rule evaluation"""
from datetime import date

import pytest

from school_admin.models import Group, Student
from school_admin.schemas.filters import GroupFilters, StudentFilters
from school_admin.services.group_service import GroupService, has_room
from school_admin.services.student_service import StudentService
from school_admin.utils.filtering import (
    Contains,
    Equals,
    Flag,
    Predicate,
    TextSearch,
    WhenTrue,
    apply_filters,
    matches,
)


def make_student(first_name: str, last_name: str, **overrides) -> Student:
    data = {
        "first_name": first_name,
        "last_name": last_name,
        "date_of_birth": date(2015, 1, 1),
        "grade": "Primero",
        "section": "A",
        "address": "Calle 1",
    }
    data.update(overrides)
    return Student(**data)


@pytest.fixture
def ana() -> Student:
    return make_student("Ana", "García", email="ana.garcia@email.com")


@pytest.fixture
def carlos() -> Student:
    return make_student("Carlos", "López", grade="Segundo", section="B")


class TestTextSearch:
    def test_matches_any_configured_field(self, ana, carlos):
        rules = StudentService.rules
        result = apply_filters([ana, carlos], StudentFilters(search_text="ana"), rules)
        assert result == [ana]

    def test_is_case_insensitive(self, ana):
        assert TextSearch(("last_name",))(ana, "GARC")

    def test_skips_missing_fields(self, carlos):
        # carlos has no email
        assert not TextSearch(("email",))(carlos, "carlos")
        assert TextSearch(("email", "first_name"))(carlos, "carlos")

    def test_blank_search_is_no_constraint(self, ana, carlos):
        filters = StudentFilters(search_text="   ")
        assert filters.search_text is None
        assert apply_filters([ana, carlos], filters, StudentService.rules) == [ana, carlos]

    def test_non_string_value_never_matches(self, ana):
        assert not TextSearch(("first_name",))(ana, 42)


class TestFieldRules:
    def test_equals_case_insensitive(self, ana):
        assert Equals("grade", case_sensitive=False)(ana, "primero")
        assert not Equals("grade")(ana, "primero")

    def test_equals_missing_attribute_does_not_match(self, carlos):
        assert not Equals("email")(carlos, "x@example.com")

    def test_equals_unwraps_enums(self):
        group = Group(academic_level="Primaria", grade="Primero", name="A",
                      academic_year="2024-2025", max_students=25)
        assert Equals("academic_level")(group, "Primaria")

    def test_contains(self, ana):
        assert Contains("grade")(ana, "rim")
        assert not Contains("grade")(ana, "seg")

    def test_flag_is_strict(self, ana):
        assert Flag("is_active")(ana, True)
        assert not Flag("is_active")(ana, False)
        assert not Flag("is_active")(ana, "true")

    def test_when_true_ignores_false(self):
        full = Group(academic_level="Primaria", grade="Primero", name="A",
                     academic_year="2024-2025", max_students=25, students_count=25)
        rule = WhenTrue(has_room)
        assert not rule(full, True)
        assert rule(full, False)


class TestMatches:
    def test_absent_filters_match_everything(self, ana, carlos):
        assert apply_filters([ana, carlos], StudentFilters(), StudentService.rules) == [ana, carlos]

    def test_filters_are_and_combined(self, ana, carlos):
        filters = StudentFilters(search_text="a", grade="Segundo")
        assert apply_filters([ana, carlos], filters, StudentService.rules) == [carlos]

    def test_type_mismatch_is_a_non_match(self, ana):
        rules = {"date_of_birth": Predicate(lambda record, value: record.date_of_birth > value)}
        assert not matches(ana, {"date_of_birth": "not-a-date"}, rules)

    def test_accepts_mapping_filters(self, ana, carlos):
        result = apply_filters([ana, carlos], {"grade": "segundo"}, StudentService.rules)
        assert result == [carlos]

    def test_does_not_mutate_inputs(self, ana):
        filters = StudentFilters(search_text="ana", grade="Primero")
        before_filters = filters.model_dump()
        before_record = ana.model_dump()
        matches(ana, filters, StudentService.rules)
        assert filters.model_dump() == before_filters
        assert ana.model_dump() == before_record

    def test_adding_a_constraint_never_grows_the_result(self, ana, carlos):
        records = [ana, carlos]
        broad = apply_filters(records, StudentFilters(search_text="a"), StudentService.rules)
        narrow = apply_filters(
            records, StudentFilters(search_text="a", section="A"), StudentService.rules
        )
        assert set(r.first_name for r in narrow) <= set(r.first_name for r in broad)

    def test_available_only_excludes_full_groups(self):
        full = Group(academic_level="Primaria", grade="Primero", name="A",
                     academic_year="2024-2025", max_students=25, students_count=25)
        open_group = full.model_copy(update={"name": "B", "students_count": 10})
        result = apply_filters([full, open_group], GroupFilters(available_only=True), GroupService.rules)
        assert result == [open_group]
