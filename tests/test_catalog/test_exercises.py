"""Tests for the built-in exercise catalog and its lookups."""

from __future__ import annotations

from forgefit.catalog.exercises import (
    CATALOG_BY_NAME,
    EXERCISE_CATALOG,
    find_exercise,
    search_catalog,
)
from forgefit.models.enums import Category, Environment
from forgefit.models.exercise import Exercise


class TestCatalogContents:
    def test_names_unique(self) -> None:
        names = [e.name for e in EXERCISE_CATALOG]
        assert len(names) == len(set(names))

    def test_every_category_present(self) -> None:
        categories = {e.category for e in EXERCISE_CATALOG}
        assert categories == {c.value for c in Category}

    def test_environments_known(self) -> None:
        allowed = {Environment.GYM.value, Environment.HOME.value}
        assert all(e.environment in allowed for e in EXERCISE_CATALOG)

    def test_each_entry_lists_alternatives(self) -> None:
        for e in EXERCISE_CATALOG:
            assert len(e.alternatives) == 3, e.name
            assert e.name not in e.alternatives

    def test_index_covers_catalog(self) -> None:
        assert len(CATALOG_BY_NAME) == len(EXERCISE_CATALOG)


class TestFindExercise:
    def test_known_name(self) -> None:
        ex = find_exercise("Goblet Squat")
        assert ex is not None
        assert ex.category == "legs"
        assert ex.environment == "home"

    def test_unknown_name(self) -> None:
        assert find_exercise("Incline Bench Press") is None

    def test_exact_match_only(self) -> None:
        assert find_exercise("goblet squat") is None

    def test_custom_catalog(self) -> None:
        custom = [Exercise("Sled Push", "legs", "quads", "gym", ())]
        assert find_exercise("Sled Push", custom) is custom[0]
        assert find_exercise("Goblet Squat", custom) is None


class TestSearchCatalog:
    def test_empty_query_returns_everything(self) -> None:
        assert len(search_catalog("  ")) == len(EXERCISE_CATALOG)

    def test_matches_name_case_insensitive(self) -> None:
        names = [e.name for e in search_catalog("CURL")]
        assert "Biceps Curl" in names
        assert "Hamstring Curl" in names

    def test_matches_muscle(self) -> None:
        results = search_catalog("rear_delts")
        assert results
        assert all(e.muscle == "rear_delts" for e in results)

    def test_matches_category(self) -> None:
        results = search_catalog("core")
        assert {e.category for e in results} == {"core"}
