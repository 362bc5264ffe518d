"""
Tests for the JSON settings store.
"""

import json

import pytest

from beauty_school_calculator.config import get_settings_path
from beauty_school_calculator.settings import SettingsError, SettingsStore


class TestDefaults:
    def test_empty_store(self, store) -> None:
        assert store.get_courses() == {}
        assert store.is_fafsa_enabled() is True
        assert not store.path.exists()

    def test_seeds_default_catalog(self, store) -> None:
        store.set_default_options()

        courses = store.get_courses()
        assert set(courses) == {"cosmetology", "barbering", "esthetics", "massage"}
        assert courses["cosmetology"].price == 15000
        assert courses["cosmetology"].hours == 1500
        assert courses["cosmetology"].other_label == "Other Fees"
        assert store.get_option("version") == "1.0.0"

    def test_seeding_keeps_saved_values(self, store) -> None:
        store.save_settings({"nails": {"name": "Nails", "price": 3000}}, fafsa_enabled=False)
        store.set_default_options()

        assert set(store.get_courses()) == {"nails"}
        assert store.is_fafsa_enabled() is False


class TestSaveSettings:
    def test_values_are_sanitized(self, store) -> None:
        saved = store.save_settings(
            {
                "Hair Color!": {
                    "name": "  <b>Hair   Color</b> ",
                    "price": "-2500",
                    "hours": "300 hours",
                    "books_price": "abc",
                    "supplies_price": 99.9,
                },
            },
            fafsa_enabled=True,
        )

        course = saved["haircolor"]
        assert course.name == "Hair Color"
        assert course.price == 2500
        assert course.hours == 300
        assert course.books_price == 0
        assert course.supplies_price == 99
        assert course.other_price == 0
        assert course.other_label == "Other Fees"

    def test_skips_non_mapping_entries(self, store) -> None:
        saved = store.save_settings(
            {"ok": {"name": "OK"}, "bad": "not a course", "!!!": {"name": "no key"}},
            fafsa_enabled=True,
        )
        assert set(saved) == {"ok"}

    def test_non_mapping_catalog_clears_courses(self, store) -> None:
        store.set_default_options()
        assert store.save_settings(None, fafsa_enabled=True) == {}

    def test_null_other_label_uses_default(self, store) -> None:
        saved = store.save_settings(
            {"nails": {"name": "Nails", "other_label": None}}, fafsa_enabled=True
        )
        assert saved["nails"].other_label == "Other Fees"

    def test_written_as_json(self, store) -> None:
        store.save_settings({"nails": {"name": "Nails", "price": 3000}}, fafsa_enabled=False)

        with open(store.path, encoding="utf-8") as f:
            options = json.load(f)
        assert options["fafsa_enabled"] is False
        assert options["courses"]["nails"]["price"] == 3000


class TestCache:
    def test_reads_are_cached(self, store) -> None:
        store.set_default_options()
        assert "cosmetology" in store.get_courses()
        assert store.is_fafsa_enabled() is True

        store.path.write_text(json.dumps({"courses": {}, "fafsa_enabled": False}), encoding="utf-8")

        assert "cosmetology" in store.get_courses()
        assert store.is_fafsa_enabled() is True

        store.clear_cache()
        assert store.get_courses() == {}
        assert store.is_fafsa_enabled() is False

    def test_save_invalidates_cache(self, store) -> None:
        store.set_default_options()
        store.get_courses()
        store.is_fafsa_enabled()

        store.save_settings({"nails": {"name": "Nails"}}, fafsa_enabled=False)

        assert set(store.get_courses()) == {"nails"}
        assert store.is_fafsa_enabled() is False

    def test_snapshot_is_a_copy(self, store) -> None:
        store.set_default_options()
        snapshot = store.get_courses()
        snapshot.pop("cosmetology")
        assert "cosmetology" in store.get_courses()


class TestErrors:
    def test_corrupt_file(self, store) -> None:
        store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SettingsError):
            store.get_courses()

    def test_non_object_file(self, store) -> None:
        store.path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(SettingsError):
            store.is_fafsa_enabled()

    def test_courses_not_an_object(self, store) -> None:
        store.path.write_text(json.dumps({"courses": ["cosmetology"]}), encoding="utf-8")
        with pytest.raises(SettingsError):
            store.get_courses()

    def test_null_text_fields_in_file(self, store) -> None:
        store.path.write_text(
            json.dumps({"courses": {"nails": {"name": None, "price": 3000, "other_label": None}}}),
            encoding="utf-8",
        )
        course = store.get_courses()["nails"]
        assert course.name == ""
        assert course.other_label == "Other Fees"


class TestSettingsPath:
    def test_env_override(self, monkeypatch, tmp_path) -> None:
        target = tmp_path / "custom.json"
        monkeypatch.setenv("BSC_SETTINGS_PATH", str(target))
        assert get_settings_path() == target
        assert SettingsStore().path == target

    def test_default_in_home(self, monkeypatch) -> None:
        monkeypatch.delenv("BSC_SETTINGS_PATH", raising=False)
        path = get_settings_path()
        assert path.name == "settings.json"
        assert path.parent.name == ".beauty_school_calculator"
