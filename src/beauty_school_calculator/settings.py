import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional

from beauty_school_calculator.config import (
    DEFAULT_COURSES,
    DEFAULT_OTHER_LABEL,
    VERSION,
    get_settings_path,
)
from beauty_school_calculator.models import Course
from beauty_school_calculator.sanitize import absint, sanitize_key, sanitize_text_field

logger = logging.getLogger(__name__)

COURSES_OPTION = "courses"
FAFSA_OPTION = "fafsa_enabled"
VERSION_OPTION = "version"


class SettingsError(RuntimeError):
    """Raised when the settings file exists but cannot be read."""


def _label_or_default(label: Any) -> Any:
    return DEFAULT_OTHER_LABEL if label is None else label


def sanitize_course(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Clean one course entry coming from the settings form."""
    return {
        "name": sanitize_text_field(raw.get("name", "")),
        "price": absint(raw.get("price", 0)),
        "hours": absint(raw.get("hours", 0)),
        "books_price": absint(raw.get("books_price", 0)),
        "supplies_price": absint(raw.get("supplies_price", 0)),
        "other_price": absint(raw.get("other_price", 0)),
        "other_label": sanitize_text_field(_label_or_default(raw.get("other_label"))),
    }


def course_from_option(key: str, raw: Mapping[str, Any]) -> Course:
    return Course(
        key=key,
        name=sanitize_text_field(raw.get("name", "")),
        price=absint(raw.get("price", 0)),
        hours=absint(raw.get("hours", 0)),
        books_price=absint(raw.get("books_price", 0)),
        supplies_price=absint(raw.get("supplies_price", 0)),
        other_price=absint(raw.get("other_price", 0)),
        other_label=sanitize_text_field(_label_or_default(raw.get("other_label"))),
    )


class SettingsStore:
    """
    Key/value options persisted as one JSON file.

    Courses and the FAFSA flag are cached after the first read and the
    cache is dropped on every save, so callers can treat what they get
    back as a snapshot.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else get_settings_path()
        self._courses_cache: Optional[Dict[str, Course]] = None
        self._fafsa_enabled_cache: Optional[bool] = None

    # -----------------------------
    # Raw option access
    # -----------------------------
    def _load_options(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                options = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsError(f"Could not read settings from {self.path}: {exc}") from exc
        if not isinstance(options, dict):
            raise SettingsError(f"Settings file {self.path} does not hold an object")
        return options

    def _write_options(self, options: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(options, f, ensure_ascii=False, indent=2)

    def get_option(self, name: str, default: Any = None) -> Any:
        return self._load_options().get(name, default)

    # -----------------------------
    # Cached reads
    # -----------------------------
    def get_courses(self) -> Dict[str, Course]:
        if self._courses_cache is None:
            raw_courses = self.get_option(COURSES_OPTION, {}) or {}
            if not isinstance(raw_courses, dict):
                raise SettingsError(f"Courses in {self.path} are not stored as an object")
            self._courses_cache = {
                key: course_from_option(key, raw)
                for key, raw in raw_courses.items()
                if isinstance(raw, dict)
            }
            logger.debug("Loaded %d courses from %s", len(self._courses_cache), self.path)
        return dict(self._courses_cache)

    def is_fafsa_enabled(self) -> bool:
        if self._fafsa_enabled_cache is None:
            self._fafsa_enabled_cache = bool(self.get_option(FAFSA_OPTION, True))
        return self._fafsa_enabled_cache

    def clear_cache(self) -> None:
        self._courses_cache = None
        self._fafsa_enabled_cache = None

    # -----------------------------
    # Writes
    # -----------------------------
    def set_default_options(self) -> None:
        """Seed defaults for any option that has never been saved."""
        options = self._load_options()
        added = []
        for name, value in (
            (COURSES_OPTION, DEFAULT_COURSES),
            (FAFSA_OPTION, True),
            (VERSION_OPTION, VERSION),
        ):
            if name not in options:
                options[name] = json.loads(json.dumps(value))
                added.append(name)

        if added:
            self._write_options(options)
            self.clear_cache()
            logger.info("Seeded default settings (%s) in %s", ", ".join(added), self.path)

    def save_settings(self, raw_courses: Any, fafsa_enabled: bool) -> Dict[str, Course]:
        """
        Replace the course catalog and FAFSA flag with sanitized form values.

        Entries that are not mappings, or whose key sanitizes to nothing,
        are dropped. Returns the saved catalog.
        """
        courses: Dict[str, Dict[str, Any]] = {}
        if isinstance(raw_courses, Mapping):
            for key, raw in raw_courses.items():
                if not isinstance(raw, Mapping):
                    continue
                clean_key = sanitize_key(key)
                if not clean_key:
                    continue
                courses[clean_key] = sanitize_course(raw)

        options = self._load_options()
        options[COURSES_OPTION] = courses
        options[FAFSA_OPTION] = bool(fafsa_enabled)
        self._write_options(options)
        self.clear_cache()

        logger.info(
            "Saved %d courses (fafsa_enabled=%s) to %s", len(courses), bool(fafsa_enabled), self.path
        )
        return self.get_courses()
