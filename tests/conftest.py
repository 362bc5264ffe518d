import pytest

from beauty_school_calculator.config import DEFAULT_COURSES
from beauty_school_calculator.models import Course
from beauty_school_calculator.settings import SettingsStore, course_from_option


@pytest.fixture
def courses() -> dict:
    """The default catalog as Course objects."""
    return {key: course_from_option(key, raw) for key, raw in DEFAULT_COURSES.items()}


@pytest.fixture
def cosmetology(courses) -> Course:
    return courses["cosmetology"]


@pytest.fixture
def fafsa_fields() -> dict:
    """Valid raw aid fields for a 20 year old dependent student."""
    return {
        "age": "20",
        "income": "30000",
        "household_size": "4",
        "college_students": "1",
        "dependency": "dependent",
    }


@pytest.fixture
def store(tmp_path) -> SettingsStore:
    """Settings store backed by a fresh file in a temp dir."""
    return SettingsStore(tmp_path / "settings.json")
