import logging
from typing import Any, Mapping, Union

from beauty_school_calculator.config import DEFAULT_BOUNDS, ValidationBounds
from beauty_school_calculator.models import (
    CalculationInput,
    Course,
    Dependency,
    ErrorKind,
    ValidationError,
)
from beauty_school_calculator.sanitize import absint, sanitize_key, sanitize_text_field

logger = logging.getLogger(__name__)


def _reject(kind: ErrorKind, message: str) -> ValidationError:
    logger.info("Rejected calculation input: %s", kind.value)
    return ValidationError(kind=kind, message=message)


def validate_calculation_input(
    data: Mapping[str, Any],
    courses: Mapping[str, Course],
    include_fafsa: bool = False,
    bounds: ValidationBounds = DEFAULT_BOUNDS,
) -> Union[CalculationInput, ValidationError]:
    """
    Validate raw form fields against a catalog snapshot.

    Checks run in a fixed order and the first failure is returned:
      1. course key must name a catalog course
      2. (aid only) age, household size, college students, dependency

    Numeric fields are coerced with absint, so a missing field becomes 0
    and is only rejected if 0 falls outside its allowed range.
    """
    course_key = sanitize_key(data.get("course", ""))
    if not course_key or course_key not in courses:
        return _reject(ErrorKind.INVALID_COURSE, "Invalid course selected.")

    course = courses[course_key]
    if not include_fafsa:
        return CalculationInput(course=course)

    age = absint(data.get("age"))
    income = absint(data.get("income"))
    household_size = absint(data.get("household_size"))
    college_students = absint(data.get("college_students"))
    dependency = sanitize_text_field(data.get("dependency", ""))

    if age < bounds.min_age or age > bounds.max_age:
        return _reject(
            ErrorKind.INVALID_AGE,
            f"Please enter a valid age between {bounds.min_age} and {bounds.max_age}.",
        )

    if household_size < bounds.min_household or household_size > bounds.max_household:
        return _reject(ErrorKind.INVALID_HOUSEHOLD, "Please enter a valid household size.")

    if college_students < 1 or college_students > household_size:
        return _reject(
            ErrorKind.INVALID_STUDENTS,
            "Number of college students cannot exceed household size.",
        )

    if dependency not in (Dependency.DEPENDENT.value, Dependency.INDEPENDENT.value):
        return _reject(ErrorKind.INVALID_DEPENDENCY, "Invalid dependency status.")

    return CalculationInput(
        course=course,
        age=age,
        income=income,
        household_size=household_size,
        college_students=college_students,
        dependency=Dependency(dependency),
    )
