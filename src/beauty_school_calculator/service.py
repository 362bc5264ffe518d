import logging
from typing import Any, Mapping, Optional, Union

from beauty_school_calculator.calculations import cost_breakdown, estimate_financial_aid
from beauty_school_calculator.config import AidRatesConfig, DEFAULT_AID_RATES
from beauty_school_calculator.models import (
    CalculationResult,
    Course,
    ErrorKind,
    ValidationError,
)
from beauty_school_calculator.validation import validate_calculation_input

logger = logging.getLogger(__name__)


def _with_course_key(course_key: Optional[str], raw_fields: Mapping[str, Any]) -> dict:
    fields = dict(raw_fields or {})
    if course_key is not None:
        fields["course"] = course_key
    return fields


def calculate_costs(
    course_key: Optional[str],
    raw_fields: Mapping[str, Any],
    courses: Mapping[str, Course],
) -> Union[CalculationResult, ValidationError]:
    """
    Cost breakdown only.

    course_key, when given, takes precedence over raw_fields["course"].
    """
    validated = validate_calculation_input(
        _with_course_key(course_key, raw_fields), courses, include_fafsa=False
    )
    if isinstance(validated, ValidationError):
        return validated

    result = CalculationResult(costs=cost_breakdown(validated.course))
    logger.debug("Cost breakdown for %s: %s", validated.course.key, result.costs.total_program_cost)
    return result


def calculate_fafsa(
    course_key: Optional[str],
    raw_fields: Mapping[str, Any],
    courses: Mapping[str, Course],
    fafsa_enabled: bool,
    rates: AidRatesConfig = DEFAULT_AID_RATES,
) -> Union[CalculationResult, ValidationError]:
    """
    Cost breakdown plus the simplified financial aid estimate.

    Schools that are not eligible for federal aid switch the estimate off;
    in that case nothing is validated or computed.
    """
    if not fafsa_enabled:
        logger.info("Financial aid estimate requested while disabled")
        return ValidationError(
            kind=ErrorKind.FAFSA_DISABLED,
            message="Financial aid estimates are not available.",
        )

    validated = validate_calculation_input(
        _with_course_key(course_key, raw_fields), courses, include_fafsa=True
    )
    if isinstance(validated, ValidationError):
        return validated

    aid = estimate_financial_aid(validated, rates)
    logger.debug(
        "Aid estimate for %s: efc=%s pell=%s loan=%s",
        validated.course.key,
        aid.efc,
        aid.pell_grant,
        aid.loan_eligibility,
    )
    return CalculationResult(costs=cost_breakdown(validated.course), aid=aid)
