import math

from beauty_school_calculator.config import AidRatesConfig, DEFAULT_AID_RATES
from beauty_school_calculator.models import (
    AidEstimate,
    CalculationInput,
    Course,
    CostBreakdown,
    Dependency,
)


def round_half_up(value: float) -> int:
    """
    Round to the nearest whole dollar, with .5 going up.

    Python's round() uses banker's rounding; the aid amounts here are
    never negative, so half-up matches the usual "nearest dollar" reading.
    """
    return int(math.floor(value + 0.5))


def cost_breakdown(course: Course) -> CostBreakdown:
    return CostBreakdown(
        course_name=course.name,
        course_price=course.price,
        books_price=course.books_price,
        supplies_price=course.supplies_price,
        other_price=course.other_price,
        other_label=course.other_label,
        total_program_cost=course.total_program_cost,
    )


def income_protection_allowance(
    household_size: int,
    rates: AidRatesConfig = DEFAULT_AID_RATES,
) -> int:
    """
    Look up the income protection allowance for a household.

    Sizes beyond the table use the largest entry; there is no extrapolation.
    """
    return rates.income_protection.get(household_size, rates.max_income_protection)


def calculate_efc(
    income: int,
    household_size: int,
    college_students: int,
    dependency: Dependency,
    rates: AidRatesConfig = DEFAULT_AID_RATES,
) -> int:
    """
    Simplified Expected Family Contribution.

    Steps:
      1. Subtract the income protection allowance (floored at 0)
      2. Assess the remainder at the dependent / independent rate
      3. Split evenly across college students in the household
    """
    protection = income_protection_allowance(household_size, rates)
    available_income = max(0, income - protection)

    if dependency == Dependency.DEPENDENT:
        efc = available_income * rates.dependent_rate
    else:
        efc = available_income * rates.independent_rate

    if college_students > 1:
        efc = efc / college_students

    return round_half_up(efc)


def calculate_pell_grant(efc: int, rates: AidRatesConfig = DEFAULT_AID_RATES) -> int:
    if efc >= rates.pell_efc_cutoff:
        return 0

    # Simplified: linear reduction from the maximum award.
    pell_amount = rates.max_pell - (efc * rates.pell_reduction_rate)
    return max(0, round_half_up(pell_amount))


def calculate_loan_eligibility(
    dependency: Dependency,
    age: int,
    rates: AidRatesConfig = DEFAULT_AID_RATES,
) -> int:
    """Federal Direct Loan limit for a vocational program."""
    if dependency == Dependency.INDEPENDENT or age >= rates.independent_age:
        return rates.independent_loan_limit
    return rates.dependent_loan_limit


def estimate_financial_aid(
    calc_input: CalculationInput,
    rates: AidRatesConfig = DEFAULT_AID_RATES,
) -> AidEstimate:
    """
    Run the full aid estimate for a validated input.

    Returns an AidEstimate whose remaining_cost is never negative.
    """
    efc = calculate_efc(
        calc_input.income,
        calc_input.household_size,
        calc_input.college_students,
        calc_input.dependency,
        rates,
    )
    pell_grant = calculate_pell_grant(efc, rates)
    loan_eligibility = calculate_loan_eligibility(calc_input.dependency, calc_input.age, rates)

    total_aid = pell_grant + loan_eligibility
    remaining_cost = max(0, calc_input.course.total_program_cost - total_aid)

    return AidEstimate(
        efc=efc,
        pell_grant=pell_grant,
        loan_eligibility=loan_eligibility,
        total_aid=total_aid,
        remaining_cost=remaining_cost,
    )
