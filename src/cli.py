from beauty_school_calculator.config import DEFAULT_COURSES
from beauty_school_calculator.models import ValidationError
from beauty_school_calculator.service import calculate_costs, calculate_fafsa
from beauty_school_calculator.settings import course_from_option


def main():
    # Hard-coded example scenario against the default catalog
    courses = {key: course_from_option(key, raw) for key, raw in DEFAULT_COURSES.items()}

    fields = {
        "age": 20,
        "income": 30000,
        "household_size": 4,
        "college_students": 1,
        "dependency": "dependent",
    }

    costs = calculate_costs("cosmetology", {}, courses)
    result = calculate_fafsa("cosmetology", fields, courses, fafsa_enabled=True)

    if isinstance(result, ValidationError) or isinstance(costs, ValidationError):
        error = result if isinstance(result, ValidationError) else costs
        print(f"Error: {error.message}")
        return 1

    print("=== Beauty School Tuition Calculator – Estimate ===")
    print(f"Course: {result.costs.course_name}")
    print(f"Household income: ${fields['income']:,}")
    print(f"Household size: {fields['household_size']}")
    print(f"Dependency: {fields['dependency']}")
    print()
    print(f"Tuition:                 ${result.costs.course_price:,.2f}")
    print(f"Books:                   ${result.costs.books_price:,.2f}")
    print(f"Supplies:                ${result.costs.supplies_price:,.2f}")
    print(f"Total program cost:      ${costs.costs.total_program_cost:,.2f}")
    print()
    print(f"Expected Family Contrib: ${result.aid.efc:,.2f}")
    print(f"Pell Grant:              ${result.aid.pell_grant:,.2f}")
    print(f"Loan eligibility:        ${result.aid.loan_eligibility:,.2f}")
    print(f"Remaining cost:          ${result.aid.remaining_cost:,.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
