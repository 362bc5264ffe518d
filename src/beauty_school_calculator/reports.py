import altair as alt
import pandas as pd

from beauty_school_calculator.models import CalculationResult, Course


def cost_breakdown_frame(result: CalculationResult) -> pd.DataFrame:
    """
    One row per cost line plus a total row.

    Zero-priced "other" fees are left out, matching the calculator form.
    """
    costs = result.costs
    rows = [
        {"Item": "Tuition", "Amount": costs.course_price},
        {"Item": "Books", "Amount": costs.books_price},
        {"Item": "Supplies", "Amount": costs.supplies_price},
    ]
    if costs.other_price > 0:
        rows.append({"Item": costs.other_label, "Amount": costs.other_price})
    rows.append({"Item": "Total program cost", "Amount": costs.total_program_cost})

    return pd.DataFrame(rows, columns=["Item", "Amount"])


def aid_summary_frame(result: CalculationResult) -> pd.DataFrame:
    """Cost vs. aid components, used for the chart. Empty when no aid was estimated."""
    if result.aid is None:
        return pd.DataFrame(columns=["Component", "Amount"])

    aid = result.aid
    return pd.DataFrame(
        [
            {"Component": "Pell Grant", "Amount": aid.pell_grant},
            {"Component": "Federal loans", "Amount": aid.loan_eligibility},
            {"Component": "Remaining cost", "Amount": aid.remaining_cost},
        ],
        columns=["Component", "Amount"],
    )


def aid_chart(result: CalculationResult) -> alt.Chart:
    data = aid_summary_frame(result)
    return (
        alt.Chart(data)
        .mark_bar()
        .encode(
            x=alt.X("Amount:Q", title="Amount ($)"),
            y=alt.Y("Component:N", title=None, sort=None),
            tooltip=[
                alt.Tooltip("Component:N"),
                alt.Tooltip("Amount:Q", format="$,.0f"),
            ],
        )
    )


def catalog_frame(courses: dict) -> pd.DataFrame:
    """Editable table of the course catalog, one row per course key."""
    columns = [
        "key",
        "name",
        "price",
        "hours",
        "books_price",
        "supplies_price",
        "other_price",
        "other_label",
    ]
    rows = [
        {"key": key, **course.to_dict()} for key, course in courses.items() if isinstance(course, Course)
    ]
    return pd.DataFrame(rows, columns=columns)


def catalog_from_frame(df: pd.DataFrame) -> dict:
    """Turn an edited catalog table back into raw form values for the settings store."""
    records = {}
    for _, row in df.iterrows():
        key = row["key"]
        if pd.isna(key) or str(key).strip() == "":
            continue
        records[str(key)] = {
            column: (None if pd.isna(value) else value)
            for column, value in row.items()
            if column != "key"
        }
    return records
