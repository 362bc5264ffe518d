import streamlit as st
import streamlit_analytics2

from beauty_school_calculator.config import configure_logging
from beauty_school_calculator.models import Dependency, ValidationError
from beauty_school_calculator.reports import (
    aid_chart,
    catalog_frame,
    catalog_from_frame,
    cost_breakdown_frame,
)
from beauty_school_calculator.service import calculate_costs, calculate_fafsa
from beauty_school_calculator.settings import SettingsStore


@st.cache_resource
def get_store() -> SettingsStore:
    """One settings store per server process; its cache is dropped on save."""
    configure_logging()
    store = SettingsStore()
    store.set_default_options()
    return store


# -----------------------------
# Calculator tab
# -----------------------------
def render_calculator(store: SettingsStore):
    courses = store.get_courses()
    fafsa_enabled = store.is_fafsa_enabled()

    if not courses:
        st.info("No courses are configured yet. Add some on the Settings tab.")
        return

    st.sidebar.header("Program")
    course_key = st.sidebar.selectbox(
        "Course",
        options=list(courses.keys()),
        format_func=lambda key: courses[key].name,
    )
    course = courses[course_key]
    st.sidebar.caption(f"{course.hours:,} clock hours")

    raw_fields = {}
    estimate_aid = False
    if fafsa_enabled:
        st.sidebar.header("Financial aid (optional)")
        estimate_aid = st.sidebar.checkbox("Estimate federal financial aid", value=True)

    if estimate_aid:
        raw_fields["age"] = st.sidebar.number_input("Your age", min_value=0, max_value=120, value=18, step=1)
        raw_fields["income"] = st.sidebar.number_input(
            "Household income ($/year)",
            min_value=0,
            step=1000,
            value=0,
            help="Parents' income for dependent students, your own if independent.",
        )
        raw_fields["household_size"] = st.sidebar.number_input(
            "Household size", min_value=0, max_value=30, value=1, step=1
        )
        raw_fields["college_students"] = st.sidebar.number_input(
            "College students in household", min_value=0, max_value=30, value=1, step=1
        )
        raw_fields["dependency"] = st.sidebar.radio(
            "Dependency status",
            options=[d.value for d in Dependency],
            format_func=str.capitalize,
        )
        result = calculate_fafsa(course_key, raw_fields, courses, fafsa_enabled)
    else:
        result = calculate_costs(course_key, raw_fields, courses)

    if isinstance(result, ValidationError):
        st.error(result.message)
        return

    col1, col2 = st.columns(2)

    with col1:
        st.subheader(f"{result.costs.course_name}: program cost")
        st.dataframe(
            cost_breakdown_frame(result).style.format({"Amount": "${:,.0f}"}),
            use_container_width=True,
            hide_index=True,
        )

    with col2:
        if result.aid is None:
            st.subheader("Total")
            st.metric("Total program cost", f"${result.costs.total_program_cost:,.0f}")
            if not fafsa_enabled:
                st.caption("Federal financial aid estimates are not offered by this school.")
        else:
            aid = result.aid
            st.subheader("Estimated federal aid")
            st.metric("Expected Family Contribution", f"${aid.efc:,.0f}")
            st.metric("Pell Grant", f"${aid.pell_grant:,.0f}")
            st.metric("Federal loan eligibility", f"${aid.loan_eligibility:,.0f}")
            st.metric("Remaining cost", f"${aid.remaining_cost:,.0f}")

    if result.aid is not None:
        st.altair_chart(aid_chart(result), use_container_width=True)
        st.caption(
            "These are simplified estimates for planning only. "
            "Complete the FAFSA for your actual eligibility."
        )


# -----------------------------
# Settings tab
# -----------------------------
def render_settings(store: SettingsStore):
    st.subheader("Calculator settings")

    with st.form("settings"):
        fafsa_enabled = st.checkbox(
            "Enable FAFSA calculator",
            value=store.is_fafsa_enabled(),
            help="Check this only if your school is accredited and eligible for federal financial aid.",
        )
        edited = st.data_editor(
            catalog_frame(store.get_courses()),
            num_rows="dynamic",
            use_container_width=True,
            hide_index=True,
        )
        submitted = st.form_submit_button("Save settings")

    if submitted:
        store.save_settings(catalog_from_frame(edited), fafsa_enabled)
        st.success("Settings saved successfully!")


# -----------------------------
# Streamlit UI
# -----------------------------
def main():
    st.set_page_config(
        page_title="Beauty School Tuition Calculator",
        layout="wide"
    )
    with streamlit_analytics2.track():
        st.title("💇 Beauty School Tuition Calculator")

        store = get_store()

        tab_calculator, tab_settings = st.tabs(["🧮 Calculator", "⚙️ Settings"])

        with tab_calculator:
            render_calculator(store)

        with tab_settings:
            render_settings(store)


if __name__ == "__main__":
    main()
