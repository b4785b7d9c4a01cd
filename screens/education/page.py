# screens/education/page.py
from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import streamlit as st

# Ensure project root (adjust the number of parents if your layout differs)
project_root = Path(__file__).resolve().parents[2]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.settings import load_settings, configure_logging
from core.policy import require_page, can_edit_page, user_roles
from core.forms import FormField, edit_form, tagline
from core.student_api import get_student_api
from schemas.education_schema import (
    DEGREE_OPTIONS,
    DETAIL_LABELS,
    MAJOR_OPTIONS,
    EducationFormData,
    EducationRecord,
    to_form_data,
)
from screens.education.controller import EducationPageController
from screens.education.export import records_csv

PAGE_KEY = "Education"

EDUCATION_FIELDS: List[FormField] = [
    FormField("degree", "Degree", "select", DEGREE_OPTIONS),
    FormField("institution", "Institution"),
    FormField("year", "Year"),
    FormField("gpa", "GPA"),
    FormField("major", "Major", "select", MAJOR_OPTIONS),
    FormField("minor", "Minor"),
    FormField("relevantCourses", "Relevant Courses"),
    FormField("honors", "Honors"),
]


# ────────────────────────────────────────────────────────────────────────────────
# Small helpers
# ────────────────────────────────────────────────────────────────────────────────

def _k(s: str) -> str:
    """Per-page key namespace to avoid collisions if rendered twice."""
    return f"education__{s}"


def _controller() -> EducationPageController:
    key = _k("controller")
    if key not in st.session_state:
        st.session_state[key] = EducationPageController(get_student_api())
    return st.session_state[key]


def _reload_page() -> None:
    # Dropping the controller makes the next run behave like a fresh page load.
    st.session_state.pop(_k("controller"), None)
    st.rerun()


# ────────────────────────────────────────────────────────────────────────────────
# Card rendering
# ────────────────────────────────────────────────────────────────────────────────

def _detail_item(label: str, value: str) -> None:
    st.caption(label)
    st.write(value or "-")


def _render_card(ctl: EducationPageController, rec: EducationRecord, can_edit: bool) -> None:
    busy = ctl.is_updating or not can_edit
    with st.container(border=True):
        st.subheader(rec.current("degree"))

        status = ":white_check_mark: **Verified**" if rec.is_verified else ":hourglass: **Pending**"
        if rec.last_verified:
            status += f" · on {rec.last_verified.strftime('%d %b %Y')}"
        st.markdown(status)
        if rec.remark:
            st.markdown(f"Remark: {rec.remark}")

        left, right = st.columns(2)
        for i, (name, label) in enumerate(DETAIL_LABELS):
            with (left if i % 2 == 0 else right):
                _detail_item(label, rec.current(name))

        def _save(form: EducationFormData) -> bool:
            with st.spinner("Updating..."):
                return ctl.update(rec.id, form)

        if edit_form(
            key=_k(f"edit_{rec.id}"),
            title="✏️ Update Education",
            fields=EDUCATION_FIELDS,
            model=EducationFormData,
            on_save_validated=_save,
            initial_data=to_form_data(rec),
            disabled=busy,
        ) is not None:
            st.rerun()

        if st.button("🗑️ Delete", key=_k(f"delete_{rec.id}"), type="primary", disabled=busy):
            with st.spinner("Deleting..."):
                ctl.delete(rec.id)
            st.rerun()


# ────────────────────────────────────────────────────────────────────────────────
# Page
# ────────────────────────────────────────────────────────────────────────────────

@require_page(PAGE_KEY)
def render():
    configure_logging(load_settings())
    ctl = _controller()

    if not ctl.loaded:
        with st.spinner("Loading education data..."):
            ctl.ensure_loaded()

    if ctl.load_failed:
        st.error(ctl.error)
        if st.button("Retry", key=_k("retry")):
            _reload_page()
        return

    st.title("🎓 Education/Academic")
    tagline()

    can_edit = can_edit_page(PAGE_KEY, user_roles())

    if ctl.error:
        st.error(ctl.error)

    if not ctl.records:
        st.info("No education records found. Add your first education record.")
    else:
        for rec in ctl.records:
            _render_card(ctl, rec, can_edit)

        st.download_button(
            "⬇️ Download CSV",
            data=records_csv(ctl.records),
            file_name="education.csv",
            mime="text/csv",
            key=_k("download_csv"),
        )

    st.markdown("---")

    def _add(form: EducationFormData) -> bool:
        with st.spinner("Adding..."):
            return ctl.add(form)

    if edit_form(
        key=_k("add"),
        title="➕ Add Education",
        fields=EDUCATION_FIELDS,
        model=EducationFormData,
        on_save_validated=_add,
        submit_label="Add Education",
        disabled=ctl.is_updating or not can_edit,
    ) is not None:
        st.rerun()


render()
