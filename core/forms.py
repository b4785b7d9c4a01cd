# core/forms.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type

import streamlit as st
from pydantic import BaseModel, ValidationError

log = logging.getLogger(__name__)


def tagline() -> None:
    st.caption("Student Portal • Profile")


# ────────────────────────────────────────────────────────────────────────────────
# Schema-driven edit form
# ────────────────────────────────────────────────────────────────────────────────

@dataclass
class FormField:
    name: str
    label: str
    type: str = "text"  # "text" | "select"
    options: Optional[Sequence[str]] = None


def validate_form(
    model: Type[BaseModel], values: Dict[str, Any]
) -> Tuple[Optional[BaseModel], Dict[str, str]]:
    """
    Validate raw widget values against a pydantic model.
    Returns (instance, {}) on success, (None, {field: message}) otherwise.
    """
    try:
        return model.model_validate(values), {}
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for err in exc.errors():
            name = str(err["loc"][0]) if err.get("loc") else "form"
            cause = (err.get("ctx") or {}).get("error")
            errors.setdefault(name, str(cause) if cause else err["msg"])
        log.debug("form validation failed: %s", errors)
        return None, errors


def _render_field(form_key: str, field: FormField, initial: Any, disabled: bool) -> Any:
    wkey = f"{form_key}__{field.name}"
    if field.type == "select":
        options: List[str] = list(field.options or [])
        # keep values the server knows about even if they're not in our list
        if initial and initial not in options:
            options.append(initial)
        index = options.index(initial) if initial in options else None
        return st.selectbox(
            field.label,
            options,
            index=index,
            placeholder=f"Select {field.label.lower()}",
            key=wkey,
            disabled=disabled,
        )
    return st.text_input(field.label, value=initial or "", key=wkey, disabled=disabled)


def edit_form(
    key: str,
    title: str,
    fields: Sequence[FormField],
    model: Type[BaseModel],
    on_save_validated: Callable[[Any], Any],
    initial_data: Optional[Dict[str, Any]] = None,
    submit_label: str = "Save",
    disabled: bool = False,
) -> Any:
    """
    Render a collapsible form for `fields`, pre-filled from `initial_data`.
    On submit the values are validated against `model`; field errors are shown
    inline and the callback is only invoked with a valid model instance.
    Typed input survives failed validation and failed saves. A blank (add)
    form is cleared once the callback reports a successful save.
    Returns whatever the callback returns, or None if nothing was submitted.
    """
    initial = initial_data or {}
    with st.expander(title, expanded=False):
        with st.form(key=key):
            values = {f.name: _render_field(key, f, initial.get(f.name), disabled) for f in fields}
            submitted = st.form_submit_button(submit_label, key=f"{key}__submit", disabled=disabled)

        if not submitted:
            return None

        cleaned = {k: ("" if v is None else v) for k, v in values.items()}
        instance, errors = validate_form(model, cleaned)
        if errors:
            for msg in errors.values():
                st.error(msg)
            return None

        saved = on_save_validated(instance)
        if saved and initial_data is None:
            for f in fields:
                st.session_state.pop(f"{key}__{f.name}", None)
        return saved
