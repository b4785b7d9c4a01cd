# schemas/education_schema.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEGREE_OPTIONS = ["BTech", "MTech", "MSc", "High School Diploma"]
MAJOR_OPTIONS = ["CSE", "CE", "EE", "CBSE", "ICSE"]

# (record key, form key) for every field under education_details, in display order
DETAIL_FIELDS: List[Tuple[str, str]] = [
    ("degree", "degree"),
    ("institution", "institution"),
    ("year", "year"),
    ("gpa", "gpa"),
    ("major", "major"),
    ("minor", "minor"),
    ("relevant_courses", "relevantCourses"),
    ("honors", "honors"),
]

# Label/value grid shown on each card (degree is the card title)
DETAIL_LABELS: List[Tuple[str, str]] = [
    ("institution", "Institution"),
    ("year", "Year"),
    ("gpa", "GPA"),
    ("major", "Major"),
    ("minor", "Minor"),
    ("relevant_courses", "Relevant Courses"),
    ("honors", "Honors"),
]

REQUIRED_MESSAGES = {
    "degree": "Degree is required",
    "institution": "Institution is required",
    "year": "Year is required",
}


# ────────────────────────────────────────────────────────────────────────────────
# Server shapes
# ────────────────────────────────────────────────────────────────────────────────

class FieldValue(BaseModel):
    current_value: str = ""
    last_verified_value: Optional[str] = None

    @field_validator("current_value", mode="before")
    @classmethod
    def _current_as_text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("last_verified_value", mode="before")
    @classmethod
    def _verified_as_text(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)


class EducationDetails(BaseModel):
    degree: FieldValue = Field(default_factory=FieldValue)
    institution: FieldValue = Field(default_factory=FieldValue)
    year: FieldValue = Field(default_factory=FieldValue)
    gpa: FieldValue = Field(default_factory=FieldValue)
    major: FieldValue = Field(default_factory=FieldValue)
    minor: FieldValue = Field(default_factory=FieldValue)
    relevant_courses: FieldValue = Field(default_factory=FieldValue)
    honors: FieldValue = Field(default_factory=FieldValue)

    @model_validator(mode="before")
    @classmethod
    def _nulls_as_empty(cls, data: Any) -> Any:
        # a null field means "nothing recorded yet", same as a missing one
        if isinstance(data, dict):
            return {k: ({} if v is None else v) for k, v in data.items()}
        return data


class EducationRecord(BaseModel):
    """One education entry as returned by the student API."""

    id: str
    education_details: EducationDetails = Field(default_factory=EducationDetails)
    is_verified: bool = False
    last_verified: Optional[datetime] = None
    remark: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v: Any) -> Any:
        # some deployments hand out integer ids
        return str(v) if isinstance(v, int) else v

    @field_validator("education_details", mode="before")
    @classmethod
    def _details_default(cls, v: Any) -> Any:
        return {} if v is None else v

    def current(self, name: str) -> str:
        return getattr(self.education_details, name).current_value


# ────────────────────────────────────────────────────────────────────────────────
# Form shape
# ────────────────────────────────────────────────────────────────────────────────

class EducationFormData(BaseModel):
    """
    Flat form input for add/edit.
    Only degree, institution and year are required; everything else may be
    left blank and is sent as an empty string.
    """

    model_config = ConfigDict(populate_by_name=True, validate_default=True)

    degree: str = ""
    institution: str = ""
    year: str = ""
    gpa: Optional[str] = None
    major: Optional[str] = None
    minor: Optional[str] = None
    relevant_courses: Optional[str] = Field(default=None, alias="relevantCourses")
    honors: Optional[str] = None

    @field_validator("degree", "institution", "year", mode="before")
    @classmethod
    def _required(cls, v: Any, info) -> str:
        if v is None or v == "":
            raise ValueError(REQUIRED_MESSAGES[info.field_name])
        return v


def to_payload(form: EducationFormData) -> Dict[str, Any]:
    """
    Map form input to the write payload expected by the API.
    Absent optional values become "" and last_verified_value is always null.
    """
    details: Dict[str, Dict[str, Any]] = {}
    for record_key, _ in DETAIL_FIELDS:
        value = getattr(form, record_key)
        details[record_key] = {
            "current_value": value if value is not None else "",
            "last_verified_value": None,
        }
    return {"education_details": details}


def to_form_data(record: EducationRecord) -> Dict[str, str]:
    """Initial values for the edit form, keyed by form field name."""
    return {form_key: record.current(record_key) for record_key, form_key in DETAIL_FIELDS}
