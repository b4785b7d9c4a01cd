from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

from core.student_api import StudentApi
from schemas.education_schema import EducationRecord


def make_record(record_id: str, degree: str = "BTech", **overrides: Any) -> EducationRecord:
    """Build an EducationRecord the way the API would return it."""
    data: Dict[str, Any] = {
        "id": record_id,
        "education_details": {
            "degree": {"current_value": degree, "last_verified_value": None},
            "institution": {"current_value": "MIT", "last_verified_value": None},
            "year": {"current_value": "2024", "last_verified_value": None},
            "gpa": {"current_value": "", "last_verified_value": None},
            "major": {"current_value": "CSE", "last_verified_value": None},
            "minor": {"current_value": "", "last_verified_value": None},
            "relevant_courses": {"current_value": "", "last_verified_value": None},
            "honors": {"current_value": "", "last_verified_value": None},
        },
        "is_verified": False,
        "last_verified": None,
        "remark": None,
    }
    data.update(overrides)
    return EducationRecord.model_validate(data)


@pytest.fixture
def api():
    return MagicMock(spec=StudentApi)


@pytest.fixture
def records():
    return [make_record("e1", "BTech"), make_record("e2", "MTech"), make_record("e3", "MSc")]


@pytest.fixture
def record_factory():
    return make_record
