"""
Tests for the Education page controller: load, add, update and delete
against a mocked student API.
"""

import pytest

from core.student_api import StudentApiError
from schemas.education_schema import EducationFormData
from screens.education.controller import (
    ADD_ERROR,
    DELETE_ERROR,
    LOAD_ERROR,
    UPDATE_ERROR,
    EducationPageController,
)


def _form(**overrides):
    data = {"degree": "BTech", "institution": "MIT", "year": "2024"}
    data.update(overrides)
    return EducationFormData(**data)


@pytest.fixture
def loaded(api, records):
    api.get_my_education.return_value = list(records)
    ctl = EducationPageController(api)
    ctl.load()
    return ctl


# ===== LOAD =====

def test_initial_state_is_loading():
    ctl = EducationPageController(None)
    assert ctl.is_loading is True
    assert ctl.loaded is False
    assert ctl.records == []


def test_load_success_stores_records(api, records):
    api.get_my_education.return_value = records
    ctl = EducationPageController(api)
    ctl.load()

    assert ctl.records == records
    assert ctl.is_loading is False
    assert ctl.error is None
    assert ctl.load_failed is False


def test_load_failure_sets_fixed_message(api):
    api.get_my_education.side_effect = StudentApiError("boom", status_code=500)
    ctl = EducationPageController(api)
    ctl.load()

    assert ctl.records == []
    assert ctl.error == LOAD_ERROR
    assert ctl.load_failed is True
    assert ctl.is_loading is False


def test_ensure_loaded_fetches_only_once(api, records):
    api.get_my_education.return_value = records
    ctl = EducationPageController(api)
    ctl.ensure_loaded()
    ctl.ensure_loaded()

    api.get_my_education.assert_called_once()


def test_other_exceptions_propagate(api):
    api.get_my_education.side_effect = RuntimeError("bug")
    ctl = EducationPageController(api)
    with pytest.raises(RuntimeError):
        ctl.load()
    assert ctl.is_loading is False


# ===== ADD =====

def test_add_sends_transformed_payload(loaded, api, record_factory):
    api.add_education.return_value = record_factory("e4")

    assert loaded.add(_form()) is True

    api.add_education.assert_called_once()
    payload = api.add_education.call_args[0][0]
    details = payload["education_details"]
    assert details["degree"] == {"current_value": "BTech", "last_verified_value": None}
    for name in ("gpa", "major", "minor", "relevant_courses", "honors"):
        assert details[name] == {"current_value": "", "last_verified_value": None}


def test_add_appends_without_touching_existing(loaded, api, records, record_factory):
    before = loaded.records
    added = record_factory("e4", "High School Diploma")
    api.add_education.return_value = added

    loaded.add(_form(degree="High School Diploma"))

    assert loaded.records == [*records, added]
    # previous list object is left as it was
    assert before == records


def test_add_failure_keeps_list(loaded, api, records):
    api.add_education.side_effect = StudentApiError("nope")

    assert loaded.add(_form()) is False
    assert loaded.records == records
    assert loaded.error == ADD_ERROR
    assert loaded.load_failed is False


# ===== UPDATE =====

def test_update_replaces_matching_record_in_place(loaded, api, records, record_factory):
    updated = record_factory("e1", "MTech", remark="changed")
    api.update_education.return_value = updated

    assert loaded.update("e1", _form(degree="MTech")) is True

    api.update_education.assert_called_once()
    assert api.update_education.call_args[0][0] == "e1"
    assert len(loaded.records) == len(records)
    assert loaded.records[0] is updated
    assert loaded.records[1:] == records[1:]


def test_update_failure_keeps_list(loaded, api, records):
    api.update_education.side_effect = StudentApiError("nope")

    assert loaded.update("e2", _form()) is False
    assert loaded.records == records
    assert loaded.error == UPDATE_ERROR


# ===== DELETE =====

def test_delete_removes_only_that_record(loaded, api, records):
    api.delete_education.return_value = None

    assert loaded.delete("e1") is True

    api.delete_education.assert_called_once_with("e1")
    assert loaded.records == [r for r in records if r.id != "e1"]


def test_delete_failure_keeps_list(loaded, api, records):
    api.delete_education.side_effect = StudentApiError("nope")

    assert loaded.delete("e1") is False
    assert loaded.records == records
    assert loaded.error == DELETE_ERROR


# ===== UPDATING FLAG =====

@pytest.mark.parametrize("fails", [False, True])
def test_is_updating_only_while_call_outstanding(loaded, api, record_factory, fails):
    seen = []

    def _call(payload):
        seen.append(loaded.is_updating)
        if fails:
            raise StudentApiError("nope")
        return record_factory("e9")

    api.add_education.side_effect = _call
    loaded.add(_form())

    assert seen == [True]
    assert loaded.is_updating is False


def test_new_mutation_clears_previous_error(loaded, api):
    api.delete_education.side_effect = [StudentApiError("nope"), None]

    loaded.delete("e1")
    assert loaded.error == DELETE_ERROR

    loaded.delete("e1")
    assert loaded.error is None


def test_failure_is_logged_with_action(loaded, api, caplog):
    api.update_education.side_effect = StudentApiError("nope")

    with caplog.at_level("ERROR", logger="screens.education.controller"):
        loaded.update("e1", _form())

    [record] = [r for r in caplog.records if r.name == "screens.education.controller"]
    assert record.msg == "Failed to %s education"
    assert record.args == ("update",)
    assert record.getMessage() == "Failed to update education"
    assert record.exc_info is not None
