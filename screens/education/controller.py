# screens/education/controller.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from core.student_api import StudentApi, StudentApiError
from schemas.education_schema import EducationFormData, EducationRecord, to_payload

log = logging.getLogger(__name__)

LOAD_ERROR = "Failed to load education data. Please try again later."
ADD_ERROR = "Failed to add education. Please try again."
UPDATE_ERROR = "Failed to update education. Please try again."
DELETE_ERROR = "Failed to delete education. Please try again."


class EducationPageController:
    """
    View-model for the student Education page.

    Holds the local mirror of the student's education records and the page
    status flags. The list is only changed after the API confirms a write,
    and each write touches exactly one record.
    """

    def __init__(self, api: StudentApi):
        self.api = api
        self.records: List[EducationRecord] = []
        self.is_loading = True
        self.is_updating = False
        self.error: Optional[str] = None
        self.load_failed = False
        self.loaded = False

    # --- load ---

    def load(self) -> None:
        self.is_loading = True
        self.error = None
        self.load_failed = False
        try:
            self.records = self.api.get_my_education()
        except StudentApiError:
            log.error("Failed to fetch education data", exc_info=True)
            self.error = LOAD_ERROR
            self.load_failed = True
        finally:
            self.is_loading = False
            self.loaded = True

    def ensure_loaded(self) -> None:
        if not self.loaded:
            self.load()

    # --- mutations ---

    def _mutate(self, action: str, message: str, call: Callable[[], object]) -> bool:
        self.is_updating = True
        self.error = None
        try:
            call()
            return True
        except StudentApiError:
            log.error("Failed to %s education", action, exc_info=True)
            self.error = message
            return False
        finally:
            self.is_updating = False

    def add(self, form: EducationFormData) -> bool:
        def _call():
            added = self.api.add_education(to_payload(form))
            self.records = [*self.records, added]

        return self._mutate("add", ADD_ERROR, _call)

    def update(self, education_id: str, form: EducationFormData) -> bool:
        def _call():
            updated = self.api.update_education(education_id, to_payload(form))
            self.records = [updated if r.id == education_id else r for r in self.records]

        return self._mutate("update", UPDATE_ERROR, _call)

    def delete(self, education_id: str) -> bool:
        def _call():
            self.api.delete_education(education_id)
            self.records = [r for r in self.records if r.id != education_id]

        return self._mutate("delete", DELETE_ERROR, _call)
