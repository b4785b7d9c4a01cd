# core/student_api.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests
import streamlit as st
from pydantic import ValidationError

from core.settings import load_settings
from schemas.education_schema import EducationRecord

log = logging.getLogger(__name__)

EDUCATION_PATH = "students/me/education"


class StudentApiError(Exception):
    """Raised for any failed call to the student API (transport, HTTP status or bad body)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StudentApi:
    """Thin typed client over the student REST API."""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    # --- transport ---

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = self._url(path)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise StudentApiError(f"{method} {url} failed: {e}") from e

        if not resp.ok:
            raise StudentApiError(
                f"{method} {url} returned {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        log.debug("%s %s -> %s", method, url, resp.status_code)
        return resp

    @staticmethod
    def _json(resp: requests.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise StudentApiError(f"Response from {resp.url} is not valid JSON") from e

    @staticmethod
    def _record(data: Any) -> EducationRecord:
        try:
            return EducationRecord.model_validate(data)
        except ValidationError as e:
            raise StudentApiError(f"Unexpected education record shape: {e}") from e

    # --- education ---

    def get_my_education(self) -> List[EducationRecord]:
        data = self._json(self._request("GET", EDUCATION_PATH))
        if not isinstance(data, list):
            raise StudentApiError("Expected a list of education records")
        return [self._record(item) for item in data]

    def add_education(self, payload: Dict[str, Any]) -> EducationRecord:
        resp = self._request("POST", EDUCATION_PATH, json=payload)
        return self._record(self._json(resp))

    def update_education(self, education_id: str, payload: Dict[str, Any]) -> EducationRecord:
        resp = self._request("PUT", f"{EDUCATION_PATH}/{education_id}", json=payload)
        return self._record(self._json(resp))

    def delete_education(self, education_id: str) -> None:
        self._request("DELETE", f"{EDUCATION_PATH}/{education_id}")


def get_student_api() -> StudentApi:
    """Client for the signed-in student, using the token stored at login."""
    settings = load_settings()
    user = st.session_state.get("user") or {}
    return StudentApi(
        settings.api.base_url,
        token=user.get("token"),
        timeout=settings.api.timeout,
    )
