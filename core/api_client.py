from __future__ import annotations

import logging
from typing import Any

import requests

from core.config import DEFAULT_API_BASE_URL

logger = logging.getLogger(__name__)


class ApiError(RuntimeError):
    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status

    @property
    def is_transport_error(self) -> bool:
        return self.status is None


class HiringApiClient:
    """Thin wrapper over the hiring backend's flat HTTP API.

    Every call either returns the decoded JSON body or raises ``ApiError``.
    A response counts as a success only for 2xx statuses.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 12.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(f"Could not reach {url}") from exc
        if not 200 <= response.status_code < 300:
            logger.warning("%s %s returned HTTP %s", method, url, response.status_code)
            raise ApiError(f"{method} {path} returned HTTP {response.status_code}", status=response.status_code)
        return response

    def _json(self, method: str, path: str, **kwargs) -> Any:
        response = self._request(method, path, **kwargs)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(f"{method} {path} returned invalid JSON", status=response.status_code) from exc

    # skill thresholds

    def list_categories(self) -> list[dict]:
        return self._json("GET", "/categories") or []

    def update_skill_rating(self, skill_id: int, rating: int) -> None:
        self._request("PUT", f"/skills/{skill_id}", json={"rating": rating})

    def bulk_update_ratings(self, updates: dict[int, int]) -> dict[int, bool]:
        body = {"updates": [{"id": skill_id, "rating": rating} for skill_id, rating in updates.items()]}
        payload = self._json("PUT", "/skills", json=body) or {}
        try:
            results = {int(item["id"]): bool(item.get("ok")) for item in payload.get("results", []) if "id" in item}
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ApiError("PUT /skills returned an unexpected results body") from exc
        return {skill_id: results.get(skill_id, False) for skill_id in updates}

    # job descriptions

    def list_job_descriptions(self) -> list[dict]:
        return self._json("GET", "/api/job-descriptions") or []

    def get_job_description(self, job_id: int) -> dict:
        return self._json("GET", f"/api/job-descriptions/{job_id}") or {}

    def analyze_job_description(self, filename: str, data: bytes) -> dict:
        files = {"file": (filename, data)}
        return self._json("POST", "/api/job-descriptions/analyze", files=files) or {}

    def get_job_skill_ratings(self, job_id: int) -> dict:
        return self._json("GET", f"/api/job-skills/ratings/{job_id}") or {}

    def save_job_skill_ratings(self, job_id: int, required: dict[str, int], preferred: dict[str, int]) -> None:
        self._request(
            "POST",
            "/api/job-skills/ratings",
            json={"job_id": job_id, "required_skills": required, "preferred_skills": preferred},
        )

    # recruiters and assignments

    def list_recruiters(self) -> list[dict]:
        return self._json("GET", "/api/recruiters") or []

    def list_assignments(self) -> list[dict]:
        return self._json("GET", "/api/job-recruiter-assignments") or []

    def create_assignment(self, job_id: int, recruiter_id: int) -> dict:
        body = {"job_id": job_id, "recruiter_id": recruiter_id}
        return self._json("POST", "/api/job-recruiter-assignments", json=body) or {}

    def update_assignment(self, assignment_id: int, job_id: int, recruiter_id: int) -> dict:
        body = {"job_id": job_id, "recruiter_id": recruiter_id}
        return self._json("PUT", f"/api/job-recruiter-assignments/{assignment_id}", json=body) or {}

    def delete_assignment(self, assignment_id: int) -> None:
        self._request("DELETE", f"/api/job-recruiter-assignments/{assignment_id}")

    # employees and feedback

    def list_employees(self) -> list[dict]:
        return self._json("GET", "/api/employees") or []

    def submit_feedback(self, payload: dict[str, Any]) -> dict:
        return self._json("POST", "/api/feedback", json=payload) or {}
