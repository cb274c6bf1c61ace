from __future__ import annotations

import logging

from core.api_client import ApiError, HiringApiClient
from core.models import Assignment, Recruiter

logger = logging.getLogger(__name__)

SELECTION_REQUIRED = "Please select both a job and a recruiter"


def parse_recruiter(item: dict) -> Recruiter:
    return Recruiter(
        id=int(item["id"]),
        name=item.get("name", ""),
        email=item.get("email", ""),
        phone=item.get("phone", ""),
    )


def parse_assignment(item: dict) -> Assignment:
    return Assignment(
        id=int(item["id"]),
        job_id=int(item["job_id"]),
        recruiter_id=int(item["recruiter_id"]),
        job_title=item.get("job_title", ""),
        recruiter_name=item.get("recruiter_name", ""),
        assigned_date=item.get("assigned_date", ""),
    )


def recruiters_by_job(assignments: list[Assignment]) -> dict[str, list[str]]:
    summary: dict[str, list[str]] = {}
    for assignment in assignments:
        summary.setdefault(assignment.job_title or f"Job {assignment.job_id}", []).append(assignment.recruiter_name)
    return summary


class AssignmentDesk:
    def __init__(self, client: HiringApiClient):
        self.client = client
        self.recruiters: list[Recruiter] = []
        self.assignments: list[Assignment] = []
        self.error = ""
        self.success = ""

    def load(self) -> None:
        try:
            self.recruiters = [parse_recruiter(item) for item in self.client.list_recruiters()]
        except ApiError as exc:
            logger.warning("Error fetching recruiters: %s", exc)
            self.error = "Failed to load recruiters"
        self.refresh_assignments()

    def refresh_assignments(self) -> None:
        try:
            self.assignments = [parse_assignment(item) for item in self.client.list_assignments()]
        except ApiError as exc:
            logger.warning("Error fetching assignments: %s", exc)
            self.error = "Failed to load current assignments"

    def _begin(self) -> None:
        self.error = ""
        self.success = ""

    def create(self, job_id: int | None, recruiter_id: int | None) -> bool:
        self._begin()
        if not job_id or not recruiter_id:
            self.error = SELECTION_REQUIRED
            return False
        try:
            self.client.create_assignment(job_id, recruiter_id)
        except ApiError as exc:
            logger.warning("Error creating assignment: %s", exc)
            self.error = "Failed to create assignment"
            return False
        self.success = "Recruiter assigned successfully"
        self.refresh_assignments()
        return True

    def update(self, assignment_id: int, job_id: int | None, recruiter_id: int | None) -> bool:
        self._begin()
        if not job_id or not recruiter_id:
            self.error = SELECTION_REQUIRED
            return False
        try:
            self.client.update_assignment(assignment_id, job_id, recruiter_id)
        except ApiError as exc:
            logger.warning("Error updating assignment %s: %s", assignment_id, exc)
            self.error = "Failed to update assignment"
            return False
        self.success = "Assignment updated successfully"
        self.refresh_assignments()
        return True

    def delete(self, assignment_id: int) -> bool:
        self._begin()
        try:
            self.client.delete_assignment(assignment_id)
        except ApiError as exc:
            logger.warning("Error deleting assignment %s: %s", assignment_id, exc)
            self.error = "Failed to delete assignment"
            return False
        self.success = "Assignment deleted successfully"
        self.refresh_assignments()
        return True
