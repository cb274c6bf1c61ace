from __future__ import annotations

import logging
from dataclasses import dataclass

from core.api_client import ApiError, HiringApiClient
from core.models import Employee

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Feedback submitted successfully!"
FAILURE_MESSAGE = "Error submitting feedback. Please try again."
MAX_STARS = 5


@dataclass
class FeedbackForm:
    job_id: int | None = None
    employee_id: int | None = None
    position: str = ""
    technical_skills: str = ""
    communication_skills: str = ""
    overall_rating: int = 0

    def validate(self) -> list[str]:
        problems = []
        if self.job_id is None:
            problems.append("Select a job description")
        if self.employee_id is None:
            problems.append("Select an employee")
        if not self.technical_skills.strip():
            problems.append("Hiring manager feedback is required")
        if not 1 <= self.overall_rating <= MAX_STARS:
            problems.append(f"Overall rating must be between 1 and {MAX_STARS} stars")
        return problems

    def to_payload(self) -> dict:
        return {
            "jobId": self.job_id,
            "employeeId": self.employee_id,
            "position": self.position,
            "technicalSkills": self.technical_skills,
            "communicationSkills": self.communication_skills,
            "overallRating": self.overall_rating,
        }


@dataclass
class SubmitStatus:
    success: bool
    message: str


def parse_employee(item: dict) -> Employee:
    return Employee(id=int(item["id"]), name=item.get("name", ""))


def load_employees(client: HiringApiClient) -> list[Employee]:
    try:
        return [parse_employee(item) for item in client.list_employees()]
    except ApiError as exc:
        logger.warning("Error fetching employees: %s", exc)
        return []


def submit_feedback(client: HiringApiClient, form: FeedbackForm) -> tuple[SubmitStatus, FeedbackForm]:
    problems = form.validate()
    if problems:
        return SubmitStatus(success=False, message="; ".join(problems)), form
    try:
        client.submit_feedback(form.to_payload())
    except ApiError as exc:
        logger.warning("Error submitting feedback: %s", exc)
        return SubmitStatus(success=False, message=FAILURE_MESSAGE), form
    return SubmitStatus(success=True, message=SUCCESS_MESSAGE), FeedbackForm()
