from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime

from core.models import JobDescription

DEFAULT_STATUS = "Active"


@dataclass
class Page:
    items: list
    page: int
    per_page: int
    total: int

    @property
    def page_count(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page * self.per_page < self.total

    @property
    def first_index(self) -> int:
        return (self.page - 1) * self.per_page


def paginate(items: list, page: int, per_page: int = 5) -> Page:
    if per_page < 1:
        raise ValueError("per_page must be positive")
    last = max(1, math.ceil(len(items) / per_page))
    page = min(max(1, page), last)
    start = (page - 1) * per_page
    return Page(items=items[start : start + per_page], page=page, per_page=per_page, total=len(items))


def _skill_list(value) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [str(part) for part in value]


def parse_job(item: dict) -> JobDescription:
    raw_id = item.get("id")
    return JobDescription(
        id=None if raw_id is None else int(raw_id),
        title=item.get("title") or item.get("role") or "",
        company=item.get("company", ""),
        location=item.get("location", ""),
        description=item.get("description", ""),
        required_skills=_skill_list(item.get("required_skills")),
        preferred_skills=_skill_list(item.get("preferred_skills")),
        experience_required=item.get("experience_required", ""),
        education_required=item.get("education_required", ""),
        job_type=item.get("job_type", ""),
        salary_range=item.get("salary_range"),
        application_url=item.get("application_url"),
        contact_email=item.get("contact_email"),
        date_posted=item.get("date_posted"),
        created_at=item.get("created_at") or item.get("upload_date"),
    )


def _display_date(job: JobDescription, today: date | None = None) -> str:
    if job.date_posted:
        return job.date_posted
    if job.created_at:
        try:
            return datetime.fromisoformat(job.created_at.replace("Z", "+00:00")).date().isoformat()
        except ValueError:
            return job.created_at
    return (today or date.today()).isoformat()


def job_display_rows(jobs: list[JobDescription], today: date | None = None) -> list[dict]:
    return [
        {
            "id": job.id,
            "Role": job.title,
            "Company": job.company,
            "Date": _display_date(job, today),
            "Status": DEFAULT_STATUS,
        }
        for job in jobs
    ]


def job_options(jobs: list[JobDescription]) -> dict[int, str]:
    return {job.id: f"{job.title} - {job.company}" for job in jobs if job.id is not None}
