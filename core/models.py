from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class RatingMode(str, Enum):
    PERCENTAGE = "percentage"
    ORDINAL = "ordinal"


@dataclass
class SkillRating:
    skill: str
    rating: int
    id: int | None = None


@dataclass
class Category:
    id: int
    name: str
    skills: list[SkillRating] = field(default_factory=list)
    icon: str | None = None
    color: str | None = None


@dataclass
class CommitReport:
    attempted: int
    succeeded: int
    failed_ids: list[int] = field(default_factory=list)
    refreshed: bool = False

    @property
    def all_succeeded(self) -> bool:
        return self.attempted > 0 and self.succeeded == self.attempted

    @property
    def partial(self) -> bool:
        return 0 < self.succeeded < self.attempted

    @property
    def message(self) -> str:
        if self.all_succeeded:
            return "All ratings updated successfully"
        if self.partial:
            return f"Updated {self.succeeded} out of {self.attempted} ratings"
        return "Failed to update ratings"


@dataclass
class ChartSlice:
    label: str
    value: int
    color: str
    show_label: bool


@dataclass
class JobDescription:
    id: int | None
    title: str
    company: str
    location: str = ""
    description: str = ""
    required_skills: list[str] = field(default_factory=list)
    preferred_skills: list[str] = field(default_factory=list)
    experience_required: str = ""
    education_required: str = ""
    job_type: str = ""
    salary_range: str | None = None
    application_url: str | None = None
    contact_email: str | None = None
    date_posted: str | None = None
    created_at: str | None = None


@dataclass
class Recruiter:
    id: int
    name: str
    email: str = ""
    phone: str = ""


@dataclass
class Employee:
    id: int
    name: str


@dataclass
class Assignment:
    id: int
    job_id: int
    recruiter_id: int
    job_title: str = ""
    recruiter_name: str = ""
    assigned_date: str = ""
