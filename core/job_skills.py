from __future__ import annotations

import logging

from core.api_client import ApiError, HiringApiClient
from core.models import JobDescription
from core.ratings import parse_int

logger = logging.getLogger(__name__)

MIN_JOB_SKILL_RATING = 0
MAX_JOB_SKILL_RATING = 10


def coerce_job_skill_rating(raw) -> int:
    value = parse_int(raw) or 0
    return min(MAX_JOB_SKILL_RATING, max(MIN_JOB_SKILL_RATING, value))


def initial_ratings(skills: list[str]) -> dict[str, int]:
    return {skill: 0 for skill in skills}


def has_any_rating(ratings: dict[str, int]) -> bool:
    return any(value > 0 for value in ratings.values())


class JobSkillRatings:
    def __init__(self, job: JobDescription):
        self.job = job
        self.required = initial_ratings(job.required_skills)
        self.preferred = initial_ratings(job.preferred_skills)

    def set_required(self, skill: str, raw) -> None:
        self.required[skill] = coerce_job_skill_rating(raw)

    def set_preferred(self, skill: str, raw) -> None:
        self.preferred[skill] = coerce_job_skill_rating(raw)

    def load(self, client: HiringApiClient) -> bool:
        if self.job.id is None:
            return False
        try:
            stored = client.get_job_skill_ratings(self.job.id)
        except ApiError as exc:
            logger.info("No stored ratings for job %s: %s", self.job.id, exc)
            return False
        if stored.get("required_skills"):
            self.required = {k: coerce_job_skill_rating(v) for k, v in stored["required_skills"].items()}
        if stored.get("preferred_skills"):
            self.preferred = {k: coerce_job_skill_rating(v) for k, v in stored["preferred_skills"].items()}
        return True

    def save(self, client: HiringApiClient) -> str | None:
        """Returns an error message, or None when the ratings were saved."""
        if self.job.id is None:
            return "Job has not been saved yet."
        try:
            client.save_job_skill_ratings(self.job.id, self.required, self.preferred)
        except ApiError as exc:
            logger.warning("Error saving skill ratings for job %s: %s", self.job.id, exc)
            return "Failed to save skill ratings. Please try again."
        return None
