from __future__ import annotations

from core.api_client import ApiError
from core.charts import job_skill_frame
from core.job_skills import JobSkillRatings, coerce_job_skill_rating, has_any_rating
from core.models import JobDescription


class StubClient:
    def __init__(self, stored=None, fail_save: bool = False):
        self.stored = stored
        self.fail_save = fail_save
        self.saved = None

    def get_job_skill_ratings(self, job_id):
        if self.stored is None:
            raise ApiError("not found", status=404)
        return self.stored

    def save_job_skill_ratings(self, job_id, required, preferred):
        if self.fail_save:
            raise ApiError("boom", status=500)
        self.saved = (job_id, dict(required), dict(preferred))


def _job() -> JobDescription:
    return JobDescription(id=4, title="Data Engineer", company="Acme", required_skills=["Python", "SQL"], preferred_skills=["Airflow"])


def test_coercion_clamps_and_defaults():
    assert coerce_job_skill_rating("7") == 7
    assert coerce_job_skill_rating("15") == 10
    assert coerce_job_skill_rating("-2") == 0
    assert coerce_job_skill_rating("abc") == 0


def test_missing_stored_ratings_keep_defaults():
    ratings = JobSkillRatings(_job())
    assert not ratings.load(StubClient())
    assert ratings.required == {"Python": 0, "SQL": 0}
    assert not has_any_rating(ratings.required)


def test_stored_ratings_replace_defaults():
    ratings = JobSkillRatings(_job())
    assert ratings.load(StubClient(stored={"required_skills": {"Python": 8, "SQL": 12}}))
    assert ratings.required == {"Python": 8, "SQL": 10}
    assert ratings.preferred == {"Airflow": 0}


def test_save_posts_both_groups():
    client = StubClient()
    ratings = JobSkillRatings(_job())
    ratings.set_required("Python", 9)
    ratings.set_preferred("Airflow", "4")
    assert ratings.save(client) is None
    assert client.saved == (4, {"Python": 9, "SQL": 0}, {"Airflow": 4})


def test_save_failure_returns_message():
    ratings = JobSkillRatings(_job())
    assert ratings.save(StubClient(fail_save=True)) == "Failed to save skill ratings. Please try again."


def test_chart_tooltip_shows_share():
    frame = job_skill_frame({"Python": 6, "SQL": 2, "Go": 0})
    assert frame["Tooltip"].tolist() == ["Python: 6/10 (75%)", "SQL: 2/10 (25%)", "Go: 0/10 (0%)"]
    assert frame["Label"].tolist() == ["Python", "SQL", ""]
