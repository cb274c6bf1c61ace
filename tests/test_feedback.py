from __future__ import annotations

from core.api_client import ApiError
from core.feedback import FAILURE_MESSAGE, SUCCESS_MESSAGE, FeedbackForm, load_employees, submit_feedback


class StubClient:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.payloads = []

    def submit_feedback(self, payload):
        if self.fail:
            raise ApiError("down")
        self.payloads.append(payload)
        return {"id": 1}

    def list_employees(self):
        if self.fail:
            raise ApiError("down")
        return [{"id": 3, "name": "Priya"}]


def _form(**overrides) -> FeedbackForm:
    values = {
        "job_id": 1,
        "employee_id": 3,
        "position": "Analyst",
        "technical_skills": "Strong SQL",
        "overall_rating": 4,
    }
    values.update(overrides)
    return FeedbackForm(**values)


def test_payload_uses_api_keys():
    payload = _form().to_payload()
    assert payload["jobId"] == 1
    assert payload["employeeId"] == 3
    assert payload["overallRating"] == 4


def test_submit_success_resets_form():
    client = StubClient()
    status, form = submit_feedback(client, _form())
    assert status.success
    assert status.message == SUCCESS_MESSAGE
    assert form == FeedbackForm()
    assert len(client.payloads) == 1


def test_submit_failure_keeps_form():
    original = _form()
    status, form = submit_feedback(StubClient(fail=True), original)
    assert not status.success
    assert status.message == FAILURE_MESSAGE
    assert form is original


def test_validation_blocks_incomplete_form():
    client = StubClient()
    status, _ = submit_feedback(client, _form(employee_id=None, overall_rating=0))
    assert not status.success
    assert "Select an employee" in status.message
    assert client.payloads == []


def test_employee_load_failure_returns_empty_list():
    assert load_employees(StubClient(fail=True)) == []
    assert load_employees(StubClient())[0].name == "Priya"


def test_validation_failure_keeps_entered_values():
    original = _form(technical_skills="  ", position="Data Analyst")
    status, form = submit_feedback(StubClient(), original)
    assert not status.success
    assert form is original
    assert form.position == "Data Analyst"
