from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from core.api_client import ApiError, HiringApiClient


def _response(status: int = 200, payload=None) -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.content = b"{}" if payload is not None else b""
    response.json.return_value = payload
    return response


def _client(*responses) -> tuple[HiringApiClient, MagicMock]:
    session = MagicMock()
    session.request.side_effect = list(responses)
    return HiringApiClient("http://api.test/", timeout=3, session=session), session


def test_list_categories_uses_base_url():
    client, session = _client(_response(payload=[{"id": 1, "name": "Database", "skills": []}]))
    assert client.list_categories() == [{"id": 1, "name": "Database", "skills": []}]
    session.request.assert_called_once_with("GET", "http://api.test/categories", timeout=3)


def test_update_skill_rating_puts_rating_body():
    client, session = _client(_response())
    client.update_skill_rating(7, 8)
    session.request.assert_called_once_with("PUT", "http://api.test/skills/7", timeout=3, json={"rating": 8})


def test_non_2xx_raises_with_status():
    client, _ = _client(_response(status=404))
    with pytest.raises(ApiError) as excinfo:
        client.update_skill_rating(7, 8)
    assert excinfo.value.status == 404
    assert not excinfo.value.is_transport_error


def test_transport_error_is_wrapped():
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("refused")
    client = HiringApiClient(session=session)
    with pytest.raises(ApiError) as excinfo:
        client.list_categories()
    assert excinfo.value.is_transport_error


def test_bulk_update_reads_itemized_results():
    client, session = _client(_response(payload={"results": [{"id": 7, "ok": True}, {"id": 8, "ok": False}]}))
    assert client.bulk_update_ratings({7: 5, 8: 2, 9: 1}) == {7: True, 8: False, 9: False}
    _, kwargs = session.request.call_args
    assert kwargs["json"] == {"updates": [{"id": 7, "rating": 5}, {"id": 8, "rating": 2}, {"id": 9, "rating": 1}]}


def test_assignment_crud_paths():
    client, session = _client(_response(payload={"id": 3}), _response(payload={"id": 3}), _response())
    client.create_assignment(1, 2)
    client.update_assignment(3, 1, 4)
    client.delete_assignment(3)
    calls = [(c.args[0], c.args[1]) for c in session.request.call_args_list]
    assert calls == [
        ("POST", "http://api.test/api/job-recruiter-assignments"),
        ("PUT", "http://api.test/api/job-recruiter-assignments/3"),
        ("DELETE", "http://api.test/api/job-recruiter-assignments/3"),
    ]


def test_invalid_json_raises():
    response = _response(payload={})
    response.json.side_effect = ValueError("bad json")
    client, _ = _client(response)
    with pytest.raises(ApiError):
        client.list_job_descriptions()


def test_bulk_update_rejects_unexpected_body():
    for body in ([{"id": 7, "ok": True}], {"results": [{"id": "x"}]}, {"results": [3]}):
        client, _ = _client(_response(payload=body))
        with pytest.raises(ApiError):
            client.bulk_update_ratings({7: 5})
