"""
Tests for the api module

Run: pytest tests/test_api.py -v
"""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from symptom_smart.api.app import app


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as client:
        yield client


def _new_session(client, symptoms=None):
    response = client.post("/api/sessions", json={"symptoms": symptoms or []})
    assert response.status_code == 200
    return response.json()["session_id"]


def test_root_and_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Symptom Smart API"

    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["matcher_loaded"] is True
    assert data["max_distance"] == 2
    assert data["dictionary_size"] > 0


def test_list_and_count_symptoms(client):
    response = client.get("/api/symptoms", params={"limit": 3})
    assert response.status_code == 200
    assert response.json() == ["fever", "headache", "cough"]

    total = client.get("/api/symptoms/count").json()["total"]
    response = client.get("/api/symptoms", params={"offset": total - 1})
    assert response.json() == ["cramps"]


def test_match_symptom(client):
    data = client.get("/api/symptoms/match", params={"q": "Headahe"}).json()
    assert data["normalized"] == "headahe"
    assert data["match"] == "headache"
    assert data["distance"] == 1
    assert data["is_suggestion"] is True
    assert data["is_known"] is False

    data = client.get("/api/symptoms/match", params={"q": "fever"}).json()
    assert data["is_known"] is True
    assert data["is_suggestion"] is False

    data = client.get("/api/symptoms/match", params={"q": "xyz"}).json()
    assert data["match"] is None


def test_session_scenario(client):
    """fever, headahe -> accept, fever again"""
    session_id = _new_session(client)

    data = client.post(f"/api/sessions/{session_id}/submit", json={"text": "fever"}).json()
    assert data["outcome"] == "added_known"
    assert data["session"]["tags"] == ["fever"]

    data = client.post(f"/api/sessions/{session_id}/submit", json={"text": "headahe"}).json()
    assert data["outcome"] == "suggested"
    assert data["session"]["state"] == "awaiting_confirmation"
    assert data["session"]["suggestion"]["suggested"] == "headache"
    assert data["session"]["suggestion"]["original"] == "headahe"

    data = client.post(f"/api/sessions/{session_id}/accept").json()
    assert data["tags"] == ["fever", "headache"]
    assert data["state"] == "idle"
    assert data["suggestion"] is None

    data = client.post(f"/api/sessions/{session_id}/submit", json={"text": "Fever "}).json()
    assert data["outcome"] == "duplicate"
    assert data["session"]["tags"] == ["fever", "headache"]


def test_keep_original_and_remove(client):
    session_id = _new_session(client, ["Cough"])

    client.post(f"/api/sessions/{session_id}/submit", json={"text": "feve"})
    data = client.post(f"/api/sessions/{session_id}/keep").json()
    assert data["tags"] == ["cough", "feve"]

    data = client.delete(f"/api/sessions/{session_id}/tags/rash").json()
    assert data["tags"] == ["cough", "feve"]

    data = client.delete(f"/api/sessions/{session_id}/tags/cough").json()
    assert data["tags"] == ["feve"]


def test_resolve_without_suggestion_conflicts(client):
    session_id = _new_session(client)

    assert client.post(f"/api/sessions/{session_id}/accept").status_code == 409
    assert client.post(f"/api/sessions/{session_id}/keep").status_code == 409


def test_intake(client):
    session_id = _new_session(client, ["fever"])

    response = client.post(
        f"/api/sessions/{session_id}/intake",
        json={"gender": "male", "age": 30, "duration": "2 days"}
    )
    assert response.status_code == 422
    assert "at least 2 symptoms" in response.json()["detail"]

    client.post(f"/api/sessions/{session_id}/submit", json={"text": "cough"})
    response = client.post(
        f"/api/sessions/{session_id}/intake",
        json={"gender": "male", "age": 30, "duration": " 2 days "}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["symptoms_text"] == "fever, cough"
    assert data["duration"] == "2 days"


def test_unknown_and_closed_sessions(client):
    assert client.get("/api/sessions/missing").status_code == 404

    session_id = _new_session(client)
    assert client.delete(f"/api/sessions/{session_id}").status_code == 200
    assert client.get(f"/api/sessions/{session_id}").status_code == 404
    assert client.delete(f"/api/sessions/{session_id}").status_code == 404


def test_remove_tag_containing_slash(client):
    session_id = _new_session(client, ["neck/back", "fever"])

    response = client.delete(f"/api/sessions/{session_id}/tags/neck/back")
    assert response.status_code == 200
    assert response.json()["tags"] == ["fever"]

    session_id = _new_session(client, ["neck/back"])

    response = client.delete(f"/api/sessions/{session_id}/tags/neck%2Fback")
    assert response.status_code == 200
    assert response.json()["tags"] == []


def test_failed_resolve_does_not_refresh_session(client):
    """Only real changes move updated_at"""
    from symptom_smart.api.dependencies import session_manager

    session_id = _new_session(client, ["cough"])
    session = session_manager.get_session(session_id)
    stamp = datetime.now() - timedelta(minutes=5)
    session.updated_at = stamp

    assert client.post(f"/api/sessions/{session_id}/accept").status_code == 409
    assert client.post(f"/api/sessions/{session_id}/keep").status_code == 409
    assert client.delete(f"/api/sessions/{session_id}/tags/rash").status_code == 200
    assert session.updated_at == stamp

    client.delete(f"/api/sessions/{session_id}/tags/cough")
    assert session.updated_at > stamp


def test_session_limit_returns_503(client, monkeypatch):
    from symptom_smart.api import dependencies

    _new_session(client)
    monkeypatch.setattr(
        dependencies.config, "max_sessions", dependencies.session_manager.get_active_count()
    )

    response = client.post("/api/sessions", json={"symptoms": []})
    assert response.status_code == 503


def test_idle_sessions_expire(client):
    from symptom_smart.api import dependencies

    stale_id = _new_session(client, ["fever"])
    fresh_id = _new_session(client, ["cough"])

    timeout = timedelta(minutes=dependencies.config.session_timeout_minutes)
    stale = dependencies.session_manager.get_session(stale_id)
    stale.updated_at = datetime.now() - timeout - timedelta(minutes=1)

    # Expired sessions are swept when the next one is created
    _new_session(client)

    assert client.get(f"/api/sessions/{stale_id}").status_code == 404
    assert client.get(f"/api/sessions/{fresh_id}").status_code == 200
