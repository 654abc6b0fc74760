"""
Tests for the REST API.
"""

import sys
import os
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.main import app

client = TestClient(app)


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["endpoints"]["generate"] == "/api/schedule"


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_info():
    data = client.get("/api/info").json()
    assert data["time_slots"] == ["14:00", "16:30"]
    assert data["slots_per_venue_per_day"] == 2
    assert data["home_advantage"] == 5
    assert data["default_strength"] == 50


def test_generate_schedule():
    response = client.post("/api/schedule", json={
        "teams": ["Lions", "Tigers", "Bears", "Wolves"],
        "venues": ["Main Arena"],
        "start_date": "2024-03-01",
        "seed": 17
    })
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert data["total_matches"] == 6
    assert len(data["matches"]) == 6
    assert len(data["predictions"]) == 6
    for match, prediction in zip(data["matches"], data["predictions"]):
        assert prediction["match"] == f"{match['home']} vs {match['away']}"
        assert match["venue"] == "Main Arena"
        assert match["time"] in ("14:00", "16:30")
        assert 0 <= prediction["home_win"] <= 100
        assert 0 <= prediction["away_win"] <= 100


def test_generate_schedule_boundary():
    data = client.post("/api/schedule", json={
        "teams": ["A", "B"],
        "venues": ["V1"],
        "start_date": "2024-01-01"
    }).json()

    assert data["matches"] == [{
        "id": "MATCH_001",
        "home": "A",
        "away": "B",
        "date": "1/1/2024",
        "time": "14:00",
        "venue": "V1"
    }]


def test_generate_schedule_validation_error():
    response = client.post("/api/schedule", json={
        "teams": ["A"],
        "venues": ["V1"],
        "start_date": "2024-01-01"
    })
    assert response.status_code == 400
    assert response.json()["detail"] == "Need at least 2 teams"


def test_generate_schedule_missing_start_date():
    response = client.post("/api/schedule", json={"teams": ["A", "B"], "venues": ["V1"]})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please set a start date"


def test_team_strengths():
    response = client.post("/api/strengths", json={"teams": ["Red", "Blue", "Green"], "seed": 5})
    assert response.status_code == 200

    data = response.json()
    assert [team["name"] for team in data] == ["Red", "Blue", "Green"]
    for team in data:
        assert 0 <= team["strength"] <= 100
        assert len(team["form"]) == 5
        assert 0 <= team["win_streak"] <= 3


def test_seeded_schedule_is_reproducible():
    body = {
        "teams": ["Lions", "Tigers", "Bears", "Wolves"],
        "venues": ["Main Arena"],
        "start_date": "2024-03-01",
        "seed": 7
    }
    first = client.post("/api/schedule", json=body).json()
    second = client.post("/api/schedule", json=body).json()

    assert first["predictions"] == second["predictions"]
    assert first["matches"] == second["matches"]


def test_strengths_follow_seed():
    one = client.post("/api/strengths", json={"teams": ["X", "Y"], "seed": 1}).json()
    two = client.post("/api/strengths", json={"teams": ["X", "Y"], "seed": 2}).json()
    one_again = client.post("/api/strengths", json={"teams": ["X", "Y"], "seed": 1}).json()

    assert one != two
    assert one == one_again


def test_schedule_async_submits_task():
    task = MagicMock()
    task.delay.return_value = MagicMock(id="abc")

    with patch("app.api.routes.generate_schedule_task", task):
        response = client.post("/api/schedule/async", json={
            "teams": ["A", "B"],
            "venues": ["V1"],
            "start_date": "2024-01-01",
            "seed": 3
        })

    assert response.status_code == 200
    data = response.json()
    assert data["task_id"] == "abc"
    assert data["status"] == "PENDING"
    task.delay.assert_called_once_with(["A", "B"], ["V1"], "2024-01-01", 3, False)


def test_schedule_async_broker_down():
    task = MagicMock()
    task.delay.side_effect = ConnectionError("broker unreachable")

    with patch("app.api.routes.generate_schedule_task", task):
        response = client.post("/api/schedule/async", json={
            "teams": ["A", "B"], "venues": ["V1"], "start_date": "2024-01-01"
        })

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to start task: broker unreachable"


def _status(state, info=None, result=None):
    task_result = MagicMock(state=state, info=info, result=result)
    with patch("app.api.routes.AsyncResult", return_value=task_result):
        response = client.get("/api/schedule/status/abc")
    assert response.status_code == 200
    return response.json()


def test_status_pending():
    data = _status("PENDING")
    assert data == {"task_id": "abc", "status": "PENDING", "message": "Task is waiting to start..."}


def test_status_progress():
    data = _status("PROGRESS", info={"status": "Generating schedule for 4 teams..."})
    assert data["status"] == "PROGRESS"
    assert data["message"] == "Generating schedule for 4 teams..."

    assert _status("PROGRESS", info={})["message"] == "Processing..."


def test_status_success():
    result = {"success": True, "total_matches": 1}
    data = _status("SUCCESS", result=result)
    assert data == {"task_id": "abc", "status": "SUCCESS", "result": result}


def test_status_failure():
    data = _status("FAILURE", info=RuntimeError("boom"))
    assert data["status"] == "FAILURE"
    assert data["message"] == "boom"


def test_status_other_state():
    data = _status("STARTED")
    assert data["status"] == "STARTED"
    assert data["message"] == "Task state: STARTED"


def test_status_backend_error():
    with patch("app.api.routes.AsyncResult", side_effect=ConnectionError("no backend")):
        response = client.get("/api/schedule/status/abc")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to get task status: no backend"
