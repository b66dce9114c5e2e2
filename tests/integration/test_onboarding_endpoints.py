"""Integration tests for onboarding endpoints."""
import pytest
from unittest.mock import MagicMock
from pymongo.errors import PyMongoError


def _answers(**overrides):
    answers = {
        "future_aspiration": "A skilled developer",
        "average_free_time": "3.5",
        "future_goals": "Ship a side project",
        "current_actions": "Evening courses",
        "address": "1 Main Street",
    }
    answers.update(overrides)
    return answers


def _body(step, **overrides):
    return {"state": {"step": step, "answers": _answers(**overrides)}}


@pytest.mark.asyncio
class TestOnboardingStart:
    """Tests for GET /onboarding endpoint."""

    async def test_start_requires_session(self, app_client, mock_db):
        """Test anonymous visitors are sent to the auth gate."""
        response = await app_client.get("/onboarding")

        assert response.status_code == 307
        assert response.headers["location"] == "/auth"
        assert len(mock_db) == 0

    async def test_start_returns_step1(self, app_client, auth_headers):
        """Test a signed-in user starts on an empty step 1."""
        response = await app_client.get("/onboarding", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["step_number"] == 1
        assert data["total_steps"] == 3
        assert data["title"] == "Your Future Vision"
        assert data["state"]["answers"]["future_aspiration"] == ""


@pytest.mark.asyncio
class TestOnboardingNavigation:
    """Tests for POST /onboarding/next and /onboarding/back endpoints."""

    async def test_next_from_step1(self, app_client):
        """Test a filled step 1 moves to step 2."""
        response = await app_client.post("/onboarding/next", json=_body(1))

        assert response.status_code == 200
        data = response.json()
        assert data["state"]["step"] == 2
        assert data["title"] == "Your Goals & Actions"
        assert data["state"]["answers"]["future_aspiration"] == "A skilled developer"

    async def test_next_from_step1_missing_free_time(self, app_client):
        """Test a blank free time keeps the user on step 1."""
        response = await app_client.post("/onboarding/next", json=_body(1, average_free_time=""))

        assert response.status_code == 400
        assert response.json()["detail"] == "Please fill in all fields before continuing."

    async def test_next_from_step2_missing_goals(self, app_client):
        """Test blank goals keep the user on step 2."""
        response = await app_client.post("/onboarding/next", json=_body(2, future_goals=""))

        assert response.status_code == 400

    async def test_next_with_whitespace_answers(self, app_client):
        """Test whitespace-only answers count as filled."""
        response = await app_client.post("/onboarding/next", json=_body(2, future_goals="   "))

        assert response.status_code == 200
        assert response.json()["state"]["step"] == 3
        assert response.json()["state"]["answers"]["future_goals"] == "   "

    async def test_next_from_step3_refused(self, app_client):
        """Test step 3 has no next step."""
        response = await app_client.post("/onboarding/next", json=_body(3))

        assert response.status_code == 400

    async def test_back_from_step3(self, app_client):
        """Test going back keeps the answers."""
        response = await app_client.post("/onboarding/back", json=_body(3))

        assert response.status_code == 200
        assert response.json()["state"]["step"] == 2
        assert response.json()["state"]["answers"] == _answers()

    async def test_back_from_step1_refused(self, app_client):
        """Test there is no step before 1."""
        response = await app_client.post("/onboarding/back", json=_body(1))

        assert response.status_code == 400

    async def test_invalid_step_rejected(self, app_client):
        """Test an unknown step is a validation error."""
        response = await app_client.post("/onboarding/next", json=_body(7))

        assert response.status_code == 422


@pytest.mark.asyncio
class TestOnboardingSubmit:
    """Tests for POST /onboarding/submit endpoint."""

    async def test_submit_success(self, app_client, mock_db, auth_headers, user_id):
        """Test submit writes one goal and three tasks, then goes to the dashboard."""
        response = await app_client.post("/onboarding/submit", json=_body(3), headers=auth_headers)

        assert response.status_code == 303
        assert response.headers["location"] == "/dashboard"

        update_doc = mock_db["profiles"].update_one.call_args[0][1]
        assert update_doc["$set"]["address"] == "1 Main Street"

        mock_db["goals"].insert_one.assert_awaited_once()
        goal_doc = mock_db["goals"].insert_one.call_args[0][0]
        assert goal_doc["user_id"] == user_id
        assert goal_doc["average_free_time_hours"] == 3.5

        mock_db["tasks"].insert_many.assert_awaited_once()
        assert len(mock_db["tasks"].insert_many.call_args[0][0]) == 3

    async def test_submit_requires_session(self, app_client, mock_db):
        """Test submit without a session returns 401 and writes nothing."""
        response = await app_client.post("/onboarding/submit", json=_body(3))

        assert response.status_code == 401
        assert "profiles" not in mock_db

    async def test_submit_missing_address(self, app_client, mock_db, auth_headers):
        """Test a blank address is refused before any write."""
        response = await app_client.post("/onboarding/submit", json=_body(3, address=""), headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Please enter your address."
        mock_db["profiles"].update_one.assert_not_called()

    async def test_submit_invalid_free_time(self, app_client, mock_db, auth_headers):
        """Test an unparseable free time is refused before any write."""
        response = await app_client.post(
            "/onboarding/submit",
            json=_body(3, average_free_time="lots"),
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert "non-negative number" in response.json()["detail"]
        assert "goals" not in mock_db

    async def test_submit_from_step2_refused(self, app_client, mock_db, auth_headers):
        """Test submit is only available on the last step."""
        response = await app_client.post("/onboarding/submit", json=_body(2), headers=auth_headers)

        assert response.status_code == 400

    async def test_submit_missing_profile(self, app_client, mock_db, auth_headers):
        """Test a missing profile surfaces the error and stops."""
        mock_db["profiles"].update_one.return_value = MagicMock(matched_count=0)

        response = await app_client.post("/onboarding/submit", json=_body(3), headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Profile not found"
        mock_db["goals"].insert_one.assert_not_called()

    async def test_submit_database_failure(self, app_client, mock_db, auth_headers):
        """Test a driver error is surfaced with its message."""
        mock_db["tasks"].insert_many.side_effect = PyMongoError("write concern timeout")

        response = await app_client.post("/onboarding/submit", json=_body(3), headers=auth_headers)

        assert response.status_code == 503
        assert response.json()["detail"] == "write concern timeout"
