"""
Integration tests for the HTTP boundary.

Tests unlock, mark, logout and config through the FastAPI test client,
including the distinct failure bodies callers rely on.
"""

import time

from fastapi.testclient import TestClient

from prompt_marker.access import AccessGate
from prompt_marker.api import create_app
from prompt_marker.config import Settings

INVALID_CODE = {"ok": False, "error": "invalid_code"}
REAUTHORIZE = {"ok": False, "error": "unauthorized", "reauthorize": True}


class TestHealthAndConfig:
    """Tests for the read-only endpoints."""

    def test_health(self, client: TestClient) -> None:
        """Test the liveness probe."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_config_exposes_task_metadata(self, client: TestClient) -> None:
        """Test the config surface carries the gate the engine uses."""
        body = client.get("/api/config").json()

        assert body["ok"] is True
        assert body["minWordsGate"] == 20
        assert body["maxWords"] == 300
        assert body["targetWords"] == "20–300"
        assert body["templateText"] == "Role:\nTask:\nContext:\nFormat:"
        assert "Aim for at least 20 words." in body["questionText"]
        assert body["courseBackUrl"] == ""
        assert body["nextLessonUrl"] == ""

    def test_config_does_not_need_a_session(self, client: TestClient) -> None:
        """Test config is readable before unlocking."""
        assert client.get("/api/config").status_code == 200


class TestUnlock:
    """Tests for POST /api/unlock."""

    def test_correct_code_sets_cookie(self, client: TestClient, test_settings: Settings) -> None:
        """Test a good code returns ok and a hardened session cookie."""
        response = client.post("/api/unlock", json={"code": "TEST-CODE-01"})

        assert response.status_code == 200
        assert response.json() == {"ok": True}

        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith(f"{test_settings.cookie_name}=")
        assert "HttpOnly" in set_cookie
        assert "samesite=lax" in set_cookie.lower()
        assert "Max-Age=3600" in set_cookie
        assert client.cookies.get(test_settings.cookie_name)

    def test_wrong_code_is_unauthorized(self, client: TestClient) -> None:
        """Test a wrong code gets 401 and no cookie."""
        response = client.post("/api/unlock", json={"code": "WRONG"})

        assert response.status_code == 401
        assert response.json() == INVALID_CODE
        assert "set-cookie" not in response.headers

    def test_all_bad_inputs_look_the_same(self, client: TestClient) -> None:
        """Test empty, missing, non-text and unreadable codes are indistinguishable."""
        responses = [
            client.post("/api/unlock", json={"code": ""}),
            client.post("/api/unlock", json={}),
            client.post("/api/unlock", json={"code": 12345}),
            client.post("/api/unlock", json=["TEST-CODE-01"]),
            client.post(
                "/api/unlock",
                content=b"{not json",
                headers={"content-type": "application/json"},
            ),
        ]

        for response in responses:
            assert response.status_code == 401
            assert response.json() == INVALID_CODE
            assert "set-cookie" not in response.headers

    def test_code_is_trimmed(self, client: TestClient) -> None:
        """Test surrounding whitespace in the code is ignored."""
        response = client.post("/api/unlock", json={"code": "  TEST-CODE-01  "})

        assert response.status_code == 200


class TestMark:
    """Tests for POST /api/mark."""

    def test_mark_without_session_asks_to_reauthorize(self, client: TestClient) -> None:
        """Test marking without a cookie fails distinctly from a bad code."""
        response = client.post("/api/mark", json={"answerText": "Plan a trip"})

        assert response.status_code == 401
        assert response.json() == REAUTHORIZE
        assert response.json() != INVALID_CODE

    def test_wrong_code_then_mark(self, client: TestClient) -> None:
        """Test a failed unlock leaves the caller unauthenticated."""
        client.post("/api/unlock", json={"code": "WRONG"})
        response = client.post("/api/mark", json={"answerText": "Plan a trip"})

        assert response.status_code == 401
        assert response.json()["reauthorize"] is True

    def test_short_answer_gated(self, unlocked_client: TestClient) -> None:
        """Test a short answer returns only the gated fields."""
        response = unlocked_client.post("/api/mark", json={"answerText": "Plan a trip"})

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        result = body["result"]
        assert result["gated"] is True
        assert result["wordCount"] == 3
        assert result["message"].startswith("Please add to your answer.")
        assert set(result) == {"gated", "wordCount", "message"}

    def test_full_answer(self, unlocked_client: TestClient, rome_prompt: str) -> None:
        """Test the reference prompt gets full marks over HTTP."""
        result = unlocked_client.post("/api/mark", json={"answerText": rome_prompt}).json()["result"]

        assert result["gated"] is False
        assert result["score"] == 10
        assert [t["status"] for t in result["tags"]] == ["ok"] * 4
        assert len(result["grid"]) == 4
        assert len(result["strengths"]) == 3
        assert result["frameworkText"]
        assert result["modelAnswer"]

    def test_legacy_answer_key(self, unlocked_client: TestClient, rome_prompt: str) -> None:
        """Test the older 'answer' key is still accepted."""
        result = unlocked_client.post("/api/mark", json={"answer": rome_prompt}).json()["result"]

        assert result["score"] == 10

    def test_missing_text_is_gated_not_error(self, unlocked_client: TestClient) -> None:
        """Test an absent answer is word count zero."""
        response = unlocked_client.post("/api/mark", json={})

        assert response.status_code == 200
        assert response.json()["result"] == {
            "gated": True,
            "wordCount": 0,
            "message": response.json()["result"]["message"],
        }

    def test_oversized_answer_truncated(self, unlocked_client: TestClient) -> None:
        """Test oversized input degrades instead of failing."""
        response = unlocked_client.post("/api/mark", json={"answerText": "word " * 5000})

        assert response.status_code == 200
        assert response.json()["result"]["wordCount"] == 1200

    def test_malformed_body_is_retryable_not_auth(self, unlocked_client: TestClient) -> None:
        """Test an unreadable body is a bad request, not an authorization failure."""
        response = unlocked_client.post(
            "/api/mark",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"ok": False, "error": "bad_request", "retryable": True}

    def test_tampered_cookie(self, unlocked_client: TestClient, test_settings: Settings) -> None:
        """Test an altered cookie asks the caller to reauthorize."""
        token = unlocked_client.cookies.get(test_settings.cookie_name)
        unlocked_client.cookies.clear()
        unlocked_client.cookies.set(test_settings.cookie_name, "x" + token)

        response = unlocked_client.post("/api/mark", json={"answerText": "Plan a trip"})

        assert response.status_code == 401
        assert response.json() == REAUTHORIZE

    def test_expired_cookie(self, client: TestClient, test_settings: Settings) -> None:
        """Test a genuine but expired token asks the caller to reauthorize."""
        two_hours_ago = time.time() - 7200
        stale = AccessGate(test_settings, clock=lambda: two_hours_ago).issue_session()
        client.cookies.set(test_settings.cookie_name, stale)

        response = client.post("/api/mark", json={"answerText": "Plan a trip"})

        assert response.status_code == 401
        assert response.json() == REAUTHORIZE

    def test_engine_failure_is_not_auth_failure(
        self, test_settings: Settings, rome_prompt: str
    ) -> None:
        """Test unexpected errors surface as retryable server errors."""

        class BrokenEngine:
            def mark(self, text: str) -> None:
                raise RuntimeError("boom")

        app = create_app(test_settings)
        app.state.engine = BrokenEngine()
        client = TestClient(app, raise_server_exceptions=False)
        client.post("/api/unlock", json={"code": "TEST-CODE-01"})

        response = client.post("/api/mark", json={"answerText": rome_prompt})

        assert response.status_code == 500
        assert response.json() == {"ok": False, "error": "server_error", "retryable": True}


class TestLogout:
    """Tests for POST /api/logout."""

    def test_logout_clears_cookie(self, unlocked_client: TestClient, test_settings: Settings) -> None:
        """Test logout expires the session cookie."""
        response = unlocked_client.post("/api/logout")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith(f"{test_settings.cookie_name}=")
        assert "Max-Age=0" in set_cookie
