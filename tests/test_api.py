"""Transliteration API tests: POST /v1/transliterate."""
from fastapi.testclient import TestClient


def test_transliterate_success(client: TestClient, valid_payload: dict) -> None:
    """A successful request returns 200 and the IAST text."""
    response = client.post("/v1/transliterate", json=valid_payload)
    assert response.status_code == 200
    assert response.json() == {"output": "ka|\n", "unknown_codepoints": []}


def test_transliterate_reports_unknown(client: TestClient) -> None:
    response = client.post("/v1/transliterate", json={"input": "༂ཀ"})
    assert response.status_code == 200
    body = response.json()
    assert body["output"] == "f02 ka"
    assert body["unknown_codepoints"] == ["U+0F02"]


def test_requests_do_not_share_state(client: TestClient) -> None:
    """A pending vowel from one request never shows up in the next."""
    r1 = client.post("/v1/transliterate", json={"input": "ཀ"})
    r2 = client.post("/v1/transliterate", json={"input": "ྒ"})
    assert r1.json()["output"] == "ka"
    assert r2.json()["output"] == "g"


def test_validation_missing_input(client: TestClient) -> None:
    """Missing input returns 422."""
    response = client.post("/v1/transliterate", json={})
    assert response.status_code == 422


def test_validation_empty_input(client: TestClient) -> None:
    """Empty input returns 422."""
    response = client.post("/v1/transliterate", json={"input": ""})
    assert response.status_code == 422


def test_validation_input_too_long(client: TestClient) -> None:
    """Input over max_input_chars returns 422."""
    response = client.post("/v1/transliterate", json={"input": "ཀ" * 1001})
    assert response.status_code == 422


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_auth_no_header_returns_401(client_with_auth: TestClient, valid_payload: dict) -> None:
    """Without auth when require_auth=True, returns 401."""
    response = client_with_auth.post("/v1/transliterate", json=valid_payload)
    assert response.status_code == 401
    assert "detail" in response.json()


def test_auth_wrong_token_returns_401(client_with_auth: TestClient, valid_payload: dict) -> None:
    """Invalid Bearer token returns 401."""
    response = client_with_auth.post(
        "/v1/transliterate",
        json=valid_payload,
        headers={"Authorization": "Bearer wrong-token"},
    )
    assert response.status_code == 401


def test_auth_valid_token_returns_200(client_with_auth: TestClient, valid_payload: dict) -> None:
    """With a valid Bearer token, the request succeeds."""
    response = client_with_auth.post(
        "/v1/transliterate",
        json=valid_payload,
        headers={"Authorization": "Bearer test-secret-key"},
    )
    assert response.status_code == 200
    assert response.json()["output"] == "ka|\n"
