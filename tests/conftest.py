"""API test fixtures: test app built from explicit settings."""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tibetan_iast.api.routes import router as transliterate_router
from tibetan_iast.settings import Settings


def create_test_app(*, require_auth: bool = False, max_input_chars: int = 1000) -> FastAPI:
    """Creates a FastAPI test app without reading .env."""
    app = FastAPI(title="Tibetan IAST Test", version="0.1.0")
    app.include_router(transliterate_router)
    app.state.settings = Settings(
        _env_file=None,
        require_auth=require_auth,
        api_key="test-secret-key",
        max_input_chars=max_input_chars,
    )
    return app


@pytest.fixture
def app():
    """App without authentication."""
    return create_test_app(require_auth=False)


@pytest.fixture
def app_with_auth():
    """App with authentication enabled."""
    return create_test_app(require_auth=True)


@pytest.fixture
def client(app: FastAPI):
    """HTTP client for the app without authentication."""
    return TestClient(app)


@pytest.fixture
def client_with_auth(app_with_auth: FastAPI):
    """HTTP client for the app with authentication."""
    return TestClient(app_with_auth)


@pytest.fixture
def valid_payload():
    """Valid request body for POST /v1/transliterate: KA, shad."""
    return {"input": "ཀ།"}
