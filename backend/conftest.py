"""Global pytest fixtures for testing."""

import json
import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Settings require a signing key and are built when gatehouse_api is imported
os.environ.setdefault("GATEHOUSE_SECRET_KEY", "test_settings_secret_key_0123456789abcdef")

from gatehouse_api.dependencies import get_credential_store, get_jwt_config
from gatehouse_api.main import create_app
from gatehouse_core.auth import JWTConfig, TokenIssuer, hash_password
from gatehouse_core.services import AuthSessionService
from gatehouse_core.store import JSONFileCredentialStore

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "secret"
OTHER_USERNAME = "operator"
OTHER_PASSWORD = "hunter22"

# Low bcrypt cost keeps the suite fast; hashes are computed once per session.
_ADMIN_HASH = hash_password(ADMIN_PASSWORD, rounds=4)
_OTHER_HASH = hash_password(OTHER_PASSWORD, rounds=4)


@pytest.fixture
def jwt_config() -> JWTConfig:
    """Create JWT config for testing."""
    return JWTConfig(
        secret_key="test_secret_key_12345678901234567890123456789012",
        algorithm="HS256",
        access_token_expire_minutes=15,
        refresh_token_expire_minutes=24 * 60,
    )


@pytest.fixture
def token_issuer(jwt_config: JWTConfig) -> TokenIssuer:
    """Create token issuer for testing."""
    return TokenIssuer(jwt_config)


@pytest.fixture
def credentials_path(tmp_path: Path) -> Path:
    """Write a credential document with two administrators."""
    path = tmp_path / "administrators.json"
    path.write_text(
        json.dumps(
            [
                {"username": ADMIN_USERNAME, "passwordHash": _ADMIN_HASH},
                {"username": OTHER_USERNAME, "passwordHash": _OTHER_HASH},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def store(credentials_path: Path) -> JSONFileCredentialStore:
    """Load the credential store from the test document."""
    return JSONFileCredentialStore.load(credentials_path)


@pytest.fixture
def auth_service(store: JSONFileCredentialStore, token_issuer: TokenIssuer) -> AuthSessionService:
    """Create an authentication session service over the test store."""
    return AuthSessionService(store, token_issuer)


@pytest.fixture
def read_document(credentials_path: Path):
    """Return a callable that reads the credential document from disk."""

    def _read() -> list[dict]:
        return json.loads(credentials_path.read_text(encoding="utf-8"))

    return _read


@pytest_asyncio.fixture
async def client(
    store: JSONFileCredentialStore, jwt_config: JWTConfig
) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with store and JWT overrides."""
    app = create_app()
    app.dependency_overrides[get_credential_store] = lambda: store
    app.dependency_overrides[get_jwt_config] = lambda: jwt_config

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="https://test") as ac:
        yield ac

    app.dependency_overrides.clear()
