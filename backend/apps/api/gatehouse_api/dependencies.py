"""
FastAPI dependencies.

Provides dependency injection for the credential store, token issuer,
authentication service and the current administrator.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from gatehouse_core.auth import JWTConfig, TokenIssuer
from gatehouse_core.schemas import CurrentAdminResponse
from gatehouse_core.services import AuthSessionService
from gatehouse_core.store import CredentialStore

from .config import settings

# Security scheme for JWT bearer tokens
security = HTTPBearer(auto_error=False)


def get_jwt_config() -> JWTConfig:
    """
    Get JWT configuration.

    Returns:
        JWT configuration instance.
    """
    return JWTConfig(
        secret_key=settings.secret_key,
        algorithm=settings.jwt_algorithm,
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
        refresh_token_expire_minutes=settings.jwt_refresh_token_expire_minutes,
    )


def get_token_issuer(
    jwt_config: Annotated[JWTConfig, Depends(get_jwt_config)],
) -> TokenIssuer:
    """Get token issuer instance."""
    return TokenIssuer(jwt_config)


def get_credential_store(request: Request) -> CredentialStore:
    """
    Get the credential store loaded at startup.

    Raises:
        RuntimeError: If the store was not initialized.
    """
    store = getattr(request.app.state, "credential_store", None)
    if store is None:
        raise RuntimeError("Credential store not initialized")
    return store


def get_auth_service(
    store: Annotated[CredentialStore, Depends(get_credential_store)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AuthSessionService:
    """Get authentication session service instance."""
    return AuthSessionService(store, token_issuer)


async def get_current_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> CurrentAdminResponse:
    """
    Get current administrator from a bearer access token.

    Raises:
        HTTPException: If the token is missing, invalid, expired or not an access token.
    """
    token_data = None
    if credentials is not None:
        token_data = token_issuer.verify(credentials.credentials, expected_type="access")

    if token_data is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return CurrentAdminResponse(username=token_data.sub)
