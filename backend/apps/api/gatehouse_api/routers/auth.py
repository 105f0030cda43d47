"""
Authentication router.

Provides endpoints for administrator login, logout and identity.
"""

from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from gatehouse_core import get_logger
from gatehouse_core.exceptions import BadRequestError, PersistenceError, UnauthenticatedError
from gatehouse_core.schemas import AccessTokenResponse, CurrentAdminResponse, LoginRequest
from gatehouse_core.services import AuthSessionService

from ..config import settings
from ..dependencies import get_auth_service, get_current_admin

logger = get_logger(__name__)

router = APIRouter()


def _set_refresh_cookie(response: Response, refresh_token: str, max_age: int) -> None:
    response.set_cookie(
        key=settings.refresh_cookie_name,
        value=refresh_token,
        max_age=max_age,
        httponly=True,
        secure=settings.refresh_cookie_secure,
        samesite=settings.refresh_cookie_samesite,
    )


@router.post(
    "/login",
    response_model=AccessTokenResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Username or password missing"},
        status.HTTP_401_UNAUTHORIZED: {"description": "Invalid credentials"},
    },
)
async def login(
    data: LoginRequest,
    response: Response,
    auth_service: Annotated[AuthSessionService, Depends(get_auth_service)],
) -> AccessTokenResponse | Response:
    """
    Authenticate an administrator and issue tokens.

    The access token is returned in the body; the refresh token is set as an
    http-only cookie whose max age equals the refresh token lifetime.

    Args:
        data: Login credentials.
        response: Outgoing response, used to set the refresh cookie.
        auth_service: Authentication session service.

    Returns:
        Access token.

    Raises:
        HTTPException: If the rotated refresh token could not be stored.
    """
    try:
        tokens = await auth_service.login(data)
    except BadRequestError as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": str(e)})
    except UnauthenticatedError:
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)
    except PersistenceError:
        logger.exception("Login could not persist refresh token")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not complete login",
        )

    max_age = int(auth_service.token_issuer.refresh_ttl.total_seconds())
    _set_refresh_cookie(response, tokens.refresh_token, max_age)
    return AccessTokenResponse(access_token=tokens.access_token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    auth_service: Annotated[AuthSessionService, Depends(get_auth_service)],
    refresh_token: Annotated[str | None, Cookie(alias=settings.refresh_cookie_name)] = None,
) -> Response:
    """
    Clear the stored refresh token presented in the cookie and delete the cookie.

    Args:
        auth_service: Authentication session service.
        refresh_token: Refresh token cookie.

    Returns:
        Empty response.
    """
    try:
        await auth_service.logout(refresh_token)
    except PersistenceError:
        logger.exception("Logout could not persist cleared refresh token")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not complete logout",
        )

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(
        key=settings.refresh_cookie_name,
        httponly=True,
        secure=settings.refresh_cookie_secure,
        samesite=settings.refresh_cookie_samesite,
    )
    return response


@router.get("/me")
async def get_me(
    current_admin: Annotated[CurrentAdminResponse, Depends(get_current_admin)],
) -> CurrentAdminResponse:
    """
    Get the administrator identified by the bearer access token.

    Args:
        current_admin: Administrator from the access token.

    Returns:
        Administrator identity.
    """
    return current_admin
