from fastapi import APIRouter, Depends, Request, Response

from sessionauth.config import Settings
from sessionauth.dependencies import (
    get_auth_service,
    get_current_session_id,
    get_settings,
    http_error,
)
from sessionauth.errors import DuplicateUser, InvalidCredentials, ValidationError
from sessionauth.schemas.users import CredentialsRequest, SuccessResponse
from sessionauth.services.auth import AuthService

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=SuccessResponse)
async def signup(
    payload: CredentialsRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> SuccessResponse:
    try:
        await auth_service.signup(payload.email, payload.password)
    except (ValidationError, DuplicateUser) as exc:
        raise http_error(exc) from exc
    return SuccessResponse(message="User created!")


@router.post("/login", response_model=SuccessResponse)
async def login(
    payload: CredentialsRequest,
    request: Request,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> SuccessResponse:
    device = request.headers.get("user-agent")
    try:
        result = await auth_service.login(payload.email, payload.password, device)
    except InvalidCredentials as exc:
        raise http_error(exc) from exc

    response.set_cookie(
        key=settings.session_cookie_name,
        value=result.session_id,
        max_age=settings.session_cookie_max_age,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return SuccessResponse(message="Logged in!")


@router.post("/logout", response_model=SuccessResponse, response_model_exclude_none=True)
async def logout(
    response: Response,
    session_id: str = Depends(get_current_session_id),
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> SuccessResponse:
    await auth_service.logout(session_id)
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return SuccessResponse()
