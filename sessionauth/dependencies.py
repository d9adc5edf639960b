from fastapi import Depends, HTTPException, Request

from sessionauth.config import Settings
from sessionauth.errors import AuthServiceError, Unauthenticated
from sessionauth.schemas.sessions import Invalid
from sessionauth.services.auth import AuthService
from sessionauth.services.sessions import SessionManager
from sessionauth.services.todos import TodoStore


def http_error(exc: AuthServiceError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_todo_store(request: Request) -> TodoStore:
    return request.app.state.todo_store


async def get_current_user_id(
    request: Request,
    settings: Settings = Depends(get_settings),
    session_manager: SessionManager = Depends(get_session_manager),
) -> int:
    """Authorization gate for every protected route.

    Reads the session cookie, asks the session manager whether it is live and
    records the owning user on ``request.state``. A missing cookie and an
    unknown or revoked token produce the same 401.
    """
    session_id = request.cookies.get(settings.session_cookie_name)
    if not session_id:
        raise http_error(Unauthenticated())
    result = await session_manager.validate_session(session_id)
    if isinstance(result, Invalid):
        raise http_error(Unauthenticated())
    request.state.user_id = result.user_id
    request.state.session_id = session_id
    return result.user_id


def get_current_session_id(
    request: Request, _: int = Depends(get_current_user_id)
) -> str:
    return request.state.session_id
