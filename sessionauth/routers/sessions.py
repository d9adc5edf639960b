from fastapi import APIRouter, Depends

from sessionauth.dependencies import get_current_user_id, get_session_manager
from sessionauth.models.session import SessionEntry
from sessionauth.schemas.sessions import RevokeRequest, SessionResponse
from sessionauth.schemas.users import SuccessResponse
from sessionauth.services.sessions import SessionManager

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _to_response(entry: SessionEntry) -> SessionResponse:
    return SessionResponse(
        id=entry.id,
        user_id=entry.user_id,
        device=entry.device,
        created_at=entry.created_at,
    )


@router.get("", response_model=list[SessionResponse])
async def list_sessions(
    user_id: int = Depends(get_current_user_id),
    session_manager: SessionManager = Depends(get_session_manager),
) -> list[SessionResponse]:
    entries = await session_manager.list_sessions(user_id)
    return [_to_response(entry) for entry in entries]


@router.post("/revoke", response_model=SuccessResponse, response_model_exclude_none=True)
async def revoke_session(
    payload: RevokeRequest,
    user_id: int = Depends(get_current_user_id),
    session_manager: SessionManager = Depends(get_session_manager),
) -> SuccessResponse:
    # Revoked and NotOwned answer identically so a foreign token's existence never leaks.
    await session_manager.revoke_session(payload.session_id, user_id)
    return SuccessResponse()
