import logging
import secrets
from datetime import datetime, timezone

from sessionauth.config import MIN_SESSION_TOKEN_BYTES
from sessionauth.database import Database
from sessionauth.errors import RecordConflict, SessionCreateError
from sessionauth.models.db_operation import (
    _add_record,
    _delete_records,
    _select_one_or_none,
    _select_records,
)
from sessionauth.models.session import SessionEntry
from sessionauth.schemas.sessions import (
    Invalid,
    NotOwned,
    RevokeOutcome,
    Revoked,
    SessionValidation,
    Valid,
)
from sessionauth.services.users import UserStore

LOGGER = logging.getLogger(__name__)

DEFAULT_DEVICE = "Unknown Device"


def _short(token: str) -> str:
    return token[:8]


class SessionStore:
    """Rows in the sessions table, one per login."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def insert(self, session_id: str, user_id: int, device: str) -> SessionEntry:
        return await _add_record(
            self._database,
            "session",
            id=session_id,
            user_id=user_id,
            device=device,
            created_at=datetime.now(timezone.utc),
        )

    async def get(self, session_id: str) -> SessionEntry | None:
        return await _select_one_or_none(self._database, "session", id=session_id)

    async def list_for_user(self, user_id: int) -> list[SessionEntry]:
        return await _select_records(
            self._database, "session", order_by="created_at", user_id=user_id
        )

    async def delete(self, session_id: str) -> int:
        return await _delete_records(self._database, "session", id=session_id)

    async def delete_owned(self, session_id: str, user_id: int) -> int:
        return await _delete_records(
            self._database, "session", id=session_id, user_id=user_id
        )


class SessionManager:
    """Maps opaque session tokens to the user that logged in with them.

    A token is valid exactly as long as its row exists; revoking deletes the
    row. Nothing here looks at ``created_at``: the cookie max-age is the only
    lifetime a session has.
    """

    def __init__(
        self,
        session_store: SessionStore,
        user_store: UserStore,
        token_bytes: int = MIN_SESSION_TOKEN_BYTES,
    ) -> None:
        self._sessions = session_store
        self._users = user_store
        self._token_bytes = max(token_bytes, MIN_SESSION_TOKEN_BYTES)

    def _new_token(self) -> str:
        return secrets.token_hex(self._token_bytes)

    async def create_session(self, user_id: int, device: str | None = None) -> str:
        if await self._users.get_user(user_id) is None:
            raise SessionCreateError(f"Unknown user {user_id}")
        token = self._new_token()
        try:
            await self._sessions.insert(token, user_id, device or DEFAULT_DEVICE)
        except RecordConflict as exc:
            # Either the token collided or user_id does not exist; never overwrite.
            raise SessionCreateError() from exc
        LOGGER.info("Created session %s for user %s", _short(token), user_id)
        return token

    async def validate_session(self, session_id: str | None) -> SessionValidation:
        if not session_id:
            return Invalid()
        entry = await self._sessions.get(session_id)
        if entry is None:
            return Invalid()
        return Valid(user_id=entry.user_id)

    async def list_sessions(self, user_id: int) -> list[SessionEntry]:
        return await self._sessions.list_for_user(user_id)

    async def revoke_session(
        self, session_id: str | None, requesting_user_id: int
    ) -> RevokeOutcome:
        if not session_id:
            return NotOwned(session_id="")
        deleted = await self._sessions.delete_owned(session_id, requesting_user_id)
        if deleted == 0:
            LOGGER.info(
                "User %s tried to revoke session %s they do not own",
                requesting_user_id,
                _short(session_id),
            )
            return NotOwned(session_id=session_id)
        LOGGER.info("User %s revoked session %s", requesting_user_id, _short(session_id))
        return Revoked(session_id=session_id)

    async def revoke_current_session(self, session_id: str) -> None:
        await self._sessions.delete(session_id)
        LOGGER.info("Session %s logged out", _short(session_id))
