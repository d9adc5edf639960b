import logging
from dataclasses import dataclass

from sessionauth.errors import DuplicateUser, InvalidCredentials, ValidationError
from sessionauth.services.passwords import MAX_PASSWORD_BYTES, PasswordVerifier
from sessionauth.services.sessions import SessionManager
from sessionauth.services.users import UserStore

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    user_id: int
    session_id: str


class AuthService:
    def __init__(
        self,
        user_store: UserStore,
        password_verifier: PasswordVerifier,
        session_manager: SessionManager,
    ) -> None:
        self._users = user_store
        self._passwords = password_verifier
        self._sessions = session_manager

    async def signup(self, email: str | None, password: str | None) -> int:
        if not email or not password:
            raise ValidationError("Email and password required")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )
        if await self._users.exists(email):
            raise DuplicateUser()

        password_hash = await self._passwords.hash(password)
        user = await self._users.create_user(email, password_hash)
        LOGGER.info("Created user %s", user.id)
        return user.id

    async def login(
        self, email: str | None, password: str | None, device: str | None
    ) -> LoginResult:
        if not email or not password:
            raise InvalidCredentials()

        user = await self._users.get_by_email(email)
        if user is None:
            await self._passwords.verify_dummy(password)
            LOGGER.info("Rejected login attempt")
            raise InvalidCredentials()
        if not await self._passwords.verify(password, user.password_hash):
            LOGGER.info("Rejected login attempt")
            raise InvalidCredentials()

        session_id = await self._sessions.create_session(user.id, device)
        return LoginResult(user_id=user.id, session_id=session_id)

    async def logout(self, session_id: str) -> None:
        await self._sessions.revoke_current_session(session_id)
