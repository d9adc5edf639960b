from sessionauth.database import Database
from sessionauth.errors import DuplicateUser, RecordConflict
from sessionauth.models.db_operation import _add_record, _select_one_or_none
from sessionauth.models.user import UserEntry


class UserStore:
    """Credential store: users are created once and never updated."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def get_by_email(self, email: str) -> UserEntry | None:
        if not email:
            return None
        return await _select_one_or_none(self._database, "user", email=email)

    async def get_user(self, user_id: int) -> UserEntry | None:
        return await _select_one_or_none(self._database, "user", id=user_id)

    async def exists(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def create_user(self, email: str, password_hash: str) -> UserEntry:
        try:
            return await _add_record(
                self._database, "user", email=email, password_hash=password_hash
            )
        except RecordConflict as exc:
            # Lost a race with a concurrent signup for the same email.
            raise DuplicateUser() from exc
