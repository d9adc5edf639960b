import bcrypt
from fastapi.concurrency import run_in_threadpool

from sessionauth.errors import HashingError

# bcrypt ignores (or, in recent releases, rejects) anything past this length.
MAX_PASSWORD_BYTES = 72


class PasswordVerifier:
    """Salted bcrypt hashing with a tunable work factor.

    Hashing and verification run in the threadpool so a request waiting on
    bcrypt does not hold up the event loop.
    """

    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds
        self._dummy_hash: str | None = None

    def hash_sync(self, plaintext: str) -> str:
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")
        except (ValueError, TypeError, OSError) as exc:
            raise HashingError() from exc

    def verify_sync(self, plaintext: str, hash_string: str) -> bool:
        if not plaintext or not hash_string:
            return False
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), hash_string.encode("utf-8"))
        except (ValueError, TypeError):
            return False

    async def hash(self, plaintext: str) -> str:
        return await run_in_threadpool(self.hash_sync, plaintext)

    async def verify(self, plaintext: str, hash_string: str) -> bool:
        return await run_in_threadpool(self.verify_sync, plaintext, hash_string)

    async def verify_dummy(self, plaintext: str) -> None:
        """Spend one verification's worth of time for a user that does not exist."""
        if self._dummy_hash is None:
            self._dummy_hash = await self.hash("unused-dummy-password")
        await self.verify(plaintext, self._dummy_hash)
