class AuthServiceError(Exception):
    """Base class for every error raised by the auth and todo services."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(AuthServiceError):
    status_code = 400
    default_message = "Invalid request"


class DuplicateUser(AuthServiceError):
    status_code = 400
    default_message = "User already exists"


class InvalidCredentials(AuthServiceError):
    # Unknown email and wrong password must be indistinguishable.
    status_code = 400
    default_message = "Invalid email or password"


class Unauthenticated(AuthServiceError):
    # Missing, unknown and revoked tokens share one message.
    status_code = 401
    default_message = "Not logged in"


class StorageError(AuthServiceError):
    pass


class SessionCreateError(StorageError):
    default_message = "Could not create session"


class HashingError(AuthServiceError):
    default_message = "Password hashing failed"


class RecordConflict(StorageError):
    """A unique or foreign-key constraint rejected a write."""

    default_message = "Record conflicts with existing data"
