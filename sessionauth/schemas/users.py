from typing import Optional

from pydantic import BaseModel


class CredentialsRequest(BaseModel):
    # Both optional so a missing field is reported as a 400, not a 422.
    email: Optional[str] = None
    password: Optional[str] = None


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
