from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Valid:
    user_id: int


@dataclass(frozen=True)
class Invalid:
    pass


SessionValidation = Union[Valid, Invalid]


@dataclass(frozen=True)
class Revoked:
    session_id: str


@dataclass(frozen=True)
class NotOwned:
    session_id: str


RevokeOutcome = Union[Revoked, NotOwned]


class SessionResponse(BaseModel):
    id: str
    user_id: int
    device: str
    created_at: datetime


class RevokeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = Field(default=None, alias="sessionId")
