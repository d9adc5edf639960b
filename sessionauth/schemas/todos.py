from typing import Optional

from pydantic import BaseModel


class TodoCreate(BaseModel):
    task: Optional[str] = None


class TodoResponse(BaseModel):
    id: int
    user_id: int
    task: str
    completed: bool


class TodoCreatedResponse(BaseModel):
    id: int
    task: str
    completed: bool
