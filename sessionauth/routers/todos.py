from fastapi import APIRouter, Depends

from sessionauth.dependencies import get_current_user_id, get_todo_store, http_error
from sessionauth.errors import ValidationError
from sessionauth.models.todo import TodoEntry
from sessionauth.schemas.todos import TodoCreate, TodoCreatedResponse, TodoResponse
from sessionauth.schemas.users import SuccessResponse
from sessionauth.services.todos import TodoStore

router = APIRouter(prefix="/todos", tags=["todos"])


def _to_response(entry: TodoEntry) -> TodoResponse:
    return TodoResponse(
        id=entry.id,
        user_id=entry.user_id,
        task=entry.task,
        completed=bool(entry.completed),
    )


@router.get("", response_model=list[TodoResponse])
async def list_todos(
    user_id: int = Depends(get_current_user_id),
    todo_store: TodoStore = Depends(get_todo_store),
) -> list[TodoResponse]:
    entries = await todo_store.list_todos(user_id)
    return [_to_response(entry) for entry in entries]


@router.post("", response_model=TodoCreatedResponse)
async def create_todo(
    payload: TodoCreate,
    user_id: int = Depends(get_current_user_id),
    todo_store: TodoStore = Depends(get_todo_store),
) -> TodoCreatedResponse:
    try:
        entry = await todo_store.create_todo(user_id, payload.task)
    except ValidationError as exc:
        raise http_error(exc) from exc
    return TodoCreatedResponse(id=entry.id, task=entry.task, completed=bool(entry.completed))


@router.delete("/{todo_id}", response_model=SuccessResponse, response_model_exclude_none=True)
async def delete_todo(
    todo_id: int,
    user_id: int = Depends(get_current_user_id),
    todo_store: TodoStore = Depends(get_todo_store),
) -> SuccessResponse:
    await todo_store.delete_todo(todo_id, user_id)
    return SuccessResponse()
