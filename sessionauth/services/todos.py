from sessionauth.database import Database
from sessionauth.errors import ValidationError
from sessionauth.models.db_operation import _add_record, _delete_records, _select_records
from sessionauth.models.todo import TodoEntry

# Largest value a SQLite or Postgres BIGINT primary key can hold.
MAX_ROW_ID = 2**63 - 1


class TodoStore:
    """Todo records; every query is scoped to the owning user."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def list_todos(self, user_id: int) -> list[TodoEntry]:
        return await _select_records(
            self._database, "todo", order_by="id", user_id=user_id
        )

    async def create_todo(self, user_id: int, task: str | None) -> TodoEntry:
        cleaned = (task or "").strip()
        if not cleaned:
            raise ValidationError("Task required")
        return await _add_record(
            self._database, "todo", user_id=user_id, task=cleaned, completed=False
        )

    async def delete_todo(self, todo_id: int, user_id: int) -> bool:
        if not 1 <= todo_id <= MAX_ROW_ID:
            return False
        deleted = await _delete_records(
            self._database, "todo", id=todo_id, user_id=user_id
        )
        return deleted > 0
