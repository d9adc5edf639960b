from sessionauth.models.session import SessionEntry
from sessionauth.models.todo import TodoEntry
from sessionauth.models.user import UserEntry


class Databases:
    session = SessionEntry
    todo = TodoEntry
    user = UserEntry
