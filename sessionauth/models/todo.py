from sqlalchemy import Boolean, Column, ForeignKey, Integer, String

from sessionauth.database import Base


class TodoEntry(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    task = Column(String(1024), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
