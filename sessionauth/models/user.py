from sqlalchemy import Column, Integer, String

from sessionauth.database import Base


class UserEntry(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(128), nullable=False)
