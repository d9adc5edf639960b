from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from sessionauth.database import Base


class SessionEntry(Base):
    __tablename__ = "sessions"

    # The token itself is the primary key; a row existing means the session is live.
    id = Column(String(128), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    device = Column(String(512), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
