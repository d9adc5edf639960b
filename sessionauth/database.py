from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Storage client shared by every store.

    Opened once at application startup and closed at shutdown; components get
    the instance passed in rather than importing a global engine.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self._echo = echo
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    async def open(self) -> None:
        if not self.url:
            raise RuntimeError("DATABASE_URL is not configured")
        if self._engine is not None:
            return
        engine = create_async_engine(self.url, echo=self._echo, pool_pre_ping=True)
        if engine.dialect.name == "sqlite":
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        from sessionauth.models import session as _session  # noqa: F401
        from sessionauth.models import todo as _todo  # noqa: F401
        from sessionauth.models import user as _user  # noqa: F401

        async with engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

        self._engine = engine
        self._sessionmaker = async_sessionmaker(
            bind=engine, autoflush=False, expire_on_commit=False
        )

    async def close(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None

    @asynccontextmanager
    async def session_scope(self) -> AsyncIterator[AsyncSession]:
        if self._sessionmaker is None:
            raise RuntimeError("Database is not open")
        session = self._sessionmaker()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
