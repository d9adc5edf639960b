from contextlib import contextmanager

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from sessionauth.database import Database
from sessionauth.errors import RecordConflict, StorageError
from sessionauth.models.db_config import Databases


def _model(db: str):
    return getattr(Databases, db)


def _conditions(model, filters: dict) -> list:
    conditions = []
    for field, value in filters.items():
        if not hasattr(model, field):
            raise ValueError(
                f"{model.__name__} has no column '{field}'"
            )
        column = getattr(model, field)
        if value is None:
            conditions.append(column.is_(None))
        else:
            conditions.append(column == value)
    return conditions


@contextmanager
def _storage_errors(model):
    try:
        yield
    except IntegrityError as exc:
        raise RecordConflict(
            f"{model.__tablename__} constraint violated"
        ) from exc
    except SQLAlchemyError as exc:
        raise StorageError(f"{model.__tablename__} storage operation failed") from exc


async def _add_record(database: Database, db: str, **kwargs):
    model = _model(db)

    instance = model(**kwargs)

    with _storage_errors(model):
        async with database.session_scope() as session:
            session.add(instance)
            await session.flush()
    return instance


async def _select_records(database: Database, db: str, *, order_by=None, **kwargs):
    model = _model(db)

    stmt = select(model).where(*_conditions(model, kwargs))

    if order_by is not None:
        stmt = stmt.order_by(getattr(model, order_by))

    with _storage_errors(model):
        async with database.session_scope() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())


async def _select_one_or_none(database: Database, db: str, **kwargs):
    model = _model(db)

    with _storage_errors(model):
        async with database.session_scope() as session:
            result = await session.execute(
                select(model).where(*_conditions(model, kwargs))
            )
            return result.scalar_one_or_none()


async def _delete_records(database: Database, db: str, **kwargs) -> int:
    model = _model(db)

    conditions = _conditions(model, kwargs)
    if not conditions:
        raise ValueError(f"Refusing to delete every {model.__name__} row")

    with _storage_errors(model):
        async with database.session_scope() as session:
            result = await session.execute(
                delete(model).where(*conditions)
            )
            return result.rowcount
