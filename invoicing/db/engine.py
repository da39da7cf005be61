# invoicing/db/engine.py

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from invoicing.db.schema import metadata


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Build the process-wide engine for the given database URL.

    In-memory SQLite databases live as long as their single connection, so
    they are pinned to one connection shared across threads.
    """
    kwargs = {"echo": echo, "future": True}
    is_sqlite = url.startswith("sqlite")

    if is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(url, **kwargs)

    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def init_schema(engine: Engine) -> None:
    metadata.create_all(engine)


def _constraint_message(exc) -> str:
    return str(getattr(exc, "orig", exc)).lower()


def is_unique_violation(exc) -> bool:
    message = _constraint_message(exc)
    return "unique" in message or "duplicate key" in message


def is_foreign_key_violation(exc) -> bool:
    return "foreign key" in _constraint_message(exc)
