# jewellery_store/data/database.py
from sqlalchemy import create_engine, event, Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from jewellery_store.utils.settings import DATABASE_URL, SQL_ECHO

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_store_engine(url: str | None = None, **kwargs) -> Engine:
    """Engine for the store; callers own it and pass sessions made from it into services."""
    url = url or DATABASE_URL
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)
    kwargs.setdefault("echo", SQL_ECHO)

    engine = create_engine(url, **kwargs)
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def create_tables(engine: Engine) -> None:
    # models must be imported so they register on Base.metadata
    import jewellery_store.data.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
