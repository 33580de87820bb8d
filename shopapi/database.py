# shopapi/database.py
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from shopapi.core.config import get_settings

settings = get_settings()


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create the process-wide storage handle for a database URL.

    - SQLite: FastAPI runs sync routes in a thread pool, so the
      connection must be shareable across threads. An in-memory
      database has to live on a single pooled connection or every
      new connection would see an empty schema.
    - Everything else: validate pooled connections before use.
    """
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)

    return create_engine(url, echo=echo, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)


def create_db_and_tables(bind: Engine | None = None) -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Any storage error raised while the request is handled rolls back
    the open transaction before the error handler renders a 500.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        try:
            yield session
        except SQLAlchemyError:
            session.rollback()
            raise
