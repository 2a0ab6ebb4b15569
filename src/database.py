"""Database engine and per-request session handling."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.config import get_settings

settings = get_settings()


def engine_options(database_url: str) -> dict[str, Any]:
    """Keyword arguments for ``create_engine``.

    Bound parameters (emails, password hashes, tokens) are kept out of
    statement errors, which are logged and may be echoed in debug responses.
    """
    options: dict[str, Any] = {"hide_parameters": True}
    # SQLite uses a single-connection pool and rejects pool sizing
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(pool_pre_ping=True, pool_size=5, max_overflow=10)
    return options


engine = create_engine(settings.database_url, **engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Yield one session per request; the workflows decide when to commit."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create the account tables directly, bypassing migrations."""
    from src import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
