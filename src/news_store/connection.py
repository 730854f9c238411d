"""Database engine and session factory for the news store."""

from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from dotenv import load_dotenv
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from common.config import require_env

load_dotenv()


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Create the engine from DATABASE_URL (once per process)."""
    database_url = require_env("DATABASE_URL")["DATABASE_URL"]
    return create_engine(database_url, pool_pre_ping=True)


@contextmanager
def get_session() -> Iterator[Session]:
    """Session with rollback on error; callers commit explicitly."""
    session = sessionmaker(bind=get_engine(), expire_on_commit=False)()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
