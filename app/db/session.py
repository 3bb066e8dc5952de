from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.db import changes  # noqa: F401  registers the change feed session hooks

def _connect_args() -> dict:
    # Request handlers run in a thread pool; SQLite connections are shared across it
    return {"check_same_thread": False} if settings.USE_SQLITE else {}

engine = create_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    pool_pre_ping=not settings.USE_SQLITE,
    connect_args=_connect_args(),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@contextmanager
def session_scope():
    """Session for scripts outside a request; rolled back on error, always closed."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
