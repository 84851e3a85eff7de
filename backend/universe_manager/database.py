"""
Database connection and session management

SQLAlchemy 2.0 style with SQLite (default) and PostgreSQL support.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from universe_manager.config import get_settings
from universe_manager.exceptions import ConflictError, StorageError

logger = logging.getLogger(__name__)

settings = get_settings()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores FOREIGN KEY clauses unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, **kwargs) -> Engine:
    """
    Create a SQLAlchemy engine.

    SQLite engines get foreign key enforcement so restricted deletes of
    wrestlers/shows with championship or roster history fail at the store.
    """
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        connect_args = kwargs.setdefault("connect_args", {})
        connect_args.setdefault("check_same_thread", False)

    engine = create_engine(database_url, pool_pre_ping=True, **kwargs)

    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


# Create database engine
engine = create_db_engine(
    settings.database_url,
    echo=settings.sql_echo,
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create base class for models
Base = declarative_base()


def get_db():
    """
    Dependency for getting database session

    Usage in FastAPI:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Run a block as one storage transaction.

    Commits on success. On any failure the whole block is rolled back;
    IntegrityError becomes ConflictError and other SQLAlchemy failures
    become StorageError. Domain errors propagate unchanged.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Transaction rolled back on integrity conflict: {e.orig}")
        raise ConflictError(
            "Concurrent or referential conflict, re-read current state and retry",
            original_error=e,
        ) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Transaction rolled back on storage failure: {e}")
        raise StorageError("Storage transaction failed", original_error=e) from e
    except Exception:
        db.rollback()
        raise


@contextmanager
def storage_errors() -> Iterator[None]:
    """Surface SQLAlchemy failures on read paths as StorageError"""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Storage read failed: {e}")
        raise StorageError("Storage read failed", original_error=e) from e


def init_db(bind: Engine = None):
    """Initialize database (create all tables)"""
    # Import all models to register them with Base
    from universe_manager.models import Wrestler, Show, Title, TitleHolder, ShowRoster  # noqa
    Base.metadata.create_all(bind=bind or engine)
