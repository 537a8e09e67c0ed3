"""
Database connection and session management for the database content backend.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Generator, Optional

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from personal_site.config import get_config
from personal_site.logger import get_logger
from personal_site.models import Base

if TYPE_CHECKING:
    from personal_site.config import DatabaseConfig

logger = get_logger(__name__)


def build_sqlite_url(path: str) -> str:
    """Build a SQLAlchemy URL for a SQLite path.

    - ":memory:" -> "sqlite://"
    - "data/site.db" -> "sqlite:///data/site.db"
    - "sqlite:///data/site.db" -> unchanged
    """
    if path.startswith("sqlite://"):
        return path
    if path == ":memory:":
        return "sqlite://"

    Path(path).parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{path}"


def _engine_kwargs(path: str, echo: bool) -> dict:
    kwargs = {
        "echo": echo,
        "connect_args": {"check_same_thread": False},
    }
    if path == ":memory:":
        # A single shared connection keeps the in-memory database alive across sessions
        kwargs["poolclass"] = StaticPool
    return kwargs


def _set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """Database manager for context-managed database operations."""

    def __init__(self, db_path: Optional[str] = None, db_config: Optional["DatabaseConfig"] = None):
        """Initialize database manager.

        Args:
            db_path: Optional SQLite database path (":memory:" for tests)
            db_config: Optional database configuration

        Note:
            If neither db_path nor db_config is provided, uses the global config.
        """
        if db_path is None:
            db_config = db_config or get_config().database
            db_path = db_config.path
            echo = db_config.echo
        else:
            echo = False

        self.db_path = db_path
        self._echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def engine(self) -> Engine:
        """Get the database engine."""
        if self._engine is None:
            self._engine = create_engine(
                build_sqlite_url(self.db_path),
                **_engine_kwargs(self.db_path, self._echo),
            )
            event.listen(self._engine, "connect", _set_sqlite_pragma)
            logger.debug(f"Created database engine for {self.db_path}")

        return self._engine

    def init_db(self, drop_all: bool = False) -> None:
        """Initialize database tables.

        Args:
            drop_all: If True, drop existing tables first
        """
        if drop_all:
            logger.warning("Dropping all tables - data will be lost!")
            Base.metadata.drop_all(bind=self.engine)

        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Get a database session.

        Commits on success and rolls back if the block raises.

        Yields:
            SQLAlchemy Session instance
        """
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,
                bind=self.engine,
            )
        session = self._session_factory()

        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self) -> None:
        """Close database connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None

    def __enter__(self) -> "DatabaseManager":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
