"""
Database engine and session management.

One SQLAlchemy engine per process; each request gets its own Session
through the get_db dependency.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from pitico_app.config import settings
from pitico_app.exceptions import StorageUnavailable
from pitico_app.logging_config import get_logger

logger = get_logger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """Create an engine, allowing SQLite connections to cross threads"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # FastAPI runs sync dependencies in a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = create_db_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind: Engine = None) -> Engine:
    """
    Open the backing store and make sure the schema exists.
    
    Safe to call repeatedly: tables that already exist are left untouched.
    
    Raises:
        StorageUnavailable: if the database cannot be reached or the
            schema cannot be created
    """
    # Models must be imported so they are registered with Base
    from pitico_app.models import UrlRecord  # noqa: F401

    bind = bind if bind is not None else engine
    try:
        Base.metadata.create_all(bind=bind)
    except SQLAlchemyError as e:
        raise StorageUnavailable(f"Cannot initialize database {bind.url!r}: {e}") from e

    logger.info("Database ready at %s", bind.url)
    return bind


def get_db():
    """Yield a database session, closing it once the request is done"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
