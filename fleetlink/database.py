# fleetlink/database.py
"""
Database connection, session management, and table creation.
Uses SQLAlchemy with PostgreSQL (SQLite works for local runs). All models are
auto-imported here so create_tables() creates every table in one call.
"""

from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from fleetlink.config import settings
from fleetlink.utils.errors import FleetLinkError, StoreError, ValidationError
from fleetlink.utils.logger import get_logger

logger = get_logger(__name__)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # Sync routes run in a threadpool, so connections cross threads
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,       # Auto-reconnect if DB connection drops
        "pool_size": 10,
        "max_overflow": 20,
    }


engine = create_engine(
    settings.DATABASE_URL,
    echo=False,                      # Set True to log all SQL queries (debug only)
    **_engine_options(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency: yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    """
    Creates all DB tables on startup. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from fleetlink.models.vehicle import Vehicle    # noqa
    from fleetlink.models.booking import Booking    # noqa

    Base.metadata.create_all(bind=bind or engine)


@contextmanager
def store_errors(db, action: str):
    """
    Roll back and translate persistence failures raised inside the block.
    Constraint violations become ValidationError, anything else from the
    driver becomes StoreError. Domain errors pass through after rollback.
    """
    try:
        yield
    except FleetLinkError:
        db.rollback()
        raise
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"{action}: constraint violated: {e.orig}")
        raise ValidationError(errors=[{"store": str(e.orig)}]) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{action}: store failure: {e}", exc_info=True)
        raise StoreError() from e
