from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
import logging

from app import config

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------
# DATABASE ENGINE & SESSION
# ------------------------------------------------------------------------------

connect_args = {"check_same_thread": False} if config.DATABASE_URL.startswith("sqlite") else {}

try:
    engine = create_engine(
        config.DATABASE_URL,
        connect_args=connect_args,
        pool_pre_ping=True,   # drops dead MySQL connections before use
    )
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base = declarative_base()
except Exception as e:
    logger.error(f"Failed to create SQLAlchemy engine: {e}")
    raise


# ------------------------------------------------------------------------------
# INITIALIZATION
# ------------------------------------------------------------------------------
def init_db():
    """Initialize database tables (runs once on startup)."""
    from app.models import string_analysis  # noqa: F401  registers the table
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully.")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise
