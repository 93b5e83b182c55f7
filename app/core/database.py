import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    # SQLite uses a single-file or in-memory database without a connection pool
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using them
        "pool_size": 10,
        "max_overflow": 20,
    }


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    Alembic owns the schema ("alembic upgrade head"). Importing the models
    registers them on Base.metadata; AUTO_CREATE_TABLES creates any missing
    tables directly, which is convenient for SQLite development databases.
    """
    import app.models  # noqa: F401

    if settings.AUTO_CREATE_TABLES:
        logger.info("AUTO_CREATE_TABLES enabled, creating missing tables")
        Base.metadata.create_all(bind=engine)
