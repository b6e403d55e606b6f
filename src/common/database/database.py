import os
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

# Default to a local SQLite file if not specified
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ecotrack.db")


def create_db_engine(url: str = DATABASE_URL, echo: bool = False) -> Engine:
    """Creates an engine; SQLite connections are shared across request threads."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, pool_pre_ping=True, connect_args=connect_args)


engine = create_db_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def configure_database(url: str, echo: bool = False) -> Engine:
    """Rebinds the session factory to a configured database."""
    global engine
    engine = create_db_engine(url, echo=echo)
    SessionLocal.configure(bind=engine)
    return engine


def get_db():
    """Dependency for getting DB session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = None):
    """Initialize database tables."""
    # Import models here to ensure they are registered with Base
    from . import models
    Base.metadata.create_all(bind=bind or engine)
