"""
Database engine and session factory construction.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from expense_tracker.db.base import Base


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the configured database URL."""
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live per connection; keep a single one
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=3600
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Build the session factory bound to an engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine):
    """Initialize database tables."""
    # Register models on the metadata before creating tables
    import expense_tracker.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
