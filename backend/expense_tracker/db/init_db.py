"""
Database initialization script.
"""
from expense_tracker.core.config import settings
from expense_tracker.db.session import create_db_engine, init_db

if __name__ == "__main__":
    print("Initializing database...")
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
    init_db(engine)
    print("Database initialized successfully!")
