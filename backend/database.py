from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from config.rental_config import get_database_url

DATABASE_URL = get_database_url()


def build_engine(url: str):
    """Create an engine; SQLite connections get WAL mode and enforced foreign keys."""
    if not url.startswith('sqlite'):
        return create_engine(url, echo=False, pool_pre_ping=True)

    sqlite_engine = create_engine(
        url,
        connect_args={'check_same_thread': False},
        echo=False,
    )

    @event.listens_for(sqlite_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        if ':memory:' not in url:
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

