from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from taskboard.config import DATABASE_URL

IS_SQLITE = DATABASE_URL.startswith("sqlite")

# Only apply sqlite-specific connect_args when using sqlite
connect_args = {"check_same_thread": False} if IS_SQLITE else {}

# pool_pre_ping drops connections a hosted database closed while idle
engine = create_engine(
    DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True,
)

if IS_SQLITE:
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores FOREIGN KEY clauses unless asked per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def create_db_and_tables():
    """Create every table registered on Base."""
    import taskboard.models  # noqa: F401  (registers mappers)
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
