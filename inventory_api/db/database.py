# inventory_api/db/database.py
import logging
import time

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from inventory_api.core.config import settings

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # FastAPI runs sync endpoints in a threadpool
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_pre_ping=settings.DB_POOL_PRE_PING,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def setup_slow_query_logging(target: Engine) -> None:
    logger = logging.getLogger("sqlalchemy.slow")

    @event.listens_for(target, "before_cursor_execute")
    def before_cursor(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("query_start_time", []).append(time.time())

    @event.listens_for(target, "after_cursor_execute")
    def after_cursor(conn, cursor, statement, parameters, context, executemany):
        start_times = conn.info.get("query_start_time")
        if not start_times:
            return
        start_time = start_times.pop(-1)
        duration_ms = (time.time() - start_time) * 1000
        if duration_ms >= settings.SLOW_QUERY_THRESHOLD_MS:
            logger.warning(
                "Slow query detected",
                extra={
                    "duration_ms": duration_ms,
                    "statement": statement,
                },
            )


def _unicode_lower(value):
    return value.lower() if value is not None else None


def register_sqlite_functions(target: Engine) -> None:
    """Replace SQLite's ASCII-only lower() with str.lower on every connection."""
    if target.dialect.name != "sqlite":
        return

    @event.listens_for(target, "connect")
    def on_connect(dbapi_conn, connection_record):
        dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


setup_slow_query_logging(engine)
register_sqlite_functions(engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
