import logging

from sqlmodel import SQLModel, create_engine, Session
from .config import settings

logger = logging.getLogger(__name__)

# SQLite needs this to share a connection across the threadpool FastAPI
# runs sync endpoints in.
_connect_args = (
    {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
)

engine = create_engine(
    settings.database_url,
    echo=False,
    pool_pre_ping=True,
    connect_args=_connect_args,
)

def init_db() -> None:
    # Import models so metadata contains tables
    import todo_scheduler.models  # noqa: F401
    SQLModel.metadata.create_all(engine)
    logger.info("Database ready (%s)", engine.url.render_as_string(hide_password=True))

def get_session():
    with Session(engine) as session:
        yield session
