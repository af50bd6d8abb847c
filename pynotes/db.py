
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .config import get_settings
from .errors import FatalSchemaError
from . import messages

log = logging.getLogger(__name__)

class Base(DeclarativeBase):
    pass

def make_engine(url: str | None = None) -> Engine:
    try:
        return create_engine(url or get_settings().DB_URL, future=True)
    except (SQLAlchemyError, ImportError) as e:
        # ImportError: не установлен драйвер, например psycopg2 без extra "postgres"
        raise FatalSchemaError(messages.DB_CONNECT_FAILED) from e

def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)

def init_db(engine: Engine) -> None:
    # модели должны быть импортированы, чтобы попасть в Base.metadata
    from . import models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        log.error("Schema setup failed for %s", engine.url.render_as_string(hide_password=True), exc_info=e)
        raise FatalSchemaError(messages.SCHEMA_FAILED) from e
