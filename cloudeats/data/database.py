# cloudeats/data/database.py
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from cloudeats.utils.retry import startup_retry
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


def create_db_engine(url: str, **kwargs) -> Engine:
    return create_engine(url, pool_pre_ping=True, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@startup_retry()
def wait_for_database(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Connected to SQL database")


def init_schema(engine: Engine) -> None:
    #models have to be imported before create_all
    from cloudeats.data import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info(f"Tables ready: {list(Base.metadata.tables.keys())}")


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
