from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from app.config import PSQL_URL, SQL_ECHO
from app.db.psql.models import Base
from app.exceptions import StoreError
from app.utils.logger import get_logger

logger = get_logger(__name__)

engine = create_engine(PSQL_URL, echo=SQL_ECHO, pool_pre_ping=True)
session_maker = sessionmaker(bind=engine)


def init_db():
    Base.metadata.create_all(bind=session_maker.kw["bind"])
    logger.info("Database schema is up to date")


@contextmanager
def store_stage(message):
    """Turn a database failure inside the block into a StoreError carrying `message`."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"{message}: {e}")
        raise StoreError(message) from e
