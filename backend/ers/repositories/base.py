import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ers.core.errors import InternalError

logger = logging.getLogger(__name__)


class SqlRepository:
    # one session per operation, opened by _session()

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _session(self, error_message: str = None) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError:
            db.rollback()
            logger.exception("%s: storage failure", type(self).__name__)
            # the driver error stays in the log, callers only see InternalError
            raise InternalError(error_message) from None
        finally:
            db.close()
