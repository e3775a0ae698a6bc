"""SQLAlchemy implementation of the Unit of Work port."""

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mathcards.application.common.unit_of_work import UnitOfWork
from mathcards.exceptions import StoreError

logger = structlog.get_logger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Unit of Work bound to a request-scoped SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        """
        Commit the session transaction.

        Raises:
            StoreError: If the database rejects the transaction
        """
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("commit_failed", error=str(e))
            raise StoreError("Failed to persist changes") from e

    def rollback(self) -> None:
        self.db.rollback()
