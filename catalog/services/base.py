# services/base.py
from typing import Generic, TypeVar
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from catalog.exceptions import CatalogError, DuplicateError, StorageError
from catalog.utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class BaseService(Generic[T]):
    def __init__(self, db: Session):
        self.db = db

    def _run(self, operation, commit: bool):
        result = operation()
        if commit:
            self.db.commit()
        return result

    async def _handle_db_operation(self, operation, commit: bool = True):
        # Blocking driver calls, including lock waits, stay off the event loop
        try:
            return await run_in_threadpool(self._run, operation, commit)
        except CatalogError:
            self.db.rollback()
            raise
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Database integrity error: {}", str(e.orig))
            raise DuplicateError("Record with this identifier already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Database operation error: {}", str(e))
            raise StorageError("Storage is unavailable") from e
