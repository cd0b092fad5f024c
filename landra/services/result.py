import functools
import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy.orm import Session

from landra.services.errors import LandraError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[LandraError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LandraError) -> "ServiceResult[Any]":
        return cls(error=error)


def service_operation(func):
    """
    Run a service method as one unit of work and return a ServiceResult.

    The wrapped method receives the session as its first argument after
    ``self``. Known errors roll back and come back as failures; anything else
    is logged and collapsed into a generic StorageError.
    """

    @functools.wraps(func)
    def wrapper(self, db: Session, *args, **kwargs) -> ServiceResult:
        try:
            return ServiceResult.success(func(self, db, *args, **kwargs))
        except LandraError as e:
            db.rollback()
            logger.info("%s rejected: %s", func.__name__, e.message)
            return ServiceResult.failure(e)
        except Exception:
            db.rollback()
            logger.exception("%s failed", func.__name__)
            return ServiceResult.failure(StorageError())

    return wrapper
