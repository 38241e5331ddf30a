"""Mobile registry use cases (list, lookup, save, delete, existence)."""

from __future__ import annotations

import logging
from typing import FrozenSet, Optional

from mobile_storage.core.config import STORAGE_BACKENDS, get_settings
from mobile_storage.domain.mobiles import Mobile
from mobile_storage.repositories.base import MobileRepository
from mobile_storage.repositories.memory_repository import InMemoryMobileRepository
from mobile_storage.repositories.sql_repository import SQLMobileRepository

logger = logging.getLogger(__name__)


class MobileError(Exception):
    """Base exception for mobile registry operations."""

    def __init__(self, message: str, mobile: Mobile):
        super().__init__(message)
        self.message = message
        self.mobile = mobile


class MobileAlreadyExistsError(MobileError):
    """Raised when saving a record equal to one already stored."""


class MobileNotFoundError(MobileError):
    """Raised when deleting a record that is not stored."""


def build_repository(backend: str | None = None) -> MobileRepository:
    """Return the repository for ``backend``, defaulting to the configured one."""
    name = (backend or get_settings().storage_backend).strip().lower()
    if name == "memory":
        return InMemoryMobileRepository()
    if name == "sql":
        return SQLMobileRepository()
    raise ValueError(f"Unknown storage backend {name!r}; expected one of {', '.join(STORAGE_BACKENDS)}")


class MobileService:
    """Keeps a unique set of mobiles and answers queries over it.

    Uniqueness is on the whole record: two mobiles with the same IMEI but
    different models may both be stored.
    """

    def __init__(self, repository: MobileRepository | None = None) -> None:
        self.repository = repository if repository is not None else build_repository()

    def get_all(self) -> FrozenSet[Mobile]:
        """Snapshot of every stored mobile; later writes are not reflected."""
        return self.repository.list_mobiles()

    def find_by_imei(self, imei: str) -> Optional[Mobile]:
        """Return a mobile with this IMEI, or None.

        If several stored records share the IMEI, which one is returned is
        unspecified.
        """
        return self.repository.find_by_imei(imei)

    def save(self, mobile: Mobile) -> Mobile:
        if not self.repository.add(mobile):
            logger.warning("Rejected duplicate mobile imei=%s model=%s", mobile.imei, mobile.model)
            raise MobileAlreadyExistsError("Mobile already exists", mobile)
        logger.info("Saved mobile imei=%s model=%s", mobile.imei, mobile.model)
        return mobile

    def delete(self, mobile: Mobile) -> None:
        if not self.repository.remove(mobile):
            logger.warning("Mobile not found for delete imei=%s model=%s", mobile.imei, mobile.model)
            raise MobileNotFoundError("Mobile not found", mobile)
        logger.info("Deleted mobile imei=%s model=%s", mobile.imei, mobile.model)

    def exists(self, mobile: Mobile) -> bool:
        return self.repository.contains(mobile)

    def count(self) -> int:
        return self.repository.count()
