"""Storage protocol shared by the repository backends."""
from __future__ import annotations

from typing import FrozenSet, Optional, Protocol, runtime_checkable

from mobile_storage.domain.mobiles import Mobile


@runtime_checkable
class MobileRepository(Protocol):
    """Raw storage operations used by ``MobileService``.

    Repositories never raise for duplicates or missing records: ``add`` and
    ``remove`` report whether they changed anything and the service turns
    that into the appropriate error.
    """

    def list_mobiles(self) -> FrozenSet[Mobile]:  # pragma: no cover - interface
        ...

    def find_by_imei(self, imei: str) -> Optional[Mobile]:  # pragma: no cover - interface
        ...

    def contains(self, mobile: Mobile) -> bool:  # pragma: no cover - interface
        ...

    def add(self, mobile: Mobile) -> bool:  # pragma: no cover - interface
        ...

    def remove(self, mobile: Mobile) -> bool:  # pragma: no cover - interface
        ...

    def count(self) -> int:  # pragma: no cover - interface
        ...
