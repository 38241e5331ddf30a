"""Set-backed repository; the default storage for mobiles."""
from __future__ import annotations

from typing import FrozenSet, Iterable, Optional, Set

from mobile_storage.domain.mobiles import Mobile


class InMemoryMobileRepository:
    """Holds mobiles in a plain set. Records are unique on the whole value."""

    def __init__(self, mobiles: Iterable[Mobile] = ()) -> None:
        self._mobiles: Set[Mobile] = set(mobiles)

    def list_mobiles(self) -> FrozenSet[Mobile]:
        return frozenset(self._mobiles)

    def find_by_imei(self, imei: str) -> Optional[Mobile]:
        # Set iteration order is arbitrary; with shared IMEIs any match may come back.
        for mobile in self._mobiles:
            if mobile.imei == imei:
                return mobile
        return None

    def contains(self, mobile: Mobile) -> bool:
        return mobile in self._mobiles

    def add(self, mobile: Mobile) -> bool:
        if mobile in self._mobiles:
            return False
        self._mobiles.add(mobile)
        return True

    def remove(self, mobile: Mobile) -> bool:
        if mobile not in self._mobiles:
            return False
        self._mobiles.remove(mobile)
        return True

    def count(self) -> int:
        return len(self._mobiles)
