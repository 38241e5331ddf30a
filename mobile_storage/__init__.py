"""
In-memory storage for mobile phone records keyed by IMEI.

Callers should go through ``MobileService``; repositories are the storage
adapters behind it.
"""

from mobile_storage.domain.mobiles import Mobile
from mobile_storage.services.mobile_service import (
    MobileAlreadyExistsError,
    MobileError,
    MobileNotFoundError,
    MobileService,
)

__all__ = [
    "Mobile",
    "MobileAlreadyExistsError",
    "MobileError",
    "MobileNotFoundError",
    "MobileService",
]
