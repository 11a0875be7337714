from .umkm import BusinessCategory, BusinessStatus, Umkm, UmkmFilter, utc_now_after
from .user import User, UserRole
from .store_backend import StoreBackend

__all__ = [
    "BusinessCategory",
    "BusinessStatus",
    "Umkm",
    "UmkmFilter",
    "utc_now_after",
    "User",
    "UserRole",
    "StoreBackend",
]
