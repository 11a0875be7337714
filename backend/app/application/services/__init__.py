from .umkm_store import UmkmStore
from .umkm_service import UmkmService

__all__ = [
    "UmkmStore",
    "UmkmService",
]
