from .umkm_repository import UmkmRepository
from .user_repository import UserRepository

__all__ = [
    "UmkmRepository",
    "UserRepository",
]
