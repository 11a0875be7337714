from .umkm_repository import SQLAlchemyUmkmRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyUmkmRepository",
    "SQLAlchemyUserRepository",
]
