from .umkm import UmkmModel
from .user import UserModel

__all__ = [
    "UmkmModel",
    "UserModel",
]
