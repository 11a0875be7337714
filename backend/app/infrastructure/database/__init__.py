from .base import Base
from .session import build_engine, build_session_factory
from .models import UmkmModel, UserModel

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "UmkmModel",
    "UserModel",
]
