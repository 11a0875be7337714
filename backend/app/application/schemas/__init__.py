from .umkm import UmkmCreate, UmkmUpdate, UmkmResponse

__all__ = [
    "UmkmCreate",
    "UmkmUpdate",
    "UmkmResponse",
]
