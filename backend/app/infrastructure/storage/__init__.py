from .local_store import LocalSnapshotStore
from .local_repositories import LocalUmkmRepository, LocalUserRepository

__all__ = [
    "LocalSnapshotStore",
    "LocalUmkmRepository",
    "LocalUserRepository",
]
