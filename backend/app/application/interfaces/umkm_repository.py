"""Abstract repository interface (port) for UMKM persistence."""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities import Umkm


class UmkmRepository(ABC):
    """Port for UMKM persistence — implemented by the remote and local backends."""

    async def open(self) -> None:
        """Prepare the backend (schema, snapshot load). No-op by default."""

    async def close(self) -> None:
        """Release backend resources. No-op by default."""

    @abstractmethod
    async def get_all(
        self,
        *,
        owner_user_id: str | None = None,
        rw: str | None = None,
    ) -> list[Umkm]:
        """Retrieve records newest first, scoped by owner or by the owner's RW."""
        ...

    @abstractmethod
    async def get_by_id(self, record_id: str) -> Umkm | None:
        """Retrieve a single record, or None."""
        ...

    @abstractmethod
    async def create(self, fields: dict[str, Any]) -> Umkm:
        """Persist a new record, assigning id and timestamps."""
        ...

    @abstractmethod
    async def update(self, record_id: str, changes: dict[str, Any]) -> Umkm | None:
        """Merge *changes* into a record. Returns None if it does not exist."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...
