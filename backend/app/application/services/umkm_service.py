"""Application service (use case) for the UMKM management screens."""

from app.application.schemas import UmkmCreate, UmkmUpdate
from app.application.services.umkm_store import UmkmStore
from app.domain.entities import Umkm, UmkmFilter, User


class UmkmService:
    """Role-aware listing and CRUD on top of the record store (DI)."""

    def __init__(self, store: UmkmStore):
        self._store = store

    async def sign_in(self, user: User) -> User:
        return await self._store.sync_user(user)

    async def list_visible(
        self, user: User, filters: UmkmFilter | None = None
    ) -> list[Umkm]:
        """Admins with an RW see their whole zone; everyone else sees their own records."""
        if user.is_admin and user.rw:
            records = await self._store.list(rw=user.rw)
        else:
            records = await self._store.list(owner_user_id=user.id)
        if filters is None:
            return records
        return filters.apply(records)

    async def get(self, record_id: str) -> Umkm | None:
        return await self._store.get_by_id(record_id)

    async def create(self, user: User, data: UmkmCreate) -> Umkm:
        if not data.owner_user_id:
            data = data.model_copy(update={"owner_user_id": user.id})
        return await self._store.create(data)

    async def update(self, record_id: str, data: UmkmUpdate) -> Umkm | None:
        return await self._store.update(record_id, data)

    async def delete(self, record_id: str) -> bool:
        return await self._store.delete(record_id)
