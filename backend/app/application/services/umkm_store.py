"""UmkmStore — one persistence interface for UMKM records, whatever the backend.

The backend is fixed when the store is built (see
``app.infrastructure.store_factory``): a configured database URL selects the
remote SQLAlchemy repositories, otherwise the local JSON snapshot is used.
The only rule enforced here is identifier validation: on the remote backend
user ids must be UUIDs. Everything else the backend raises propagates as is.
"""

import logging

from app.application.interfaces import UmkmRepository, UserRepository
from app.application.schemas import UmkmCreate, UmkmUpdate
from app.domain.entities import StoreBackend, Umkm, User
from app.domain.exceptions import InvalidIdentifierError, is_valid_uuid

logger = logging.getLogger(__name__)


class UmkmStore:
    """Facade over the record and user repositories of the selected backend."""

    def __init__(
        self,
        records: UmkmRepository,
        users: UserRepository,
        backend: StoreBackend,
    ):
        self._records = records
        self._users = users
        self._backend = backend
        logger.info("UmkmStore using %s backend", backend.value)

    @property
    def backend(self) -> StoreBackend:
        return self._backend

    @property
    def requires_uuid(self) -> bool:
        return self._backend is StoreBackend.REMOTE

    def _check_user_id(self, field: str, value: str | None) -> None:
        if self.requires_uuid and not is_valid_uuid(value):
            raise InvalidIdentifierError(field, value or "")

    # ── Lifecycle ───────────────────────────────────────────────────

    async def open(self) -> None:
        await self._records.open()

    async def close(self) -> None:
        await self._records.close()

    # ── Records ─────────────────────────────────────────────────────

    async def list(
        self,
        owner_user_id: str | None = None,
        rw: str | None = None,
    ) -> list[Umkm]:
        """List records newest first.

        ``owner_user_id`` takes precedence over ``rw`` when both are given.
        """
        if owner_user_id:
            return await self._records.get_all(owner_user_id=owner_user_id)
        if rw:
            return await self._records.get_all(rw=rw)
        return await self._records.get_all()

    async def get_by_id(self, record_id: str) -> Umkm | None:
        return await self._records.get_by_id(record_id)

    async def create(self, data: UmkmCreate) -> Umkm:
        self._check_user_id("owner_user_id", data.owner_user_id)
        record = await self._records.create(data.model_dump())
        logger.info("Created UMKM %s for user %s", record.id, record.owner_user_id)
        return record

    async def update(self, record_id: str, data: UmkmUpdate) -> Umkm | None:
        changes = data.changes()
        if "owner_user_id" in changes:
            self._check_user_id("owner_user_id", changes["owner_user_id"])
        record = await self._records.update(record_id, changes)
        if record is None:
            logger.debug("Update skipped — UMKM %s not found", record_id)
        else:
            logger.info("Updated UMKM %s (%s)", record_id, ", ".join(sorted(changes)) or "touch")
        return record

    async def delete(self, record_id: str) -> bool:
        deleted = await self._records.delete(record_id)
        if deleted:
            logger.info("Deleted UMKM %s", record_id)
        return deleted

    # ── Users ───────────────────────────────────────────────────────

    async def sync_user(self, user: User) -> User:
        """Record the identity-provider claims so RW scoping can resolve the user."""
        self._check_user_id("user_id", user.id)
        return await self._users.upsert(user)
