"""Local fallback backend — UMKM and user repositories over a LocalSnapshotStore."""

from datetime import datetime
from typing import Any

from app.application.interfaces import UmkmRepository, UserRepository
from app.domain.entities import Umkm, User, utc_now_after
from app.infrastructure.storage.local_store import LocalSnapshotStore


def _to_row(record: Umkm) -> dict[str, Any]:
    """Map domain entity → flat field map as stored in the snapshot."""
    return {
        "id": record.id,
        "name": record.name,
        "owner": record.owner,
        "category": record.category,
        "phone": record.phone,
        "status": record.status,
        "owner_user_id": record.owner_user_id,
        "created_at": record.created_at.isoformat(),
        "updated_at": record.updated_at.isoformat(),
    }


def _to_entity(row: dict[str, Any]) -> Umkm:
    """Map snapshot field map → domain entity."""
    return Umkm(
        id=str(row["id"]),
        name=row["name"],
        owner=row["owner"],
        category=row["category"],
        phone=row["phone"],
        status=row["status"],
        owner_user_id=row["owner_user_id"],
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )


class LocalUmkmRepository(UmkmRepository):
    """Implements the UmkmRepository port on the local snapshot.

    Ids are sequential numeric strings ("1", "2", ...). Ids that are not
    numeric are ignored when picking the next one.
    """

    def __init__(self, store: LocalSnapshotStore):
        self._store = store

    async def open(self) -> None:
        self._store.load()

    def _next_id(self) -> str:
        numeric = [int(row["id"]) for row in self._store.umkms if str(row["id"]).isdigit()]
        return str(max(numeric, default=0) + 1)

    def _latest_created_at(self) -> datetime | None:
        stamps = [datetime.fromisoformat(row["created_at"]) for row in self._store.umkms]
        return max(stamps, default=None)

    def _index_of(self, record_id: str) -> int | None:
        for index, row in enumerate(self._store.umkms):
            if str(row["id"]) == record_id:
                return index
        return None

    async def get_all(
        self,
        *,
        owner_user_id: str | None = None,
        rw: str | None = None,
    ) -> list[Umkm]:
        rows = self._store.umkms
        if owner_user_id is not None:
            rows = [row for row in rows if row["owner_user_id"] == owner_user_id]
        elif rw is not None:
            user_ids = {user["id"] for user in self._store.users if user.get("rw") == rw}
            rows = [row for row in rows if row["owner_user_id"] in user_ids]

        records = [_to_entity(row) for row in rows]
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    async def get_by_id(self, record_id: str) -> Umkm | None:
        index = self._index_of(record_id)
        return _to_entity(self._store.umkms[index]) if index is not None else None

    async def create(self, fields: dict[str, Any]) -> Umkm:
        now = utc_now_after(self._latest_created_at())
        record = Umkm(
            id=self._next_id(),
            name=fields["name"],
            owner=fields["owner"],
            category=fields["category"],
            phone=fields["phone"],
            status=fields["status"],
            owner_user_id=fields["owner_user_id"],
            created_at=now,
            updated_at=now,
        )
        self._store.umkms.append(_to_row(record))
        self._store.save()
        return record

    async def update(self, record_id: str, changes: dict[str, Any]) -> Umkm | None:
        index = self._index_of(record_id)
        if index is None:
            return None
        record = _to_entity(self._store.umkms[index])
        record.apply(changes)
        self._store.umkms[index] = _to_row(record)
        self._store.save()
        return record

    async def delete(self, record_id: str) -> bool:
        index = self._index_of(record_id)
        if index is None:
            return False
        del self._store.umkms[index]
        self._store.save()
        return True


class LocalUserRepository(UserRepository):
    """User directory kept in the snapshot's 'users' collection."""

    def __init__(self, store: LocalSnapshotStore):
        self._store = store

    async def upsert(self, user: User) -> User:
        row = {"id": user.id, "role": user.role, "rw": user.rw}
        for index, existing in enumerate(self._store.users):
            if existing["id"] == user.id:
                if existing == row:
                    return user
                self._store.users[index] = row
                break
        else:
            self._store.users.append(row)
        self._store.save()
        return user
