"""Unit tests for the UmkmService (role scoping, filtering, ownership stamping)."""

from datetime import timedelta
from typing import Any

import pytest

from app.application.interfaces import UmkmRepository, UserRepository
from app.application.schemas import UmkmCreate, UmkmUpdate
from app.application.services import UmkmService, UmkmStore
from app.domain.entities import StoreBackend, Umkm, UmkmFilter, User, utc_now_after


class FakeUmkmRepository(UmkmRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self, users: "FakeUserRepository"):
        self._records: dict[str, Umkm] = {}
        self._users = users
        self._next_id = 1

    async def get_all(self, *, owner_user_id=None, rw=None) -> list[Umkm]:
        records = list(self._records.values())
        if owner_user_id is not None:
            records = [r for r in records if r.owner_user_id == owner_user_id]
        elif rw is not None:
            ids = {u.id for u in self._users.users.values() if u.rw == rw}
            records = [r for r in records if r.owner_user_id in ids]
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    async def get_by_id(self, record_id: str) -> Umkm | None:
        return self._records.get(record_id)

    async def create(self, fields: dict[str, Any]) -> Umkm:
        # Space creations out so ordering is deterministic.
        now = utc_now_after() + timedelta(seconds=self._next_id)
        record = Umkm(id=str(self._next_id), created_at=now, updated_at=now, **fields)
        self._next_id += 1
        self._records[record.id] = record
        return record

    async def update(self, record_id: str, changes: dict[str, Any]) -> Umkm | None:
        record = self._records.get(record_id)
        if record is None:
            return None
        record.apply(changes)
        return record

    async def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None


class FakeUserRepository(UserRepository):
    def __init__(self):
        self.users: dict[str, User] = {}

    async def upsert(self, user: User) -> User:
        self.users[user.id] = user
        return user


ADMIN = User(id="admin-1", role="admin", rw="05")
SITI = User(id="siti", rw="05")
ANDI = User(id="andi", rw="07")


def _create(name: str, category: str = "Kuliner", status: str = "Aktif") -> UmkmCreate:
    return UmkmCreate(
        name=name, owner="Pemilik", category=category, phone="0812", status=status
    )


@pytest.fixture
def service() -> UmkmService:
    users = FakeUserRepository()
    for user in (ADMIN, SITI, ANDI):
        users.users[user.id] = user
    store = UmkmStore(FakeUmkmRepository(users), users, backend=StoreBackend.LOCAL)
    return UmkmService(store)


@pytest.mark.asyncio
async def test_create_stamps_current_user_as_owner(service: UmkmService):
    record = await service.create(SITI, _create("Warung Siti"))
    assert record.owner_user_id == "siti"


@pytest.mark.asyncio
async def test_create_keeps_explicit_owner(service: UmkmService):
    data = _create("Warung Andi").model_copy(update={"owner_user_id": "andi"})
    record = await service.create(ADMIN, data)
    assert record.owner_user_id == "andi"


@pytest.mark.asyncio
async def test_regular_user_sees_only_own_records(service: UmkmService):
    await service.create(SITI, _create("Warung Siti"))
    await service.create(ANDI, _create("Bengkel Andi", category="Otomotif"))

    visible = await service.list_visible(SITI)
    assert [r.name for r in visible] == ["Warung Siti"]


@pytest.mark.asyncio
async def test_admin_sees_whole_rw_newest_first(service: UmkmService):
    await service.create(SITI, _create("Warung Siti"))
    await service.create(ANDI, _create("Bengkel Andi"))
    await service.create(ADMIN, _create("Koperasi RW"))

    visible = await service.list_visible(ADMIN)
    assert [r.name for r in visible] == ["Koperasi RW", "Warung Siti"]


@pytest.mark.asyncio
async def test_admin_without_rw_falls_back_to_own_records(service: UmkmService):
    lone_admin = User(id="admin-2", role="admin")
    await service.sign_in(lone_admin)
    await service.create(lone_admin, _create("Toko Admin"))
    await service.create(SITI, _create("Warung Siti"))

    visible = await service.list_visible(lone_admin)
    assert [r.name for r in visible] == ["Toko Admin"]


@pytest.mark.asyncio
async def test_list_applies_filters(service: UmkmService):
    await service.create(SITI, _create("Warung Siti"))
    await service.create(SITI, _create("Batik Siti", category="Fashion", status="Tidak Aktif"))

    fashion = await service.list_visible(SITI, UmkmFilter(category="Fashion"))
    assert [r.name for r in fashion] == ["Batik Siti"]

    searched = await service.list_visible(SITI, UmkmFilter(search="warung"))
    assert [r.name for r in searched] == ["Warung Siti"]


@pytest.mark.asyncio
async def test_update_and_delete_pass_through(service: UmkmService):
    created = await service.create(SITI, _create("Warung Siti"))

    updated = await service.update(created.id, UmkmUpdate(phone="0899"))
    assert updated is not None
    assert updated.phone == "0899"
    assert updated.name == "Warung Siti"

    assert await service.delete(created.id) is True
    assert await service.get(created.id) is None
    assert await service.update(created.id, UmkmUpdate(phone="1")) is None
