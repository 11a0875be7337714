"""UmkmStore on the local JSON snapshot backend."""

import json

import pytest

from app.application.schemas import UmkmCreate, UmkmUpdate
from app.config import Settings
from app.domain.entities import StoreBackend, User
from app.infrastructure.store_factory import build_umkm_store


def _create(owner_user_id: str = "u1", name: str = "Toko A") -> UmkmCreate:
    return UmkmCreate(
        name=name,
        owner="Budi",
        category="Kuliner",
        phone="081234567890",
        status="Aktif",
        owner_user_id=owner_user_id,
    )


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "data" / "umkm_store.json"


@pytest.fixture
def store(store_path):
    return build_umkm_store(Settings(database_url=None, local_store_path=str(store_path)))


def test_missing_database_url_selects_local_backend(store):
    assert store.backend is StoreBackend.LOCAL
    assert store.requires_uuid is False


@pytest.mark.asyncio
async def test_sequential_ids_and_newest_first(store):
    first = await store.create(_create())
    second = await store.create(_create())

    assert first.id == "1"
    assert second.id == "2"

    listed = await store.list("u1")
    assert [r.id for r in listed] == ["2", "1"]


@pytest.mark.asyncio
async def test_create_then_get_returns_equal_record(store):
    created = await store.create(_create())
    assert created.created_at == created.updated_at
    assert await store.get_by_id(created.id) == created


@pytest.mark.asyncio
async def test_non_uuid_owner_is_accepted(store):
    record = await store.create(_create(owner_user_id="not-a-uuid"))
    assert record.owner_user_id == "not-a-uuid"


@pytest.mark.asyncio
async def test_status_update_changes_only_status_and_updated_at(store):
    created = await store.create(_create())

    updated = await store.update(created.id, UmkmUpdate(status="Tidak Aktif"))

    assert updated is not None
    assert updated.status == "Tidak Aktif"
    assert updated.updated_at > created.updated_at
    for field in ("id", "name", "owner", "category", "phone", "owner_user_id", "created_at"):
        assert getattr(updated, field) == getattr(created, field)
    assert await store.get_by_id(created.id) == updated


@pytest.mark.asyncio
async def test_update_with_empty_owner_keeps_current_owner(store):
    created = await store.create(_create(owner_user_id="u1"))

    updated = await store.update(created.id, UmkmUpdate(owner_user_id="", phone="0899"))

    assert updated is not None
    assert updated.owner_user_id == "u1"
    assert updated.phone == "0899"


@pytest.mark.asyncio
async def test_update_missing_record_returns_none(store):
    assert await store.update("42", UmkmUpdate(name="Ghost")) is None


@pytest.mark.asyncio
async def test_delete_then_get_returns_none(store):
    created = await store.create(_create())
    assert await store.delete(created.id) is True
    assert await store.get_by_id(created.id) is None


@pytest.mark.asyncio
async def test_delete_missing_record_leaves_collection_alone(store):
    await store.create(_create())
    assert await store.delete("999") is False
    assert len(await store.list()) == 1


@pytest.mark.asyncio
async def test_list_by_owner_returns_exact_subset(store):
    await store.create(_create(owner_user_id="u1", name="A"))
    await store.create(_create(owner_user_id="u2", name="B"))
    await store.create(_create(owner_user_id="u1", name="C"))

    listed = await store.list(owner_user_id="u1")
    assert [r.name for r in listed] == ["C", "A"]
    assert all(r.owner_user_id == "u1" for r in listed)


@pytest.mark.asyncio
async def test_list_by_rw_uses_user_zone(store):
    await store.sync_user(User(id="u1", rw="05"))
    await store.sync_user(User(id="u2", rw="07"))
    await store.sync_user(User(id="u3", rw="05"))
    await store.create(_create(owner_user_id="u1", name="A"))
    await store.create(_create(owner_user_id="u2", name="B"))
    await store.create(_create(owner_user_id="u3", name="C"))

    listed = await store.list(rw="05")
    assert [r.name for r in listed] == ["C", "A"]


@pytest.mark.asyncio
async def test_owner_takes_precedence_over_rw(store):
    await store.sync_user(User(id="u1", rw="05"))
    await store.sync_user(User(id="u2", rw="05"))
    await store.create(_create(owner_user_id="u1", name="A"))
    await store.create(_create(owner_user_id="u2", name="B"))

    listed = await store.list(owner_user_id="u2", rw="05")
    assert [r.name for r in listed] == ["B"]


@pytest.mark.asyncio
async def test_snapshot_is_written_through_and_reloaded(store, store_path):
    created = await store.create(_create())
    await store.sync_user(User(id="u1", role="admin", rw="05"))

    snapshot = json.loads(store_path.read_text(encoding="utf-8"))
    assert [row["id"] for row in snapshot["umkms"]] == [created.id]
    assert snapshot["users"] == [{"id": "u1", "role": "admin", "rw": "05"}]

    reopened = build_umkm_store(
        Settings(database_url=None, local_store_path=str(store_path))
    )
    assert await reopened.get_by_id(created.id) == created
    assert (await reopened.create(_create())).id == "2"


@pytest.mark.asyncio
async def test_next_id_skips_non_numeric_ids(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text(
        json.dumps(
            {
                "umkms": [
                    {
                        "id": "legacy",
                        "name": "Old",
                        "owner": "X",
                        "category": "Jasa",
                        "phone": "1",
                        "status": "Aktif",
                        "owner_user_id": "u1",
                        "created_at": "2024-01-01T00:00:00+00:00",
                        "updated_at": "2024-01-01T00:00:00+00:00",
                    }
                ],
                "users": [],
            }
        ),
        encoding="utf-8",
    )
    store = build_umkm_store(Settings(database_url=None, local_store_path=str(store_path)))
    await store.open()

    record = await store.create(_create())
    assert record.id == "1"
    assert [r.id for r in await store.list()] == ["1", "legacy"]
