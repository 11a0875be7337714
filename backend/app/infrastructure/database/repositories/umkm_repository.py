"""Remote backend — UmkmRepository over SQLAlchemy async sessions.

Each call opens its own session from the shared engine and commits once;
nothing is held open between calls.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine

from app.application.interfaces import UmkmRepository
from app.domain.entities import Umkm, utc_now_after
from app.infrastructure.database.base import Base
from app.infrastructure.database.models import UmkmModel, UserModel
from app.infrastructure.database.session import build_session_factory

# Entity field → ORM column, where they differ.
_COLUMNS = {"owner_user_id": "user_id"}


def _aware(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; everything stored is UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyUmkmRepository(UmkmRepository):
    """Implements the UmkmRepository port against a relational database."""

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._session_factory = build_session_factory(engine)

    def _to_entity(self, model: UmkmModel) -> Umkm:
        """Map ORM model → domain entity."""
        return Umkm(
            id=str(model.id),
            name=model.name,
            owner=model.owner,
            category=model.category,
            phone=model.phone,
            status=model.status,
            owner_user_id=model.user_id,
            created_at=_aware(model.created_at),
            updated_at=_aware(model.updated_at),
        )

    async def open(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        await self._engine.dispose()

    async def get_all(
        self,
        *,
        owner_user_id: str | None = None,
        rw: str | None = None,
    ) -> list[Umkm]:
        stmt = select(UmkmModel)

        if owner_user_id is not None:
            stmt = stmt.where(UmkmModel.user_id == owner_user_id)
        elif rw is not None:
            stmt = stmt.join(UserModel, UmkmModel.user_id == UserModel.id).where(
                UserModel.rw == rw
            )

        stmt = stmt.order_by(UmkmModel.created_at.desc())
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_id(self, record_id: str) -> Umkm | None:
        async with self._session_factory() as session:
            model = await session.get(UmkmModel, record_id)
            return self._to_entity(model) if model else None

    async def create(self, fields: dict[str, Any]) -> Umkm:
        now = utc_now_after()
        model = UmkmModel(
            name=fields["name"],
            owner=fields["owner"],
            category=fields["category"],
            phone=fields["phone"],
            status=fields["status"],
            user_id=fields["owner_user_id"],
            created_at=now,
            updated_at=now,
        )
        async with self._session_factory() as session:
            session.add(model)
            await session.commit()
            return self._to_entity(model)

    async def update(self, record_id: str, changes: dict[str, Any]) -> Umkm | None:
        async with self._session_factory() as session:
            model = await session.get(UmkmModel, record_id)
            if model is None:
                return None
            for key, value in changes.items():
                setattr(model, _COLUMNS.get(key, key), value)
            model.updated_at = utc_now_after(_aware(model.updated_at))
            await session.commit()
            return self._to_entity(model)

    async def delete(self, record_id: str) -> bool:
        async with self._session_factory() as session:
            model = await session.get(UmkmModel, record_id)
            if model is None:
                return False
            await session.delete(model)
            await session.commit()
            return True
