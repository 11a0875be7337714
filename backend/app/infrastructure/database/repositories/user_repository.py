"""Remote backend — UserRepository over SQLAlchemy async sessions."""

from sqlalchemy.ext.asyncio import AsyncEngine

from app.application.interfaces import UserRepository
from app.domain.entities import User
from app.infrastructure.database.models import UserModel
from app.infrastructure.database.session import build_session_factory


class SQLAlchemyUserRepository(UserRepository):
    """Keeps the 'users' table in step with identity-provider claims."""

    def __init__(self, engine: AsyncEngine):
        self._session_factory = build_session_factory(engine)

    def _to_entity(self, model: UserModel) -> User:
        return User(id=model.id, role=model.role, rw=model.rw)

    async def upsert(self, user: User) -> User:
        async with self._session_factory() as session:
            model = await session.get(UserModel, user.id)
            if model is None:
                model = UserModel(id=user.id, role=user.role, rw=user.rw)
                session.add(model)
            else:
                model.role = user.role
                model.rw = user.rw
            await session.commit()
            return self._to_entity(model)
