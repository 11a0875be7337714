"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends, Header, HTTPException, status

from app.config import get_settings
from app.application.services import UmkmService, UmkmStore
from app.domain.entities import User, UserRole
from app.domain.exceptions import InvalidIdentifierError
from app.infrastructure.store_factory import build_umkm_store


@lru_cache
def get_umkm_store() -> UmkmStore:
    """Process-wide UmkmStore — the backend is chosen on first use and kept."""
    return build_umkm_store(get_settings())


async def get_umkm_service(
    store: UmkmStore = Depends(get_umkm_store),
) -> AsyncGenerator[UmkmService, None]:
    """Provides a UmkmService bound to the process-wide store."""
    yield UmkmService(store)


async def get_current_user(
    x_user_id: str | None = Header(None),
    x_user_role: str = Header(UserRole.USER.value),
    x_user_rw: str | None = Header(None),
    service: UmkmService = Depends(get_umkm_service),
) -> User:
    """Current user from the identity-provider claims forwarded by the gateway."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )
    user = User(id=x_user_id, role=x_user_role, rw=x_user_rw or None)
    try:
        return await service.sign_in(user)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
