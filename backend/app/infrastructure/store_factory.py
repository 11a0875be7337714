"""Builds the UmkmStore for the configured backend — decided once per process."""

import logging

from app.application.services import UmkmStore
from app.config import Settings
from app.domain.entities import StoreBackend
from app.infrastructure.database.repositories import (
    SQLAlchemyUmkmRepository,
    SQLAlchemyUserRepository,
)
from app.infrastructure.database.session import build_engine
from app.infrastructure.storage import (
    LocalSnapshotStore,
    LocalUmkmRepository,
    LocalUserRepository,
)

logger = logging.getLogger(__name__)


def build_umkm_store(settings: Settings) -> UmkmStore:
    """Select the remote backend when DATABASE_URL is set, the local snapshot otherwise."""
    if settings.database_url:
        engine = build_engine(
            settings.database_url, echo=(settings.app_env == "development")
        )
        logger.info("DATABASE_URL configured — using the remote database")
        return UmkmStore(
            records=SQLAlchemyUmkmRepository(engine),
            users=SQLAlchemyUserRepository(engine),
            backend=StoreBackend.REMOTE,
        )

    logger.warning(
        "DATABASE_URL is not set; falling back to the local snapshot at %s",
        settings.local_store_path,
    )
    snapshot = LocalSnapshotStore(settings.local_store_path)
    return UmkmStore(
        records=LocalUmkmRepository(snapshot),
        users=LocalUserRepository(snapshot),
        backend=StoreBackend.LOCAL,
    )
