"""Domain entity — a registered micro-enterprise (UMKM) and its list filter."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any


class BusinessCategory(str, Enum):
    """Business categories offered by the registration form."""

    FOOD = "Kuliner"
    CRAFTS = "Kerajinan"
    FASHION = "Fashion"
    AUTOMOTIVE = "Otomotif"
    SERVICES = "Jasa"
    OTHER = "Lainnya"


class BusinessStatus(str, Enum):
    """Operating status of a business."""

    ACTIVE = "Aktif"
    INACTIVE = "Tidak Aktif"


def utc_now_after(previous: datetime | None = None) -> datetime:
    """Current UTC time, nudged forward so it is strictly later than *previous*."""
    now = datetime.now(timezone.utc)
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


@dataclass
class Umkm:
    """Core domain entity: one business record owned by a user.

    ``category`` and ``status`` hold the display values of
    :class:`BusinessCategory` / :class:`BusinessStatus`; the entity itself
    does not enforce them.
    """

    id: str
    name: str
    owner: str
    category: str
    phone: str
    status: str
    owner_user_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def apply(self, changes: dict[str, Any]) -> None:
        """Merge *changes* into the record and refresh updated_at."""
        for key, value in changes.items():
            setattr(self, key, value)
        self.updated_at = utc_now_after(self.updated_at)


@dataclass
class UmkmFilter:
    """In-process filter applied to a listing, mirroring the search bar and dropdowns."""

    search: str = ""
    category: str | None = None
    status: str | None = None

    def matches(self, record: Umkm) -> bool:
        term = self.search.lower()
        matches_search = (
            term in record.name.lower()
            or term in record.owner.lower()
            or term in record.category.lower()
            or self.search in record.phone
        )
        matches_category = self.category is None or record.category == self.category
        matches_status = self.status is None or record.status == self.status
        return matches_search and matches_category and matches_status

    def apply(self, records: list[Umkm]) -> list[Umkm]:
        return [r for r in records if self.matches(r)]
