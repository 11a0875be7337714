"""Domain entity for the identity-provider user referenced by UMKM records."""

from dataclasses import dataclass
from enum import Enum


class UserRole(str, Enum):
    """Role claim issued by the identity provider."""

    ADMIN = "admin"
    USER = "user"


@dataclass
class User:
    """A user as known to this service — id, role claim and RW zone.

    The user itself lives in the external identity provider; this is only
    the slice needed to scope visibility.
    """

    id: str
    role: str = UserRole.USER.value
    rw: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
