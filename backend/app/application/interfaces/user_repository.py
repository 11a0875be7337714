"""Abstract repository interface (port) for the user directory."""

from abc import ABC, abstractmethod

from app.domain.entities import User


class UserRepository(ABC):
    """Port for the users known to the store — used to resolve RW zones."""

    @abstractmethod
    async def upsert(self, user: User) -> User:
        """Insert or refresh role/RW for *user*."""
        ...
