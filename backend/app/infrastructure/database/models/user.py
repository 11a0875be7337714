"""SQLAlchemy ORM model for users referenced by UMKM records."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base


class UserModel(Base):
    """ORM model — maps to the 'users' table (profile mirror of the identity provider)."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="user")
    rw: Mapped[str | None] = mapped_column(String(20), nullable=True)

    __table_args__ = (Index("ix_users_rw", "rw"),)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, role='{self.role}', rw='{self.rw}')>"
