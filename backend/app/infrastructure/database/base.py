"""SQLAlchemy ORM base shared by the remote-backend models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for the 'umkms' and 'users' ORM models."""

    pass
