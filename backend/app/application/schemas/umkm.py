"""Pydantic DTOs (Data Transfer Objects) for the UMKM feature."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from app.domain.entities import BusinessCategory, BusinessStatus


class UmkmCreate(BaseModel):
    """Schema for registering a new UMKM — every field must be filled in."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Toko A"])
    owner: str = Field(..., min_length=1, max_length=255, examples=["Budi"])
    category: BusinessCategory = Field(..., examples=["Kuliner"])
    phone: str = Field(..., min_length=1, max_length=32, examples=["081234567890"])
    status: BusinessStatus = BusinessStatus.ACTIVE
    owner_user_id: str | None = Field(None, max_length=255)

    model_config = {"use_enum_values": True, "validate_default": True}


class UmkmUpdate(BaseModel):
    """Schema for editing an existing UMKM — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    owner: str | None = Field(None, min_length=1, max_length=255)
    category: BusinessCategory | None = None
    phone: str | None = Field(None, min_length=1, max_length=32)
    status: BusinessStatus | None = None
    owner_user_id: str | None = Field(None, max_length=255)

    model_config = {"use_enum_values": True, "validate_default": True}

    def changes(self) -> dict[str, Any]:
        """Fields the caller actually supplied, with ``None`` meaning "leave as is".

        An empty ``owner_user_id`` also counts as not supplied.
        """
        changes = self.model_dump(exclude_unset=True, exclude_none=True)
        if changes.get("owner_user_id") == "":
            del changes["owner_user_id"]
        return changes


class UmkmResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    owner: str
    category: str
    phone: str
    status: str
    owner_user_id: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
