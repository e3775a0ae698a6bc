"""Pydantic schemas for Tag API request/response validation."""

from pydantic import BaseModel, Field

HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"


class TagCreateRequest(BaseModel):
    """Schema for creating a new tag."""

    name: str = Field(..., min_length=1, description="Tag name, unique per owner")
    color: str = Field(..., min_length=1, pattern=HEX_COLOR, description="Hex color like #3b82f6")


class TagUpdateRequest(BaseModel):
    """Schema for updating a tag."""

    name: str | None = Field(None, min_length=1, description="New tag name")
    color: str | None = Field(None, min_length=1, pattern=HEX_COLOR, description="New hex color")


class Tag(BaseModel):
    """Schema for Tag response."""

    id: int
    name: str
    color: str
    owner_id: str

    model_config = {"from_attributes": True}
