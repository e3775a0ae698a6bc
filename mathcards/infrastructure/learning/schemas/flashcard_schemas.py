"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from mathcards.infrastructure.learning.schemas.tag_schemas import Tag

PositiveId = Annotated[int, Field(gt=0)]


class FlashcardBase(BaseModel):
    """Base schema for Flashcard."""

    front: str = Field(..., min_length=1, description="Front side text, may contain $...$ math")
    back: str = Field(..., min_length=1, description="Back side text, may contain $...$ math")


class FlashcardCreateRequest(FlashcardBase):
    """Schema for creating a new flashcard."""

    model_config = ConfigDict(populate_by_name=True)

    tag_ids: list[PositiveId] = Field(
        default_factory=list, alias="tagIds", description="IDs of tags to attach"
    )


class FlashcardUpdateRequest(BaseModel):
    """Schema for partially updating a flashcard."""

    model_config = ConfigDict(populate_by_name=True)

    front: str | None = Field(None, min_length=1, description="New front side text")
    back: str | None = Field(None, min_length=1, description="New back side text")
    tag_ids: list[PositiveId] | None = Field(
        None,
        alias="tagIds",
        description="Replaces the tag set when present (empty list clears it)",
    )


class Flashcard(FlashcardBase):
    """Schema for Flashcard response with its tags."""

    id: int
    owner_id: str
    created_at: datetime
    updated_at: datetime
    tags: list[Tag] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class FlashcardBulkDeleteResponse(BaseModel):
    """Schema for delete-all response."""

    message: str = Field(..., description="Response message")
    count: int = Field(..., description="Number of deleted flashcards")
