"""Database models."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mathcards.database import Base


class Flashcard(Base):
    """Flashcard model with a front and a back side."""

    __tablename__ = "flashcards"
    __table_args__ = (Index("ix_flashcards_owner_id_created_at", "owner_id", "created_at"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    front: Mapped[str] = mapped_column(Text, nullable=False)
    back: Mapped[str] = mapped_column(Text, nullable=False)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Association rows are managed explicitly by the repository
    tags: Mapped[list["Tag"]] = relationship(
        "Tag",
        secondary="flashcard_tags",
        viewonly=True,
        order_by="Tag.name",
    )

    def __repr__(self) -> str:
        """String representation of Flashcard."""
        return f"<Flashcard(id={self.id}, front='{self.front[:50]}')>"


class Tag(Base):
    """Owner-defined colored tag."""

    __tablename__ = "tags"
    __table_args__ = (UniqueConstraint("owner_id", "name", name="uq_tags_owner_id_name"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(7), nullable=False)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of Tag."""
        return f"<Tag(id={self.id}, name='{self.name}')>"


class FlashcardTag(Base):
    """Many-to-many association between flashcards and tags."""

    __tablename__ = "flashcard_tags"
    __table_args__ = (
        UniqueConstraint("flashcard_id", "tag_id", name="uq_flashcard_tags_flashcard_id_tag_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    flashcard_id: Mapped[int] = mapped_column(
        ForeignKey("flashcards.id", ondelete="CASCADE"), nullable=False, index=True
    )
    tag_id: Mapped[int] = mapped_column(
        ForeignKey("tags.id", ondelete="CASCADE"), nullable=False, index=True
    )

    def __repr__(self) -> str:
        """String representation of FlashcardTag."""
        return f"<FlashcardTag(flashcard_id={self.flashcard_id}, tag_id={self.tag_id})>"
