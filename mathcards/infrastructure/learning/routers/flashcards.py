"""API routes for flashcard management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from mathcards.application.learning.use_cases.dtos import FlashcardWithTags
from mathcards.application.learning.use_cases.flashcard_search_use_case import (
    FlashcardSearchUseCase,
)
from mathcards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from mathcards.core import container
from mathcards.domain.common.exceptions import DomainError
from mathcards.exceptions import MathcardsError
from mathcards.infrastructure.common.di import inject_use_case
from mathcards.infrastructure.identity.dependencies import CurrentOwner
from mathcards.infrastructure.learning.schemas import (
    Flashcard,
    FlashcardBulkDeleteResponse,
    FlashcardCreateRequest,
    FlashcardUpdateRequest,
    Tag,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])

FlashcardIdPath = Annotated[int, Path(ge=0, description="Flashcard ID")]


def _to_response(item: FlashcardWithTags) -> Flashcard:
    flashcard = item.flashcard
    return Flashcard(
        id=flashcard.id.value,
        owner_id=flashcard.owner_id.value,
        front=flashcard.front,
        back=flashcard.back,
        created_at=flashcard.created_at,
        updated_at=flashcard.updated_at,
        tags=[
            Tag(id=tag.id.value, name=tag.name, color=tag.color, owner_id=tag.owner_id.value)
            for tag in item.tags
        ],
    )


def _internal_error(message: str, e: Exception) -> HTTPException:
    logger.error(f"{message}: {e!s}", exc_info=True)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


@router.get("", response_model=list[Flashcard], status_code=status.HTTP_200_OK)
def list_flashcards(
    current_owner: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> list[Flashcard]:
    """
    List all flashcards of the caller, newest first.

    Returns:
        Flashcards with their tags
    """
    try:
        items = use_case.list_flashcards(owner_id=current_owner.value)
        return [_to_response(item) for item in items]
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        raise _internal_error("Failed to retrieve flashcards", e) from e


@router.get("/search", response_model=list[Flashcard], status_code=status.HTTP_200_OK)
def search_flashcards(
    current_owner: CurrentOwner,
    q: Annotated[str, Query(description="Case-insensitive text to find in front or back")] = "",
    tags: Annotated[
        list[int] | None, Query(description="Tag IDs; a flashcard matches if it has any of them")
    ] = None,
    use_case: FlashcardSearchUseCase = Depends(
        inject_use_case(container.flashcard_search_use_case)
    ),
) -> list[Flashcard]:
    """
    Search the caller's flashcards by text and tags.

    Args:
        q: Substring to match against front or back
        tags: Tag IDs to filter by (OR across tags)

    Returns:
        Matching flashcards with their tags, newest first
    """
    try:
        items = use_case.search_flashcards(
            owner_id=current_owner.value, query_text=q, tag_ids=tags
        )
        return [_to_response(item) for item in items]
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        raise _internal_error("Failed to search flashcards", e) from e


@router.get("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def get_flashcard(
    flashcard_id: FlashcardIdPath,
    current_owner: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> Flashcard:
    """
    Get a single flashcard.

    Raises:
        HTTPException: If flashcard not found or retrieval fails
    """
    try:
        item = use_case.get_flashcard(flashcard_id=flashcard_id, owner_id=current_owner.value)
        return _to_response(item)
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        raise _internal_error("Failed to retrieve flashcard", e) from e


@router.post("", response_model=Flashcard, status_code=status.HTTP_201_CREATED)
def create_flashcard(
    request: FlashcardCreateRequest,
    current_owner: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> Flashcard:
    """
    Create a new flashcard with optional tags.

    Args:
        request: Front, back and tag IDs

    Returns:
        Created flashcard with its tags
    """
    try:
        item = use_case.create_flashcard(
            owner_id=current_owner.value,
            front=request.front,
            back=request.back,
            tag_ids=request.tag_ids,
        )
        return _to_response(item)
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        raise _internal_error("Failed to create flashcard", e) from e


@router.put("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def update_flashcard(
    flashcard_id: FlashcardIdPath,
    request: FlashcardUpdateRequest,
    current_owner: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> Flashcard:
    """
    Partially update a flashcard.

    Omitting tagIds keeps the current tags; sending it replaces them.

    Raises:
        HTTPException: If flashcard not found or update fails
    """
    try:
        item = use_case.update_flashcard(
            flashcard_id=flashcard_id,
            owner_id=current_owner.value,
            front=request.front,
            back=request.back,
            tag_ids=request.tag_ids,
        )
        return _to_response(item)
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        raise _internal_error(f"Failed to update flashcard {flashcard_id}", e) from e


@router.delete("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def delete_flashcard(
    flashcard_id: FlashcardIdPath,
    current_owner: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> Flashcard:
    """
    Delete a flashcard.

    Returns:
        The deleted flashcard
    """
    try:
        item = use_case.delete_flashcard(flashcard_id=flashcard_id, owner_id=current_owner.value)
        return _to_response(item)
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        raise _internal_error(f"Failed to delete flashcard {flashcard_id}", e) from e


@router.delete("", response_model=FlashcardBulkDeleteResponse, status_code=status.HTTP_200_OK)
def delete_all_flashcards(
    current_owner: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardBulkDeleteResponse:
    """Delete every flashcard of the caller."""
    try:
        count = use_case.delete_all_flashcards(owner_id=current_owner.value)
        return FlashcardBulkDeleteResponse(
            message=f"Deleted {count} flashcards successfully",
            count=count,
        )
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        raise _internal_error("Failed to delete all flashcards", e) from e
