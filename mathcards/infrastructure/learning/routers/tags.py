"""API routes for tag management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from mathcards.application.learning.use_cases.tag_use_case import TagUseCase
from mathcards.core import container
from mathcards.domain.common.exceptions import DomainError
from mathcards.domain.learning.entities import Tag as TagEntity
from mathcards.exceptions import MathcardsError
from mathcards.infrastructure.common.di import inject_use_case
from mathcards.infrastructure.identity.dependencies import CurrentOwner
from mathcards.infrastructure.learning.schemas import Tag, TagCreateRequest, TagUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tags", tags=["tags"])

TagIdPath = Annotated[int, Path(ge=0, description="Tag ID")]


def _to_response(tag: TagEntity) -> Tag:
    return Tag(id=tag.id.value, name=tag.name, color=tag.color, owner_id=tag.owner_id.value)


@router.get("", response_model=list[Tag], status_code=status.HTTP_200_OK)
def list_tags(
    current_owner: CurrentOwner,
    use_case: TagUseCase = Depends(inject_use_case(container.tag_use_case)),
) -> list[Tag]:
    """List all tags of the caller ordered by name."""
    try:
        return [_to_response(tag) for tag in use_case.list_tags(owner_id=current_owner.value)]
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to retrieve tags: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve tags",
        ) from e


@router.get("/{tag_id}", response_model=Tag, status_code=status.HTTP_200_OK)
def get_tag(
    tag_id: TagIdPath,
    current_owner: CurrentOwner,
    use_case: TagUseCase = Depends(inject_use_case(container.tag_use_case)),
) -> Tag:
    try:
        return _to_response(use_case.get_tag(tag_id=tag_id, owner_id=current_owner.value))
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to retrieve tag {tag_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve tag",
        ) from e


@router.post("", response_model=Tag, status_code=status.HTTP_201_CREATED)
def create_tag(
    request: TagCreateRequest,
    current_owner: CurrentOwner,
    use_case: TagUseCase = Depends(inject_use_case(container.tag_use_case)),
) -> Tag:
    """
    Create a new tag.

    Args:
        request: Tag name and hex color

    Returns:
        Created tag
    """
    try:
        tag = use_case.create_tag(
            owner_id=current_owner.value, name=request.name, color=request.color
        )
        return _to_response(tag)
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create tag: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create tag",
        ) from e


@router.put("/{tag_id}", response_model=Tag, status_code=status.HTTP_200_OK)
def update_tag(
    tag_id: TagIdPath,
    request: TagUpdateRequest,
    current_owner: CurrentOwner,
    use_case: TagUseCase = Depends(inject_use_case(container.tag_use_case)),
) -> Tag:
    """
    Update a tag's name and/or color.

    Raises:
        HTTPException: If tag not found or update fails
    """
    try:
        tag = use_case.update_tag(
            tag_id=tag_id,
            owner_id=current_owner.value,
            name=request.name,
            color=request.color,
        )
        return _to_response(tag)
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update tag {tag_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update tag",
        ) from e


@router.delete("/{tag_id}", response_model=Tag, status_code=status.HTTP_200_OK)
def delete_tag(
    tag_id: TagIdPath,
    current_owner: CurrentOwner,
    use_case: TagUseCase = Depends(inject_use_case(container.tag_use_case)),
) -> Tag:
    """
    Delete a tag. Flashcards keep existing but lose the tag.

    Returns:
        The deleted tag
    """
    try:
        return _to_response(use_case.delete_tag(tag_id=tag_id, owner_id=current_owner.value))
    except (MathcardsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete tag {tag_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete tag",
        ) from e
