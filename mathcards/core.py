from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from mathcards.application.learning.use_cases.flashcard_search_use_case import (
    FlashcardSearchUseCase,
)
from mathcards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from mathcards.application.learning.use_cases.tag_use_case import TagUseCase
from mathcards.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from mathcards.infrastructure.learning.repositories import FlashcardRepository, TagRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Repositories
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)
    tag_repository = providers.Factory(TagRepository, db=db)

    # Learning module use cases
    flashcard_use_case = providers.Factory(
        FlashcardUseCase,
        flashcard_repository=flashcard_repository,
        tag_repository=tag_repository,
        unit_of_work=unit_of_work,
    )

    flashcard_search_use_case = providers.Factory(
        FlashcardSearchUseCase,
        flashcard_repository=flashcard_repository,
    )

    tag_use_case = providers.Factory(
        TagUseCase,
        tag_repository=tag_repository,
        unit_of_work=unit_of_work,
    )


# Initialize container
container = Container()
