"""In-memory repository and unit of work fakes for use case tests."""

from dataclasses import replace

import pytest

from mathcards.application.common.unit_of_work import UnitOfWork
from mathcards.application.learning.use_cases.flashcard_search_use_case import (
    FlashcardSearchUseCase,
)
from mathcards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from mathcards.application.learning.use_cases.tag_use_case import TagUseCase
from mathcards.domain.common.value_objects import FlashcardId, OwnerId, TagId
from mathcards.domain.learning.entities import Flashcard, Tag


class FakeUnitOfWork(UnitOfWork):
    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


class FakeTagRepository:
    def __init__(self) -> None:
        self.tags: dict[int, Tag] = {}
        self._next_id = 1

    def find_by_id(self, tag_id: TagId, owner_id: OwnerId) -> Tag | None:
        tag = self.tags.get(tag_id.value)
        return replace(tag) if tag is not None and tag.owner_id == owner_id else None

    def find_by_ids(self, tag_ids: list[TagId], owner_id: OwnerId) -> list[Tag]:
        return [tag for tag_id in tag_ids if (tag := self.find_by_id(tag_id, owner_id))]

    def find_by_name(self, name: str, owner_id: OwnerId) -> Tag | None:
        return next(
            (t for t in self.tags.values() if t.name == name and t.owner_id == owner_id), None
        )

    def find_all(self, owner_id: OwnerId) -> list[Tag]:
        return sorted(
            (t for t in self.tags.values() if t.owner_id == owner_id), key=lambda t: t.name
        )

    def save(self, tag: Tag) -> Tag:
        if not tag.id.is_persisted:
            tag = replace(tag, id=TagId(self._next_id))
            self._next_id += 1
        self.tags[tag.id.value] = tag
        return tag

    def delete(self, tag_id: TagId, owner_id: OwnerId) -> bool:
        if self.find_by_id(tag_id, owner_id) is None:
            return False
        del self.tags[tag_id.value]
        return True


class FakeFlashcardRepository:
    def __init__(self, tag_repository: FakeTagRepository) -> None:
        self.tag_repository = tag_repository
        self.flashcards: dict[int, Flashcard] = {}
        self.links: dict[int, list[TagId]] = {}
        self._next_id = 1

    def _pair(self, flashcard: Flashcard) -> tuple[Flashcard, list[Tag]]:
        tags = [
            self.tag_repository.tags[tag_id.value]
            for tag_id in self.links.get(flashcard.id.value, [])
            if tag_id.value in self.tag_repository.tags
        ]
        return flashcard, sorted(tags, key=lambda t: t.name)

    def _owned(self, owner_id: OwnerId) -> list[Flashcard]:
        owned = [f for f in self.flashcards.values() if f.owner_id == owner_id]
        return sorted(owned, key=lambda f: (f.created_at, f.id.value), reverse=True)

    def find_by_id(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> Flashcard | None:
        flashcard = self.flashcards.get(flashcard_id.value)
        if flashcard is None or flashcard.owner_id != owner_id:
            return None
        return replace(flashcard)

    def find_by_id_with_tags(
        self, flashcard_id: FlashcardId, owner_id: OwnerId
    ) -> tuple[Flashcard, list[Tag]] | None:
        flashcard = self.find_by_id(flashcard_id, owner_id)
        return self._pair(flashcard) if flashcard else None

    def find_all_with_tags(self, owner_id: OwnerId) -> list[tuple[Flashcard, list[Tag]]]:
        return [self._pair(f) for f in self._owned(owner_id)]

    def find_ids_by_tags(self, tag_ids: list[TagId], owner_id: OwnerId) -> list[FlashcardId]:
        owned_tags = {t.id for t in self.tag_repository.find_by_ids(tag_ids, owner_id)}
        return [
            FlashcardId(flashcard_id)
            for flashcard_id, linked in self.links.items()
            if owned_tags.intersection(linked)
        ]

    def search_with_tags(
        self,
        owner_id: OwnerId,
        query_text: str,
        flashcard_ids: list[FlashcardId] | None = None,
    ) -> list[tuple[Flashcard, list[Tag]]]:
        results = self._owned(owner_id)
        if query_text:
            needle = query_text.lower()
            results = [f for f in results if needle in f.front.lower() or needle in f.back.lower()]
        if flashcard_ids is not None:
            results = [f for f in results if f.id in flashcard_ids]
        return [self._pair(f) for f in results]

    def save(self, flashcard: Flashcard) -> Flashcard:
        if not flashcard.id.is_persisted:
            flashcard = replace(flashcard, id=FlashcardId(self._next_id))
            self._next_id += 1
        self.flashcards[flashcard.id.value] = replace(flashcard)
        return flashcard

    def replace_tags(self, flashcard_id: FlashcardId, tag_ids: list[TagId]) -> None:
        self.links[flashcard_id.value] = list(dict.fromkeys(tag_ids))

    def delete(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> bool:
        if self.find_by_id(flashcard_id, owner_id) is None:
            return False
        del self.flashcards[flashcard_id.value]
        self.links.pop(flashcard_id.value, None)
        return True

    def delete_all(self, owner_id: OwnerId) -> int:
        owned = self._owned(owner_id)
        for flashcard in owned:
            self.delete(flashcard.id, owner_id)
        return len(owned)


@pytest.fixture
def unit_of_work() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def tag_repository() -> FakeTagRepository:
    return FakeTagRepository()


@pytest.fixture
def flashcard_repository(tag_repository: FakeTagRepository) -> FakeFlashcardRepository:
    return FakeFlashcardRepository(tag_repository)


@pytest.fixture
def tag_use_case(tag_repository: FakeTagRepository, unit_of_work: FakeUnitOfWork) -> TagUseCase:
    return TagUseCase(tag_repository=tag_repository, unit_of_work=unit_of_work)


@pytest.fixture
def flashcard_use_case(
    flashcard_repository: FakeFlashcardRepository,
    tag_repository: FakeTagRepository,
    unit_of_work: FakeUnitOfWork,
) -> FlashcardUseCase:
    return FlashcardUseCase(
        flashcard_repository=flashcard_repository,
        tag_repository=tag_repository,
        unit_of_work=unit_of_work,
    )


@pytest.fixture
def search_use_case(flashcard_repository: FakeFlashcardRepository) -> FlashcardSearchUseCase:
    return FlashcardSearchUseCase(flashcard_repository=flashcard_repository)
