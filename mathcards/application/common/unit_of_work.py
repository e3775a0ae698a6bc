"""Transaction boundary port used by the write use cases."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Groups the repository writes of one operation into a single transaction.

    Use it as a context manager and call commit() as the last statement of
    the block. Leaving the block through an exception rolls back, so a
    flashcard is never stored without the tag links it was created with.

    Example:
        with self.unit_of_work:
            flashcard = self.flashcard_repository.save(flashcard)
            self.flashcard_repository.replace_tags(flashcard.id, tag_ids)
            self.unit_of_work.commit()
    """

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()
