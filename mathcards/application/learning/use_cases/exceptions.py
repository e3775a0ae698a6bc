"""Exceptions for learning use cases."""

from mathcards.exceptions import NotFoundError


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: int) -> None:
        self.flashcard_id = flashcard_id
        super().__init__(f"Flashcard with id {flashcard_id} not found")


class TagNotFoundError(NotFoundError):
    """Tag not found error."""

    def __init__(self, tag_ids: int | list[int]) -> None:
        self.tag_ids = tag_ids if isinstance(tag_ids, list) else [tag_ids]
        if len(self.tag_ids) == 1:
            message = f"Tag with id {self.tag_ids[0]} not found"
        else:
            message = f"Tags with ids {', '.join(str(i) for i in self.tag_ids)} not found"
        super().__init__(message)
