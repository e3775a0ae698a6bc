from .flashcard import Flashcard
from .tag import Tag

__all__ = ["Flashcard", "Tag"]
