"""
Learning bounded context - Domain layer.

This context handles flashcard-based learning features:
- Flashcard creation and management
- Tags for organizing and filtering flashcards

Aggregates:
- Flashcard: study card with a front and a back side
- Tag: owner-defined colored label
"""
