"""
Learning bounded context - Application layer.

Contains use cases for flashcard management:
- Commands: Create, Update, Delete flashcards and tags
- Queries: Get, List, Search flashcards
"""
