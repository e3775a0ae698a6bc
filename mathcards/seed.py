"""Starter tags and flashcards for a new owner."""

from dataclasses import dataclass

import structlog

from mathcards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from mathcards.application.learning.use_cases.tag_use_case import TagUseCase

logger = structlog.get_logger(__name__)

DEFAULT_TAG = "Math"

SEED_TAGS: list[tuple[str, str]] = [
    ("Math", "#3b82f6"),
    ("Physics", "#8b5cf6"),
    ("Chemistry", "#10b981"),
    ("Biology", "#f59e0b"),
    ("Computer Science", "#ef4444"),
]

SEED_FLASHCARDS: list[tuple[str, str]] = [
    (
        "What is the Pythagorean theorem?",
        "In a right triangle, the square of the length of the hypotenuse equals the sum of "
        "the squares of the lengths of the other two sides. Expressed as: $a^2 + b^2 = c^2$",
    ),
    (
        "Define vector in mathematics",
        "A vector is a quantity that has both magnitude and direction. It can be represented "
        "as $\\vec{v} = (x, y, z)$ in 3D space.",
    ),
    (
        "What is Newton's Second Law of Motion?",
        "The acceleration of an object is directly proportional to the net force acting on it "
        "and inversely proportional to its mass. Expressed as: $F = ma$",
    ),
    (
        "What is the periodic table?",
        "The periodic table is a tabular arrangement of chemical elements, organized by atomic "
        "number, electron configuration, and recurring chemical properties.",
    ),
    (
        "Explain the concept of Big O notation",
        "Big O notation is used to describe the performance or complexity of an algorithm. It "
        "describes the worst-case scenario and can be used to describe execution time or space "
        "used. Example: $O(n)$ is linear time complexity.",
    ),
]

# Keywords looked up in the lowercased front side
TAG_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Math": ("theorem", "vector"),
    "Physics": ("newton", "motion"),
    "Chemistry": ("periodic", "chemical"),
    "Computer Science": ("big o", "algorithm"),
}


@dataclass
class SeedResult:
    tags_created: int
    flashcards_created: int


def tags_for_front(front: str) -> list[str]:
    """Pick tag names for a flashcard from keywords in its front side."""
    text = front.lower()
    names = [name for name, keywords in TAG_KEYWORDS.items() if any(k in text for k in keywords)]
    return names or [DEFAULT_TAG]


def seed_owner(
    owner_id: str,
    tag_use_case: TagUseCase,
    flashcard_use_case: FlashcardUseCase,
) -> SeedResult:
    """
    Create the starter tags and flashcards for an owner.

    Tags that already exist are reused. Flashcards are only created when the
    owner has none yet.
    """
    existing = {tag.name: tag for tag in tag_use_case.list_tags(owner_id)}
    tags_created = 0
    for name, color in SEED_TAGS:
        if name not in existing:
            existing[name] = tag_use_case.create_tag(owner_id, name, color)
            tags_created += 1

    if flashcard_use_case.list_flashcards(owner_id):
        logger.info("seed_flashcards_skipped", owner_id=owner_id)
        return SeedResult(tags_created=tags_created, flashcards_created=0)

    for front, back in SEED_FLASHCARDS:
        tag_ids = [existing[name].id.value for name in tags_for_front(front)]
        flashcard_use_case.create_flashcard(owner_id, front, back, tag_ids)

    logger.info("seeded_owner", owner_id=owner_id, tags_created=tags_created)
    return SeedResult(tags_created=tags_created, flashcards_created=len(SEED_FLASHCARDS))
