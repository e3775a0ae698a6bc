"""Bridges the dependency container into FastAPI's per-request dependencies."""

import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from mathcards.core import container
from mathcards.database import DatabaseSession

UseCase = TypeVar("UseCase")

# Sync dependencies run in the threadpool; the db override is container-wide.
_override_lock = threading.Lock()


def inject_use_case(provider: Provider[UseCase]) -> Callable[[DatabaseSession], UseCase]:
    """
    Build a route dependency that resolves a use case for the request's session.

    The container's db dependency points at the request session only while
    the provider builds the object graph, and only one request builds at a time.
    """

    def resolve(db: DatabaseSession) -> UseCase:
        with _override_lock:
            container.db.override(db)
            try:
                return provider()
            finally:
                container.db.reset_override()

    return resolve
