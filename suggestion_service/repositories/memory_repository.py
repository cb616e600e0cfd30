# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: In-memory suggested-name store.
NO business rules here — pure CRUD.
"""

from typing import Optional

from suggestion_service.models.domain import SuggestedName
from suggestion_service.repositories.base import SuggestedNameRepository


class InMemorySuggestedNameRepository(SuggestedNameRepository):
    """Dict-backed storage, keyed by name."""

    STORAGE = "memory"

    def __init__(self) -> None:
        self._store: dict[str, SuggestedName] = {}

    # ── Read ──

    def find_all(self) -> list[SuggestedName]:
        return list(self._store.values())

    def find_by_name(self, name: str) -> Optional[SuggestedName]:
        return self._store.get(name)

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def save(self, suggestion: SuggestedName) -> SuggestedName:
        # Re-inserting moves a replaced name to the end, like a fresh row.
        self._store.pop(suggestion.name, None)
        self._store[suggestion.name] = suggestion
        return suggestion

    def delete(self, suggestion: SuggestedName) -> None:
        self._store.pop(suggestion.name, None)

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
