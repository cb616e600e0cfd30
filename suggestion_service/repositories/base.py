# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Interface every suggested-name store implements."""

import abc
from typing import Optional

from suggestion_service.models.domain import SuggestedName


class SuggestedNameRepository(abc.ABC):
    """Persistence for suggested names, keyed by exact name."""

    STORAGE: str = "unknown"

    @abc.abstractmethod
    def save(self, suggestion: SuggestedName) -> SuggestedName:
        """Store a suggestion, replacing any existing one with the same name."""

    @abc.abstractmethod
    def find_all(self) -> list[SuggestedName]:
        """Return every stored suggestion in insertion order."""

    @abc.abstractmethod
    def find_by_name(self, name: str) -> Optional[SuggestedName]:
        """Return the suggestion with exactly this name, or None."""

    @abc.abstractmethod
    def delete(self, suggestion: SuggestedName) -> None:
        """Remove a suggestion. Deleting an absent one is a no-op."""

    @abc.abstractmethod
    def count(self) -> int:
        """Return the number of stored suggestions."""

    def verify_connection(self) -> None:
        """Raise if the backing store is unreachable."""

    def dispose(self) -> None:
        """Release any held resources."""
