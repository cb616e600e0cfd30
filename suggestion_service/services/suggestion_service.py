# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Suggested-name management — business logic for CRUD operations.
Coordinates repository calls with metrics and logging.
"""

from typing import Optional

from suggestion_service.core.logging import get_logger
from suggestion_service.metrics.prometheus import (
    SUGGESTIONS_CREATED,
    SUGGESTIONS_DELETED,
    SUGGESTIONS_REJECTED,
    SUGGESTIONS_STORED,
)
from suggestion_service.models.domain import SuggestedName
from suggestion_service.repositories.base import SuggestedNameRepository

logger = get_logger(__name__)


class SuggestionService:
    """Business logic for suggested names."""

    def __init__(self, repo: SuggestedNameRepository) -> None:
        self._repo = repo

    def seed_gauges(self) -> None:
        SUGGESTIONS_STORED.set(self._repo.count())
        logger.info("Prometheus gauges loaded from %s storage", self._repo.STORAGE)

    # ── Commands ──

    def suggest(self, suggestion: SuggestedName) -> SuggestedName:
        """Persist an already-validated suggestion."""
        self._repo.save(suggestion)
        SUGGESTIONS_CREATED.inc()
        # A save may replace an existing name, so re-read the total.
        SUGGESTIONS_STORED.set(self._repo.count())
        logger.info("Suggestion saved: name=%s, locations=%d",
                    suggestion.name, len(suggestion.locations))
        return suggestion

    def delete_suggestion(self, name: str) -> None:
        """Delete a suggestion by exact name. Raises KeyError if absent."""
        existing = self._repo.find_by_name(name)
        if existing is None:
            SUGGESTIONS_REJECTED.labels(reason="not_found").inc()
            logger.info("Delete rejected, no suggestion named %s", name)
            raise KeyError(f"No suggested name found for '{name}'")
        self._repo.delete(existing)
        SUGGESTIONS_DELETED.inc()
        SUGGESTIONS_STORED.dec()
        logger.info("Suggestion deleted: name=%s", name)

    # ── Queries ──

    def list_suggestions(self) -> list[SuggestedName]:
        return list(self._repo.find_all() or [])

    def get_meta(self, count: bool = False) -> Optional[dict[str, str]]:
        """Return {"count": "<N>"} when asked for a count, else None."""
        if not count:
            return None
        return {"count": str(self._repo.count())}
