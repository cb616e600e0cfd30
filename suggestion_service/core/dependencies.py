# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire the repository and service.
"""

from fastapi import Depends

from suggestion_service.core.config import settings
from suggestion_service.core.database import build_engine
from suggestion_service.repositories.base import SuggestedNameRepository
from suggestion_service.repositories.memory_repository import InMemorySuggestedNameRepository
from suggestion_service.repositories.sql_repository import SqlSuggestedNameRepository
from suggestion_service.services.suggestion_service import SuggestionService


def build_repository(database_url: str) -> SuggestedNameRepository:
    if database_url:
        return SqlSuggestedNameRepository(build_engine(database_url))
    return InMemorySuggestedNameRepository()


# ── Singleton repository instance ──
_repo = build_repository(settings.DATABASE_URL)


# ── FastAPI dependency functions ──
def get_suggested_name_repo() -> SuggestedNameRepository:
    return _repo


def get_suggestion_service(
    repo: SuggestedNameRepository = Depends(get_suggested_name_repo),
) -> SuggestionService:
    return SuggestionService(repo)
