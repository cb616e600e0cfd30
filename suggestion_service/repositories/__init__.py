# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports the suggested-name repositories."""
from suggestion_service.repositories.base import SuggestedNameRepository
from suggestion_service.repositories.memory_repository import InMemorySuggestedNameRepository
from suggestion_service.repositories.sql_repository import SqlSuggestedNameRepository

__all__ = [
    "SuggestedNameRepository",
    "InMemorySuggestedNameRepository",
    "SqlSuggestedNameRepository",
]
