# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for suggested names backed by a SQL database."""
import json
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from suggestion_service.core.logging import get_logger
from suggestion_service.models.domain import GeoLocation, SuggestedName
from suggestion_service.repositories.base import SuggestedNameRepository

logger = get_logger(__name__)

SUGGESTION_COLS = "name, description, locations, email"

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS suggested_names (
        id          VARCHAR(36)  PRIMARY KEY,
        name        VARCHAR(255) NOT NULL UNIQUE,
        description TEXT         NOT NULL DEFAULT '',
        locations   TEXT         NOT NULL DEFAULT '[]',
        email       VARCHAR(255) NOT NULL,
        created_at  TIMESTAMP    NOT NULL
    )
"""


def _row_to_suggestion(row) -> SuggestedName:
    raw_locations = row[2]
    locations: list[dict[str, Any]] = (
        raw_locations if isinstance(raw_locations, list) else json.loads(raw_locations or "[]")
    )
    return SuggestedName(
        name=row[0],
        description=row[1] or "",
        locations=[GeoLocation(**loc) for loc in locations],
        email=row[3],
    )


class SqlSuggestedNameRepository(SuggestedNameRepository):
    STORAGE = "sql"

    def __init__(self, engine: Engine):
        self._engine = engine

    def create_schema(self) -> None:
        with self._engine.begin() as conn:
            conn.execute(text(CREATE_TABLE_SQL))
        logger.info("Table suggested_names ready")

    # ── Write ──────────────────────────────────────────────────────────

    def save(self, suggestion: SuggestedName) -> SuggestedName:
        locations = json.dumps([loc.model_dump(by_alias=True) for loc in suggestion.locations])
        with self._engine.begin() as conn:
            conn.execute(
                text("""
                    INSERT INTO suggested_names
                        (id, name, description, locations, email, created_at)
                    VALUES
                        (:id, :name, :description, :locations, :email, :created_at)
                    ON CONFLICT (name) DO UPDATE SET
                        description = excluded.description,
                        locations   = excluded.locations,
                        email       = excluded.email,
                        created_at  = excluded.created_at
                """),
                {"id": str(uuid.uuid4()), "name": suggestion.name,
                 "description": suggestion.description, "locations": locations,
                 "email": suggestion.email,
                 "created_at": datetime.now(timezone.utc).isoformat(timespec="microseconds")},
            )
        return suggestion

    def delete(self, suggestion: SuggestedName) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                text("DELETE FROM suggested_names WHERE name = :name"),
                {"name": suggestion.name},
            )

    # ── Read ───────────────────────────────────────────────────────────

    def find_all(self) -> list[SuggestedName]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                text(f"SELECT {SUGGESTION_COLS} FROM suggested_names ORDER BY created_at"),
            ).fetchall()
        return [_row_to_suggestion(r) for r in rows]

    def find_by_name(self, name: str) -> Optional[SuggestedName]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(f"SELECT {SUGGESTION_COLS} FROM suggested_names WHERE name = :name"),
                {"name": name},
            ).fetchone()
        return _row_to_suggestion(row) if row else None

    def count(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(text("SELECT COUNT(*) FROM suggested_names")).scalar() or 0

    def verify_connection(self) -> None:
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self._engine.dispose()
