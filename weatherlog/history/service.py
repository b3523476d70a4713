"""History store service: validated append and capped most-recent listing."""

import logging
import sqlite3
from collections.abc import Mapping
from pathlib import Path

from weatherlog.errors import StoreError, ValidationError
from weatherlog.models.reading import HistoryRecord, Reading, format_number
from weatherlog.storage import history_repo
from weatherlog.storage.database import open_store

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("humidity", "location", "temperature", "windSpeed")
MISSING_DATA_MESSAGE = "Missing data! Make sure to send all required fields"
DEFAULT_LIMIT = 10


class HistoryService:
    """Append-only history backed by SQLite.

    Opens a short-lived connection per operation so a single service can be
    shared by every request handler.
    """

    def __init__(self, db_path: str | Path, max_limit: int = DEFAULT_LIMIT):
        self.db_path = db_path
        self.max_limit = max_limit

    def append(self, payload: Reading | Mapping) -> HistoryRecord:
        """Validate and insert one lookup. Returns the stored record."""
        data = payload.to_payload() if isinstance(payload, Reading) else payload
        if not isinstance(data, Mapping) or any(
            _is_empty(data.get(k)) for k in REQUIRED_FIELDS
        ):
            raise ValidationError(MISSING_DATA_MESSAGE)

        conn = self._conn()
        try:
            row_id = history_repo.insert_record(
                conn,
                humidity=_as_text(data["humidity"]),
                location=str(data["location"]),
                temperature=_as_text(data["temperature"]),
                wind_speed=_as_text(data["windSpeed"]),
            )
            row = history_repo.get_record(conn, row_id)
        except sqlite3.Error as e:
            logger.error("History insert failed: %s", e)
            raise StoreError(f"Database error: {e}") from e
        finally:
            conn.close()

        assert row is not None
        logger.info("Saved lookup id=%d location=%s", row_id, row["location"])
        return HistoryRecord.from_row(row)

    def list_recent(self, limit: int = DEFAULT_LIMIT) -> list[HistoryRecord]:
        """Newest-first history, never more than max_limit rows."""
        limit = max(0, min(limit, self.max_limit, DEFAULT_LIMIT))
        conn = self._conn()
        try:
            rows = history_repo.get_recent_records(conn, limit)
        except sqlite3.Error as e:
            logger.error("History query failed: %s", e)
            raise StoreError(f"Database error: {e}") from e
        finally:
            conn.close()
        return [HistoryRecord.from_row(r) for r in rows]

    def ping(self) -> bool:
        try:
            conn = self._conn()
        except StoreError:
            return False
        try:
            conn.execute("SELECT 1")
            return True
        except sqlite3.Error:
            return False
        finally:
            conn.close()

    def _conn(self) -> sqlite3.Connection:
        try:
            return open_store(self.db_path)
        except (sqlite3.Error, OSError) as e:
            logger.error("Cannot open history store at %s: %s", self.db_path, e)
            raise StoreError(f"Database error: {e}") from e


def _is_empty(value: object) -> bool:
    """Loose emptiness: None, "", "0", False and numeric zero all count."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == "" or value == "0"
    if isinstance(value, (int, float)):
        return value == 0
    return not value


def _as_text(value: object) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)
