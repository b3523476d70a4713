"""Repository for the lookup history table."""

import sqlite3


def insert_record(
    conn: sqlite3.Connection,
    humidity: str,
    location: str,
    temperature: str,
    wind_speed: str,
) -> int:
    """Append one lookup. Returns the row id."""
    cursor = conn.execute(
        "INSERT INTO history (humidity, location, temperature, wind_speed) "
        "VALUES (?, ?, ?, ?)",
        (humidity, location, temperature, wind_speed),
    )
    conn.commit()
    assert cursor.lastrowid is not None
    return cursor.lastrowid


def get_record(conn: sqlite3.Connection, record_id: int) -> dict | None:
    row = conn.execute(
        "SELECT id, humidity, location, temperature, wind_speed, time_search "
        "FROM history WHERE id = ?",
        (record_id,),
    ).fetchone()
    if row is None:
        return None
    return dict(row)


def get_recent_records(conn: sqlite3.Connection, limit: int = 10) -> list[dict]:
    """Most recent lookups, newest first. Same-second inserts fall back to id."""
    rows = conn.execute(
        "SELECT id, humidity, location, temperature, wind_speed, time_search "
        "FROM history ORDER BY time_search DESC, id DESC LIMIT ?",
        (limit,),
    ).fetchall()
    return [dict(r) for r in rows]
