"""Initial schema: the append-only lookup history table."""

import sqlite3

DDL = [
    """
    CREATE TABLE IF NOT EXISTS history (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        humidity TEXT NOT NULL,
        location TEXT NOT NULL,
        temperature TEXT NOT NULL,
        wind_speed TEXT NOT NULL,
        time_search TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_history_time_search ON history(time_search)",
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
