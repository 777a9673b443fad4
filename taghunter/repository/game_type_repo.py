from __future__ import annotations

from sqlite3 import Connection
from typing import Iterable, Mapping

COLUMNS = "id, name, description, created_at"


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS game_types (
            id TEXT PRIMARY KEY,
            name TEXT UNIQUE NOT NULL CHECK (length(name) > 0),
            description TEXT NOT NULL CHECK (length(description) > 0),
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """
    )


def count(conn: Connection) -> int:
    row = conn.execute("SELECT COUNT(*) AS cnt FROM game_types").fetchone()
    return int(row["cnt"])


def insert_many(conn: Connection, rows: Iterable[Mapping[str, str]]) -> int:
    cur = conn.executemany(
        "INSERT INTO game_types(id, name, description) VALUES(:id, :name, :description)",
        [dict(r) for r in rows],
    )
    return cur.rowcount


def list_all(conn: Connection):
    return conn.execute(f"SELECT {COLUMNS} FROM game_types ORDER BY name").fetchall()
