from __future__ import annotations

from sqlite3 import Connection
from typing import Iterable, Mapping, Optional

COLUMNS = (
    "id, game_type_id, title, description, difficulty, "
    "duration_minutes, created_at, image_url"
)


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS scenarios (
            id TEXT PRIMARY KEY,
            game_type_id TEXT NOT NULL,
            title TEXT NOT NULL,
            description TEXT NOT NULL,
            difficulty TEXT DEFAULT 'Medium' CHECK (difficulty IN ('Easy', 'Medium', 'Hard')),
            duration_minutes INTEGER DEFAULT 30 CHECK (duration_minutes > 0),
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            image_url TEXT,
            FOREIGN KEY (game_type_id) REFERENCES game_types(id)
        )
        """
    )
    conn.execute("CREATE INDEX IF NOT EXISTS idx_scenarios_game_type ON scenarios(game_type_id)")


def count(conn: Connection) -> int:
    row = conn.execute("SELECT COUNT(*) AS cnt FROM scenarios").fetchone()
    return int(row["cnt"])


def insert_many(conn: Connection, rows: Iterable[Mapping[str, object]]) -> int:
    cur = conn.executemany(
        "INSERT INTO scenarios(id, game_type_id, title, description, difficulty, duration_minutes, image_url) "
        "VALUES(:id, :game_type_id, :title, :description, :difficulty, :duration_minutes, :image_url)",
        [dict(r) for r in rows],
    )
    return cur.rowcount


def list_scenarios(conn: Connection, game_type_id: Optional[str] = None):
    sql = f"SELECT {COLUMNS} FROM scenarios"
    params: dict = {}
    if game_type_id is not None:
        sql += " WHERE game_type_id = :game_type_id"
        params["game_type_id"] = game_type_id
    sql += " ORDER BY title"
    return conn.execute(sql, params).fetchall()
