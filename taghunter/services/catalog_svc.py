from __future__ import annotations

import sqlite3
from typing import Optional

from ..db import get_store
from ..errors import StorageError
from ..repository import game_type_repo, scenario_repo


# ===== Game types / scenarios for UI =====
def list_game_types() -> list[dict]:
    try:
        with get_store().locked() as conn:
            rows = game_type_repo.list_all(conn)
            return [dict(r) for r in rows]
    except sqlite3.Error as e:
        raise StorageError(str(e)) from e


def list_scenarios(game_type_id: Optional[str] = None) -> list[dict]:
    """
    All scenarios ordered by title, or only those of `game_type_id` when given.
    An id with no scenarios yields an empty list.
    """
    try:
        with get_store().locked() as conn:
            rows = scenario_repo.list_scenarios(conn, game_type_id)
            return [dict(r) for r in rows]
    except sqlite3.Error as e:
        raise StorageError(str(e)) from e
