from __future__ import annotations

# taghunter/services/store_svc.py
import csv
import logging
import os
import sqlite3
from typing import List, Tuple

from ..db import SharedStore, ensure_parent_dir, get_db_path, open_connection, set_store
from ..errors import StoreInitError
from ..repository import game_type_repo, scenario_repo

logger = logging.getLogger(__name__)

SEED_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "seeds")


def _read_csv(path: str) -> list[dict]:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return list(csv.DictReader(f))


def _field(row: dict, key: str, path: str, required: bool = True) -> str:
    v = (row.get(key) or "").strip()
    if required and not v:
        raise ValueError(f"{os.path.basename(path)}: row {row.get('id')!r} is missing '{key}'")
    return v


def load_seeds(seed_dir: str | None = None) -> Tuple[List[dict], List[dict]]:
    """Read game types and scenarios from the bundled seed CSVs. Short or blank rows raise ValueError."""
    base = seed_dir or SEED_DIR
    gt_path = os.path.join(base, "game_types.csv")
    game_types = [
        {k: _field(r, k, gt_path) for k in ("id", "name", "description")}
        for r in _read_csv(gt_path)
    ]
    sc_path = os.path.join(base, "scenarios.csv")
    scenarios = []
    for r in _read_csv(sc_path):
        scenarios.append({
            "id": _field(r, "id", sc_path),
            "game_type_id": _field(r, "game_type_id", sc_path),
            "title": _field(r, "title", sc_path),
            "description": _field(r, "description", sc_path),
            "difficulty": _field(r, "difficulty", sc_path, required=False) or "Medium",
            "duration_minutes": int(_field(r, "duration_minutes", sc_path, required=False) or 30),
            "image_url": _field(r, "image_url", sc_path, required=False) or None,
        })
    return game_types, scenarios


def ensure_schema(conn: sqlite3.Connection):
    game_type_repo.ensure_schema(conn)
    scenario_repo.ensure_schema(conn)


def seed_if_empty(conn: sqlite3.Connection, seed_dir: str | None = None) -> dict:
    """
    Insert the seed rows when game_types is empty.
    Both tables are written in one transaction, so a failure leaves nothing behind
    and the next start retries the whole seed.
    """
    conn.execute("BEGIN IMMEDIATE")
    try:
        if game_type_repo.count(conn) > 0:
            conn.execute("ROLLBACK")
            return {"seeded": False, "game_types": 0, "scenarios": 0}
        game_types, scenarios = load_seeds(seed_dir)
        n_gt = game_type_repo.insert_many(conn, game_types)
        n_sc = scenario_repo.insert_many(conn, scenarios)
        conn.execute("COMMIT")
    except BaseException:
        if conn.in_transaction:
            conn.execute("ROLLBACK")
        raise
    return {"seeded": True, "game_types": n_gt, "scenarios": n_sc}


def init_store(db_path: str | None = None, seed_dir: str | None = None) -> SharedStore:
    """Open, migrate and seed the store, then install it as the shared store."""
    path = db_path
    conn = None
    try:
        path = ensure_parent_dir(path) if path else get_db_path()
        conn = open_connection(path)
        ensure_schema(conn)
        res = seed_if_empty(conn, seed_dir)
    except Exception as e:
        if conn is not None:
            conn.close()
        raise StoreInitError(f"failed to initialize store at {path}: {e}") from e

    if res["seeded"]:
        logger.info("seeded store %s: %d game types, %d scenarios", path, res["game_types"], res["scenarios"])
    else:
        logger.info("store %s already seeded, skipping", path)
    return set_store(SharedStore(conn, path))
