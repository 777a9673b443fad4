from __future__ import annotations

# taghunter/db.py
import os
import sqlite3
import sys
import threading
from contextlib import contextmanager
from typing import Iterator

from .config import read_config_yaml, is_test_env
from .errors import StorageError

# DB path resolution order:
# 1) env TAGHUNTER_DB_PATH (highest priority)
# 2) config.yaml test_db_path (only when running tests)
# 3) config.yaml db_path
# 4) <app data dir>/taghunter/taghunter.db
# 5) fallback: ./taghunter.db in the current working directory
DB_FILENAME = "taghunter.db"
APP_DIRNAME = "taghunter"


def _app_data_dir() -> str | None:
    home = os.path.expanduser("~")
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA")
    elif sys.platform == "darwin":
        base = os.path.join(home, "Library", "Application Support") if home != "~" else None
    else:
        base = os.environ.get("XDG_DATA_HOME") or (
            os.path.join(home, ".local", "share") if home != "~" else None
        )
    if not base:
        return None
    return os.path.join(base, APP_DIRNAME)


def ensure_parent_dir(path: str) -> str:
    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


def get_db_path() -> str:
    env_path = os.environ.get("TAGHUNTER_DB_PATH")
    cfg = read_config_yaml()
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")

    if env_path:
        path = env_path
    elif is_test_env() and cfg_test:
        path = cfg_test
    elif cfg_db:
        path = cfg_db
    else:
        data_dir = _app_data_dir()
        path = os.path.join(data_dir or os.getcwd(), DB_FILENAME)

    return ensure_parent_dir(path)


def open_connection(db_path: str) -> sqlite3.Connection:
    """
    Open the SQLite file (created if absent) for sharing across threads.
    Autocommit mode: transactions are opened explicitly with BEGIN.
    """
    conn = sqlite3.connect(
        db_path,
        check_same_thread=False,
        isolation_level=None,
    )
    try:
        conn.execute("PRAGMA foreign_keys = ON;")
        conn.row_factory = sqlite3.Row
    except BaseException:
        conn.close()
        raise
    return conn


class SharedStore:
    """The single connection handle, guarded by one mutex."""

    def __init__(self, conn: sqlite3.Connection, path: str):
        self.path = path
        self._conn: sqlite3.Connection | None = conn
        self._lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._conn is None

    @contextmanager
    def locked(self) -> Iterator[sqlite3.Connection]:
        with self._lock:
            if self._conn is None:
                raise StorageError(f"store is closed: {self.path}")
            yield self._conn

    def close(self):
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None


_store: SharedStore | None = None
_store_guard = threading.Lock()


def set_store(store: SharedStore | None) -> SharedStore | None:
    """Install the process-wide store, closing any previous one."""
    global _store
    with _store_guard:
        prev, _store = _store, store
    if prev is not None and prev is not store:
        prev.close()
    return store


def get_store() -> SharedStore:
    store = _store
    if store is None:
        raise StorageError("store is not initialized")
    return store


def close_store():
    set_store(None)
