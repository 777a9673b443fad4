import sys
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture()
def tmp_db_path(tmp_path, monkeypatch):
    path = tmp_path / "taghunter_test.db"
    # Point the backend to this temp DB
    monkeypatch.setenv("TAGHUNTER_DB_PATH", str(path))
    return str(path)


@pytest.fixture()
def store(tmp_db_path):
    from taghunter.db import close_store
    from taghunter.services.store_svc import init_store
    s = init_store(tmp_db_path)
    yield s
    close_store()


@pytest.fixture()
def client(tmp_db_path):
    # Import app after DB path is set so the startup hook uses it
    from taghunter.api import app
    from fastapi.testclient import TestClient
    with TestClient(app) as c:
        yield c
