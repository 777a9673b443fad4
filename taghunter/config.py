from __future__ import annotations

# taghunter/config.py
import os
import yaml

_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))

_KEYS = ("db_path", "test_db_path", "log_level")


def config_path() -> str:
    return os.environ.get("TAGHUNTER_CONFIG") or os.path.join(_PROJECT_ROOT, "config.yaml")


def read_config_yaml() -> dict:
    """Optional config.yaml; only non-empty string values of known keys are kept."""
    cfg_path = config_path()
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(cfg, dict):
        return {}
    out = {}
    for k in _KEYS:
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out


def is_test_env() -> bool:
    return (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)
