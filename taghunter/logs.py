import json, logging, os, time, uuid, datetime as dt
from typing import Optional

from .config import read_config_yaml

OP_LOGGER = logging.getLogger("taghunter.operation")

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def setup_logging(level: Optional[str] = None):
    """Configure the root handler once. Level: arg > TAGHUNTER_LOG_LEVEL > config.yaml > INFO."""
    global _configured
    name = level or os.environ.get("TAGHUNTER_LOG_LEVEL") or read_config_yaml().get("log_level") or "INFO"
    lvl = logging.getLevelName(name.upper())
    if not isinstance(lvl, int):
        lvl = logging.INFO
    if not _configured:
        logging.basicConfig(level=lvl, format=_FORMAT)
        _configured = True
    logging.getLogger("taghunter").setLevel(lvl)


class OperationLogContext:
    def __init__(self, action: str, user: str = "owner"):
        self.action = action
        self.user = user
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()
        self.payload = None
        self.entity_type = None
        self.entity_id = None
        self.result_count = None

    def set_entity(self, etype: str, eid: str):
        self.entity_type = etype
        self.entity_id = eid

    def set_payload(self, obj): self.payload = obj
    def set_result_count(self, n: int): self.result_count = n

    def record(self, result: str = "OK", err: Optional[str] = None) -> dict:
        elapsed_ms = int((time.perf_counter() - self.start) * 1000)
        return {
            "ts": dt.datetime.now().astimezone().isoformat(),
            "user": self.user,
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "request_id": self.request_id,
            "payload": self.payload,
            "count": self.result_count,
            "result": result,
            "err_msg": err,
            "latency_ms": elapsed_ms,
        }

    def write(self, result: str = "OK", err: Optional[str] = None) -> dict:
        rec = self.record(result, err)
        level = logging.INFO if result == "OK" else logging.ERROR
        OP_LOGGER.log(level, json.dumps(rec, ensure_ascii=False, default=str))
        return rec
