import json
import logging

from taghunter.logs import OperationLogContext


def test_write_emits_structured_record(caplog):
    log = OperationLogContext("LIST_SCENARIOS")
    log.set_payload({"game_type_id": "1"})
    log.set_entity("GAME_TYPE", "1")
    log.set_result_count(5)
    with caplog.at_level(logging.INFO, logger="taghunter.operation"):
        rec = log.write("OK")

    assert rec["action"] == "LIST_SCENARIOS"
    assert rec["count"] == 5
    assert rec["latency_ms"] >= 0
    emitted = json.loads(caplog.records[-1].getMessage())
    assert emitted["request_id"] == log.request_id
    assert caplog.records[-1].levelno == logging.INFO


def test_error_result_logged_at_error_level(caplog):
    with caplog.at_level(logging.INFO, logger="taghunter.operation"):
        OperationLogContext("LIST_GAME_TYPES").write("ERROR", "store is closed")
    assert caplog.records[-1].levelno == logging.ERROR
    assert json.loads(caplog.records[-1].getMessage())["err_msg"] == "store is closed"
