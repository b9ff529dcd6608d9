import json
import logging

from rgsnapshot.logging import ContextFilter, CustomJsonFormatter, setup_logging
from rgsnapshot.logging.filters import clear_request_context, set_request_context


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="sample %s",
        args=("message",),
        exc_info=None,
    )


def test_context_filter_uses_request_context():
    set_request_context(request_id="req-1", event_id="evt-7", resource_group="my-rg")
    try:
        record = _record()
        assert ContextFilter().filter(record)
        assert record.request_id == "req-1"
        assert record.event_id == "evt-7"
        assert record.resource_group == "my-rg"
        assert record.service_name == "rgsnapshot"
    finally:
        clear_request_context()


def test_context_filter_no_context_is_graceful():
    clear_request_context()
    record = _record()
    assert ContextFilter().filter(record)
    assert record.request_id is None
    assert record.event_id is None


def test_json_formatter_includes_context_and_extras():
    set_request_context(event_id="evt-7")
    try:
        record = _record()
        record.resource_count = 3
        ContextFilter().filter(record)
        payload = json.loads(CustomJsonFormatter().format(record))
    finally:
        clear_request_context()

    assert payload["message"] == "sample message"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["event_id"] == "evt-7"
    assert payload["resource_count"] == 3
    assert "request_id" not in payload
    assert "trace_id" not in payload


def test_context_filter_service_name_is_configurable():
    record = _record()
    ContextFilter(service_name="rgsnapshot-westeurope").filter(record)
    assert record.service_name == "rgsnapshot-westeurope"


def test_setup_logging_stamps_service_name(capsys):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("debug", service_name="rgsnapshot-westeurope")
        logging.getLogger("rgsnapshot.test").info("configured", extra={"resource_count": 2})
        assert logging.getLogger("azure").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["message"] == "configured"
    assert payload["level"] == "INFO"
    assert payload["service_name"] == "rgsnapshot-westeurope"
    assert payload["resource_count"] == 2
