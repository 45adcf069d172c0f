import logging

from blogsum.core.logging import ContextFormatter, ContextInjectionFilter, get_log_context, log_context, setup_logging


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord("blogsum.test", logging.INFO, __file__, 1, message, None, None)


def test_log_context_nests_and_resets() -> None:
    with log_context(request_id="abc"):
        with log_context(url="https://medium.com/@x/y"):
            assert get_log_context() == {"request_id": "abc", "url": "https://medium.com/@x/y"}
        assert get_log_context() == {"request_id": "abc"}
    assert get_log_context() == {}


def test_context_fields_are_appended() -> None:
    record = _record("fetch done")
    with log_context(request_id="abc"):
        ContextInjectionFilter().filter(record)

    line = ContextFormatter("%(message)s").format(record)

    assert line == "fetch done [request_id=abc]"


def test_reserved_fields_are_not_overwritten() -> None:
    record = _record("hello")
    with log_context(msg="hijack"):
        ContextInjectionFilter().filter(record)

    assert record.msg == "hello"


def test_setup_logging_clamps_third_party(monkeypatch) -> None:
    monkeypatch.setenv("LOG_COLOR", "0")

    setup_logging(log_level="DEBUG")

    assert logging.getLogger("blogsum").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("uvicorn.error").level == logging.INFO
