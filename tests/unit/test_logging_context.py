import logging

from infrastructure.observability.logging import ContextInjectFilter, get_log_context, set_log_context


def test_context_is_injected_into_records() -> None:
    set_log_context(command="eval", source="scores.csv")

    record = logging.LogRecord("st", logging.INFO, __file__, 1, "msg", None, None)
    assert ContextInjectFilter().filter(record)

    assert record.cmd == "eval"
    assert record.src == "scores.csv"
    assert get_log_context() == {"command": "eval", "source": "scores.csv"}


def test_none_leaves_context_untouched() -> None:
    set_log_context(command="summary", source="a.csv")
    set_log_context(source=None)

    assert get_log_context()["source"] == "a.csv"
