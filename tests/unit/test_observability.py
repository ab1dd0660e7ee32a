"""Unit tests for structured logging utilities in ``observability``."""

from __future__ import annotations

import logging

import pytest

from lib_tagged_config import FixedTagStrategy, InMemoryConfigurationStore, TaggedConfig, bind_trace_id, get_logger
from lib_tagged_config.observability import TRACE_ID, log_info, make_event


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to avoid surprises."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_trace_id_in_log(caplog: pytest.LogCaptureFixture) -> None:
    """Structured logs should include the bound trace identifier and contextual fields."""

    caplog.set_level(logging.INFO, logger="lib_tagged_config")
    bind_trace_id("trace-123")
    try:
        log_info("value_resolved", source="AppSettingsSource", key="Dev.Setting")
    finally:
        bind_trace_id(None)
    record = caplog.records[-1]
    assert getattr(record, "context") == {"trace_id": "trace-123", "source": "AppSettingsSource", "key": "Dev.Setting"}


def test_bind_trace_id_clears_context() -> None:
    bind_trace_id("trace-temp")
    bind_trace_id(None)
    assert TRACE_ID.get() is None


def test_make_event_merges_optional_payload() -> None:
    assert make_event("FixedTagStrategy", None, {"tag": "Dev"}) == {
        "source": "FixedTagStrategy",
        "key": None,
        "tag": "Dev",
    }


def test_resolution_emits_debug_events(caplog: pytest.LogCaptureFixture) -> None:
    """A successful lookup should narrate tag, collection, and value events."""

    caplog.set_level(logging.DEBUG, logger="lib_tagged_config")
    config = TaggedConfig(
        tag_strategy=FixedTagStrategy("Dev"),
        store=InMemoryConfigurationStore(app_settings={"Dev.Setting": "x"}),
    )
    config.get_app_setting("Setting")
    messages = [record.getMessage() for record in caplog.records]
    assert messages[-3:] == ["tag_resolved", "collection_fetched", "value_resolved"]
    assert getattr(caplog.records[-1], "context")["key"] == "Dev.Setting"
