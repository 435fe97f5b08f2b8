import logging

import pytest

from telegate.core.context import bind_request_id, unbind_request_id
from telegate.core.logging import (
    RequestContextFilter,
    build_logging_config,
    configure_logging,
    redact_token,
)
from telegate.core.observability import encode_fields, log_event
from telegate.telegram.types import ReactionTypeEmoji, UpdateKind


def test_log_event_renders_sorted_json_fields(caplog):
    logger = logging.getLogger("tests.observability")
    caplog.set_level(logging.INFO, logger="tests.observability")

    log_event(logger, event="telegram.update.handled", update_id=9, kind=UpdateKind.POLL)

    assert caplog.records[-1].getMessage() == (
        'event=telegram.update.handled fields={"kind":"poll","update_id":9}'
    )


def test_log_event_includes_bound_request_id(caplog):
    logger = logging.getLogger("tests.observability")
    caplog.set_level(logging.INFO, logger="tests.observability")
    token = bind_request_id("req-1")
    try:
        log_event(logger, event="telegram.webhook.ack", update_id=1)
    finally:
        unbind_request_id(token)

    assert '"request_id":"req-1"' in caplog.records[-1].getMessage()


def test_log_event_skips_disabled_levels(caplog):
    logger = logging.getLogger("tests.observability.quiet")
    caplog.set_level(logging.WARNING, logger="tests.observability.quiet")

    log_event(logger, event="telegram.api.call", method="getMe")

    assert caplog.records == []


class _Opaque:
    def __str__(self):
        return "opaque"


def test_encode_fields_handles_models_and_unknown_objects():
    encoded = encode_fields(
        {
            "reaction": ReactionTypeEmoji(emoji="\U0001fae1"),
            "method": "setMessageReaction",
            "raw": _Opaque(),
        }
    )

    assert encoded.startswith('{"method":"setMessageReaction","raw":"opaque"')
    assert '"reaction":{"type":"emoji","emoji":"\U0001fae1"}' in encoded


def test_redact_token_masks_bot_path_segment():
    url = "https://api.telegram.org/bot123456:AA-bb_CC/sendMessage?chat_id=7"

    assert redact_token(url) == "https://api.telegram.org/bot***/sendMessage?chat_id=7"
    assert redact_token("/botanist/garden") == "/botanist/garden"


def test_request_context_filter_stamps_id_and_scrubs_token():
    record = logging.LogRecord(
        "httpx", logging.INFO, __file__, 1, "GET %s", ("https://x/bot1:secret/getMe",), None
    )

    assert RequestContextFilter().filter(record) is True
    assert record.request_id == "-"
    assert record.getMessage() == "GET https://x/bot***/getMe"


def test_logging_config_rejects_unknown_level():
    with pytest.raises(ValueError, match="Invalid LOG_LEVEL"):
        build_logging_config("chatty")


def test_configure_logging_quiets_http_client_loggers():
    configure_logging("debug")
    try:
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger().level == logging.DEBUG
    finally:
        configure_logging("INFO")
