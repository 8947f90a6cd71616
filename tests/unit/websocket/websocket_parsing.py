"""Unit tests for client frame parsing."""

from __future__ import annotations

import pytest

from consult_relay.config.limits import CHANNEL_MESSAGE_MAX_CHARS
from consult_relay.handlers.websocket.parser import parse_client_message


def test_end_sentinel_maps_to_end_type() -> None:
    assert parse_client_message("  __END__ ") == {"type": "end"}


def test_json_frame_keeps_fields_and_normalizes_request_id() -> None:
    msg = parse_client_message(
        '{"type": " requestSuperintelligentAnalysis ", "request_id": 7, "businessData": {"a": 1}}'
    )
    assert msg["type"] == "requestSuperintelligentAnalysis"
    assert msg["request_id"] == "7"
    assert msg["businessData"] == {"a": 1}


def test_missing_request_id_becomes_none() -> None:
    assert parse_client_message('{"type": "ping", "request_id": "  "}')["request_id"] is None
    assert parse_client_message('{"type": "ping"}')["request_id"] is None


def test_end_flag_without_type() -> None:
    assert parse_client_message('{"end": true}')["type"] == "end"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "not json",
        "[1, 2]",
        '{"businessData": {}}',
        '{"type": 5}',
        '{"type": "ping", "pad": "' + "x" * CHANNEL_MESSAGE_MAX_CHARS + '"}',
    ],
)
def test_invalid_frames_raise_value_error(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_client_message(raw)
