"""Unit tests for client key synthesis, payload building and result remapping."""

from __future__ import annotations

import re
import time

import pytest

from transrelay.app.errors import UpstreamHttpError, UpstreamLogicError
from transrelay.app.schemas import TranslationRequest, UpstreamResponse
from transrelay.app.services import (
    build_translation_payload,
    error_envelope,
    generate_client_key,
    remap_results,
    success_envelope,
)

CLIENT_KEY_PATTERN = re.compile(
    r"^browser-chrome-(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"-(?P<os>Mac OS|Windows)"
    r"-(?P<uuid>[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12})"
    r"-(?P<epoch_ms>\d+)$"
)


def test_client_key_format_and_ranges() -> None:
    before = int(time.time() * 1000)
    for _ in range(50):
        match = CLIENT_KEY_PATTERN.match(generate_client_key())
        assert match is not None
        assert 100 <= int(match["major"]) <= 116
        assert 0 <= int(match["minor"]) <= 19
        assert 0 <= int(match["patch"]) <= 19
        assert int(match["epoch_ms"]) >= before


def test_client_keys_are_unique() -> None:
    keys = {generate_client_key() for _ in range(20)}
    assert len(keys) == 20


def test_build_translation_payload_fixed_fields() -> None:
    request = TranslationRequest(source_lang="en", target_lang="ja", text_list=["One", "Two"])

    payload = build_translation_payload(request).model_dump()

    assert payload["header"]["fn"] == "auto_translation"
    assert payload["header"]["session"] == ""
    assert payload["header"]["user"] == ""
    assert CLIENT_KEY_PATTERN.match(payload["header"]["client_key"])
    assert payload["type"] == "plain"
    assert payload["model_category"] == "normal"
    assert payload["text_domain"] == ""
    assert payload["source"] == {"lang": "en", "text_list": ["One", "Two"]}
    assert payload["target"] == {"lang": "ja"}


def test_each_payload_gets_its_own_client_key() -> None:
    request = TranslationRequest(source_lang="en", target_lang="zh", text_list=["Hi"])

    first = build_translation_payload(request)
    second = build_translation_payload(request)

    assert first.header.client_key != second.header.client_key


def test_remap_results_counts_characters() -> None:
    upstream = UpstreamResponse.model_validate(
        {"header": {"ret_code": "succ"}, "auto_translation": ["你好", "世界", "ignored"]}
    )

    results = remap_results(["Hello", "World"], upstream, 200)

    assert [result.model_dump() for result in results] == [
        {"original": "Hello", "original_length": 5, "result": "你好", "result_length": 2},
        {"original": "World", "original_length": 5, "result": "世界", "result_length": 2},
    ]


def test_remap_results_rejects_failure_marker() -> None:
    upstream = UpstreamResponse.model_validate({"header": {"ret_code": "fail"}, "auto_translation": ["x"]})

    with pytest.raises(UpstreamLogicError) as exc_info:
        remap_results(["Hello"], upstream, 200)

    assert exc_info.value.status_code == 200
    assert exc_info.value.message == "Translation Error"


def test_remap_results_rejects_short_upstream_list() -> None:
    upstream = UpstreamResponse.model_validate({"header": {"ret_code": "succ"}, "auto_translation": ["你好"]})

    with pytest.raises(UpstreamLogicError):
        remap_results(["Hello", "World"], upstream, 200)


def test_envelopes() -> None:
    assert success_envelope([], message="OK").model_dump() == {"code": 200, "message": "OK", "data": []}
    assert error_envelope(UpstreamHttpError(429)).model_dump() == {
        "code": 429,
        "message": "HTTP Error: 429",
        "data": None,
    }


def test_remap_results_counts_code_points_outside_bmp() -> None:
    """Lengths count code points, so an emoji is one character."""
    upstream = UpstreamResponse.model_validate({"header": {"ret_code": "succ"}, "auto_translation": ["😀😀"]})

    (result,) = remap_results(["😀"], upstream, 200)

    assert result.original_length == 1
    assert result.result_length == 2
