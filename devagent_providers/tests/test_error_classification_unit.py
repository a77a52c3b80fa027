from __future__ import annotations

import types

import httpx

from devagent_providers.base.errors import (
    ErrorCode,
    ProviderError,
    classify_exception,
    to_provider_error,
)


def test_classify_provider_error_passthrough():
    e = ProviderError(code=ErrorCode.MISSING_API_KEY, message="nope", provider="groq")
    assert classify_exception(e) is ErrorCode.MISSING_API_KEY  # nosec B101 - assert is appropriate in unit tests
    assert to_provider_error(e, provider="groq", model=None) is e  # nosec B101 - assert is appropriate in unit tests


def test_classify_http_status_mapping():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.HTTP_ERROR  # nosec B101 - assert is appropriate in unit tests
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.HTTP_ERROR  # nosec B101 - assert is appropriate in unit tests


def test_transport_errors_depend_on_stream_phase():
    exc = httpx.ConnectError("refused")
    assert classify_exception(exc) is ErrorCode.TRANSPORT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(exc, mid_stream=True) is ErrorCode.STREAM_ERROR  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests


def test_to_provider_error_carries_status_text():
    request = httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions")
    response = httpx.Response(429, request=request)
    exc = httpx.HTTPStatusError("too many", request=request, response=response)
    err = to_provider_error(exc, provider="groq", model="m")
    assert err.code is ErrorCode.HTTP_ERROR
    assert err.status == 429
    assert err.status_text == "Too Many Requests"
    assert err.message == "groq API error: 429 Too Many Requests"
    assert err.raw is exc


def test_mid_stream_message():
    err = to_provider_error(httpx.ReadError("reset"), provider="openai", model="m", mid_stream=True)
    assert err.code is ErrorCode.STREAM_ERROR
    assert err.message == "Stream error: reset"
    assert str(err) == "openai:m stream_error: Stream error: reset"
