"""Unit coverage for the line-oriented stream decoder."""

from __future__ import annotations

import json

import pytest

from devagent_providers.base.streaming import (
    ANTHROPIC_SSE,
    GEMINI_NDJSON,
    HUGGINGFACE_NDJSON,
    OLLAMA_NDJSON,
    OPENAI_SSE,
    StreamPayloadError,
    decode_line,
    extract_path,
    iter_deltas,
)


def test_extract_path_walks_dicts_and_lists():
    obj = {"choices": [{"delta": {"content": "x"}}]}
    assert extract_path(obj, ("choices", 0, "delta", "content")) == "x"
    assert extract_path(obj, ("choices", 1, "delta")) is None
    assert extract_path(obj, ("missing",)) is None
    assert extract_path([{"generated_text": "y"}], (0, "generated_text")) == "y"
    assert extract_path("not-a-container", ("a",)) is None


def test_decode_line_strips_prefix_and_extracts_delta():
    decoded = decode_line('data: {"choices":[{"delta":{"content":"Hi"}}]}', OPENAI_SSE)
    assert decoded.delta == "Hi"
    assert not decoded.done


@pytest.mark.parametrize("line", ["", "   ", "event: content_block_delta", ": keep-alive", "id: 7", "data:"])
def test_sse_lines_without_payload_are_ignored(line):
    decoded = decode_line(line, ANTHROPIC_SSE)
    assert decoded.delta is None
    assert not decoded.done


def test_end_marker_marks_done():
    assert decode_line("data: [DONE]", OPENAI_SSE).done
    assert decode_line("data:[DONE]", ANTHROPIC_SSE).done


def test_malformed_json_raises_from_decode_line():
    with pytest.raises(json.JSONDecodeError):
        decode_line("data: {not json", OPENAI_SSE)


def test_empty_delta_is_not_emitted():
    assert decode_line('{"response":"","done":true}', OLLAMA_NDJSON).delta is None
    assert decode_line('{"candidates":[]}', GEMINI_NDJSON).delta is None


def test_error_path_raises_payload_error():
    with pytest.raises(StreamPayloadError, match="model not found"):
        decode_line('{"error":"model not found"}', OLLAMA_NDJSON)


def test_iter_deltas_skips_malformed_lines_and_reports_them():
    seen = []
    lines = ['{"response":"He"}', "{broken", '{"response":"llo"}']
    out = list(iter_deltas(lines, OLLAMA_NDJSON, on_malformed=lambda line, exc: seen.append(line)))
    assert out == ["He", "llo"]
    assert seen == ["{broken"]


def test_iter_deltas_stops_at_end_marker():
    lines = [
        'data: {"choices":[{"delta":{"content":"a"}}]}',
        "data: [DONE]",
        'data: {"choices":[{"delta":{"content":"never"}}]}',
    ]
    assert list(iter_deltas(lines, OPENAI_SSE)) == ["a"]


def test_huggingface_lines_are_arrays():
    lines = ['[{"generated_text":"x"}]', '[{"generated_text":"y"}]']
    assert "".join(iter_deltas(lines, HUGGINGFACE_NDJSON)) == "xy"
