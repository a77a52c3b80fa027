"""Request shape and response envelope for every vendor adapter."""

from __future__ import annotations

import pytest

from devagent_providers.base.models import ProviderKind
from devagent_providers.tests.utils import STREAM_CASES, make_provider


@pytest.mark.parametrize("kind", list(ProviderKind), ids=lambda k: k.value)
def test_generate_extracts_envelope_text(vendor, kind):
    vendor.respond_json(STREAM_CASES[kind]["envelope"])
    provider = make_provider(kind)
    assert provider.generate_response("hi") == "Hello"
    assert len(vendor.requests) == 1
    assert vendor.last.method == "POST"
    assert vendor.last.headers["content-type"] == "application/json"


def test_ollama_request(vendor):
    vendor.respond_json({"response": "ok"})
    make_provider(ProviderKind.OLLAMA).generate_response("say hi")
    assert str(vendor.last.url) == "http://localhost:11434/api/generate"
    assert vendor.last_json() == {"model": "codellama", "prompt": "say hi", "stream": False}
    assert "authorization" not in vendor.last.headers


def test_anthropic_request(vendor):
    vendor.respond_json({"content": [{"text": "ok"}]})
    make_provider(ProviderKind.ANTHROPIC, api_key="sk-ant").generate_response("say hi")
    req = vendor.last
    assert str(req.url) == "https://api.anthropic.com/v1/messages"
    assert req.headers["x-api-key"] == "sk-ant"
    assert req.headers["anthropic-version"] == "2023-06-01"
    assert vendor.last_json() == {
        "model": "claude-3-opus-20240229",
        "messages": [{"role": "user", "content": "say hi"}],
        "max_tokens": 1000,
    }


def test_cohere_request(vendor):
    vendor.respond_json({"generations": [{"text": "ok"}]})
    make_provider(ProviderKind.COHERE, api_key="co").generate_response("say hi")
    req = vendor.last
    assert str(req.url) == "https://api.cohere.ai/v1/generate"
    assert req.headers["authorization"] == "Bearer co"
    assert req.headers["cohere-version"] == "2022-12-06"
    assert vendor.last_json() == {
        "model": "command",
        "prompt": "say hi",
        "max_tokens": 1000,
        "temperature": 0.7,
        "k": 0,
        "stop_sequences": [],
        "return_likelihoods": "NONE",
    }


def test_gemini_request_puts_model_in_path_and_key_in_query(vendor):
    vendor.respond_json({"candidates": [{"content": {"parts": [{"text": "ok"}]}}]})
    make_provider(ProviderKind.GEMINI, api_key="g-key").generate_response("say hi")
    req = vendor.last
    assert req.url.path == "/v1beta/models/gemini-pro:generateContent"
    assert req.url.params["key"] == "g-key"
    assert "authorization" not in req.headers
    body = vendor.last_json()
    assert body["contents"] == [{"parts": [{"text": "say hi"}]}]
    assert body["generationConfig"] == {
        "temperature": 0.7,
        "topK": 40,
        "topP": 0.95,
        "maxOutputTokens": 1000,
    }


def test_huggingface_request(vendor):
    vendor.respond_json([{"generated_text": "ok"}])
    make_provider(ProviderKind.HUGGINGFACE, api_key="hf").generate_response("say hi")
    req = vendor.last
    assert str(req.url) == "https://api-inference.huggingface.co/models/bigcode/starcoder"
    assert req.headers["authorization"] == "Bearer hf"
    assert vendor.last_json() == {
        "inputs": "say hi",
        "parameters": {"max_new_tokens": 250, "temperature": 0.7, "top_p": 0.95, "do_sample": True},
    }


@pytest.mark.parametrize(
    "kind,url,model",
    [
        (ProviderKind.GROQ, "https://api.groq.com/openai/v1/chat/completions", "mixtral-8x7b-32768"),
        (ProviderKind.MISTRAL, "https://api.mistral.ai/v1/chat/completions", "mistral-medium"),
        (ProviderKind.OPENAI, "https://api.openai.com/v1/chat/completions", "gpt-3.5-turbo"),
    ],
    ids=["groq", "mistral", "openai"],
)
def test_openai_style_request(vendor, kind, url, model):
    vendor.respond_json({"choices": [{"message": {"content": "ok"}}]})
    make_provider(kind, api_key="sk").generate_response("say hi")
    req = vendor.last
    assert str(req.url) == url
    assert req.headers["authorization"] == "Bearer sk"
    assert vendor.last_json() == {
        "model": model,
        "messages": [{"role": "user", "content": "say hi"}],
        "max_tokens": 1000,
        "temperature": 0.7,
    }


def test_configured_url_and_model_are_used(vendor, store):
    store.update("ollama", "api_url", "http://gpu-box:11434/api/generate")
    store.update("ollama", "model", "llama3")
    vendor.respond_json({"response": "ok"})
    make_provider(ProviderKind.OLLAMA, store=store).generate_response("x")
    assert str(vendor.last.url) == "http://gpu-box:11434/api/generate"
    assert vendor.last_json()["model"] == "llama3"


def test_empty_completion_is_returned_as_is(vendor):
    vendor.respond_json({"choices": [{"message": {"content": ""}}]})
    assert make_provider(ProviderKind.OPENAI).generate_response("x") == ""
