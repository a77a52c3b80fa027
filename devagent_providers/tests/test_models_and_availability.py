from __future__ import annotations

import httpx
import pytest

from devagent_providers.base.errors import ErrorCode, ProviderError
from devagent_providers.base.models import ProviderKind
from devagent_providers.config.defaults import HUGGINGFACE_CURATED_MODELS
from devagent_providers.tests.utils import KEYED_KINDS, make_provider


@pytest.mark.parametrize(
    "kind,payload,url",
    [
        (ProviderKind.OLLAMA, {"models": [{"name": "codellama"}, {"name": "llama3"}]}, "http://localhost:11434/api/tags"),
        (ProviderKind.ANTHROPIC, {"data": [{"id": "codellama"}, {"id": "llama3"}]}, "https://api.anthropic.com/v1/models"),
        (ProviderKind.COHERE, {"models": [{"id": "codellama"}, {"id": "llama3"}]}, "https://api.cohere.ai/v1/models"),
        (ProviderKind.GROQ, {"data": [{"id": "codellama"}, {"id": "llama3"}]}, "https://api.groq.com/openai/v1/models"),
        (ProviderKind.MISTRAL, {"data": [{"id": "codellama"}, {"id": "llama3"}]}, "https://api.mistral.ai/v1/models"),
    ],
    ids=["ollama", "anthropic", "cohere", "groq", "mistral"],
)
def test_model_listing(vendor, kind, payload, url):
    vendor.respond_json(payload)
    assert make_provider(kind).get_available_models() == ["codellama", "llama3"]
    assert vendor.last.method == "GET"
    assert str(vendor.last.url) == url


def test_openai_listing_keeps_chat_models_only(vendor):
    vendor.respond_json(
        {"data": [{"id": "gpt-4o"}, {"id": "whisper-1"}, {"id": "dall-e-3"}, {"id": "text-embedding-3-small"}]}
    )
    assert make_provider(ProviderKind.OPENAI).get_available_models() == ["gpt-4o"]
    assert str(vendor.last.url) == "https://api.openai.com/v1/models"


def test_gemini_model_listing_uses_key_param(vendor):
    vendor.respond_json({"models": [{"name": "models/gemini-pro"}]})
    assert make_provider(ProviderKind.GEMINI, api_key="g").get_available_models() == ["models/gemini-pro"]
    assert vendor.last.url.path == "/v1beta/models"
    assert vendor.last.url.params["key"] == "g"


def test_anthropic_accepts_legacy_listing_shape(vendor):
    vendor.respond_json({"models": [{"name": "claude-2"}]})
    assert make_provider(ProviderKind.ANTHROPIC).get_available_models() == ["claude-2"]


def test_huggingface_lists_curated_models_offline(vendor):
    provider = make_provider(ProviderKind.HUGGINGFACE, api_key=None)
    assert provider.get_available_models() == list(HUGGINGFACE_CURATED_MODELS)
    assert vendor.requests == []


def test_ollama_tags_url_follows_configured_host(vendor):
    vendor.respond_json({"models": []})
    make_provider(ProviderKind.OLLAMA, api_url="http://gpu-box:11434/api/generate").get_available_models()
    assert str(vendor.last.url) == "http://gpu-box:11434/api/tags"


@pytest.mark.parametrize("status", [401, 500])
def test_listing_failure_yields_empty_list(vendor, capsys, status):
    vendor.respond_json({"error": "nope"}, status=status)
    assert make_provider(ProviderKind.OPENAI).get_available_models() == []
    assert '"event": "models.error"' in capsys.readouterr().err


def test_listing_transport_failure_yields_empty_list(vendor):
    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    vendor.handler = refuse
    assert make_provider(ProviderKind.OLLAMA).get_available_models() == []


def test_listing_junk_body_yields_empty_list(vendor):
    vendor.handler = lambda request: httpx.Response(200, text="not json")
    assert make_provider(ProviderKind.GROQ).get_available_models() == []


@pytest.mark.parametrize("kind", [k for k in KEYED_KINDS if k is not ProviderKind.HUGGINGFACE], ids=lambda k: k.value)
def test_listing_without_key_raises(vendor, kind):
    with pytest.raises(ProviderError) as ei:
        make_provider(kind, api_key=None).get_available_models()
    assert ei.value.code is ErrorCode.MISSING_API_KEY
    assert vendor.requests == []


@pytest.mark.parametrize("kind", list(ProviderKind), ids=lambda k: k.value)
def test_available_on_2xx(vendor, kind):
    vendor.respond_json({"data": [], "models": []})
    assert make_provider(kind).is_available() is True
    assert vendor.last.method == "GET"


def test_huggingface_availability_probes_model_url(vendor):
    vendor.respond_json({})
    make_provider(ProviderKind.HUGGINGFACE).is_available()
    assert str(vendor.last.url) == "https://api-inference.huggingface.co/models/bigcode/starcoder"


def test_unavailable_never_raises(vendor):
    vendor.respond_json({}, status=503)
    assert make_provider(ProviderKind.COHERE).is_available() is False

    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    vendor.handler = refuse
    assert make_provider(ProviderKind.OLLAMA).is_available() is False


@pytest.mark.parametrize("kind", KEYED_KINDS, ids=lambda k: k.value)
def test_unavailable_without_key_and_no_request(vendor, kind):
    assert make_provider(kind, api_key=None).is_available() is False
    assert vendor.requests == []
