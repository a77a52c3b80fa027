"""devagent_providers.config.defaults
==================================

Central place for the stable default values used by the provider adapters:
endpoint URLs, default models, vendor API version headers, and the generation
parameters each vendor request carries. These defaults can be overridden via
environment variables, an external config file, or the host settings store.

This module intentionally imports nothing from the rest of the package.
"""

from __future__ import annotations

# ---- Global ----
# Provider selected when the settings carry no (or an unknown) selector.
DEFAULT_PROVIDER = "ollama"
# Settings section holding the global selector; keys are below.
GLOBAL_SETTINGS_SECTION = ""
ACTIVE_PROVIDER_KEY = "active_provider"
# Per-provider settings keys.
SETTING_API_URL = "api_url"
SETTING_API_KEY = "api_key"  # pragma: allowlist secret - key name, not a secret
SETTING_MODEL = "model"

# ---- Shared generation parameters ----
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7

# ---- Ollama (local daemon, no credentials) ----
OLLAMA_DEFAULT_BASE_URL = "http://localhost:11434/api/generate"
OLLAMA_DEFAULT_MODEL = "codellama"

# ---- Anthropic ----
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_DEFAULT_MODEL = "claude-3-opus-20240229"
ANTHROPIC_MODELS_URL = "https://api.anthropic.com/v1/models"
ANTHROPIC_API_VERSION = "2023-06-01"

# ---- Cohere ----
COHERE_DEFAULT_BASE_URL = "https://api.cohere.ai/v1/generate"
COHERE_DEFAULT_MODEL = "command"
COHERE_MODELS_URL = "https://api.cohere.ai/v1/models"
COHERE_API_VERSION = "2022-12-06"

# ---- Gemini (model appended to the URL, key passed as query param) ----
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
GEMINI_DEFAULT_MODEL = "gemini-pro"
GEMINI_TOP_K = 40
GEMINI_TOP_P = 0.95

# ---- OpenAI-compatible chat completions ----
GROQ_DEFAULT_BASE_URL = "https://api.groq.com/openai/v1/chat/completions"
GROQ_DEFAULT_MODEL = "mixtral-8x7b-32768"
GROQ_MODELS_URL = "https://api.groq.com/openai/v1/models"

MISTRAL_DEFAULT_BASE_URL = "https://api.mistral.ai/v1/chat/completions"
MISTRAL_DEFAULT_MODEL = "mistral-medium"
MISTRAL_MODELS_URL = "https://api.mistral.ai/v1/models"

OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_DEFAULT_MODEL = "gpt-3.5-turbo"
OPENAI_MODELS_URL = "https://api.openai.com/v1/models"
# Chat-capable ids in the model catalogue.
OPENAI_CHAT_MODEL_PREFIX = "gpt-"

# ---- Hugging Face Inference API (model appended to the URL) ----
HUGGINGFACE_DEFAULT_BASE_URL = "https://api-inference.huggingface.co/models"
HUGGINGFACE_DEFAULT_MODEL = "bigcode/starcoder"
HUGGINGFACE_MAX_NEW_TOKENS = 250
HUGGINGFACE_TOP_P = 0.95
# The hub hosts far too many models to list; offer a curated subset.
HUGGINGFACE_CURATED_MODELS = (
    "bigcode/starcoder",
    "facebook/bart-large-cnn",
    "gpt2",
    "microsoft/DialoGPT-large",
    "distilbert-base-uncased-finetuned-sst-2-english",
)


__all__ = [
    "DEFAULT_PROVIDER",
    "GLOBAL_SETTINGS_SECTION",
    "ACTIVE_PROVIDER_KEY",
    "SETTING_API_URL",
    "SETTING_API_KEY",
    "SETTING_MODEL",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "OLLAMA_DEFAULT_BASE_URL",
    "OLLAMA_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_MODELS_URL",
    "ANTHROPIC_API_VERSION",
    "COHERE_DEFAULT_BASE_URL",
    "COHERE_DEFAULT_MODEL",
    "COHERE_MODELS_URL",
    "COHERE_API_VERSION",
    "GEMINI_DEFAULT_BASE_URL",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_TOP_K",
    "GEMINI_TOP_P",
    "GROQ_DEFAULT_BASE_URL",
    "GROQ_DEFAULT_MODEL",
    "GROQ_MODELS_URL",
    "MISTRAL_DEFAULT_BASE_URL",
    "MISTRAL_DEFAULT_MODEL",
    "MISTRAL_MODELS_URL",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_MODELS_URL",
    "OPENAI_CHAT_MODEL_PREFIX",
    "HUGGINGFACE_DEFAULT_BASE_URL",
    "HUGGINGFACE_DEFAULT_MODEL",
    "HUGGINGFACE_MAX_NEW_TOKENS",
    "HUGGINGFACE_TOP_P",
    "HUGGINGFACE_CURATED_MODELS",
]
