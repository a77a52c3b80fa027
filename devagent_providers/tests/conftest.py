"""Pytest configuration for the providers test suite.

Every test runs with provider-related environment variables removed, so a
developer's real keys never leak into assertions or network calls. HTTP is
faked with ``httpx.MockTransport``: the ``vendor`` fixture swaps the pooled
client used by the adapters for one routed to a recording handler.
"""

from __future__ import annotations

from typing import Iterator

import httpx
import pytest

from devagent_providers.base import http_provider
from devagent_providers.base import logging as provider_logging
from devagent_providers.base.models import ProviderKind
from devagent_providers.config import reset_config_cache
from devagent_providers.config.env import ENV_ALIASES, ENV_MAP
from devagent_providers.config.settings import InMemorySettingsStore
from devagent_providers.tests.utils import FakeVendor


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Remove provider env vars and config-file pointers for the test."""
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for kind in ProviderKind:
        for suffix in ("MODEL", "API_KEY", "API_URL"):
            names.add(f"{kind.value.upper()}_{suffix}")
    names.update({"DEVAGENT_CONFIG_FILE", "DEVAGENT_PROVIDER", "DEVAGENT_LOG_LEVEL"})
    for name in names:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DEVAGENT_SETTINGS_FILE", str(tmp_path / "settings.json"))
    reset_config_cache()
    provider_logging._level_override = None
    yield
    reset_config_cache()
    provider_logging._level_override = None


@pytest.fixture()
def vendor(monkeypatch: pytest.MonkeyPatch) -> Iterator[FakeVendor]:
    """Route every adapter HTTP call to a recording ``FakeVendor``."""
    fake = FakeVendor()
    client = httpx.Client(transport=httpx.MockTransport(fake))
    monkeypatch.setattr(http_provider, "get_httpx_client", lambda purpose: client)
    yield fake
    client.close()


@pytest.fixture()
def store() -> InMemorySettingsStore:
    return InMemorySettingsStore()
