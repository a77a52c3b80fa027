from __future__ import annotations

import pytest

from devagent_providers.base.http import close_all_clients, get_httpx_client
from devagent_providers.base.timeouts import TimeoutConfig, get_timeout_config


@pytest.fixture(autouse=True)
def fresh_pool():
    close_all_clients()
    yield
    close_all_clients()


def test_clients_are_pooled_per_purpose():
    a = get_httpx_client("groq")
    assert get_httpx_client("groq") is a
    assert get_httpx_client("openai") is not a


def test_closed_client_is_replaced():
    a = get_httpx_client("groq")
    a.close()
    b = get_httpx_client("groq")
    assert b is not a
    assert not b.is_closed


def test_default_timeouts(monkeypatch):
    for name in (
        "DEVAGENT_TIMEOUT_CONNECT_SECONDS",
        "DEVAGENT_TIMEOUT_READ_SECONDS",
        "DEVAGENT_TIMEOUT_WRITE_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    assert get_timeout_config() == TimeoutConfig()
    timeout = get_httpx_client("ollama").timeout
    assert timeout.connect == 10.0
    assert timeout.read == 120.0


def test_timeouts_from_env(monkeypatch):
    monkeypatch.setenv("DEVAGENT_TIMEOUT_CONNECT_SECONDS", "2.5")
    monkeypatch.setenv("DEVAGENT_TIMEOUT_READ_SECONDS", "0")
    monkeypatch.setenv("DEVAGENT_TIMEOUT_WRITE_SECONDS", "junk")
    cfg = get_timeout_config()
    assert cfg.connect_timeout_seconds == 2.5
    assert cfg.read_timeout_seconds is None
    assert cfg.write_timeout_seconds == 30.0
    assert cfg.to_httpx().read is None
