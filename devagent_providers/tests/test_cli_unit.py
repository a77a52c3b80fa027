"""End-to-end runs of the debugging CLI against a faked vendor."""

from __future__ import annotations

import json

import httpx
import pytest

from devagent_providers.base.logging import configure_logger
from devagent_providers.service.cli import main
from devagent_providers.service.cli.cli_parser import build_parser
from devagent_providers.service.cli.settings import default_settings_path


@pytest.fixture()
def settings(tmp_path):
    return str(tmp_path / "cli-settings.json")


def _run(settings, *argv):
    return main(["--settings", settings, *argv])


def test_parser_requires_a_subcommand():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_default_settings_path_honours_env(tmp_path, monkeypatch):
    monkeypatch.setenv("DEVAGENT_SETTINGS_FILE", str(tmp_path / "x.json"))
    assert default_settings_path() == tmp_path / "x.json"
    monkeypatch.delenv("DEVAGENT_SETTINGS_FILE")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
    assert default_settings_path() == tmp_path / "cfg" / "devagent_providers" / "settings.json"


def test_providers_marks_active(settings, capsys):
    assert _run(settings, "providers") == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 8
    assert lines[0].startswith("* ollama")
    assert lines[0].split()[-1] == "codellama"


def test_use_persists_selection(settings, capsys):
    assert _run(settings, "use", "Groq") == 0
    assert json.loads(capsys.readouterr().out) == {"active_provider": "groq"}
    with open(settings, encoding="utf-8") as fh:
        assert json.load(fh)[""]["active_provider"] == "groq"
    _run(settings, "providers")
    assert any(line.startswith("* groq") for line in capsys.readouterr().out.splitlines())


def test_use_unknown_falls_back(settings, capsys):
    assert _run(settings, "use", "skynet") == 2
    captured = capsys.readouterr()
    assert json.loads(captured.out) == {"active_provider": "ollama"}
    assert "Unknown AI provider: skynet" in captured.err


def test_query_prints_answer(vendor, settings, capsys):
    vendor.respond_json({"response": "pong"})
    assert _run(settings, "query", "ping") == 0
    assert capsys.readouterr().out == "pong\n"
    assert json.loads(vendor.last.content)["prompt"] == "ping"


def test_query_streams_deltas(vendor, settings, capsys):
    vendor.respond_stream(b'{"response":"po"}\n{"response":"ng"}\n')
    assert _run(settings, "query", "ping", "--stream") == 0
    assert capsys.readouterr().out == "pong\n"


def test_query_missing_key_exits_2(vendor, settings, capsys):
    assert _run(settings, "query", "hi", "--provider", "gemini") == 2
    err_lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if "set_one_of_env" in line]
    assert err_lines[0]["code"] == "missing_api_key"
    assert err_lines[0]["set_one_of_env"] == ["GEMINI_API_KEY", "GOOGLE_API_KEY"]
    assert vendor.requests == []


def test_query_http_error_exits_1(vendor, settings, capsys):
    vendor.respond_json({}, status=500)
    assert _run(settings, "query", "hi") == 1
    assert '"status": 500' in capsys.readouterr().err


def test_unknown_provider_flag(settings, capsys):
    assert _run(settings, "models", "--provider", "nope") == 2
    assert "unknown provider 'nope'" in capsys.readouterr().err


def test_set_key_and_model_then_query(vendor, settings, capsys):
    assert _run(settings, "set-key", "sk-cli", "--provider", "openai") == 0
    assert _run(settings, "set-model", "gpt-4o", "--provider", "openai") == 0
    capsys.readouterr()
    vendor.respond_json({"choices": [{"message": {"content": "hi"}}]})
    assert _run(settings, "query", "hello", "--provider", "openai") == 0
    assert vendor.last.headers["authorization"] == "Bearer sk-cli"
    assert json.loads(vendor.last.content)["model"] == "gpt-4o"


def test_set_key_on_ollama_is_unsupported(settings, capsys):
    assert _run(settings, "set-key", "x") == 2
    assert '"code": "unsupported"' in capsys.readouterr().err


def test_models_and_check(vendor, settings, capsys):
    vendor.respond_json({"models": [{"name": "codellama"}]})
    assert _run(settings, "models") == 0
    assert capsys.readouterr().out == "codellama\n"
    assert _run(settings, "check") == 0
    assert json.loads(capsys.readouterr().out)["available"] is True

    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    vendor.handler = refuse
    assert _run(settings, "check") == 1
    assert json.loads(capsys.readouterr().out)["available"] is False


def test_log_file_option(vendor, settings, tmp_path, capsys):
    log_path = tmp_path / "cli.log"
    vendor.respond_json({"response": "pong"})
    try:
        assert _run(settings, "--log-level", "INFO", "--log-file", str(log_path), "query", "ping") == 0
    finally:
        configure_logger(file_path=None)
    assert "generate.end" in log_path.read_text(encoding="utf-8")
