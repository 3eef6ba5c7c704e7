"""Tests for the command-line entry point"""

import json

import pytest

from noclist import main as main_module
from noclist.client import NocListClient
from noclist.exceptions import ConfigError

from .conftest import FakeBadsecServer, make_response


def use_server(monkeypatch, server):
    """Route the CLI's client through a fake server"""
    monkeypatch.setattr(
        main_module,
        "NocListClient",
        lambda config: NocListClient(config, transport=server),
    )


def test_prints_json_list(clean_env, monkeypatch, capsys):
    server = FakeBadsecServer()
    use_server(monkeypatch, server)

    main_module.main()

    captured = capsys.readouterr()
    assert json.loads(captured.out) == ["4", "5", "6"]
    assert "Fetching NOC list" in captured.err


def test_empty_list_prints_empty_array(clean_env, monkeypatch, capsys):
    use_server(monkeypatch, FakeBadsecServer(users_body=""))

    main_module.main()

    assert json.loads(capsys.readouterr().out) == []


def test_fetch_failure_exits_nonzero(clean_env, monkeypatch, capsys):
    server = FakeBadsecServer(
        users_responses=[make_response(500, "Internal Server Error")] * 3
    )
    use_server(monkeypatch, server)

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Failed to fetch NOC list" in captured.err


def test_client_error_exits_nonzero(clean_env, monkeypatch, capsys):
    use_server(monkeypatch, FakeBadsecServer(token="stale"))

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    assert "403" in capsys.readouterr().err


def test_invalid_config_exits_nonzero(clean_env, monkeypatch, capsys):
    monkeypatch.setenv("NOCLIST_MAX_ATTEMPTS", "0")

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    assert capsys.readouterr().out == ""


def test_load_config_wraps_validation_error(clean_env, monkeypatch):
    monkeypatch.setenv("NOCLIST_LOG_LEVEL", "LOUD")

    with pytest.raises(ConfigError) as exc_info:
        main_module.load_config()

    assert any("log_level" in err for err in exc_info.value.errors)
