# tests/test_app.py
"""
Application Entry Point Tests - Startup Wiring and Fatal Exits

Runs main() with the listener and logging setup patched out, in an empty
working directory.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- ratetable.app (main)
- unittest.mock (patch serve and setup_logging)
"""
import json  # Build config file contents
import logging  # Log level for caplog

import pytest  # Testing framework for writing and running tests

from unittest.mock import patch  # Patching for testing without real sockets

from fastapi.testclient import TestClient  # Exercise the app handed to serve

from ratetable.app import main
from ratetable.domain.errors import ListenerError


@pytest.fixture
def patched_startup():
    with patch("ratetable.app.setup_logging") as mock_logging, patch("ratetable.app.serve") as mock_serve:
        yield mock_serve, mock_logging


class TestMain:
    def test_defaults(self, isolated_env, patched_startup, caplog):
        caplog.set_level(logging.INFO)
        mock_serve, mock_logging = patched_startup

        main()

        mock_logging.assert_called_once()
        mock_serve.assert_called_once()
        app = mock_serve.call_args.args[0]
        assert mock_serve.call_args.kwargs == {"host": "0.0.0.0", "port": 8080}
        assert "Server running on port 8080" in caplog.text

        response = TestClient(app).get("/rate?from=CARAMEL&to=CHOKOLATE")
        assert response.json() == {"from": "CARAMEL", "to": "CHOKOLATE", "rate": 0.85}

    def test_config_file_applied(self, isolated_env, patched_startup, caplog):
        caplog.set_level(logging.INFO)
        mock_serve, _ = patched_startup
        (isolated_env / "application.json").write_text(
            json.dumps({"rates": {"USD": {"EUR": 0.9}}, "port": "9000"})
        )

        main()

        assert mock_serve.call_args.kwargs["port"] == 9000
        assert "Applied 'application.json' config" in caplog.text
        client = TestClient(mock_serve.call_args.args[0])
        assert client.get("/rate?from=USD&to=EUR").status_code == 200
        assert client.get("/rate?from=CARAMEL&to=CHOKOLATE").status_code == 404

    def test_env_port_override(self, isolated_env, patched_startup, monkeypatch):
        mock_serve, _ = patched_startup
        monkeypatch.setenv("PORT", "7000")
        (isolated_env / "application.json").write_text(json.dumps({"port": "9000"}))

        main()

        assert mock_serve.call_args.kwargs["port"] == 7000

    def test_host_setting(self, isolated_env, patched_startup, monkeypatch):
        mock_serve, _ = patched_startup
        monkeypatch.setenv("HOST", "127.0.0.1")

        main()

        assert mock_serve.call_args.kwargs["host"] == "127.0.0.1"

    def test_malformed_config_exits(self, isolated_env, patched_startup):
        mock_serve, _ = patched_startup
        (isolated_env / "application.json").write_text("{broken")

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        mock_serve.assert_not_called()

    def test_non_finite_rate_exits(self, isolated_env, patched_startup):
        mock_serve, _ = patched_startup
        (isolated_env / "application.json").write_text('{"rates": {"USD": {"EUR": NaN}}}')

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        mock_serve.assert_not_called()

    def test_empty_env_port_exits(self, isolated_env, patched_startup, monkeypatch):
        mock_serve, _ = patched_startup
        monkeypatch.setenv("PORT", "")

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        mock_serve.assert_not_called()

    def test_bind_failure_exits(self, isolated_env, patched_startup, caplog):
        mock_serve, _ = patched_startup
        mock_serve.side_effect = ListenerError("Cannot listen on 0.0.0.0:8080")

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "Cannot listen on 0.0.0.0:8080" in caplog.text

    def test_invalid_settings_exit(self, isolated_env, patched_startup, monkeypatch):
        mock_serve, _ = patched_startup
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        mock_serve.assert_not_called()
