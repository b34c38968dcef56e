"""
Tests for the command line entry point.

uvicorn and the DynamoDB repository are patched; no server is started.
"""

from unittest.mock import MagicMock, patch

import pytest

from dynamo_users import cli
from dynamo_users.core.config import settings
from dynamo_users.domain.users.errors import UserStoreError


class TestParser:
    """Tests for argument parsing."""

    def test_serve_defaults_come_from_settings(self) -> None:
        args = cli.build_parser().parse_args(["serve"])

        assert args.func is cli.cmd_serve
        assert args.host == settings.host
        assert args.port == settings.port
        assert args.grace == settings.shutdown_grace_seconds

    def test_serve_overrides(self) -> None:
        args = cli.build_parser().parse_args(["serve", "--port", "9000", "--grace", "3"])
        assert args.port == 9000
        assert args.grace == 3

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestServe:
    """Tests for the serve command."""

    def test_runs_uvicorn_with_graceful_shutdown(self) -> None:
        with patch("uvicorn.run") as run:
            cli.main(["serve", "--port", "9001", "--grace", "7"])

        run.assert_called_once()
        assert run.call_args.args == ("dynamo_users.main:app",)
        assert run.call_args.kwargs["port"] == 9001
        assert run.call_args.kwargs["timeout_graceful_shutdown"] == 7


class TestInitTable:
    """Tests for the init-table command."""

    def test_ensures_schema(self) -> None:
        repository = MagicMock()
        with patch("dynamo_users.main.build_user_repository", return_value=repository):
            cli.main(["init-table"])

        repository.ensure_schema.assert_called_once_with()

    def test_failure_exits_non_zero(self) -> None:
        repository = MagicMock()
        repository.ensure_schema.side_effect = UserStoreError("create_table", "denied")
        with patch("dynamo_users.main.build_user_repository", return_value=repository):
            with pytest.raises(SystemExit) as excinfo:
                cli.main(["init-table"])

        assert excinfo.value.code == 1

