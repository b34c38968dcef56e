"""
Tests for the logging setup.
"""

import logging

import pytest

from dynamo_users.shared.logging import QUIET_LOGGERS, configure_logging, resolve_level


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestResolveLevel:
    """Tests for level name resolution."""

    @pytest.mark.parametrize(
        "name, expected",
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), (" error ", logging.ERROR)],
    )
    def test_known_names(self, name: str, expected: int) -> None:
        assert resolve_level(name) == expected

    def test_unknown_name_falls_back_to_info(self) -> None:
        assert resolve_level("chatty") == logging.INFO


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_root_level(self, restore_root_level) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_sdk_loggers_stay_quiet(self, restore_root_level) -> None:
        configure_logging("DEBUG")
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
        assert not logging.getLogger("botocore").isEnabledFor(logging.INFO)
