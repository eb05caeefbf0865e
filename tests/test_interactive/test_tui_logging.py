"""Tests for TUI file logging setup."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from lazykeys.tui.tui_logging import setup_tui_logging
from lazykeys.utils.config import LoggingConfig


def test_logs_to_configured_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LAZYKEYS_TUI_DISABLE_LOG_RECONFIG", raising=False)
    config = LoggingConfig(level="debug", file=str(tmp_path / "logs" / "tui.log"), retention=2)

    with patch("lazykeys.tui.tui_logging.logger") as mock_logger:
        target = setup_tui_logging(config)

    assert target == tmp_path / "logs" / "tui.log"
    assert target.parent.is_dir()
    mock_logger.remove.assert_called_once_with()
    mock_logger.add.assert_called_once_with(
        str(target), level="DEBUG", rotation="5 MB", retention=2, compression="zip"
    )


def test_reconfiguration_can_be_disabled(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAZYKEYS_TUI_DISABLE_LOG_RECONFIG", "1")

    with patch("lazykeys.tui.tui_logging.logger") as mock_logger:
        target = setup_tui_logging(LoggingConfig(file=str(tmp_path / "tui.log")))

    assert target is None
    mock_logger.remove.assert_not_called()
    assert not (tmp_path / "tui.log").exists()


def test_level_is_normalized() -> None:
    assert LoggingConfig(level=" warning ").level == "WARNING"


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValidationError, match="Unknown log level"):
        LoggingConfig(level="loud")
