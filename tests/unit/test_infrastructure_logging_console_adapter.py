"""Unit tests for ConsoleAdapter (structured console logging).

Architecture:
- structlog patched at the module boundary
- Tests the LoggerProtocol call shapes
"""

from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

_STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def mock_logger():
    with patch(_STRUCTLOG) as mock_structlog:
        logger = MagicMock()
        mock_structlog.get_logger.return_value = logger
        yield logger


@pytest.mark.unit
class TestConsoleAdapter:
    def test_info_passes_context(self, mock_logger):
        ConsoleAdapter().info("account_created", account_id="123")

        mock_logger.info.assert_called_once_with("account_created", account_id="123")

    def test_warning_passes_context(self, mock_logger):
        ConsoleAdapter().warning("balance_update_rejected", delta="-50")

        mock_logger.warning.assert_called_once_with(
            "balance_update_rejected", delta="-50"
        )

    def test_error_expands_exception(self, mock_logger):
        ConsoleAdapter().error("unhandled_exception", error=RuntimeError("boom"))

        mock_logger.error.assert_called_once_with(
            "unhandled_exception",
            error_type="RuntimeError",
            error_message="boom",
        )

    def test_error_without_exception(self, mock_logger):
        ConsoleAdapter().error("job_failed", job="price")

        mock_logger.error.assert_called_once_with("job_failed", job="price")

    def test_bind_returns_new_adapter(self, mock_logger):
        bound_logger = MagicMock()
        mock_logger.bind.return_value = bound_logger

        bound = ConsoleAdapter().bind(user_id="u1")
        bound.debug("hello")

        mock_logger.bind.assert_called_once_with(user_id="u1")
        bound_logger.debug.assert_called_once_with("hello")

    def test_json_renderer_selected(self):
        with patch(_STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True, level="debug")

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert mock_structlog.processors.JSONRenderer.return_value in processors
            mock_structlog.dev.ConsoleRenderer.assert_not_called()
