# tests/test_core/test_logging.py
"""日志配置测试"""

import logging
from unittest.mock import patch

from src.core.logging import setup_logging, logger


class TestSetupLogging:
    """setup_logging 函数测试"""

    def test_setup_logging_creates_single_handler(self):
        """测试重复调用不会叠加 handler"""
        setup_logging()
        setup_logging()

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1

    @patch('src.core.logging.settings')
    def test_setup_logging_debug_level(self, mock_settings):
        """测试 DEBUG 日志级别"""
        mock_settings.LOG_LEVEL = "DEBUG"
        mock_settings.LOG_JSON_FORMAT = False

        setup_logging()

        assert logging.getLogger().level == logging.DEBUG

    @patch('src.core.logging.settings')
    def test_setup_logging_json_format(self, mock_settings):
        """测试 JSON 格式日志"""
        mock_settings.LOG_LEVEL = "INFO"
        mock_settings.LOG_JSON_FORMAT = True

        setup_logging()

        handler = logging.getLogger().handlers[0]
        assert "timestamp" in handler.formatter._fmt

    @patch('src.core.logging.settings')
    def test_setup_logging_standard_format(self, mock_settings):
        """测试标准格式日志"""
        mock_settings.LOG_LEVEL = "INFO"
        mock_settings.LOG_JSON_FORMAT = False

        setup_logging()

        handler = logging.getLogger().handlers[0]
        assert "levelname" in handler.formatter._fmt

    def test_http_client_loggers_quieted(self):
        setup_logging()
        assert logging.getLogger("urllib3").level == logging.WARNING
        assert logging.getLogger("requests").level == logging.WARNING

    @patch('src.core.logging.settings')
    def test_explicit_level_overrides_settings(self, mock_settings):
        """测试显式传入的级别优先于配置"""
        mock_settings.LOG_LEVEL = "INFO"
        mock_settings.LOG_JSON_FORMAT = False

        setup_logging("warning")

        assert logging.getLogger().level == logging.WARNING


class TestLogger:
    """logger 实例测试"""

    def test_logger_name(self):
        assert logger.name == "essentialta"

    def test_logger_is_logging_logger(self):
        assert isinstance(logger, logging.Logger)
