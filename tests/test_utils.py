"""
Tests for logging utilities.
"""

import sys
import os
import logging

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import pytest

from lpc_frontend import analyze_frame, LPCConfig
from lpc_frontend.utils import setup_logging, get_logger, log_config, log_analysis


@pytest.fixture
def package_logger():
    logger = logging.getLogger('lpc_frontend')
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.setLevel(level)
    logger.handlers = handlers


class TestLogging:

    def test_file_handler_receives_module_debug(self, tmp_path, package_logger):
        log_file = tmp_path / 'logs' / 'lpc.log'
        setup_logging(level=logging.DEBUG, log_file=str(log_file))

        # Module loggers propagate into the package logger's handlers
        analyze_frame(np.zeros(240), 10)
        for handler in package_logger.handlers:
            handler.flush()

        text = log_file.read_text()
        assert "| DEBUG    | lpc_frontend.analysis |" in text
        assert "below EPS" in text

    def test_no_duplicate_handlers(self, package_logger):
        setup_logging()
        logger = setup_logging()
        assert logger is package_logger
        assert len(logger.handlers) == 1

    def test_get_logger_names(self):
        assert get_logger().name == 'lpc_frontend'
        assert get_logger('analysis') is logging.getLogger('lpc_frontend.analysis')

    def test_log_config(self, caplog):
        caplog.set_level(logging.INFO, logger='lpc_frontend.test')
        log_config(get_logger('test'), LPCConfig().to_dict())
        assert "order: 10" in caplog.text
        assert "split_dims: [3, 3, 4]" in caplog.text

    def test_log_analysis_only_at_debug(self, caplog):
        logger = get_logger('test_analysis')
        result = analyze_frame(np.zeros(240), 4)

        caplog.set_level(logging.INFO, logger=logger.name)
        caplog.clear()
        log_analysis(logger, result)
        assert caplog.text == ""

        caplog.set_level(logging.DEBUG, logger=logger.name)
        log_analysis(logger, result)
        assert "degenerate = True" in caplog.text
