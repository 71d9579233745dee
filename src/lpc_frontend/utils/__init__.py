"""
Utility modules.
"""

from .logging import setup_logging, get_logger, log_config, log_analysis

__all__ = ['setup_logging', 'get_logger', 'log_config', 'log_analysis']
