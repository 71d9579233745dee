"""
Logging setup for the LPC front end.

Library modules log through logging.getLogger(__name__), which places them
under the 'lpc_frontend' logger. setup_logging() attaches handlers to that
package logger only, so applications embedding the front end keep control
of the root logger.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

import numpy as np

LOGGER_NAME = 'lpc_frontend'
LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console_level: int = logging.WARNING
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Level of the package logger and of the file handler
        log_file: Optional log file; parent directories are created
        console_level: Level of the stdout handler (scripts print results
            with rich, so the console only shows warnings by default)

    Returns:
        The 'lpc_frontend' logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Package logger, or the child logger 'lpc_frontend.<name>'."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def log_config(logger: logging.Logger, config: Dict) -> None:
    """Log a configuration dict, one 'key: value' line per setting."""
    logger.info("LPC front end configuration")
    for key, value in config.items():
        logger.info(f"  {key}: {value}")


def log_analysis(logger: logging.Logger, result) -> None:
    """Log the coefficients of an LPCAnalysis at DEBUG level."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    with np.printoptions(precision=5, suppress=True):
        logger.debug(f"r[0] = {result.autocorr[0]:.6g} | degenerate = {result.degenerate}")
        logger.debug(f"a    = {result.lpc}")
        logger.debug(f"a_bw = {result.lpc_expanded}")
        logger.debug(f"k    = {result.reflection}")
