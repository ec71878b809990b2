"""Logging configuration for URL shortener."""

import logging
import sys
from typing import Optional


ENV_LOCAL = "local"
ENV_QA = "qa"
ENV_PROD = "prod"

# env -> (level, json_format)
ENV_LOGGING = {
    ENV_LOCAL: (logging.DEBUG, False),
    ENV_QA: (logging.DEBUG, True),
    ENV_PROD: (logging.INFO, True),
}


def setup_logging(
    env: str = ENV_LOCAL,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Setup logging configuration for a deployment environment.

    local logs plain text at DEBUG, qa logs JSON at DEBUG and
    prod logs JSON at INFO.

    Args:
        env: Deployment environment (local, qa, prod)
        log_file: Optional log file path

    Returns:
        Configured logger
    """
    if env not in ENV_LOGGING:
        raise ValueError(f"Unknown environment: {env}")
    level, json_format = ENV_LOGGING[env]

    # Create logger
    logger = logging.getLogger("shortlink")
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # Create formatter
    if json_format:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"logger": "%(name)s", "message": "%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "shortlink") -> logging.Logger:
    """Get logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
