"""
Logging configuration.
"""
import logging
import sys

_configured = False


def setup_logging(level: str = "INFO"):
    """
    Setup application logging.
    """
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # Cohere's HTTP client logs full request lines at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.
    """
    return logging.getLogger(name)
