import logging

from .config import log_config

logging.basicConfig(
    level=getattr(logging, log_config.LEVEL.upper(), logging.INFO),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)

def get_logger(name: str = 'rankboard') -> logging.Logger:
    """Get a logger for the given module name"""
    return logging.getLogger(name)
