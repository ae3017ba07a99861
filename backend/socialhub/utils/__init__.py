"""Utility modules for the application."""
from socialhub.utils.logger import JSONFormatter, setup_logging

__all__ = [
    'JSONFormatter',
    'setup_logging'
]
