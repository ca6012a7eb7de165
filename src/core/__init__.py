"""
Core module for the Console Game Hub

Contains configuration management, logging setup and the console
presentation layer shared by all games.
"""

from .config import ConfigurationManager, ConfigurationError
from .console import Console
from .logging import initialize_logging, get_logger, get_structured_logger

__all__ = [
    'ConfigurationManager',
    'ConfigurationError',
    'Console',
    'initialize_logging',
    'get_logger',
    'get_structured_logger'
]
