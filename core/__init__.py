"""
Core infrastructure module for Auction Intel.

This module provides the foundational components including configuration management,
logging setup, and custom exceptions.
"""

from .config import ApiConfig, Config, DataConfig, ExportConfig, LoggingConfig, SearchConfig
from .exceptions import (
    AuctionIntelError,
    ConfigurationError,
    DataSourceError,
    SecurityError,
    ValidationError,
)
from .logging_config import setup_logging, setup_logging_from_config

__all__ = [
    # Configuration
    'ApiConfig',
    'Config',
    'DataConfig',
    'ExportConfig',
    'LoggingConfig',
    'SearchConfig',

    # Exceptions
    'AuctionIntelError',
    'ConfigurationError',
    'DataSourceError',
    'SecurityError',
    'ValidationError',

    # Logging
    'setup_logging',
    'setup_logging_from_config',
]

# Version info
__version__ = "1.0.0"
