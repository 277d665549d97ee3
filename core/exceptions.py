"""
Custom exceptions for Auction Intel.

This module defines application-specific exceptions that provide
clear error messages and context for different types of failures.
"""

from typing import Optional, Any


class AuctionIntelError(Exception):
    """Base exception for all Auction Intel errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class ConfigurationError(AuctionIntelError):
    """Raised when there are issues with configuration loading or validation."""

    def __init__(self, message: str, config_file: Optional[str] = None, field: Optional[str] = None):
        context = {}
        if config_file:
            context['config_file'] = config_file
        if field:
            context['field'] = field
        super().__init__(message, context)


class DataSourceError(AuctionIntelError):
    """Raised when county or auction data cannot be loaded or parsed."""

    def __init__(self, message: str, source: Optional[str] = None, status_code: Optional[int] = None):
        context = {}
        if source:
            context['source'] = source
        if status_code is not None:
            context['status_code'] = status_code
        super().__init__(message, context)


class ValidationError(AuctionIntelError):
    """Raised when record validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, value: Optional[Any] = None):
        context = {}
        if field:
            context['field'] = field
        if value is not None:
            context['value'] = str(value)
        super().__init__(message, context)


class SecurityError(AuctionIntelError):
    """Raised when a filename cannot be made safe."""

    def __init__(self, message: str, security_check: Optional[str] = None, input_value: Optional[str] = None):
        context = {}
        if security_check:
            context['security_check'] = security_check
        if input_value:
            context['input_value'] = input_value
        super().__init__(message, context)
