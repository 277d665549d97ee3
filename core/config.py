"""
Configuration management for Auction Intel.

This module provides a split configuration system that separates concerns
into focused configuration classes, persisted as a TOML file.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import toml

from .exceptions import ConfigurationError


@dataclass
class DataConfig:
    """Configuration for the county data seed."""

    # Optional CSV that replaces the built-in county table at startup
    counties_file: Optional[str] = None

    def validate(self) -> List[str]:
        """Validate the data configuration and return any errors."""
        errors = []

        if self.counties_file is not None and not str(self.counties_file).lower().endswith('.csv'):
            errors.append("counties_file must be a .csv file")

        return errors


@dataclass
class ApiConfig:
    """Configuration for the optional live data backend."""

    enabled: bool = True
    base_url: str = 'http://localhost:3001'
    timeout_seconds: float = 5.0

    def validate(self) -> List[str]:
        """Validate the API configuration and return any errors."""
        errors = []

        if self.enabled and not self.base_url:
            errors.append("base_url cannot be empty when the API is enabled")

        if self.base_url and not self.base_url.startswith(('http://', 'https://')):
            errors.append("base_url must start with http:// or https://")

        if self.timeout_seconds <= 0:
            errors.append("timeout_seconds must be positive")

        return errors


@dataclass
class SearchConfig:
    """Configuration for the county search box."""

    max_results: int = 15
    min_term_length: int = 2

    def validate(self) -> List[str]:
        """Validate the search configuration and return any errors."""
        errors = []

        if self.max_results <= 0:
            errors.append("max_results must be positive")

        if self.min_term_length < 1:
            errors.append("min_term_length must be at least 1")

        return errors


@dataclass
class ExportConfig:
    """Configuration for CSV and report exports."""

    export_dir: str = 'exports'
    report_brand: str = 'Auction Intel Platform'

    def validate(self) -> List[str]:
        """Validate the export configuration and return any errors."""
        errors = []

        if not self.export_dir:
            errors.append("export_dir cannot be empty")

        return errors


@dataclass
class LoggingConfig:
    """Configuration for application logging."""

    level: str = 'INFO'
    log_file: Optional[str] = None
    log_dir: str = 'logs'

    def validate(self) -> List[str]:
        """Validate the logging configuration and return any errors."""
        errors = []

        if self.level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            errors.append(f"Unknown log level: {self.level}")

        return errors


@dataclass
class Config:
    """Main configuration class that combines all configuration sections."""

    config_file_path: str = "config.toml"

    data: DataConfig = field(default_factory=DataConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Load configuration when an instance is created."""
        self.load_config()

    def to_dict(self) -> dict:
        """Serialize the configuration sections to plain dictionaries."""
        data_section = {}
        # TOML has no null, so an unset seed file is simply omitted
        if self.data.counties_file:
            data_section['counties_file'] = self.data.counties_file

        logging_section = {'level': self.log.level, 'log_dir': self.log.log_dir}
        if self.log.log_file:
            logging_section['log_file'] = self.log.log_file

        return {
            'data': data_section,
            'api': {
                'enabled': self.api.enabled,
                'base_url': self.api.base_url,
                'timeout_seconds': self.api.timeout_seconds,
            },
            'search': {
                'max_results': self.search.max_results,
                'min_term_length': self.search.min_term_length,
            },
            'export': {
                'export_dir': self.export.export_dir,
                'report_brand': self.export.report_brand,
            },
            'logging': logging_section,
        }

    def save_config(self) -> None:
        """Save current configuration to TOML file."""
        try:
            with open(self.config_file_path, 'w') as f:
                toml.dump(self.to_dict(), f)
            logging.info(f"Configuration saved to {self.config_file_path}")
        except OSError as e:
            error_msg = f"Error saving configuration: {e}"
            logging.error(error_msg)
            raise ConfigurationError(error_msg, config_file=self.config_file_path)

    def load_config(self) -> None:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file_path) as f:
                config_data = toml.load(f)
        except FileNotFoundError:
            logging.info(f"{self.config_file_path} not found. Creating with default values.")
            self.save_config()
            return
        except toml.TomlDecodeError as e:
            error_msg = f"Error decoding {self.config_file_path}: {e}"
            logging.error(error_msg)
            raise ConfigurationError(error_msg, config_file=self.config_file_path)

        if 'data' in config_data:
            data_config = config_data['data']
            self.data.counties_file = data_config.get('counties_file', self.data.counties_file)

        if 'api' in config_data:
            api_config = config_data['api']
            self.api.enabled = api_config.get('enabled', self.api.enabled)
            self.api.base_url = api_config.get('base_url', self.api.base_url)
            self.api.timeout_seconds = api_config.get('timeout_seconds', self.api.timeout_seconds)

        if 'search' in config_data:
            search_config = config_data['search']
            self.search.max_results = search_config.get('max_results', self.search.max_results)
            self.search.min_term_length = search_config.get('min_term_length', self.search.min_term_length)

        if 'export' in config_data:
            export_config = config_data['export']
            self.export.export_dir = export_config.get('export_dir', self.export.export_dir)
            self.export.report_brand = export_config.get('report_brand', self.export.report_brand)

        if 'logging' in config_data:
            logging_config = config_data['logging']
            self.log.level = logging_config.get('level', self.log.level)
            self.log.log_file = logging_config.get('log_file', self.log.log_file)
            self.log.log_dir = logging_config.get('log_dir', self.log.log_dir)

        errors = self.validate()
        if errors:
            error_msg = f"Invalid configuration in {self.config_file_path}: {'; '.join(errors)}"
            logging.error(error_msg)
            raise ConfigurationError(error_msg, config_file=self.config_file_path)

        logging.info(f"Configuration loaded from {self.config_file_path}")

    def validate(self) -> List[str]:
        """Validate all configuration sections and return any errors."""
        errors = []
        errors.extend(self.data.validate())
        errors.extend(self.api.validate())
        errors.extend(self.search.validate())
        errors.extend(self.export.validate())
        errors.extend(self.log.validate())
        return errors
