#!/usr/bin/env python3
"""
Configuration settings for FailTracker.

Handles environment variables, validation, logging setup and configuration
management.
"""

import os
import logging
from dataclasses import dataclass
from typing import List, Optional, Dict, Any
from pathlib import Path

from ..models.enums import IssueType, PointSize


@dataclass(frozen=True)
class TrackerConfig:
    """Configuration for FailTracker."""
    # Logging settings
    log_level: str = "INFO"
    log_file: str = "fail_tracker.log"
    log_max_size: int = 10 * 1024 * 1024  # 10MB
    log_backup_count: int = 5

    # Input limits
    max_title_length: int = 200
    max_description_length: int = 5000
    max_comment_length: int = 2000

    # Default values for new issues
    default_issue_type: IssueType = IssueType.BUG
    default_point_size: PointSize = PointSize.UNKNOWN

    # Security settings
    password_hash_iterations: int = 100_000

    # Display settings
    date_format: str = "%Y-%m-%d %H:%M"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate_numeric_fields()
        self._validate_log_level()
        self._validate_paths()
        self._validate_defaults()

    def _validate_numeric_fields(self) -> None:
        """Validate numeric configuration fields."""
        numeric_fields = {
            'log_max_size': (self.log_max_size, 1024 * 1024, 100 * 1024 * 1024),  # 1MB to 100MB
            'log_backup_count': (self.log_backup_count, 1, 20),
            'max_title_length': (self.max_title_length, 10, 1000),
            'max_description_length': (self.max_description_length, 100, 100000),
            'max_comment_length': (self.max_comment_length, 10, 10000),
            'password_hash_iterations': (self.password_hash_iterations, 1, 10_000_000),
        }

        for field_name, (value, min_val, max_val) in numeric_fields.items():
            if not isinstance(value, int) or not (min_val <= value <= max_val):
                raise ValueError(f"{field_name} must be an integer between {min_val} and {max_val}")

    def _validate_log_level(self) -> None:
        """Validate log level is supported."""
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if not isinstance(self.log_level, str) or self.log_level.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {sorted(valid_levels)}")

    def _validate_paths(self) -> None:
        """Validate file paths and formats."""
        if not isinstance(self.log_file, str) or not self.log_file.strip():
            raise ValueError("log_file must be a non-empty string")

        if not isinstance(self.date_format, str) or not self.date_format.strip():
            raise ValueError("date_format must be a non-empty string")

    def _validate_defaults(self) -> None:
        """Validate default enum values."""
        if not isinstance(self.default_issue_type, IssueType):
            raise TypeError("default_issue_type must be an IssueType instance")
        if not isinstance(self.default_point_size, PointSize):
            raise TypeError("default_point_size must be a PointSize instance")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'log_level': self.log_level,
            'log_file': self.log_file,
            'log_max_size': self.log_max_size,
            'log_backup_count': self.log_backup_count,
            'max_title_length': self.max_title_length,
            'max_description_length': self.max_description_length,
            'max_comment_length': self.max_comment_length,
            'default_issue_type': self.default_issue_type.value,
            'default_point_size': self.default_point_size.value,
            'password_hash_iterations': self.password_hash_iterations,
            'date_format': self.date_format,
        }


def load_config_from_env(env_file: Optional[str] = None) -> TrackerConfig:
    """Load configuration from environment variables.

    Args:
        env_file: Optional path to .env file

    Returns:
        Loaded and validated configuration

    Raises:
        FileNotFoundError: If specified env_file doesn't exist
    """
    if env_file:
        env_path = Path(env_file)
        if not env_path.exists():
            raise FileNotFoundError(f"Environment file not found: {env_file}")

        from dotenv import load_dotenv
        load_dotenv(env_path)

    def parse_int(env_var: str, default: int, min_val: int, max_val: int) -> int:
        try:
            value = int(os.getenv(env_var, str(default)))
            if min_val <= value <= max_val:
                return value
            else:
                logging.warning(f"Invalid {env_var} value {value}, using default {default}")
                return default
        except (ValueError, TypeError):
            logging.warning(f"Invalid {env_var} value, using default {default}")
            return default

    def parse_log_level(env_var: str, default: str) -> str:
        value = os.getenv(env_var, default).strip().upper()
        if value in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            return value
        logging.warning(f"Invalid {env_var} value {value}, using default {default}")
        return default

    default_issue_type = IssueType.BUG
    if os.getenv('DEFAULT_ISSUE_TYPE'):
        try:
            default_issue_type = IssueType.from_string(os.getenv('DEFAULT_ISSUE_TYPE', ''))
        except (ValueError, TypeError):
            logging.warning(f"Invalid DEFAULT_ISSUE_TYPE value, using {IssueType.BUG.value}")

    default_point_size = PointSize.UNKNOWN
    if os.getenv('DEFAULT_POINT_SIZE'):
        try:
            default_point_size = PointSize.from_string(os.getenv('DEFAULT_POINT_SIZE', ''))
        except (ValueError, TypeError):
            logging.warning(f"Invalid DEFAULT_POINT_SIZE value, using {PointSize.UNKNOWN.value}")

    return TrackerConfig(
        # Logging settings
        log_level=parse_log_level('LOG_LEVEL', 'INFO'),
        log_file=os.getenv('LOG_FILE', 'fail_tracker.log').strip() or 'fail_tracker.log',
        log_max_size=parse_int('LOG_MAX_SIZE', 10 * 1024 * 1024, 1024 * 1024, 100 * 1024 * 1024),
        log_backup_count=parse_int('LOG_BACKUP_COUNT', 5, 1, 20),

        # Input limits
        max_title_length=parse_int('MAX_TITLE_LENGTH', 200, 10, 1000),
        max_description_length=parse_int('MAX_DESCRIPTION_LENGTH', 5000, 100, 100000),
        max_comment_length=parse_int('MAX_COMMENT_LENGTH', 2000, 10, 10000),

        # Default values
        default_issue_type=default_issue_type,
        default_point_size=default_point_size,

        # Security settings
        password_hash_iterations=parse_int('PASSWORD_HASH_ITERATIONS', 100_000, 1, 10_000_000),

        # Display settings
        date_format=os.getenv('DATE_FORMAT', '%Y-%m-%d %H:%M').strip() or '%Y-%m-%d %H:%M',
    )


def setup_logging(config: TrackerConfig) -> None:
    """Set up logging configuration.

    Args:
        config: Configuration containing logging settings
    """
    from logging.handlers import RotatingFileHandler

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    # Clear any existing handlers
    root_logger.handlers.clear()

    # File handler with rotation
    file_handler = RotatingFileHandler(
        config.log_file,
        maxBytes=config.log_max_size,
        backupCount=config.log_backup_count,
        encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def validate_config(config: TrackerConfig) -> List[str]:
    """Validate configuration and return list of warnings.

    Args:
        config: Configuration to validate

    Returns:
        List of warning messages
    """
    warnings = []

    if config.password_hash_iterations < 10_000:
        warnings.append("PASSWORD_HASH_ITERATIONS is low, password hashes are cheap to brute-force")

    if config.max_title_length < 50:
        warnings.append("MAX_TITLE_LENGTH is very short, issue titles may be rejected often")

    if config.log_level.upper() == 'DEBUG':
        warnings.append("LOG_LEVEL is DEBUG, every issue change will be logged")

    log_path = Path(config.log_file)
    if not log_path.parent.exists():
        warnings.append(f"Log directory does not exist: {log_path.parent}")

    return warnings
