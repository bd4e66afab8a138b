#!/usr/bin/env python3
"""
Tests for configuration loading, validation and logging setup.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from fail_tracker.config import (
    TrackerConfig,
    load_config_from_env,
    setup_logging,
    validate_config,
    get_default_config,
)
from fail_tracker.models import IssueType, PointSize

pytestmark = pytest.mark.unit

ENV_VARS = [
    'LOG_LEVEL', 'LOG_FILE', 'LOG_MAX_SIZE', 'LOG_BACKUP_COUNT',
    'MAX_TITLE_LENGTH', 'MAX_DESCRIPTION_LENGTH', 'MAX_COMMENT_LENGTH',
    'DEFAULT_ISSUE_TYPE', 'DEFAULT_POINT_SIZE', 'PASSWORD_HASH_ITERATIONS',
    'DATE_FORMAT',
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all tracker variables from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestTrackerConfig:
    """Test cases for TrackerConfig validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = TrackerConfig()

        assert config.log_level == "INFO"
        assert config.max_title_length == 200
        assert config.default_issue_type == IssueType.BUG
        assert config.default_point_size == PointSize.UNKNOWN

    def test_numeric_ranges(self) -> None:
        """Out-of-range numbers are rejected."""
        with pytest.raises(ValueError, match="max_title_length"):
            TrackerConfig(max_title_length=5)

        with pytest.raises(ValueError, match="log_backup_count"):
            TrackerConfig(log_backup_count=0)

        with pytest.raises(ValueError, match="password_hash_iterations"):
            TrackerConfig(password_hash_iterations=0)

    def test_log_level(self) -> None:
        """Unknown log levels are rejected."""
        with pytest.raises(ValueError, match="log_level"):
            TrackerConfig(log_level="VERBOSE")

    def test_default_enums_must_be_enums(self) -> None:
        """String defaults are rejected by the dataclass itself."""
        with pytest.raises(TypeError):
            TrackerConfig(default_issue_type="Bug")  # type: ignore

    def test_to_dict(self) -> None:
        """Enum values are serialized to plain values."""
        data = TrackerConfig(default_point_size=PointSize.EIGHT).to_dict()

        assert data['default_point_size'] == 8
        assert data['default_issue_type'] == "Bug"
        assert get_default_config()['max_title_length'] == 200

    def test_frozen(self) -> None:
        """Configuration is immutable."""
        config = TrackerConfig()
        with pytest.raises(Exception):
            config.log_level = "DEBUG"  # type: ignore


class TestLoadConfigFromEnv:
    """Test cases for load_config_from_env."""

    def test_empty_environment_gives_defaults(self, clean_env) -> None:
        """Test loading with nothing set."""
        assert load_config_from_env() == TrackerConfig()

    def test_values_are_read(self, clean_env) -> None:
        """Test loading values from the environment."""
        clean_env.setenv('LOG_LEVEL', 'debug')
        clean_env.setenv('MAX_TITLE_LENGTH', '120')
        clean_env.setenv('DEFAULT_ISSUE_TYPE', 'feature')
        clean_env.setenv('DEFAULT_POINT_SIZE', '13')
        clean_env.setenv('PASSWORD_HASH_ITERATIONS', '5000')

        config = load_config_from_env()

        assert config.log_level == "DEBUG"
        assert config.max_title_length == 120
        assert config.default_issue_type == IssueType.FEATURE
        assert config.default_point_size == PointSize.THIRTEEN
        assert config.password_hash_iterations == 5000

    def test_invalid_values_fall_back(self, clean_env, caplog) -> None:
        """Invalid values are logged and replaced with defaults."""
        clean_env.setenv('MAX_TITLE_LENGTH', 'lots')
        clean_env.setenv('LOG_BACKUP_COUNT', '99')
        clean_env.setenv('DEFAULT_POINT_SIZE', '4')

        with caplog.at_level(logging.WARNING):
            config = load_config_from_env()

        assert config.max_title_length == 200
        assert config.log_backup_count == 5
        assert config.default_point_size == PointSize.UNKNOWN
        assert "MAX_TITLE_LENGTH" in caplog.text
        assert "DEFAULT_POINT_SIZE" in caplog.text

    def test_env_file(self, clean_env, tmp_path) -> None:
        """Values from a .env file are loaded."""
        env_file = tmp_path / ".env"
        env_file.write_text("MAX_COMMENT_LENGTH=300\nDEFAULT_ISSUE_TYPE=Chore\n")

        # Register for cleanup, load_dotenv writes straight to os.environ
        clean_env.setenv('MAX_COMMENT_LENGTH', '')
        clean_env.delenv('MAX_COMMENT_LENGTH')
        clean_env.setenv('DEFAULT_ISSUE_TYPE', '')
        clean_env.delenv('DEFAULT_ISSUE_TYPE')

        config = load_config_from_env(str(env_file))

        assert config.max_comment_length == 300
        assert config.default_issue_type == IssueType.CHORE

    def test_missing_env_file(self, clean_env, tmp_path) -> None:
        """A missing env file is an error."""
        with pytest.raises(FileNotFoundError):
            load_config_from_env(str(tmp_path / "missing.env"))


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_handlers_are_installed(self, tmp_path, restore_root_logger) -> None:
        """A rotating file handler and a console handler are attached."""
        log_file = tmp_path / "tracker.log"
        config = TrackerConfig(log_level="WARNING", log_file=str(log_file), log_backup_count=2)

        setup_logging(config)

        handlers = restore_root_logger.handlers
        assert restore_root_logger.level == logging.WARNING
        assert len(handlers) == 2
        file_handler = next(h for h in handlers if isinstance(h, RotatingFileHandler))
        assert file_handler.backupCount == 2
        assert file_handler.maxBytes == config.log_max_size

        logging.getLogger("fail_tracker.test").warning("written to file")
        file_handler.flush()
        assert "written to file" in log_file.read_text(encoding='utf-8')


class TestValidateConfig:
    """Test cases for validate_config."""

    def test_no_warnings_for_defaults(self, tmp_path) -> None:
        """Sane settings produce no warnings."""
        config = TrackerConfig(log_file=str(tmp_path / "tracker.log"))
        assert validate_config(config) == []

    def test_warnings(self, tmp_path) -> None:
        """Weak or noisy settings are reported."""
        config = TrackerConfig(
            log_level="DEBUG",
            log_file=str(tmp_path / "missing" / "tracker.log"),
            max_title_length=20,
            password_hash_iterations=1_000,
        )

        warnings = validate_config(config)

        assert len(warnings) == 4
        assert any("PASSWORD_HASH_ITERATIONS" in w for w in warnings)
        assert any("Log directory does not exist" in w for w in warnings)
