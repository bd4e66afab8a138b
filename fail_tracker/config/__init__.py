# =============================================================================
# fail_tracker/config/__init__.py
# =============================================================================
#!/usr/bin/env python3
"""
Configuration package for FailTracker.

Contains configuration management, validation, logging setup and environment
handling.
"""

from typing import Dict, Any

from .settings import (
    TrackerConfig,
    load_config_from_env,
    setup_logging,
    validate_config,
)

__all__ = [
    "TrackerConfig",
    "load_config_from_env",
    "setup_logging",
    "validate_config",
    "DEFAULT_CONFIG",
    "get_default_config",
]

# Configuration defaults
DEFAULT_CONFIG: Dict[str, Any] = TrackerConfig().to_dict()


def get_default_config() -> Dict[str, Any]:
    """Get default configuration values.

    Returns:
        Dictionary of default configuration values
    """
    return DEFAULT_CONFIG.copy()
