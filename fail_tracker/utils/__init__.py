# =============================================================================
# fail_tracker/utils/__init__.py
# =============================================================================
#!/usr/bin/env python3
"""
Utilities package for FailTracker.

Contains constants, input validators and text formatters.
"""

from .constants import (
    APP_INFO,
    ERROR_MESSAGES,
    MAX_TITLE_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_COMMENT_LENGTH,
)
from .validators import (
    InputValidator,
    ValidationResult,
    ValidationError,
)
from .formatters import IssueFormatter, truncate_text

__all__ = [
    # Constants
    "APP_INFO",
    "ERROR_MESSAGES",
    "MAX_TITLE_LENGTH",
    "MAX_DESCRIPTION_LENGTH",
    "MAX_COMMENT_LENGTH",

    # Validators
    "InputValidator",
    "ValidationResult",
    "ValidationError",

    # Formatters
    "IssueFormatter",
    "truncate_text",
]
