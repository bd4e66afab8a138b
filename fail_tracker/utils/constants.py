#!/usr/bin/env python3
"""
Constants for FailTracker.

Limits, regex patterns and message templates shared by validators,
formatters and the service layer.
"""

from typing import Dict, Final

# Text limits
MAX_TITLE_LENGTH: Final[int] = 200
MAX_DESCRIPTION_LENGTH: Final[int] = 5000
MAX_COMMENT_LENGTH: Final[int] = 2000
MAX_PROJECT_NAME_LENGTH: Final[int] = 255
MAX_EMAIL_LENGTH: Final[int] = 254
MIN_PASSWORD_LENGTH: Final[int] = 4

# Display
DEFAULT_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M"
DEFAULT_PREVIEW_LENGTH: Final[int] = 100
UNASSIGNED_LABEL: Final[str] = "Unassigned"

PATTERNS: Final[Dict[str, str]] = {
    'EMAIL': r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$',
}

ERROR_MESSAGES: Final[Dict[str, str]] = {
    'EMPTY_TITLE': "Issue title cannot be empty",
    'TITLE_TOO_LONG': "Issue title must be {max_length} characters or less",
    'DESCRIPTION_TOO_LONG': "Issue description must be {max_length} characters or less",
    'COMMENT_TOO_LONG': "Comment must be {max_length} characters or less",
    'EMPTY_EMAIL': "Email address cannot be empty",
    'INVALID_EMAIL': "Invalid email address format",
    'EMAIL_TOO_LONG': "Email address must be {max_length} characters or less",
    'EMPTY_PASSWORD': "Password cannot be empty",
    'PASSWORD_TOO_SHORT': "Password must be at least {min_length} characters long",
    'EMPTY_PROJECT_NAME': "Project name cannot be empty",
    'PROJECT_NAME_TOO_LONG': "Project name must be {max_length} characters or less",
}

APP_INFO: Final[Dict[str, str]] = {
    'NAME': 'FailTracker',
    'VERSION': '1.0.0',
    'DESCRIPTION': 'Issue tracking core: issues, edit sessions and change history',
    'LICENSE': 'MIT',
}
