#!/usr/bin/env python3
"""
Validators for FailTracker.

Input checks applied by the service layer before values reach the models:
length limits, email shape, password rules and text sanitizing.
"""

import re
from typing import Optional, List

from .constants import (
    PATTERNS,
    ERROR_MESSAGES,
    MAX_TITLE_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_COMMENT_LENGTH,
    MAX_PROJECT_NAME_LENGTH,
    MAX_EMAIL_LENGTH,
    MIN_PASSWORD_LENGTH,
)


class ValidationError(Exception):
    """Raised when input fails validation."""

    def __init__(self, message: str, field: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.code = code


class ValidationResult:
    """Result of a validation operation."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[str]] = None, warnings: Optional[List[str]] = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.warnings = warnings or []

    def add_error(self, error: str) -> None:
        """Add an error to the result."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning to the result."""
        self.warnings.append(warning)

    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    def raise_if_invalid(self, field: Optional[str] = None) -> None:
        """Raise ValidationError carrying all collected errors.

        Args:
            field: Name of the validated field, attached to the error

        Raises:
            ValidationError: If the result holds errors
        """
        if self.has_errors():
            raise ValidationError("; ".join(self.errors), field=field, code="invalid")


class InputValidator:
    """Validates user input for issues, users and projects."""

    @staticmethod
    def validate_title(title: str, max_length: int = MAX_TITLE_LENGTH) -> ValidationResult:
        """Validate issue title.

        Args:
            title: Issue title to validate
            max_length: Maximum allowed length

        Returns:
            ValidationResult with validation status and messages
        """
        result = ValidationResult()

        if not isinstance(title, str) or not title.strip():
            result.add_error(ERROR_MESSAGES['EMPTY_TITLE'])
            return result

        title = title.strip()

        if len(title) > max_length:
            result.add_error(ERROR_MESSAGES['TITLE_TOO_LONG'].format(max_length=max_length))

        if title.isupper() and len(title) > 3:
            result.add_warning("Consider using proper capitalization instead of ALL CAPS")

        if re.search(r'^(bug|feature|chore):', title, re.IGNORECASE):
            result.add_warning("Issue type is already specified separately, no need to include it in the title")

        return result

    @staticmethod
    def validate_description(description: Optional[str], max_length: int = MAX_DESCRIPTION_LENGTH) -> ValidationResult:
        """Validate issue description. Empty descriptions are allowed.

        Args:
            description: Description to validate
            max_length: Maximum allowed length

        Returns:
            ValidationResult with validation status and messages
        """
        result = ValidationResult()

        if description is None:
            description = ""

        if len(description.strip()) > max_length:
            result.add_error(ERROR_MESSAGES['DESCRIPTION_TOO_LONG'].format(max_length=max_length))

        if re.search(r'<script.*?</script>', description, re.IGNORECASE | re.DOTALL):
            result.add_error("Description cannot contain script tags")

        return result

    @staticmethod
    def validate_comment(comment: Optional[str], max_length: int = MAX_COMMENT_LENGTH) -> ValidationResult:
        """Validate an edit or status-change comment."""
        result = ValidationResult()

        if comment is None:
            comment = ""

        if len(comment.strip()) > max_length:
            result.add_error(ERROR_MESSAGES['COMMENT_TOO_LONG'].format(max_length=max_length))

        if not comment.strip():
            result.add_warning("Changes without a comment are harder to audit")

        return result

    @staticmethod
    def validate_project_name(name: str, max_length: int = MAX_PROJECT_NAME_LENGTH) -> ValidationResult:
        """Validate project name."""
        result = ValidationResult()

        if not isinstance(name, str) or not name.strip():
            result.add_error(ERROR_MESSAGES['EMPTY_PROJECT_NAME'])
            return result

        if len(name.strip()) > max_length:
            result.add_error(ERROR_MESSAGES['PROJECT_NAME_TOO_LONG'].format(max_length=max_length))

        return result

    @staticmethod
    def validate_email(email: str, allow_empty: bool = False) -> ValidationResult:
        """Validate email address.

        Args:
            email: Email to validate
            allow_empty: Whether to allow empty values

        Returns:
            ValidationResult with validation status and messages
        """
        result = ValidationResult()

        if not isinstance(email, str) or not email.strip():
            if allow_empty:
                return result
            result.add_error(ERROR_MESSAGES['EMPTY_EMAIL'])
            return result

        email = email.strip().lower()

        if not re.match(PATTERNS['EMAIL'], email):
            result.add_error(ERROR_MESSAGES['INVALID_EMAIL'])
            return result

        if len(email) > MAX_EMAIL_LENGTH:
            result.add_error(ERROR_MESSAGES['EMAIL_TOO_LONG'].format(max_length=MAX_EMAIL_LENGTH))

        domain = email.split('@')[1]
        if domain.startswith('.') or domain.endswith('.') or '..' in domain:
            result.add_error("Invalid email domain format")

        return result

    @staticmethod
    def validate_password(password: str, min_length: int = MIN_PASSWORD_LENGTH) -> ValidationResult:
        """Validate a new password."""
        result = ValidationResult()

        if not isinstance(password, str) or not password:
            result.add_error(ERROR_MESSAGES['EMPTY_PASSWORD'])
            return result

        if len(password) < min_length:
            result.add_error(ERROR_MESSAGES['PASSWORD_TOO_SHORT'].format(min_length=min_length))

        if password.strip() != password:
            result.add_warning("Password has leading or trailing whitespace")

        return result

    @staticmethod
    def sanitize_input(text: str, max_length: Optional[int] = None, strip_html: bool = True) -> str:
        """Sanitize user input by removing problematic content.

        Args:
            text: Text to sanitize
            max_length: Maximum length to truncate to
            strip_html: Whether to remove HTML tags

        Returns:
            Sanitized text
        """
        if not isinstance(text, str):
            return ""

        text = text.strip()

        if strip_html:
            text = re.sub(r'<[^>]+>', '', text)

        # Control characters
        text = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', text)

        text = re.sub(r'[ \t]+', ' ', text)

        if max_length and len(text) > max_length:
            text = text[:max_length].rstrip()

        return text
