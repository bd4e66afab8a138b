#!/usr/bin/env python3
"""
Issue service for FailTracker.

Application-level facade over the domain models: validates input against the
configured limits, applies configured defaults, groups field edits into one
edit session and logs every operation.
"""

import logging
from typing import Optional, List, Union

from ..config.settings import TrackerConfig
from ..models import (
    Issue,
    Change,
    User,
    Project,
    IssueType,
    PointSize,
    InvalidOperationError,
)
from ..utils.formatters import IssueFormatter
from ..utils.validators import InputValidator


class _Unchanged:
    """Marker for 'leave this field alone' where None is a meaningful value."""

    def __repr__(self) -> str:
        return "UNCHANGED"


UNCHANGED = _Unchanged()


class IssueService:
    """Creates and edits issues on behalf of the application layer."""

    def __init__(self, config: Optional[TrackerConfig] = None) -> None:
        """Initialize issue service.

        Args:
            config: Tracker configuration, defaults are used when omitted

        Raises:
            TypeError: If config is not a TrackerConfig instance
        """
        if config is None:
            config = TrackerConfig()
        if not isinstance(config, TrackerConfig):
            raise TypeError("config must be a TrackerConfig instance")

        self.config = config
        self.formatter = IssueFormatter(date_format=config.date_format)
        self.logger = logging.getLogger(__name__)

    def register_user(self, email_address: str, password: str) -> User:
        """Create a new user after validating email and password.

        Raises:
            ValidationError: If email or password are invalid
        """
        InputValidator.validate_email(email_address).raise_if_invalid('email_address')
        InputValidator.validate_password(password).raise_if_invalid('password')

        user = User.create_new_user(
            email_address.strip().lower(),
            password,
            iterations=self.config.password_hash_iterations
        )
        self.logger.info(f"Registered user {user.email_address}")
        return user

    def create_project(self, name: str, creator: User) -> Project:
        """Create a new project.

        Raises:
            ValidationError: If the name is invalid
        """
        InputValidator.validate_project_name(name).raise_if_invalid('name')

        project = Project.create(InputValidator.sanitize_input(name), creator)
        self.logger.info(f"Created project '{project.name}' for {creator.email_address}")
        return project

    def create_issue(
        self,
        project: Project,
        title: str,
        creator: User,
        description: str = "",
        issue_type: Optional[Union[IssueType, str]] = None,
        size: Optional[Union[PointSize, str]] = None
    ) -> Issue:
        """Create a new issue with configured defaults.

        Args:
            project: Project the issue belongs to
            title: Issue title
            creator: Creating user
            description: Issue body
            issue_type: Category, enum or string; config default when omitted
            size: Estimate, enum or string; config default when omitted

        Returns:
            Newly created issue

        Raises:
            ValidationError: If title or description break the configured limits
            ValueError: If issue_type or size strings are unknown
        """
        title = InputValidator.sanitize_input(title)
        self._validate_title(title)
        self._validate_description(description)

        new_type = self._coerce_issue_type(issue_type)
        new_size = self._coerce_size(size)

        issue = Issue.create_new_issue(
            project,
            title,
            creator,
            description or "",
            issue_type=new_type if new_type is not None else self.config.default_issue_type,
            size=new_size if new_size is not None else self.config.default_point_size
        )
        self.logger.info(f"Created issue '{issue.title}' in '{project.name}' by {creator.email_address}")
        return issue

    def edit_issue(
        self,
        issue: Issue,
        editor: User,
        comment: str,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        size: Optional[Union[PointSize, str]] = None,
        issue_type: Optional[Union[IssueType, str]] = None,
        assign_to: Union[User, None, _Unchanged] = UNCHANGED
    ) -> List[Change]:
        """Apply field edits inside a single edit session.

        Only fields whose new value differs from the current one are changed,
        each producing its own history entry. ``assign_to=None`` unassigns.

        Returns:
            Changes appended by this edit, in order

        Raises:
            ValidationError: If values break the configured limits
            TypeError: If assign_to is not a User, None or UNCHANGED
        """
        self._validate_comment(comment)
        if title is not None:
            title = InputValidator.sanitize_input(title)
            self._validate_title(title)
        if description is not None:
            self._validate_description(description)
        new_size = self._coerce_size(size)
        new_type = self._coerce_issue_type(issue_type)
        if assign_to is not UNCHANGED and assign_to is not None and not isinstance(assign_to, User):
            raise TypeError("assign_to must be a User instance, None or UNCHANGED")

        before = len(issue.changes)
        with issue.editing(editor, comment):
            if title is not None and title != issue.title:
                issue.change_title_to(title)
            if description is not None and description != issue.description:
                issue.change_description_to(description)
            if new_size is not None and new_size is not issue.size:
                issue.change_size_to(new_size)
            if new_type is not None and new_type is not issue.issue_type:
                issue.change_type_to(new_type)
            if assign_to is not UNCHANGED and assign_to is not issue.assigned_to:
                issue.reassign_to(assign_to)

        applied = list(issue.changes[before:])
        if applied:
            self.logger.info(f"{editor.email_address} edited issue '{issue.title}': "
                             f"{', '.join(f for c in applied for f in c.changed_fields())}")
        else:
            self.logger.debug(f"Edit of issue '{issue.title}' by {editor.email_address} changed nothing")
        return applied

    def complete_issue(self, issue: Issue, user: User, comment: str) -> Change:
        """Complete an issue.

        Raises:
            InvalidOperationError: If the issue is already complete
        """
        self._validate_comment(comment)
        try:
            issue.complete(user, comment)
        except InvalidOperationError as e:
            self.logger.warning(f"Rejected completion of '{issue.title}' by {user.email_address}: {e}")
            raise

        self.logger.info(f"Issue '{issue.title}' completed by {user.email_address}")
        return issue.last_change

    def reactivate_issue(self, issue: Issue, user: User, comment: str) -> Change:
        """Reactivate a complete issue.

        Raises:
            InvalidOperationError: If the issue is not complete
        """
        self._validate_comment(comment)
        try:
            issue.reactivate(user, comment)
        except InvalidOperationError as e:
            self.logger.warning(f"Rejected reactivation of '{issue.title}' by {user.email_address}: {e}")
            raise

        self.logger.info(f"Issue '{issue.title}' reactivated by {user.email_address}")
        return issue.last_change

    def describe_issue(self, issue: Issue, include_history: bool = True, history_limit: Optional[int] = None) -> str:
        """Render an issue card, optionally followed by its history."""
        text = self.formatter.format_issue(issue)
        if include_history:
            text += "\n\nHistory:\n" + self.formatter.format_history(issue.changes, limit=history_limit)
        return text

    def _validate_title(self, title: str) -> None:
        result = InputValidator.validate_title(title, max_length=self.config.max_title_length)
        for warning in result.warnings:
            self.logger.debug(f"Title warning: {warning}")
        result.raise_if_invalid('title')

    def _validate_description(self, description: Optional[str]) -> None:
        InputValidator.validate_description(
            description, max_length=self.config.max_description_length
        ).raise_if_invalid('description')

    def _validate_comment(self, comment: Optional[str]) -> None:
        InputValidator.validate_comment(
            comment, max_length=self.config.max_comment_length
        ).raise_if_invalid('comment')

    @staticmethod
    def _coerce_issue_type(value: Optional[Union[IssueType, str]]) -> Optional[IssueType]:
        if value is None or isinstance(value, IssueType):
            return value
        return IssueType.from_string(value)

    @staticmethod
    def _coerce_size(value: Optional[Union[PointSize, str]]) -> Optional[PointSize]:
        if value is None or isinstance(value, PointSize):
            return value
        return PointSize.from_string(value)
