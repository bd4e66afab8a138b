#!/usr/bin/env python3
"""
Text formatters for FailTracker.

Renders issues and their change history as plain text for logs, reports and
whatever presentation layer sits on top of the core.
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ..models import Issue, Change, ChangeType, User
from .constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_PREVIEW_LENGTH,
    MAX_TITLE_LENGTH,
    UNASSIGNED_LABEL,
)


def truncate_text(text: str, max_length: int) -> str:
    """Truncate text to specified length (standalone function).

    Args:
        text: Text to truncate
        max_length: Maximum length

    Returns:
        Truncated text
    """
    if not isinstance(text, str):
        return str(text)

    if len(text) <= max_length:
        return text

    return text[:max_length - 3] + "..."


class IssueFormatter:
    """Formats issues and change histories as text."""

    def __init__(self, date_format: str = DEFAULT_DATE_FORMAT, compact_mode: bool = False):
        """Initialize issue formatter.

        Args:
            date_format: strftime format for timestamps
            compact_mode: Whether to use compact formatting
        """
        self.date_format = date_format
        self.compact_mode = compact_mode

    def format_issue(self, issue: Issue, include_description: bool = True) -> str:
        """Format an issue card.

        Args:
            issue: Issue to format
            include_description: Whether to include description

        Returns:
            Formatted issue text
        """
        if not isinstance(issue, Issue):
            raise TypeError("issue must be an Issue instance")

        lines = [truncate_text(issue.title, MAX_TITLE_LENGTH)]

        header_parts = [
            issue.issue_type.value,
            f"{issue.size.get_display_name()} pts",
            issue.status.value,
        ]
        lines.append(" | ".join(header_parts))

        if not self.compact_mode:
            lines.append(f"Project: {issue.project.name}")
            lines.append(f"Assigned to: {self._format_user(issue.assigned_to)}")
            lines.append(f"Created by: {self._format_user(issue.created_by)} "
                         f"on {self._format_datetime(issue.created_at)}")
            lines.append(f"Last changed: {self._format_datetime(issue.last_changed)}")

        if include_description and issue.description.strip():
            description = issue.description.strip()
            if self.compact_mode:
                description = truncate_text(description, DEFAULT_PREVIEW_LENGTH)
            lines.append("")
            lines.append(description)

        return "\n".join(lines)

    def format_change(self, change: Change) -> str:
        """Format a single history entry.

        Example:
            "2024-01-05 10:12 test@user.com edited title, size: Triaged"
        """
        if not isinstance(change, Change):
            raise TypeError("change must be a Change instance")

        when = self._format_datetime(change.changed_at)
        who = self._format_user(change.edited_by)

        if change.type is ChangeType.COMPLETED:
            action = "completed the issue"
        elif change.type is ChangeType.REACTIVATED:
            action = "reactivated the issue"
        else:
            fields = change.changed_fields()
            action = f"edited {', '.join(fields)}" if fields else "edited the issue"

        line = f"{when} {who} {action}"
        if change.comments:
            line += f": {change.comments}"
        return line

    def format_history(self, changes: Sequence[Change], limit: Optional[int] = None) -> str:
        """Format a change history, newest first.

        Args:
            changes: Changes in recorded order (oldest first)
            limit: Maximum number of entries to show

        Returns:
            Formatted history text
        """
        if not changes:
            return "No changes recorded"

        entries: List[Change] = list(reversed(changes))
        hidden = 0
        if limit is not None and len(entries) > limit:
            hidden = len(entries) - limit
            entries = entries[:limit]

        lines = [self.format_change(change) for change in entries]
        if hidden:
            lines.append(f"... and {hidden} earlier change{'s' if hidden > 1 else ''}")
        return "\n".join(lines)

    def _format_datetime(self, dt: datetime) -> str:
        if not isinstance(dt, datetime):
            return str(dt)
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return dt.strftime(self.date_format)

    @staticmethod
    def _format_user(user: Optional[User]) -> str:
        if user is None:
            return UNASSIGNED_LABEL
        return user.email_address
