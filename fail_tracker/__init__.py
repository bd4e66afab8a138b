#!/usr/bin/env python3
"""
FailTracker: issue tracking core.

Issues with edit sessions, a NotStarted/Complete life cycle and an
append-only change history, plus the configuration, validation and service
layers around them.

Usage:
    from fail_tracker import Issue, Project, User

    creator = User.create_new_user("creator@user.com", "secret")
    issue = Issue.create_new_issue(Project.create("Web", creator), "Login fails", creator, "")
    with issue.editing(creator, "Taking this"):
        issue.reassign_to(creator)
    issue.complete(creator, "Fixed")
"""

from .models import (
    Status,
    ChangeType,
    IssueType,
    PointSize,
    User,
    Project,
    Issue,
    Change,
    EditSession,
    InvalidOperationError,
)

__version__ = "1.0.0"

__all__ = [
    "Status",
    "ChangeType",
    "IssueType",
    "PointSize",
    "User",
    "Project",
    "Issue",
    "Change",
    "EditSession",
    "InvalidOperationError",
    "__version__",
]
