#!/usr/bin/env python3
"""
Models package for FailTracker.

Modules:
    enums: Status, ChangeType, IssueType, PointSize
    user: User identity and credential
    project: Project container
    issue: Issue aggregate, Change history entries, edit sessions

Usage:
    from fail_tracker.models import Issue, User, Project, PointSize
"""

from .enums import (
    Status,
    ChangeType,
    IssueType,
    PointSize,
)

from .user import User

from .project import Project

from .issue import (
    Issue,
    Change,
    EditSession,
    InvalidOperationError,
)

__all__ = [
    # Enums
    "Status",
    "ChangeType",
    "IssueType",
    "PointSize",

    # Collaborators
    "User",
    "Project",

    # Issue aggregate
    "Issue",
    "Change",
    "EditSession",
    "InvalidOperationError",
]
