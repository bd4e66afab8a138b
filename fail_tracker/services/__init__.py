#!/usr/bin/env python3
"""
Services package for FailTracker.

Contains the application-level issue service.
"""

from .issue_service import IssueService, UNCHANGED

__all__ = ["IssueService", "UNCHANGED"]
