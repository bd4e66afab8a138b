#!/usr/bin/env python3
"""
Test package for FailTracker.

Test Structure:
- test_issue.py: Tests for the Issue aggregate (edit sessions, field changes, status)
- test_models.py: Tests for enums, User, Project and Change
- test_issue_service.py: Tests for the issue service
- test_config.py: Tests for configuration loading and logging setup
- test_utils.py: Tests for validators and formatters
- conftest.py: Pytest configuration and fixtures

Usage:
    Run all tests:
    $ pytest

    Run with coverage:
    $ pytest --cov=fail_tracker

    Run only unit tests:
    $ pytest -m unit
"""
