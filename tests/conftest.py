#!/usr/bin/env python3
"""
Pytest configuration and fixtures for the FailTracker test suite.

Contains shared users, projects and issues in the states the issue tests
start from (being edited, not being edited, complete), plus a controllable
clock for timestamp assertions.
"""

import logging
from datetime import datetime, timezone, timedelta
from typing import Generator

import pytest

from fail_tracker.config.settings import TrackerConfig
from fail_tracker.models import Issue, Project, User
from fail_tracker.services.issue_service import IssueService

# Keep password hashing cheap in tests
TEST_HASH_ITERATIONS = 1_000


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        """Move the clock forward by a timedelta built from kwargs."""
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock(mocker) -> FakeClock:
    """Replace the issue module's clock with a manual one.

    Returns:
        FakeClock starting at 2024-01-01 12:00 UTC
    """
    fake = FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))
    mocker.patch("fail_tracker.models.issue._utcnow", new=fake)
    return fake


@pytest.fixture
def creator_user() -> User:
    """User who creates the project and issue."""
    return User.create_new_user("creator@user.com", "blah", iterations=TEST_HASH_ITERATIONS)


@pytest.fixture
def test_user() -> User:
    """User who edits, completes and reactivates issues."""
    return User.create_new_user("test@user.com", "12345", iterations=TEST_HASH_ITERATIONS)


@pytest.fixture
def other_user() -> User:
    """Third user, used as a reassignment target."""
    return User.create_new_user("other@user.com", "pass", iterations=TEST_HASH_ITERATIONS)


@pytest.fixture
def project(creator_user: User) -> Project:
    """Project owned by the creator."""
    return Project.create("Test", creator_user)


@pytest.fixture
def issue(clock: FakeClock, project: Project, creator_user: User) -> Issue:
    """Freshly created issue."""
    return Issue.create_new_issue(project, "My issue", creator_user, "Description")


@pytest.fixture
def issue_being_edited(issue: Issue, test_user: User, clock: FakeClock) -> Issue:
    """Issue with an open edit session by test_user."""
    clock.advance(seconds=1)
    issue.begin_edit(test_user, "Comment!")
    return issue


@pytest.fixture
def issue_not_being_edited(issue: Issue, clock: FakeClock) -> Issue:
    """Issue whose (absent) edit session has been ended."""
    clock.advance(seconds=1)
    issue.end_edit()
    return issue


@pytest.fixture
def complete_issue(issue_not_being_edited: Issue, test_user: User, clock: FakeClock) -> Issue:
    """Issue completed by test_user."""
    clock.advance(seconds=1)
    issue_not_being_edited.complete(test_user, "Completed by context.")
    return issue_not_being_edited


@pytest.fixture
def test_config() -> TrackerConfig:
    """Configuration with small limits and test-friendly hashing.

    Returns:
        TrackerConfig: Test configuration
    """
    return TrackerConfig(
        log_level="DEBUG",
        max_title_length=50,
        max_description_length=500,
        max_comment_length=100,
        password_hash_iterations=TEST_HASH_ITERATIONS,
    )


@pytest.fixture
def issue_service(test_config: TrackerConfig) -> IssueService:
    """Issue service using the test configuration."""
    return IssueService(test_config)


@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Snapshot root logger handlers and level, restoring them afterwards."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield root_logger

    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
