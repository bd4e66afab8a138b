#!/usr/bin/env python3
"""
Issue model for FailTracker.

Contains the Issue aggregate and its append-only change history. An issue
owns its status, assignment and edit-session state:

- field changes (title, description, size, type, assignee) are only legal
  while an edit session opened with ``begin_edit`` is active, and each one
  appends a Change carrying the session's editor and comment;
- status moves NotStarted -> Complete through ``complete`` and back through
  ``reactivate``; neither needs an edit session.

Contract violations raise InvalidOperationError.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List, Iterator, Tuple

from .enums import Status, ChangeType, IssueType, PointSize
from .project import Project
from .user import User, email_of

logger = logging.getLogger(__name__)

CHANGE_FLAG_LABELS: Dict[str, str] = {
    'is_reassigned': 'assignee',
    'is_title_changed': 'title',
    'is_point_size_changed': 'size',
    'is_type_changed': 'type',
    'is_description_changed': 'description',
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InvalidOperationError(Exception):
    """Raised when an issue operation is invoked in a state that forbids it."""
    pass


@dataclass(frozen=True)
class Change:
    """One immutable entry of an issue's history."""
    edited_by: User
    comments: str
    changed_at: datetime
    type: ChangeType = ChangeType.GENERIC
    is_reassigned: bool = False
    is_title_changed: bool = False
    is_point_size_changed: bool = False
    is_type_changed: bool = False
    is_description_changed: bool = False

    def changed_fields(self) -> List[str]:
        """Get labels of the fields this change touched."""
        return [label for flag, label in CHANGE_FLAG_LABELS.items() if getattr(self, flag)]

    def to_dict(self) -> Dict[str, Any]:
        """Convert change to dictionary for serialization."""
        data: Dict[str, Any] = {
            'edited_by': self.edited_by.email_address,
            'comments': self.comments,
            'changed_at': self.changed_at.isoformat(),
            'type': self.type.value,
        }
        for flag in CHANGE_FLAG_LABELS:
            data[flag] = getattr(self, flag)
        return data


@dataclass(frozen=True)
class EditSession:
    """Pending edit context: who is editing and why."""
    editor: User
    comment: str
    started_at: datetime


@dataclass(eq=False)
class Issue:
    """Issue aggregate with edit sessions, status life cycle and history.

    Create issues through ``Issue.create_new_issue``. The history is exposed
    read-only through ``changes``; every mutation goes through a method that
    records it.
    """
    project: Project
    title: str
    created_by: User
    description: str = ""
    size: PointSize = PointSize.UNKNOWN
    issue_type: IssueType = IssueType.BUG
    status: Status = Status.NOT_STARTED
    assigned_to: Optional[User] = None
    created_at: datetime = field(default_factory=_utcnow)
    last_changed: Optional[datetime] = None
    _changes: List[Change] = field(default_factory=list, init=False, repr=False)
    _edit_session: Optional[EditSession] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate issue data after initialization."""
        self._validate_references()
        self._validate_title(self.title)
        self._validate_description(self.description)
        self._validate_enums()
        self._validate_timestamps()

    def _validate_references(self) -> None:
        """Validate project and user references."""
        if not isinstance(self.project, Project):
            raise TypeError("project must be a Project instance")
        if not isinstance(self.created_by, User):
            raise TypeError("created_by must be a User instance")
        if self.assigned_to is not None and not isinstance(self.assigned_to, User):
            raise TypeError("assigned_to must be a User instance or None")

    @staticmethod
    def _validate_title(title: Any) -> None:
        if not isinstance(title, str):
            raise TypeError("title must be a string")
        if not title.strip():
            raise ValueError("title cannot be empty")

    @staticmethod
    def _validate_description(description: Any) -> None:
        if not isinstance(description, str):
            raise TypeError("description must be a string")

    def _validate_enums(self) -> None:
        """Validate enum fields."""
        if not isinstance(self.size, PointSize):
            raise TypeError("size must be a PointSize instance")
        if not isinstance(self.issue_type, IssueType):
            raise TypeError("issue_type must be an IssueType instance")
        if not isinstance(self.status, Status):
            raise TypeError("status must be a Status instance")

    def _validate_timestamps(self) -> None:
        """Validate timestamps; last_changed starts out equal to created_at."""
        if not isinstance(self.created_at, datetime):
            raise TypeError("created_at must be a datetime object")

        if self.last_changed is None:
            self.last_changed = self.created_at
        elif not isinstance(self.last_changed, datetime):
            raise TypeError("last_changed must be a datetime object or None")
        elif self.last_changed < self.created_at:
            raise ValueError("last_changed cannot be before created_at")

    @classmethod
    def create_new_issue(
        cls,
        project: Project,
        title: str,
        creator: User,
        description: str = "",
        *,
        issue_type: Optional[IssueType] = None,
        size: Optional[PointSize] = None
    ) -> 'Issue':
        """Create a new, unassigned, not-started issue.

        Args:
            project: Project the issue belongs to
            title: Short non-empty title
            creator: User creating the issue
            description: Issue body, may be empty
            issue_type: Initial category (defaults to Bug)
            size: Initial estimate (defaults to unknown)

        Returns:
            Issue with an empty history and no active edit session

        Raises:
            TypeError: If references or values have the wrong type
            ValueError: If the title is empty
        """
        now = _utcnow()
        issue = cls(
            project=project,
            title=title.strip() if isinstance(title, str) else title,
            created_by=creator,
            description=description,
            size=size if size is not None else PointSize.UNKNOWN,
            issue_type=issue_type if issue_type is not None else IssueType.BUG,
            created_at=now,
            last_changed=now
        )
        logger.debug("Created issue '%s' in project '%s' by %s",
                     issue.title, project.name, creator.email_address)
        return issue

    # Read-only views

    @property
    def changes(self) -> Tuple[Change, ...]:
        """History of changes, oldest first."""
        return tuple(self._changes)

    @property
    def last_change(self) -> Optional[Change]:
        """Most recent change, or None if the issue was never changed."""
        return self._changes[-1] if self._changes else None

    @property
    def is_unassigned(self) -> bool:
        return self.assigned_to is None

    @property
    def is_complete(self) -> bool:
        return self.status is Status.COMPLETE

    @property
    def is_being_edited(self) -> bool:
        return self._edit_session is not None

    @property
    def edit_session(self) -> Optional[EditSession]:
        """Currently open edit session, if any."""
        return self._edit_session

    def changes_by(self, user: User) -> List[Change]:
        """Get the changes made by ``user``, oldest first."""
        return [change for change in self._changes if change.edited_by is user]

    # Edit sessions

    def begin_edit(self, editor: User, comment: str) -> None:
        """Open an edit session.

        Field changes made until ``end_edit`` are attributed to ``editor``
        and carry ``comment``. Opening a session while one is active
        replaces it.

        Raises:
            TypeError: If editor is not a User or comment is not a string
        """
        if not isinstance(editor, User):
            raise TypeError("editor must be a User instance")
        if not isinstance(comment, str):
            raise TypeError("comment must be a string")

        if self._edit_session is not None:
            logger.debug("Replacing edit session of %s on issue '%s'",
                         self._edit_session.editor.email_address, self.title)

        self._edit_session = EditSession(editor=editor, comment=comment, started_at=_utcnow())
        logger.debug("Edit session opened on issue '%s' by %s", self.title, editor.email_address)

    def end_edit(self) -> None:
        """Close the active edit session. Does nothing when none is open."""
        if self._edit_session is None:
            return
        logger.debug("Edit session closed on issue '%s' by %s",
                     self.title, self._edit_session.editor.email_address)
        self._edit_session = None

    @contextmanager
    def editing(self, editor: User, comment: str) -> Iterator['Issue']:
        """Run a block inside an edit session, closing it on exit.

        Example:
            with issue.editing(user, "Triaged") as edit:
                edit.change_size_to(PointSize.THREE)
        """
        self.begin_edit(editor, comment)
        try:
            yield self
        finally:
            self.end_edit()

    # Field changes (require an edit session)

    def reassign_to(self, new_assignee: Optional[User]) -> 'Issue':
        """Assign the issue to ``new_assignee`` (None unassigns).

        Returns:
            This issue, for chaining

        Raises:
            InvalidOperationError: If no edit session is active
        """
        session = self._require_edit_session("reassign")
        if new_assignee is not None and not isinstance(new_assignee, User):
            raise TypeError("new_assignee must be a User instance or None")

        self.assigned_to = new_assignee
        self._record_change(session.editor, session.comment, is_reassigned=True)
        return self

    def change_title_to(self, new_title: str) -> None:
        """Change the title.

        Raises:
            InvalidOperationError: If no edit session is active
            ValueError: If the new title is empty
        """
        session = self._require_edit_session("change the title of")
        self._validate_title(new_title)

        self.title = new_title.strip()
        self._record_change(session.editor, session.comment, is_title_changed=True)

    def change_size_to(self, new_size: PointSize) -> None:
        """Change the point-size estimate.

        Raises:
            InvalidOperationError: If no edit session is active
        """
        session = self._require_edit_session("change the size of")
        if not isinstance(new_size, PointSize):
            raise TypeError("new_size must be a PointSize instance")

        self.size = new_size
        self._record_change(session.editor, session.comment, is_point_size_changed=True)

    def change_type_to(self, new_type: IssueType) -> None:
        """Change the issue category.

        Raises:
            InvalidOperationError: If no edit session is active
        """
        session = self._require_edit_session("change the type of")
        if not isinstance(new_type, IssueType):
            raise TypeError("new_type must be an IssueType instance")

        self.issue_type = new_type
        self._record_change(session.editor, session.comment, is_type_changed=True)

    def change_description_to(self, new_description: str) -> 'Issue':
        """Change the description.

        Returns:
            This issue, for chaining

        Raises:
            InvalidOperationError: If no edit session is active
        """
        session = self._require_edit_session("change the description of")
        self._validate_description(new_description)

        self.description = new_description
        self._record_change(session.editor, session.comment, is_description_changed=True)
        return self

    # Status transitions

    def complete(self, completer: User, comment: str) -> None:
        """Mark the issue complete.

        Raises:
            InvalidOperationError: If the issue is already complete
        """
        if self.status is Status.COMPLETE:
            raise InvalidOperationError(f"Issue '{self.title}' is already complete")
        self._validate_actor(completer, comment)

        self.status = Status.COMPLETE
        self._record_change(completer, comment, change_type=ChangeType.COMPLETED)

    def reactivate(self, reactivator: User, comment: str) -> None:
        """Move a complete issue back to not started.

        Raises:
            InvalidOperationError: If the issue is not complete
        """
        if self.status is not Status.COMPLETE:
            raise InvalidOperationError(
                f"Issue '{self.title}' cannot be reactivated from status '{self.status.value}'"
            )
        self._validate_actor(reactivator, comment)

        self.status = Status.NOT_STARTED
        self._record_change(reactivator, comment, change_type=ChangeType.REACTIVATED)

    # Internals

    def _require_edit_session(self, action: str) -> EditSession:
        if self._edit_session is None:
            raise InvalidOperationError(
                f"Cannot {action} issue '{self.title}' without an active edit session; "
                f"call begin_edit() first"
            )
        return self._edit_session

    @staticmethod
    def _validate_actor(user: Any, comment: Any) -> None:
        if not isinstance(user, User):
            raise TypeError("user must be a User instance")
        if not isinstance(comment, str):
            raise TypeError("comment must be a string")

    def _record_change(
        self,
        edited_by: User,
        comments: str,
        change_type: ChangeType = ChangeType.GENERIC,
        **flags: bool
    ) -> Change:
        # last_changed never moves backwards, even if the clock does
        changed_at = max(_utcnow(), self.last_changed)
        change = Change(
            edited_by=edited_by,
            comments=comments,
            changed_at=changed_at,
            type=change_type,
            **flags
        )
        self._changes.append(change)
        self.last_changed = changed_at

        logger.debug("Issue '%s': %s change by %s (%s)",
                     self.title, change_type.value, edited_by.email_address,
                     ", ".join(change.changed_fields()) or "status")
        return change

    def to_dict(self, include_changes: bool = True) -> Dict[str, Any]:
        """Convert issue to dictionary for serialization.

        Args:
            include_changes: Whether to include the change history

        Returns:
            Dictionary representation of the issue
        """
        data: Dict[str, Any] = {
            'project': self.project.name,
            'title': self.title,
            'description': self.description,
            'size': self.size.value,
            'issue_type': self.issue_type.value,
            'status': self.status.value,
            'assigned_to': email_of(self.assigned_to),
            'created_by': self.created_by.email_address,
            'created_at': self.created_at.isoformat(),
            'last_changed': self.last_changed.isoformat(),
        }
        if include_changes:
            data['changes'] = [change.to_dict() for change in self._changes]
        return data

    def __str__(self) -> str:
        """String representation of the issue."""
        return f"{self.title} [{self.status.value}]"
