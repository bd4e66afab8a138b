#!/usr/bin/env python3
"""
Enumerations for FailTracker.

Contains the closed value sets used by the issue aggregate: workflow status,
change kinds, issue categories and point-size estimates.
"""

from enum import Enum
from typing import List


class Status(Enum):
    """Workflow status of an issue."""
    NOT_STARTED = "Not Started"
    COMPLETE = "Complete"

    @classmethod
    def from_string(cls, value: str) -> 'Status':
        """Create Status from string with case-insensitive matching.

        Args:
            value: Status string to parse ("Complete", "not started", "NOT_STARTED")

        Returns:
            Status instance

        Raises:
            TypeError: If value is not a string
            ValueError: If value doesn't match any status
        """
        if not isinstance(value, str):
            raise TypeError("value must be a string")

        value_normalized = value.strip().upper().replace(" ", "_")
        for status in cls:
            if status.value.upper().replace(" ", "_") == value_normalized:
                return status

        raise ValueError(f"Invalid status: {value}. Valid options: {[s.value for s in cls]}")

    @classmethod
    def get_all_values(cls) -> List[str]:
        """Get all status values as a list."""
        return [status.value for status in cls]


class ChangeType(Enum):
    """Kind of change recorded in an issue's history."""
    GENERIC = "Generic"
    COMPLETED = "Completed"
    REACTIVATED = "Reactivated"

    @classmethod
    def from_string(cls, value: str) -> 'ChangeType':
        """Create ChangeType from string with case-insensitive matching."""
        if not isinstance(value, str):
            raise TypeError("value must be a string")

        value_upper = value.strip().upper()
        for change_type in cls:
            if change_type.value.upper() == value_upper:
                return change_type

        raise ValueError(f"Invalid change type: {value}. Valid options: {[c.value for c in cls]}")

    @classmethod
    def get_all_values(cls) -> List[str]:
        """Get all change type values as a list."""
        return [change_type.value for change_type in cls]

    def is_status_change(self) -> bool:
        """Check whether this kind of change moves the issue's status."""
        return self in (ChangeType.COMPLETED, ChangeType.REACTIVATED)


class IssueType(Enum):
    """Issue categories."""
    BUG = "Bug"
    FEATURE = "Feature"
    CHORE = "Chore"

    @classmethod
    def from_string(cls, value: str) -> 'IssueType':
        """Create IssueType from string with case-insensitive matching.

        Args:
            value: Issue type string to parse

        Returns:
            IssueType instance

        Raises:
            TypeError: If value is not a string
            ValueError: If value doesn't match any issue type
        """
        if not isinstance(value, str):
            raise TypeError("value must be a string")

        value_upper = value.strip().upper()
        for issue_type in cls:
            if issue_type.value.upper() == value_upper:
                return issue_type

        raise ValueError(f"Invalid issue type: {value}. Valid options: {[t.value for t in cls]}")

    @classmethod
    def get_all_values(cls) -> List[str]:
        """Get all issue type values as a list."""
        return [issue_type.value for issue_type in cls]


class PointSize(Enum):
    """Estimate on the planning-poker scale."""
    UNKNOWN = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FIVE = 5
    EIGHT = 8
    THIRTEEN = 13
    TWENTY = 20
    FORTY = 40
    HUNDRED = 100

    @property
    def points(self) -> int:
        """Numeric point value of the estimate."""
        return self.value

    @classmethod
    def from_string(cls, value: str) -> 'PointSize':
        """Create PointSize from a member name ("twenty") or a number ("20").

        Raises:
            TypeError: If value is not a string
            ValueError: If value doesn't match any size
        """
        if not isinstance(value, str):
            raise TypeError("value must be a string")

        value_normalized = value.strip().upper()
        if value_normalized.isdigit():
            points = int(value_normalized)
            for size in cls:
                if size.value == points:
                    return size
        else:
            for size in cls:
                if size.name == value_normalized:
                    return size

        raise ValueError(f"Invalid point size: {value}. Valid options: {cls.get_all_values()}")

    @classmethod
    def get_all_values(cls) -> List[int]:
        """Get all point values as a list."""
        return [size.value for size in cls]

    def get_display_name(self) -> str:
        """Get display label for the estimate."""
        if self is PointSize.UNKNOWN:
            return "?"
        return str(self.value)
