#!/usr/bin/env python3
"""
Project model for FailTracker.

Projects group issues. Issues only reference their project; they never
mutate it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Any

from .user import User


@dataclass(eq=False)
class Project:
    """Project data model."""
    name: str
    created_by: User
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate project data after initialization."""
        if not isinstance(self.name, str):
            raise TypeError("name must be a string")
        if not self.name.strip():
            raise ValueError("name cannot be empty")
        if not isinstance(self.created_by, User):
            raise TypeError("created_by must be a User instance")
        if not isinstance(self.created_at, datetime):
            raise TypeError("created_at must be a datetime object")

    @classmethod
    def create(cls, name: str, creator: User) -> 'Project':
        """Create a new project owned by ``creator``."""
        if isinstance(name, str):
            name = name.strip()
        return cls(name=name, created_by=creator)

    def to_dict(self) -> Dict[str, Any]:
        """Convert project to dictionary for serialization."""
        return {
            'name': self.name,
            'created_by': self.created_by.email_address,
            'created_at': self.created_at.isoformat()
        }

    def __str__(self) -> str:
        """String representation of the project."""
        return self.name
