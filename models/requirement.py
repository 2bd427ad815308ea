"""
models/requirement.py
---------------------
Domain model for a stored requirement, plus the transfer objects
that carry requirements across the service boundary.
"""

import uuid as uuid_lib
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


def _new_uuid() -> str:
    return str(uuid_lib.uuid4())


@dataclass
class Requirement:
    """
    Persistence-shaped requirement record.

    Attributes:
        title: Short name; unique among requirements when created.
        description: Free text.
        uuid: External identifier, generated on construction and never changed.
        req_id: Database primary key (None until first saved).
        created_at: Set by the database on insert.
        updated_at: Set by the database on every save.
    """
    title: str = ""
    description: Optional[str] = None
    uuid: str = field(default_factory=_new_uuid)
    req_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_persisted(self) -> bool:
        """Returns True once the record has a database id."""
        return self.req_id is not None

    def __str__(self) -> str:
        return f"{self.title} [{self.uuid}]"


@dataclass
class RequirementDto:
    """Boundary-facing view of a requirement; carries no identifiers."""
    title: str = ""
    description: Optional[str] = None


@dataclass
class RequirementListDto:
    """Ordered list of requirement transfer objects."""
    requirements: list[RequirementDto] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.requirements)
