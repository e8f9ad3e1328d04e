"""
Pydantic schemas for progression results.
"""

from enum import Enum
from typing import FrozenSet, Optional

from pydantic import BaseModel


class CompletionError(str, Enum):
    """Why a completion request was refused."""
    PREREQUISITES_NOT_MET = "prerequisites_not_met"
    COURSE_NOT_FOUND = "course_not_found"


class CompletionResult(BaseModel):
    """Result of a complete_course request."""

    success: bool
    completed_ids: FrozenSet[str]
    error: Optional[CompletionError] = None
    message: Optional[str] = None
    missing_prerequisites: FrozenSet[str] = frozenset()
