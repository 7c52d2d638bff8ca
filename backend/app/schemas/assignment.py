"""
Schémas Pydantic pour les devoirs (côté enseignant) et leur liste côté élève.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator


TITLE_MAX_LENGTH = 255  # assignments.title


def _check_title_length(v: Optional[str]) -> Optional[str]:
    if v is not None and len(v) > TITLE_MAX_LENGTH:
        raise ValueError(f"Le titre du devoir ne peut pas dépasser {TITLE_MAX_LENGTH} caractères.")
    return v


def _check_total_marks(v: Optional[int]) -> Optional[int]:
    if v is not None and v < 1:
        raise ValueError("Le barème doit être strictement positif.")
    return v


class AssignmentCreate(BaseModel):
    title: str
    description: Optional[str] = None
    batch_id: uuid.UUID
    due_date: Optional[datetime] = None  # une date passée est acceptée
    total_marks: int = 100
    is_published: bool = False
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    file_size: Optional[int] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le titre du devoir ne peut pas être vide.")
        return _check_title_length(v.strip())

    @field_validator("total_marks")
    @classmethod
    def total_marks_positive(cls, v: int) -> int:
        return _check_total_marks(v)


class AssignmentUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    batch_id: Optional[uuid.UUID] = None
    due_date: Optional[datetime] = None
    total_marks: Optional[int] = None
    is_published: Optional[bool] = None
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    file_size: Optional[int] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Le titre du devoir ne peut pas être vide.")
        return _check_title_length(v.strip() if v else v)

    @field_validator("total_marks")
    @classmethod
    def total_marks_positive(cls, v: Optional[int]) -> Optional[int]:
        return _check_total_marks(v)


class AssignmentResponse(BaseModel):
    id: uuid.UUID
    title: str
    description: Optional[str]
    batch_id: uuid.UUID
    teacher_id: uuid.UUID
    due_date: Optional[datetime]
    total_marks: Optional[int]
    is_published: Optional[bool]
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    file_size: Optional[int] = None
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}


class StudentAssignment(BaseModel):
    """Ligne retournée par get_student_assignments : le devoir et l'état du rendu de l'élève."""
    assignment_id: uuid.UUID
    title: str
    description: Optional[str]
    due_date: Optional[datetime]
    total_marks: Optional[int]
    is_published: bool
    created_at: Optional[datetime]
    submitted: bool
    submission_id: Optional[uuid.UUID] = None
    marks_obtained: Optional[int] = None
    feedback: Optional[str] = None
    graded_at: Optional[datetime] = None
