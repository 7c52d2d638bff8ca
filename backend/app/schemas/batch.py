"""
Schémas Pydantic pour les lots d'élèves.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

NAME_MAX_LENGTH = 255  # batches.name


def _check_name_length(v: Optional[str]) -> Optional[str]:
    if v is not None and len(v) > NAME_MAX_LENGTH:
        raise ValueError(f"Le nom du lot ne peut pas dépasser {NAME_MAX_LENGTH} caractères.")
    return v


class BatchCreate(BaseModel):
    name: str
    description: Optional[str] = None
    max_students: int = 30
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom du lot ne peut pas être vide.")
        return _check_name_length(v.strip())

    @field_validator("max_students")
    @classmethod
    def max_students_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Un lot doit accepter au moins un élève.")
        return v


class BatchUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    max_students: Optional[int] = None
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Le nom du lot ne peut pas être vide.")
        return _check_name_length(v.strip() if v else v)

    @field_validator("max_students")
    @classmethod
    def max_students_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError("Un lot doit accepter au moins un élève.")
        return v


class BatchResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: Optional[str]
    teacher_id: uuid.UUID
    max_students: Optional[int]
    is_active: Optional[bool]
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}
