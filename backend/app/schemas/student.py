"""
Schémas Pydantic pour les élèves.

PublicStudentRecord est la forme exposée à l'élève et stockée dans sa session :
elle ne contient jamais password_hash.
"""

import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator

MIN_AGE = 3
MAX_AGE = 18

# Tailles des colonnes de la table students
NAME_MAX_LENGTH = 255
SHORT_FIELD_MAX_LENGTH = 50


def _check_length(v: Optional[str], max_length: int) -> Optional[str]:
    if v is not None and len(v) > max_length:
        raise ValueError(f"Ce champ ne peut pas dépasser {max_length} caractères.")
    return v


def _check_age(v: Optional[int]) -> Optional[int]:
    if v is not None and not MIN_AGE <= v <= MAX_AGE:
        raise ValueError(f"L'âge doit être compris entre {MIN_AGE} et {MAX_AGE} ans.")
    return v


class StudentCreate(BaseModel):
    """Schéma de création d'un élève par son enseignant (POST /students)."""
    full_name: str
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    age: Optional[int] = None
    grade: Optional[str] = None
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None
    parent_email: Optional[EmailStr] = None
    batch_id: Optional[uuid.UUID] = None
    is_active: bool = True

    @field_validator("full_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom de l'élève ne peut pas être vide.")
        return _check_length(v.strip(), NAME_MAX_LENGTH)

    @field_validator("age")
    @classmethod
    def age_in_range(cls, v: Optional[int]) -> Optional[int]:
        return _check_age(v)

    @field_validator("phone", "grade", "parent_phone")
    @classmethod
    def short_field_length(cls, v: Optional[str]) -> Optional[str]:
        return _check_length(v, SHORT_FIELD_MAX_LENGTH)

    @field_validator("parent_name")
    @classmethod
    def parent_name_length(cls, v: Optional[str]) -> Optional[str]:
        return _check_length(v, NAME_MAX_LENGTH)


class StudentUpdate(BaseModel):
    """Schéma de mise à jour d'un élève (PUT /students/{id}). Les identifiants de connexion ne sont pas modifiables ici."""
    full_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    age: Optional[int] = None
    grade: Optional[str] = None
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None
    parent_email: Optional[EmailStr] = None
    batch_id: Optional[uuid.UUID] = None
    is_active: Optional[bool] = None

    @field_validator("full_name")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Le nom de l'élève ne peut pas être vide.")
        return _check_length(v.strip() if v else v, NAME_MAX_LENGTH)

    @field_validator("age")
    @classmethod
    def age_in_range(cls, v: Optional[int]) -> Optional[int]:
        return _check_age(v)

    @field_validator("phone", "grade", "parent_phone")
    @classmethod
    def short_field_length(cls, v: Optional[str]) -> Optional[str]:
        return _check_length(v, SHORT_FIELD_MAX_LENGTH)

    @field_validator("parent_name")
    @classmethod
    def parent_name_length(cls, v: Optional[str]) -> Optional[str]:
        return _check_length(v, NAME_MAX_LENGTH)


class PublicStudentRecord(BaseModel):
    """Fiche élève publique (sans hash), sérialisée telle quelle dans la session élève."""
    id: uuid.UUID
    full_name: str
    teacher_id: uuid.UUID
    batch_id: Optional[uuid.UUID] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    age: Optional[int] = None
    grade: Optional[str] = None
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None
    parent_email: Optional[str] = None
    is_active: Optional[bool] = True
    username: Optional[str] = None
    is_login_enabled: Optional[bool] = False
    enrollment_date: Optional[date] = None

    model_config = {"from_attributes": True}


class StudentResponse(PublicStudentRecord):
    """Schéma de réponse pour un élève côté enseignant (GET /students)."""
    created_at: Optional[datetime] = None
