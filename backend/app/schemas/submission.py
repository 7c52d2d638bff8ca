"""
Schémas Pydantic pour les rendus de devoirs.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator


class SubmissionCreate(BaseModel):
    """Corps de requête pour rendre un devoir. Un texte vide est rejeté avant tout accès BDD."""
    submission_text: str
    attachment_url: Optional[str] = None

    @field_validator("submission_text")
    @classmethod
    def text_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Veuillez saisir le texte de votre rendu.")
        return v.strip()


class SubmissionResponse(BaseModel):
    id: uuid.UUID
    assignment_id: uuid.UUID
    student_id: uuid.UUID
    submission_text: Optional[str]
    attachment_url: Optional[str]
    marks_obtained: Optional[int] = None
    feedback: Optional[str] = None
    graded_at: Optional[datetime] = None
    submitted_at: Optional[datetime]

    model_config = {"from_attributes": True}
