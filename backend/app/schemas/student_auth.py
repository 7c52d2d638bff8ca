"""
Schémas Pydantic du flux identifiants / connexion élève.
"""

from typing import Optional

from pydantic import BaseModel, field_validator

from app.schemas.student import PublicStudentRecord

DUPLICATE_USERNAME = "duplicate_username"
NOT_FOUND = "not_found"
BACKEND_ERROR = "backend_error"


class ProcedureResult(BaseModel):
    """Réponse d'une procédure du backend de persistance ({success, message?})."""
    success: bool
    message: Optional[str] = None
    code: Optional[str] = None  # DUPLICATE_USERNAME, NOT_FOUND, BACKEND_ERROR


class AuthenticationResult(BaseModel):
    """Verdict de authenticate_student : jamais de distinction utilisateur inconnu / mauvais mot de passe."""
    success: bool
    student: Optional[PublicStudentRecord] = None
    message: Optional[str] = None


class GeneratedCredentials(BaseModel):
    """Identifiants remis une seule fois à l'enseignant. Le mot de passe n'est jamais relu en base."""
    username: str
    password: str
    student: PublicStudentRecord


class StudentLoginRequest(BaseModel):
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def username_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Veuillez saisir le nom d'utilisateur et le mot de passe.")
        return v.strip()

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        # Le mot de passe n'est pas normalisé, seulement contrôlé
        if not v.strip():
            raise ValueError("Veuillez saisir le nom d'utilisateur et le mot de passe.")
        return v


class StudentLoginResponse(BaseModel):
    success: bool
    student: PublicStudentRecord
