"""
Génération des identifiants de connexion des élèves.

Identifiant : nom de l'élève en minuscules, sans espaces ni ponctuation,
suivi de "_" et des 4 derniers caractères de son ID (ex: "aaravsharma_3f9c").
Mot de passe : 8 caractères aléatoires en base 36, remis une seule fois à l'enseignant.
"""

import logging
import secrets
import string
import uuid
from typing import Optional

from sqlalchemy.orm import Session

from app.config import settings
from app.models.student import Student
from app.schemas.student import PublicStudentRecord
from app.schemas.student_auth import DUPLICATE_USERNAME, GeneratedCredentials
from app.services import student_procedures

logger = logging.getLogger(__name__)

BASE36_ALPHABET = string.ascii_lowercase + string.digits
USERNAME_FALLBACK = "student"
USERNAME_MAX_LENGTH = 100  # Student.username est un String(100)
RETRY_SUFFIX_LENGTH = 2


class CredentialError(Exception):
    """Refus du backend lors de l'enregistrement des identifiants (message à afficher tel quel)."""


def build_username(full_name: str, student_id: uuid.UUID, suffix: str = "") -> str:
    """Construit un identifiant lisible. Ne retourne jamais de partie nom vide."""
    base = "".join(ch for ch in full_name.lower() if ch.isalnum()) or USERNAME_FALLBACK
    # Place réservée pour "_xxxx" et le suffixe de relance
    base = base[:USERNAME_MAX_LENGTH - 5 - RETRY_SUFFIX_LENGTH]
    return f"{base}_{str(student_id)[-4:]}{suffix}"


def generate_password(length: Optional[int] = None) -> str:
    length = length or settings.PASSWORD_LENGTH
    return "".join(secrets.choice(BASE36_ALPHABET) for _ in range(length))


def generate_credentials(
    db: Session,
    teacher_id: uuid.UUID,
    student_id: uuid.UUID,
) -> Optional[GeneratedCredentials]:
    """
    Génère les premiers identifiants d'un élève de l'enseignant.

    - None si l'élève est introuvable (ou appartient à un autre enseignant)
    - ValueError si la connexion est déjà activée (transition NoLogin → LoginEnabled à sens unique)
    - CredentialError avec le message du backend en cas d'échec

    Un identifiant déjà pris est régénéré avec un suffixe aléatoire,
    au plus CREDENTIAL_MAX_ATTEMPTS fois.
    """
    student = _get_owned_student(db, teacher_id, student_id)
    if student is None:
        return None
    if student.is_login_enabled:
        raise ValueError("Les identifiants de cet élève ont déjà été générés. Utilisez la réinitialisation.")

    password = generate_password()
    for attempt in range(settings.CREDENTIAL_MAX_ATTEMPTS):
        suffix = "" if attempt == 0 else str(secrets.randbelow(100)).zfill(RETRY_SUFFIX_LENGTH)
        username = build_username(student.full_name, student.id, suffix)

        result = student_procedures.generate_student_credentials(db, student.id, username, password)
        if result.success:
            logger.info("Connexion activée pour l'élève %s (tentative %d)", student.id, attempt + 1)
            return GeneratedCredentials(
                username=username,
                password=password,
                student=PublicStudentRecord.model_validate(student),
            )
        if result.code != DUPLICATE_USERNAME:
            raise CredentialError(result.message or "Échec de la génération des identifiants.")

    raise CredentialError("Impossible de générer un nom d'utilisateur unique. Veuillez réessayer.")


def reset_credentials(
    db: Session,
    teacher_id: uuid.UUID,
    student_id: uuid.UUID,
) -> Optional[GeneratedCredentials]:
    """Génère un nouveau mot de passe pour un élève déjà activé. L'identifiant est conservé."""
    student = _get_owned_student(db, teacher_id, student_id)
    if student is None:
        return None
    if not student.is_login_enabled:
        raise ValueError("Les identifiants de cet élève n'ont pas encore été générés.")

    password = generate_password()
    result = student_procedures.reset_student_password(db, student.id, password)
    if not result.success:
        raise CredentialError(result.message or "Échec de la réinitialisation du mot de passe.")

    return GeneratedCredentials(
        username=student.username,
        password=password,
        student=PublicStudentRecord.model_validate(student),
    )


def _get_owned_student(db: Session, teacher_id: uuid.UUID, student_id: uuid.UUID) -> Optional[Student]:
    student = db.get(Student, student_id)
    if student is None or student.teacher_id != teacher_id:
        return None
    return student
