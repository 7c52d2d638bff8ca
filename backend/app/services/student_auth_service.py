"""
Authentification des élèves et matérialisation de leur session.
La comparaison du mot de passe est déléguée à la procédure authenticate_student.
"""

import logging

from sqlalchemy.orm import Session

from app.schemas.student_auth import AuthenticationResult, StudentLoginRequest
from app.services import student_procedures
from app.services.session_store import StudentSessionStore

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Nom d'utilisateur ou mot de passe invalide."


def login(db: Session, store: StudentSessionStore, credentials: StudentLoginRequest) -> AuthenticationResult:
    """
    Vérifie les identifiants (déjà validés non vides par le schéma) en un seul appel au backend.
    En cas de succès, la fiche publique est enregistrée dans la session ; sinon le stockage n'est pas touché.
    """
    result = student_procedures.authenticate_student(db, credentials.username, credentials.password)

    if not result.success or result.student is None:
        return AuthenticationResult(success=False, message=result.message or GENERIC_FAILURE)

    store.save(result.student)
    logger.info("Élève connecté : %s (%s)", result.student.username, result.student.id)
    return result


def logout(store: StudentSessionStore) -> None:
    store.clear()
