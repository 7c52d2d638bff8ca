"""
Procédures du backend de persistance pour les identifiants élèves.

Ces fonctions jouent le rôle des procédures stockées exposées par le backend :
- generate_student_credentials : hache et enregistre un couple identifiant / mot de passe
- reset_student_password       : remplace le hash d'un élève déjà activé
- authenticate_student         : compare un mot de passe en clair au hash stocké
- get_student_assignments      : devoirs publiés du lot de l'élève avec l'état du rendu

Le hachage et la comparaison ont lieu exclusivement ici. Les procédures ne lèvent
jamais d'exception pour un refus métier : elles retournent un résultat {success, message}.
"""

import logging
import uuid

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.assignment import Assignment, AssignmentSubmission
from app.models.student import Student
from app.schemas.assignment import StudentAssignment
from app.schemas.student import PublicStudentRecord
from app.schemas.student_auth import (
    BACKEND_ERROR,
    DUPLICATE_USERNAME,
    NOT_FOUND,
    AuthenticationResult,
    ProcedureResult,
)
from app.security import hash_password, verify_password

logger = logging.getLogger(__name__)

# Message unique pour tout échec d'authentification (ne révèle pas si l'identifiant existe)
INVALID_CREDENTIALS = "Nom d'utilisateur ou mot de passe invalide."
BACKEND_FAILURE = "Le service est momentanément indisponible. Veuillez réessayer."


def generate_student_credentials(
    db: Session,
    student_id: uuid.UUID,
    username: str,
    password: str,
) -> ProcedureResult:
    """
    Enregistre l'identifiant et le hash du mot de passe d'un élève, puis active sa connexion.
    Retourne un échec typé DUPLICATE_USERNAME si l'identifiant est déjà pris.
    """
    try:
        student = db.get(Student, student_id)
        if student is None:
            return ProcedureResult(success=False, message="Élève introuvable.", code=NOT_FOUND)

        taken = db.execute(
            select(Student.id).where(Student.username == username, Student.id != student_id)
        ).scalar()
        if taken:
            return _duplicate_username(username)

        student.username = username
        student.password_hash = hash_password(password)
        student.is_login_enabled = True
        db.commit()
    except IntegrityError:
        # Course avec une autre génération : la contrainte UNIQUE tranche
        db.rollback()
        return _duplicate_username(username)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec generate_student_credentials pour %s : %s", student_id, exc)
        return ProcedureResult(success=False, message=BACKEND_FAILURE, code=BACKEND_ERROR)

    logger.info("Identifiants enregistrés pour l'élève %s (%s)", student_id, username)
    return ProcedureResult(success=True)


def reset_student_password(db: Session, student_id: uuid.UUID, password: str) -> ProcedureResult:
    """Remplace le hash du mot de passe d'un élève dont la connexion est déjà activée."""
    try:
        student = db.get(Student, student_id)
        if student is None:
            return ProcedureResult(success=False, message="Élève introuvable.", code=NOT_FOUND)
        if not student.is_login_enabled or not student.username:
            return ProcedureResult(
                success=False,
                message="Les identifiants de cet élève n'ont pas encore été générés.",
            )

        student.password_hash = hash_password(password)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec reset_student_password pour %s : %s", student_id, exc)
        return ProcedureResult(success=False, message=BACKEND_FAILURE, code=BACKEND_ERROR)

    logger.info("Mot de passe réinitialisé pour l'élève %s", student_id)
    return ProcedureResult(success=True)


def authenticate_student(db: Session, username: str, password: str) -> AuthenticationResult:
    """
    Vérifie un couple identifiant / mot de passe en clair contre le hash stocké.
    Identifiant inconnu, mot de passe erroné, connexion désactivée : même message générique.
    """
    try:
        student = db.execute(
            select(Student).where(Student.username == username)
        ).scalar()
    except SQLAlchemyError as exc:
        logger.error("Échec authenticate_student : %s", exc)
        return AuthenticationResult(success=False, message=BACKEND_FAILURE)

    if (
        student is None
        or not student.is_login_enabled
        or student.is_active is False
        or not student.password_hash
        or not verify_password(password, student.password_hash)
    ):
        logger.warning("Connexion élève refusée pour l'identifiant %r", username)
        return AuthenticationResult(success=False, message=INVALID_CREDENTIALS)

    return AuthenticationResult(success=True, student=PublicStudentRecord.model_validate(student))


def get_student_assignments(db: Session, student_id: uuid.UUID) -> list[StudentAssignment]:
    """
    Retourne les devoirs publiés du lot de l'élève, du plus récent au plus ancien,
    avec l'état de son rendu. Les devoirs dont l'échéance est passée restent listés.
    """
    student = db.get(Student, student_id)
    if student is None or student.batch_id is None:
        return []

    rows = db.execute(
        select(Assignment, AssignmentSubmission)
        .outerjoin(
            AssignmentSubmission,
            and_(
                AssignmentSubmission.assignment_id == Assignment.id,
                AssignmentSubmission.student_id == student_id,
            ),
        )
        .where(
            Assignment.batch_id == student.batch_id,
            Assignment.is_published.is_(True),
        )
        .order_by(Assignment.created_at.desc())
    ).all()

    return [
        StudentAssignment(
            assignment_id=assignment.id,
            title=assignment.title,
            description=assignment.description,
            due_date=assignment.due_date,
            total_marks=assignment.total_marks,
            is_published=bool(assignment.is_published),
            created_at=assignment.created_at,
            submitted=submission is not None,
            submission_id=submission.id if submission else None,
            marks_obtained=submission.marks_obtained if submission else None,
            feedback=submission.feedback if submission else None,
            graded_at=submission.graded_at if submission else None,
        )
        for assignment, submission in rows
    ]


def _duplicate_username(username: str) -> ProcedureResult:
    logger.warning("Identifiant élève déjà utilisé : %s", username)
    return ProcedureResult(
        success=False,
        message=f"Le nom d'utilisateur '{username}' est déjà utilisé.",
        code=DUPLICATE_USERNAME,
    )
