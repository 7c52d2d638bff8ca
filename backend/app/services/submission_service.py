"""
Service métier du portail élève : liste des devoirs et rendus.

Politique de rendu : un seul rendu par (devoir, élève). Une seconde tentative est refusée,
la contrainte UNIQUE de la table tranche en cas de double clic concurrent.
La notation (marks_obtained, feedback, graded_at) est hors de cette API.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.assignment import Assignment, AssignmentSubmission
from app.models.student import Student
from app.schemas.assignment import StudentAssignment
from app.schemas.student import PublicStudentRecord
from app.schemas.submission import SubmissionCreate, SubmissionResponse
from app.services import student_procedures

logger = logging.getLogger(__name__)

ALREADY_SUBMITTED = "Vous avez déjà rendu ce devoir."


def list_assignments(db: Session, student: PublicStudentRecord) -> list[StudentAssignment]:
    return student_procedures.get_student_assignments(db, student.id)


def submit_assignment(
    db: Session,
    student: PublicStudentRecord,
    assignment_id: uuid.UUID,
    data: SubmissionCreate,
) -> Optional[SubmissionResponse]:
    """
    Enregistre le rendu d'un élève.

    - None si le devoir est introuvable, non publié ou hors du lot actuel de l'élève
    - ValueError si l'élève a déjà rendu ce devoir
    """
    current = db.get(Student, student.id)
    assignment = db.get(Assignment, assignment_id)
    if (
        current is None
        or assignment is None
        or not assignment.is_published
        or assignment.batch_id != current.batch_id
    ):
        return None

    existing = db.execute(
        select(AssignmentSubmission.id).where(
            AssignmentSubmission.assignment_id == assignment_id,
            AssignmentSubmission.student_id == student.id,
        )
    ).scalar()
    if existing:
        raise ValueError(ALREADY_SUBMITTED)

    submission = AssignmentSubmission(
        assignment_id=assignment_id,
        student_id=student.id,
        submission_text=data.submission_text,
        attachment_url=data.attachment_url,
    )
    db.add(submission)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError(ALREADY_SUBMITTED)
    db.refresh(submission)

    logger.info("Rendu enregistré : devoir %s, élève %s", assignment_id, student.id)
    return SubmissionResponse.model_validate(submission)
