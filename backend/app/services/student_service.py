"""
Service métier pour la gestion des élèves d'un enseignant.
Les identifiants de connexion sont gérés à part (credential_service).
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.student import Student
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services.batch_service import get_owned_batch

logger = logging.getLogger(__name__)


def create_student(db: Session, teacher_id: uuid.UUID, data: StudentCreate) -> StudentResponse:
    """
    Inscrit un élève chez l'enseignant, sans identifiants de connexion.
    Lève une ValueError si le lot indiqué n'appartient pas à l'enseignant.
    """
    _check_batch(db, teacher_id, data.batch_id)

    student = Student(
        **data.model_dump(),
        teacher_id=teacher_id,
        is_login_enabled=False,
    )
    db.add(student)
    db.commit()
    db.refresh(student)

    logger.info("Élève inscrit : %s (%s)", student.full_name, student.id)
    return StudentResponse.model_validate(student)


def get_students(db: Session, teacher_id: uuid.UUID) -> list[StudentResponse]:
    """Retourne les élèves de l'enseignant, les plus récemment inscrits en premier."""
    students = db.execute(
        select(Student)
        .where(Student.teacher_id == teacher_id)
        .order_by(Student.enrollment_date.desc())
    ).scalars().all()
    return [StudentResponse.model_validate(s) for s in students]


def get_student(db: Session, teacher_id: uuid.UUID, student_id: uuid.UUID) -> Optional[StudentResponse]:
    student = _get_owned_student(db, teacher_id, student_id)
    if student is None:
        return None
    return StudentResponse.model_validate(student)


def update_student(
    db: Session,
    teacher_id: uuid.UUID,
    student_id: uuid.UUID,
    data: StudentUpdate,
) -> Optional[StudentResponse]:
    """Met à jour les champs fournis d'un élève. Les champs absents ne sont pas modifiés."""
    student = _get_owned_student(db, teacher_id, student_id)
    if student is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    if update_data.get("batch_id") is not None:
        _check_batch(db, teacher_id, update_data["batch_id"])

    for field, value in update_data.items():
        setattr(student, field, value)

    db.commit()
    db.refresh(student)
    return StudentResponse.model_validate(student)


def delete_student(db: Session, teacher_id: uuid.UUID, student_id: uuid.UUID) -> bool:
    """Supprime un élève et ses rendus (cascade). Retourne False si introuvable."""
    student = _get_owned_student(db, teacher_id, student_id)
    if student is None:
        return False

    db.delete(student)
    db.commit()
    return True


def _get_owned_student(db: Session, teacher_id: uuid.UUID, student_id: uuid.UUID) -> Optional[Student]:
    student = db.get(Student, student_id)
    if student is None or student.teacher_id != teacher_id:
        return None
    return student


def _check_batch(db: Session, teacher_id: uuid.UUID, batch_id: Optional[uuid.UUID]) -> None:
    if batch_id is not None and get_owned_batch(db, teacher_id, batch_id) is None:
        raise ValueError("Lot introuvable.")
