"""
Service métier pour les devoirs d'un enseignant (création, publication, suppression).
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.assignment import Assignment
from app.schemas.assignment import AssignmentCreate, AssignmentResponse, AssignmentUpdate
from app.services.batch_service import get_owned_batch

logger = logging.getLogger(__name__)


def create_assignment(db: Session, teacher_id: uuid.UUID, data: AssignmentCreate) -> AssignmentResponse:
    """
    Crée un devoir pour un lot de l'enseignant. Non publié par défaut.
    Une échéance passée est acceptée telle quelle.
    """
    if get_owned_batch(db, teacher_id, data.batch_id) is None:
        raise ValueError("Lot introuvable.")

    assignment = Assignment(**data.model_dump(), teacher_id=teacher_id)
    db.add(assignment)
    db.commit()
    db.refresh(assignment)

    logger.info(
        "Devoir créé : %s (%s), lot %s, publié=%s",
        assignment.title, assignment.id, assignment.batch_id, assignment.is_published,
    )
    return AssignmentResponse.model_validate(assignment)


def get_assignments(db: Session, teacher_id: uuid.UUID) -> list[AssignmentResponse]:
    """Retourne les devoirs de l'enseignant, du plus récent au plus ancien."""
    assignments = db.execute(
        select(Assignment)
        .where(Assignment.teacher_id == teacher_id)
        .order_by(Assignment.created_at.desc())
    ).scalars().all()
    return [AssignmentResponse.model_validate(a) for a in assignments]


def get_assignment(db: Session, teacher_id: uuid.UUID, assignment_id: uuid.UUID) -> Optional[AssignmentResponse]:
    assignment = _get_owned_assignment(db, teacher_id, assignment_id)
    if assignment is None:
        return None
    return AssignmentResponse.model_validate(assignment)


def update_assignment(
    db: Session,
    teacher_id: uuid.UUID,
    assignment_id: uuid.UUID,
    data: AssignmentUpdate,
) -> Optional[AssignmentResponse]:
    """Met à jour les champs fournis d'un devoir."""
    assignment = _get_owned_assignment(db, teacher_id, assignment_id)
    if assignment is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    if update_data.get("batch_id") is not None and get_owned_batch(db, teacher_id, update_data["batch_id"]) is None:
        raise ValueError("Lot introuvable.")

    for field, value in update_data.items():
        setattr(assignment, field, value)

    db.commit()
    db.refresh(assignment)
    return AssignmentResponse.model_validate(assignment)


def toggle_published(db: Session, teacher_id: uuid.UUID, assignment_id: uuid.UUID) -> Optional[AssignmentResponse]:
    """Inverse la visibilité du devoir pour les élèves. Deux appels ramènent l'état initial."""
    assignment = _get_owned_assignment(db, teacher_id, assignment_id)
    if assignment is None:
        return None

    assignment.is_published = not assignment.is_published
    db.commit()
    db.refresh(assignment)

    logger.info("Devoir %s : publié=%s", assignment.id, assignment.is_published)
    return AssignmentResponse.model_validate(assignment)


def delete_assignment(db: Session, teacher_id: uuid.UUID, assignment_id: uuid.UUID) -> bool:
    """Supprime un devoir et ses rendus (cascade). Retourne False si introuvable."""
    assignment = _get_owned_assignment(db, teacher_id, assignment_id)
    if assignment is None:
        return False

    db.delete(assignment)
    db.commit()
    return True


def _get_owned_assignment(db: Session, teacher_id: uuid.UUID, assignment_id: uuid.UUID) -> Optional[Assignment]:
    assignment = db.get(Assignment, assignment_id)
    if assignment is None or assignment.teacher_id != teacher_id:
        return None
    return assignment
