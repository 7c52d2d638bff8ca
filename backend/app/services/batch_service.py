"""
Service métier pour la gestion des lots d'un enseignant.
Toutes les lectures et écritures sont filtrées par teacher_id.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.batch import Batch
from app.schemas.batch import BatchCreate, BatchResponse, BatchUpdate

logger = logging.getLogger(__name__)


def create_batch(db: Session, teacher_id: uuid.UUID, data: BatchCreate) -> BatchResponse:
    """Crée un lot pour l'enseignant. Actif par défaut."""
    batch = Batch(
        name=data.name,
        description=data.description,
        teacher_id=teacher_id,
        max_students=data.max_students,
        is_active=data.is_active,
    )
    db.add(batch)
    db.commit()
    db.refresh(batch)

    logger.info("Lot créé : %s (%s) pour l'enseignant %s", batch.name, batch.id, teacher_id)
    return BatchResponse.model_validate(batch)


def get_batches(db: Session, teacher_id: uuid.UUID, active_only: bool = False) -> list[BatchResponse]:
    """Retourne les lots de l'enseignant, du plus récent au plus ancien."""
    query = select(Batch).where(Batch.teacher_id == teacher_id)
    if active_only:
        query = query.where(Batch.is_active.is_(True))
    batches = db.execute(query.order_by(Batch.created_at.desc())).scalars().all()
    return [BatchResponse.model_validate(b) for b in batches]


def get_batch(db: Session, teacher_id: uuid.UUID, batch_id: uuid.UUID) -> Optional[BatchResponse]:
    batch = get_owned_batch(db, teacher_id, batch_id)
    if batch is None:
        return None
    return BatchResponse.model_validate(batch)


def update_batch(
    db: Session,
    teacher_id: uuid.UUID,
    batch_id: uuid.UUID,
    data: BatchUpdate,
) -> Optional[BatchResponse]:
    """Met à jour les champs fournis d'un lot. Le dernier enregistrement l'emporte."""
    batch = get_owned_batch(db, teacher_id, batch_id)
    if batch is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(batch, field, value)

    db.commit()
    db.refresh(batch)
    return BatchResponse.model_validate(batch)


def delete_batch(db: Session, teacher_id: uuid.UUID, batch_id: uuid.UUID) -> bool:
    """
    Supprime un lot. Ses devoirs sont supprimés en cascade,
    ses élèves sont conservés sans lot.
    Retourne True si supprimé, False si introuvable.
    """
    batch = get_owned_batch(db, teacher_id, batch_id)
    if batch is None:
        return False

    db.delete(batch)
    db.commit()
    return True


def get_owned_batch(db: Session, teacher_id: uuid.UUID, batch_id: uuid.UUID) -> Optional[Batch]:
    """Retourne le lot s'il appartient à l'enseignant, sinon None."""
    batch = db.get(Batch, batch_id)
    if batch is None or batch.teacher_id != teacher_id:
        return None
    return batch
