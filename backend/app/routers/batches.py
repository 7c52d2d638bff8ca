"""
Router pour la gestion des lots d'un enseignant.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_teacher
from app.models.profile import Profile
from app.schemas.batch import BatchCreate, BatchResponse, BatchUpdate
from app.services import batch_service

router = APIRouter(prefix="/api/v1/batches", tags=["Lots"])


@router.post("", response_model=BatchResponse, status_code=201, summary="Créer un lot")
def create_batch(
    data: BatchCreate,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    """Crée un lot pour l'enseignant connecté (actif par défaut, 30 places par défaut)."""
    return batch_service.create_batch(db, profile.user_id, data)


@router.get("", response_model=List[BatchResponse], summary="Lister les lots")
def list_batches(
    active: bool = False,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    """Retourne les lots de l'enseignant ; `?active=true` pour ne garder que les lots actifs."""
    return batch_service.get_batches(db, profile.user_id, active_only=active)


@router.get("/{batch_id}", response_model=BatchResponse, summary="Détail d'un lot")
def get_batch(batch_id: uuid.UUID, profile: Profile = Depends(require_teacher), db: Session = Depends(get_db)):
    batch = batch_service.get_batch(db, profile.user_id, batch_id)
    if batch is None:
        raise HTTPException(status_code=404, detail="Lot introuvable.")
    return batch


@router.put("/{batch_id}", response_model=BatchResponse, summary="Modifier un lot")
def update_batch(
    batch_id: uuid.UUID,
    data: BatchUpdate,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    batch = batch_service.update_batch(db, profile.user_id, batch_id, data)
    if batch is None:
        raise HTTPException(status_code=404, detail="Lot introuvable.")
    return batch


@router.delete("/{batch_id}", status_code=204, summary="Supprimer un lot")
def delete_batch(batch_id: uuid.UUID, profile: Profile = Depends(require_teacher), db: Session = Depends(get_db)):
    """Supprime un lot et ses devoirs. Les élèves du lot sont conservés sans lot."""
    if not batch_service.delete_batch(db, profile.user_id, batch_id):
        raise HTTPException(status_code=404, detail="Lot introuvable.")
