"""
Router pour les devoirs d'un enseignant.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_teacher
from app.models.profile import Profile
from app.schemas.assignment import AssignmentCreate, AssignmentResponse, AssignmentUpdate
from app.services import assignment_service

router = APIRouter(prefix="/api/v1/assignments", tags=["Devoirs"])


@router.post("", response_model=AssignmentResponse, status_code=201, summary="Créer un devoir")
def create_assignment(
    data: AssignmentCreate,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    """Crée un devoir pour un lot de l'enseignant (non publié par défaut)."""
    try:
        return assignment_service.create_assignment(db, profile.user_id, data)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=List[AssignmentResponse], summary="Lister les devoirs")
def list_assignments(profile: Profile = Depends(require_teacher), db: Session = Depends(get_db)):
    return assignment_service.get_assignments(db, profile.user_id)


@router.get("/{assignment_id}", response_model=AssignmentResponse, summary="Détail d'un devoir")
def get_assignment(
    assignment_id: uuid.UUID,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    assignment = assignment_service.get_assignment(db, profile.user_id, assignment_id)
    if assignment is None:
        raise HTTPException(status_code=404, detail="Devoir introuvable.")
    return assignment


@router.put("/{assignment_id}", response_model=AssignmentResponse, summary="Modifier un devoir")
def update_assignment(
    assignment_id: uuid.UUID,
    data: AssignmentUpdate,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    try:
        assignment = assignment_service.update_assignment(db, profile.user_id, assignment_id, data)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    if assignment is None:
        raise HTTPException(status_code=404, detail="Devoir introuvable.")
    return assignment


@router.patch("/{assignment_id}/publish", response_model=AssignmentResponse, summary="Publier / dépublier")
def toggle_publish(
    assignment_id: uuid.UUID,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    """Inverse la visibilité du devoir pour les élèves du lot."""
    assignment = assignment_service.toggle_published(db, profile.user_id, assignment_id)
    if assignment is None:
        raise HTTPException(status_code=404, detail="Devoir introuvable.")
    return assignment


@router.delete("/{assignment_id}", status_code=204, summary="Supprimer un devoir")
def delete_assignment(
    assignment_id: uuid.UUID,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    if not assignment_service.delete_assignment(db, profile.user_id, assignment_id):
        raise HTTPException(status_code=404, detail="Devoir introuvable.")
