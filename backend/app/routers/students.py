"""
Router pour les élèves d'un enseignant.
CRUD : GET/POST /api/v1/students, GET/PUT/DELETE /api/v1/students/{id}
Identifiants : POST /api/v1/students/{id}/credentials (première génération)
               POST /api/v1/students/{id}/credentials/reset (nouveau mot de passe)
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_teacher
from app.models.profile import Profile
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.schemas.student_auth import GeneratedCredentials
from app.services import credential_service, student_service
from app.services.credential_service import CredentialError

router = APIRouter(prefix="/api/v1/students", tags=["Élèves"])


@router.get("", response_model=List[StudentResponse], summary="Lister les élèves")
def list_students(profile: Profile = Depends(require_teacher), db: Session = Depends(get_db)):
    """Retourne les élèves de l'enseignant, les plus récemment inscrits en premier."""
    return student_service.get_students(db, profile.user_id)


@router.post("", response_model=StudentResponse, status_code=201, summary="Inscrire un élève")
def create_student(
    data: StudentCreate,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    """Inscrit un élève. La connexion reste désactivée jusqu'à la génération des identifiants."""
    try:
        return student_service.create_student(db, profile.user_id, data)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{student_id}", response_model=StudentResponse, summary="Détail d'un élève")
def get_student(student_id: uuid.UUID, profile: Profile = Depends(require_teacher), db: Session = Depends(get_db)):
    student = student_service.get_student(db, profile.user_id, student_id)
    if student is None:
        raise HTTPException(status_code=404, detail="Élève introuvable.")
    return student


@router.put("/{student_id}", response_model=StudentResponse, summary="Modifier un élève")
def update_student(
    student_id: uuid.UUID,
    data: StudentUpdate,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    try:
        student = student_service.update_student(db, profile.user_id, student_id, data)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    if student is None:
        raise HTTPException(status_code=404, detail="Élève introuvable.")
    return student


@router.delete("/{student_id}", status_code=204, summary="Supprimer un élève")
def delete_student(student_id: uuid.UUID, profile: Profile = Depends(require_teacher), db: Session = Depends(get_db)):
    """Supprime définitivement un élève. Ses rendus sont supprimés en cascade."""
    if not student_service.delete_student(db, profile.user_id, student_id):
        raise HTTPException(status_code=404, detail="Élève introuvable.")


@router.post(
    "/{student_id}/credentials",
    response_model=GeneratedCredentials,
    status_code=201,
    summary="Générer les identifiants de connexion",
)
def generate_credentials(
    student_id: uuid.UUID,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    """
    Génère l'identifiant et le mot de passe d'un élève sans connexion.

    Le mot de passe en clair n'est retourné qu'ici : il ne pourra plus être relu,
    seulement réinitialisé. À transmettre à l'élève de façon sûre.
    """
    try:
        credentials = credential_service.generate_credentials(db, profile.user_id, student_id)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except CredentialError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if credentials is None:
        raise HTTPException(status_code=404, detail="Élève introuvable.")
    return credentials


@router.post(
    "/{student_id}/credentials/reset",
    response_model=GeneratedCredentials,
    summary="Réinitialiser le mot de passe",
)
def reset_credentials(
    student_id: uuid.UUID,
    profile: Profile = Depends(require_teacher),
    db: Session = Depends(get_db),
):
    """Génère un nouveau mot de passe ; l'identifiant de l'élève ne change pas."""
    try:
        credentials = credential_service.reset_credentials(db, profile.user_id, student_id)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except CredentialError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if credentials is None:
        raise HTTPException(status_code=404, detail="Élève introuvable.")
    return credentials
