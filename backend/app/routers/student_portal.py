"""
Router du portail élève.
Connexion par identifiant / mot de passe générés par l'enseignant ;
la session est la fiche publique de l'élève stockée dans un cookie.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_student, get_student_session_store
from app.schemas.assignment import StudentAssignment
from app.schemas.student import PublicStudentRecord
from app.schemas.student_auth import StudentLoginRequest, StudentLoginResponse
from app.schemas.submission import SubmissionCreate, SubmissionResponse
from app.services import student_auth_service, submission_service
from app.services.session_store import StudentSessionStore

router = APIRouter(prefix="/api/v1/student", tags=["Portail élève"])


@router.post("/login", response_model=StudentLoginResponse, summary="Connexion élève")
def login(
    data: StudentLoginRequest,
    store: StudentSessionStore = Depends(get_student_session_store),
    db: Session = Depends(get_db),
):
    """
    Vérifie les identifiants et ouvre la session élève.
    Un champ vide est rejeté (422) sans interroger le backend ;
    un échec retourne 401 avec un message générique.
    """
    result = student_auth_service.login(db, store, data)
    if not result.success:
        raise HTTPException(status_code=401, detail=result.message)
    return StudentLoginResponse(success=True, student=result.student)


@router.post("/logout", status_code=204, summary="Déconnexion élève")
def logout(store: StudentSessionStore = Depends(get_student_session_store)):
    student_auth_service.logout(store)


@router.get("/me", response_model=PublicStudentRecord, summary="Élève connecté")
def get_me(student: PublicStudentRecord = Depends(get_current_student)):
    return student


@router.get("/assignments", response_model=List[StudentAssignment], summary="Devoirs de l'élève")
def list_assignments(
    student: PublicStudentRecord = Depends(get_current_student),
    db: Session = Depends(get_db),
):
    """Devoirs publiés du lot de l'élève avec l'état de ses rendus (échéances passées incluses)."""
    return submission_service.list_assignments(db, student)


@router.post(
    "/assignments/{assignment_id}/submissions",
    response_model=SubmissionResponse,
    status_code=201,
    summary="Rendre un devoir",
)
def submit_assignment(
    assignment_id: uuid.UUID,
    data: SubmissionCreate,
    student: PublicStudentRecord = Depends(get_current_student),
    db: Session = Depends(get_db),
):
    """Enregistre le rendu de l'élève. Un seul rendu par devoir (409 au second)."""
    try:
        submission = submission_service.submit_assignment(db, student, assignment_id, data)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if submission is None:
        raise HTTPException(status_code=404, detail="Devoir introuvable.")
    return submission
