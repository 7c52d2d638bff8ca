"""
Router des tableaux de bord.
Chaque entrée réévalue le rôle via la table de role_router :
un rôle non autorisé est redirigé (303) vers son propre tableau ou vers la connexion.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_profile, require_admin, require_teacher
from app.models.profile import Profile
from app.schemas.dashboard import AdminDashboard, TeacherDashboard
from app.schemas.profile import ProfileResponse
from app.services import dashboard_service

router = APIRouter(prefix="/api/v1", tags=["Tableaux de bord"])


@router.get("/me", response_model=ProfileResponse, summary="Profil de l'utilisateur connecté")
def get_me(profile: Profile = Depends(get_current_profile)):
    return profile


@router.get("/dashboards/teacher", response_model=TeacherDashboard, summary="Tableau de bord enseignant")
def teacher_dashboard(profile: Profile = Depends(require_teacher), db: Session = Depends(get_db)):
    """
    Lots, élèves et devoirs de l'enseignant connecté.
    Un super-admin est redirigé vers le tableau admin, tout autre rôle vers la connexion.
    """
    return dashboard_service.get_teacher_dashboard(db, profile)


@router.get("/dashboards/admin", response_model=AdminDashboard, summary="Tableau de bord super-admin")
def admin_dashboard(profile: Profile = Depends(require_admin), db: Session = Depends(get_db)):
    """
    Vue plateforme : enseignants avec compteurs, élèves, lots, devoirs.
    Un enseignant est redirigé vers son tableau, tout autre rôle vers la connexion.
    """
    return dashboard_service.get_admin_dashboard(db, profile)
