"""
Dépendances FastAPI d'identification.

- Enseignants / super-admin : jeton Bearer du fournisseur d'identité → profil → rôle,
  réévalués à chaque requête protégée (aucune autorisation mise en cache).
- Élèves : session stockée côté client (cookie), lue via StudentSessionStore.
"""

import uuid
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.models.profile import Profile
from app.schemas.student import PublicStudentRecord
from app.security import AuthError, decode_access_token
from app.services import profile_service, role_router
from app.services.role_router import Dashboard
from app.services.session_store import CookieStorage, StudentSessionStore

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class AccessRedirect(Exception):
    """Accès refusé : l'utilisateur doit être redirigé (contenu protégé jamais rendu)."""

    def __init__(self, location: str, clear_student_session: bool = False):
        super().__init__(location)
        self.location = location
        self.clear_student_session = clear_student_session


def get_current_profile(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Profile:
    """Résout le jeton en profil. Pas de jeton valide → connexion ; pas de profil → 404."""
    if credentials is None:
        raise AccessRedirect(settings.SIGN_IN_PATH)

    try:
        payload = decode_access_token(credentials.credentials)
        user_id = uuid.UUID(str(payload["sub"]))
    except (AuthError, ValueError) as exc:
        logger.info("Jeton refusé : %s", exc)
        raise AccessRedirect(settings.SIGN_IN_PATH)

    profile = profile_service.lookup_profile(db, user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profil introuvable.")
    return profile


def require_dashboard(dashboard: Dashboard):
    """Construit une dépendance qui n'accepte que le rôle rattaché au tableau de bord."""

    def dependency(profile: Profile = Depends(get_current_profile)) -> Profile:
        role = profile.role if profile.is_active is not False else None
        decision = role_router.resolve(role, dashboard)
        if not decision.allowed:
            logger.info(
                "Accès %s refusé au profil %s (rôle %s) → %s",
                dashboard.value, profile.user_id, profile.role, decision.redirect_to,
            )
            raise AccessRedirect(decision.redirect_to)
        return profile

    return dependency


require_teacher = require_dashboard(Dashboard.TEACHER)
require_admin = require_dashboard(Dashboard.ADMIN)


def get_student_session_store(request: Request, response: Response) -> StudentSessionStore:
    return StudentSessionStore(CookieStorage(request.cookies, response))


def get_current_student(
    store: StudentSessionStore = Depends(get_student_session_store),
) -> PublicStudentRecord:
    """Session élève absente ou illisible → effacement et redirection vers la connexion élève."""
    student = store.load()
    if student is None:
        raise AccessRedirect(settings.STUDENT_SIGN_IN_PATH, clear_student_session=True)
    return student
