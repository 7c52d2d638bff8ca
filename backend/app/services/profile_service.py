"""
Lecture des profils (le provisionnement et l'attribution des rôles sont externes).
"""

import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.profile import Profile
from app.schemas.profile import Role


def lookup_profile(db: Session, user_id: uuid.UUID) -> Optional[Profile]:
    """Retourne le profil de l'utilisateur authentifié, ou None s'il n'existe pas."""
    return db.execute(
        select(Profile).where(Profile.user_id == user_id)
    ).scalar()


def list_teachers(db: Session) -> list[Profile]:
    """Retourne tous les profils enseignants, du plus récent au plus ancien."""
    return db.execute(
        select(Profile)
        .where(Profile.role == Role.TEACHER.value)
        .order_by(Profile.created_at.desc())
    ).scalars().all()
