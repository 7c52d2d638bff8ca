"""
Schémas Pydantic pour les profils et les rôles.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Role(str, Enum):
    """Rôles attribués par le fournisseur d'identité (fermé : aucune autre valeur)."""
    SUPER_ADMIN = "super_admin"
    TEACHER = "teacher"
    FRANCHISE = "franchise"


class ProfileResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    full_name: Optional[str]
    email: str
    role: str
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
