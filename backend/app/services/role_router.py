"""
Aiguillage des utilisateurs vers leur tableau de bord selon leur rôle.

Table unique rôle → tableau de bord autorisé, réévaluée à chaque entrée protégée :
- super_admin → tableau de bord admin (visite du tableau enseignant → redirection admin)
- teacher     → tableau de bord enseignant (visite du tableau admin → redirection enseignant)
- autre rôle / pas de profil → page de connexion
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.config import settings
from app.schemas.profile import Role


class Dashboard(str, Enum):
    ADMIN = "admin"
    TEACHER = "teacher"


DASHBOARD_PATHS = {
    Dashboard.ADMIN: "/api/v1/dashboards/admin",
    Dashboard.TEACHER: "/api/v1/dashboards/teacher",
}

ROLE_DASHBOARDS = {
    Role.SUPER_ADMIN: Dashboard.ADMIN,
    Role.TEACHER: Dashboard.TEACHER,
}


@dataclass(frozen=True)
class RouteDecision:
    allowed: bool
    redirect_to: Optional[str] = None


def parse_role(value: Optional[str]) -> Optional[Role]:
    if value is None:
        return None
    try:
        return Role(value)
    except ValueError:
        return None


def resolve(role: Optional[str], requested: Dashboard) -> RouteDecision:
    """Décide si le rôle peut atteindre le tableau demandé, sinon où le rediriger."""
    home = ROLE_DASHBOARDS.get(parse_role(role))
    if home is None:
        return RouteDecision(allowed=False, redirect_to=settings.SIGN_IN_PATH)
    if home is requested:
        return RouteDecision(allowed=True)
    return RouteDecision(allowed=False, redirect_to=DASHBOARD_PATHS[home])
