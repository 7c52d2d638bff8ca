"""
Primitives de sécurité : hachage bcrypt des mots de passe élèves
et décodage des jetons émis par le fournisseur d'identité.
"""

from typing import Any

import bcrypt
import jwt

from app.config import settings


class AuthError(Exception):
    pass


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Hash mal formé en base
        return False


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Décode un jeton d'accès du fournisseur d'identité.
    Le sujet (`sub`) est l'identifiant d'authentification de l'utilisateur.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"verify_aud": False},
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthError("Jeton expiré") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthError("Jeton invalide") from exc

    if "sub" not in payload:
        raise AuthError("Jeton sans sujet")
    return payload
