"""
Session élève stockée côté client.

La session est la fiche publique de l'élève sérialisée en JSON dans un emplacement
de stockage client (ici un cookie). Pas d'expiration, pas de signature, pas de révocation :
quiconque présente ce contenu est considéré comme cet élève.
StudentSessionStore isole ce mécanisme derrière save / load / clear.
"""

import base64
import binascii
import logging
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Optional

from fastapi import Response
from pydantic import ValidationError

from app.config import settings
from app.schemas.student import PublicStudentRecord

logger = logging.getLogger(__name__)


class StudentSessionStore:
    def __init__(self, storage: MutableMapping[str, str], key: Optional[str] = None):
        self._storage = storage
        self._key = key or settings.STUDENT_SESSION_COOKIE

    def save(self, record: PublicStudentRecord) -> None:
        self._storage[self._key] = record.model_dump_json()

    def load(self) -> Optional[PublicStudentRecord]:
        """
        Retourne la fiche stockée, ou None si absente.
        Un contenu illisible (JSON invalide, ancien format) est effacé, jamais re-parsé.
        """
        raw = self._storage.get(self._key)
        if raw is None:
            return None
        try:
            return PublicStudentRecord.model_validate_json(raw)
        except ValidationError:
            logger.warning("Session élève illisible, effacée.")
            self.clear()
            return None

    def clear(self) -> None:
        if self._key in self._storage:
            del self._storage[self._key]


class CookieStorage(MutableMapping):
    """
    Stockage clé → chaîne adossé aux cookies d'une requête / réponse.
    Les valeurs sont encodées en base64 url-safe sans padding pour rester valides dans un en-tête Set-Cookie.
    """

    def __init__(self, cookies: Mapping[str, str], response: Response):
        self._values = dict(cookies)
        self._response = response

    def __getitem__(self, key: str) -> str:
        value = self._values[key]
        padded = value + "=" * (-len(value) % 4)
        try:
            return base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
        except (binascii.Error, ValueError):
            # Laissé tel quel : le parsing échouera et la session sera effacée
            return value

    def __setitem__(self, key: str, value: str) -> None:
        encoded = base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii").rstrip("=")
        self._values[key] = encoded
        self._response.set_cookie(key, encoded, httponly=True, samesite="lax", path="/")

    def __delitem__(self, key: str) -> None:
        del self._values[key]
        self._response.delete_cookie(key, path="/")

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)
