"""
Configuration partagée pour tous les tests.
Override la dépendance get_db pour éviter toute connexion réelle à PostgreSQL,
et fournit des profils enseignant / super-admin déjà authentifiés.
"""

import uuid
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from app.database import get_db
from app.dependencies import get_current_profile
from app.main import app
from app.models.profile import Profile


def _make_profile(role: str, full_name: str) -> Profile:
    return Profile(
        id=uuid.uuid4(),
        user_id=uuid.uuid4(),
        full_name=full_name,
        email=f"{role}@studycubs.test",
        role=role,
        is_active=True,
        created_at=datetime.now(),
    )


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def client(mock_db):
    """Client HTTP de test avec la BDD mockée."""
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def teacher_profile():
    return _make_profile("teacher", "Priya Nair")


@pytest.fixture
def admin_profile():
    return _make_profile("super_admin", "Rahul Mehta")


@pytest.fixture
def teacher_client(client, teacher_profile):
    """Client authentifié en tant qu'enseignant (le contrôle de rôle reste actif)."""
    app.dependency_overrides[get_current_profile] = lambda: teacher_profile
    return client


@pytest.fixture
def admin_client(client, admin_profile):
    """Client authentifié en tant que super-admin."""
    app.dependency_overrides[get_current_profile] = lambda: admin_profile
    return client
