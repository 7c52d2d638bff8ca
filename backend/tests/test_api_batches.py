"""
Tests d'intégration API pour les lots.
Testent les URLs, les codes HTTP, la validation et le contrôle de rôle.
"""

import uuid
from datetime import datetime
from unittest.mock import patch

from app.schemas.batch import BatchResponse


# --- Helper ---

def make_batch_response(**kwargs) -> BatchResponse:
    return BatchResponse(
        id=kwargs.get("id", uuid.uuid4()),
        name=kwargs.get("name", "Math Grade 5 - Morning"),
        description=kwargs.get("description"),
        teacher_id=kwargs.get("teacher_id", uuid.uuid4()),
        max_students=kwargs.get("max_students", 30),
        is_active=kwargs.get("is_active", True),
        created_at=datetime.now(),
    )


# ============================================================
# POST /api/v1/batches
# ============================================================

def test_create_batch_succes(teacher_client, teacher_profile):
    """Création d'un lot valide → 201, actif et 30 places par défaut."""
    with patch("app.routers.batches.batch_service.create_batch") as mock:
        mock.return_value = make_batch_response(teacher_id=teacher_profile.user_id)

        response = teacher_client.post("/api/v1/batches", json={"name": "Math Grade 5 - Morning"})

    assert response.status_code == 201
    assert response.json()["is_active"] is True
    assert response.json()["max_students"] == 30
    assert mock.call_args.args[1] == teacher_profile.user_id


def test_create_batch_nom_vide(teacher_client):
    """Nom vide → 422, aucun appel au service."""
    with patch("app.routers.batches.batch_service.create_batch") as mock:
        response = teacher_client.post("/api/v1/batches", json={"name": "   "})

    assert response.status_code == 422
    mock.assert_not_called()


def test_create_batch_super_admin_redirige(admin_client):
    """Un super-admin n'accède pas aux écrans enseignant → 303 vers son tableau."""
    response = admin_client.post(
        "/api/v1/batches", json={"name": "Math"}, follow_redirects=False,
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/api/v1/dashboards/admin"


def test_create_batch_non_connecte(client):
    response = client.post("/api/v1/batches", json={"name": "Math"}, follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/auth"


# ============================================================
# GET /api/v1/batches
# ============================================================

def test_list_batches_succes(teacher_client):
    with patch("app.routers.batches.batch_service.get_batches") as mock:
        mock.return_value = [make_batch_response(), make_batch_response(name="Science")]
        response = teacher_client.get("/api/v1/batches")

    assert response.status_code == 200
    assert len(response.json()) == 2
    assert mock.call_args.kwargs["active_only"] is False


def test_list_batches_actifs(teacher_client):
    with patch("app.routers.batches.batch_service.get_batches") as mock:
        mock.return_value = []
        response = teacher_client.get("/api/v1/batches?active=true")

    assert response.status_code == 200
    assert mock.call_args.kwargs["active_only"] is True


# ============================================================
# GET / PUT / DELETE /api/v1/batches/{id}
# ============================================================

def test_get_batch_introuvable(teacher_client):
    with patch("app.routers.batches.batch_service.get_batch") as mock:
        mock.return_value = None
        response = teacher_client.get(f"/api/v1/batches/{uuid.uuid4()}")

    assert response.status_code == 404


def test_get_batch_id_invalide(teacher_client):
    response = teacher_client.get("/api/v1/batches/pas-un-uuid")
    assert response.status_code == 422


def test_update_batch_succes(teacher_client):
    with patch("app.routers.batches.batch_service.update_batch") as mock:
        mock.return_value = make_batch_response(is_active=False)
        response = teacher_client.put(f"/api/v1/batches/{uuid.uuid4()}", json={"is_active": False})

    assert response.status_code == 200
    assert response.json()["is_active"] is False


def test_delete_batch_succes(teacher_client):
    with patch("app.routers.batches.batch_service.delete_batch") as mock:
        mock.return_value = True
        response = teacher_client.delete(f"/api/v1/batches/{uuid.uuid4()}")

    assert response.status_code == 204


def test_delete_batch_introuvable(teacher_client):
    with patch("app.routers.batches.batch_service.delete_batch") as mock:
        mock.return_value = False
        response = teacher_client.delete(f"/api/v1/batches/{uuid.uuid4()}")

    assert response.status_code == 404
