"""
Tests d'intégration API pour le portail élève :
connexion, session stockée en cookie, liste des devoirs et rendus.
"""

import uuid
from datetime import date, datetime
from unittest.mock import patch

import pytest

from app.dependencies import get_current_student
from app.main import app
from app.schemas.assignment import StudentAssignment
from app.schemas.student import PublicStudentRecord
from app.schemas.student_auth import AuthenticationResult
from app.schemas.submission import SubmissionResponse
from app.services.submission_service import ALREADY_SUBMITTED


# --- Helpers ---

def make_record(**kwargs) -> PublicStudentRecord:
    return PublicStudentRecord(
        id=kwargs.get("id", uuid.uuid4()),
        full_name="Aarav Sharma",
        teacher_id=uuid.uuid4(),
        batch_id=uuid.uuid4(),
        username="aaravsharma_ab12",
        is_login_enabled=True,
        enrollment_date=date(2025, 6, 1),
    )


@pytest.fixture
def student():
    return make_record()


@pytest.fixture
def student_client(client, student):
    """Client avec une session élève déjà ouverte."""
    app.dependency_overrides[get_current_student] = lambda: student
    return client


# ============================================================
# POST /api/v1/student/login
# ============================================================

def test_login_succes_puis_session(client, student):
    """Une connexion réussie ouvre une session lisible par /student/me."""
    with patch("app.services.student_auth_service.student_procedures.authenticate_student") as mock:
        mock.return_value = AuthenticationResult(success=True, student=student)
        response = client.post(
            "/api/v1/student/login", json={"username": "aaravsharma_ab12", "password": "k3x9p2qa"},
        )

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["student"]["id"] == str(student.id)
    assert "student_session" in response.headers["set-cookie"]

    me = client.get("/api/v1/student/me", follow_redirects=False)
    assert me.status_code == 200
    assert me.json() == response.json()["student"]


def test_login_echec_message_generique(client):
    with patch("app.services.student_auth_service.student_procedures.authenticate_student") as mock:
        mock.return_value = AuthenticationResult(
            success=False, message="Nom d'utilisateur ou mot de passe invalide.",
        )
        response = client.post(
            "/api/v1/student/login", json={"username": "aaravsharma_ab12", "password": "mauvais"},
        )

    assert response.status_code == 401
    assert response.json()["detail"] == "Nom d'utilisateur ou mot de passe invalide."
    assert "student_session" not in response.headers.get("set-cookie", "")


def test_login_champ_vide_sans_appel_backend(client):
    """Identifiant ou mot de passe vide → 422, le backend n'est pas interrogé."""
    with patch("app.services.student_auth_service.student_procedures.authenticate_student") as mock:
        response = client.post("/api/v1/student/login", json={"username": "  ", "password": "k3x9p2qa"})
        response_pwd = client.post("/api/v1/student/login", json={"username": "aarav", "password": ""})

    assert response.status_code == 422
    assert response_pwd.status_code == 422
    mock.assert_not_called()


def test_logout_efface_la_session(client, student):
    with patch("app.services.student_auth_service.student_procedures.authenticate_student") as mock:
        mock.return_value = AuthenticationResult(success=True, student=student)
        client.post("/api/v1/student/login", json={"username": "aaravsharma_ab12", "password": "k3x9p2qa"})

    response = client.post("/api/v1/student/logout")
    assert response.status_code == 204

    me = client.get("/api/v1/student/me", follow_redirects=False)
    assert me.status_code == 303
    assert me.headers["location"] == "/student-login"


# ============================================================
# Accès protégé par la session élève
# ============================================================

def test_me_sans_session_redirige(client):
    response = client.get("/api/v1/student/me", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/student-login"


def test_me_session_corrompue_effacee_et_redirigee(client):
    client.cookies.set("student_session", "corrompu")

    response = client.get("/api/v1/student/assignments", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/student-login"
    assert "student_session" in response.headers["set-cookie"]


# ============================================================
# GET /api/v1/student/assignments
# ============================================================

def test_list_assignments_eleve(student_client, student):
    row = StudentAssignment(
        assignment_id=uuid.uuid4(), title="Fractions", description=None, due_date=None,
        total_marks=100, is_published=True, created_at=datetime.now(), submitted=False,
    )
    with patch("app.routers.student_portal.submission_service.list_assignments") as mock:
        mock.return_value = [row]
        response = student_client.get("/api/v1/student/assignments")

    assert response.status_code == 200
    assert response.json()[0]["submitted"] is False
    assert mock.call_args.args[1] == student


# ============================================================
# POST /api/v1/student/assignments/{id}/submissions
# ============================================================

def test_submit_succes(student_client, student):
    assignment_id = uuid.uuid4()
    with patch("app.routers.student_portal.submission_service.submit_assignment") as mock:
        mock.return_value = SubmissionResponse(
            id=uuid.uuid4(), assignment_id=assignment_id, student_id=student.id,
            submission_text="3/4", attachment_url=None, submitted_at=datetime.now(),
        )
        response = student_client.post(
            f"/api/v1/student/assignments/{assignment_id}/submissions", json={"submission_text": "3/4"},
        )

    assert response.status_code == 201
    assert response.json()["submission_text"] == "3/4"


def test_submit_texte_vide_sans_appel_backend(student_client):
    with patch("app.routers.student_portal.submission_service.submit_assignment") as mock:
        response = student_client.post(
            f"/api/v1/student/assignments/{uuid.uuid4()}/submissions", json={"submission_text": "   "},
        )

    assert response.status_code == 422
    mock.assert_not_called()


def test_submit_deja_rendu(student_client):
    with patch("app.routers.student_portal.submission_service.submit_assignment") as mock:
        mock.side_effect = ValueError(ALREADY_SUBMITTED)
        response = student_client.post(
            f"/api/v1/student/assignments/{uuid.uuid4()}/submissions", json={"submission_text": "Encore"},
        )

    assert response.status_code == 409
    assert response.json()["detail"] == ALREADY_SUBMITTED


def test_submit_devoir_introuvable(student_client):
    with patch("app.routers.student_portal.submission_service.submit_assignment") as mock:
        mock.return_value = None
        response = student_client.post(
            f"/api/v1/student/assignments/{uuid.uuid4()}/submissions", json={"submission_text": "3/4"},
        )

    assert response.status_code == 404
