"""
Tests unitaires pour les rendus de devoirs (portail élève).
"""

import uuid
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from app.models.assignment import Assignment
from app.models.student import Student
from app.schemas.student import PublicStudentRecord
from app.schemas.submission import SubmissionCreate
from app.services.submission_service import ALREADY_SUBMITTED, submit_assignment


TEACHER_ID = uuid.uuid4()
BATCH_ID = uuid.uuid4()


# --- Helpers ---

def fake_refresh(obj):
    if obj.id is None:
        obj.id = uuid.uuid4()
    if obj.submitted_at is None:
        obj.submitted_at = datetime.now()


def make_context(is_published=True, assignment_batch=BATCH_ID, student_batch=BATCH_ID):
    student = Student(id=uuid.uuid4(), full_name="Aarav Sharma", teacher_id=TEACHER_ID, batch_id=student_batch)
    assignment = Assignment(
        id=uuid.uuid4(), title="Fractions", batch_id=assignment_batch,
        teacher_id=TEACHER_ID, is_published=is_published,
    )
    db = MagicMock()
    db.get.side_effect = lambda model, _id: {Student: student, Assignment: assignment}.get(model)
    db.execute.return_value.scalar.return_value = None
    db.refresh.side_effect = fake_refresh
    record = PublicStudentRecord(id=student.id, full_name=student.full_name, teacher_id=TEACHER_ID, batch_id=student_batch)
    return db, record, assignment


# --- Validation ---

def test_rendu_texte_vide_rejete():
    with pytest.raises(ValidationError, match="Veuillez saisir le texte de votre rendu."):
        SubmissionCreate(submission_text="   ")


# --- submit_assignment ---

def test_rendu_succes():
    db, record, assignment = make_context()

    result = submit_assignment(db, record, assignment.id, SubmissionCreate(submission_text="1/2 + 1/4 = 3/4"))

    db.add.assert_called_once()
    db.commit.assert_called_once()
    assert result.assignment_id == assignment.id
    assert result.student_id == record.id
    assert result.submission_text == "1/2 + 1/4 = 3/4"
    assert result.marks_obtained is None


def test_second_rendu_refuse():
    db, record, assignment = make_context()
    db.execute.return_value.scalar.return_value = uuid.uuid4()

    with pytest.raises(ValueError, match=ALREADY_SUBMITTED):
        submit_assignment(db, record, assignment.id, SubmissionCreate(submission_text="Encore"))
    db.add.assert_not_called()


def test_rendu_concurrent_contrainte_unique():
    db, record, assignment = make_context()
    db.commit.side_effect = IntegrityError("INSERT", {}, Exception("uq_submission_assignment_student"))

    with pytest.raises(ValueError, match=ALREADY_SUBMITTED):
        submit_assignment(db, record, assignment.id, SubmissionCreate(submission_text="Double clic"))
    db.rollback.assert_called_once()


def test_rendu_devoir_non_publie():
    db, record, assignment = make_context(is_published=False)
    assert submit_assignment(db, record, assignment.id, SubmissionCreate(submission_text="x")) is None
    db.add.assert_not_called()


def test_rendu_devoir_d_un_autre_lot():
    db, record, assignment = make_context(assignment_batch=uuid.uuid4())
    assert submit_assignment(db, record, assignment.id, SubmissionCreate(submission_text="x")) is None


def test_rendu_devoir_introuvable():
    db, record, _ = make_context()
    db.get.side_effect = lambda model, _id: None
    assert submit_assignment(db, record, uuid.uuid4(), SubmissionCreate(submission_text="x")) is None
