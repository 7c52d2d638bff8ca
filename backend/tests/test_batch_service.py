"""
Tests unitaires pour le service de gestion des lots.
"""

import uuid
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from app.models.batch import Batch
from app.schemas.batch import BatchCreate, BatchUpdate
from app.services.batch_service import (
    create_batch,
    delete_batch,
    get_batch,
    get_batches,
    update_batch,
)


TEACHER_ID = uuid.uuid4()


# --- Helpers ---

def fake_refresh(obj):
    """Simule les valeurs posées par PostgreSQL à l'insertion."""
    if obj.id is None:
        obj.id = uuid.uuid4()
    if obj.created_at is None:
        obj.created_at = datetime.now()


def make_batch(teacher_id=TEACHER_ID, **kwargs) -> Batch:
    return Batch(
        id=kwargs.get("id", uuid.uuid4()),
        name=kwargs.get("name", "Math Grade 5 - Morning"),
        description=kwargs.get("description"),
        teacher_id=teacher_id,
        max_students=kwargs.get("max_students", 30),
        is_active=kwargs.get("is_active", True),
        created_at=datetime.now(),
    )


def make_db_mock(batch=None):
    db = MagicMock()
    db.get.return_value = batch
    db.refresh.side_effect = fake_refresh
    db.execute.return_value.scalars.return_value.all.return_value = []
    return db


# --- Validation des schémas ---

def test_batch_create_nom_vide_rejete():
    with pytest.raises(ValidationError):
        BatchCreate(name="   ")


def test_batch_create_valeurs_par_defaut():
    b = BatchCreate(name="  Math Grade 5 - Morning ")
    assert b.name == "Math Grade 5 - Morning"
    assert b.max_students == 30
    assert b.is_active is True


def test_batch_create_nom_trop_long_rejete():
    with pytest.raises(ValidationError):
        BatchCreate(name="M" * 256)


def test_batch_create_capacite_nulle_rejetee():
    with pytest.raises(ValidationError):
        BatchCreate(name="Science", max_students=0)


# --- create_batch ---

def test_create_batch_succes():
    db = make_db_mock()

    result = create_batch(db, TEACHER_ID, BatchCreate(name="Math Grade 5 - Morning"))

    db.add.assert_called_once()
    db.commit.assert_called_once()
    assert result.name == "Math Grade 5 - Morning"
    assert result.max_students == 30
    assert result.is_active is True
    assert result.teacher_id == TEACHER_ID


def test_create_batch_inactif():
    db = make_db_mock()
    result = create_batch(db, TEACHER_ID, BatchCreate(name="Vacances", is_active=False))
    assert result.is_active is False


# --- get_batches / get_batch ---

def test_get_batches_retourne_les_lots():
    db = make_db_mock()
    db.execute.return_value.scalars.return_value.all.return_value = [make_batch(), make_batch(name="Science")]

    result = get_batches(db, TEACHER_ID)

    assert [b.name for b in result] == ["Math Grade 5 - Morning", "Science"]


def test_get_batches_actifs_seulement_filtre():
    db = make_db_mock()
    get_batches(db, TEACHER_ID, active_only=True)

    query = db.execute.call_args.args[0]
    assert "is_active" in str(query)


def test_get_batch_autre_enseignant():
    db = make_db_mock(make_batch(teacher_id=uuid.uuid4()))
    assert get_batch(db, TEACHER_ID, uuid.uuid4()) is None


def test_get_batch_introuvable():
    assert get_batch(make_db_mock(None), TEACHER_ID, uuid.uuid4()) is None


# --- update_batch ---

def test_update_batch_champs_fournis_seulement():
    batch = make_batch(description="Matin")
    db = make_db_mock(batch)

    result = update_batch(db, TEACHER_ID, batch.id, BatchUpdate(is_active=False))

    assert result.is_active is False
    assert result.description == "Matin"
    db.commit.assert_called_once()


def test_update_batch_autre_enseignant():
    db = make_db_mock(make_batch(teacher_id=uuid.uuid4()))
    assert update_batch(db, TEACHER_ID, uuid.uuid4(), BatchUpdate(name="X")) is None
    db.commit.assert_not_called()


# --- delete_batch ---

def test_delete_batch_succes():
    batch = make_batch()
    db = make_db_mock(batch)

    assert delete_batch(db, TEACHER_ID, batch.id) is True
    db.delete.assert_called_once_with(batch)


def test_delete_batch_introuvable():
    db = make_db_mock(None)
    assert delete_batch(db, TEACHER_ID, uuid.uuid4()) is False
    db.delete.assert_not_called()
