"""
Tests unitaires pour l'agrégation des tableaux de bord.
"""

import uuid
from datetime import date, datetime
from unittest.mock import MagicMock, patch

from app.models.assignment import Assignment
from app.models.batch import Batch
from app.models.profile import Profile
from app.models.student import Student
from app.services.dashboard_service import get_admin_dashboard, get_teacher_dashboard


def make_profile(role="teacher") -> Profile:
    return Profile(
        id=uuid.uuid4(), user_id=uuid.uuid4(), full_name="Priya Nair",
        email="priya@studycubs.test", role=role, is_active=True, created_at=datetime.now(),
    )


def test_tableau_enseignant_compteurs():
    profile = make_profile()
    batches = [MagicMock(is_active=True), MagicMock(is_active=False)]
    assignments = [MagicMock(is_published=True), MagicMock(is_published=False), MagicMock(is_published=True)]

    with patch("app.services.dashboard_service.batch_service.get_batches") as mock_batches, \
         patch("app.services.dashboard_service.student_service.get_students") as mock_students, \
         patch("app.services.dashboard_service.assignment_service.get_assignments") as mock_assignments, \
         patch("app.services.dashboard_service.TeacherDashboard") as mock_dashboard:
        mock_batches.return_value = batches
        mock_students.return_value = [MagicMock()]
        mock_assignments.return_value = assignments

        get_teacher_dashboard(MagicMock(), profile)

    mock_batches.assert_called_once()
    assert mock_batches.call_args.args[1] == profile.user_id
    stats = mock_dashboard.call_args.kwargs["stats"]
    assert stats.total_students == 1
    assert stats.active_batches == 1
    assert stats.total_assignments == 3
    assert stats.published_assignments == 2


def test_tableau_admin_compteurs_par_enseignant():
    admin = make_profile("super_admin")
    teacher = make_profile("teacher")
    other_teacher = make_profile("teacher")
    student = Student(
        id=uuid.uuid4(), full_name="Aarav", teacher_id=teacher.user_id,
        is_active=True, enrollment_date=date.today(),
    )
    batch = Batch(
        id=uuid.uuid4(), name="Math", teacher_id=teacher.user_id,
        max_students=30, is_active=True, created_at=datetime.now(),
    )
    assignment = Assignment(
        id=uuid.uuid4(), title="Fractions", batch_id=batch.id, teacher_id=teacher.user_id,
        total_marks=100, is_published=False, created_at=datetime.now(),
    )

    db = MagicMock()
    db.execute.return_value.scalars.return_value.all.side_effect = [[student], [batch], [assignment]]
    db.execute.return_value.all.side_effect = [[(teacher.user_id, 1)], [(teacher.user_id, 1)]]

    with patch("app.services.dashboard_service.profile_service.list_teachers") as mock_teachers:
        mock_teachers.return_value = [teacher, other_teacher]
        result = get_admin_dashboard(db, admin)

    assert result.stats.total_teachers == 2
    assert result.stats.total_students == 1
    assert result.stats.published_assignments == 0
    counts = {t.user_id: (t.batch_count, t.student_count) for t in result.teachers}
    assert counts[teacher.user_id] == (1, 1)
    assert counts[other_teacher.user_id] == (0, 0)
