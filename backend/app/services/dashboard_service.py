"""
Agrégation des données des tableaux de bord enseignant et super-admin.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.assignment import Assignment
from app.models.batch import Batch
from app.models.profile import Profile
from app.models.student import Student
from app.schemas.assignment import AssignmentResponse
from app.schemas.batch import BatchResponse
from app.schemas.dashboard import (
    AdminDashboard,
    PlatformStats,
    TeacherDashboard,
    TeacherStats,
    TeacherSummary,
)
from app.schemas.profile import ProfileResponse
from app.schemas.student import StudentResponse
from app.services import assignment_service, batch_service, profile_service, student_service

logger = logging.getLogger(__name__)


def get_teacher_dashboard(db: Session, profile: Profile) -> TeacherDashboard:
    """Lots, élèves et devoirs de l'enseignant avec les compteurs de l'en-tête."""
    batches = batch_service.get_batches(db, profile.user_id)
    students = student_service.get_students(db, profile.user_id)
    assignments = assignment_service.get_assignments(db, profile.user_id)

    return TeacherDashboard(
        profile=ProfileResponse.model_validate(profile),
        stats=TeacherStats(
            total_students=len(students),
            active_batches=sum(1 for b in batches if b.is_active),
            total_assignments=len(assignments),
            published_assignments=sum(1 for a in assignments if a.is_published),
        ),
        batches=batches,
        students=students,
        assignments=assignments,
    )


def get_admin_dashboard(db: Session, profile: Profile) -> AdminDashboard:
    """Vue plateforme : tous les enseignants (avec compteurs), élèves, lots et devoirs."""
    teachers = profile_service.list_teachers(db)

    students = [StudentResponse.model_validate(s) for s in db.execute(
        select(Student).order_by(Student.enrollment_date.desc())
    ).scalars().all()]
    batches = [BatchResponse.model_validate(b) for b in db.execute(
        select(Batch).order_by(Batch.created_at.desc())
    ).scalars().all()]
    assignments = [AssignmentResponse.model_validate(a) for a in db.execute(
        select(Assignment).order_by(Assignment.created_at.desc())
    ).scalars().all()]

    batch_counts = dict(db.execute(
        select(Batch.teacher_id, func.count()).group_by(Batch.teacher_id)
    ).all())
    student_counts = dict(db.execute(
        select(Student.teacher_id, func.count()).group_by(Student.teacher_id)
    ).all())

    summaries = [
        TeacherSummary(
            **ProfileResponse.model_validate(t).model_dump(),
            batch_count=batch_counts.get(t.user_id, 0),
            student_count=student_counts.get(t.user_id, 0),
        )
        for t in teachers
    ]

    return AdminDashboard(
        profile=ProfileResponse.model_validate(profile),
        stats=PlatformStats(
            total_teachers=len(summaries),
            active_teachers=sum(1 for t in summaries if t.is_active),
            total_students=len(students),
            active_students=sum(1 for s in students if s.is_active),
            total_batches=len(batches),
            active_batches=sum(1 for b in batches if b.is_active),
            total_assignments=len(assignments),
            published_assignments=sum(1 for a in assignments if a.is_published),
        ),
        teachers=summaries,
        students=students,
        batches=batches,
        assignments=assignments,
    )
