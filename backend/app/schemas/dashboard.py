"""
Schémas Pydantic des tableaux de bord enseignant et super-admin.
"""

from typing import List

from pydantic import BaseModel

from app.schemas.assignment import AssignmentResponse
from app.schemas.batch import BatchResponse
from app.schemas.profile import ProfileResponse
from app.schemas.student import StudentResponse


class TeacherStats(BaseModel):
    total_students: int
    active_batches: int
    total_assignments: int
    published_assignments: int


class TeacherDashboard(BaseModel):
    profile: ProfileResponse
    stats: TeacherStats
    batches: List[BatchResponse]
    students: List[StudentResponse]
    assignments: List[AssignmentResponse]


class TeacherSummary(ProfileResponse):
    """Enseignant vu par le super-admin, avec ses compteurs."""
    batch_count: int = 0
    student_count: int = 0


class PlatformStats(BaseModel):
    total_teachers: int
    active_teachers: int
    total_students: int
    active_students: int
    total_batches: int
    active_batches: int
    total_assignments: int
    published_assignments: int


class AdminDashboard(BaseModel):
    profile: ProfileResponse
    stats: PlatformStats
    teachers: List[TeacherSummary]
    students: List[StudentResponse]
    batches: List[BatchResponse]
    assignments: List[AssignmentResponse]
