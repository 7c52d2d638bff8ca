"""
Modèles SQLAlchemy pour les devoirs et les rendus des élèves.
"""

import uuid
from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import UUID

from app.database import Base


class Assignment(Base):
    """Devoir publié (ou non) pour un lot par son enseignant."""
    __tablename__ = "assignments"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    batch_id = Column(UUID(as_uuid=True), ForeignKey("batches.id", ondelete="CASCADE"), nullable=False)
    teacher_id = Column(UUID(as_uuid=True), ForeignKey("profiles.user_id", ondelete="CASCADE"), nullable=False)
    due_date = Column(DateTime, nullable=True)
    total_marks = Column(Integer, default=100)
    is_published = Column(Boolean, default=False)  # Visible par les élèves du lot si True

    # Métadonnées du fichier joint (l'upload lui-même est externe)
    file_url = Column(String(500), nullable=True)
    file_name = Column(String(255), nullable=True)
    file_size = Column(Integer, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class AssignmentSubmission(Base):
    """Rendu d'un élève. Un seul rendu par (devoir, élève)."""
    __tablename__ = "assignment_submissions"
    __table_args__ = (
        UniqueConstraint("assignment_id", "student_id", name="uq_submission_assignment_student"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    assignment_id = Column(UUID(as_uuid=True), ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False)
    student_id = Column(UUID(as_uuid=True), ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    submission_text = Column(Text, nullable=True)
    attachment_url = Column(String(500), nullable=True)

    # Notation : renseignée par un outil externe, jamais par cette API
    marks_obtained = Column(Integer, nullable=True)
    feedback = Column(Text, nullable=True)
    graded_at = Column(DateTime, nullable=True)
    graded_by = Column(UUID(as_uuid=True), nullable=True)

    submitted_at = Column(DateTime, server_default=func.now())
