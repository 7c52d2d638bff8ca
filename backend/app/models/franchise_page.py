"""
Modèle SQLAlchemy pour les pages vitrines des franchises (une par ville).
"""

import uuid
from sqlalchemy import Boolean, Column, DateTime, String, Text, func
from sqlalchemy.dialects.postgresql import UUID

from app.database import Base


class FranchisePage(Base):
    __tablename__ = "franchise_pages"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    slug = Column(String(255), unique=True, nullable=False)  # Ex: "pune-maharashtra"

    # SEO
    title = Column(String(500), nullable=True)
    meta_description = Column(Text, nullable=True)
    meta_keywords = Column(Text, nullable=True)
    local_keywords = Column(Text, nullable=True)
    schema_markup = Column(Text, nullable=True)  # JSON-LD sérialisé

    # Contenu
    h1_heading = Column(String(500), nullable=True)
    hero_subtitle = Column(String(500), nullable=True)
    hero_description = Column(Text, nullable=True)
    about_section = Column(Text, nullable=True)
    programs_section = Column(Text, nullable=True)
    why_choose_section = Column(Text, nullable=True)

    # Coordonnées du centre
    contact_address = Column(String(500), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    contact_email = Column(String(255), nullable=True)
    contact_hours = Column(String(255), nullable=True)

    is_published = Column(Boolean, default=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
