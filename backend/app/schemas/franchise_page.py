"""
Schémas Pydantic pour les pages vitrines des franchises.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator


PLACE_MAX_LENGTH = 100  # franchise_pages.city / state


def _check_place_length(v: Optional[str]) -> Optional[str]:
    if v is not None and len(v) > PLACE_MAX_LENGTH:
        raise ValueError(f"La ville et l'État ne peuvent pas dépasser {PLACE_MAX_LENGTH} caractères.")
    return v


class ContactInfo(BaseModel):
    address: str = ""
    phone: str = ""
    email: str = ""
    hours: str = ""


class SeoContent(BaseModel):
    """Contenu généré à partir de la ville et de l'État."""
    title: str
    meta_description: str
    meta_keywords: str
    h1_heading: str
    hero_subtitle: str
    hero_description: str
    about_section: str
    programs_section: str
    why_choose_section: str
    local_keywords: str
    schema_markup: str


class SeoPreviewRequest(BaseModel):
    city: str
    state: str

    @field_validator("city", "state")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("La ville et l'État sont obligatoires.")
        return _check_place_length(v.strip())


class FranchisePageCreate(BaseModel):
    """
    Création d'une page franchise.
    Les champs SEO laissés vides sont générés à partir de la ville et de l'État.
    """
    city: str
    state: str
    title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None
    h1_heading: Optional[str] = None
    hero_subtitle: Optional[str] = None
    hero_description: Optional[str] = None
    about_section: Optional[str] = None
    programs_section: Optional[str] = None
    why_choose_section: Optional[str] = None
    local_keywords: Optional[str] = None
    schema_markup: Optional[str] = None
    contact_info: ContactInfo = ContactInfo()
    is_published: bool = False

    @field_validator("city", "state")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("La ville et l'État sont obligatoires.")
        return _check_place_length(v.strip())


class FranchisePageUpdate(BaseModel):
    city: Optional[str] = None
    state: Optional[str] = None
    title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None
    h1_heading: Optional[str] = None
    hero_subtitle: Optional[str] = None
    hero_description: Optional[str] = None
    about_section: Optional[str] = None
    programs_section: Optional[str] = None
    why_choose_section: Optional[str] = None
    local_keywords: Optional[str] = None
    schema_markup: Optional[str] = None
    contact_info: Optional[ContactInfo] = None
    is_published: Optional[bool] = None

    @field_validator("city", "state")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("La ville et l'État sont obligatoires.")
        return _check_place_length(v.strip() if v else v)


class FranchisePageResponse(BaseModel):
    id: uuid.UUID
    city: str
    state: str
    slug: str
    title: Optional[str]
    meta_description: Optional[str]
    meta_keywords: Optional[str]
    h1_heading: Optional[str]
    hero_subtitle: Optional[str]
    hero_description: Optional[str]
    about_section: Optional[str]
    programs_section: Optional[str]
    why_choose_section: Optional[str]
    local_keywords: Optional[str]
    schema_markup: Optional[str]
    contact_info: ContactInfo
    is_published: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class PageMeta(BaseModel):
    """Balises <head> à appliquer par le front : title, description, keywords."""
    title: str
    description: str
    keywords: List[str]


class PublicFranchisePage(BaseModel):
    """Vue publique d'une page franchise (GET /franchise-pages/by-slug/{slug})."""
    page: FranchisePageResponse
    meta: PageMeta
