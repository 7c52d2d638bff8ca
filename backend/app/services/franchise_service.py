"""
Service métier des pages vitrines des franchises.

Le contenu SEO (titre, meta description, mots-clés, sections, JSON-LD schema.org)
est généré à partir de la ville et de l'État ; tout champ fourni explicitement est conservé.
"""

import json
import re
import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.models.franchise_page import FranchisePage
from app.schemas.franchise_page import (
    ContactInfo,
    FranchisePageCreate,
    FranchisePageResponse,
    FranchisePageUpdate,
    PageMeta,
    PublicFranchisePage,
    SeoContent,
)

logger = logging.getLogger(__name__)

SEO_FIELDS = tuple(SeoContent.model_fields)


def make_slug(city: str, state: str) -> str:
    """Ex: ("Navi Mumbai", "Maharashtra") → "navi-mumbai-maharashtra"."""
    return re.sub(r"[^a-z0-9]+", "-", f"{city} {state}".lower()).strip("-")


def generate_seo_content(city: str, state: str) -> SeoContent:
    brand = settings.BRAND_NAME
    city, state = city.strip(), state.strip()
    c_city, c_state = city.capitalize(), state.capitalize()
    brand_keyword = brand.lower()

    schema = {
        "@context": "https://schema.org",
        "@type": "EducationalOrganization",
        "name": f"{brand} {c_city}",
        "description": f"Premium coaching classes in {c_city}, {c_state}",
        "address": {
            "@type": "PostalAddress",
            "addressLocality": c_city,
            "addressRegion": c_state,
            "addressCountry": settings.FRANCHISE_COUNTRY,
        },
        "areaServed": f"{c_city}, {c_state}",
        "educationalCredentialAwarded": "Academic Excellence Certificate",
    }

    return SeoContent(
        title=(
            f"Best Coaching Classes in {c_city} | {brand} {c_city} | "
            f"Top Educational Center {c_state}"
        ),
        meta_description=(
            f"Join {brand} {c_city} - Premium coaching classes for kids in {c_city}, {c_state}. "
            "Expert teachers, proven methods, personalized learning. Enroll today for academic excellence!"
        ),
        meta_keywords=", ".join([
            f"coaching classes {city}",
            f"education center {city}",
            f"tutoring {city}",
            f"{brand_keyword} {city}",
            f"best coaching {city} {state}",
            f"kids learning {city}",
            f"academic support {city}",
            f"teaching center {city}",
        ]),
        h1_heading=f"{brand} {c_city} - Building Future Champions",
        hero_subtitle=f"Premium Educational Excellence in {c_city}",
        hero_description=(
            f"Discover {c_city}'s most trusted educational partner. At {brand} {c_city}, "
            "we nurture young minds with innovative teaching methods, personalized attention, "
            "and a proven track record of success. Join hundreds of students who've achieved "
            "their academic dreams with us."
        ),
        about_section=(
            f"Welcome to {brand} {c_city}, where education meets excellence! Located in the heart of "
            f"{c_city}, {c_state}, we are dedicated to providing world-class coaching that transforms "
            "students into confident learners and future leaders. Our state-of-the-art facility "
            "combines traditional teaching values with modern educational technology."
        ),
        programs_section=(
            f"Our comprehensive programs in {c_city} include: Foundation Courses for Classes 1-5, "
            "Advanced Learning for Classes 6-10, Competitive Exam Preparation, Skill Development "
            "Workshops, Personality Development Classes, and Special Holiday Programs. Each program "
            f"is designed specifically for {c_city} students' needs."
        ),
        why_choose_section=(
            f"Why {brand} {c_city} stands out: "
            f"✓ Located conveniently in {c_city} for easy access "
            f"✓ Experienced local teachers who understand {c_state} curriculum "
            "✓ Small batch sizes ensuring personal attention "
            "✓ Regular parent-teacher meetings "
            f"✓ Proven track record in {c_city} "
            "✓ Modern infrastructure with digital learning tools"
        ),
        local_keywords=", ".join([
            f"{city} coaching",
            f"{city} tuition",
            f"{city} education",
            f"{state} learning center",
            f"{city} academic support",
            f"best teachers {city}",
            f"{city} study center",
        ]),
        schema_markup=json.dumps(schema, indent=2),
    )


def create_page(db: Session, data: FranchisePageCreate) -> FranchisePageResponse:
    """
    Crée une page franchise ; les champs SEO absents sont générés.
    Lève une ValueError si une page existe déjà pour cette ville et cet État.
    """
    generated = generate_seo_content(data.city, data.state)
    seo = {field: getattr(data, field) or getattr(generated, field) for field in SEO_FIELDS}

    page = FranchisePage(
        city=data.city,
        state=data.state,
        slug=make_slug(data.city, data.state),
        is_published=data.is_published,
        **seo,
        **_contact_columns(data.contact_info),
    )
    db.add(page)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError(f"Une page franchise existe déjà pour {data.city}, {data.state}.")
    db.refresh(page)

    logger.info("Page franchise créée : %s (%s)", page.slug, page.id)
    return _to_response(page)


def get_pages(db: Session) -> list[FranchisePageResponse]:
    pages = db.execute(
        select(FranchisePage).order_by(FranchisePage.city)
    ).scalars().all()
    return [_to_response(p) for p in pages]


def update_page(db: Session, page_id: uuid.UUID, data: FranchisePageUpdate) -> Optional[FranchisePageResponse]:
    """Met à jour les champs fournis. Le slug suit la ville et l'État."""
    page = db.get(FranchisePage, page_id)
    if page is None:
        return None

    update_data = data.model_dump(exclude_unset=True, exclude={"contact_info"})
    for field, value in update_data.items():
        setattr(page, field, value)
    if data.contact_info is not None:
        for column, value in _contact_columns(data.contact_info).items():
            setattr(page, column, value)
    page.slug = make_slug(page.city, page.state)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError(f"Une page franchise existe déjà pour {page.city}, {page.state}.")
    db.refresh(page)
    return _to_response(page)


def delete_page(db: Session, page_id: uuid.UUID) -> bool:
    page = db.get(FranchisePage, page_id)
    if page is None:
        return False
    db.delete(page)
    db.commit()
    return True


def get_public_page(db: Session, slug: str) -> Optional[PublicFranchisePage]:
    """Page publiée correspondant au slug, avec ses balises meta. None sinon."""
    page = db.execute(
        select(FranchisePage).where(
            FranchisePage.slug == slug.lower(),
            FranchisePage.is_published.is_(True),
        )
    ).scalar()
    if page is None:
        return None

    return PublicFranchisePage(
        page=_to_response(page),
        meta=PageMeta(
            title=page.title or f"{settings.BRAND_NAME} {page.city.capitalize()}",
            description=page.meta_description or "",
            keywords=[k.strip() for k in (page.meta_keywords or "").split(",") if k.strip()],
        ),
    )


def _contact_columns(contact: ContactInfo) -> dict:
    return {
        "contact_address": contact.address,
        "contact_phone": contact.phone,
        "contact_email": contact.email,
        "contact_hours": contact.hours,
    }


def _to_response(page: FranchisePage) -> FranchisePageResponse:
    return FranchisePageResponse(
        id=page.id,
        city=page.city,
        state=page.state,
        slug=page.slug,
        **{field: getattr(page, field) for field in SEO_FIELDS},
        contact_info=ContactInfo(
            address=page.contact_address or "",
            phone=page.contact_phone or "",
            email=page.contact_email or "",
            hours=page.contact_hours or "",
        ),
        is_published=bool(page.is_published),
        created_at=page.created_at,
        updated_at=page.updated_at,
    )
