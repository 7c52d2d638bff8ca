"""
Router des pages vitrines des franchises.
Gestion réservée au super-admin ; lecture publique des pages publiées par slug.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_admin
from app.schemas.franchise_page import (
    FranchisePageCreate,
    FranchisePageResponse,
    FranchisePageUpdate,
    PublicFranchisePage,
    SeoContent,
    SeoPreviewRequest,
)
from app.services import franchise_service

router = APIRouter(prefix="/api/v1/franchise-pages", tags=["Pages franchise"])


@router.post("/seo-preview", response_model=SeoContent, summary="Générer le contenu SEO")
def seo_preview(data: SeoPreviewRequest, _admin=Depends(require_admin)):
    """Génère titre, meta, sections et JSON-LD pour une ville sans rien enregistrer."""
    return franchise_service.generate_seo_content(data.city, data.state)


@router.get("", response_model=List[FranchisePageResponse], summary="Lister les pages franchise")
def list_pages(_admin=Depends(require_admin), db: Session = Depends(get_db)):
    return franchise_service.get_pages(db)


@router.post("", response_model=FranchisePageResponse, status_code=201, summary="Créer une page franchise")
def create_page(data: FranchisePageCreate, _admin=Depends(require_admin), db: Session = Depends(get_db)):
    """Crée la page d'une ville ; les champs SEO non fournis sont générés."""
    try:
        return franchise_service.create_page(db, data)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/{page_id}", response_model=FranchisePageResponse, summary="Modifier une page franchise")
def update_page(
    page_id: uuid.UUID,
    data: FranchisePageUpdate,
    _admin=Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        page = franchise_service.update_page(db, page_id, data)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if page is None:
        raise HTTPException(status_code=404, detail="Page franchise introuvable.")
    return page


@router.delete("/{page_id}", status_code=204, summary="Supprimer une page franchise")
def delete_page(page_id: uuid.UUID, _admin=Depends(require_admin), db: Session = Depends(get_db)):
    if not franchise_service.delete_page(db, page_id):
        raise HTTPException(status_code=404, detail="Page franchise introuvable.")


@router.get("/by-slug/{slug}", response_model=PublicFranchisePage, summary="Page franchise publique")
def get_public_page(slug: str, db: Session = Depends(get_db)):
    """Page publiée d'une ville (ex: /studycubs-pune-maharashtra → slug "pune-maharashtra")."""
    page = franchise_service.get_public_page(db, slug)
    if page is None:
        raise HTTPException(status_code=404, detail="Page franchise introuvable.")
    return page
