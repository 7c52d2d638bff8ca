"""
Point d'entrée principal de l'API StudyCubs.
Démarrage : uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

import app.models  # noqa: F401 : enregistre tous les modèles dans Base.metadata avant les routers
from app.config import settings
from app.dependencies import AccessRedirect
from app.routers import assignments, batches, dashboards, franchise_pages, student_portal, students

logger = logging.getLogger(__name__)

app = FastAPI(
    title="StudyCubs API",
    description="API de gestion des centres de soutien scolaire : lots, élèves, devoirs, portail élève, pages franchise",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# CORS : autorise tous les ports localhost en développement (à restreindre en production).
# allow_credentials est nécessaire pour le cookie de session élève.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


app.include_router(dashboards.router)
app.include_router(batches.router)
app.include_router(students.router)
app.include_router(assignments.router)
app.include_router(student_portal.router)
app.include_router(franchise_pages.router)


@app.exception_handler(AccessRedirect)
async def access_redirect_handler(request: Request, exc: AccessRedirect) -> RedirectResponse:
    """Redirige sans rendre le contenu protégé ; efface la session élève si elle est en cause."""
    response = RedirectResponse(url=exc.location, status_code=303)
    if exc.clear_student_session:
        response.delete_cookie(settings.STUDENT_SESSION_COOKIE, path="/")
    return response


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue. Veuillez réessayer."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "StudyCubs API", "version": "0.1.0"}
