"""
Configuration de la connexion à la base de données PostgreSQL.
Les lignes (profils, lots, élèves, devoirs, rendus) ne sont modifiées qu'à travers cette session.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from app.config import settings

# pool_pre_ping : les connexions coupées par le serveur sont recréées à la volée
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dépendance FastAPI : une session BDD par requête, fermée après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
