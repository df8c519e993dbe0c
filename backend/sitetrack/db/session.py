from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from sitetrack.core.config import settings

def _connect_args(url: str) -> dict:
    # sync endpoints run in a threadpool, sqlite connections must be shareable
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}

engine = create_engine(settings.DATABASE_URL, connect_args=_connect_args(settings.DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
