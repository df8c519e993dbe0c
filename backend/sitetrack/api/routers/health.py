import datetime as dt

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sitetrack.core.deps import get_db
from sitetrack.core.logging import logger

router = APIRouter()


def _timestamp() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/health")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("health_db_failed", error=str(e))
        return JSONResponse(
            status_code=500,
            content={"status": "ERROR", "timestamp": _timestamp(), "error": "Database connection failed"},
        )
    return {"status": "OK", "timestamp": _timestamp(), "database": "Connected"}
