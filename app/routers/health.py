# app/routers/health.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, text

from app.db.session import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_app():
    return {"ok": True}


@router.get("/db")
def health_db(db: Session = Depends(get_session)):
    # connectivity only, schema is created at startup
    try:
        db.exec(text("SELECT 1"))
        return {"ok": True}
    except Exception:
        logger.exception("DB health check failed")
        raise HTTPException(status_code=500, detail="Database connection failed")
