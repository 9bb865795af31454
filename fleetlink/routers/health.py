# fleetlink/routers/health.py
"""
System health check endpoint.
Returns status of backend + DB.
"""

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session
from fleetlink.database import get_db
from fleetlink.schemas.response import ApiResponse, ok

router = APIRouter()


@router.get("/healthcheck", response_model=ApiResponse, summary="System health check")
def health_check(db: Session = Depends(get_db)):
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "backend": "ok",
        "database": "unknown",
    }

    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
    except Exception as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    return ok(200, result, "Health check passed" if result["status"] == "ok" else "Service degraded")
