# routers/health.py
from fastapi import APIRouter

from database import check_connection

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", summary="Service and database health")
def health():
     connected = check_connection()
     return {"status": "ok" if connected else "degraded", "database": connected}
