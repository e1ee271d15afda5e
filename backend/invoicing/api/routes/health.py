"""Health probes: liveness never touches the database, readiness runs SELECT 1."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from invoicing.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/")
async def liveness(request: Request):
    return {"status": "healthy", "service": request.app.title, "version": request.app.version}


@router.get("/ready")
async def readiness():
    # init_db rebinds database.db_manager on startup; read it per request
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        logger.warning("Not ready: database unavailable", extra={"path": "/api/v1/health/ready"})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
