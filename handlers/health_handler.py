"""
handlers/health_handler.py
--------------------------
Liveness/readiness probe.
"""

from fastapi import APIRouter, Depends, Response

from db.connection import DatabaseGateway
from handlers.dependencies import get_gateway

router = APIRouter()


@router.get("/health")
def health(response: Response, gateway: DatabaseGateway = Depends(get_gateway)) -> dict:
    """Report ok once the database schema is in place, 503 until then."""
    if gateway.initialize():
        return {"status": "ok"}
    response.status_code = 503
    return {"status": "unavailable"}
