"""
handlers/dependencies.py
------------------------
FastAPI dependencies that hand the shared gateway and per-request
repositories to the route functions.
"""

from fastapi import Depends, Request

from db.connection import DatabaseGateway
from db.errors import Unavailable
from repositories.student_repo import StudentRepository


def get_gateway(request: Request) -> DatabaseGateway:
    """Return the gateway attached to the running application."""
    return request.app.state.gateway


def get_student_repo(gateway: DatabaseGateway = Depends(get_gateway)) -> StudentRepository:
    """
    Build a StudentRepository for the current request.

    If startup could not initialize the database, one more attempt is made
    here before the request is rejected.

    Raises:
        Unavailable: If the database is still not ready.
    """
    if not gateway.initialize():
        raise Unavailable("Database is not ready")
    return StudentRepository(gateway)
