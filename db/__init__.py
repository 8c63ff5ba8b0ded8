"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool, schema initialization, and raw SQL execution.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""

from db.connection import DatabaseGateway
from db.errors import Conflict, NotFound, StoreError, Unavailable, Unknown

__all__ = [
    "DatabaseGateway",
    "StoreError",
    "NotFound",
    "Conflict",
    "Unavailable",
    "Unknown",
]
