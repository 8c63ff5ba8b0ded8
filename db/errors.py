"""
db/errors.py
------------
Typed errors raised by the database layer.

Every failure coming out of psycopg2 is classified into one of the
subclasses below so the API layer can map it to an HTTP status without
knowing anything about the driver.
"""

import psycopg2
from psycopg2 import pool


class StoreError(Exception):
    """Base class for all database-layer failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(StoreError):
    """The targeted row does not exist."""


class Conflict(StoreError):
    """An integrity constraint was violated (e.g. duplicate roll)."""


class Unavailable(StoreError):
    """The database cannot be reached, or the gateway is not ready."""


class Unknown(StoreError):
    """Any other store failure."""


def classify_error(exc: Exception) -> StoreError:
    """
    Map a driver exception to the matching StoreError subtype.

    Args:
        exc: The exception raised while talking to the database.

    Returns:
        A StoreError instance carrying the raw driver message.
    """
    if isinstance(exc, StoreError):
        return exc

    message = str(exc).strip() or exc.__class__.__name__
    if isinstance(exc, psycopg2.IntegrityError):
        return Conflict(message)
    if isinstance(exc, (psycopg2.OperationalError, psycopg2.InterfaceError, pool.PoolError)):
        return Unavailable(message)
    return Unknown(message)
