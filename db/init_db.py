"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Students table: one row per enrolled student
CREATE TABLE IF NOT EXISTS students (
    id              SERIAL PRIMARY KEY,
    roll            INTEGER UNIQUE NOT NULL,
    name            VARCHAR(100) NOT NULL,
    class           VARCHAR(50) NOT NULL
);
"""


def create_tables(gateway) -> None:
    """
    Execute the schema SQL through the given gateway.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        gateway.execute(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import DatabaseGateway

    gateway = DatabaseGateway()
    gateway.open()
    gateway.ensure_schema()
    gateway.close()
    print("Database schema created successfully.")
