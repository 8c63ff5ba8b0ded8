"""
repositories/student_repo.py
-----------------------------
Data access layer for student records.
All SQL queries related to the `students` table live here.
"""

from db.connection import DatabaseGateway
from db.errors import NotFound
from models.student import Student
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, roll, name, class"
NOT_FOUND_MESSAGE = "Student not found"


class StudentRepository:
    """Repository for CRUD operations on the students table."""

    def __init__(self, gateway: DatabaseGateway):
        self.gateway = gateway

    # ── CREATE ────────────────────────────────────────────

    def add(self, roll: int, name: str, class_name: str) -> Student:
        """
        Insert a new student.

        Returns:
            The stored Student with its `id` populated.

        Raises:
            Conflict: If the roll number is already taken.
        """
        sql = f"""
            INSERT INTO students (roll, name, class)
            VALUES (%s, %s, %s)
            RETURNING {_COLUMNS};
        """
        rows = self.gateway.execute(sql, (roll, name, class_name))
        student = Student.from_row(rows[0])
        logger.info(f"Added student #{student.id} (roll {student.roll})")
        return student

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> list[Student]:
        """Get every student ordered by roll number ascending."""
        sql = f"SELECT {_COLUMNS} FROM students ORDER BY roll ASC;"
        return [Student.from_row(r) for r in self.gateway.execute(sql)]

    def get_by_id(self, student_id: int) -> Student:
        """
        Fetch a single student by ID.

        Raises:
            NotFound: If no row has this ID.
        """
        sql = f"SELECT {_COLUMNS} FROM students WHERE id = %s;"
        rows = self.gateway.execute(sql, (student_id,))
        if not rows:
            raise NotFound(NOT_FOUND_MESSAGE)
        return Student.from_row(rows[0])

    # ── UPDATE ────────────────────────────────────────────

    def update(self, student_id: int, roll: int, name: str, class_name: str) -> Student:
        """
        Replace roll, name and class of an existing student.

        Raises:
            NotFound: If no row has this ID.
            Conflict: If the new roll number belongs to another student.
        """
        sql = f"""
            UPDATE students
            SET roll = %s, name = %s, class = %s
            WHERE id = %s
            RETURNING {_COLUMNS};
        """
        rows = self.gateway.execute(sql, (roll, name, class_name, student_id))
        if not rows:
            raise NotFound(NOT_FOUND_MESSAGE)
        logger.info(f"Updated student #{student_id}")
        return Student.from_row(rows[0])

    # ── DELETE ────────────────────────────────────────────

    def delete(self, student_id: int) -> None:
        """
        Delete a student by ID.

        Raises:
            NotFound: If no row has this ID.
        """
        sql = "DELETE FROM students WHERE id = %s RETURNING id;"
        rows = self.gateway.execute(sql, (student_id,))
        if not rows:
            raise NotFound(NOT_FOUND_MESSAGE)
        logger.info(f"Deleted student #{student_id}")
