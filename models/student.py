"""
models/student.py
-----------------
Domain model for student records.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Student:
    """
    Represents a single student row.

    Attributes:
        id: Database primary key (None for new records).
        roll: Unique roll number, distinct from the primary key.
        name: Student's name.
        class_name: Free-form class label (e.g. grade/section).
                    Stored in the ``class`` column.
    """
    roll: int
    name: str
    class_name: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict) -> "Student":
        """Build a Student from a result row keyed by column name."""
        return cls(
            id=row["id"],
            roll=row["roll"],
            name=row["name"],
            class_name=row["class"],
        )

    def to_dict(self) -> dict:
        """Serialize to the JSON shape used by the API."""
        return {
            "id": self.id,
            "roll": self.roll,
            "name": self.name,
            "class": self.class_name,
        }

    def __str__(self) -> str:
        return f"#{self.id} | roll {self.roll} | {self.name} ({self.class_name})"
