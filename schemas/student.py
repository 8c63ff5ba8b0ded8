"""
schemas/student.py
------------------
Pydantic request body for student create and update.
"""

from pydantic import BaseModel, ConfigDict, Field


class StudentIn(BaseModel):
    """
    Request body for creating or replacing a student.

    Only the shape is checked here; uniqueness of `roll` is left to the
    database. `class` is a Python keyword, so the field is exposed under
    that alias and read back as `class_name`.
    """
    model_config = ConfigDict(populate_by_name=True)

    roll: int
    name: str = Field(min_length=1)
    class_name: str = Field(alias="class", min_length=1)
