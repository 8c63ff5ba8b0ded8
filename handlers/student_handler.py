"""
handlers/student_handler.py
---------------------------
CRUD endpoints for students under /api/students.

Database errors are not caught here: they propagate as StoreError and
are turned into JSON responses by handlers/errors.py.
"""

from fastapi import APIRouter, Depends

from handlers.dependencies import get_student_repo
from repositories.student_repo import StudentRepository
from schemas.student import StudentIn

router = APIRouter(prefix="/api/students", tags=["students"])


@router.get("")
def list_students(repo: StudentRepository = Depends(get_student_repo)) -> list[dict]:
    """All students, ordered by roll number."""
    return [s.to_dict() for s in repo.list_all()]


@router.get("/{student_id}")
def get_student(student_id: int, repo: StudentRepository = Depends(get_student_repo)) -> dict:
    return repo.get_by_id(student_id).to_dict()


@router.post("", status_code=201)
def create_student(payload: StudentIn, repo: StudentRepository = Depends(get_student_repo)) -> dict:
    """Create a student; the database assigns the id."""
    student = repo.add(payload.roll, payload.name, payload.class_name)
    return student.to_dict()


@router.put("/{student_id}")
def update_student(
    student_id: int,
    payload: StudentIn,
    repo: StudentRepository = Depends(get_student_repo),
) -> dict:
    """Replace roll, name and class of a student. All three fields are required."""
    student = repo.update(student_id, payload.roll, payload.name, payload.class_name)
    return student.to_dict()


@router.delete("/{student_id}")
def delete_student(student_id: int, repo: StudentRepository = Depends(get_student_repo)) -> dict:
    repo.delete(student_id)
    return {"message": "Student deleted"}
