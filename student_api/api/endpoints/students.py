from fastapi import APIRouter, Depends, status

from student_api.api.deps import get_student_repository
from student_api.models.student import StudentRepository
from student_api.services.student import student as crud_student
from student_api.schemas.student import Student, StudentCreate, StudentUpdate

router = APIRouter()


@router.post("", response_model=str, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Create a new student

    Requires:
    - **name**: non-empty string
    - **age**: integer, at least 1

    Returns the identifier assigned by the store.
    """
    return crud_student.create_student(repo, student)


@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: str,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Get one student by identifier
    """
    return crud_student.get_student(repo, student_id)


@router.put("/{student_id}", response_model=int)
def update_student(
    student_id: str,
    student: StudentUpdate,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Replace name and age of a student

    Returns the number of modified documents: 0 when nothing matched
    the identifier (or the values were unchanged), otherwise 1.
    """
    return crud_student.update_student(repo, student_id, student)


@router.delete("/{student_id}", response_model=int)
def delete_student(
    student_id: str,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Delete a student

    Returns the number of deleted documents (0 or 1).
    """
    return crud_student.delete_student(repo, student_id)
