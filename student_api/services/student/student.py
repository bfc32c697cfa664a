import logging

from pymongo.errors import PyMongoError

from student_api.core.exceptions import (
    FAILED_TO_DELETE_STUDENT,
    FAILED_TO_INSERT_STUDENT,
    FAILED_TO_UPDATE_STUDENT,
    StorageException,
    StudentNotFoundException,
)
from student_api.models.student import StudentRepository
from student_api.schemas.student import Student, StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


def create_student(repo: StudentRepository, student: StudentCreate) -> str:
    """Insert a new student and return the identifier the store assigned."""
    try:
        student_id = repo.insert(student.model_dump(include={"name", "age"}))
    except PyMongoError as e:
        raise StorageException(FAILED_TO_INSERT_STUDENT, cause=e) from e
    logger.info(f"Created student {student_id}")
    return student_id


def get_student(repo: StudentRepository, student_id: str) -> Student:
    """
    Fetch one student by identifier.

    A failed lookup is reported the same way as a missing document.
    """
    try:
        document = repo.find_one(student_id)
    except PyMongoError as e:
        logger.warning(f"Lookup of student {student_id} failed: {e}")
        raise StudentNotFoundException() from e
    if document is None:
        raise StudentNotFoundException()
    return Student.model_validate(document)


def update_student(repo: StudentRepository, student_id: str, student: StudentUpdate) -> int:
    """Overwrite name and age; returns how many documents changed (0 if none matched)."""
    try:
        modified = repo.update_fields(student_id, student.model_dump(include={"name", "age"}))
    except PyMongoError as e:
        raise StorageException(FAILED_TO_UPDATE_STUDENT, cause=e) from e
    logger.info(f"Updated student {student_id}: modified={modified}")
    return modified


def delete_student(repo: StudentRepository, student_id: str) -> int:
    try:
        deleted = repo.delete(student_id)
    except PyMongoError as e:
        raise StorageException(FAILED_TO_DELETE_STUDENT, cause=e) from e
    logger.info(f"Deleted student {student_id}: deleted={deleted}")
    return deleted
