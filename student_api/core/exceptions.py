from enum import Enum
from typing import Optional

from fastapi import status

# =========================================================
# FIXED ERROR MESSAGES
# =========================================================

INVALID_REQUEST_BODY = "Invalid request body"
FAILED_TO_INSERT_STUDENT = "Failed to insert student"
FAILED_TO_UPDATE_STUDENT = "Failed to update student"
STUDENT_NOT_FOUND = "Student not found"
FAILED_TO_DELETE_STUDENT = "Failed to delete student"


class ErrorKind(str, Enum):
    """Error categories a student operation can end with."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    STORAGE_ERROR = "STORAGE_ERROR"

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORAGE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the service.
    Carries the error kind and the message sent back to the caller.
    """
    def __init__(self, message: str, kind: ErrorKind):
        self.message = message
        self.kind = kind
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.kind.value

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class InvalidInputException(BaseAPIException):
    """400: body is not valid JSON for a student, or a field fails validation"""
    def __init__(self, message: str = INVALID_REQUEST_BODY):
        super().__init__(message=message, kind=ErrorKind.INVALID_INPUT)


class StudentNotFoundException(BaseAPIException):
    """404: no student document for the requested identifier"""
    def __init__(self, message: str = STUDENT_NOT_FOUND):
        super().__init__(message=message, kind=ErrorKind.NOT_FOUND)


class StorageException(BaseAPIException):
    """
    500: the document store rejected or failed a write.
    The driver error is kept on `cause` for logging only, never sent to the client.
    """
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message=message, kind=ErrorKind.STORAGE_ERROR)
