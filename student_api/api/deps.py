from fastapi import Request

from student_api.models.student import StudentRepository


def get_student_repository(request: Request) -> StudentRepository:
    """
    Dependency returning the repository created at startup.
    The same instance (and its pooled client) serves every request.
    """
    return request.app.state.students
