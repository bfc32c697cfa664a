from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from student_api.api.router import api_router
from student_api.core.config import settings
from student_api.core.database import close_db, get_students_collection, init_db
from student_api.core.handlers import register_exception_handlers
from student_api.core.logging import logger
from student_api.models.student import StudentRepository


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connect to MongoDB before serving and close the client on shutdown.
    Startup fails if the server can't be reached.
    """
    client = init_db()
    app.state.students = StudentRepository(get_students_collection(client))
    try:
        yield
    finally:
        close_db(client)


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Include API router
app.include_router(api_router)


@app.get("/")
def root():
    """
    Health check endpoint
    """
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "docs": "/docs",
        "version": settings.APP_VERSION
    }


def run():
    """Serve the app with uvicorn on HOST:PORT."""
    logger.info(f"Server is running on port {settings.PORT}...")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
