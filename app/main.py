# /app/main.py

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

# --- Application-specific Imports ---
from .core import config
from .core.exceptions import RecordsError
from .core.logging_config import configure_logging
from .db.base import Base
from .db.database import engine
from .routers import (
    auth_router,
    students_router,
    courses_router,
    timetable_router,
    grades_router,
    attendance_router,
)

configure_logging()


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Local/dev convenience only; deployed databases are managed by Alembic.
    if config.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Records Backend API",
    description="Students, courses, timetable, grades and attendance for an institution.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Domain Error Translation ---
@app.exception_handler(RecordsError)
async def records_error_handler(request: Request, exc: RecordsError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# --- API Router Inclusion ---
app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(courses_router.router, prefix="/api/courses", tags=["Courses"])
app.include_router(timetable_router.router, prefix="/api/timetable", tags=["Timetable"])
app.include_router(grades_router.router, prefix="/api/grades", tags=["Grades"])
app.include_router(attendance_router.router, prefix="/api/attendance", tags=["Attendance"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Records Backend is running!", "version": app.version}
