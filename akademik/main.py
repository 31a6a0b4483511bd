from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import time

from .core.config import settings
from .core.database import close_db_connections
from .core.error_handlers import register_exception_handlers
from .core.logging import logger, setup_logging

from .routers import (
    health, schools, teachers, academic_years, subjects, classes, additional_tasks,
    jtm_assignments, task_assignments, workload, reports, sk_documents, schedules,
)

setup_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name} API ({settings.environment})")
    yield
    logger.info(f"Shutting down {settings.app_name} API")
    await close_db_connections()
    logger.info("Shutdown complete")

app = FastAPI(
    title="Akademik API - Teacher Workload Management",
    description="Master data, JTM and additional task assignments, workload evaluation, reports and SK documents for a junior high school",
    version=settings.app_version,
    lifespan=lifespan
)

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} - {process_time:.3f}s")
    return response

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(schools.router)
app.include_router(teachers.router)
app.include_router(academic_years.router)
app.include_router(subjects.router)
app.include_router(classes.router)
app.include_router(additional_tasks.router)
app.include_router(jtm_assignments.router)
app.include_router(task_assignments.router)
app.include_router(workload.router)
app.include_router(reports.router)
app.include_router(sk_documents.router)
app.include_router(schedules.router)

@app.get("/")
async def root():
    return {
        "message": f"{settings.app_name} API v{settings.app_version}",
        "version": settings.app_version,
        "features": ["Master Data", "JTM Allocation", "Teacher Workload", "Reports", "SK Documents", "Schedules"],
        "status": "active"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("akademik.main:app", host="0.0.0.0", port=8000, reload=True)
