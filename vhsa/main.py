"""VHSA Screening API: FastAPI entry point.

Student roster, screening eligibility and screening results for the
vision, hearing, acanthosis and scoliosis program.
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from vhsa import __version__
from vhsa.api.responses import HealthCheckResponse
from vhsa.api.routes import grades, schools, screenings, students
from vhsa.config.logging_config import bind_request_context, get_logger, setup_logging
from vhsa.config.settings import get_settings
from vhsa.storage.database import dispose_engine, init_db

settings = get_settings()
setup_logging(log_level=settings.log_level, log_file=settings.log_file)
logger = get_logger(__name__)

STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """VHSA application lifespan: database init and teardown."""
    logger.info("Starting VHSA Screening API", version=__version__, env=settings.app_env)

    if settings.app_env == "production" and not settings.external_database_url:
        logger.warning("EXTERNAL_DATABASE_URL not set, using local database_url in production")

    await init_db()

    yield

    await dispose_engine()
    logger.info("Shutting down VHSA Screening API")


app = FastAPI(
    title="VHSA Screening API",
    description="Student roster, screening eligibility and screening results",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept", "X-Requested-With"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    bind_request_context(request_id=str(uuid.uuid4())[:8], method=request.method, path=request.url.path)
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "Request handled",
        status=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return JSONResponse(
            status_code=404,
            content={"error": "Endpoint not found", "path": request.url.path, "method": request.method},
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(p) for p in err.get("loc", ())[1:]), "message": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": errors})


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    message = str(exc.orig).lower()
    if "foreign key" in message:
        logger.warning("Foreign key violation", error=str(exc.orig))
        return JSONResponse(status_code=400, content={"error": "Foreign key constraint violation"})
    logger.warning("Duplicate entry", error=str(exc.orig))
    return JSONResponse(status_code=409, content={"error": "Duplicate entry"})


@app.exception_handler(OperationalError)
@app.exception_handler(InterfaceError)
async def database_unavailable_handler(request: Request, exc: Exception):
    logger.error("Database unavailable", error=str(exc))
    return JSONResponse(status_code=503, content={"error": "Database connection failed"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    error_id = str(uuid.uuid4())[:8]
    logger.error("Unhandled exception", error_id=error_id, error=str(exc), path=request.url.path, exc_info=True)
    content = {"error": "Internal server error", "error_id": error_id}
    if settings.app_env == "development":
        content["message"] = str(exc)
    return JSONResponse(status_code=500, content=content)


# Routes
app.include_router(students.router, prefix="/api")
app.include_router(screenings.router, prefix="/api")
app.include_router(schools.router, prefix="/api")
app.include_router(grades.router, prefix="/api")


@app.get("/health", response_model=HealthCheckResponse)
async def health_check():
    return HealthCheckResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=round(time.monotonic() - STARTED_AT, 3),
        version=__version__,
    )


@app.get("/")
async def root():
    return {
        "message": "VHSA Screening API",
        "version": __version__,
        "endpoints": {
            "students": "/api/students",
            "screenings": "/api/screenings",
            "schools": "/api/schools",
            "grades": "/api/grades",
            "health": "/health",
        },
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("vhsa.main:app", host="0.0.0.0", port=3000, reload=settings.app_env == "development")
