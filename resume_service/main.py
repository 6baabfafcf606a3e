from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from logging.config import dictConfig
from typing import Optional
import logging
import time

from .config import Settings, LogConfig, get_settings
from .database import Database
from .errors import ResumeServiceError, ValidationError
from .renderer import PdfRenderer
from .routers import auth, details, experience, education, skills, projects, resume

logger = logging.getLogger("resume_service")


def create_app(settings: Optional[Settings] = None, renderer: Optional[PdfRenderer] = None) -> FastAPI:
    settings = settings or get_settings()
    dictConfig(LogConfig(settings.LOG_LEVEL))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Resume service starting up...")
        logger.info(f"JWT_SECRET: {'SET' if settings.JWT_SECRET != 'development_secret_key' else 'DEFAULT'}")
        app.state.database.create_all()
        logger.info("Resume service startup complete")
        yield
        app.state.database.dispose()
        logger.info("Resume service shut down")

    app = FastAPI(
        title="Resume Service",
        description="Personal resume data store with PDF generation",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings.DATABASE_URL)
    app.state.renderer = renderer or PdfRenderer(timeout=settings.RENDER_TIMEOUT_SECONDS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"Incoming request: {request.method} {request.url.path}")
        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time
        if duration > 2:  # seconds
            logger.warning(f"Slow request: {request.method} {request.url.path} took {duration:.2f}s")
        logger.info(f"Response status: {response.status_code}")
        return response

    @app.exception_handler(ResumeServiceError)
    async def resume_service_error_handler(request: Request, exc: ResumeServiceError):
        if exc.status_code >= 500:
            logger.error(f"{exc.reason} on {request.method} {request.url.path}: {exc.message}")
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        fields = sorted({".".join(str(p) for p in err["loc"][1:]) for err in exc.errors()})
        error = ValidationError(f"Missing or invalid fields: {', '.join(fields)}")
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled Exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "internal_error", "detail": "Internal server error"},
        )

    app.include_router(auth.router)
    app.include_router(details.router)
    app.include_router(experience.router)
    app.include_router(education.router)
    app.include_router(skills.router)
    app.include_router(projects.router)
    app.include_router(resume.router)

    @app.get("/")
    def read_root():
        return {"message": "Resume Service API", "version": "1.0.0", "docs": "/docs"}

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": "resume"}

    return app


app = create_app()


def run():
    import uvicorn
    settings = get_settings()
    uvicorn.run("resume_service.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
