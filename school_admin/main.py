from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

from .core.config import Settings, settings as default_settings
from .core.error_handlers import register_exception_handlers
from .core.logging import setup_logging
from .datasources import DataSource, build_data_source
from .services import Services

# Import all routers
from .routers import health, students, tutors, emergency_contacts, groups, enrollments, payments, grades, dashboard

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, source: Optional[DataSource] = None) -> FastAPI:
    """Build the API around an explicitly constructed data source."""
    settings = settings or default_settings
    source = source or build_data_source(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name} API ({type(source).__name__})")
        yield
        logger.info(f"Shutting down {settings.app_name} API")
        await app.state.services.close()
        logger.info("Shutdown complete")

    app = FastAPI(
        title="School Administration API",
        description="Students, tutors, emergency contacts, groups, enrollments and payments",
        version=settings.app_version,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.services = Services(source)

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

    # Include all routers
    app.include_router(health.router)
    for module in (students, tutors, emergency_contacts, groups, enrollments, payments, grades, dashboard):
        app.include_router(module.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        return {
            "message": "School Administration API",
            "version": settings.app_version,
            "data_source": settings.data_source,
            "status": "active"
        }

    return app


setup_logging()
app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("school_admin.main:app", host="0.0.0.0", port=8000, reload=True)
