from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from .exceptions import SchoolAdminException

logger = logging.getLogger(__name__)


async def school_admin_exception_handler(request: Request, exc: SchoolAdminException):
    """Handle core exceptions"""
    if exc.status_code >= 500:
        logger.error(f"{exc.__class__.__name__}: {exc.message} - Path: {request.url.path}")
    else:
        logger.warning(f"{exc.__class__.__name__}: {exc.message} - Path: {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "type": exc.__class__.__name__}
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.exception(f"Unexpected error: {str(exc)} - Path: {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "type": "InternalError"}
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(SchoolAdminException, school_admin_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
