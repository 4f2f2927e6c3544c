"""
Jia Recruiter - Main FastAPI application
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from jia.core.config import settings
from jia.core.database import init_db
from jia.core.logging_config import configure_logging
from jia.core.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    ExceptionHandlerMiddleware,
)
from jia.core.exceptions import JiaException, ValidationError
from jia.sanitize.career_input import format_validation_errors
from jia.careers.router import router as careers_router
from jia.applications.router import router as applications_router
from jia.screening.router import router as screening_router
from jia.llm.router import router as llm_router

# Configure logging
configure_logging()
logger = structlog.get_logger()

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Recruiting backend: careers, applications and AI CV screening",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# Add middleware
app.add_middleware(CorrelationIDMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(ExceptionHandlerMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(JiaException)
async def jia_exception_handler(request: Request, exc: JiaException):
    """Handle Jia exceptions"""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Render malformed request bodies like every other validation failure"""
    details = format_validation_errors(exc)
    logger.warning("request_validation_failed", path=request.url.path, errors=details)
    error = ValidationError("Invalid request", details=details)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


# Include routers
app.include_router(careers_router)
app.include_router(applications_router)
app.include_router(screening_router)
app.include_router(llm_router)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("application_starting", version=settings.APP_VERSION, environment=settings.ENVIRONMENT)

    try:
        init_db()
        logger.info("database_initialized")
    except Exception as e:
        logger.error("database_init_failed", error=str(e))


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("application_shutting_down")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "jia.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
