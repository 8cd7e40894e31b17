"""
Service Tracker - Main FastAPI Application
Version: 1.1.1

Changelog:
v1.1.1 (2026-10-18): Request validation and unexpected errors answer 500 {"error"}
v1.1.0 (2026-09-02): Optional periodic AMC sweep; master data PUT routes
v1.0.0 (2026-07-14): Initial API for the mobile client
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
import asyncio
import logging

from config import settings, init_directories
import database
from api import auth, dashboard, customers, service_calls, repairs, amc, reference
from api import settings as settings_api
from services import maintenance

# Configure logging
init_directories()
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(f'{settings.LOGS_DIR}/api.log'),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)


# Background tasks
background_tasks = set()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    # Connection and schema problems are fatal: let them abort start-up
    database.connect()
    from models import init_db
    init_db()

    if settings.AMC_SWEEP_INTERVAL_HOURS > 0:
        sweep_task = asyncio.create_task(maintenance.run_amc_sweeper())
        background_tasks.add(sweep_task)

    logger.info(f"{settings.APP_NAME} ready on port {settings.PORT}")

    yield

    # Shutdown
    for task in background_tasks:
        task.cancel()
    await asyncio.gather(*background_tasks, return_exceptions=True)
    background_tasks.clear()

    database.dispose_engine()
    logger.info("Shutdown complete")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Customers, service calls, repairs and AMC tracking for the mobile app",
    lifespan=lifespan
)

# CORS middleware (the Android client calls from anywhere)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Any data-access failure becomes a 500 carrying the driver's message"""
    message = str(getattr(exc, "orig", None) or exc)
    logger.error(f"{request.method} {request.url.path} failed: {message}")
    return JSONResponse(status_code=500, content={"error": message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Rejected request bodies are reported the same way as database failures"""
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'][1:]) or 'body'}: {err['msg']}"
        for err in exc.errors()
    )
    logger.warning(f"{request.method} {request.url.path} rejected: {message}")
    return JSONResponse(status_code=500, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} failed")
    return JSONResponse(status_code=500, content={"error": str(exc) or type(exc).__name__})


# Include API routers
app.include_router(auth.router, prefix="/api")
app.include_router(dashboard.router, prefix="/api")
app.include_router(customers.router, prefix="/api")
app.include_router(service_calls.router, prefix="/api")
app.include_router(repairs.router, prefix="/api")
app.include_router(amc.router, prefix="/api")
for router in reference.routers:
    app.include_router(router, prefix="/api")
app.include_router(settings_api.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    logger.info("=============================================")
    logger.info(f"{settings.APP_NAME} running on port {settings.PORT}")
    logger.info("Use this URL in the Android app")
    logger.info("=============================================")
    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
