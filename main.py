import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import auth, health, tasks, users
from app.config import settings
from app.db import init_db
from app.errors import AppError
from app.logger import get_logger, log_request, setup_logging
from app.messages import ServiceMessage

logger = get_logger(__name__)
http_logger = get_logger("app.http")


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger.info("Starting application...")

    try:
        init_db()
    except Exception as e:
        # The process keeps running; requests fail until the database is reachable
        logger.error(f"Error during startup: {e}")

    yield

    logger.info("Application shutdown complete")


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_response_body())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": ServiceMessage.SERVER_ERROR.value})


def create_app() -> FastAPI:
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    app = FastAPI(
        title="Task Manager Backend",
        description="User registration, token authentication and per-user task management",
        version="1.0.0",
        lifespan=app_lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started_at = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            log_request(http_logger, request.method, request.url.path, status_code, started_at)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(tasks.router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.reload_enabled)
