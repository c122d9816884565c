# app/main.py
import logging
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.core.errors import format_validation_errors
from app.core.logging_config import setup_logging
from app.db.session import create_all_tables, create_db_engine

# register table metadata before create_all
from app.models import task as _m_task  # noqa: F401

from app.routers import health, task

logger = logging.getLogger(__name__)


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    # bad bodies are client errors with the same {error} shape as the handlers
    return JSONResponse(
        status_code=400,
        content={"error": format_validation_errors(exc.errors())},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Todo API",
        description="API documentation for your Todo app",
        version=settings.app_version,
        docs_url="/api-docs",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.engine = create_db_engine(settings)
    create_all_tables(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(health.router)
    app.include_router(task.router)

    logger.info("Todo API ready env=%s", settings.app_env)
    return app


def run(settings: Optional[Settings] = None) -> None:
    load_dotenv()
    settings = settings or get_settings()
    app = create_app(settings)
    logger.info("Server starting on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
