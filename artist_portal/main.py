from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from artist_portal.api.routers import (
    activities,
    admin,
    auth,
    bookings,
    catalog,
    deliverables,
    insights,
    me,
    projects,
    purchases,
)
from artist_portal.api.schemas.common import ErrorResponse
from artist_portal.infrastructure.db.engine import create_schema, get_engine
from artist_portal.infrastructure.db.seeds.seed_demo import seed_demo
from artist_portal.shared.config import get_settings


logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    body = ErrorResponse(status_code=status_code, message=message).model_dump(by_alias=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    message = str(errors[0].get("msg") or "Invalid request")
    return message.removeprefix("Value error, ")


async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(400, _first_validation_message(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("api: unhandled_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return _error_response(500, "Internal server error")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    settings = get_settings()
    engine = get_engine(settings.database_url)
    create_schema(engine)
    if settings.seed_demo_data:
        seed_demo(engine)
    logger.info("api: started app_env=%s", settings.app_env)
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = FastAPI(title="Artist Portal API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    for module in (auth, me, catalog, purchases, projects, deliverables, bookings, activities, insights, admin):
        app.include_router(module.router)
    return app


app = create_app()
