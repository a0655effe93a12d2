from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api import health_check, v1_router, RequestIDMiddleware
from .core import (
    settings,
    init_db,
    close_db,
    setup_logging,
    custom_http_exception_handler,
    validation_exception_handler,
    profile_service_exception_handler,
    unhandled_exception_handler,
)
from .services.exceptions import ProfileServiceError


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize MongoDB / Beanie
    await init_db(app, client=app.state.mongo_client)
    try:
        yield
    finally:
        await close_db()


def create_app(mongo_client=None) -> FastAPI:
    """
    configure and create the FastAPI application instance.

    ``mongo_client`` replaces the Motor client built from settings.
    """
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.mongo_client = mongo_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(StarletteHTTPException, custom_http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ProfileServiceError, profile_service_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root():
        return "API Running"

    app.include_router(health_check)
    app.include_router(v1_router)

    return app
