"""FastAPI app initialization, exception handling"""

import logging
import traceback

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ffportal.config import Config, get_config
from ffportal.errors.base import ApplicationError
from ffportal.routes.auth import auth_router
from ffportal.routes.credit_card import credit_card_router
from ffportal.routes.program import program_router
from ffportal.routes.transfer_ratio import transfer_ratio_router
from ffportal.routes.upload import upload_router

logger = logging.getLogger(__name__)


def _debug_enabled(request: Request) -> bool:
    """Resolve the config the same way routes do, test overrides included."""
    provider = request.app.dependency_overrides.get(get_config, get_config)
    return provider().debug


def application_exception_handler(request: Request, exc: ApplicationError):
    c = {
        "error_code": exc.error_code,
        "message": exc.error,
    }
    logger.error(c)
    # Only print full traceback when in debug logging
    if logger.isEnabledFor(logging.DEBUG):
        traceback.print_exception(exc)
    return JSONResponse(status_code=exc.http_code, content=c)


def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    problems = []
    for error in exc.errors():
        # drop "body"/"query"/"path" prefix, keep the field path
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    message = "; ".join(problems) or "Invalid request"
    logger.info("Request validation failed: %s", message)
    return JSONResponse(
        status_code=400,
        content={"error_code": 1400, "message": message},
    )


def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(exc)
    if logger.isEnabledFor(logging.DEBUG):
        traceback.print_exception(exc)
    content = {"error_code": 1500, "message": "Database error"}
    if _debug_enabled(request):
        content["error"] = str(exc)
    return JSONResponse(status_code=500, content=content)


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error: %s", exc)
    content = {"error_code": 1000, "message": "Internal server error"}
    if _debug_enabled(request):
        content["error"] = str(exc)
    return JSONResponse(status_code=500, content=content)


def app_factory() -> FastAPI:
    config: Config = get_config()
    app = FastAPI(title=config.app_name, version=config.app_version)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if not config.secret_key:
        logger.warning(
            "FFPORTAL_SECRET_KEY is not set, login and token checks will fail."
        )

    app.add_exception_handler(ApplicationError, application_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unexpected_exception_handler)

    @app.get("/", include_in_schema=False)
    def welcome() -> str:
        return "Welcome to the Frequent Flyer Program Portal API"

    @app.get("/health", tags=["Health"])
    def health(config: Config = Depends(get_config)) -> dict:
        return {"status": "OK", "message": f"{config.app_name} is running"}

    app.include_router(auth_router)
    app.include_router(program_router)
    app.include_router(credit_card_router)
    app.include_router(transfer_ratio_router)
    app.include_router(upload_router)
    return app


app = app_factory()
