from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi import FastAPI, Request

from core.errors import LeagueAccessError, NotFoundError
from core.logging import get_logger
from schemas.common import ApiStatus, error_response, now_timestamp

log = get_logger("middleware")


def setup_middleware(app: FastAPI):
    """Setup CORS and global exception handlers"""

    # Global exception handler for validation errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        log.warning("request_validation_failed", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(
            status_code=422,
            content=error_response(
                message="Request validation failed",
                status=ApiStatus.VALIDATION_ERROR,
                error_code="VALIDATION_ERROR",
                data={"errors": jsonable_encoder(exc.errors())},
                timestamp=now_timestamp(),
            )
        )

    @app.exception_handler(NotFoundError)
    async def not_found_exception_handler(request: Request, exc: NotFoundError):
        log.info("resource_not_found", path=request.url.path, resource=exc.resource, resource_id=exc.resource_id)
        return JSONResponse(
            status_code=404,
            content=error_response(
                message=str(exc),
                status=ApiStatus.NOT_FOUND,
                error_code=f"{exc.resource.upper()}_NOT_FOUND",
                timestamp=now_timestamp(),
            )
        )

    @app.exception_handler(LeagueAccessError)
    async def league_access_exception_handler(request: Request, exc: LeagueAccessError):
        return JSONResponse(
            status_code=403,
            content=error_response(
                message=str(exc),
                status=ApiStatus.AUTHORIZATION_ERROR,
                error_code="LEAGUE_ACCESS_DENIED",
                timestamp=now_timestamp(),
            )
        )

    origins = [
        "http://localhost:3000", # Frontend
        "http://localhost:5173", # Vite dev server
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
