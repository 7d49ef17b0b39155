"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.errors import AppError, ErrorCode, ValidationError, ValidationField
from app.core.logging_config import configure_logging
from app.schemas.common import ErrorResponse

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Request field (wire or python name) -> validation tag
FIELD_TAGS = {
    "email": ValidationField.INVALID_EMAIL,
    "name": ValidationField.INVALID_NAME,
    "password": ValidationField.INVALID_PASSWORD,
    "scheduledDate": ValidationField.INVALID_DATE,
    "scheduled_date": ValidationField.INVALID_DATE,
    "sets": ValidationField.INVALID_SETTING,
    "repetitions": ValidationField.INVALID_SETTING,
    "weights": ValidationField.INVALID_SETTING,
    "weightUnit": ValidationField.INVALID_SETTING,
    "weight_unit": ValidationField.INVALID_SETTING,
    "id": ValidationField.INVALID_ID,
    "exerciseId": ValidationField.INVALID_ID,
    "exercise_id": ValidationField.INVALID_ID,
    "workoutId": ValidationField.INVALID_ID,
    "workout_id": ValidationField.INVALID_ID,
}


def validation_error_from(exc: RequestValidationError) -> ValidationError:
    """Turn the first framework validation failure into a field-tagged error."""
    errors = exc.errors()
    if not errors:
        return ValidationError(ValidationField.INVALID_INPUT, "invalid request")

    first = errors[0]
    field = next((part for part in reversed(first.get("loc", ())) if isinstance(part, str)), "")
    tag = FIELD_TAGS.get(field, ValidationField.INVALID_INPUT)
    return ValidationError(tag, f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg", ""))


def error_response(status_code: int, code: str, message: str, headers: Optional[dict] = None) -> JSONResponse:
    body = ErrorResponse(code=code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True), headers=headers)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed the exercise catalog on startup."""
    if settings.SEED_ON_STARTUP:
        from app.db.init_db import init_db
        init_db()
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Plan, schedule and track workouts built from a shared exercise catalog.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan)

# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return error_response(exc.status_code, exc.code, exc.message, headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = validation_error_from(exc)
    return error_response(error.status_code, error.code, error.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    codes = {
        401: ErrorCode.UNAUTHORIZED,
        403: ErrorCode.FORBIDDEN,
        404: ErrorCode.NOT_FOUND,
        409: ErrorCode.ALREADY_EXISTS,
    }
    code = codes.get(exc.status_code, ErrorCode.BAD_REQUEST if exc.status_code < 500 else ErrorCode.INTERNAL_ERROR)
    return error_response(exc.status_code, code.value, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, ErrorCode.INTERNAL_ERROR.value, "internal server error")


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "workout-tracker-api",
        "version": settings.VERSION
    }
