"""Translate domain errors into problem-details JSON responses."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from houseledger.core.errors import (
    AccountNotFound,
    ConstraintViolation,
    DependencyError,
    DomainError,
    DuplicateTransaction,
    NotFoundError,
    ValidationError,
)
from houseledger.core.schemas import ApiModel

logger = logging.getLogger(__name__)

_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}


class ProblemDetails(ApiModel):
    type: str = "about:blank"
    title: str
    status: int
    detail: Optional[str] = None
    instance: Optional[str] = None


class ValidationProblemDetails(ProblemDetails):
    errors: dict[str, list[str]]


def _problem(request: Request, problem: ProblemDetails) -> JSONResponse:
    problem.instance = request.url.path
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(by_alias=True, exclude_none=True),
    )


def _validation_problem(request: Request, errors: dict[str, list[str]]) -> JSONResponse:
    return _problem(
        request,
        ValidationProblemDetails(
            title="One or more validation errors occurred.",
            status=status.HTTP_400_BAD_REQUEST,
            errors=errors,
        ),
    )


def _field_name(loc: tuple) -> str:
    parts = [str(part) for part in loc if part not in _LOCATION_ROOTS]
    return ".".join(parts) or "request"


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Validation failed for %s: %s", request.url.path, exc.errors)
    return _validation_problem(request, exc.errors)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(tuple(error.get("loc", ()))), []).append(error.get("msg", "Invalid value"))
    logger.info("Request validation failed for %s: %s", request.url.path, errors)
    return _validation_problem(request, errors)


async def handle_business_rule_error(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning("Business rule violated on %s: %s", request.url.path, exc)
    return _problem(
        request,
        ProblemDetails(title="Bad Request", status=status.HTTP_400_BAD_REQUEST, detail=str(exc)),
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return _problem(
        request,
        ProblemDetails(title="Not Found", status=status.HTTP_404_NOT_FOUND, detail=str(exc)),
    )


async def handle_dependency_error(request: Request, exc: DependencyError) -> JSONResponse:
    logger.warning("Conflict on %s: %s", request.url.path, exc)
    return _problem(
        request,
        ProblemDetails(title="Conflict", status=status.HTTP_409_CONFLICT, detail=str(exc)),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _problem(
        request,
        ProblemDetails(
            title="Internal Server Error",
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred.",
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(AccountNotFound, handle_business_rule_error)
    app.add_exception_handler(DuplicateTransaction, handle_business_rule_error)
    app.add_exception_handler(ConstraintViolation, handle_business_rule_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(DependencyError, handle_dependency_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


__all__ = ["ProblemDetails", "ValidationProblemDetails", "register_exception_handlers"]
