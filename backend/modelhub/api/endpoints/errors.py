"""Translate domain failures into HTTP errors."""

from fastapi import HTTPException

from ...clients.backend import BackendError
from ...hyperparameters.errors import HyperparameterError, UnknownModelError


def hyperparameter_http_error(exc: HyperparameterError) -> HTTPException:
    if isinstance(exc, UnknownModelError):
        return HTTPException(status_code=404, detail=exc.to_dict())
    return HTTPException(status_code=422, detail=exc.to_dict())


def backend_http_error(exc: BackendError) -> HTTPException:
    return HTTPException(
        status_code=502,
        detail={"error": exc.message, "backend_status": exc.status_code},
    )
