"""Classification management, proxied to the backend."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from ...clients.backend import BackendClient, BackendError
from ...hyperparameters import REGISTRY, HyperparameterError, from_values
from ...models import ClassificationCreate, ClassificationRename, ModelSubmission, ModelUpdate
from .errors import backend_http_error, hyperparameter_http_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/classifications", tags=["classifications"])

_backend_client = None


def get_backend_client() -> BackendClient:
    global _backend_client
    if _backend_client is None:
        _backend_client = BackendClient()
    return _backend_client


def _configuration_for(submission: ModelSubmission):
    category = submission.category or REGISTRY.find_category(submission.model_name)
    return from_values(category, submission.model_name, submission.hyperparameter_values, REGISTRY)


@router.get("")
async def list_classifications(client: BackendClient = Depends(get_backend_client)) -> Dict[str, Any]:
    try:
        classifications = await run_in_threadpool(client.get_classifications)
    except BackendError as exc:
        raise backend_http_error(exc) from exc
    return {"classifications": classifications}


@router.post("")
async def create_classification(
    payload: ClassificationCreate, client: BackendClient = Depends(get_backend_client)
) -> Dict[str, Any]:
    name = payload.classification_name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Classification name is required")

    # Validate every selection before anything is written to the backend.
    try:
        configurations = [
            from_values(model.category, model.name, model.hyperparameter_values, REGISTRY)
            for model in payload.models
        ]
    except HyperparameterError as exc:
        raise hyperparameter_http_error(exc) from exc

    try:
        classification_id = await run_in_threadpool(client.add_classification, name)
    except BackendError as exc:
        raise backend_http_error(exc) from exc

    failed_models: List[str] = (
        await run_in_threadpool(client.add_models, classification_id, configurations) if configurations else []
    )
    if failed_models:
        logger.warning("Classification %s created, but failed to add: %s", classification_id, failed_models)
    return {
        "status": "partial" if failed_models else "success",
        "classification_id": classification_id,
        "classification_name": name,
        "failed_models": failed_models,
    }


@router.put("/{classification_id}")
async def rename_classification(
    classification_id: str,
    payload: ClassificationRename,
    client: BackendClient = Depends(get_backend_client),
) -> Dict[str, Any]:
    name = payload.classification_name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Classification name is required")
    try:
        await run_in_threadpool(client.update_classification, classification_id, name)
    except BackendError as exc:
        raise backend_http_error(exc) from exc
    return {"status": "success", "classification_id": classification_id, "classification_name": name}


@router.delete("/{classification_id}")
async def delete_classification(
    classification_id: str, client: BackendClient = Depends(get_backend_client)
) -> Dict[str, Any]:
    try:
        await run_in_threadpool(client.delete_classification, classification_id)
    except BackendError as exc:
        raise backend_http_error(exc) from exc
    return {"status": "success", "classification_id": classification_id}


@router.post("/{classification_id}/models")
async def add_model(
    classification_id: str,
    payload: ModelSubmission,
    client: BackendClient = Depends(get_backend_client),
) -> Dict[str, Any]:
    try:
        configuration = _configuration_for(payload)
    except HyperparameterError as exc:
        raise hyperparameter_http_error(exc) from exc
    try:
        record = await run_in_threadpool(client.add_model, classification_id, configuration)
    except BackendError as exc:
        raise backend_http_error(exc) from exc
    return {"status": "success", "model": record, "configuration": configuration.to_dict()}


@router.put("/models/{model_id}")
async def update_model(
    model_id: str, payload: ModelUpdate, client: BackendClient = Depends(get_backend_client)
) -> Dict[str, Any]:
    try:
        configuration = _configuration_for(payload)
    except HyperparameterError as exc:
        raise hyperparameter_http_error(exc) from exc
    try:
        record = await run_in_threadpool(client.update_model, model_id, payload.classification_id, configuration)
    except BackendError as exc:
        raise backend_http_error(exc) from exc
    return {"status": "success", "model": record, "configuration": configuration.to_dict()}


@router.delete("/models/{model_id}")
async def delete_model(model_id: str, client: BackendClient = Depends(get_backend_client)) -> Dict[str, Any]:
    try:
        await run_in_threadpool(client.delete_model, model_id)
    except BackendError as exc:
        raise backend_http_error(exc) from exc
    return {"status": "success", "model_id": model_id}
