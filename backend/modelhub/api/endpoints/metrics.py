"""Model metrics history, comparisons and training job bookkeeping."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ...analyzers.comparison import MetricsComparison
from ...hyperparameters import REGISTRY, HyperparameterError, from_values
from ...models import ModelMetricsCreate, TrainingJobUpdate, TrainingRequest
from ...storage import RecordStore, get_job_store, get_metrics_store
from .errors import hyperparameter_http_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/models", tags=["metrics"])

_METRIC_FIELDS = ("name", "accuracy", "precision", "recall", "f1Score", "trainingTime", "timestamp")
_FINISHED = {"completed", "failed"}


def _summary(record: Dict[str, Any]) -> Dict[str, Any]:
    return {"_id": record["_id"], **{key: record.get(key) for key in _METRIC_FIELDS}}


@router.get("/metrics")
async def list_metrics(store: RecordStore = Depends(get_metrics_store)) -> Dict[str, Any]:
    return {"metrics": [_summary(record) for record in store.list()]}


@router.post("/metrics", status_code=201)
async def save_metrics(
    payload: ModelMetricsCreate, store: RecordStore = Depends(get_metrics_store)
) -> Dict[str, Any]:
    record = store.save(payload.model_dump())
    logger.info("Saved metrics for %s", record["name"])
    return record


@router.get("/metrics/compare")
async def compare_metrics(
    metric: str = "accuracy", store: RecordStore = Depends(get_metrics_store)
) -> Dict[str, Any]:
    comparison = MetricsComparison(store.list())
    try:
        chart = comparison.chart_data(metric)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    best = comparison.best_model(metric)
    return {
        "metric": metric,
        "chartData": chart,
        "best": _summary(best) if best else None,
        "averages": comparison.averages(),
    }


@router.post("/train", status_code=202)
async def start_training(
    request: TrainingRequest, store: RecordStore = Depends(get_job_store)
) -> Dict[str, Any]:
    try:
        category = request.category or REGISTRY.find_category(request.modelType)
        configuration = from_values(category, request.modelType, request.hyperparameters, REGISTRY)
    except HyperparameterError as exc:
        raise hyperparameter_http_error(exc) from exc

    job = store.save(
        {
            "modelType": configuration.model_type,
            "category": configuration.category,
            "datasetId": request.datasetId,
            "userId": request.userId,
            "hyperparameters": configuration.hyperparameter_values,
            "status": "queued",
            "progress": 0.0,
            "error": None,
            "completedAt": None,
        }
    )
    logger.info("Queued training job %s for %s", job["_id"], configuration.model_type)
    return {"message": "Training started successfully", "jobId": job["_id"]}


@router.get("/train")
async def training_status(
    job_id: Optional[str] = None,
    legacy_job_id: Optional[str] = Query(None, alias="jobId"),
    store: RecordStore = Depends(get_job_store),
) -> Dict[str, Any]:
    job_id = job_id or legacy_job_id
    if not job_id:
        raise HTTPException(status_code=400, detail="job_id is required")
    job = store.get(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Training job not found")
    return job


@router.patch("/train/{job_id}")
async def update_training(
    job_id: str,
    update: TrainingJobUpdate,
    jobs: RecordStore = Depends(get_job_store),
    metrics: RecordStore = Depends(get_metrics_store),
) -> Dict[str, Any]:
    job = jobs.get(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Training job not found")

    changes = update.model_dump(exclude_unset=True, exclude={"metrics"})
    if update.status in _FINISHED:
        changes["completedAt"] = datetime.now(timezone.utc).isoformat()
        if update.status == "completed":
            changes["progress"] = 100.0

    if update.status == "completed" and update.metrics is not None:
        stored = metrics.save(
            {
                **update.metrics.model_dump(),
                "modelType": update.metrics.modelType or job.get("modelType"),
                "parameters": update.metrics.parameters or job.get("hyperparameters"),
                "userId": update.metrics.userId or job.get("userId"),
            }
        )
        changes["metricsId"] = stored["_id"]

    updated = jobs.update(job_id, changes)
    logger.info("Training job %s is now %s", job_id, updated.get("status"))
    return updated
