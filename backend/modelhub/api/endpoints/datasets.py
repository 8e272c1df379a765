"""Dataset upload analysis and dashboard statistics."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, Header, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from ...analyzers.dataset import DatasetAnalyzer
from ...clients.backend import BackendClient, BackendError
from ...parsers import UnsupportedFormatError, get_parser
from ...storage import RecordStore, get_dataset_store
from .classifications import get_backend_client
from .errors import backend_http_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["datasets"])


@router.post("/api/dataset/analyze")
async def analyze_dataset(
    file: UploadFile = File(...),
    user_id: Optional[str] = Header(None),
    store: RecordStore = Depends(get_dataset_store),
) -> Dict[str, Any]:
    filename = file.filename or ""
    try:
        parser = get_parser(filename)
    except UnsupportedFormatError as exc:
        raise HTTPException(status_code=400, detail="Unsupported file format") from exc

    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="No file provided")

    try:
        frame = await run_in_threadpool(parser.parse, content)
    except (ValueError, UnicodeDecodeError) as exc:
        logger.warning("Dataset %s could not be parsed: %s", filename, exc)
        raise HTTPException(status_code=400, detail=f"Could not parse {filename}: {exc}") from exc

    analysis = DatasetAnalyzer().analyze(frame)
    record = store.save(
        {
            "name": filename,
            "fileName": filename,
            "columns": analysis["columns"],
            "rowCount": analysis["shape"][0],
            "columnTypes": analysis["columnTypes"],
            "summary": analysis["summary"],
            "targetColumn": analysis["targetColumn"],
            "userId": user_id,
        }
    )
    logger.info("Analyzed dataset %s: %d rows, %d columns", filename, *analysis["shape"])
    return {"datasetId": record["_id"], **analysis}


@router.get("/api/dataset/{dataset_id}")
async def get_dataset(dataset_id: str, store: RecordStore = Depends(get_dataset_store)) -> Dict[str, Any]:
    record = store.get(dataset_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Dataset not found")
    return record


@router.get("/api/dashboard/{user_id}/stats")
async def dashboard_stats(user_id: str, client: BackendClient = Depends(get_backend_client)) -> Dict[str, Any]:
    try:
        return await run_in_threadpool(client.dashboard_stats, user_id)
    except BackendError as exc:
        raise backend_http_error(exc) from exc
