"""HTTP client for the ML backend that persists classifications, models and datasets.

The backend is opaque: it accepts model configurations as JSON and answers
with the persisted record, or with ``{"error": "..."}`` and a non-2xx status.
Failures are raised as :class:`BackendError`; nothing is retried here, the
caller decides what to do with a rejected submission.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import requests

from .. import settings
from ..hyperparameters.configuration import ModelConfiguration, to_payload
from ..utils.logging import get_logger

logger = get_logger(__name__)


class BackendError(RuntimeError):
    """The backend could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BackendClient:
    """Thin wrapper over the backend's admin, user and dataset endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or settings.BACKEND_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.BACKEND_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("Backend request %s %s failed: %s", method, url, exc)
            raise BackendError(f"Backend unreachable: {exc}") from exc

        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            logger.warning("Backend %s %s returned %s: %s", method, url, response.status_code, message)
            raise BackendError(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise BackendError(f"Backend returned invalid JSON for {path}", status_code=response.status_code) from exc

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("error"):
            return str(payload["error"])
        text = (response.text or "").strip()
        return text or f"Backend request failed with status {response.status_code}"

    # Classifications -------------------------------------------------------

    def get_classifications(self) -> List[Dict[str, Any]]:
        data = self._request("GET", "/admin/get_classifications", headers={"Cache-Control": "no-cache"})
        if not isinstance(data, list):
            return []
        return [
            {
                "_id": item.get("_id"),
                "classification_name": item.get("classification_name"),
                "models": item.get("models") or [],
            }
            for item in data
            if isinstance(item, dict)
        ]

    def add_classification(self, classification_name: str) -> str:
        data = self._request(
            "POST", "/admin/add_classification", json={"classification_name": classification_name}
        )
        classification_id = (data or {}).get("classification_id")
        if not classification_id:
            raise BackendError("Backend did not return a classification_id")
        return str(classification_id)

    def update_classification(self, classification_id: str, classification_name: str) -> Any:
        return self._request(
            "PUT",
            f"/admin/update_classification/{classification_id}",
            json={"classification_name": classification_name},
        )

    def delete_classification(self, classification_id: str) -> Any:
        return self._request("DELETE", f"/admin/delete_classification/{classification_id}")

    # Models ----------------------------------------------------------------

    def add_model(self, classification_id: str, configuration: ModelConfiguration) -> Any:
        return self._request("POST", "/admin/add_model", json=to_payload(configuration, classification_id))

    def update_model(self, model_id: str, classification_id: str, configuration: ModelConfiguration) -> Any:
        return self._request(
            "PUT", f"/admin/update_model/{model_id}", json=to_payload(configuration, classification_id)
        )

    def delete_model(self, model_id: str) -> Any:
        return self._request("DELETE", f"/admin/delete_model/{model_id}")

    def add_models(self, classification_id: str, configurations: Iterable[ModelConfiguration]) -> List[str]:
        """Attach each configuration; return the names of the ones the backend rejected."""
        failed: List[str] = []
        for configuration in configurations:
            try:
                self.add_model(classification_id, configuration)
            except BackendError as exc:
                logger.warning("Adding %s to %s failed: %s", configuration.model_type, classification_id, exc)
                failed.append(configuration.model_type)
        return failed

    # Users and datasets ----------------------------------------------------

    def get_user(self, user_id: str) -> Dict[str, Any]:
        return self._request("GET", "/user/get-user", params={"userId": user_id}) or {}

    def get_dataset(self, dataset_id: str) -> Dict[str, Any]:
        return self._request("GET", "/dataset/get_dataset", params={"dataset_id": dataset_id}) or {}

    def dashboard_stats(self, user_id: str) -> Dict[str, Any]:
        """Dataset counts and recent projects for the dashboard of ``user_id``."""
        user = self.get_user(user_id)
        datasets = []
        for dataset_id in user.get("dataset_ids") or []:
            try:
                datasets.append(self.get_dataset(dataset_id))
            except BackendError as exc:
                logger.warning("Skipping dataset %s: %s", dataset_id, exc)

        preprocessed = sum(1 for dataset in datasets if dataset.get("is_preprocessing_done") is True)
        pending = sum(
            1
            for dataset in datasets
            if dataset.get("start_preprocessing") is True and dataset.get("is_preprocessing_done") is not True
        )
        return {
            "totalDatasets": len(datasets),
            "preprocessedDatasets": preprocessed,
            "pendingPreprocessing": pending,
            "projects": [
                {
                    "id": dataset.get("_id"),
                    "name": dataset.get("filename"),
                    "type": "Dataset",
                    "createdAt": dataset.get("created_at"),
                }
                for dataset in datasets
            ],
        }
