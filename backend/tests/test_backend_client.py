"""Tests for the backend HTTP client."""
from unittest.mock import MagicMock

import pytest
import requests

from modelhub.clients.backend import BackendClient, BackendError
from modelhub.hyperparameters import from_values


def _response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    if payload is None:
        response.content = text.encode("utf-8")
        response.json.side_effect = ValueError("no JSON")
    else:
        response.content = b"{}"
        response.json.return_value = payload
    response.text = text
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return BackendClient(base_url="http://backend.test/", timeout=3, session=session)


def test_get_classifications_normalizes_records(client, session):
    session.request.return_value = _response(
        payload=[{"_id": "c1", "classification_name": "Iris", "models": None, "extra": 1}, "junk"]
    )
    assert client.get_classifications() == [{"_id": "c1", "classification_name": "Iris", "models": []}]
    method, url = session.request.call_args.args
    assert (method, url) == ("GET", "http://backend.test/admin/get_classifications")
    assert session.request.call_args.kwargs["timeout"] == 3


def test_add_model_posts_configuration_payload(client, session):
    session.request.return_value = _response(payload={"_id": "m1"})
    config = from_values("regression", "ridge", {"alpha": "0.5"})
    assert client.add_model("c1", config) == {"_id": "m1"}

    body = session.request.call_args.kwargs["json"]
    assert body["classification_id"] == "c1"
    assert body["model_name"] == "ridge"
    assert body["hyperparameter_values"]["alpha"] == 0.5


def test_error_status_uses_backend_message(client, session):
    session.request.return_value = _response(status_code=400, payload={"error": "Duplicate name"})
    with pytest.raises(BackendError) as excinfo:
        client.add_classification("Iris")
    assert excinfo.value.message == "Duplicate name"
    assert excinfo.value.status_code == 400


def test_error_status_falls_back_to_body_text(client, session):
    session.request.return_value = _response(status_code=500, text="Internal Server Error")
    with pytest.raises(BackendError) as excinfo:
        client.delete_model("m1")
    assert excinfo.value.message == "Internal Server Error"


def test_connection_failure_is_backend_error(client, session):
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(BackendError) as excinfo:
        client.get_classifications()
    assert excinfo.value.status_code is None


def test_add_classification_requires_id(client, session):
    session.request.return_value = _response(payload={})
    with pytest.raises(BackendError):
        client.add_classification("Iris")


def test_add_models_collects_failures(client, session):
    session.request.side_effect = [_response(payload={"_id": "m1"}), _response(status_code=422, payload={"error": "bad"})]
    configs = [from_values("regression", "ridge", {}), from_values("regression", "lasso", {})]
    assert client.add_models("c1", configs) == ["lasso"]


def test_dashboard_stats_counts_datasets(client, session):
    session.request.side_effect = [
        _response(payload={"dataset_ids": ["d1", "d2", "d3"]}),
        _response(payload={"_id": "d1", "filename": "a.csv", "is_preprocessing_done": True}),
        _response(payload={"_id": "d2", "filename": "b.csv", "start_preprocessing": True}),
        _response(status_code=404, payload={"error": "missing"}),
    ]
    stats = client.dashboard_stats("u1")
    assert stats["totalDatasets"] == 2
    assert stats["preprocessedDatasets"] == 1
    assert stats["pendingPreprocessing"] == 1
    assert [project["name"] for project in stats["projects"]] == ["a.csv", "b.csv"]
