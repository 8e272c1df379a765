"""Tests for FastAPI endpoints."""
import asyncio
import json

import pytest
from fastapi.testclient import TestClient

from modelhub.api.endpoints.classifications import get_backend_client
from modelhub.clients.backend import BackendError
from modelhub.main import app
from modelhub.storage import RecordStore, get_dataset_store, get_job_store, get_metrics_store


class FakeBackend:
    """Records the calls the API makes instead of talking HTTP."""

    def __init__(self, fail_models=(), unreachable=False):
        self.fail_models = set(fail_models)
        self.unreachable = unreachable
        self.added = []
        self.updated = []
        self.deleted = []
        self.ran_on_event_loop = None

    def get_classifications(self):
        try:
            asyncio.get_running_loop()
            self.ran_on_event_loop = True
        except RuntimeError:
            self.ran_on_event_loop = False
        if self.unreachable:
            raise BackendError("Backend unreachable: connection refused")
        return [{"_id": "c1", "classification_name": "Iris", "models": []}]

    def add_classification(self, name):
        return "c-new"

    def add_models(self, classification_id, configurations):
        failed = []
        for configuration in configurations:
            if configuration.model_type in self.fail_models:
                failed.append(configuration.model_type)
            else:
                self.added.append((classification_id, configuration))
        return failed

    def add_model(self, classification_id, configuration):
        self.added.append((classification_id, configuration))
        return {"_id": "m-new", "model_name": configuration.model_type}

    def update_model(self, model_id, classification_id, configuration):
        self.updated.append((model_id, classification_id, configuration))
        return {"_id": model_id}

    def update_classification(self, classification_id, name):
        self.updated.append((classification_id, name))

    def delete_classification(self, classification_id):
        self.deleted.append(classification_id)

    def delete_model(self, model_id):
        self.deleted.append(model_id)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def client(tmp_path, backend):
    """Create a test client with isolated stores and a fake backend."""
    stores = {name: RecordStore(name, storage_dir=tmp_path) for name in ("datasets", "metrics", "jobs")}
    app.dependency_overrides[get_backend_client] = lambda: backend
    app.dependency_overrides[get_dataset_store] = lambda: stores["datasets"]
    app.dependency_overrides[get_metrics_store] = lambda: stores["metrics"]
    app.dependency_overrides[get_job_store] = lambda: stores["jobs"]
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root_endpoint(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "ModelHub API", "version": "1.0.0"}


class TestHyperparameterEndpoints:
    def test_categories_list_every_table(self, client):
        data = client.get("/api/models/categories").json()["categories"]
        assert set(data) == {"classification", "clustering", "naive_bayes", "regression", "neural"}
        assert "support_vector_classifier" in data["classification"]

    def test_schema_describes_bounds_and_options(self, client):
        response = client.get("/api/models/classification/support_vector_classifier/schema")
        assert response.status_code == 200
        params = response.json()["parameters"]
        assert params["C"]["min"] == 0.0
        assert params["C"]["max"] == 10.0
        assert params["gamma"]["type"] == ["str", "float"]
        assert params["gamma"]["options"] == ["scale", "auto"]

    def test_unknown_model_is_404(self, client):
        response = client.get("/api/models/classification/quantum_forest/schema")
        assert response.status_code == 404
        assert "quantum_forest" in response.json()["detail"]["error"]

    def test_new_configuration_holds_defaults(self, client):
        response = client.post("/api/models/classification/support_vector_classifier/configuration")
        assert response.status_code == 200
        data = response.json()
        assert data["modelType"] == "support_vector_classifier"
        assert data["hyperparameter_values"]["C"] == 1.0
        assert set(data["hyperparameters"]) == set(data["hyperparameter_values"])

    def test_parameter_update_coerces_string_input(self, client):
        response = client.put(
            "/api/models/classification/support_vector_classifier/configuration/parameters/C",
            json={"hyperparameter_values": {"kernel": "linear"}, "value": "2.5"},
        )
        assert response.status_code == 200
        values = response.json()["hyperparameter_values"]
        assert values["C"] == 2.5
        assert values["kernel"] == "linear"

    def test_out_of_range_update_is_422_with_allowed_range(self, client):
        response = client.put(
            "/api/models/classification/support_vector_classifier/configuration/parameters/C",
            json={"value": "12"},
        )
        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["parameter"] == "C"
        assert detail["allowed"] == "float in [0, 10]"

    def test_layers_grow_and_update(self, client):
        base = "/api/models/neural/convolutional_neural_network/configuration"
        first = client.post(f"{base}/layers", json={"hyperparameter_values": {}}).json()
        assert first["hyperparameter_values"]["layers"] == [
            {"units": 64, "activation": "relu", "filters": 32, "kernel_size": 3, "pool_size": 2}
        ]

        response = client.put(
            f"{base}/layers/0",
            json={"hyperparameter_values": first["hyperparameter_values"], "field": "units", "value": "128"},
        )
        assert response.status_code == 200
        assert response.json()["hyperparameter_values"]["layers"][0]["units"] == 128

    def test_layer_index_out_of_range_is_422(self, client):
        response = client.put(
            "/api/models/neural/multilayer_perceptron/configuration/layers/3",
            json={"field": "units", "value": 10},
        )
        assert response.status_code == 422
        assert response.json()["detail"]["parameter"] == "layers"

    def test_layers_rejected_for_non_neural_model(self, client):
        response = client.post("/api/models/regression/ridge/configuration/layers", json={})
        assert response.status_code == 422


class TestClassificationEndpoints:
    def test_list_classifications(self, client):
        response = client.get("/api/classifications")
        assert response.status_code == 200
        assert response.json()["classifications"][0]["classification_name"] == "Iris"

    def test_backend_calls_run_off_the_event_loop(self, client, backend):
        assert client.get("/api/classifications").status_code == 200
        assert backend.ran_on_event_loop is False

    def test_backend_failure_is_502(self, tmp_path):
        app.dependency_overrides[get_backend_client] = lambda: FakeBackend(unreachable=True)
        try:
            response = TestClient(app).get("/api/classifications")
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 502
        assert "unreachable" in response.json()["detail"]["error"]

    def test_create_classification_with_models(self, client, backend):
        payload = {
            "classification_name": "  Iris  ",
            "models": [
                {"category": "classification", "name": "logistic_regression", "hyperparameter_values": {"C": "0.5"}},
                {"category": "neural", "name": "multilayer_perceptron"},
            ],
        }
        response = client.post("/api/classifications", json=payload)
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "success"
        assert data["classification_name"] == "Iris"
        assert [configuration.model_type for _, configuration in backend.added] == [
            "logistic_regression",
            "multilayer_perceptron",
        ]
        assert backend.added[0][1].value("C") == 0.5

    def test_create_classification_reports_partial_failure(self, tmp_path):
        backend = FakeBackend(fail_models={"ridge"})
        app.dependency_overrides[get_backend_client] = lambda: backend
        try:
            response = TestClient(app).post(
                "/api/classifications",
                json={
                    "classification_name": "Houses",
                    "models": [{"category": "regression", "name": "ridge"}, {"category": "regression", "name": "lasso"}],
                },
            )
        finally:
            app.dependency_overrides.clear()
        assert response.json()["status"] == "partial"
        assert response.json()["failed_models"] == ["ridge"]

    def test_invalid_selection_writes_nothing(self, client, backend):
        payload = {
            "classification_name": "Iris",
            "models": [{"category": "classification", "name": "logistic_regression", "hyperparameter_values": {"penalty": "l3"}}],
        }
        response = client.post("/api/classifications", json=payload)
        assert response.status_code == 422
        assert response.json()["detail"]["parameter"] == "penalty"
        assert backend.added == []

    def test_blank_name_is_400(self, client):
        response = client.post("/api/classifications", json={"classification_name": "   "})
        assert response.status_code == 400

    def test_add_model_infers_category(self, client, backend):
        response = client.post(
            "/api/classifications/c1/models",
            json={"model_name": "gaussian_nb", "hyperparameter_values": {"var_smoothing": "1e-8"}},
        )
        assert response.status_code == 200
        assert response.json()["configuration"]["category"] == "naive_bayes"
        assert backend.added[0][0] == "c1"

    def test_update_and_delete_model(self, client, backend):
        response = client.put(
            "/api/classifications/models/m1",
            json={"classification_id": "c1", "model_name": "ridge", "hyperparameter_values": {"alpha": 2}},
        )
        assert response.status_code == 200
        assert backend.updated[0][0] == "m1"

        response = client.delete("/api/classifications/models/m1")
        assert response.status_code == 200
        assert backend.deleted == ["m1"]


class TestDatasetEndpoints:
    def test_analyze_csv(self, client, sample_csv_bytes):
        files = {"file": ("iris.csv", sample_csv_bytes, "text/csv")}
        response = client.post("/api/dataset/analyze", files=files, headers={"user-id": "u1"})
        assert response.status_code == 200
        data = response.json()
        assert data["shape"] == [3, 4]
        assert data["targetColumn"] == "label"
        assert data["columnTypes"]["species"] == "categorical"
        assert data["summary"]["missingValues"]["sepal_width"] == 1

        stored = client.get(f"/api/dataset/{data['datasetId']}").json()
        assert stored["userId"] == "u1"
        assert stored["rowCount"] == 3

    def test_analyze_json(self, client):
        rows = [{"x": 1, "y": "a"}, {"x": 2, "y": "b"}]
        files = {"file": ("rows.json", json.dumps(rows).encode("utf-8"), "application/json")}
        response = client.post("/api/dataset/analyze", files=files)
        assert response.status_code == 200
        assert response.json()["columnTypes"] == {"x": "numeric", "y": "categorical"}

    def test_unsupported_format_is_400(self, client):
        files = {"file": ("notes.txt", b"hello", "text/plain")}
        response = client.post("/api/dataset/analyze", files=files)
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "filename, content",
        [
            ("broken.xlsx", b"this is not a zip workbook"),
            ("broken.xls", b"this is not a workbook either"),
            ("rows.json", b"[1, 2, 3]"),
            ("mixed.json", b'[{"x": 1}, "y"]'),
        ],
    )
    def test_malformed_upload_is_400(self, client, filename, content):
        files = {"file": (filename, content, "application/octet-stream")}
        response = client.post("/api/dataset/analyze", files=files)
        assert response.status_code == 400
        assert filename in response.json()["detail"]

    def test_missing_file_is_422(self, client):
        response = client.post("/api/dataset/analyze")
        assert response.status_code == 422

    def test_unknown_dataset_is_404(self, client):
        assert client.get("/api/dataset/nope").status_code == 404


class TestMetricsAndTraining:
    def test_metrics_history_and_comparison(self, client):
        for name, accuracy in (("svc", 0.91), ("tree", 0.84)):
            response = client.post("/api/models/metrics", json={"name": name, "accuracy": accuracy, "f1Score": 0.8})
            assert response.status_code == 201

        metrics = client.get("/api/models/metrics").json()["metrics"]
        assert {row["name"] for row in metrics} == {"svc", "tree"}

        comparison = client.get("/api/models/metrics/compare", params={"metric": "accuracy"}).json()
        assert comparison["chartData"] == [{"name": "svc", "value": 0.91}, {"name": "tree", "value": 0.84}]
        assert comparison["best"]["name"] == "svc"
        assert comparison["averages"]["f1Score"] == pytest.approx(0.8)
        assert comparison["averages"]["recall"] is None

    def test_unknown_comparison_metric_is_400(self, client):
        response = client.get("/api/models/metrics/compare", params={"metric": "auc"})
        assert response.status_code == 400

    def test_training_job_lifecycle(self, client):
        response = client.post(
            "/api/models/train",
            json={"modelType": "random_forest_classifier", "hyperparameters": {"n_estimators": "200"}},
        )
        assert response.status_code == 202
        job_id = response.json()["jobId"]

        job = client.get("/api/models/train", params={"job_id": job_id}).json()
        assert job["status"] == "queued"
        assert job["category"] == "classification"
        assert job["hyperparameters"]["n_estimators"] == 200

        response = client.patch(
            f"/api/models/train/{job_id}",
            json={"status": "completed", "metrics": {"name": "forest", "accuracy": 0.9}},
        )
        assert response.status_code == 200
        finished = response.json()
        assert finished["progress"] == 100.0
        assert finished["completedAt"]

        metrics = client.get("/api/models/metrics").json()["metrics"]
        assert [row["name"] for row in metrics] == ["forest"]

    def test_training_rejects_invalid_hyperparameters(self, client):
        response = client.post(
            "/api/models/train",
            json={"modelType": "random_forest_classifier", "hyperparameters": {"n_estimators": "many"}},
        )
        assert response.status_code == 422
        assert response.json()["detail"]["parameter"] == "n_estimators"

    def test_training_status_requires_known_job(self, client):
        assert client.get("/api/models/train").status_code == 400
        assert client.get("/api/models/train", params={"job_id": "missing"}).status_code == 404

    def test_training_status_accepts_camel_case_job_id(self, client):
        job_id = client.post("/api/models/train", json={"modelType": "ridge"}).json()["jobId"]
        response = client.get("/api/models/train", params={"jobId": job_id})
        assert response.status_code == 200
        assert response.json()["category"] == "regression"
