"""Tests for the schema registry and startup overrides."""
import pytest
import yaml

from modelhub.hyperparameters import (
    REGISTRY,
    HyperparameterError,
    UnknownModelError,
    UnknownParameterError,
    build_registry,
    load_overrides,
    lookup,
)
from modelhub.hyperparameters.spec import FLOAT, ParamSpec


class TestLookup:
    def test_known_model(self):
        schema = lookup("classification", "logistic_regression")
        assert schema["C"].type == FLOAT
        assert schema["C"].label == "C"
        assert schema["max_iter"].label == "Max Iter"

    def test_unknown_category(self):
        with pytest.raises(UnknownModelError) as excinfo:
            lookup("vision", "yolo")
        assert "classification" in excinfo.value.allowed

    def test_unknown_model_lists_alternatives(self):
        with pytest.raises(UnknownModelError) as excinfo:
            lookup("regression", "ridge_regression")
        assert "ridge" in excinfo.value.allowed

    def test_schema_is_read_only(self):
        schema = lookup("regression", "ridge")
        with pytest.raises(TypeError):
            schema["alpha"] = ParamSpec(type=FLOAT, default=2.0)

    def test_find_category_and_neural(self):
        assert REGISTRY.find_category("dbscan") == "clustering"
        assert REGISTRY.is_neural("recurrent_neural_network")
        assert not REGISTRY.is_neural("ridge")
        with pytest.raises(UnknownModelError):
            REGISTRY.find_category("yolo")

    def test_every_schema_has_valid_bounds(self):
        for _, _, schema in REGISTRY.items():
            for spec in schema.values():
                if spec.min is not None and spec.max is not None:
                    assert spec.min <= spec.max


class TestParamSpec:
    def test_rejects_unknown_tag(self):
        with pytest.raises(ValueError):
            ParamSpec(type="complex", default=None)

    def test_rejects_inverted_bounds(self):
        with pytest.raises(ValueError):
            ParamSpec(type=FLOAT, default=0.0, min=1.0, max=0.0)


class TestOverrides:
    def test_override_changes_default_and_bounds(self):
        registry = build_registry({"classification": {"support_vector_classifier": {"C": {"default": 2.0, "max": 100.0}}}})
        spec = registry.lookup("classification", "support_vector_classifier")["C"]
        assert spec.default == 2.0
        assert spec.max == 100.0
        # the process registry is untouched
        assert REGISTRY.lookup("classification", "support_vector_classifier")["C"].max == 10.0

    def test_override_default_must_be_legal(self):
        with pytest.raises(HyperparameterError):
            build_registry({"regression": {"ridge": {"alpha": {"default": 50.0}}}})

    def test_unknown_names_are_rejected(self):
        with pytest.raises(UnknownModelError):
            build_registry({"regression": {"ridge_regression": {}}})
        with pytest.raises(UnknownParameterError):
            build_registry({"regression": {"ridge": {"depth": {"default": 1}}}})

    def test_unsupported_field_is_rejected(self):
        with pytest.raises(ValueError):
            build_registry({"regression": {"ridge": {"alpha": {"type": "int"}}}})

    def test_load_overrides_from_yaml(self, tmp_path):
        path = tmp_path / "overrides.yaml"
        path.write_text(
            yaml.safe_dump({"neural": {"multilayer_perceptron": {"epochs": {"default": 20}}}}),
            encoding="utf-8",
        )
        registry = build_registry(load_overrides(path))
        assert registry.lookup("neural", "multilayer_perceptron")["epochs"].default == 20

    def test_load_overrides_requires_mapping(self, tmp_path):
        path = tmp_path / "overrides.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_overrides(path)
