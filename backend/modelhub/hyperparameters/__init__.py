"""Hyperparameter schemas, configuration building and input coercion."""

from .coercion import coerce, coerce_all
from .configuration import (
    LayerConfiguration,
    ModelConfiguration,
    ParameterState,
    append_layer,
    apply_update,
    from_payload,
    from_values,
    initialize,
    new_configuration,
    set_layer_field,
    set_value,
    to_payload,
)
from .errors import (
    HyperparameterError,
    IndexOutOfRangeError,
    InvalidOptionError,
    InvalidTypeError,
    NotNeuralModelError,
    RangeError,
    UnknownModelError,
    UnknownParameterError,
)
from .registry import REGISTRY, SchemaRegistry, build_registry, load_overrides, lookup
from .spec import ModelSchema, ParamSpec

__all__ = [
    "HyperparameterError",
    "IndexOutOfRangeError",
    "InvalidOptionError",
    "InvalidTypeError",
    "LayerConfiguration",
    "ModelConfiguration",
    "ModelSchema",
    "NotNeuralModelError",
    "ParamSpec",
    "ParameterState",
    "REGISTRY",
    "RangeError",
    "SchemaRegistry",
    "UnknownModelError",
    "UnknownParameterError",
    "append_layer",
    "apply_update",
    "build_registry",
    "coerce",
    "coerce_all",
    "from_payload",
    "from_values",
    "initialize",
    "load_overrides",
    "lookup",
    "new_configuration",
    "set_layer_field",
    "set_value",
    "to_payload",
]
