"""Per-model hyperparameter configurations and their immutable updates.

A :class:`ModelConfiguration` holds one :class:`ParameterState` (declared spec
plus current value) per schema parameter. Every operation returns a new
configuration; the one passed in is never modified, so a stale copy held by
another reader stays valid.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .coercion import coerce
from .errors import (
    HyperparameterError,
    IndexOutOfRangeError,
    InvalidOptionError,
    InvalidTypeError,
    NotNeuralModelError,
    UnknownParameterError,
)
from .registry import REGISTRY, SchemaRegistry
from .spec import ModelSchema, ParamSpec
from .tables.neural import ARCHITECTURE_LAYER_FIELDS, LAYER_FIELDS

logger = logging.getLogger(__name__)

LAYERS_PARAM = "layers"


@dataclass(frozen=True)
class LayerConfiguration:
    """One hidden layer of a neural architecture."""

    units: int = 64
    activation: str = "relu"
    filters: Optional[int] = None
    kernel_size: Optional[int] = None
    pool_size: Optional[int] = None
    return_sequences: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class ParameterState:
    spec: ParamSpec
    value: Any


@dataclass(frozen=True)
class ModelConfiguration:
    """The live configuration of one selected model."""

    category: Optional[str]
    model_type: str
    parameters: Mapping[str, ParameterState]

    @property
    def hyperparameters(self) -> Dict[str, Any]:
        """Parameter name → declared type tag (a list for union types)."""
        return {
            name: list(state.spec.type) if state.spec.is_union else state.spec.type
            for name, state in self.parameters.items()
        }

    @property
    def hyperparameter_values(self) -> Dict[str, Any]:
        """Parameter name → current value, in JSON-friendly form."""
        return {name: _plain(state.value) for name, state in self.parameters.items()}

    @property
    def layers(self) -> Tuple[LayerConfiguration, ...]:
        state = self.parameters.get(LAYERS_PARAM)
        return tuple(state.value) if state is not None and state.value else ()

    def value(self, param: str) -> Any:
        try:
            return self.parameters[param].value
        except KeyError:
            raise UnknownParameterError(
                f"{self.model_type} has no hyperparameter '{param}'", parameter=param
            ) from None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modelType": self.model_type,
            "category": self.category,
            "hyperparameters": self.hyperparameters,
            "hyperparameter_values": self.hyperparameter_values,
        }


def _plain(value: Any) -> Any:
    if isinstance(value, LayerConfiguration):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _with_value(config: ModelConfiguration, param: str, value: Any) -> ModelConfiguration:
    parameters = dict(config.parameters)
    parameters[param] = ParameterState(spec=parameters[param].spec, value=value)
    return replace(config, parameters=MappingProxyType(parameters))


def _require_neural(config: ModelConfiguration) -> Dict[str, ParamSpec]:
    extra_fields = ARCHITECTURE_LAYER_FIELDS.get(config.model_type)
    if extra_fields is None or LAYERS_PARAM not in config.parameters:
        raise NotNeuralModelError(
            f"{config.model_type} is not a neural network model; layers are not supported",
            parameter=LAYERS_PARAM,
        )
    return {**LAYER_FIELDS, **extra_fields}


def initialize(schema: ModelSchema, model_type: str, category: Optional[str] = None) -> ModelConfiguration:
    """Create a configuration holding every schema parameter at its default."""
    parameters = {}
    for name, spec in schema.items():
        default = spec.default
        if isinstance(default, list):
            default = tuple(default)
        parameters[name] = ParameterState(spec=spec, value=default)
    return ModelConfiguration(
        category=category,
        model_type=model_type,
        parameters=MappingProxyType(parameters),
    )


def new_configuration(
    category: str, model_name: str, registry: Optional[SchemaRegistry] = None
) -> ModelConfiguration:
    """Look the model up in the registry and initialize its configuration."""
    schema = (registry or REGISTRY).lookup(category, model_name)
    return initialize(schema, model_name, category)


def set_value(config: ModelConfiguration, param: str, value: Any) -> ModelConfiguration:
    """Replace one parameter's value, leaving everything else untouched."""
    if param not in config.parameters:
        raise UnknownParameterError(
            f"{config.model_type} has no hyperparameter '{param}'", parameter=param
        )
    return _with_value(config, param, value)


def append_layer(config: ModelConfiguration) -> ModelConfiguration:
    """Add a hidden layer with the architecture's default fields."""
    fields = _require_neural(config)
    layer = LayerConfiguration(**{name: spec.default for name, spec in fields.items()})
    return _with_value(config, LAYERS_PARAM, config.layers + (layer,))


def set_layer_field(config: ModelConfiguration, index: int, field: str, value: Any) -> ModelConfiguration:
    """Coerce ``value`` and store it as ``field`` of the layer at ``index``."""
    fields = _require_neural(config)
    layers = config.layers
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(layers):
        raise IndexOutOfRangeError(
            f"Layer index {index} is out of range ({len(layers)} layer(s))",
            parameter=LAYERS_PARAM,
            allowed=f"0..{len(layers) - 1}" if layers else "no layers",
        )
    name = f"{LAYERS_PARAM}[{index}].{field}"
    spec = fields.get(field)
    if spec is None:
        raise InvalidOptionError(
            f"{config.model_type} layers have no field '{field}'",
            parameter=name,
            allowed=", ".join(fields),
        )
    coerced = _coerce_layer_value(spec, value, name)
    updated = layers[:index] + (replace(layers[index], **{field: coerced}),) + layers[index + 1:]
    return _with_value(config, LAYERS_PARAM, updated)


def _coerce_layer_value(spec: ParamSpec, value: Any, name: str) -> Any:
    coerced = coerce(spec, value, name)
    if coerced is None:
        raise InvalidTypeError(f"{name} must not be null", parameter=name, allowed=spec.describe_allowed())
    return coerced


def coerce_layers(config: ModelConfiguration, raw: Any) -> Tuple[LayerConfiguration, ...]:
    """Validate a whole layer list, e.g. one echoed back by the UI."""
    fields = _require_neural(config)
    if raw is None:
        return ()
    if not isinstance(raw, (list, tuple)):
        raise InvalidTypeError(f"{LAYERS_PARAM} must be a list, got {raw!r}", parameter=LAYERS_PARAM, allowed="array")

    layers = []
    for index, item in enumerate(raw):
        if isinstance(item, LayerConfiguration):
            item = item.to_dict()
        if not isinstance(item, Mapping):
            raise InvalidTypeError(
                f"{LAYERS_PARAM}[{index}] must be an object, got {item!r}",
                parameter=f"{LAYERS_PARAM}[{index}]",
            )
        values = {}
        for field, spec in fields.items():
            name = f"{LAYERS_PARAM}[{index}].{field}"
            values[field] = _coerce_layer_value(spec, item.get(field, spec.default), name)
        unknown = set(item) - set(fields)
        if unknown:
            raise InvalidOptionError(
                f"{config.model_type} layers have no field(s): {', '.join(sorted(unknown))}",
                parameter=f"{LAYERS_PARAM}[{index}]",
                allowed=", ".join(fields),
            )
        layers.append(LayerConfiguration(**values))
    return tuple(layers)


def apply_update(config: ModelConfiguration, param: str, raw: Any) -> ModelConfiguration:
    """Coerce one raw input and apply it; ``config`` is unchanged on failure."""
    try:
        if param not in config.parameters:
            raise UnknownParameterError(
                f"{config.model_type} has no hyperparameter '{param}'", parameter=param
            )
        if param == LAYERS_PARAM and config.model_type in ARCHITECTURE_LAYER_FIELDS:
            value = coerce_layers(config, raw)
        else:
            value = coerce(config.parameters[param].spec, raw, param)
    except HyperparameterError as exc:
        logger.info("Rejected %s update for %s: %s", param, config.model_type, exc.message)
        raise
    return _with_value(config, param, value)


def from_values(
    category: str,
    model_name: str,
    values: Mapping[str, Any],
    registry: Optional[SchemaRegistry] = None,
) -> ModelConfiguration:
    """Rebuild a configuration from submitted values, validating each one."""
    config = new_configuration(category, model_name, registry)
    for param, raw in values.items():
        config = apply_update(config, param, raw)
    return config


def to_payload(config: ModelConfiguration, classification_id: str) -> Dict[str, Any]:
    """Backend JSON for attaching ``config`` to a classification."""
    return {
        "classification_id": classification_id,
        "model_name": config.model_type,
        "hyperparameters": config.hyperparameters,
        "hyperparameter_values": config.hyperparameter_values,
    }


def from_payload(payload: Mapping[str, Any], registry: Optional[SchemaRegistry] = None) -> ModelConfiguration:
    """Parse the backend JSON shape produced by :func:`to_payload`."""
    registry = registry or REGISTRY
    model_name = payload.get("model_name")
    if not model_name:
        raise UnknownParameterError("Payload is missing model_name", parameter="model_name")
    category = payload.get("category") or registry.find_category(model_name)
    return from_values(category, model_name, payload.get("hyperparameter_values") or {}, registry)
