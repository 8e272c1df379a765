"""Schema lookup and stateless configuration updates for the model forms.

The configuration belongs to the client: each request echoes back the
current ``hyperparameter_values`` and receives the updated configuration, or
a 422 naming the parameter and what it accepts while the client keeps its
previous values.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter

from ...hyperparameters import (
    REGISTRY,
    HyperparameterError,
    ModelConfiguration,
    append_layer,
    apply_update,
    from_values,
    new_configuration,
    set_layer_field,
)
from ...models import ConfigurationState, LayerFieldUpdate, ParameterUpdate
from .errors import hyperparameter_http_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/models", tags=["hyperparameters"])


def _restore(category: str, model_name: str, state: ConfigurationState) -> ModelConfiguration:
    return from_values(category, model_name, state.hyperparameter_values, REGISTRY)


@router.get("/categories")
async def list_categories() -> Dict[str, Any]:
    return {"categories": REGISTRY.describe()}


@router.get("/{category}/{model_name}/schema")
async def get_schema(category: str, model_name: str) -> Dict[str, Any]:
    try:
        schema = REGISTRY.lookup(category, model_name)
    except HyperparameterError as exc:
        raise hyperparameter_http_error(exc) from exc
    return {
        "category": category,
        "model_name": model_name,
        "neural": REGISTRY.is_neural(model_name),
        "parameters": {name: spec.to_dict() for name, spec in schema.items()},
    }


@router.post("/{category}/{model_name}/configuration")
async def create_configuration(category: str, model_name: str) -> Dict[str, Any]:
    try:
        configuration = new_configuration(category, model_name, REGISTRY)
    except HyperparameterError as exc:
        raise hyperparameter_http_error(exc) from exc
    return configuration.to_dict()


@router.put("/{category}/{model_name}/configuration/parameters/{param}")
async def update_parameter(category: str, model_name: str, param: str, payload: ParameterUpdate) -> Dict[str, Any]:
    try:
        configuration = _restore(category, model_name, payload)
        configuration = apply_update(configuration, param, payload.value)
    except HyperparameterError as exc:
        raise hyperparameter_http_error(exc) from exc
    return configuration.to_dict()


@router.post("/{category}/{model_name}/configuration/layers")
async def add_layer(category: str, model_name: str, payload: ConfigurationState) -> Dict[str, Any]:
    try:
        configuration = append_layer(_restore(category, model_name, payload))
    except HyperparameterError as exc:
        raise hyperparameter_http_error(exc) from exc
    logger.debug("Added layer %d to %s", len(configuration.layers), model_name)
    return configuration.to_dict()


@router.put("/{category}/{model_name}/configuration/layers/{index}")
async def update_layer(category: str, model_name: str, index: int, payload: LayerFieldUpdate) -> Dict[str, Any]:
    try:
        configuration = _restore(category, model_name, payload)
        configuration = set_layer_field(configuration, index, payload.field, payload.value)
    except HyperparameterError as exc:
        raise hyperparameter_http_error(exc) from exc
    return configuration.to_dict()
