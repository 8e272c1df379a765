"""Read-only registry of model schemas keyed by ``(category, model_name)``."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import yaml

from .. import settings
from .coercion import coerce
from .errors import UnknownModelError, UnknownParameterError
from .spec import ModelSchema, ParamSpec
from .tables import MODEL_TABLES
from .tables.neural import ARCHITECTURE_LAYER_FIELDS

logger = logging.getLogger(__name__)

NEURAL_CATEGORY = "neural"
_OVERRIDABLE_FIELDS = {"default", "min", "max", "options"}


class SchemaRegistry:
    """Authoritative ``ModelSchema`` lookup.

    The registry never changes after construction, so one instance can be
    shared by every request without locking.
    """

    def __init__(self, tables: Mapping[str, Mapping[str, ModelSchema]]) -> None:
        self._tables = MappingProxyType(
            {category: MappingProxyType(dict(models)) for category, models in tables.items()}
        )
        self._category_by_model: Dict[str, str] = {}
        for category, models in self._tables.items():
            for model_name in models:
                self._category_by_model.setdefault(model_name, category)

    def categories(self) -> Tuple[str, ...]:
        return tuple(self._tables)

    def models(self, category: str) -> Tuple[str, ...]:
        try:
            return tuple(self._tables[category])
        except KeyError:
            raise UnknownModelError(
                f"Unknown model category: {category}",
                allowed=", ".join(self._tables),
            ) from None

    def lookup(self, category: str, model_name: str) -> ModelSchema:
        models = self._tables.get(category)
        if models is None:
            raise UnknownModelError(
                f"Unknown model category: {category}",
                allowed=", ".join(self._tables),
            )
        schema = models.get(model_name)
        if schema is None:
            raise UnknownModelError(
                f"Unknown model '{model_name}' in category '{category}'",
                allowed=", ".join(models),
            )
        return schema

    def find_category(self, model_name: str) -> str:
        try:
            return self._category_by_model[model_name]
        except KeyError:
            raise UnknownModelError(f"Unknown model: {model_name}") from None

    def is_neural(self, model_name: str) -> bool:
        return (
            self._category_by_model.get(model_name) == NEURAL_CATEGORY
            and model_name in ARCHITECTURE_LAYER_FIELDS
        )

    def items(self) -> Iterator[Tuple[str, str, ModelSchema]]:
        for category, models in self._tables.items():
            for model_name, schema in models.items():
                yield category, model_name, schema

    def describe(self) -> Dict[str, List[str]]:
        """Category → model names, in display order."""
        return {category: list(models) for category, models in self._tables.items()}


def _override_spec(name: str, spec: ParamSpec, changes: Mapping[str, Any]) -> ParamSpec:
    unknown = set(changes) - _OVERRIDABLE_FIELDS
    if unknown:
        raise ValueError(f"Unsupported override field(s) for {name}: {', '.join(sorted(unknown))}")
    updated = dataclasses.replace(spec, **changes)
    if updated.default is not None:
        # An overridden default must still be a legal value.
        coerce(updated, updated.default, name)
    return updated


def build_registry(overrides: Optional[Mapping[str, Any]] = None) -> SchemaRegistry:
    """Build a registry from the static tables, applying ``overrides`` once."""
    if not overrides:
        return SchemaRegistry(MODEL_TABLES)

    tables: Dict[str, Dict[str, ModelSchema]] = {
        category: dict(models) for category, models in MODEL_TABLES.items()
    }
    for category, models in overrides.items():
        if category not in tables:
            raise UnknownModelError(f"Unknown model category in overrides: {category}")
        for model_name, params in (models or {}).items():
            schema = tables[category].get(model_name)
            if schema is None:
                raise UnknownModelError(f"Unknown model in overrides: {category}/{model_name}")
            updated = dict(schema)
            for param, changes in (params or {}).items():
                if param not in updated:
                    raise UnknownParameterError(
                        f"Unknown hyperparameter in overrides: {category}/{model_name}/{param}",
                        parameter=param,
                    )
                updated[param] = _override_spec(param, updated[param], changes or {})
            tables[category][model_name] = MappingProxyType(updated)
            logger.info("Applied hyperparameter overrides for %s/%s", category, model_name)
    return SchemaRegistry(tables)


def load_overrides(path: Path | str) -> Dict[str, Any]:
    """Read a YAML override table ``{category: {model: {param: {...}}}}``."""
    override_path = Path(path)
    with override_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Hyperparameter overrides must be a mapping: {override_path}")
    return data


REGISTRY = build_registry(
    load_overrides(settings.HYPERPARAMETER_OVERRIDES) if settings.HYPERPARAMETER_OVERRIDES else None
)


def lookup(category: str, model_name: str) -> ModelSchema:
    """Return the schema for ``(category, model_name)`` from the process registry."""
    return REGISTRY.lookup(category, model_name)
