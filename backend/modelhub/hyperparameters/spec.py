"""Declarative description of a model's configurable parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

INT = "int"
FLOAT = "float"
BOOL = "bool"
STR = "str"
ARRAY = "array"
NONE = "None"

TYPE_TAGS = frozenset({INT, FLOAT, BOOL, STR, ARRAY, NONE})

TypeTag = Union[str, Tuple[str, ...]]


@dataclass(frozen=True)
class ParamSpec:
    """Type, default and constraints of one hyperparameter.

    ``type`` is a single tag or a tuple of tags (a union). Bounds are
    inclusive; ``None`` means the side is unbounded.
    """

    type: TypeTag
    default: Any = None
    min: Optional[float] = None
    max: Optional[float] = None
    options: Optional[Tuple[Any, ...]] = None
    label: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        tags = self.type_tags
        unknown = [tag for tag in tags if tag not in TYPE_TAGS]
        if unknown or not tags:
            raise ValueError(f"Unknown type tag(s) in ParamSpec: {unknown or self.type!r}")
        if isinstance(self.type, list):
            object.__setattr__(self, "type", tuple(self.type))
        if self.options is not None and not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"ParamSpec min {self.min} is greater than max {self.max}")

    @property
    def type_tags(self) -> Tuple[str, ...]:
        if isinstance(self.type, (tuple, list)):
            return tuple(self.type)
        return (self.type,)

    @property
    def is_union(self) -> bool:
        return isinstance(self.type, (tuple, list))

    @property
    def nullable(self) -> bool:
        return NONE in self.type_tags

    def describe_allowed(self) -> str:
        """Human readable range/options, used in rejection messages."""
        parts = []
        if self.options:
            parts.append(", ".join(str(option) for option in self.options))
        numeric = [tag for tag in self.type_tags if tag in (INT, FLOAT)]
        if numeric:
            low = "-∞" if self.min is None else _format_bound(self.min)
            high = "∞" if self.max is None else _format_bound(self.max)
            parts.append(f"{'/'.join(numeric)} in [{low}, {high}]")
        for tag in self.type_tags:
            if tag in (BOOL, ARRAY) or (tag == STR and not self.options):
                parts.append(tag)
        if self.is_union or self.options:
            parts.append("null")
        return " or ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": list(self.type) if self.is_union else self.type,
            "default": list(self.default) if isinstance(self.default, tuple) else self.default,
            "min": self.min,
            "max": self.max,
            "options": list(self.options) if self.options is not None else None,
            "label": self.label,
        }


def _format_bound(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


ModelSchema = Mapping[str, ParamSpec]


def model_schema(params: Dict[str, ParamSpec]) -> ModelSchema:
    """Freeze ``params`` into a read-only schema, filling in display labels."""
    labelled = {}
    for name, spec in params.items():
        if spec.label is None:
            spec = ParamSpec(
                type=spec.type,
                default=spec.default,
                min=spec.min,
                max=spec.max,
                options=spec.options,
                label=name.replace("_", " ").title(),
            )
        labelled[name] = spec
    return MappingProxyType(labelled)
