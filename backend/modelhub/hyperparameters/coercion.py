"""Convert raw form inputs into schema-conformant hyperparameter values.

Inputs arrive from the UI as strings, booleans or numbers. :func:`coerce`
dispatches on the closed set of type tags declared by a :class:`ParamSpec` and
either returns the typed value or raises a :class:`HyperparameterError`
subclass naming the parameter and what it accepts.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import InvalidOptionError, InvalidTypeError, RangeError, UnknownParameterError
from .spec import ARRAY, BOOL, FLOAT, INT, STR, ParamSpec

NULL_LITERAL = "null"


class _NotParsable(Exception):
    """Internal signal: the raw value does not read as the requested tag."""


def coerce(spec: ParamSpec, raw: Any, parameter: Optional[str] = None) -> Any:
    """Return ``raw`` converted to the type declared by ``spec``."""
    name = parameter or "value"

    if spec.is_union or spec.options is not None:
        return _coerce_choice(spec, raw, name)

    kind = spec.type
    try:
        if kind == INT:
            return _check_range(spec, _parse_int(raw), name)
        if kind == FLOAT:
            return _check_range(spec, _parse_float(raw), name)
        if kind == BOOL:
            return _parse_bool(raw)
        if kind == STR:
            if not isinstance(raw, str):
                raise _NotParsable
            return raw
        if kind == ARRAY:
            return _parse_array(raw)
    except _NotParsable:
        raise InvalidTypeError(
            f"{name} must be {_TYPE_NAMES[kind]}, got {raw!r}",
            parameter=parameter,
            allowed=spec.describe_allowed(),
        ) from None
    # A bare "None" tag only ever holds null.
    if raw is None or raw == NULL_LITERAL:
        return None
    raise InvalidTypeError(f"{name} must be null, got {raw!r}", parameter=parameter, allowed="null")


def coerce_all(schema: Mapping[str, ParamSpec], values: Mapping[str, Any]) -> Dict[str, Any]:
    """Coerce every entry of ``values``; undeclared names are rejected."""
    coerced: Dict[str, Any] = {}
    for name, raw in values.items():
        spec = schema.get(name)
        if spec is None:
            raise UnknownParameterError(f"Unknown hyperparameter: {name}", parameter=name)
        coerced[name] = coerce(spec, raw, name)
    return coerced


_TYPE_NAMES = {
    INT: "an integer",
    FLOAT: "a number",
    BOOL: "true or false",
    STR: "a string",
    ARRAY: "a list",
}


def _coerce_choice(spec: ParamSpec, raw: Any, name: str) -> Any:
    if raw is None or raw == NULL_LITERAL:
        return None
    if spec.options is not None and not isinstance(raw, bool) and raw in spec.options:
        return raw

    for tag in spec.type_tags:
        if tag in (INT, FLOAT):
            try:
                value = _parse_int(raw) if tag == INT else _parse_float(raw)
            except _NotParsable:
                continue
            return _check_range(spec, value, name)
        if tag == BOOL:
            try:
                return _parse_bool(raw)
            except _NotParsable:
                continue
        if tag == ARRAY:
            try:
                return _parse_array(raw)
            except _NotParsable:
                continue
        if tag == STR and spec.options is None and isinstance(raw, str):
            return raw

    raise InvalidOptionError(
        f"{name} must be one of: {spec.describe_allowed()} (got {raw!r})",
        parameter=name,
        allowed=spec.describe_allowed(),
    )


def _check_range(spec: ParamSpec, value: Any, name: str) -> Any:
    below = spec.min is not None and value < spec.min
    above = spec.max is not None and value > spec.max
    if below or above:
        raise RangeError(
            f"{name} must be within {spec.describe_allowed()}, got {value}",
            parameter=name,
            allowed=spec.describe_allowed(),
        )
    return value


def _parse_int(raw: Any) -> int:
    if isinstance(raw, bool):
        raise _NotParsable
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isfinite(raw) and raw.is_integer():
            return int(raw)
        raise _NotParsable
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            raise _NotParsable from None
    raise _NotParsable


def _parse_float(raw: Any) -> float:
    if isinstance(raw, bool):
        raise _NotParsable
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            raise _NotParsable from None
    else:
        raise _NotParsable
    if not math.isfinite(value):
        raise _NotParsable
    return value


def _parse_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise _NotParsable


def _parse_array(raw: Any) -> Tuple[Any, ...]:
    if isinstance(raw, (list, tuple)):
        return tuple(raw)
    if isinstance(raw, str) and raw.strip():
        # Text inputs such as class priors: "0.3, 0.7".
        return tuple(_parse_float(item) for item in raw.split(","))
    raise _NotParsable


__all__ = ["NULL_LITERAL", "coerce", "coerce_all"]
