"""
Coercion transforms attached to numeric and boolean fields.

Each transform is registered once with the TypeScript arrow function emitted
into ``@Transform(...)`` and a Python function with the same behaviour, so the
coercion contract can be checked without a TypeScript runtime:

- ``None`` and ``""`` are "no value" and become ``None``
- array transforms coerce each element with the scalar rule and return
  ``None`` (not an empty list) when the input is not a list
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# Longest numeric prefix accepted by JavaScript's parseFloat
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _parse_float(value: Any) -> float:
    match = _FLOAT_PREFIX.match(str(value).lstrip())
    if not match:
        return math.nan
    return float(match.group(0))


def coerce_decimal(value: Any) -> float | None:
    """Coerce a value to a number, ``parseFloat`` style."""
    if _is_empty(value):
        return None
    return _parse_float(value)


def coerce_boolean(value: Any) -> bool | None:
    """Coerce ``"true"`` or ``True`` to ``True``, any other value to ``False``."""
    if _is_empty(value):
        return None
    return value == "true" or value is True


def _each(coerce: Callable[[Any], Any]) -> Callable[[Any], list | None]:
    def coerce_array(value: Any) -> list | None:
        if not isinstance(value, list):
            return None
        return [coerce(v) for v in value]

    coerce_array.__name__ = f"{coerce.__name__}_array"
    coerce_array.__doc__ = f"Apply {coerce.__name__} to each element of a list."
    return coerce_array


coerce_decimal_array = _each(coerce_decimal)
coerce_boolean_array = _each(coerce_boolean)


@dataclass(frozen=True)
class TransformFunction:
    """A named transform: emitted TypeScript and its Python equivalent."""

    name: str
    typescript: str
    coerce: Callable[[Any], Any]

    def __call__(self, value: Any) -> Any:
        return self.coerce(value)


TRANSFORMS: dict[str, TransformFunction] = {
    t.name: t
    for t in (
        TransformFunction(
            "decimal",
            "(param?: any): number | null => (param?.value === null || param?.value === undefined || param?.value === '') ? null : parseFloat(param.value)",
            coerce_decimal,
        ),
        TransformFunction(
            "array_decimal",
            "(param?: any): (number | null)[] | null => !Array.isArray(param?.value) ? null : param?.value.map((value: any) => (value === null || value === undefined || value === '') ? null : parseFloat(value))",
            coerce_decimal_array,
        ),
        TransformFunction(
            "boolean",
            "(param?: any): boolean | null => (param?.value === null || param?.value === undefined || param?.value === '') ? null : (param?.value === 'true' || ((typeof param?.value === 'boolean') && param?.value))",
            coerce_boolean,
        ),
        TransformFunction(
            "array_boolean",
            "(param?: any): (boolean | null)[] | null => !Array.isArray(param?.value) ? null : param?.value.map((value: any) => (value === null || value === undefined || value === '') ? null : (value === 'true' || ((typeof value === 'boolean') && value)))",
            coerce_boolean_array,
        ),
    )
}

# native kind -> transform name
_KIND_TRANSFORMS = {
    "number": "decimal",
    "boolean": "boolean",
}


def get_transform(kind: str, array: bool) -> TransformFunction:
    """
    Select the transform for a native kind.

    Raises:
        KeyError: If no transform is registered for the kind
    """
    name = _KIND_TRANSFORMS[kind]
    return TRANSFORMS[f"array_{name}" if array else name]
