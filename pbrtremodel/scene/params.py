"""Typed parameter values attached to scene elements."""

import numbers

from dataclasses import dataclass
from enum import Enum
from typing import Any

ScalarValue = int | float | bool | str
ParamData = ScalarValue | tuple[float, ...]


class ParamType(str, Enum):
    """PBRT parameter type tags.

    The tag decides how the scene writer formats a value, so it is written out
    verbatim.
    """

    FLOAT = "float"
    INTEGER = "integer"
    BOOL = "bool"
    STRING = "string"
    TEXTURE = "texture"
    COLOR = "color"
    RGB = "rgb"
    POINT = "point"
    NORMAL = "normal"
    VECTOR = "vector"
    SPECTRUM = "spectrum"

    @property
    def is_numeric(self) -> bool:
        return self in _NUMERIC_TYPES


_NUMERIC_TYPES = frozenset(
    {
        ParamType.FLOAT,
        ParamType.INTEGER,
        ParamType.COLOR,
        ParamType.RGB,
        ParamType.POINT,
        ParamType.NORMAL,
        ParamType.VECTOR,
    }
)


def _normalize(tag: ParamType, value: Any) -> ParamData:
    """Coerce a raw value into the canonical python type for its tag."""
    if tag == ParamType.BOOL:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        raise TypeError(f"bool parameter expects True/False, got {value!r}")

    if tag in (ParamType.STRING, ParamType.TEXTURE):
        if not isinstance(value, str):
            raise TypeError(f"{tag.value} parameter expects a string, got {value!r}")
        return value

    if tag == ParamType.SPECTRUM and isinstance(value, str):
        # A spectrum may reference a .spd file instead of listing samples.
        return value

    if isinstance(value, bool):
        raise TypeError(f"{tag.value} parameter expects numbers, got {value!r}")

    if isinstance(value, (list, tuple)):
        values = tuple(_normalize_number(tag, v) for v in value)
        return values[0] if len(values) == 1 else values

    return _normalize_number(tag, value)


def _normalize_number(tag: ParamType, value: Any) -> int | float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{tag.value} parameter expects numbers, got {value!r}")
    if tag == ParamType.INTEGER:
        if float(value) != int(value):
            raise TypeError(f"integer parameter got non-integral value {value!r}")
        return int(value)
    return float(value)


@dataclass(frozen=True)
class ParamValue:
    """A parameter value together with its renderer type tag."""

    tag: ParamType
    """How the value is declared in the scene file (e.g. float, bool)."""

    value: ParamData
    """Scalar or numeric tuple. Bools are real booleans, never strings."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", ParamType(self.tag))
        object.__setattr__(self, "value", _normalize(self.tag, self.value))

    @classmethod
    def of(cls, tag: ParamType | str, value: Any) -> "ParamValue":
        return cls(tag=ParamType(tag), value=value)

    def as_list(self) -> list[ScalarValue]:
        """Return the value as a flat list, the shape the writer emits."""
        if isinstance(self.value, tuple):
            return list(self.value)
        return [self.value]
