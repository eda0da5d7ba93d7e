"""Named render parameters for a single render instance."""

import logging
import math
import numbers

from collections.abc import Mapping
from typing import Any, Iterator

import numpy as np

from pbrtremodel.errors import InvalidParameterError, MissingParameterError

console_logger = logging.getLogger(__name__)

ConditionValue = str | int | float | bool | tuple[float, ...]

_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off")


def _is_missing(value: Any) -> bool:
    # Empty cells in a conditions file mean "not given".
    return value is None or (isinstance(value, str) and value.strip() == "")


class ConditionRow(Mapping):
    """Read-only, ordered mapping from parameter name to value.

    Lookups distinguish optional values (`get*`, which fall back to a default)
    from values the active branch cannot work without (`require*`, which raise
    `MissingParameterError`).
    """

    def __init__(self, values: Mapping[str, Any] | None = None, index: int = 0):
        """
        Args:
            values: Parameter values in column order.
            index: Position of the row in its table, used in log messages.
        """
        self._values: dict[str, Any] = dict(values or {})
        self.index = index

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConditionRow(index={self.index}, values={self._values!r})"

    @property
    def name(self) -> str:
        """Identifier of the render instance (`imageName` column if present)."""
        image_name = self._values.get("imageName")
        if _is_missing(image_name):
            return f"condition_{self.index + 1:03d}"
        return str(image_name)

    def get(self, name: str, default: Any = None) -> Any:
        value = self._values.get(name)
        return default if _is_missing(value) else value

    def require(self, name: str, context: str | None = None) -> Any:
        value = self._values.get(name)
        if _is_missing(value):
            raise MissingParameterError(name, context)
        return value

    def get_string(self, name: str, default: str | None = None) -> str | None:
        value = self.get(name)
        return default if value is None else str(value)

    def require_string(self, name: str, context: str | None = None) -> str:
        return str(self.require(name, context))

    def get_number(self, name: str, default: float | None = None) -> float | None:
        value = self.get(name)
        if value is None:
            return default
        return self._to_number(name, value)

    def require_number(self, name: str, context: str | None = None) -> float:
        return self._to_number(name, self.require(name, context))

    def get_vector(
        self, name: str, default: tuple[float, ...] | None = None
    ) -> tuple[float, ...] | None:
        """Return a numeric vector; scalars become one-element vectors."""
        value = self.get(name)
        if value is None:
            return default
        if isinstance(value, str):
            value = value.strip().strip("[]").replace(",", " ").split()
        array = np.atleast_1d(np.asarray(value, dtype=object))
        return tuple(self._to_number(name, v) for v in array.ravel())

    def get_flag(self, name: str, default: bool) -> bool:
        """Return a boolean flag given as a bool or as "true"/"false" text.

        Raises:
            InvalidParameterError: If the value is not a recognizable boolean.
        """
        value = self.get(name)
        if value is None:
            return default
        if isinstance(value, (bool, np.bool_)):
            return bool(value)
        if isinstance(value, numbers.Integral) and value in (0, 1):
            return bool(value)
        text = str(value).strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise InvalidParameterError(
            f"Condition parameter '{name}' must be true or false, got {value!r}"
        )

    @staticmethod
    def _to_number(name: str, value: Any) -> float:
        if isinstance(value, bool):
            raise InvalidParameterError(
                f"Condition parameter '{name}' must be numeric, got {value!r}"
            )
        if isinstance(value, numbers.Real):
            number = value
        else:
            try:
                number = float(str(value).strip())
            except ValueError:
                raise InvalidParameterError(
                    f"Condition parameter '{name}' must be numeric, got {value!r}"
                ) from None
            if number.is_integer() and "." not in str(value):
                number = int(number)
        if not math.isfinite(number):
            raise InvalidParameterError(
                f"Condition parameter '{name}' must be finite, got {value!r}"
            )
        return number
