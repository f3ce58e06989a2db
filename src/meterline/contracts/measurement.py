"""Measurement value types.

Every metric declares the kind of value its measurement points carry.
The set is closed: plugins cannot invent new kinds.
"""

from enum import StrEnum
from typing import Any

# Python builtin types accepted as shorthand for a measurement type.
_PYTHON_TYPES: tuple[tuple[type, str], ...] = (
    (bool, "bool"),
    (int, "u64"),
    (float, "f64"),
)


class MeasurementType(StrEnum):
    """Type of the values measured for a metric.

    Values:
        U64: Unsigned 64-bit integer (counters, byte sizes)
        I64: Signed 64-bit integer (deltas)
        F64: Double precision float (power, temperature)
        BOOL: Boolean flag
    """

    U64 = "u64"
    I64 = "i64"
    F64 = "f64"
    BOOL = "bool"

    @classmethod
    def coerce(cls, value: Any) -> "MeasurementType":
        """Convert a member, its string value or a Python type into a MeasurementType.

        String values are matched ignoring case, so "U64" and "u64" are the same.

        Raises:
            ValueError: If the value does not name a supported measurement type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, type):
            for python_type, member in _PYTHON_TYPES:
                if value is python_type:
                    return cls(member)
            raise ValueError(f"Unsupported measurement type: {value.__name__}")
        if isinstance(value, str):
            return cls(value.lower())
        raise ValueError(f"Unsupported measurement type: {value!r}")
