"""Width-annotated numeric types and the custom value parser protocol.

Plain `int` fields are treated as 64-bit signed integers and plain `float`
fields as 64-bit floats. The aliases below declare other widths:

    @dataclass
    class Limits:
        retries: UInt8 = 3
        ratio: Float32 = 0.5
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Protocol, runtime_checkable


_FLOAT32_MAX = 3.4028234663852886e38
_FLOAT64_MAX = 1.7976931348623157e308


@dataclass(frozen=True, slots=True)
class IntWidth:
    """Bit width and signedness of an integer field."""

    bits: int
    signed: bool = True

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def overflows(self, value: int) -> bool:
        return not self.minimum <= value <= self.maximum


@dataclass(frozen=True, slots=True)
class FloatWidth:
    """Bit width of a floating point field (32 or 64)."""

    bits: int

    @property
    def maximum(self) -> float:
        return _FLOAT32_MAX if self.bits == 32 else _FLOAT64_MAX

    def overflows(self, value: float) -> bool:
        # Infinities and NaN are representable at every width.
        return abs(value) != float("inf") and abs(value) > self.maximum


DEFAULT_INT_WIDTH = IntWidth(64)
DEFAULT_FLOAT_WIDTH = FloatWidth(64)

Int = Annotated[int, DEFAULT_INT_WIDTH]
Int8 = Annotated[int, IntWidth(8)]
Int16 = Annotated[int, IntWidth(16)]
Int32 = Annotated[int, IntWidth(32)]
Int64 = Annotated[int, IntWidth(64)]
UInt = Annotated[int, IntWidth(64, signed=False)]
UInt8 = Annotated[int, IntWidth(8, signed=False)]
UInt16 = Annotated[int, IntWidth(16, signed=False)]
UInt32 = Annotated[int, IntWidth(32, signed=False)]
UInt64 = Annotated[int, IntWidth(64, signed=False)]
Float32 = Annotated[float, FloatWidth(32)]
Float64 = Annotated[float, DEFAULT_FLOAT_WIDTH]


@runtime_checkable
class ValueParser(Protocol):
    """Protocol for field types that parse themselves from config text."""

    def parse_config_value(self, value: str) -> None:
        """Populate this instance from `value`, raising on invalid input."""
