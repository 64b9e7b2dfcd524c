"""
Bounded scalar values.

Every editable number in the calibration (offsets, sizes, aspect ratio) is a
BoundedValue: writes are snapped to a precision step and then clamped, so an
out-of-range input saturates instead of failing.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
import logging
import math

import numpy as np

from usablearea.config import ConfigurationError

logger = logging.getLogger(__name__)


def _decimals_for(precision: float) -> int:
    """Number of decimal places needed to represent multiples of `precision`."""
    exponent = Decimal(repr(precision)).normalize().as_tuple().exponent
    return min(max(0, -int(exponent)), 12)


@dataclass
class BoundedValue:
    """
    A scalar kept inside [min_value, max_value] and quantized to `precision`.

    Snapping happens before clamping, so a bound that is not itself a
    multiple of the precision (e.g. 9/21) is still reachable exactly.
    """
    min_value: float
    max_value: float
    precision: float
    default: float
    value: float = field(init=False)

    def __post_init__(self) -> None:
        if not (math.isfinite(self.min_value) and math.isfinite(self.max_value)):
            raise ConfigurationError("Bounds must be finite.")
        if self.min_value > self.max_value:
            raise ConfigurationError(f"Inverted bounds: [{self.min_value}, {self.max_value}].")
        if not self.precision > 0:
            raise ConfigurationError(f"Precision must be > 0, got {self.precision}.")
        self._decimals = _decimals_for(self.precision)
        self.value = self.normalize(self.default)

    def normalize(self, raw: float) -> float:
        """Snap `raw` to the precision grid, then clamp it into range."""
        steps = np.round(float(raw) / self.precision)
        snapped = round(float(steps * self.precision), self._decimals)
        return float(np.clip(snapped, self.min_value, self.max_value))

    def contains(self, raw: float) -> bool:
        return self.min_value <= raw <= self.max_value

    def set(self, raw: float) -> bool:
        """
        Store the normalized value.

        Returns:
            True if the stored value changed, False for a no-op write.
        """
        if math.isnan(raw):
            logger.warning("Ignoring NaN write to bounded value.")
            return False
        new_value = self.normalize(raw)
        if new_value == self.value:
            return False
        self.value = new_value
        return True

    def reset(self) -> bool:
        return self.set(self.default)
