"""
Configuration & Constants
=========================
This module serves as the central registry for the calibration constants and
the per-session range configuration.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (0.05, 21/9, 200) scattered
   throughout the model and controller code.
2. Validation: A broken range (e.g. a size range that reaches zero) would
   make the aspect ratio undefined. It is rejected here, before any session
   is built on top of it.

Exports:
    LARGEST_FEASIBLE_ASPECT_RATIO (float): Widest supported physical ratio.
    AreaConfig: Frozen dataclass with all ranges and defaults.
    ConfigurationError: Raised for invalid configuration.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math

logger = logging.getLogger(__name__)

# Based on ultrawide monitor configurations.
LARGEST_FEASIBLE_ASPECT_RATIO: float = 21 / 9

DEFAULT_PRECISION: float = 0.01
MIN_AREA_SIZE: float = 0.05

# Edge length of the square reference region the renderer draws into.
DEFAULT_REFERENCE_SIZE: float = 200.0


class ConfigurationError(ValueError):
    """Raised when ranges or defaults would break the area invariants."""


Range = tuple[float, float]


@dataclass(frozen=True)
class AreaConfig:
    offset_range: Range = (0.0, 1.0)
    size_range: Range = (MIN_AREA_SIZE, 1.0)
    aspect_range: Range = (1 / LARGEST_FEASIBLE_ASPECT_RATIO, LARGEST_FEASIBLE_ASPECT_RATIO)
    precision: float = DEFAULT_PRECISION
    reference_size: float = DEFAULT_REFERENCE_SIZE

    default_offset: tuple[float, float] = (0.0, 0.0)
    default_size: tuple[float, float] = (1.0, 1.0)

    def __post_init__(self) -> None:
        try:
            self._validate()
        except ConfigurationError as e:
            logger.error(f"Rejected area configuration: {e}")
            raise

    def _validate(self) -> None:
        for name in ("offset_range", "size_range", "aspect_range"):
            lo, hi = getattr(self, name)
            if not (math.isfinite(lo) and math.isfinite(hi)):
                raise ConfigurationError(f"{name} must be finite, got ({lo}, {hi}).")
            if lo > hi:
                raise ConfigurationError(f"{name} is inverted: ({lo}, {hi}).")

        # Both ratios divide by a size component, so zero must be unreachable.
        if self.size_range[0] <= 0:
            raise ConfigurationError(f"size_range minimum must be > 0, got {self.size_range[0]}.")
        if self.aspect_range[0] <= 0:
            raise ConfigurationError(f"aspect_range minimum must be > 0, got {self.aspect_range[0]}.")

        if not self.precision > 0:
            raise ConfigurationError(f"precision must be > 0, got {self.precision}.")
        if not self.reference_size > 0:
            raise ConfigurationError(f"reference_size must be > 0, got {self.reference_size}.")

        for name, value, (lo, hi) in (
            ("default_offset", self.default_offset, self.offset_range),
            ("default_size", self.default_size, self.size_range),
        ):
            if any(not lo <= v <= hi for v in value):
                raise ConfigurationError(f"{name} {value} lies outside ({lo}, {hi}).")
