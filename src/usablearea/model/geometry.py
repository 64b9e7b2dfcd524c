"""
Geometry helpers for the usable area.

The area itself is normalized (offset and size in [0, 1] of the device
surface). These helpers scale it into the reference region the renderer
draws, test containment and format the ratio label.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import StrEnum
from typing import Any, TYPE_CHECKING
import math

import numpy as np

from usablearea.config import DEFAULT_REFERENCE_SIZE

if TYPE_CHECKING:
    import numpy.typing as npt

# Inset applied to both corners of the selection before the containment test.
BOUNDS_INSET: float = 1.0


class Axis(StrEnum):
    X = "x"
    Y = "y"

    @property
    def other(self) -> Axis:
        return Axis.Y if self is Axis.X else Axis.X


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in reference units (y grows downwards)."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def square(cls, size: float) -> Rect:
        return cls(0.0, 0.0, size, size)

    @property
    def top_left(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    @property
    def bottom_right(self) -> npt.NDArray[np.float64]:
        return np.array([self.x + self.width, self.y + self.height], dtype=np.float64)

    def contains_point(self, point: npt.ArrayLike) -> bool:
        """Strict interior test; points on the edge are outside."""
        p = np.asarray(point, dtype=np.float64)
        return bool(np.all(p > self.top_left) and np.all(p < self.bottom_right))

    @classmethod
    def from_normalized(cls, offset: tuple[float, float], size: tuple[float, float],
                        reference_size: float) -> Rect:
        """Scale a normalized offset/size pair to reference units."""
        origin = np.asarray(offset, dtype=np.float64) * reference_size
        extent = np.asarray(size, dtype=np.float64) * reference_size
        return cls(float(origin[0]), float(origin[1]), float(extent[0]), float(extent[1]))


def is_within_bounds(
    offset: tuple[float, float],
    size: tuple[float, float],
    outer: Rect,
    reference_size: float = DEFAULT_REFERENCE_SIZE,
) -> bool:
    """
    True iff the selection, inset by one unit on every side, lies inside `outer`.

    The selection is drawn at `offset * reference_size` with extent
    `size * reference_size`, in the same units as `outer`. Flush with the
    outer edge counts as inside; one unit past it does not.
    """
    selection = Rect.from_normalized(offset, size, reference_size)
    return (outer.contains_point(selection.top_left + BOUNDS_INSET)
            and outer.contains_point(selection.bottom_right - BOUNDS_INSET))


def ratio_label(size: tuple[float, float], reference_size: float) -> str:
    """Reduced "w:h" label of the size in whole reference units, e.g. "16:9"."""
    x = int(size[0] * reference_size)
    y = int(size[1] * reference_size)
    divider = math.gcd(x, y)
    if divider == 0:
        return f"{x}:{y}"
    return f"{x // divider}:{y // divider}"


@dataclass
class AreaState:
    """
    Plain snapshot of a calibration session.

    The settings owner uses it to seed a new session and to read the result
    back; storing it is not this package's concern.
    """
    offset: tuple[float, float] = (0.0, 0.0)
    size: tuple[float, float] = (1.0, 1.0)
    aspect_ratio: float | None = None
    locked: bool = False
    enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["offset"] = list(self.offset)
        data["size"] = list(self.size)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AreaState:
        aspect = data.get("aspect_ratio")
        return cls(
            offset=tuple(float(v) for v in data.get("offset", (0.0, 0.0))),
            size=tuple(float(v) for v in data.get("size", (1.0, 1.0))),
            aspect_ratio=None if aspect is None else float(aspect),
            locked=bool(data.get("locked", False)),
            enabled=bool(data.get("enabled", True)),
        )
