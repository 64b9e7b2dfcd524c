from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from usablearea.config import AreaConfig
from usablearea.model.bounded import BoundedValue
from usablearea.model.geometry import Axis, Rect, is_within_bounds

logger = logging.getLogger(__name__)


class AreaModel(QObject):
    """Owns the four primary values of the usable area and notifies on change."""
    offset_changed = Signal(float, float)
    size_changed = Signal(float, float)
    # One emission per size axis that actually changed, before size_changed.
    size_axis_changed = Signal(object)

    def __init__(self, config: AreaConfig, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.config = config
        p = config.precision

        self._offset = {
            axis: BoundedValue(*config.offset_range, precision=p, default=default)
            for axis, default in zip(Axis, config.default_offset)
        }
        self._size = {
            axis: BoundedValue(*config.size_range, precision=p, default=default)
            for axis, default in zip(Axis, config.default_size)
        }

    # ---- read ----

    @property
    def offset(self) -> tuple[float, float]:
        return self._offset[Axis.X].value, self._offset[Axis.Y].value

    @property
    def size(self) -> tuple[float, float]:
        return self._size[Axis.X].value, self._size[Axis.Y].value

    def offset_bounds(self, axis: Axis) -> BoundedValue:
        return self._offset[axis]

    def size_bounds(self, axis: Axis) -> BoundedValue:
        return self._size[axis]

    def compute_aspect_ratio(self) -> float:
        return self._size[Axis.X].value / self._size[Axis.Y].value

    def is_within_bounds(self, outer: Rect) -> bool:
        return is_within_bounds(self.offset, self.size, outer, self.config.reference_size)

    # ---- write ----

    def set_offset(self, x: Optional[float] = None, y: Optional[float] = None) -> None:
        changed = self._write(self._offset, x, y)
        if changed:
            self.offset_changed.emit(*self.offset)

    def set_size(self, x: Optional[float] = None, y: Optional[float] = None) -> None:
        changed = self._write(self._size, x, y)
        if not changed:
            return
        logger.debug(f"Size {', '.join(changed)} -> {self.size}")
        for axis in changed:
            self.size_axis_changed.emit(axis)
        self.size_changed.emit(*self.size)

    def reset(self) -> None:
        """Restore the configured default offset and size."""
        self.set_offset(*self.config.default_offset)
        self.set_size(*self.config.default_size)

    @staticmethod
    def _write(values: dict[Axis, BoundedValue], x: Optional[float], y: Optional[float]) -> list[Axis]:
        changed: list[Axis] = []
        for axis, raw in ((Axis.X, x), (Axis.Y, y)):
            if raw is not None and values[axis].set(raw):
                changed.append(axis)
        return changed
