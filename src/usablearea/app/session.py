"""
Calibration Session
===================
The surface the settings panel and the area renderer talk to.

Why is this file needed?
------------------------
1. Composition: It wires one AreaModel, one AspectRatioController and one
   Scheduler together for the lifetime of a calibration session.
2. Decoupling: The renderer only sees plain values and signals. It never
   learns about the deferred correction protocol.
3. Bounds state: It tracks the "within bounds" predicate and signals only
   when it flips, so the renderer can recolour the selection.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from usablearea.app.area import AreaModel
from usablearea.app.aspect import AspectRatioController
from usablearea.app.scheduler import Scheduler
from usablearea.config import AreaConfig
from usablearea.model.geometry import AreaState, Rect, ratio_label

logger = logging.getLogger(__name__)


class CalibrationSession(QObject):
    offset_changed = Signal(float, float)
    size_changed = Signal(float, float)
    aspect_ratio_changed = Signal(float)
    lock_changed = Signal(bool)
    enabled_changed = Signal(bool)
    bounds_state_changed = Signal(bool)

    def __init__(
        self,
        config: Optional[AreaConfig] = None,
        initial: Optional[AreaState] = None,
        scheduler: Optional[Scheduler] = None,
        locked: Optional[bool] = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.config = config or AreaConfig()
        self.reference_region = Rect.square(self.config.reference_size)
        self.scheduler = scheduler or Scheduler(self)

        self.area = AreaModel(self.config, self)
        if initial is not None:
            self.area.set_offset(*initial.offset)
            self.area.set_size(*initial.size)

        if locked is None:
            locked = initial.locked if initial is not None else False
        self.aspect = AspectRatioController(
            self.area,
            self.scheduler,
            locked=locked,
            aspect_ratio=initial.aspect_ratio if initial is not None else None,
            parent=self,
        )
        self._enabled = initial.enabled if initial is not None else True
        self._within_bounds = self.area.is_within_bounds(self.reference_region)

        # Forward first, so subscribers see the new values before the bounds flip.
        self.area.offset_changed.connect(self.offset_changed)
        self.area.size_changed.connect(self.size_changed)
        self.aspect.aspect_ratio_changed.connect(self.aspect_ratio_changed)
        self.aspect.lock_changed.connect(self.lock_changed)

        self.area.offset_changed.connect(self._refresh_bounds_state)
        self.area.size_changed.connect(self._refresh_bounds_state)

        logger.info(f"Calibration session started: offset {self.area.offset}, size {self.area.size}, "
                    f"ratio {self.aspect.aspect_ratio:g}, locked {self.aspect.locked}")

    # ---- read ----

    def current_offset(self) -> tuple[float, float]:
        return self.area.offset

    def current_size(self) -> tuple[float, float]:
        return self.area.size

    def current_aspect_ratio(self) -> float:
        return self.aspect.aspect_ratio

    def is_locked(self) -> bool:
        return self.aspect.locked

    def is_enabled(self) -> bool:
        return self._enabled

    def is_within_bounds(self, outer: Optional[Rect] = None) -> bool:
        return self.area.is_within_bounds(outer or self.reference_region)

    def ratio_label(self) -> str:
        return ratio_label(self.area.size, self.config.reference_size)

    def snapshot(self) -> AreaState:
        return AreaState(
            offset=self.area.offset,
            size=self.area.size,
            aspect_ratio=self.aspect.aspect_ratio,
            locked=self.aspect.locked,
            enabled=self._enabled,
        )

    # ---- write ----

    def set_offset_x(self, value: float) -> None:
        self.area.set_offset(x=value)

    def set_offset_y(self, value: float) -> None:
        self.area.set_offset(y=value)

    def set_size_x(self, value: float) -> None:
        self.area.set_size(x=value)

    def set_size_y(self, value: float) -> None:
        self.area.set_size(y=value)

    def set_aspect_ratio(self, value: float) -> None:
        self.aspect.set_aspect_ratio(value)

    def set_locked(self, locked: bool) -> None:
        self.aspect.set_locked(locked)

    def set_enabled(self, enabled: bool) -> None:
        if enabled == self._enabled:
            return
        self._enabled = enabled
        self.enabled_changed.emit(enabled)

    def reset(self) -> None:
        """Restore the configured default offset and size. The lock state is kept."""
        logger.info("Resetting usable area to defaults.")
        self.aspect.reset_area()

    def process_pending(self) -> int:
        """Advance the scheduler by one turn; returns the number of corrections run."""
        return self.scheduler.update()

    def _refresh_bounds_state(self, *_: float) -> None:
        within = self.area.is_within_bounds(self.reference_region)
        if within != self._within_bounds:
            self._within_bounds = within
            self.bounds_state_changed.emit(within)
