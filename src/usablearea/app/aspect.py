"""
Aspect Ratio Controller
=======================
Keeps the aspect ratio and the area size consistent with each other.

Why is this file needed?
------------------------
Size and aspect ratio are bound in both directions: a size edit updates the
ratio (or, when locked, forces the other size axis), and a ratio edit
rewrites one size axis. Applying those corrections synchronously would feed
them straight back into the handler that produced them, so every correction
is deferred through a single CorrectionSlot. A new request always supersedes
the previous one, and a correction cancels whatever its own write scheduled.

Classes:
    CorrectionState: Idle / CorrectionPending.
    AspectRatioController: The reconciliation logic.
"""
from __future__ import annotations

from enum import Enum
import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from usablearea.app.area import AreaModel
from usablearea.app.scheduler import CorrectionSlot, Scheduler
from usablearea.model.bounded import BoundedValue
from usablearea.model.geometry import Axis

logger = logging.getLogger(__name__)

FORCE_CORRECTION = "force"


class CorrectionState(Enum):
    IDLE = "idle"
    CORRECTION_PENDING = "correction_pending"


class AspectRatioController(QObject):
    aspect_ratio_changed = Signal(float)
    lock_changed = Signal(bool)
    # Axis name that a correction wrote, or FORCE_CORRECTION.
    correction_applied = Signal(str)

    def __init__(
        self,
        area: AreaModel,
        scheduler: Scheduler,
        locked: bool = False,
        aspect_ratio: Optional[float] = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.area = area
        config = area.config

        self._aspect = BoundedValue(
            *config.aspect_range,
            precision=config.precision,
            default=area.compute_aspect_ratio(),
        )
        if aspect_ratio is not None:
            self._aspect.set(aspect_ratio)

        self._locked = locked
        self._slot = CorrectionSlot(scheduler)

        area.size_axis_changed.connect(self.on_size_changed)

        if locked and self._aspect.normalize(area.compute_aspect_ratio()) != self._aspect.value:
            # Seeded ratio disagrees with the seeded size; the width is kept.
            logger.debug(f"Seed size {area.size} does not match locked ratio {self._aspect.value:g}")
            self._slot.replace(lambda: self._apply_correction(Axis.X), name="correct-y")

    # ---- read ----

    @property
    def aspect_ratio(self) -> float:
        return self._aspect.value

    @property
    def aspect_bounds(self) -> BoundedValue:
        return self._aspect

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def state(self) -> CorrectionState:
        if self._slot.is_pending:
            return CorrectionState.CORRECTION_PENDING
        return CorrectionState.IDLE

    @property
    def has_pending_correction(self) -> bool:
        return self._slot.is_pending

    # ---- user input ----

    def set_locked(self, locked: bool) -> None:
        if locked == self._locked:
            return
        self._locked = locked
        self.lock_changed.emit(locked)

    def set_aspect_ratio(self, ratio: float) -> None:
        """User edit of the ratio: store it, then fit the size to it and lock."""
        if not self._aspect.set(ratio):
            return
        target = self._aspect.value
        self.aspect_ratio_changed.emit(target)
        self._slot.replace(lambda: self._force_aspect_ratio(target), name=f"force-{target:g}")

    def reset_area(self) -> None:
        """Restore the default offset and size, bypassing the lock, and resync the ratio."""
        was_locked = self._locked
        self._locked = False
        try:
            self.area.reset()
            self._update_aspect_ratio(self.area.compute_aspect_ratio())
        finally:
            self._slot.cancel()
            self._locked = was_locked

    # ---- reconciliation ----

    def on_size_changed(self, axis: Axis) -> None:
        self._slot.cancel()

        if not self._locked:
            candidate = self.area.compute_aspect_ratio()
            if self._aspect.contains(candidate):
                # Ratio floats freely with the size.
                self._update_aspect_ratio(candidate)
                return

        # Locked, or the free ratio left its range: fix the axis the user was not editing.
        self._slot.replace(lambda: self._apply_correction(axis), name=f"correct-{axis.other}")

    def _apply_correction(self, changed: Axis) -> None:
        try:
            ratio = self._aspect.value
            size_x, size_y = self.area.size
            if changed is Axis.X:
                self.area.set_size(y=size_x / ratio)
            else:
                self.area.set_size(x=size_y * ratio)
            logger.debug(f"Corrected size {changed.other} for ratio {ratio:g}: {self.area.size}")
            self.correction_applied.emit(str(changed.other))
        finally:
            # Our own write re-entered on_size_changed; drop what it scheduled.
            self._slot.cancel()

    def _force_aspect_ratio(self, ratio: float) -> None:
        was_locked = self._locked
        self._locked = False
        try:
            size_x, size_y = self.area.size
            proposed_y = size_x / ratio

            if self.area.size_bounds(Axis.Y).contains(proposed_y):
                self.area.set_size(y=proposed_y)
            else:
                self.area.set_size(x=size_y * ratio)

            self._update_aspect_ratio(self.area.compute_aspect_ratio())
            logger.debug(f"Forced ratio {ratio:g}: size {self.area.size}, ratio {self._aspect.value:g}")
        finally:
            self._slot.cancel()
            self._locked = True

        if not was_locked:
            self.lock_changed.emit(True)
        self.correction_applied.emit(FORCE_CORRECTION)

    def _update_aspect_ratio(self, ratio: float) -> None:
        if self._aspect.set(ratio):
            self.aspect_ratio_changed.emit(self._aspect.value)
