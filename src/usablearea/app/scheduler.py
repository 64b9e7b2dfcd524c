"""
Deferred Execution (Single-Threaded)
====================================
Corrections to the area are never applied from inside the handler that
detected them. They are queued and run on a later turn of the same Qt event
loop, after the current input event has been fully processed.

Classes:
    ScheduledDelegate: A cancellable queued callable.
    Scheduler: Per-session queue, pumped by a zero-interval QTimer.
    CorrectionSlot: Holds at most one pending delegate (cancel-replace).
"""
from __future__ import annotations

from collections import deque
import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class ScheduledDelegate:
    """A queued callable. Once cancelled it never runs."""

    def __init__(self, task: Callable[[], None], name: str = "") -> None:
        self._task = task
        self.name = name or getattr(task, "__name__", "task")
        self.cancelled = False
        self.completed = False

    def cancel(self) -> None:
        self.cancelled = True

    def run(self) -> bool:
        if self.cancelled or self.completed:
            return False
        self.completed = True
        self._task()
        return True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "completed" if self.completed else "pending"
        return f"<ScheduledDelegate {self.name} {state}>"


class Scheduler(QObject):
    """
    Queue of delegates executed on the next event-loop turn.

    When a Qt event loop is running the queue drains itself through a
    single-shot zero-interval timer. Hosts without a loop (and tests) call
    `update()` to advance one turn explicitly.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._queue: deque[ScheduledDelegate] = deque()

        self._turn_timer = QTimer(self)
        self._turn_timer.setSingleShot(True)
        self._turn_timer.setInterval(0)
        self._turn_timer.timeout.connect(self.update)

    @property
    def has_pending(self) -> bool:
        return any(not d.cancelled for d in self._queue)

    @property
    def queue_length(self) -> int:
        return len(self._queue)

    def add(self, task: Callable[[], None], name: str = "") -> ScheduledDelegate:
        # Superseded delegates would otherwise pile up until the next turn.
        self._queue = deque(d for d in self._queue if not d.cancelled)

        delegate = ScheduledDelegate(task, name)
        self._queue.append(delegate)
        if not self._turn_timer.isActive():
            self._turn_timer.start()
        return delegate

    def update(self) -> int:
        """
        Run one turn: every delegate queued before this call, in order.

        Delegates added while the turn runs wait for the next turn.

        Returns:
            The number of delegates that actually ran.
        """
        turn, self._queue = self._queue, deque()
        ran = 0
        for delegate in turn:
            if delegate.run():
                ran += 1

        if self._queue and not self._turn_timer.isActive():
            self._turn_timer.start()
        return ran


class CorrectionSlot:
    """
    Single-slot cancellable task.

    Scheduling through the slot overwrites and cancels the previous occupant,
    so at most one task from this slot is ever pending.
    """

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._current: Optional[ScheduledDelegate] = None

    @property
    def is_pending(self) -> bool:
        d = self._current
        return d is not None and not d.cancelled and not d.completed

    def replace(self, task: Callable[[], None], name: str = "") -> ScheduledDelegate:
        self.cancel()
        self._current = self._scheduler.add(task, name)
        logger.debug(f"Scheduled {self._current.name}")
        return self._current

    def cancel(self) -> None:
        if self._current is not None:
            self._current.cancel()
