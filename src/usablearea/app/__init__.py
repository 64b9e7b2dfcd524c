"""
The APP layer wires the pure model into Qt: change signals, the deferred
correction scheduler and the session facade used by the settings panel.
"""
from usablearea.app.area import AreaModel
from usablearea.app.aspect import AspectRatioController, CorrectionState
from usablearea.app.scheduler import CorrectionSlot, ScheduledDelegate, Scheduler
from usablearea.app.session import CalibrationSession
from usablearea.app.signals import subscribe

__all__ = [
    "AreaModel",
    "AspectRatioController",
    "CorrectionState",
    "CorrectionSlot",
    "ScheduledDelegate",
    "Scheduler",
    "CalibrationSession",
    "subscribe",
]
