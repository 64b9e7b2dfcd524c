from __future__ import annotations

from typing import Any, Callable

from PySide6.QtCore import SignalInstance


def subscribe(signal: SignalInstance, callback: Callable[..., Any]) -> Callable[[], None]:
    """
    Connect `callback` to `signal` and return its unsubscribe handle.

    The handle may be called any number of times; only the first call
    disconnects.
    """
    signal.connect(callback)
    connected = True

    def unsubscribe() -> None:
        nonlocal connected
        if connected:
            connected = False
            signal.disconnect(callback)

    return unsubscribe
