"""Shared fixtures for the usablearea test suite."""

from __future__ import annotations

from typing import Callable

import pytest
from PySide6.QtCore import QCoreApplication

from usablearea.app.session import CalibrationSession
from usablearea.config import AreaConfig
from usablearea.model.geometry import AreaState


@pytest.fixture(scope="session", autouse=True)
def qapp() -> QCoreApplication:
    """Timers need an application instance on the main thread."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture()
def make_session() -> Callable[..., CalibrationSession]:
    """Build a session with default ranges from a size pair and lock flag."""
    created: list[CalibrationSession] = []

    def factory(size=(1.0, 1.0), offset=(0.0, 0.0), locked=False, config=None, **kwargs) -> CalibrationSession:
        session = CalibrationSession(
            config=config or AreaConfig(),
            initial=AreaState(offset=offset, size=size, locked=locked, **kwargs),
        )
        created.append(session)
        return session

    yield factory

    for session in created:
        session.deleteLater()


def record(signal) -> list[tuple]:
    """Collect every emission of `signal` as a tuple of its arguments."""
    calls: list[tuple] = []
    signal.connect(lambda *args: calls.append(args))
    return calls
