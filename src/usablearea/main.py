"""
Headless Calibration Runner
===========================
Builds a calibration session, replays a few user edits through it and prints
the reconciled state.

Why is this file needed?
------------------------
It is the quickest way to see what the correction protocol does to a given
edit without a settings panel attached. The Qt event loop runs exactly as it
would under a GUI, so deferred corrections are applied by the loop itself.

Usage:
    $ python -m usablearea.main --size 0.9 0.9 --lock --set-size-x 0.5
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication, QEventLoop, QTimer

from usablearea.app.session import CalibrationSession
from usablearea.config import AreaConfig, ConfigurationError
from usablearea.logging_config import setup_logging
from usablearea.model.geometry import AreaState

logger = logging.getLogger(__name__)

# Upper bound on event-loop turns spent waiting for corrections to settle.
MAX_SETTLE_TURNS = 50


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="usablearea", description=__doc__.splitlines()[1])
    parser.add_argument("--offset", nargs=2, type=float, metavar=("X", "Y"), default=(0.0, 0.0))
    parser.add_argument("--size", nargs=2, type=float, metavar=("X", "Y"), default=(1.0, 1.0))
    parser.add_argument("--lock", action="store_true", help="Start with the aspect ratio locked.")
    parser.add_argument("--min-size", type=float, default=None, help="Override the minimum area size.")
    parser.add_argument("--set-size-x", type=float, action="append", default=[])
    parser.add_argument("--set-size-y", type=float, action="append", default=[])
    parser.add_argument("--set-aspect", type=float, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def settle(session: CalibrationSession) -> None:
    """Spin the Qt event loop until no correction is queued."""
    loop = QEventLoop()
    for _ in range(MAX_SETTLE_TURNS):
        if not session.scheduler.has_pending:
            return
        QTimer.singleShot(0, loop.quit)
        loop.exec()
    logger.warning("Corrections did not settle.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("usablearea")

    try:
        config = AreaConfig() if args.min_size is None else AreaConfig(size_range=(args.min_size, 1.0))
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    session = CalibrationSession(
        config=config,
        initial=AreaState(offset=tuple(args.offset), size=tuple(args.size), locked=args.lock),
    )

    # Each edit is its own input event; corrections settle between them.
    for value in args.set_size_x:
        session.set_size_x(value)
        settle(session)
    for value in args.set_size_y:
        session.set_size_y(value)
        settle(session)
    if args.set_aspect is not None:
        session.set_aspect_ratio(args.set_aspect)
        settle(session)

    result = session.snapshot().to_dict()
    result["within_bounds"] = session.is_within_bounds()
    result["label"] = session.ratio_label()
    print(json.dumps(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
