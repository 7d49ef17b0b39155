"""
Logging setup.

Every module logs through ``logging.getLogger(__name__)``; this only wires
the root handler once at startup.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if any(getattr(h, "_workout_tracker", False) for h in root.handlers):
        root.setLevel(level.upper())
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._workout_tracker = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level.upper())

    # uvicorn installs its own access log handler
    logging.getLogger("uvicorn.access").propagate = False
