"""Thread wrappers that name threads and log their failures."""

from omnium.thread.logging_thread import LoggingThread
from omnium.thread.perpetual import PerpetualThread, PerpetualThreadRegistry

__all__ = [
    "LoggingThread",
    "PerpetualThread",
    "PerpetualThreadRegistry",
]
