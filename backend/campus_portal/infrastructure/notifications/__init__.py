from .logging_notifier import LoggingNotifier
from .sse_notifier import SSENotifier

__all__ = [
    "LoggingNotifier",
    "SSENotifier",
]
