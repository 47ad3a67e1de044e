"""Notifier that writes toasts to the application log."""

import logging

from campus_portal.application.interfaces import Notifier
from campus_portal.domain.entities import NotificationKind

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    """Logs successes at INFO and errors at WARNING."""

    def __init__(self, logger_name: str | None = None):
        self._logger = logging.getLogger(logger_name) if logger_name else logger

    def notify(
        self,
        kind: NotificationKind,
        title: str,
        description: str | None = None,
    ) -> None:
        level = logging.WARNING if kind == NotificationKind.ERROR else logging.INFO
        if description:
            self._logger.log(level, "%s: %s", title, description)
        else:
            self._logger.log(level, "%s", title)
