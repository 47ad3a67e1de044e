"""Colored operation logger — ANSI-colored console logging for optimistic list stores.

Provides an OperationLogger with color-coded output per operation stage,
making it easy to follow an optimistic mutation from local apply to
settlement in the terminal.

Color scheme:
    🟢 Green   — Create / Confirmed
    🔵 Blue    — Update
    🟣 Magenta — Delete
    🟡 Yellow  — Rollback / Skipped
    🔴 Red     — Errors
    ⚪ Gray    — Details
"""

import logging
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    GRAY = "\033[90m"


# ── Operation Stage Definitions ──────────────────────────────────────

class OperationStage:
    """Predefined store stages with colors and icons."""

    CREATE = ("CREATE", _Colors.GREEN, "➕")
    UPDATE = ("UPDATE", _Colors.BLUE, "✏️")
    DELETE = ("DELETE", _Colors.MAGENTA, "🗑️")
    ROLLBACK = ("ROLLBACK", _Colors.YELLOW, "↩️")
    SKIPPED = ("SKIPPED", _Colors.YELLOW, "⏭️")
    ERROR = ("ERROR", _Colors.RED, "❌")


# ── OperationLogger ──────────────────────────────────────────────────

class OperationLogger:
    """Color-coded logger for optimistic store operations.

    Usage:
        log = OperationLogger("OptimisticListStore")
        log.step_start(OperationStage.UPDATE, "Applying optimistic update", id="a1")
        log.step_complete(OperationStage.UPDATE, "Remote update confirmed", id="a1")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    @staticmethod
    def _format_details(kwargs: dict[str, Any], color: str) -> str:
        if not kwargs:
            return ""
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        return f" {color}({details}){_Colors.RESET}"

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log the optimistic (local) half of an operation."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        self._logger.debug(formatted + self._format_details(kwargs, _Colors.GRAY))

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a confirmed settlement."""
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        self._logger.info(formatted + self._format_details(kwargs, _Colors.GRAY))

    def step_warning(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a rollback or a skipped operation in yellow."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        self._logger.warning(formatted + self._format_details(kwargs, _Colors.DIM))

    def step_error(self, stage: tuple[str, str, str], message: str, error: BaseException | None = None) -> None:
        """Log a failure in red."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)
