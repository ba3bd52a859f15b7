"""Colored step logger — ANSI-colored console logging for multi-step write operations.

Provides a StepLogger with color-coded output per step of the teacher
onboarding protocol, so a single save can be traced in the terminal.

Color scheme:
    Yellow  — Uniqueness checks
    Blue    — Mapping the payload into the aggregate
    Green   — Attachment storage
    Cyan    — Persisting the aggregate
    Red     — Errors
    Gray    — Details
"""

import logging
import time
from contextlib import contextmanager
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
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Step Definitions ─────────────────────────────────────────────────

class SaveStage:
    """Predefined stages of an aggregate save with colors and icons."""

    UNIQUENESS = ("UNIQUE", _Colors.YELLOW, "🔎")
    MAPPING = ("MAP", _Colors.BLUE, "🧩")
    ATTACHMENT = ("ATTACH", _Colors.GREEN, "📎")
    PERSIST = ("PERSIST", _Colors.CYAN, "💾")
    COMPLETE = ("COMPLETE", _Colors.GREEN, "✅")


# ── StepLogger ───────────────────────────────────────────────────────

class StepLogger:
    """Color-coded logger for a multi-step operation.

    Usage:
        log = StepLogger("TeacherService")
        log.step_start(SaveStage.UNIQUENESS, "Checking tax id 123456789")
        log.detail("No conflicts")
        log.step_complete(SaveStage.UNIQUENESS, "Unique")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)
        self._component = component_name

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a step failure in red. Failures are expected outcomes, so WARNING."""
        label, _, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.warning(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.DIM}({details}){_Colors.RESET}"
        self._logger.info(formatted)

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time.

        Usage:
            with log.timed_step(SaveStage.PERSIST, "Saving teacher"):
                saved = await repository.create(teacher)
        """
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} — {elapsed:.2f}s", **kwargs)
