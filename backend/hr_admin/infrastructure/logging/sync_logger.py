"""Colored sync logger — traces what each screen asks of the backend.

Every Loader run, mutation, upload/download and auth call is logged as a
start line and a completion (or failure) line with its elapsed time, so a
terminal shows the round trip and how the in-memory list was reconciled.

Color scheme:
    🟢 Green   — Load / Reconcile
    🟡 Yellow  — Create
    🔵 Blue    — Update
    🟣 Magenta — Delete
    🟠 Cyan    — Upload / Download
    ⚪ White   — Auth
    🔴 Red     — Failures
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, NamedTuple

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
BLUE = "\033[94m"
MAGENTA = "\033[95m"
CYAN = "\033[96m"
WHITE = "\033[97m"
GRAY = "\033[90m"


class Stage(NamedTuple):
    label: str
    color: str
    icon: str


class SyncStage:
    """The synchronisation steps a screen can take."""

    LOAD = Stage("LOAD", GREEN, "📥")
    RECONCILE = Stage("RECONCILE", GREEN, "🔁")
    CREATE = Stage("CREATE", YELLOW, "➕")
    UPDATE = Stage("UPDATE", BLUE, "✏️")
    DELETE = Stage("DELETE", MAGENTA, "🗑️")
    UPLOAD = Stage("UPLOAD", CYAN, "📤")
    DOWNLOAD = Stage("DOWNLOAD", CYAN, "📄")
    AUTH = Stage("AUTH", WHITE, "🔑")


def _fields(extra: dict[str, Any]) -> str:
    if not extra:
        return ""
    return f" {GRAY}({' | '.join(f'{k}={v}' for k, v in extra.items())}){RESET}"


class SyncLogger:
    """Color-coded logger named after the component that owns it.

    Usage:
        slog = SyncLogger("EntityListEditor")
        with slog.timed_step(SyncStage.LOAD, "Loading employees", path="/api/employees"):
            raw = await backend.fetch_all(endpoint)
        slog.detail("employees: 12 record(s) loaded")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def detail(self, message: str, **extra: Any) -> None:
        self._logger.info(f"   {GRAY}├─ {message}{RESET}{_fields(extra)}")

    def warning(self, message: str, **extra: Any) -> None:
        self._logger.warning(f"   {YELLOW}⚠ {message}{RESET}{_fields(extra)}")

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **extra: Any) -> Iterator[None]:
        """Log the step's start, then its outcome with the elapsed time.

        Failures are logged at WARNING and re-raised; the caller decides what
        the operator sees.
        """
        self._logger.info(
            f"{stage.color}{BOLD}{stage.icon} [{stage.label}]{RESET} {stage.color}{message}{RESET}"
            + _fields(extra)
        )
        start = time.perf_counter()
        try:
            yield
        except Exception as exc:
            elapsed = time.perf_counter() - start
            self._logger.warning(
                f"{RED}{BOLD}❌ [{stage.label}]{RESET} {RED}{message} — failed after {elapsed:.2f}s{RESET}"
                f" {DIM}→ {type(exc).__name__}: {exc}{RESET}"
            )
            raise
        elapsed = time.perf_counter() - start
        self._logger.info(
            f"{stage.color}{stage.icon} [{stage.label}]{RESET} {GREEN}✓ {message} — {elapsed:.2f}s{RESET}"
            + _fields(extra)
        )
