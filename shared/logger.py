"""
PassForge Structured Logger
============================

Provides :class:`ForgeLogger`, a small structured-logging facade over the
standard :mod:`logging` module. Records go to a Rich console handler on
stderr and, optionally, to a rotating log file as plain text or JSON
lines.

Secrets never reach the log: components log lengths, attempt counts and
rule summaries, not passwords.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)

_STANDARD_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


class _JSONFormatter(logging.Formatter):
    """Emit each record as one JSON object per line.

    Output fields::

        {
          "timestamp": "2026-01-01T00:00:00+00:00",
          "level": "WARNING",
          "logger": "passforge.generator",
          "message": "...",
          "component": "generator",
          "operation": "generate",
          "extra": {"attempts": 100}
        }
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in ("component", "operation"):
            value = getattr(record, attr, None)
            if value is not None:
                entry[attr] = value

        extra = getattr(record, "forge_extra", None)
        if extra:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class ForgeLogger:
    """Context-aware logger bound to one PassForge component.

    Keyword arguments that are not standard :mod:`logging` arguments are
    collected into a structured ``extra`` payload, which the JSON file
    handler writes out verbatim::

        log = ForgeLogger("generator", log_file="forge.log", json_logs=True)
        with log.operation("generate"):
            log.warning("Attempt budget exhausted", attempts=100)

    Args:
        component:      Component name; the stdlib logger is
                        ``passforge.<component>``.
        log_level:      Minimum severity name.
        log_file:       Rotating log file path. ``None`` or ``""`` disables
                        file logging.
        json_logs:      Write JSON lines instead of plain text to the file.
        console_output: Attach the Rich console handler (stderr).
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 5_242_880,
        backup_count: int = 3,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None

        self._logger = logging.getLogger(f"passforge.{component}")
        self._logger.setLevel(_level(log_level))
        self._logger.propagate = False
        for handler in list(self._logger.handlers):
            handler.close()
        self._logger.handlers.clear()

        if console_output:
            console_handler = RichHandler(
                console=Console(theme=_LOG_THEME, stderr=True),
                level=_level(log_level),
                show_path=False,
                rich_tracebacks=True,
                markup=False,
            )
            self._logger.addHandler(console_handler)

        if log_file:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                filename=str(path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(_level(log_level))
            if json_logs:
                file_handler.setFormatter(_JSONFormatter())
            else:
                file_handler.setFormatter(
                    logging.Formatter(
                        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                        datefmt="%Y-%m-%dT%H:%M:%S%z",
                    )
                )
            self._logger.addHandler(file_handler)

    @classmethod
    def from_settings(cls, component: str, settings: Any) -> ForgeLogger:
        """Build a logger from a :class:`shared.config.GlobalConfig`."""
        return cls(
            component,
            log_level=settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )

    # ------------------------------------------------------------------ #
    #  Context managers
    # ------------------------------------------------------------------ #

    @contextmanager
    def operation(self, name: str) -> Iterator[ForgeLogger]:
        """Tag every record emitted inside the block with ``operation=name``."""
        previous = self._operation
        self._operation = name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log the elapsed time of the enclosed block at DEBUG level."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.debug("%s took %.3f sec", label, time.perf_counter() - start)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        passthrough = {k: kwargs.pop(k) for k in list(kwargs) if k in _STANDARD_KWARGS}
        extra: dict[str, Any] = {
            "component": self._component,
            "operation": self._operation,
        }
        if kwargs:
            extra["forge_extra"] = kwargs
        self._logger.log(level, msg, *args, extra=extra, **passthrough)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)

    @property
    def underlying(self) -> logging.Logger:
        """Direct access to the stdlib :class:`logging.Logger`."""
        return self._logger
