"""
CipherLab Structured Logger
============================

:class:`LabLogger` wraps a stdlib :class:`logging.Logger` named
``cipherlab.<component>``. Records go to stderr through Rich and,
when a log file is configured, to a size-rotated file as plain text or
JSON lines.

Every record carries the component name and the current operation
(set with :meth:`LabLogger.operation`), so a classroom log of many
crack runs can be filtered per stage.

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
    }
)

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(component)s | %(message)s"
_CONTEXT_FIELDS = ("component", "operation")
_PASSTHROUGH_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.WARNING)


class _JSONLinesFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``timestamp``, ``level``, ``logger``, ``message``, then
    ``component``/``operation`` when set, ``extra`` for keyword data
    passed to the log call, and ``exc_info`` for tracebacks.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (name, getattr(record, name))
            for name in _CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        )
        if getattr(record, "lab_extra", None):
            entry["extra"] = record.lab_extra
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _console_handler(level: int) -> logging.Handler:
    return RichHandler(
        console=Console(theme=_LOG_THEME, stderr=True),
        level=level,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )


def _file_handler(
    path: Path, level: int, json_logs: bool, max_bytes: int, backup_count: int
) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    if json_logs:
        handler.setFormatter(_JSONLinesFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(_TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
        )
    return handler


class LabLogger:
    """Component-bound logger for CipherLab.

    Usage::

        log = LabLogger("wordlists", log_level="INFO")
        log.info("Fetched %d words", len(words), url=url)
        with log.operation("fetch"):
            log.warning("Falling back to the offline list")

    Keyword arguments other than ``exc_info``/``stack_info``/``stacklevel``
    are collected into the record's ``extra`` field (JSON logs only).

    Args:
        component:      Short name, appended to ``cipherlab.``.
        log_level:      Minimum level name; unknown names mean WARNING.
        log_file:       Rotating log file, or ``None`` for no file output.
        json_logs:      Write JSON lines instead of plain text to the file.
        max_bytes:      Rotation size of the log file.
        backup_count:   Rotated files to keep.
        console_output: Attach the Rich stderr handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None

        level = _level(log_level)
        self._logger = logging.getLogger(f"cipherlab.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        # Re-creating a component logger replaces its handlers
        self._logger.handlers.clear()

        if console_output:
            self._logger.addHandler(_console_handler(level))
        if log_file is not None:
            self._logger.addHandler(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )

    @classmethod
    def from_config(cls, component: str, config: Any) -> LabLogger:
        """Build a logger from the ``[global]`` section of a LabConfig."""
        settings = config.global_settings
        return cls(
            component,
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

    @contextmanager
    def operation(self, name: str) -> Iterator[LabLogger]:
        """Tag records logged inside the block with ``operation=name``."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log *label* at DEBUG on entry and with its duration at INFO on exit."""
        start = time.perf_counter()
        self.debug("Started: %s", label)
        try:
            yield
        finally:
            self.info("Completed: %s (%.3f sec)", label, time.perf_counter() - start)

    def _log(self, level: int, msg: str, args: tuple, kwargs: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        passthrough = {k: kwargs.pop(k) for k in list(kwargs) if k in _PASSTHROUGH_KWARGS}
        extra = {
            "component": self._component,
            "operation": self._operation,
            "lab_extra": kwargs or None,
        }
        self._logger.log(level, msg, *args, extra=extra, **passthrough)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, args, kwargs)

    @property
    def component(self) -> str:
        return self._component

    @property
    def underlying(self) -> logging.Logger:
        """The wrapped stdlib logger."""
        return self._logger
