"""Telemetry for strkit operations, backed by telelog.

Operations report through two calls: ``span(...)`` wraps one operation in
a profiled, component-tracked scope, and ``allocation_failed(...)`` reports
an owned result that could not be built. Output is configured once per
process from ``STRKIT_*`` variables, a named preset, or an explicit
``telelog.Config``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "STRKIT_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "strkit")


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def env_flag(name: str, default: bool) -> bool:
    """Read a ``STRKIT_``-prefixed boolean flag."""

    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def resolve_level() -> str:
    return (_env("LOG_LEVEL") or "WARNING").upper()


@dataclass(frozen=True, slots=True)
class LogSettings:
    """Output options translated into a ``telelog.Config``.

    ``buffer_size`` of 0 disables buffering.
    """

    level: str = "WARNING"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: str = ""
    buffer_size: int = 0

    @classmethod
    def from_env(cls) -> "LogSettings":
        buffered = env_flag("LOG_BUFFERED", False)
        return cls(
            level=resolve_level(),
            console=not env_flag("DISABLE_CONSOLE", False),
            colored=not env_flag("NO_COLOR", False),
            json=env_flag("LOG_JSON", False),
            log_file=_env("LOG_FILE") or "",
            buffer_size=int(_env("LOG_BUFFER_SIZE") or "2048") if buffered else 0,
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


PRESETS: Mapping[str, LogSettings] = MappingProxyType(
    {
        "development": LogSettings(level="DEBUG"),
        "production": LogSettings(
            console=False, log_file="strkit.log", buffer_size=2048
        ),
        "performance": LogSettings(
            level="DEBUG",
            console=False,
            json=True,
            log_file="strkit-performance.log",
            buffer_size=2048,
        ),
    }
)

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    Parameters
    ----------
    config:
        Explicit ``tl.Config`` instance to adopt.
    preset:
        A key of ``PRESETS``; ``STRKIT_LOG_FILE`` still overrides its file.
        ``config`` and ``preset`` are mutually exclusive. With neither, the
        configuration is rebuilt from the environment.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        try:
            settings = PRESETS[preset.lower()]
        except KeyError as exc:
            raise ValueError(
                f"Unknown preset '{preset}', expected one of {sorted(PRESETS)}."
            ) from exc
        log_file = _env("LOG_FILE")
        if log_file:
            settings = replace(settings, log_file=log_file)
        config = settings.to_config()
    elif config is None:
        config = LogSettings.from_env().to_config()

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active configuration."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return str(value)


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    pairs = [(key, _stringify(value)) for key, value in payload.items()]
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, pairs)
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` log line."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level.lower(), f"event::{name}", payload)


def allocation_failed(
    operation: str, requested_units: int, *, discarded_tokens: int = 0
) -> None:
    """Report an owned result that could not be allocated."""

    record_event(
        "allocation_failed",
        level="error",
        data={
            "operation": operation,
            "requested_units": requested_units,
            "discarded_tokens": discarded_tokens,
        },
    )


@dataclass
class OperationSpan:
    """Handle yielded by ``span``; ``details`` travel with a failure report."""

    logger: Any
    operation: str
    component: str
    details: Dict[str, str] = field(default_factory=dict)

    def note(self, key: str, value: Any) -> None:
        self.details[key] = _stringify(value)

    def fail(self, exc: BaseException) -> None:
        _emit(
            self.logger,
            "error",
            "span::fail",
            {
                "operation": self.operation,
                "component": self.component,
                "error": type(exc).__name__,
                "reason": str(exc),
                **self.details,
            },
        )


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[OperationSpan]:
    """Profile one operation and track it under its component.

    ``name`` follows ``<group>::<operation>``; without ``component`` the
    group prefix is tracked. ``metadata`` is attached as logger context
    for the duration of the block.
    """

    log = get_logger(logger_name)
    handle = OperationSpan(
        logger=log,
        operation=name,
        component=component or name.partition("::")[0],
    )
    for key, value in (metadata or {}).items():
        handle.note(key, value)

    with ExitStack() as stack:
        stack.enter_context(log.track_component(handle.component))
        stack.enter_context(log.profile(name))
        context_keys = list(handle.details)
        for key in context_keys:
            log.add_context(key, handle.details[key])
        try:
            yield handle
        except Exception as exc:
            handle.fail(exc)
            raise
        finally:
            for key in context_keys:
                log.remove_context(key)


configure()

__all__ = [
    "LogSettings",
    "OperationSpan",
    "PRESETS",
    "allocation_failed",
    "configure",
    "env_flag",
    "get_logger",
    "record_event",
    "resolve_level",
    "span",
]
