"""telelog wiring for buffered targets.

Targets report through three calls: ``get_logger`` for a cached logger,
``span`` around whole-file work (load, save, destroy) and ``record_event``
for one-off notices such as an ignored seek. The logger configuration is read
from ``BUFFERED_TARGET_*`` environment variables unless ``configure`` is given
an explicit ``telelog.Config``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "BUFFERED_TARGET_"
DEFAULT_LOGGER_NAME = "buffered_target"

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _config_from_env() -> Any:
    """Quiet by default: warnings and up, to the console only."""

    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "WARNING").upper())
    config.with_console_output(not _env_flag("DISABLE_CONSOLE"))
    config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def configure(config: Optional[Any] = None) -> None:
    """Adopt ``config`` (or re-read the environment) and drop cached loggers."""

    global _CONFIG
    _CONFIG = config if config is not None else _config_from_env()
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _CONFIG
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGERS:
        if _CONFIG is None:
            _CONFIG = _config_from_env()
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    pairs = [(key, _text(value)) for key, value in payload.items()]
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
    """Log ``event::<name>`` with ``data`` as structured fields."""

    _emit(
        get_logger(logger_name),
        level.lower(),
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@dataclass
class SpanHandle:
    """Yielded by ``span``; collects fields reported if the block fails."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``name``.

    ``metadata`` is pushed as logger context for the duration of the block and
    ``component`` (e.g. ``"target"``) is tracked alongside the profile. An
    exception escaping the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(logger=log, span_name=name, component_name=component)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)
    context_keys = list(handle.metadata)

    with ExitStack() as stack:
        for key in context_keys:
            log.add_context(key, handle.metadata[key])
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context_keys:
                log.remove_context(key)


__all__ = ["SpanHandle", "configure", "get_logger", "record_event", "span"]
