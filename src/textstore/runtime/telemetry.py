"""Telemetry services for textstore, built directly on telelog.

The rest of the package only touches this narrow surface:

``configure(...)`` -- override or preset the telelog configuration
``get_logger()`` -- fetch (and cache) the configured logger
``record_event(name, ...)`` -- emit structured events at a chosen level
``span(name, ...)`` -- profiled block that logs failures before re-raising
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TEXTSTORE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "textstore")
DEFAULT_LOG_FILE = os.getenv(f"{ENV_PREFIX}LOG_FILE", "")

PRESETS = ("development", "production", "performance")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _build_preset_config(preset: str) -> Any:
    config = tl.Config()
    key = preset.lower()

    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
        config.with_json_format(False)
    elif key == "production":
        # The terminal belongs to the editor UI, so only the file sink is used.
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(_env("LOG_FILE", DEFAULT_LOG_FILE) or "textstore.log")
        config.with_buffering(True)
    elif key == "performance":
        config.with_min_level("DEBUG")
        config.with_console_output(False)
        config.with_buffering(True)
        config.with_json_format(True)
        config.with_file_output(
            _env("LOG_FILE", DEFAULT_LOG_FILE) or "textstore-performance.log"
        )
    else:
        raise ValueError(f"Unknown preset '{preset}'. Expected one of {PRESETS}.")

    config.with_profiling(True)
    return config


def _build_default_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())

    if _env_flag("DISABLE_CONSOLE", False):
        config.with_console_output(False)
    else:
        config.with_console_output(True)
        config.with_colored_output(not _env_flag("NO_COLOR", False))

    if _env_flag("LOG_JSON", False):
        config.with_json_format(True)

    log_file = _env("LOG_FILE") or DEFAULT_LOG_FILE
    if log_file:
        config.with_file_output(log_file)

    if _env_flag("LOG_BUFFERED", False):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))

    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    Parameters
    ----------
    config:
        Explicit ``tl.Config`` instance to adopt.
    preset:
        One of ``"development"``, ``"production"`` or ``"performance"``.
        ``config`` and ``preset`` are mutually exclusive.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _build_preset_config(preset)
    elif config is None:
        config = _build_default_config()

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def _ensure_config() -> Any:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _build_default_config()
    return _ACTIVE_CONFIG


def get_logger() -> Any:
    """Return the cached ``telelog.Logger`` bound to the active configuration."""

    if DEFAULT_LOGGER_NAME not in _LOGGER_CACHE:
        _LOGGER_CACHE[DEFAULT_LOGGER_NAME] = tl.Logger.with_config(
            DEFAULT_LOGGER_NAME, _ensure_config()
        )
    return _LOGGER_CACHE[DEFAULT_LOGGER_NAME]


def _resolve_level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    name = str(level).lower()
    with_attr = getattr(logger, f"{name}_with", None)
    if with_attr is not None:
        return with_attr, True

    attr = getattr(logger, name, None)
    if attr is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return attr, False


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    _emit(get_logger(), level, f"event::{name}", {"event": name, **(data or {})})


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, accepts_data = _resolve_level_method(log, level)
    if accepts_data:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


@contextmanager
def span(name: str, *, metadata: Optional[Dict[str, Any]] = None) -> Iterator[None]:
    """Profile a block under ``name``.

    Metadata is attached as logger context for the duration of the block.
    Exceptions are logged as ``span::fail`` and re-raised.
    """

    log = get_logger()
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    try:
        with log.profile(name):
            yield
    except Exception as exc:
        _emit(log, "error", "span::fail", {"span": name, **context, "reason": exc})
        raise
    finally:
        for key in context:
            log.remove_context(key)


configure()

__all__ = [
    "PRESETS",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
