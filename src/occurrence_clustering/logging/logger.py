"""
Centralized logging configuration for occurrence_clustering.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Console logging that respects the configured debug flag.
* Master log file plus per-module logs, only when ``logging.dir`` is set in
  ``config/occurrence_clustering.yml``. The comparison engine itself stays free of
  file I/O unless a deployment asks for it.
* Optional log rotation controlled by ``logging.rotate``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from occurrence_clustering.config import PROJECT_ROOT, get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "occurrence_clustering"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Cache so handlers are only created once per module
_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_log_dir: Optional[Path] = None
_master_log_name: str = "occurrence_clustering.log"
_rotate_logs: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _resolve_log_dir() -> Optional[Path]:
    """Resolve and create the log directory, or None for console-only logging."""
    cfg = get_config()

    log_dir_cfg = cfg.logging.get("dir")
    if not log_dir_cfg:
        return None

    log_dir = Path(log_dir_cfg)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level, _master_log_name, _rotate_logs, _log_dir

    if _base_configured:
        return logging.getLogger(BASE_LOGGER_NAME)

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _master_log_name = cfg.logging.get("file") or "occurrence_clustering.log"

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    debug_enabled = bool(getattr(cfg, "debug", False))

    _effective_level = logging.DEBUG if debug_enabled else base_level

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    _log_dir = _resolve_log_dir()
    if _log_dir is not None:
        master_path = _log_dir / _master_log_name
        base_logger.addHandler(_build_file_handler(master_path, _effective_level))

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    if _log_dir is None:
        return
    filename = f"{module_name.replace('.', '_')}.log"
    path = _log_dir / filename

    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


def _qualify(name: str) -> str:
    if name == BASE_LOGGER_NAME or name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    * Names are placed under the ``occurrence_clustering`` hierarchy so module
      loggers inherit the base console (and master file) handlers.
    * With a configured log dir, each module also gains ``<dir>/<module>.log``.
    * The debug flag in ``config/occurrence_clustering.yml`` forces DEBUG output.
    """

    base_logger = _configure_base_logger()
    logger_name = _qualify(name or BASE_LOGGER_NAME)
    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger_name != base_logger.name:
        if not _module_handler_exists(logger):
            _attach_module_handler(logger, logger_name)
        logger.propagate = True
    else:
        # Base logger already owns the master + console handlers
        logger.propagate = False

    _logger_cache[logger_name] = logger
    return logger


def reset_logging() -> None:
    """Drop every handler created here so the next ``get_logger`` reconfigures."""
    global _base_configured, _log_dir

    for logger in list(_logger_cache.values()) + [logging.getLogger(BASE_LOGGER_NAME)]:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    _logger_cache.clear()
    _base_configured = False
    _log_dir = None


def _root_logger() -> Logger:
    return get_logger(BASE_LOGGER_NAME)


def log_debug(message: str, *args, **kwargs) -> None:
    _root_logger().debug(message, *args, **kwargs)


def log_info(message: str, *args, **kwargs) -> None:
    _root_logger().info(message, *args, **kwargs)


def log_warning(message: str, *args, **kwargs) -> None:
    _root_logger().warning(message, *args, **kwargs)


def log_error(message: str, *args, **kwargs) -> None:
    _root_logger().error(message, *args, **kwargs)


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
