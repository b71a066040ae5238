"""
Centralized logging configuration for picklist_parser.

Key behaviors
-------------
* ``get_logger`` is the only way modules obtain a logger, so every logger
  shares the same handlers and format.
* One master log file (default: ``logs/picklist_parser.log``) plus one file
  per module logger.
* Console output on STDERR, so JSON written to STDOUT by the CLI stays clean.
* DEBUG level is forced when ``debug: true`` is set in
  ``config/picklist_parser.yml``; rotation is opt-in through ``rotate``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from picklist_parser.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "picklist_parser"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_log_dir: Path = PROJECT_ROOT / "logs"
_rotate_logs: bool = False


def _resolve_log_dir() -> Path:
    global _log_dir
    cfg = get_config()

    configured = cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs"
    log_dir = Path(configured)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    _log_dir = log_dir
    return log_dir


def _file_handler(path: Path, level: int) -> logging.Handler:
    if _rotate_logs:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=2 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Attach master file + console handlers to the package logger, once."""
    global _base_configured, _effective_level, _rotate_logs

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    master_name = cfg.logging.get("file", f"{BASE_LOGGER_NAME}.log")

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    debug_enabled = bool(cfg.debug)
    _effective_level = (
        logging.DEBUG if debug_enabled else getattr(logging, level_name, logging.INFO)
    )

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False
    base_logger.addHandler(
        _file_handler(_resolve_log_dir() / master_name, _effective_level)
    )

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.WARNING)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _has_module_handler(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, short_name: str) -> None:
    path = _resolve_log_dir() / f"{short_name.replace('.', '_')}.log"
    handler = _file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


def get_logger(name: str | None = None) -> Logger:
    """Return a logger wired to the project-wide handlers.

    Short names such as ``"scanner"`` are placed under the package logger
    (``picklist_parser.scanner``) so they inherit the master file and the
    console handler, and additionally write ``logs/scanner.log``.
    """
    base_logger = _configure_base_logger()
    if not name or name == BASE_LOGGER_NAME:
        _logger_cache[BASE_LOGGER_NAME] = base_logger
        return base_logger

    short_name = name
    if name.startswith(BASE_LOGGER_NAME + "."):
        short_name = name[len(BASE_LOGGER_NAME) + 1:]
    full_name = f"{BASE_LOGGER_NAME}.{short_name}"

    logger = logging.getLogger(full_name)
    logger.setLevel(_effective_level)
    if not _has_module_handler(logger):
        _attach_module_handler(logger, short_name)
    logger.propagate = True

    _logger_cache[full_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
