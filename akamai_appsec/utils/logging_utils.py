"""Loguru helpers for library logging."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}

COMPONENT = "akamai_appsec"


def get_logger(**extra):
    """Logger bound to the library component (plus any extra context)."""
    return logger.bind(component=COMPONENT, **extra)


def default_log_path(name: str = COMPONENT) -> Path:
    return Path.home() / ".akamai-appsec" / "logs" / f"{name}.log"


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> Path:
    """Ensure a rotating log sink for library records at the given level."""
    log_path = Path(log_file) if log_file else default_log_path()
    key = str(log_path)
    if key in _SINK_IDS:
        return log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        str(log_path),
        level=level.upper(),
        rotation="10 MB",
        retention="14 days",
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
        filter=lambda record: record["extra"].get("component") == COMPONENT,
    )
    _SINK_IDS[key] = sink_id
    return log_path


def remove_logging(log_file: Path | None = None) -> None:
    """Remove a sink previously added by configure_logging."""
    key = str(Path(log_file) if log_file else default_log_path())
    sink_id = _SINK_IDS.pop(key, None)
    if sink_id is not None:
        logger.remove(sink_id)
