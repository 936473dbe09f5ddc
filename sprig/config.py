from __future__ import annotations
import logging
import os

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_HALT_ON_ERROR = True

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{var} must be one of {sorted(_TRUTHY | _FALSY)}, got {raw!r}")


def get_log_level() -> int:
    name = os.environ.get("SPRIG_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"SPRIG_LOG_LEVEL: unknown level {name!r}")
    return level


def trace_enabled() -> bool:
    return flag_from_env("SPRIG_TRACE", False)


def halt_on_error() -> bool:
    return flag_from_env("SPRIG_HALT_ON_ERROR", _DEFAULT_HALT_ON_ERROR)


def configure_logging(level: int | None = None) -> None:
    """Install a stderr handler on the root logger. Only for scripts; the
    library itself never calls this."""
    logging.basicConfig(level=get_log_level() if level is None else level, format=LOG_FORMAT)
