import os
import threading
from dataclasses import dataclass

STRICT_ENV_VAR = "LPATH_STRICT"
MAX_INDEX_GAP_ENV_VAR = "LPATH_MAX_INDEX_GAP"
DEFAULT_MAX_INDEX_GAP = 10_000
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    strict: bool = False
    # Most `None` slots a single write may add when padding a list up to an index.
    max_index_gap: int = DEFAULT_MAX_INDEX_GAP


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    valid_options = ", ".join(sorted(_TRUE_VALUES | (_FALSE_VALUES - {""})))
    raise ValueError(f"Invalid value '{raw}' for {name}. Expected one of: {valid_options}.")


def _parse_count(name: str, raw: str, default: int) -> int:
    value = raw.strip()
    if not value:
        return default
    if not value.isdigit():
        raise ValueError(
            f"Invalid value '{raw}' for {name}. Expected a non-negative integer."
        )
    return int(value)


def resolve_settings(
    raw: str | None = None, *, raw_max_index_gap: str | None = None
) -> Settings:
    requested_strict = raw if raw is not None else os.getenv(STRICT_ENV_VAR, "")
    requested_gap = (
        raw_max_index_gap
        if raw_max_index_gap is not None
        else os.getenv(MAX_INDEX_GAP_ENV_VAR, "")
    )
    return Settings(
        strict=_parse_flag(STRICT_ENV_VAR, requested_strict),
        max_index_gap=_parse_count(
            MAX_INDEX_GAP_ENV_VAR, requested_gap, DEFAULT_MAX_INDEX_GAP
        ),
    )


_settings: Settings | None = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """
    Return the process-wide settings, resolving them from the environment on first use.

    Later changes to the environment are ignored until `reset_settings()` is called.
    """
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = resolve_settings()
    return _settings


def reset_settings():
    global _settings
    with _settings_lock:
        _settings = None
