from __future__ import annotations
import os

# Defaults
_DEFAULT_MAX_DEPTH = 1000
_DEFAULT_COLOR = 'auto'
_COLOR_MODES = ('auto', 'always', 'never')


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}")
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_max_depth() -> int:
    """Maximum nesting of call dispatches before evaluation gives up."""
    return int_from_env('FAYE_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_color_mode() -> str:
    raw = os.environ.get('FAYE_COLOR', _DEFAULT_COLOR).strip().lower()
    # unknown values fall back to the default rather than failing diagnostics
    return raw if raw in _COLOR_MODES else _DEFAULT_COLOR
