"""Color & style helpers for the interactive shell.

Decisions:
- Core modules return plain text; only the shell applies color.
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disabled when not a TTY unless FORCE_COLOR=1; NO_COLOR disables completely.
- Palette overrides via TASKLINE_PRIMARY / TASKLINE_ERROR,
  from the environment or the project .env file.
"""
from __future__ import annotations
import os, sys
from pathlib import Path

from taskline.config import read_dotenv

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = any(tok in _COLORTERM for tok in ("truecolor", "24bit"))


def set_enabled(enabled: bool) -> None:
    """Turn color on/off at runtime (e.g. --no-color)."""
    global _ENABLE
    _ENABLE = enabled and not _NO_COLOR


def _code(part: str) -> str:
    return f"\033[{part}m"

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

def _valid_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

RESET = _code('0')
BOLD = _code('1')

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_ERROR_DEFAULT = '#E06C75'

_ENV_OVERRIDES = read_dotenv(Path.cwd() / '.env')


def _palette(key: str, default: str) -> str:
    # priority: real env var > .env override > default
    for value in (os.environ.get(key), _ENV_OVERRIDES.get(key)):
        if value and _valid_hex(value):
            return '#' + value.lstrip('#')
    return default


HEX_PRIMARY = _palette('TASKLINE_PRIMARY', HEX_PRIMARY_DEFAULT)
HEX_ERROR = _palette('TASKLINE_ERROR', HEX_ERROR_DEFAULT)

PRIMARY = _from_hex(HEX_PRIMARY)
ERROR_COLOR = _from_hex(HEX_ERROR)
HEADER_COLOR = PRIMARY + BOLD


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE or not styles:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','set_enabled','RESET','BOLD','PRIMARY','ERROR_COLOR',
    'HEADER_COLOR','HEX_PRIMARY','HEX_ERROR',
]
