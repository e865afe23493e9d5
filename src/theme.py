"""Category colors for todo listings.

Colors switch off when stdout is not a terminal (FORCE_COLOR=1 overrides)
or when NO_COLOR is set. 24-bit escapes are used only when COLORTERM
advertises them; otherwise the nearest xterm-256 cube entry is used.
"""
from __future__ import annotations
import os, sys
from typing import Dict, Tuple
from models import Category

RGB = Tuple[int, int, int]


def _colors_enabled() -> bool:
    if 'NO_COLOR' in os.environ:
        return False
    forced = os.environ.get('FORCE_COLOR', '').lower() in {'1', 'true', 'yes', 'on'}
    return forced or sys.stdout.isatty()


ENABLED = _colors_enabled()
TRUECOLOR = ENABLED and any(tok in os.environ.get('COLORTERM', '').lower() for tok in ('truecolor', '24bit'))


def _sgr(*params: int) -> str:
    if not ENABLED:
        return ''
    return '\033[' + ';'.join(str(p) for p in params) + 'm'


def foreground(rgb: RGB) -> str:
    """Escape sequence selecting ``rgb`` as the text color."""
    if TRUECOLOR:
        return _sgr(38, 2, *rgb)
    r, g, b = (round(c / 255 * 5) for c in rgb)
    return _sgr(38, 5, 16 + 36 * r + 6 * g + b)


RESET = _sgr(0)
BOLD = _sgr(1)
DIM = _sgr(2)

ACCENT: RGB = (0x47, 0x6E, 0xAE)
PALETTE: Dict[Category, RGB] = {
    Category.ANY: (0xB0, 0xB7, 0xC3),
    Category.TODO: (0x48, 0xB3, 0xAF),
    Category.IN_PROGRESS: (0xF6, 0xFF, 0x99),
    Category.DONE: (0xA7, 0xE3, 0x99),
}

CATEGORY_COLOR: Dict[Category, str] = {cat: foreground(rgb) for cat, rgb in PALETTE.items()}
INDEX_COLOR = foreground(ACCENT) + BOLD
EMPTY_COLOR = DIM + foreground(ACCENT)


def paint(text: str, *styles: str) -> str:
    if not ENABLED or not styles:
        return text
    return ''.join(styles) + text + RESET
