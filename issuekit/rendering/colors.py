"""ANSI terminal color codes.

A color spec is ``fg[+attrs][:bg[+attrs]]`` where each color is a name from
``COLORS`` or a 256-color index. Foreground attributes: ``b`` bold, ``B``
blink, ``u`` underline, ``i`` inverse, ``s`` strikethrough, ``h`` high
intensity. The only background attribute is ``h``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "default": 9,
}

RESET = "\033[0m"

_FG_NORMAL, _FG_HIGH = 30, 90
_BG_NORMAL, _BG_HIGH = 40, 100

_FG_ATTRIBUTES = (("b", "1"), ("B", "5"), ("u", "4"), ("i", "7"), ("s", "9"))


def _color_param(name: str, base: int, extended: str) -> str | None:
    if name.isdigit():
        return f"{extended};5;{int(name)}"
    if name in COLORS:
        return str(base + COLORS[name])
    return None


def color_code(spec: str, *, plain: bool = False) -> str:
    """Return the escape sequence for a color spec.

    ``reset`` yields the reset sequence; ``off``, an empty spec or
    ``plain=True`` yield an empty string. Unknown color names are ignored.
    """
    if plain or not spec or spec == "off":
        return ""
    if spec == "reset":
        return RESET

    fg_part, _, bg_part = spec.partition(":")
    fg_name, _, fg_attrs = fg_part.partition("+")
    bg_name, _, bg_attrs = bg_part.partition("+")

    params = [code for flag, code in _FG_ATTRIBUTES if flag in fg_attrs]

    if fg_name:
        fg = _color_param(fg_name, _FG_HIGH if "h" in fg_attrs else _FG_NORMAL, "38")
        if fg is None:
            logger.warning(f"Unknown foreground color {fg_name!r}")
        else:
            params.append(fg)

    if bg_name:
        bg = _color_param(bg_name, _BG_HIGH if "h" in bg_attrs else _BG_NORMAL, "48")
        if bg is None:
            logger.warning(f"Unknown background color {bg_name!r}")
        else:
            params.append(bg)

    if not params:
        return ""
    return "\033[" + ";".join(params) + "m"
