"""
Colour parsing and WCAG contrast ratio computation.

Relative luminance follows WCAG 2.x: each sRGB channel is normalized to
[0, 1], linearized (linear segment below 0.03928, 2.4 gamma above) and
weighted 0.2126 / 0.7152 / 0.0722. The contrast ratio of two luminances is
``(L_lighter + 0.05) / (L_darker + 0.05)``, ranging from 1 to 21.
"""

from __future__ import annotations

import re
from typing import Dict, Optional, Tuple

from a11ycheck.protocols import ColorSpec

# WCAG AA threshold for normal-size text.
AA_NORMAL_TEXT = 4.5

_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_RGB_RE = re.compile(r"^rgba?\(\s*([^)]*)\)$")

NAMED_COLORS: Dict[str, Tuple[int, int, int]] = {
    # CSS basic colours
    "black": (0, 0, 0),
    "silver": (192, 192, 192),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "white": (255, 255, 255),
    "maroon": (128, 0, 0),
    "red": (255, 0, 0),
    "purple": (128, 0, 128),
    "fuchsia": (255, 0, 255),
    "magenta": (255, 0, 255),
    "green": (0, 128, 0),
    "lime": (0, 255, 0),
    "olive": (128, 128, 0),
    "yellow": (255, 255, 0),
    "navy": (0, 0, 128),
    "blue": (0, 0, 255),
    "teal": (0, 128, 128),
    "aqua": (0, 255, 255),
    "cyan": (0, 255, 255),
    # Frequently used extended keywords
    "orange": (255, 165, 0),
    "darkgray": (169, 169, 169),
    "darkgrey": (169, 169, 169),
    "dimgray": (105, 105, 105),
    "dimgrey": (105, 105, 105),
    "lightgray": (211, 211, 211),
    "lightgrey": (211, 211, 211),
    "gainsboro": (220, 220, 220),
    "whitesmoke": (245, 245, 245),
    "darkblue": (0, 0, 139),
    "darkred": (139, 0, 0),
    "darkgreen": (0, 100, 0),
    "lightblue": (173, 216, 230),
    "lightgreen": (144, 238, 144),
    "lightyellow": (255, 255, 224),
    "pink": (255, 192, 203),
    "brown": (165, 42, 42),
    "gold": (255, 215, 0),
    "beige": (245, 245, 220),
    "ivory": (255, 255, 240),
    "khaki": (240, 230, 140),
    "coral": (255, 127, 80),
    "tomato": (255, 99, 71),
    "crimson": (220, 20, 60),
    "indigo": (75, 0, 130),
    "violet": (238, 130, 238),
    "skyblue": (135, 206, 235),
    "steelblue": (70, 130, 180),
    "slategray": (112, 128, 144),
    "slategrey": (112, 128, 144),
}

INVALID = ColorSpec()


def _channel(token: str) -> Optional[int]:
    token = token.strip()
    try:
        if token.endswith("%"):
            value = float(token[:-1]) * 255.0 / 100.0
        else:
            value = float(token)
    except ValueError:
        return None
    if not 0.0 <= value <= 255.0:
        return None
    return int(round(value))


def parse_color(text: Optional[str]) -> ColorSpec:
    """Parse a CSS colour value.

    Supports ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa`` (alpha ignored),
    ``rgb()`` / ``rgba()`` with numeric or percentage channels, and the
    keywords in ``NAMED_COLORS``. Everything else, including ``var(--x)``,
    ``inherit`` and ``transparent``, yields an invalid spec.
    """
    if text is None:
        return INVALID
    raw = text.strip()
    value = raw.lower()
    if value.endswith("!important"):
        value = value[: -len("!important")].strip()
    if not value:
        return ColorSpec(source=raw)

    match = _HEX_RE.match(value)
    if match:
        digits = match.group(1)
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits[:3])
        return ColorSpec(
            red=int(digits[0:2], 16),
            green=int(digits[2:4], 16),
            blue=int(digits[4:6], 16),
            valid=True,
            source=raw,
        )

    match = _RGB_RE.match(value)
    if match:
        body = match.group(1).replace("/", " ")
        parts = [p for p in re.split(r"[,\s]+", body) if p]
        if len(parts) not in (3, 4):
            return ColorSpec(source=raw)
        channels = [_channel(p) for p in parts[:3]]
        if any(c is None for c in channels):
            return ColorSpec(source=raw)
        red, green, blue = channels
        return ColorSpec(red=red, green=green, blue=blue, valid=True, source=raw)  # type: ignore[arg-type]

    if value in NAMED_COLORS:
        red, green, blue = NAMED_COLORS[value]
        return ColorSpec(red=red, green=green, blue=blue, valid=True, source=raw)

    return ColorSpec(source=raw)


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorSpec) -> float:
    if not color.valid:
        raise ValueError(f"Cannot compute luminance of invalid colour {color.source!r}")
    r, g, b = (_linearize(c) for c in color.rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(foreground: ColorSpec, background: ColorSpec) -> float:
    """WCAG contrast ratio between two valid colours.

    Raises:
        ValueError: If either colour is invalid; callers check validity first.
    """
    first = relative_luminance(foreground)
    second = relative_luminance(background)
    lighter, darker = max(first, second), min(first, second)
    return (lighter + 0.05) / (darker + 0.05)
