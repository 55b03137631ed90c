"""Immutable payload handles for colors, fonts and shadows.

The attribute core stores these as-is and never reads their fields; they
exist so callers and stylesheets have a hashable value to hand over.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")


@dataclass(frozen=True)
class Color:
    """An RGBA color with components in ``0.0 .. 1.0``."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#RRGGBB`` or ``#RRGGBBAA`` (leading ``#`` optional).

        Raises :class:`ValueError` for anything else.
        """
        match = _HEX_RE.match(value.strip())
        if match is None:
            raise ValueError(f"Invalid hex color: {value!r}")
        rgb, alpha = match.groups()
        channels = [int(rgb[i:i + 2], 16) / 255.0 for i in (0, 2, 4)]
        return cls(
            red=channels[0],
            green=channels[1],
            blue=channels[2],
            alpha=int(alpha, 16) / 255.0 if alpha else 1.0,
        )


@dataclass(frozen=True)
class Font:
    """A font reference by PostScript or family name and point size."""

    name: str
    size: float


@dataclass(frozen=True)
class Shadow:
    """A text shadow: offset in points, blur radius and optional color."""

    offset: tuple[float, float] = (0.0, -3.0)
    blur_radius: float = 0.0
    color: Color | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "offset", tuple(float(v) for v in self.offset))
