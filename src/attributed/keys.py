"""Attribute keys and the enumerated constants used as attribute payloads.

Integer values follow the raw values the text engines on Apple platforms
use, so a consumer can forward them unchanged.
"""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag


class AttributeKey(str, Enum):
    """Identifier of one visual text-formatting dimension."""

    FONT = "font"
    KERN = "kern"
    STRIKETHROUGH_STYLE = "strikethrough_style"
    UNDERLINE_STYLE = "underline_style"
    STROKE_COLOR = "stroke_color"
    STROKE_WIDTH = "stroke_width"
    FOREGROUND_COLOR = "foreground_color"
    BACKGROUND_COLOR = "background_color"
    PARAGRAPH_STYLE = "paragraph_style"
    SHADOW = "shadow"
    OBLIQUENESS = "obliqueness"
    LINK = "link"
    BASELINE_OFFSET = "baseline_offset"


class UnderlineStyle(IntFlag):
    """Line style shared by underline and strikethrough.

    Pattern and ``BY_WORD`` flags combine with a base style, e.g.
    ``UnderlineStyle.SINGLE | UnderlineStyle.BY_WORD``.
    """

    NONE = 0x00
    SINGLE = 0x01
    THICK = 0x02
    DOUBLE = 0x09
    PATTERN_DOT = 0x100
    PATTERN_DASH = 0x200
    PATTERN_DASH_DOT = 0x300
    PATTERN_DASH_DOT_DOT = 0x400
    BY_WORD = 0x8000


class TextAlignment(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2
    JUSTIFIED = 3
    NATURAL = 4


class LineBreakMode(IntEnum):
    BY_WORD_WRAPPING = 0
    BY_CHAR_WRAPPING = 1
    BY_CLIPPING = 2
    BY_TRUNCATING_HEAD = 3
    BY_TRUNCATING_TAIL = 4
    BY_TRUNCATING_MIDDLE = 5


class WritingDirection(IntEnum):
    NATURAL = -1
    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1
