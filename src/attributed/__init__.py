"""attributed -- immutable, fluent rich-text attribute sets.

Public API re-exports for convenient access::

    from attributed import AttributeSet, Color, Font, TextAlignment
"""

from ._version import __version__
from .attributes import STRIKETHROUGH_BASELINE_OFFSET, AttributeSet, merge, merge_all
from .exceptions import AttributedError, AttributeTypeError, StylesheetError
from .keys import (
    AttributeKey,
    LineBreakMode,
    TextAlignment,
    UnderlineStyle,
    WritingDirection,
)
from .paragraph import ParagraphStyle, derive, uniform_line_height
from .payloads import Color, Font, Shadow
from .stylesheet import Stylesheet, StylesheetLoader
from .values import AttributeValue, ValueKind

__all__ = [
    "__version__",
    # Core
    "AttributeSet",
    "merge",
    "merge_all",
    "STRIKETHROUGH_BASELINE_OFFSET",
    "AttributeValue",
    "ValueKind",
    # Paragraph styles
    "ParagraphStyle",
    "derive",
    "uniform_line_height",
    # Keys and constants
    "AttributeKey",
    "UnderlineStyle",
    "TextAlignment",
    "LineBreakMode",
    "WritingDirection",
    # Payloads
    "Color",
    "Font",
    "Shadow",
    # Stylesheets
    "Stylesheet",
    "StylesheetLoader",
    # Exceptions
    "AttributedError",
    "AttributeTypeError",
    "StylesheetError",
]
