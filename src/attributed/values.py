"""Tagged attribute values and the closed key-to-kind table.

An :class:`AttributeValue` pairs a :class:`ValueKind` with its payload.
Values are built either through the per-kind factories or through
:meth:`AttributeValue.for_key`, which picks the factory bound to a key so
that a value can never be stored under a key expecting another kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .exceptions import AttributeTypeError
from .keys import AttributeKey, UnderlineStyle
from .paragraph import ParagraphStyle
from .payloads import Color, Font, Shadow

Payload = Union[float, str, Color, Font, Shadow, ParagraphStyle, Enum]


class ValueKind(str, Enum):
    # Each value names the AttributeValue factory for that kind.
    NUMBER = "number"
    COLOR = "color"
    FONT = "font"
    SHADOW = "shadow"
    STRING = "string"
    CONSTANT = "constant"
    PARAGRAPH_STYLE = "paragraph_style"


KEY_KINDS: dict[AttributeKey, ValueKind] = {
    AttributeKey.FONT: ValueKind.FONT,
    AttributeKey.KERN: ValueKind.NUMBER,
    AttributeKey.STRIKETHROUGH_STYLE: ValueKind.CONSTANT,
    AttributeKey.UNDERLINE_STYLE: ValueKind.CONSTANT,
    AttributeKey.STROKE_COLOR: ValueKind.COLOR,
    AttributeKey.STROKE_WIDTH: ValueKind.NUMBER,
    AttributeKey.FOREGROUND_COLOR: ValueKind.COLOR,
    AttributeKey.BACKGROUND_COLOR: ValueKind.COLOR,
    AttributeKey.PARAGRAPH_STYLE: ValueKind.PARAGRAPH_STYLE,
    AttributeKey.SHADOW: ValueKind.SHADOW,
    AttributeKey.OBLIQUENESS: ValueKind.NUMBER,
    AttributeKey.LINK: ValueKind.STRING,
    AttributeKey.BASELINE_OFFSET: ValueKind.NUMBER,
}

# Constant-valued keys also pin the enum class of their payload.
KEY_CONSTANT_TYPES: dict[AttributeKey, type[Enum]] = {
    AttributeKey.STRIKETHROUGH_STYLE: UnderlineStyle,
    AttributeKey.UNDERLINE_STYLE: UnderlineStyle,
}


@dataclass(frozen=True)
class AttributeValue:
    """The payload associated with one attribute key.

    Two values are equal when both kind and payload are equal.
    """

    kind: ValueKind
    payload: Payload

    # -- per-kind factories -------------------------------------------------

    @classmethod
    def number(cls, value: float) -> AttributeValue:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise AttributeTypeError(f"Expected a number, got {type(value).__name__}")
        return cls(ValueKind.NUMBER, float(value))

    @classmethod
    def color(cls, value: Color) -> AttributeValue:
        return cls(ValueKind.COLOR, _expect(value, Color))

    @classmethod
    def font(cls, value: Font) -> AttributeValue:
        return cls(ValueKind.FONT, _expect(value, Font))

    @classmethod
    def shadow(cls, value: Shadow) -> AttributeValue:
        return cls(ValueKind.SHADOW, _expect(value, Shadow))

    @classmethod
    def string(cls, value: str) -> AttributeValue:
        return cls(ValueKind.STRING, _expect(value, str))

    @classmethod
    def constant(cls, value: Enum) -> AttributeValue:
        if not (isinstance(value, Enum) and isinstance(value, int)):
            raise AttributeTypeError(
                f"Expected an integer enum member, got {type(value).__name__}"
            )
        return cls(ValueKind.CONSTANT, value)

    @classmethod
    def paragraph_style(cls, value: ParagraphStyle) -> AttributeValue:
        return cls(ValueKind.PARAGRAPH_STYLE, _expect(value, ParagraphStyle))

    # -- per-key construction -----------------------------------------------

    @classmethod
    def for_key(cls, key: AttributeKey, payload: Any) -> AttributeValue:
        """Build the value for *key* using the factory its kind requires.

        Raw integers given for a constant-valued key are normalized
        through the key's enum class.
        """
        kind = KEY_KINDS[AttributeKey(key)]
        if kind is ValueKind.CONSTANT:
            payload = _normalize_constant(AttributeKey(key), payload)
        return getattr(cls, kind.value)(payload)

    @staticmethod
    def check(key: AttributeKey, value: AttributeValue) -> None:
        """Raise :class:`AttributeTypeError` if *value* cannot live under *key*."""
        if not isinstance(value, AttributeValue):
            raise AttributeTypeError(
                f"Expected an AttributeValue for '{key.value}', got {type(value).__name__}"
            )
        expected = KEY_KINDS[key]
        if value.kind is not expected:
            raise AttributeTypeError(
                f"'{key.value}' holds {expected.value} values, got {value.kind.value}"
            )
        enum_cls = KEY_CONSTANT_TYPES.get(key)
        if enum_cls is not None and not isinstance(value.payload, enum_cls):
            raise AttributeTypeError(
                f"'{key.value}' holds {enum_cls.__name__} values, "
                f"got {type(value.payload).__name__}"
            )


def _expect(value: Any, expected: type) -> Any:
    if not isinstance(value, expected):
        raise AttributeTypeError(
            f"Expected {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _normalize_constant(key: AttributeKey, value: Any) -> Enum:
    enum_cls = KEY_CONSTANT_TYPES[key]
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, Enum) or isinstance(value, bool) or not isinstance(value, int):
        raise AttributeTypeError(
            f"'{key.value}' expects {enum_cls.__name__}, got {type(value).__name__}"
        )
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise AttributeTypeError(f"{value!r} is not a valid {enum_cls.__name__}") from exc
