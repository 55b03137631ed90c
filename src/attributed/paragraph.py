"""Paragraph style record and its single-field derivation helpers.

A :class:`ParagraphStyle` is never modified in place. Every change goes
through :func:`derive`, which copies the base record and replaces exactly
one field, so styles held by different attribute sets never share state.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum, IntEnum
from typing import Any

from .exceptions import AttributeTypeError
from .keys import LineBreakMode, TextAlignment, WritingDirection


@dataclass(frozen=True)
class ParagraphStyle:
    """Paragraph-level formatting stored under the ``paragraph_style`` key.

    Defaults match the platform default paragraph style. A value of
    ``0.0`` for the line height bounds and multiple means "unconstrained".
    Fields are validated on construction: enum fields accept a member or its
    raw integer value, numeric fields are stored as ``float``.
    """

    line_spacing: float = 0.0
    paragraph_spacing: float = 0.0
    paragraph_spacing_before: float = 0.0
    alignment: TextAlignment = TextAlignment.NATURAL
    first_line_head_indent: float = 0.0
    head_indent: float = 0.0
    tail_indent: float = 0.0
    line_break_mode: LineBreakMode = LineBreakMode.BY_WORD_WRAPPING
    minimum_line_height: float = 0.0
    maximum_line_height: float = 0.0
    line_height_multiple: float = 0.0
    base_writing_direction: WritingDirection = WritingDirection.NATURAL
    hyphenation_factor: float = 0.0

    def __post_init__(self) -> None:
        for name in FIELD_NAMES:
            object.__setattr__(self, name, _coerce(name, getattr(self, name)))

    @classmethod
    def default(cls) -> ParagraphStyle:
        """Return the shared default style."""
        return _DEFAULT

    def derive(self, field_name: str, value: Any) -> ParagraphStyle:
        """Return a copy of this style with *field_name* set to *value*."""
        return derive(self, field_name, value)

    def with_uniform_line_height(self, value: float) -> ParagraphStyle:
        return uniform_line_height(self, value)


FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(ParagraphStyle))

_ENUM_FIELDS: dict[str, type[IntEnum]] = {
    "alignment": TextAlignment,
    "line_break_mode": LineBreakMode,
    "base_writing_direction": WritingDirection,
}


def derive(base: ParagraphStyle, field_name: str, value: Any) -> ParagraphStyle:
    """Return a new style equal to *base* except for *field_name*.

    Enum fields accept a member or its raw integer value; numeric fields
    accept ``int`` or ``float`` and are stored as ``float``.

    Raises :class:`~attributed.exceptions.AttributeTypeError` for an
    unknown field or a value of the wrong type.
    """
    if field_name not in FIELD_NAMES:
        raise AttributeTypeError(f"ParagraphStyle has no field '{field_name}'")
    return replace(base, **{field_name: value})


def uniform_line_height(base: ParagraphStyle, value: float) -> ParagraphStyle:
    """Set both line height bounds of *base* to *value*."""
    return derive(derive(base, "maximum_line_height", value), "minimum_line_height", value)


def _coerce(field_name: str, value: Any) -> Any:
    enum_cls = _ENUM_FIELDS.get(field_name)
    if enum_cls is not None:
        if isinstance(value, bool) or not isinstance(value, int) or (
            isinstance(value, Enum) and not isinstance(value, enum_cls)
        ):
            raise AttributeTypeError(
                f"{field_name} must be a {enum_cls.__name__}, got {type(value).__name__}"
            )
        try:
            return enum_cls(value)
        except ValueError as exc:
            raise AttributeTypeError(
                f"{value!r} is not a valid {enum_cls.__name__}"
            ) from exc

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AttributeTypeError(
            f"{field_name} must be a number, got {type(value).__name__}"
        )
    return float(value)


_DEFAULT = ParagraphStyle()
