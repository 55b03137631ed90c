"""Immutable attribute sets and their right-biased merge.

Every fluent setter on :class:`AttributeSet` builds a one-entry patch and
merges it on top of the receiver, returning a new set. Paragraph setters
derive from the paragraph style already stored in the receiver, so a
chain such as ``AttributeSet.empty().line_spacing(4).alignment(CENTER)``
keeps both fields.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from .keys import (
    AttributeKey,
    LineBreakMode,
    TextAlignment,
    UnderlineStyle,
    WritingDirection,
)
from .paragraph import ParagraphStyle, derive, uniform_line_height
from .payloads import Color, Font, Shadow
from .values import AttributeValue

# Paired with every strikethrough style so the line clears the glyphs.
STRIKETHROUGH_BASELINE_OFFSET = 1.5


class AttributeSet(Mapping[AttributeKey, AttributeValue]):
    """Immutable mapping from :class:`AttributeKey` to :class:`AttributeValue`.

    Absent keys mean "not set". No operation mutates an instance; every
    setter and :meth:`merge` return a new set.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[AttributeKey, AttributeValue] | None = None) -> None:
        checked: dict[AttributeKey, AttributeValue] = {}
        for key, value in (entries or {}).items():
            key = AttributeKey(key)
            AttributeValue.check(key, value)
            checked[key] = value
        self._entries = checked

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> AttributeSet:
        return cls()

    @classmethod
    def build(cls, block: Callable[[AttributeSet], AttributeSet]) -> AttributeSet:
        """Run *block* once on a fresh empty set and return its result.

        ::

            body = AttributeSet.build(lambda a: a.font(font).line_spacing(4))
        """
        return block(cls.empty())

    @classmethod
    def _trusted(cls, entries: dict[AttributeKey, AttributeValue]) -> AttributeSet:
        instance = cls.__new__(cls)
        instance._entries = entries
        return instance

    @classmethod
    def _patch(cls, payloads: Mapping[AttributeKey, Any]) -> AttributeSet:
        return cls._trusted(
            {key: AttributeValue.for_key(key, payload) for key, payload in payloads.items()}
        )

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def merge(self, other: AttributeSet) -> AttributeSet:
        """Return the union of both sets; *other* wins on shared keys."""
        return merge(self, other)

    # ------------------------------------------------------------------
    # Mapping protocol and read access
    # ------------------------------------------------------------------

    def __getitem__(self, key: AttributeKey) -> AttributeValue:
        return self._entries[key]

    def __iter__(self) -> Iterator[AttributeKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{key.value}={value.payload!r}" for key, value in self._entries.items())
        return f"AttributeSet({inner})"

    def get_payload(self, key: AttributeKey, default: Any = None) -> Any:
        """Return the bare payload stored under *key*, or *default*."""
        value = self._entries.get(key)
        return default if value is None else value.payload

    @property
    def current_paragraph_style(self) -> ParagraphStyle | None:
        return self.get_payload(AttributeKey.PARAGRAPH_STYLE)

    def to_dict(self) -> dict[str, Any]:
        """Return the consumer view ``{key name: payload}``."""
        return {key.value: value.payload for key, value in self._entries.items()}

    # ------------------------------------------------------------------
    # Character attributes
    # ------------------------------------------------------------------

    def font(self, font: Font) -> AttributeSet:
        return self.merge(self._patch({AttributeKey.FONT: font}))

    def kerning(self, kerning: float) -> AttributeSet:
        return self.merge(self._patch({AttributeKey.KERN: kerning}))

    def strike_through_style(self, style: UnderlineStyle) -> AttributeSet:
        """Set the strikethrough style together with a 1.5pt baseline offset."""
        return self.merge(self._patch({
            AttributeKey.STRIKETHROUGH_STYLE: style,
            AttributeKey.BASELINE_OFFSET: STRIKETHROUGH_BASELINE_OFFSET,
        }))

    def underline_style(self, style: UnderlineStyle) -> AttributeSet:
        return self.merge(self._patch({AttributeKey.UNDERLINE_STYLE: style}))

    def stroke_color(self, color: Color) -> AttributeSet:
        return self.merge(self._patch({AttributeKey.STROKE_COLOR: color}))

    def stroke_width(self, width: float) -> AttributeSet:
        return self.merge(self._patch({AttributeKey.STROKE_WIDTH: width}))

    def foreground(self, color: Color) -> AttributeSet:
        return self.merge(self._patch({AttributeKey.FOREGROUND_COLOR: color}))

    def background(self, color: Color) -> AttributeSet:
        return self.merge(self._patch({AttributeKey.BACKGROUND_COLOR: color}))

    def shadow(self, shadow: Shadow) -> AttributeSet:
        return self.merge(self._patch({AttributeKey.SHADOW: shadow}))

    def obliqueness(self, value: float) -> AttributeSet:
        return self.merge(self._patch({AttributeKey.OBLIQUENESS: value}))

    def link(self, link: str) -> AttributeSet:
        return self.merge(self._patch({AttributeKey.LINK: link}))

    def baseline_offset(self, offset: float) -> AttributeSet:
        return self.merge(self._patch({AttributeKey.BASELINE_OFFSET: offset}))

    def paragraph_style(self, style: ParagraphStyle) -> AttributeSet:
        """Replace the stored paragraph style as a whole."""
        return self.merge(self._patch({AttributeKey.PARAGRAPH_STYLE: style}))

    # ------------------------------------------------------------------
    # Paragraph attributes
    # ------------------------------------------------------------------

    def _with_paragraph(self, update: Callable[[ParagraphStyle], ParagraphStyle]) -> AttributeSet:
        # Derive from the stored style; the default only seeds the first update.
        base = self.current_paragraph_style
        if base is None:
            base = ParagraphStyle.default()
        return self.paragraph_style(update(base))

    def line_spacing(self, value: float) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "line_spacing", value))

    def paragraph_spacing(self, value: float) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "paragraph_spacing", value))

    def paragraph_spacing_before(self, value: float) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "paragraph_spacing_before", value))

    def alignment(self, alignment: TextAlignment) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "alignment", alignment))

    def first_line_head_indent(self, value: float) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "first_line_head_indent", value))

    def head_indent(self, value: float) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "head_indent", value))

    def tail_indent(self, value: float) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "tail_indent", value))

    def line_break_mode(self, mode: LineBreakMode) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "line_break_mode", mode))

    def minimum_line_height(self, value: float) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "minimum_line_height", value))

    def maximum_line_height(self, value: float) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "maximum_line_height", value))

    def uniform_line_height(self, value: float) -> AttributeSet:
        """Set minimum and maximum line height to the same value."""
        return self._with_paragraph(lambda s: uniform_line_height(s, value))

    def base_writing_direction(self, direction: WritingDirection) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "base_writing_direction", direction))

    def line_height_multiple(self, value: float) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "line_height_multiple", value))

    def hyphenation_factor(self, value: float) -> AttributeSet:
        return self._with_paragraph(lambda s: derive(s, "hyphenation_factor", value))


def merge(a: AttributeSet, b: AttributeSet) -> AttributeSet:
    """Right-biased merge: keys of both sets, with *b*'s value on collision.

    Associative with :meth:`AttributeSet.empty` as identity on both
    sides, but not commutative.
    """
    return AttributeSet._trusted({**a._entries, **b._entries})


def merge_all(*sets: AttributeSet) -> AttributeSet:
    """Merge *sets* left to right; later sets win."""
    result = AttributeSet.empty()
    for attribute_set in sets:
        result = merge(result, attribute_set)
    return result
