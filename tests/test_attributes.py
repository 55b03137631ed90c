"""Tests for attributed.attributes."""

from __future__ import annotations

import pytest

from attributed.attributes import (
    STRIKETHROUGH_BASELINE_OFFSET,
    AttributeSet,
    merge,
    merge_all,
)
from attributed.exceptions import AttributeTypeError
from attributed.keys import (
    AttributeKey,
    LineBreakMode,
    TextAlignment,
    UnderlineStyle,
    WritingDirection,
)
from attributed.paragraph import ParagraphStyle
from attributed.payloads import Color, Font, Shadow
from attributed.values import AttributeValue


class TestConstruction:
    def test_empty(self) -> None:
        assert len(AttributeSet.empty()) == 0
        assert AttributeSet.empty().to_dict() == {}

    def test_build_runs_block_once_on_empty(self, body_font: Font) -> None:
        calls: list[AttributeSet] = []

        def block(a: AttributeSet) -> AttributeSet:
            calls.append(a)
            return a.font(body_font)

        result = AttributeSet.build(block)
        assert len(calls) == 1
        assert len(calls[0]) == 0
        assert result.get_payload(AttributeKey.FONT) == body_font

    def test_constructor_validates_values(self) -> None:
        with pytest.raises(AttributeTypeError):
            AttributeSet({AttributeKey.LINK: AttributeValue.number(1.0)})

    def test_constructor_rejects_none(self) -> None:
        with pytest.raises(AttributeTypeError):
            AttributeSet({AttributeKey.LINK: None})  # type: ignore[dict-item]

    def test_constructor_accepts_key_names(self) -> None:
        s = AttributeSet({"link": AttributeValue.string("x")})  # type: ignore[dict-item]
        assert AttributeKey.LINK in s


class TestMerge:
    def test_right_identity(self, sample_sets: list[AttributeSet]) -> None:
        for a in sample_sets:
            assert merge(a, AttributeSet.empty()) == a

    def test_left_identity(self, sample_sets: list[AttributeSet]) -> None:
        for a in sample_sets:
            assert merge(AttributeSet.empty(), a) == a

    def test_right_bias(self, red: Color, blue: Color) -> None:
        a = AttributeSet.empty().foreground(red)
        b = AttributeSet.empty().foreground(blue)
        assert merge(a, b).get_payload(AttributeKey.FOREGROUND_COLOR) == blue
        assert merge(b, a).get_payload(AttributeKey.FOREGROUND_COLOR) == red

    def test_not_commutative(self, sample_sets: list[AttributeSet]) -> None:
        a, b, _ = sample_sets
        assert merge(a, b) != merge(b, a)

    def test_associative(self, sample_sets: list[AttributeSet]) -> None:
        a, b, c = sample_sets
        assert merge(merge(a, b), c) == merge(a, merge(b, c))

    def test_disjoint_union(self, body_font: Font, red: Color) -> None:
        a = AttributeSet.empty().font(body_font)
        b = AttributeSet.empty().background(red).obliqueness(0.2)
        merged = a.merge(b)
        assert set(merged) == set(a) | set(b)
        for key in a:
            assert merged[key] == a[key]
        for key in b:
            assert merged[key] == b[key]

    def test_operands_unchanged(self, red: Color, blue: Color) -> None:
        a = AttributeSet.empty().foreground(red)
        b = AttributeSet.empty().foreground(blue)
        merge(a, b)
        assert a.get_payload(AttributeKey.FOREGROUND_COLOR) == red
        assert len(b) == 1

    def test_merge_all(self, sample_sets: list[AttributeSet]) -> None:
        a, b, c = sample_sets
        assert merge_all(a, b, c) == a.merge(b).merge(c)
        assert merge_all() == AttributeSet.empty()


class TestCharacterSetters:
    def test_font_foreground_kerning_scenario(self, body_font: Font, red: Color) -> None:
        s = AttributeSet.empty().font(body_font).foreground(red).kerning(1.2)
        assert s.to_dict() == {"font": body_font, "foreground_color": red, "kern": 1.2}

    def test_strike_through_sets_baseline_offset(self) -> None:
        s = AttributeSet.empty().strike_through_style(UnderlineStyle.SINGLE)
        assert s.get_payload(AttributeKey.STRIKETHROUGH_STYLE) is UnderlineStyle.SINGLE
        assert s.get_payload(AttributeKey.BASELINE_OFFSET) == STRIKETHROUGH_BASELINE_OFFSET == 1.5

    def test_explicit_baseline_offset_after_strike_through_wins(self) -> None:
        s = AttributeSet.empty().strike_through_style(UnderlineStyle.DOUBLE).baseline_offset(3)
        assert s.get_payload(AttributeKey.BASELINE_OFFSET) == 3.0

    def test_underline_combined_flags(self) -> None:
        style = UnderlineStyle.SINGLE | UnderlineStyle.BY_WORD
        s = AttributeSet.empty().underline_style(style)
        assert s.get_payload(AttributeKey.UNDERLINE_STYLE) == 0x8001

    def test_remaining_setters(self, red: Color, drop_shadow: Shadow) -> None:
        s = (
            AttributeSet.empty()
            .stroke_color(red)
            .stroke_width(-2)
            .background(red)
            .shadow(drop_shadow)
            .obliqueness(0.25)
            .link("https://example.com")
        )
        assert s.to_dict() == {
            "stroke_color": red,
            "stroke_width": -2.0,
            "background_color": red,
            "shadow": drop_shadow,
            "obliqueness": 0.25,
            "link": "https://example.com",
        }

    def test_wrong_payload_type(self) -> None:
        with pytest.raises(AttributeTypeError):
            AttributeSet.empty().font("Helvetica")  # type: ignore[arg-type]

    def test_setter_returns_new_instance(self, red: Color) -> None:
        base = AttributeSet.empty()
        changed = base.foreground(red)
        assert changed is not base
        assert len(base) == 0


class TestParagraphSetters:
    def test_accumulates_fields(self) -> None:
        s = AttributeSet.empty().line_spacing(4).alignment(TextAlignment.CENTER)
        style = s.current_paragraph_style
        assert style is not None
        assert style.line_spacing == 4.0
        assert style.alignment is TextAlignment.CENTER

    def test_all_paragraph_setters(self) -> None:
        s = (
            AttributeSet.empty()
            .line_spacing(1)
            .paragraph_spacing(2)
            .paragraph_spacing_before(3)
            .alignment(TextAlignment.JUSTIFIED)
            .first_line_head_indent(4)
            .head_indent(5)
            .tail_indent(-6)
            .line_break_mode(LineBreakMode.BY_TRUNCATING_MIDDLE)
            .minimum_line_height(7)
            .maximum_line_height(8)
            .base_writing_direction(WritingDirection.RIGHT_TO_LEFT)
            .line_height_multiple(1.5)
            .hyphenation_factor(0.9)
        )
        assert s.current_paragraph_style == ParagraphStyle(
            line_spacing=1.0,
            paragraph_spacing=2.0,
            paragraph_spacing_before=3.0,
            alignment=TextAlignment.JUSTIFIED,
            first_line_head_indent=4.0,
            head_indent=5.0,
            tail_indent=-6.0,
            line_break_mode=LineBreakMode.BY_TRUNCATING_MIDDLE,
            minimum_line_height=7.0,
            maximum_line_height=8.0,
            line_height_multiple=1.5,
            base_writing_direction=WritingDirection.RIGHT_TO_LEFT,
            hyphenation_factor=0.9,
        )
        assert len(s) == 1

    def test_uniform_line_height(self) -> None:
        style = AttributeSet.empty().line_spacing(2).uniform_line_height(20).current_paragraph_style
        assert style is not None
        assert style.minimum_line_height == 20.0
        assert style.maximum_line_height == 20.0
        assert style.line_spacing == 2.0

    def test_no_style_until_paragraph_setter(self, red: Color) -> None:
        assert AttributeSet.empty().foreground(red).current_paragraph_style is None

    def test_default_style_untouched(self) -> None:
        AttributeSet.empty().line_spacing(12)
        assert ParagraphStyle.default().line_spacing == 0.0

    def test_shared_ancestor_not_aliased(self) -> None:
        base = AttributeSet.empty().head_indent(10)
        left = base.alignment(TextAlignment.LEFT)
        right = base.alignment(TextAlignment.RIGHT).head_indent(20)

        assert left.current_paragraph_style.alignment is TextAlignment.LEFT
        assert left.current_paragraph_style.head_indent == 10.0
        assert right.current_paragraph_style.alignment is TextAlignment.RIGHT
        assert right.current_paragraph_style.head_indent == 20.0
        assert base.current_paragraph_style.alignment is TextAlignment.NATURAL

    def test_malformed_paragraph_style_never_stored(self) -> None:
        with pytest.raises(AttributeTypeError):
            AttributeSet.empty().paragraph_style(
                ParagraphStyle(alignment="center", line_spacing="wide")  # type: ignore[arg-type]
            )

    def test_paragraph_style_replaces_whole_style(self) -> None:
        replacement = ParagraphStyle(tail_indent=-4.0)
        s = AttributeSet.empty().line_spacing(4).paragraph_style(replacement)
        assert s.current_paragraph_style == replacement

    def test_merged_paragraph_style_is_replaced_not_combined(self) -> None:
        a = AttributeSet.empty().line_spacing(4)
        b = AttributeSet.empty().alignment(TextAlignment.CENTER)
        style = a.merge(b).current_paragraph_style
        assert style is not None
        assert style.alignment is TextAlignment.CENTER
        assert style.line_spacing == 0.0


class TestMappingProtocol:
    def test_getitem_and_contains(self, red: Color) -> None:
        s = AttributeSet.empty().foreground(red)
        assert AttributeKey.FOREGROUND_COLOR in s
        assert s[AttributeKey.FOREGROUND_COLOR] == AttributeValue.color(red)
        assert AttributeKey.FONT not in s
        assert s.get(AttributeKey.FONT) is None

    def test_hashable_and_equal(self, red: Color) -> None:
        a = AttributeSet.empty().foreground(red).line_spacing(2)
        b = AttributeSet.build(lambda x: x.line_spacing(2).foreground(red))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_get_payload_default(self) -> None:
        assert AttributeSet.empty().get_payload(AttributeKey.LINK, "none") == "none"

    def test_repr(self) -> None:
        assert repr(AttributeSet.empty().link("x")) == "AttributeSet(link='x')"
