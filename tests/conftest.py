"""Shared test fixtures for the attributed test suite."""

from __future__ import annotations

import pytest

from attributed import AttributeSet, Color, Font, Shadow


@pytest.fixture()
def red() -> Color:
    return Color(1.0, 0.0, 0.0)


@pytest.fixture()
def blue() -> Color:
    return Color(0.0, 0.0, 1.0)


@pytest.fixture()
def body_font() -> Font:
    return Font(name="Helvetica", size=14.0)


@pytest.fixture()
def drop_shadow(red: Color) -> Shadow:
    return Shadow(offset=(1.0, -1.0), blur_radius=2.0, color=red)


@pytest.fixture()
def sample_sets(body_font: Font, red: Color, blue: Color) -> list[AttributeSet]:
    """Three sets with overlapping keys, for algebraic properties."""
    empty = AttributeSet.empty()
    return [
        empty.font(body_font).foreground(red).line_spacing(4),
        empty.foreground(blue).kerning(1.2).link("https://example.com"),
        empty.kerning(2.0).line_spacing(8).underline_style(1),
    ]
