"""Stylesheet loader: named attribute sets declared in YAML or JSON.

A stylesheet maps style names to setter calls::

    styles:
      body:
        font: {name: Helvetica, size: 14}
        foreground: "#333333"
        line_spacing: 4
      title:
        extends: body
        alignment: center

Entries are applied through the :class:`~attributed.attributes.AttributeSet`
setters in declaration order of :class:`StyleEntry`, so paragraph fields
accumulate. A style with ``extends`` applies its setters on top of its
resolved parent, so it also inherits the parent's paragraph fields.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .attributes import AttributeSet
from .exceptions import StylesheetError
from .keys import LineBreakMode, TextAlignment, UnderlineStyle, WritingDirection
from .payloads import Color, Font, Shadow

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Document schema
# ---------------------------------------------------------------------------


class FontSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    size: float


class ShadowSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    offset: tuple[float, float] = (0.0, -3.0)
    blur_radius: float = 0.0
    color: str | None = None


class StyleEntry(BaseModel):
    """One named style. Field names are the setter names."""

    model_config = ConfigDict(extra="forbid")

    extends: str | None = None
    # Character attributes
    font: FontSpec | None = None
    kerning: float | None = None
    strike_through_style: str | list[str] | None = None
    underline_style: str | list[str] | None = None
    stroke_color: str | None = None
    stroke_width: float | None = None
    foreground: str | None = None
    background: str | None = None
    shadow: ShadowSpec | None = None
    obliqueness: float | None = None
    link: str | None = None
    baseline_offset: float | None = None
    # Paragraph attributes
    line_spacing: float | None = None
    paragraph_spacing: float | None = None
    paragraph_spacing_before: float | None = None
    alignment: str | None = None
    first_line_head_indent: float | None = None
    head_indent: float | None = None
    tail_indent: float | None = None
    line_break_mode: str | None = None
    minimum_line_height: float | None = None
    maximum_line_height: float | None = None
    uniform_line_height: float | None = None
    base_writing_direction: str | None = None
    line_height_multiple: float | None = None
    hyphenation_factor: float | None = None


class StylesheetDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    styles: dict[str, StyleEntry]


_COLOR_FIELDS = frozenset({"stroke_color", "foreground", "background"})

_ENUM_FIELDS: dict[str, type[Enum]] = {
    "strike_through_style": UnderlineStyle,
    "underline_style": UnderlineStyle,
    "alignment": TextAlignment,
    "line_break_mode": LineBreakMode,
    "base_writing_direction": WritingDirection,
}


# ---------------------------------------------------------------------------
# Stylesheet
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Stylesheet:
    """Resolved attribute sets keyed by style name."""

    styles: Mapping[str, AttributeSet]

    def __post_init__(self) -> None:
        object.__setattr__(self, "styles", MappingProxyType(dict(self.styles)))

    def __hash__(self) -> int:
        return hash(frozenset(self.styles.items()))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self.styles))

    def get(self, name: str) -> AttributeSet:
        """Return the attribute set for *name*.

        Raises :class:`KeyError` if no such style is defined.
        """
        try:
            return self.styles[name]
        except KeyError:
            raise KeyError(f"Unknown style '{name}'") from None


# ---------------------------------------------------------------------------
# StylesheetLoader
# ---------------------------------------------------------------------------


class StylesheetLoader:
    """Load stylesheet files and resolve them into attribute sets."""

    def load(self, path: str | Path) -> Stylesheet:
        """Load a stylesheet from a ``.yaml``, ``.yml`` or ``.json`` file.

        Raises :class:`~attributed.exceptions.StylesheetError` if the file
        cannot be read, parsed or resolved.
        """
        p = Path(path)
        suffix = p.suffix.lower()
        if suffix in (".yaml", ".yml"):
            fmt = "yaml"
        elif suffix == ".json":
            fmt = "json"
        else:
            raise StylesheetError(f"Unsupported stylesheet format: '{p.suffix}'")

        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StylesheetError(f"Cannot read stylesheet file: {exc}") from exc

        logger.debug("Loading %s stylesheet from %s", fmt, p)
        return self.load_text(text, fmt=fmt)

    def load_text(self, text: str, fmt: str = "yaml") -> Stylesheet:
        """Parse *text* as YAML or JSON and resolve it."""
        if fmt == "yaml":
            try:
                data = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise StylesheetError(f"Invalid YAML in stylesheet: {exc}") from exc
        elif fmt == "json":
            try:
                data = json.loads(text)
            except json.JSONDecodeError as exc:
                raise StylesheetError(f"Invalid JSON in stylesheet: {exc}") from exc
        else:
            raise StylesheetError(f"Unsupported stylesheet format: '{fmt}'")
        return self.load_data(data)

    def load_data(self, data: Any) -> Stylesheet:
        """Validate a parsed stylesheet mapping and resolve every style."""
        if not isinstance(data, dict):
            raise StylesheetError("Stylesheet must be a mapping with a 'styles' key")
        try:
            document = StylesheetDocument.model_validate(data)
        except ValidationError as exc:
            raise StylesheetError(f"Invalid stylesheet: {exc}") from exc

        resolved: dict[str, AttributeSet] = {}
        for name in document.styles:
            self._resolve(name, document.styles, resolved, ())

        logger.debug("Resolved %d styles", len(resolved))
        return Stylesheet(styles=resolved)

    def _resolve(
        self,
        name: str,
        entries: Mapping[str, StyleEntry],
        resolved: dict[str, AttributeSet],
        chain: tuple[str, ...],
    ) -> AttributeSet:
        if name in resolved:
            return resolved[name]
        if name in chain:
            cycle = " -> ".join((*chain, name))
            raise StylesheetError(f"Inheritance cycle in stylesheet: {cycle}")

        entry = entries[name]
        parent = AttributeSet.empty()
        if entry.extends is not None:
            if entry.extends not in entries:
                raise StylesheetError(
                    f"Style '{name}' extends unknown style '{entry.extends}'"
                )
            parent = self._resolve(entry.extends, entries, resolved, (*chain, name))

        # Applying on top of the parent keeps its paragraph fields as the base.
        resolved[name] = self._apply(name, entry, parent)
        return resolved[name]

    @staticmethod
    def _apply(name: str, entry: StyleEntry, base: AttributeSet) -> AttributeSet:
        attributes = base
        for field_name in StyleEntry.model_fields:
            raw = getattr(entry, field_name)
            if field_name == "extends" or raw is None:
                continue
            try:
                payload = _convert(field_name, raw)
            except ValueError as exc:
                raise StylesheetError(f"Style '{name}': {exc}") from exc
            attributes = getattr(attributes, field_name)(payload)
        return attributes


def _convert(field_name: str, raw: Any) -> Any:
    if isinstance(raw, FontSpec):
        return Font(name=raw.name, size=raw.size)
    if isinstance(raw, ShadowSpec):
        return Shadow(
            offset=raw.offset,
            blur_radius=raw.blur_radius,
            color=Color.from_hex(raw.color) if raw.color is not None else None,
        )
    if field_name in _COLOR_FIELDS:
        return Color.from_hex(raw)

    enum_cls = _ENUM_FIELDS.get(field_name)
    if enum_cls is not None:
        names = raw if isinstance(raw, list) else [raw]
        if not names:
            raise ValueError(f"{field_name} needs at least one value")
        members = [_enum_member(enum_cls, field_name, n) for n in names]
        value = members[0]
        for member in members[1:]:
            value |= member
        return value
    return raw


def _enum_member(enum_cls: type[Enum], field_name: str, name: str) -> Enum:
    try:
        return enum_cls[name.strip().upper()]
    except KeyError:
        valid = ", ".join(m.lower() for m in enum_cls.__members__)
        raise ValueError(
            f"'{name}' is not a valid {field_name} (expected one of: {valid})"
        ) from None
