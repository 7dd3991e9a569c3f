"""
PDFTree model - immutable root structure for a document.

Plain values without behaviour; the helpers in :mod:`pdfblocks.tree`
produce new trees that share every untouched sub-structure.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..exceptions import ParsingError
from .block import Block

LegacySize = Union[str, Tuple[float, float]]

ORIENTATIONS = ("portrait", "landscape")
METADATA_FIELDS = ("title", "author", "subject", "keywords", "creator")


def _read_number(data: Mapping[str, Any], name: str) -> float:
    raw = data.get(name)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)) or not math.isfinite(raw):
        raise ParsingError(f"Page '{name}' must be a finite number", repr(raw), value=raw)
    return float(raw)


@dataclass(frozen=True, slots=True)
class PageConfig:
    """
    Page configuration.

    Absolute form: ``width``/``height`` in ``unit`` (points by default).
    Legacy form: ``size`` ("A4", "Letter", "Legal" or a [w, h] pair in
    points) plus CSS-like ``margins`` shorthand.
    """

    width: Optional[float] = None
    height: Optional[float] = None
    unit: str = "pt"
    orientation: Optional[str] = None
    size: Optional[LegacySize] = None
    margins: Optional[str] = None

    @property
    def is_legacy(self) -> bool:
        return self.width is None or self.height is None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if not self.is_legacy:
            data.update({"width": self.width, "height": self.height, "unit": self.unit})
        if self.size is not None:
            data["size"] = list(self.size) if isinstance(self.size, tuple) else self.size
        if self.margins is not None:
            data["margins"] = self.margins
        if self.orientation is not None:
            data["orientation"] = self.orientation
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "PageConfig":
        if not isinstance(data, Mapping):
            raise ParsingError("Page configuration must be an object", value=data)

        orientation = data.get("orientation")
        if orientation is not None and orientation not in ORIENTATIONS:
            raise ParsingError("Unknown page orientation", repr(orientation), value=orientation)

        margins = data.get("margins")
        if margins is not None and not isinstance(margins, str):
            raise ParsingError("Page 'margins' must be a string", repr(margins), value=margins)

        if "width" in data or "height" in data:
            unit = data.get("unit") or "pt"
            if not isinstance(unit, str):
                raise ParsingError("Page 'unit' must be a string", repr(unit), value=unit)
            return cls(
                width=_read_number(data, "width"),
                height=_read_number(data, "height"),
                unit=unit,
                orientation=orientation,
                margins=margins,
            )

        size = data.get("size")
        if isinstance(size, str):
            legacy_size: LegacySize = size
        elif isinstance(size, (list, tuple)) and len(size) == 2:
            pair = {"width": size[0], "height": size[1]}
            legacy_size = (_read_number(pair, "width"), _read_number(pair, "height"))
        else:
            raise ParsingError("Page needs width/height or a legacy size", repr(size), value=data)
        return cls(size=legacy_size, margins=margins, orientation=orientation)


@dataclass(frozen=True, slots=True)
class DocumentMetadata:
    """Document information fields; absent fields are None."""

    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    keywords: Optional[Tuple[str, ...]] = None
    creator: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for name in METADATA_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = list(value) if name == "keywords" else value
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "DocumentMetadata":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ParsingError("Metadata must be an object", value=data)

        values: Dict[str, Any] = {}
        for name in ("title", "author", "subject", "creator"):
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise ParsingError(f"Metadata '{name}' must be a string", repr(value), value=value)
            values[name] = value

        keywords = data.get("keywords")
        if isinstance(keywords, str):
            keywords = [keywords]
        if keywords is not None:
            if not isinstance(keywords, (list, tuple)) or not all(isinstance(k, str) for k in keywords):
                raise ParsingError("Metadata 'keywords' must be a list of strings", repr(keywords), value=keywords)
            keywords = tuple(keywords)
        values["keywords"] = keywords
        return cls(**values)


DEFAULT_PAGE = PageConfig(size="A4", margins="36pt")


@dataclass(frozen=True, slots=True)
class PDFTree:
    """Ordered blocks plus page and metadata configuration."""

    pages: Tuple[PageConfig, ...] = ()
    elements: Tuple[Block, ...] = ()
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
