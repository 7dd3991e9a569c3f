"""Page geometry: sizes, margins and resolution of a PageConfig into points."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..models.tree import PageConfig
from ..styles.style_resolver import LEGACY_PAGE_SIZES, parse_spacing, resolve_page_size
from ..utils.units import to_points

logger = logging.getLogger(__name__)

A4_SIZE: Tuple[float, float] = LEGACY_PAGE_SIZES["A4"]


@dataclass(frozen=True, slots=True)
class Size:
    width: float
    height: float

    @classmethod
    def from_tuple(cls, value: Iterable[float]) -> "Size":
        width, height = value
        return cls(float(width), float(height))


@dataclass(frozen=True, slots=True)
class Margins:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Resolved page in points; the content area is the page minus margins."""

    size: Size
    margins: Margins = Margins()

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def content_width(self) -> float:
        return self.size.width - self.margins.left - self.margins.right

    @property
    def content_height(self) -> float:
        return self.size.height - self.margins.top - self.margins.bottom


def _apply_orientation(width: float, height: float, orientation: Optional[str]) -> Tuple[float, float]:
    if orientation == "landscape" and width < height:
        return height, width
    if orientation == "portrait" and width > height:
        return height, width
    return width, height


def resolve_page_geometry(
    page: Optional[PageConfig],
    default_size: Tuple[float, float] = A4_SIZE,
) -> PageGeometry:
    """
    Resolve a page configuration into points.

    Absolute pages convert ``width``/``height`` through the unit table
    (in, mm, cm, pt; unknown units are taken as points). Legacy pages
    use the named-size table. ``margins`` shorthand, when present,
    shrinks the content area.

    Args:
        page: First page of the tree, or None
        default_size: Page size used when the tree declares no page

    Returns:
        PageGeometry in points
    """
    if page is None:
        return PageGeometry(size=Size.from_tuple(default_size))

    if page.is_legacy:
        width, height = resolve_page_size(page.size)
    else:
        width = to_points(page.width, page.unit)
        height = to_points(page.height, page.unit)

    width, height = _apply_orientation(width, height, page.orientation)
    top, right, bottom, left = parse_spacing(page.margins)
    geometry = PageGeometry(size=Size(width, height), margins=Margins(top, right, bottom, left))
    logger.debug(f"Resolved page geometry: {width:.2f}x{height:.2f}pt, margins={geometry.margins}")
    return geometry
