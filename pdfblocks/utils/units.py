"""
Units converter for page and style lengths.

Points are the canonical unit: every length that reaches the layout
engine or the renderer is expressed in points (1 inch = 72 pt).
"""

from typing import Dict, Optional
import logging

logger = logging.getLogger(__name__)

POINTS_PER_INCH = 72.0
PX_TO_PT = 0.75  # 1 pixel = 0.75 points (at 96 DPI)

# Page unit table; anything not listed is treated as points already.
PAGE_UNIT_FACTORS: Dict[str, float] = {
    "pt": 1.0,
    "in": POINTS_PER_INCH,
    "mm": POINTS_PER_INCH / 25.4,
    "cm": POINTS_PER_INCH / 2.54,
}


class UnitsConverter:
    """
    Converts page dimensions between declared units and points.
    """

    def __init__(self, factors: Optional[Dict[str, float]] = None):
        """
        Initialize units converter.

        Args:
            factors: Optional unit -> points table, defaults to PAGE_UNIT_FACTORS
        """
        self.conversion_factors = dict(factors or PAGE_UNIT_FACTORS)

    def factor_for(self, unit: Optional[str]) -> float:
        """Return the points-per-unit factor; unknown units map to 1.0."""
        if not unit:
            return 1.0
        factor = self.conversion_factors.get(str(unit).strip().lower())
        if factor is None:
            logger.debug(f"Unknown unit {unit!r}, treating value as points")
            return 1.0
        return factor

    def to_points(self, value: float, unit: Optional[str] = "pt") -> float:
        """
        Convert a value in ``unit`` to points.

        Args:
            value: Numeric value to convert
            unit: Source unit (pt, in, mm, cm)

        Returns:
            Value in points
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("Value must be a number")
        return float(value) * self.factor_for(unit)

    def px_to_pt(self, px_value: float) -> float:
        """Convert pixels to points."""
        return px_value * PX_TO_PT

    def pt_to_px(self, pt_value: float) -> float:
        """Convert points to pixels."""
        return pt_value / PX_TO_PT

    def get_conversion_factors(self) -> Dict[str, float]:
        """Get all conversion factors."""
        return self.conversion_factors.copy()


_DEFAULT_CONVERTER = UnitsConverter()


def to_points(value: float, unit: Optional[str] = "pt") -> float:
    """Convert ``value`` in ``unit`` to points using the default unit table."""
    return _DEFAULT_CONVERTER.to_points(value, unit)
