"""Helper utilities: units, colors and logging setup."""

from .color_utils import NAMED_COLORS, hex_to_rgb, named_color, rgb_to_hex
from .logger import configure_logging, get_logger, set_log_level
from .units import PAGE_UNIT_FACTORS, PX_TO_PT, UnitsConverter, to_points

__all__ = [
    "NAMED_COLORS",
    "hex_to_rgb",
    "named_color",
    "rgb_to_hex",
    "configure_logging",
    "get_logger",
    "set_log_level",
    "PAGE_UNIT_FACTORS",
    "PX_TO_PT",
    "UnitsConverter",
    "to_points",
]
