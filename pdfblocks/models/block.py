"""
Base block model.

A block is an immutable, absolutely positioned content unit. Geometry
lives in :class:`BlockLayout` (points, top-left origin, Y grows
downward); visual attributes live in the free-form ``style`` mapping.
Every "mutation" produces a new value via :func:`dataclasses.replace`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar

from ..exceptions import ParsingError, UnsupportedBlockTypeError

LAYOUT_FIELDS = ("x", "y", "width", "height")


@dataclass(frozen=True, slots=True)
class BlockLayout:
    """Authoritative block box in points (top-left origin)."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_dict(cls, data: Any) -> "BlockLayout":
        """Build a normalized layout from a JSON mapping; rejects non-numeric fields."""
        if not isinstance(data, Mapping):
            raise ParsingError("Block layout must be an object", value=data)

        values = {}
        for name in LAYOUT_FIELDS:
            if name not in data:
                raise ParsingError("Block layout is missing a field", name, value=data)
            raw = data[name]
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise ParsingError(f"Block layout field '{name}' must be a number", repr(raw), value=raw)
            if not math.isfinite(raw):
                raise ParsingError(f"Block layout field '{name}' must be finite", repr(raw), value=raw)
            values[name] = float(raw)
        return normalize_block_layout(cls(**values))

    def to_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in LAYOUT_FIELDS}


def _round2(value: float) -> float:
    rounded = round(float(value), 2)
    # Avoid "-0.0" leaking into serialized output.
    return rounded + 0.0


def normalize_block_layout(layout: BlockLayout) -> BlockLayout:
    """Round every layout field to 2 decimals; applying it twice is a no-op."""
    return BlockLayout(
        x=_round2(layout.x),
        y=_round2(layout.y),
        width=_round2(layout.width),
        height=_round2(layout.height),
    )


def coerce_layout(layout: Any) -> BlockLayout:
    """Accept a BlockLayout or a mapping and return a normalized BlockLayout."""
    if isinstance(layout, BlockLayout):
        return normalize_block_layout(layout)
    return BlockLayout.from_dict(layout)


@dataclass(frozen=True, kw_only=True)
class Block:
    """Positioned content node; ``type`` is the variant discriminator."""

    type: str
    layout: BlockLayout
    id: Optional[str] = None
    style: Dict[str, Any] = field(default_factory=dict)

    def layout_hint(self) -> BlockLayout:
        """Geometry the layout engine places this block at."""
        return self.layout

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type, "layout": self.layout.to_dict()}
        if self.id:
            data["id"] = self.id
        if self.style:
            data["style"] = dict(self.style)
        return data


# Variant registry: discriminator -> Block subclass providing from_dict().
BLOCK_TYPES: Dict[str, Type[Block]] = {}

B = TypeVar("B", bound=Type[Block])


def register_block_type(type_name: str) -> Callable[[B], B]:
    """Class decorator registering a block variant for (de)serialization."""

    def decorator(cls: B) -> B:
        BLOCK_TYPES[type_name] = cls
        return cls

    return decorator


def block_class_for(type_name: Any) -> Type[Block]:
    cls = BLOCK_TYPES.get(type_name) if isinstance(type_name, str) else None
    if cls is None:
        raise UnsupportedBlockTypeError(type_name)
    return cls


def read_common_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate the fields shared by every variant (layout, id, style)."""
    if "layout" not in data:
        raise ParsingError("Block is missing 'layout'", value=data)
    layout = BlockLayout.from_dict(data["layout"])

    block_id = data.get("id")
    if block_id is not None and not isinstance(block_id, str):
        raise ParsingError("Block 'id' must be a string", repr(block_id), value=block_id)

    style = data.get("style")
    if style is None:
        style = {}
    elif not isinstance(style, Mapping):
        raise ParsingError("Block 'style' must be an object", repr(style), value=style)

    return {"layout": layout, "id": block_id, "style": dict(style)}
