from __future__ import annotations
from typing import Any, Protocol, Sequence, Tuple, Union, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from ._coordinates import BoundingBox

x = float
y = float
XY    = Tuple[x, y]
Point = Union[XY, Sequence[float], Any]  # (x, y) pair or anything exposing .x / .y


@runtime_checkable
class BoundedEntity(Protocol):
    """Protocol for objects that can produce their own bounding box."""
    def bounding_box(self) -> "BoundingBox": ...


def as_xy(point: Point) -> XY:
    """Coerce a point-like value to a ``(x, y)`` tuple of floats."""
    try:
        if hasattr(point, "x") and hasattr(point, "y"):
            return float(point.x), float(point.y)
        px, py = point
        return float(px), float(py)
    except (TypeError, ValueError):
        raise TypeError(f"Expected a 2D point (an (x, y) pair or an object with numeric .x/.y), got {point!r}") from None
