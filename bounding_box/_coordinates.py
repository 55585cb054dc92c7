"""
Axis-aligned 2D bounding box (AABB) value type.

Every public helper builds on a *single* set of primitives:
    ├─ width(), height(), area(), center()
    ├─ contains_point(), contains(), intersects()
    ├─ union(), intersection()
    └─ translate(), scale()
Tolerance-aware predicates (``approx_*``) mirror the exact ones, with every edge
comparison routed through the shared helpers in ``_tolerance``.
"""

from __future__ import annotations
import math
import logging
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from ._exceptions import EmptyInput, InvalidBounds, NoIntersection
from ._tolerance import approx_eq, approx_ge, approx_le, resolve_tolerances
from ._types import BoundedEntity, Point, XY, as_xy

__all__ = ["BoundingBox"]

logger = logging.getLogger(__name__)

_FIELDS = ("xmin", "xmax", "ymin", "ymax")


class BoundingBox(BaseModel):
    """
    A rectilinear, 2-dimensional bounding box.

    Described by four finite floats (the "extremas") with ``xmin <= xmax`` and
    ``ymin <= ymax``. Zero width and/or height (a segment or a point) is fine;
    an inverted or non-finite box is rejected with ``InvalidBounds``. Instances
    are frozen, hashable and compare field by field.

    Examples:
        >>> BoundingBox(-1.0, 1.0, 0.0, 2.0).union(BoundingBox(5.0, 6.0, 0.0, 1.0))
        BoundingBox(xmin=-1.0, xmax=6.0, ymin=0.0, ymax=2.0)
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    xmin: float
    xmax: float
    ymin: float
    ymax: float

    def __init__(self, *args: float, **data: float):
        if len(args) > len(_FIELDS):
            raise TypeError(f"BoundingBox takes at most {len(_FIELDS)} positional bounds, got {len(args)}")
        for name, value in zip(_FIELDS, args):
            if name in data:
                raise TypeError(f"BoundingBox got multiple values for '{name}'")
            data[name] = value
        super().__init__(**data)

    @model_validator(mode="after")
    def check_bounds(self):
        """Reject non-finite and inverted extremas (also runs on deserialization)."""
        bounds = (self.xmin, self.xmax, self.ymin, self.ymax)
        if not all(math.isfinite(b) for b in bounds):
            logger.debug("Rejecting non-finite bounds %r", bounds)
            raise InvalidBounds(*bounds, reason="all bounds must be finite")
        if self.xmin > self.xmax or self.ymin > self.ymax:
            logger.debug("Rejecting inverted bounds %r", bounds)
            raise InvalidBounds(*bounds)
        return self

    # -------------------------------------------------------------------------
    # ░░  CONSTRUCTION  ░░
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, xmin: float, xmax: float, ymin: float, ymax: float) -> "BoundingBox":
        """Same as calling the class; raises ``InvalidBounds`` on violation."""
        return cls(xmin, xmax, ymin, ymax)

    @classmethod
    def try_new(cls, xmin: float, xmax: float, ymin: float, ymax: float) -> Optional["BoundingBox"]:
        """Like :meth:`new`, but returns *None* instead of raising ``InvalidBounds``."""
        try:
            return cls(xmin, xmax, ymin, ymax)
        except InvalidBounds:
            return None

    @classmethod
    def from_point(cls, point: Point) -> "BoundingBox":
        """Degenerate box covering exactly one point."""
        px, py = _finite_xy(point)
        return cls(px, px, py, py)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox":
        """
        Smallest box containing every point of *points*.

        The iterable is consumed exactly once while keeping a running
        min/max per axis, so generators and other one-shot streams work and
        nothing is materialized.

        Raises:
            EmptyInput: *points* yields nothing.
            InvalidBounds: a point has a NaN or infinite coordinate.
        """
        it = iter(points)
        try:
            first = next(it)
        except StopIteration:
            logger.debug("from_points() got an empty iterable")
            raise EmptyInput("from_points") from None

        xmin, ymin = _finite_xy(first)
        xmax, ymax = xmin, ymin
        count = 1
        for point in it:
            px, py = _finite_xy(point)
            if px < xmin:
                xmin = px
            elif px > xmax:
                xmax = px
            if py < ymin:
                ymin = py
            elif py > ymax:
                ymax = py
            count += 1

        logger.debug("from_points() consumed %d points", count)
        return cls(xmin, xmax, ymin, ymax)

    @classmethod
    def from_bounded_entities(cls, entities: Iterable[BoundedEntity]) -> "BoundingBox":
        """
        Union of the bounding boxes of all *entities*.

        Each element must implement ``bounding_box()`` (see
        :class:`BoundedEntity`); plain ``BoundingBox`` values qualify. Union is
        an exact per-axis min/max, so the result does not depend on the order
        of the input.

        Raises:
            EmptyInput: *entities* yields nothing.
            TypeError: an element cannot produce a bounding box.
        """
        it = iter(entities)
        try:
            acc = _box_of(next(it))
        except StopIteration:
            logger.debug("from_bounded_entities() got an empty iterable")
            raise EmptyInput("from_bounded_entities") from None

        count = 1
        for entity in it:
            acc = acc.union(_box_of(entity))
            count += 1

        logger.debug("from_bounded_entities() merged %d boxes", count)
        return acc

    @classmethod
    def union_all(cls, boxes: Iterable["BoundingBox"]) -> "BoundingBox":
        """Smallest box enclosing every box of *boxes*; same as :meth:`from_bounded_entities`."""
        return cls.from_bounded_entities(boxes)

    def with_bounds(
        self,
        xmin: Optional[float] = None,
        xmax: Optional[float] = None,
        ymin: Optional[float] = None,
        ymax: Optional[float] = None,
    ) -> "BoundingBox":
        """Copy with some extremas replaced; the result is validated again."""
        values = self.to_dict()
        updates = dict(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax)
        values.update({k: v for k, v in updates.items() if v is not None})
        return self.__class__(**values)

    def bounding_box(self) -> "BoundingBox":
        return self

    # -------------------------------------------------------------------------
    # ░░  QUERIES  ░░
    # -------------------------------------------------------------------------

    def width(self) -> float:
        return self.xmax - self.xmin

    def height(self) -> float:
        return self.ymax - self.ymin

    def area(self) -> float:
        return self.width() * self.height()

    def center(self) -> XY:
        return (self.xmin + self.xmax) / 2, (self.ymin + self.ymax) / 2

    def is_degenerate(self) -> bool:
        """True for zero width or zero height (a segment or a single point)."""
        return self.xmin == self.xmax or self.ymin == self.ymax

    def contains_point(self, point: Point) -> bool:
        """True if *point* lies inside the box or on its edge."""
        px, py = as_xy(point)
        return self.xmin <= px <= self.xmax and self.ymin <= py <= self.ymax

    def contains(self, other: "BoundingBox") -> bool:
        """True if *other* fits inside ``self``; shared edges allowed, so a box contains itself."""
        return (self.xmin <= other.xmin
                and self.xmax >= other.xmax
                and self.ymin <= other.ymin
                and self.ymax >= other.ymax)

    def intersects(self, other: "BoundingBox") -> bool:
        """True if the boxes overlap on both axes (inclusive of touching edges)."""
        return (self.xmin <= other.xmax
                and other.xmin <= self.xmax
                and self.ymin <= other.ymax
                and other.ymin <= self.ymax)

    def touches(self, other: "BoundingBox") -> bool:
        """True if the boxes share edge or corner points but their interiors do not overlap."""
        return self.intersects(other) and not _interiors_overlap(self, other)

    # -------------------------------------------------------------------------
    # ░░  COMBINATION  ░░
    # -------------------------------------------------------------------------

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """The smallest box enclosing *both* boxes (does not require overlap)."""
        return self.__class__(min(self.xmin, other.xmin),
                              max(self.xmax, other.xmax),
                              min(self.ymin, other.ymin),
                              max(self.ymax, other.ymax))

    def intersection(self, other: "BoundingBox") -> "BoundingBox":
        """
        The overlapping region of both boxes.

        Touching boxes produce a degenerate box (the shared edge or corner).

        Raises:
            NoIntersection: the boxes are disjoint on at least one axis.
        """
        if not self.intersects(other):
            raise NoIntersection(self, other)
        return self.__class__(max(self.xmin, other.xmin),
                              min(self.xmax, other.xmax),
                              max(self.ymin, other.ymin),
                              min(self.ymax, other.ymax))

    def __or__(self, other: "BoundingBox") -> "BoundingBox":
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: "BoundingBox") -> "BoundingBox":
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self.intersection(other)

    # -------------------------------------------------------------------------
    # ░░  TRANSFORMATION  ░░
    # -------------------------------------------------------------------------

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "BoundingBox":
        """Move box by (dx, dy)."""
        return self.__class__(self.xmin + dx, self.xmax + dx, self.ymin + dy, self.ymax + dy)

    def scale(self, sx: float, sy: Optional[float] = None, about: Optional[Point] = None) -> "BoundingBox":
        """
        Scale width by *sx* and height by *sy* (defaults to *sx*).

        The reference point *about* stays fixed; it defaults to the box
        center, pass ``(0, 0)`` to scale about the origin. A negative factor
        mirrors the box about the reference point, and the bounds are
        re-ordered so the result is always a valid box.
        """
        if sy is None:
            sy = sx
        cx, cy = self.center() if about is None else as_xy(about)
        x0, x1 = cx + (self.xmin - cx) * sx, cx + (self.xmax - cx) * sx
        y0, y1 = cy + (self.ymin - cy) * sy, cy + (self.ymax - cy) * sy
        return self.__class__(min(x0, x1), max(x0, x1), min(y0, y1), max(y0, y1))

    def remove_singular_dimensions(self, pad: float) -> "BoundingBox":
        """
        Buffer every zero-extent axis by *pad* on both sides.

        E.g. a box with ``xmin == xmax == 0`` and ``pad=1.0`` ends up with
        width 2.0; axes with a non-zero extent are left alone.
        """
        if pad < 0:
            raise ValueError(f"pad must be non-negative, got {pad!r}")
        xmin, xmax, ymin, ymax = self.xmin, self.xmax, self.ymin, self.ymax
        if xmin == xmax:
            xmin, xmax = xmin - pad, xmax + pad
        if ymin == ymax:
            ymin, ymax = ymin - pad, ymax + pad
        return self.__class__(xmin, xmax, ymin, ymax)

    # -------------------------------------------------------------------------
    # ░░  APPROXIMATE PREDICATES  ░░
    # -------------------------------------------------------------------------
    # ``epsilon`` is an absolute tolerance, ``max_ulps`` a tolerance in units of
    # least precision. Either left as None falls back to ToleranceSettings.

    def approx_contains_point(self, point: Point, epsilon: Optional[float] = None, max_ulps: Optional[int] = None) -> bool:
        """Like :meth:`contains_point`, but points approximately on an edge count as inside."""
        epsilon, max_ulps = resolve_tolerances(epsilon, max_ulps)
        px, py = as_xy(point)
        return (approx_le(self.xmin, px, epsilon, max_ulps)
                and approx_ge(self.xmax, px, epsilon, max_ulps)
                and approx_le(self.ymin, py, epsilon, max_ulps)
                and approx_ge(self.ymax, py, epsilon, max_ulps))

    def approx_contains(self, other: "BoundingBox", epsilon: Optional[float] = None, max_ulps: Optional[int] = None) -> bool:
        epsilon, max_ulps = resolve_tolerances(epsilon, max_ulps)
        return (approx_le(self.xmin, other.xmin, epsilon, max_ulps)
                and approx_ge(self.xmax, other.xmax, epsilon, max_ulps)
                and approx_le(self.ymin, other.ymin, epsilon, max_ulps)
                and approx_ge(self.ymax, other.ymax, epsilon, max_ulps))

    def approx_equal(self, other: "BoundingBox", epsilon: Optional[float] = None, max_ulps: Optional[int] = None) -> bool:
        """True if all four extremas are pairwise approximately equal."""
        epsilon, max_ulps = resolve_tolerances(epsilon, max_ulps)
        return all(approx_eq(getattr(self, name), getattr(other, name), epsilon, max_ulps)
                   for name in _FIELDS)

    def approx_intersects(self, other: "BoundingBox", epsilon: Optional[float] = None, max_ulps: Optional[int] = None) -> bool:
        epsilon, max_ulps = resolve_tolerances(epsilon, max_ulps)
        return (approx_le(self.xmin, other.xmax, epsilon, max_ulps)
                and approx_le(other.xmin, self.xmax, epsilon, max_ulps)
                and approx_le(self.ymin, other.ymax, epsilon, max_ulps)
                and approx_le(other.ymin, self.ymax, epsilon, max_ulps))

    def approx_touches(self, other: "BoundingBox", epsilon: Optional[float] = None, max_ulps: Optional[int] = None) -> bool:
        """Like :meth:`touches`, but edges only approximately shared still count."""
        return self.approx_intersects(other, epsilon, max_ulps) and not _interiors_overlap(self, other)

    # -------------------------------------------------------------------------
    # ░░  SERIALIZATION  ░░
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, float]:
        return self.model_dump()

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoundingBox":
        """Validate a ``{xmin, xmax, ymin, ymax}`` record; ``InvalidBounds`` if inverted or non-finite."""
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str) -> "BoundingBox":
        return cls.model_validate_json(text)


def _finite_xy(point: Point) -> XY:
    px, py = as_xy(point)
    if not (math.isfinite(px) and math.isfinite(py)):
        logger.debug("Rejecting non-finite point %r", (px, py))
        raise InvalidBounds(px, px, py, py, reason="point coordinates must be finite")
    return px, py


def _interiors_overlap(a: BoundingBox, b: BoundingBox) -> bool:
    return (a.xmin < b.xmax
            and b.xmin < a.xmax
            and a.ymin < b.ymax
            and b.ymin < a.ymax)


def _box_of(entity: Any) -> BoundingBox:
    if not isinstance(entity, BoundedEntity):
        raise TypeError(f"{type(entity).__name__} does not implement bounding_box()")
    box = entity.bounding_box()
    if not isinstance(box, BoundingBox):
        raise TypeError(f"{type(entity).__name__}.bounding_box() returned {type(box).__name__}, expected BoundingBox")
    return box
