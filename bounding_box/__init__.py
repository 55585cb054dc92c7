import logging
from importlib.metadata import version as _metadata_version
from ._coordinates import BoundingBox
from ._types import BoundedEntity, Point
from ._settings import ToleranceSettings, get_settings
from ._tolerance import approx_eq, approx_le, approx_ge, ulps_distance
from ._exceptions import (
    BoundingBoxError, InvalidBounds, EmptyInput, NoIntersection,
)

__all__ = (
    '__version__',
    'BoundingBox',
    "BoundedEntity",
    "Point",
    "ToleranceSettings",
    "get_settings",
    "approx_eq",
    "approx_le",
    "approx_ge",
    "ulps_distance",
    "BoundingBoxError",
    "InvalidBounds",
    "EmptyInput",
    "NoIntersection",
)

__version__ = _metadata_version('bounding-box')

logging.getLogger(__name__).addHandler(logging.NullHandler())
