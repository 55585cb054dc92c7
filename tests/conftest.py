from dataclasses import dataclass

import pytest

from bounding_box import BoundingBox, get_settings


@dataclass
class Vec:
    x: float
    y: float


@dataclass
class Circle:
    center: tuple
    radius: float

    def bounding_box(self) -> BoundingBox:
        cx, cy = self.center
        return BoundingBox(cx - self.radius, cx + self.radius, cy - self.radius, cy + self.radius)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Tolerance settings are cached; reload them around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def unit_box():
    return BoundingBox(0.0, 1.0, 0.0, 1.0)


@pytest.fixture
def circles():
    return [
        Circle(center=(0.0, 0.0), radius=1.0),
        Circle(center=(0.0, 2.0), radius=1.0),
        Circle(center=(0.0, 2.0), radius=2.0),
    ]


@pytest.fixture
def box_pairs():
    """Overlapping, touching, nested, degenerate and disjoint pairs."""
    return [
        (BoundingBox(0.0, 1.0, 0.0, 1.0), BoundingBox(0.5, 2.0, -1.0, 0.5)),
        (BoundingBox(0.0, 1.0, 0.0, 1.0), BoundingBox(1.0, 2.0, 0.0, 1.0)),
        (BoundingBox(-3.0, 3.0, -3.0, 3.0), BoundingBox(-1.0, 1.0, 0.25, 0.75)),
        (BoundingBox(2.0, 2.0, 5.0, 5.0), BoundingBox(0.0, 4.0, 4.0, 6.0)),
        (BoundingBox(-1.0, 1.0, 0.0, 2.0), BoundingBox(5.0, 6.0, 0.0, 1.0)),
        (BoundingBox(-0.1, 0.3, 1e-3, 7.5), BoundingBox(0.2, 0.2, -2.0, 2.0)),
    ]
