class BoundingBoxError(Exception):
    """Base class for bounding-box errors."""

class InvalidBounds(BoundingBoxError):
    def __init__(self, xmin: float, xmax: float, ymin: float, ymax: float, reason: str = "xmin <= xmax and ymin <= ymax must hold"):
        self.xmin, self.xmax, self.ymin, self.ymax = xmin, xmax, ymin, ymax
        super().__init__(f"Invalid bounds (xmin={xmin!r}, xmax={xmax!r}, ymin={ymin!r}, ymax={ymax!r}): {reason}.")

class EmptyInput(BoundingBoxError):
    def __init__(self, constructor: str):
        self.constructor = constructor
        super().__init__(f"{constructor}() needs at least one element to derive a bounding box.")

class NoIntersection(BoundingBoxError):
    def __init__(self, first, second):
        self.first, self.second = first, second
        super().__init__(f"{first!r} and {second!r} do not intersect.")
