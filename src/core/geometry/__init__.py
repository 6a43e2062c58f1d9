"""
Geometry primitives для polycut

Классификация сторон, пересечения прямой с рёбрами, площади полигонов.
"""

from src.core.geometry.primitives import (
    # Exceptions
    InvalidLine,
    # Types
    EdgeIntersection,
    Side,
    # Operations
    cross,
    intersect,
    is_convex,
    line_edge_intersection,
    polygon_area,
    require_direction,
    side,
    signed_area,
)

__all__ = [
    # Exceptions
    "InvalidLine",
    # Types
    "EdgeIntersection",
    "Side",
    # Operations
    "cross",
    "intersect",
    "is_convex",
    "line_edge_intersection",
    "polygon_area",
    "require_direction",
    "side",
    "signed_area",
]
