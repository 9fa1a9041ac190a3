"""Shape variants. Importing this package registers every kind."""

from geometrize.shapes.base import Bounds, Shape
from geometrize.shapes.registry import ShapeKind, create_shape, get_registry, shape_creator
from geometrize.shapes.rectangle import Rectangle
from geometrize.shapes.rotated_rectangle import RotatedRectangle
from geometrize.shapes.triangle import Triangle
from geometrize.shapes.circle import Circle
from geometrize.shapes.ellipse import Ellipse
from geometrize.shapes.line import Line
from geometrize.shapes.polyline import Polyline
from geometrize.shapes.quadratic_bezier import QuadraticBezier

__all__ = [
    "Bounds",
    "Shape",
    "ShapeKind",
    "create_shape",
    "get_registry",
    "shape_creator",
    "Rectangle",
    "RotatedRectangle",
    "Triangle",
    "Circle",
    "Ellipse",
    "Line",
    "Polyline",
    "QuadraticBezier",
]
