"""修改器模块包。"""

from .animation import AlignRotationModifier, RemoveAnimationModifier
from .base import AbstractModifier
from .colors import ColorspaceModifier, GreyscaleModifier, InvertModifier
from .drawing import (
    AbstractDrawModifier,
    DrawEllipseModifier,
    DrawLineModifier,
    DrawPixelModifier,
    DrawPolygonModifier,
    DrawRectangleModifier,
)
from .geometry import (
    CropModifier,
    FlipModifier,
    FlopModifier,
    ResizeModifier,
    RotateModifier,
    ScaleModifier,
)
from .text import TextModifier


__all__ = [
    "AbstractDrawModifier",
    "AbstractModifier",
    "AlignRotationModifier",
    "ColorspaceModifier",
    "CropModifier",
    "DrawEllipseModifier",
    "DrawLineModifier",
    "DrawPixelModifier",
    "DrawPolygonModifier",
    "DrawRectangleModifier",
    "FlipModifier",
    "FlopModifier",
    "GreyscaleModifier",
    "InvertModifier",
    "RemoveAnimationModifier",
    "ResizeModifier",
    "RotateModifier",
    "ScaleModifier",
    "TextModifier",
]
