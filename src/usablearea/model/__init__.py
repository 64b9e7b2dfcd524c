"""
The MODEL layer contains pure data structures and numeric rules.
It has NO knowledge of Qt or of the event loop.
It deals with bounded values, rectangles and session snapshots.
"""
from usablearea.model.bounded import BoundedValue
from usablearea.model.geometry import Axis, Rect, AreaState, is_within_bounds, ratio_label

__all__ = ["BoundedValue", "Axis", "Rect", "AreaState", "is_within_bounds", "ratio_label"]
