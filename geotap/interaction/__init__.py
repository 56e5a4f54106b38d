"""
Interaction Layer
=================

Bounded Context: Pointer input over parsed geometry.

Responsibilities:
- Turn a tap (already in map coordinates) into tap / miss notifications

Non-responsibilities:
- Screen to map projection, gestures, zoom (caller's viewport)
"""

from geotap.interaction.tap_handler import PolygonTapHandler

__all__ = [
    "PolygonTapHandler",
]
