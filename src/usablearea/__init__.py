"""
Usable-area calibration engine.

Keeps a normalized rectangle (offset + size) inside a pointing device's
surface consistent with an optional locked aspect ratio.
"""
__version__ = "0.1.0"
