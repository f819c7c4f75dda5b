# core/angles.py
"""
Value types shared by the DMS decoder and encoder.
"""

from enum import IntEnum
from typing import NamedTuple


class HemisphereFlag(IntEnum):
    """
    Hemisphere indicator.

    The decoder reports NONE, LATITUDE (N/S seen) or LONGITUDE (E/W seen).
    AZIMUTH and NUMBER only select output formatting in the encoder.
    """
    NONE = 0
    LATITUDE = 1
    LONGITUDE = 2
    AZIMUTH = 3
    NUMBER = 4


class AngleComponent(IntEnum):
    """Trailing unit of an encoded angle."""
    DEGREE = 0
    MINUTE = 1
    SECOND = 2


class DecodedAngle(NamedTuple):
    degrees: float
    indicator: HemisphereFlag
