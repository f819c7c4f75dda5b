# utils/dms_encoder.py
"""
Formatting of decimal degrees as degree-minute-second strings.
"""

import math
from typing import Optional, Tuple

from constants import (
    HEMISPHERES,
    DEGREE_MARKER,
    MINUTE_MARKER,
    SECOND_MARKER,
    MAX_COMPONENT,
    MAX_PRECISION_DEGREES
)
from core.angles import AngleComponent, HemisphereFlag

# Integer digits of the degree field per indicator
_DEGREE_WIDTH = {
    HemisphereFlag.NONE: 1,
    HemisphereFlag.LATITUDE: 2,
    HemisphereFlag.LONGITUDE: 3,
    HemisphereFlag.AZIMUTH: 3,
}


def _format_fixed(value: float, precision: int) -> str:
    # nan, inf and -inf come out as literal tokens
    return format(value, f".{precision}f")


def _with_fraction(whole: int, fraction: int, precision: int, width: int) -> str:
    text = f"{whole:0{width}d}"
    if precision:
        text += f".{fraction:0{precision}d}"
    return text


def _hemisphere_letter(indicator: HemisphereFlag, sign: int) -> str:
    if indicator == HemisphereFlag.LATITUDE:
        return HEMISPHERES[0 + (1 if sign > 0 else 0)]
    if indicator == HemisphereFlag.LONGITUDE:
        return HEMISPHERES[2 + (1 if sign > 0 else 0)]
    return ""


def encode(angle: float, trailing: AngleComponent, precision: int,
           indicator: HemisphereFlag = HemisphereFlag.NONE,
           separator: Optional[str] = None) -> str:
    """
    Convert an angle in degrees to a DMS string.

    Args:
        angle: Angle in degrees
        trailing: Smallest unit written; it carries the decimal fraction
        precision: Digits after the decimal point of the trailing unit
        indicator: Output style
            - NONE: signed, no padding on degrees, e.g. -8d03'
            - LATITUDE: unsigned, degrees padded to 2 digits, N/S, e.g. 08d03'S
            - LONGITUDE: unsigned, degrees padded to 3 digits, E/W, e.g. 008d03'W
            - AZIMUTH: reduced to [0, 360), degrees padded to 3 digits, e.g. 351d57'
            - NUMBER: plain fixed-point number, trailing is ignored
        separator: If given, placed between components instead of d, ' and "

    Returns:
        Formatted string; minutes and seconds always have 2 integer digits
    """
    if indicator == HemisphereFlag.NUMBER or not math.isfinite(angle):
        return _format_fixed(angle, precision)

    trailing = AngleComponent(trailing)
    indicator = HemisphereFlag(indicator)
    precision = max(0, min(MAX_PRECISION_DEGREES - 2 * trailing, precision))
    unit = 10 ** precision
    scale = MAX_COMPONENT ** trailing * unit

    if indicator == HemisphereFlag.AZIMUTH:
        angle -= math.floor(angle / 360) * 360
    sign = -1 if angle < 0 else 1
    angle *= sign

    # Split off whole degrees before scaling to keep the fraction precise
    degrees = math.floor(angle)
    scaled = math.floor((angle - degrees) * scale + 0.5)
    if scaled >= scale:
        degrees += 1
        scaled -= scale

    width = _DEGREE_WIDTH.get(indicator, 1)
    out = "-" if indicator == HemisphereFlag.NONE and sign < 0 else ""
    if trailing == AngleComponent.DEGREE:
        out += _with_fraction(degrees, scaled, precision, width)
    else:
        out += f"{degrees:0{width}d}" + (separator or DEGREE_MARKER)
        if trailing == AngleComponent.MINUTE:
            minutes, fraction = divmod(scaled, unit)
            out += _with_fraction(minutes, fraction, precision, 2)
            if not separator:
                out += MINUTE_MARKER
        else:
            minutes, rest = divmod(scaled, MAX_COMPONENT * unit)
            seconds, fraction = divmod(rest, unit)
            out += f"{minutes:02d}" + (separator or MINUTE_MARKER)
            out += _with_fraction(seconds, fraction, precision, 2)
            if not separator:
                out += SECOND_MARKER

    return out + _hemisphere_letter(indicator, sign)


def encode_auto(angle: float, precision: int,
                indicator: HemisphereFlag = HemisphereFlag.NONE,
                separator: Optional[str] = None) -> str:
    """
    Convert an angle to a DMS string, picking the trailing unit from precision.

    precision is relative to 1 degree: 3 is accurate to 0.1' and 4 to 1".
    With indicator NUMBER the angle is written as a fixed-point number with
    precision decimals.
    """
    if indicator == HemisphereFlag.NUMBER:
        return _format_fixed(angle, precision)
    if precision < 2:
        return encode(angle, AngleComponent.DEGREE, precision, indicator, separator)
    if precision < 4:
        return encode(angle, AngleComponent.MINUTE, precision - 2, indicator, separator)
    return encode(angle, AngleComponent.SECOND, precision - 4, indicator, separator)


def dd_to_dm(angle: float) -> Tuple[float, float]:
    """
    Split an angle into whole degrees and arc minutes.

    Degrees are truncated toward zero, so both parts share the sign of angle.
    """
    degrees = float(int(angle)) if math.isfinite(angle) else angle
    return degrees, 60 * (angle - degrees)


def dd_to_dms(angle: float) -> Tuple[float, float, float]:
    """
    Split an angle into whole degrees, whole arc minutes and arc seconds.
    """
    degrees, minutes_decimal = dd_to_dm(angle)
    minutes = float(int(minutes_decimal)) if math.isfinite(minutes_decimal) else minutes_decimal
    return degrees, minutes, 60 * (minutes_decimal - minutes)
