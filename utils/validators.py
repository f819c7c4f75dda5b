# utils/validators.py
"""
Validation utilities for the DMS toolkit.
Wrap the decoder in functions that report (is_valid, value) instead of raising.
"""

from typing import Tuple, Optional
from constants import MAX_LATITUDE, LONGITUDE_RANGE
from core.angles import HemisphereFlag
from core.exceptions import MalformedInputError
from .dms_decoder import decode, decode_angle, decode_azimuth, decode_lat_lon, normalize_angle
from .error_handler import handle_errors


@handle_errors(error_type=MalformedInputError, log_level="DEBUG",
               default_return=(False, None))
def validate_dms_coordinate(dms_str: str, is_longitude: bool = False) -> Tuple[bool, Optional[float]]:
    """
    Validate a DMS coordinate string and convert to decimal degrees.

    A hemisphere letter, when present, must match the coordinate type.

    Args:
        dms_str: DMS string to validate
        is_longitude: True if this should be longitude, False for latitude

    Returns:
        Tuple of (is_valid, decimal_degrees_value); longitudes are reduced
        to [-180, 180)
    """
    value, indicator = decode(dms_str)

    expected = HemisphereFlag.LONGITUDE if is_longitude else HemisphereFlag.LATITUDE
    if indicator not in (HemisphereFlag.NONE, expected):
        return False, None

    if is_longitude:
        lon_min, lon_max = LONGITUDE_RANGE
        if value < lon_min or value >= lon_max:
            return False, None
        return True, normalize_angle(value)

    if abs(value) > MAX_LATITUDE:
        return False, None
    return True, value


def validate_latitude(dms_str: str) -> Tuple[bool, Optional[float]]:
    """Validate a latitude string (N/S or no designator)."""
    return validate_dms_coordinate(dms_str, is_longitude=False)


def validate_longitude(dms_str: str) -> Tuple[bool, Optional[float]]:
    """Validate a longitude string (E/W or no designator)."""
    return validate_dms_coordinate(dms_str, is_longitude=True)


@handle_errors(error_type=MalformedInputError, log_level="DEBUG",
               default_return=(False, None))
def validate_angle(angle_str: str) -> Tuple[bool, Optional[float]]:
    """
    Validate an arc angle with no hemisphere designator.

    Returns:
        Tuple of (is_valid, degrees)
    """
    return True, decode_angle(angle_str)


@handle_errors(error_type=MalformedInputError, log_level="DEBUG",
               default_return=(False, None))
def validate_azimuth(azimuth_str: str) -> Tuple[bool, Optional[float]]:
    """
    Validate an azimuth string.

    Returns:
        Tuple of (is_valid, azimuth reduced to [-180, 180))
    """
    return True, decode_azimuth(azimuth_str)


@handle_errors(error_type=MalformedInputError, log_level="DEBUG",
               default_return=(False, None))
def validate_lat_lon(dms_a: str, dms_b: str,
                     swap_lat_lon: bool = False) -> Tuple[bool, Optional[Tuple[float, float]]]:
    """
    Validate a pair of strings as a latitude/longitude position.

    Returns:
        Tuple of (is_valid, (latitude, longitude))
    """
    return True, decode_lat_lon(dms_a, dms_b, swap_lat_lon)
