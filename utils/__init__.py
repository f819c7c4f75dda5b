# utils/__init__.py
"""
Utility modules for the DMS toolkit.
"""

from .logger import get_logger, setup_logging

# Export DMS decoding and encoding
from .dms_decoder import (
    decode,
    decode_lat_lon,
    decode_angle,
    decode_azimuth,
    dms_to_dd,
    normalize_angle
)
from .dms_encoder import (
    encode,
    encode_auto,
    dd_to_dm,
    dd_to_dms
)

from .validators import (
    validate_dms_coordinate,
    validate_latitude,
    validate_longitude,
    validate_angle,
    validate_azimuth,
    validate_lat_lon
)
from .error_handler import handle_errors
from .error_messages import get_error_message, format_error_message

__all__ = [
    # Logger
    'get_logger',
    'setup_logging',
    # Decoder
    'decode',
    'decode_lat_lon',
    'decode_angle',
    'decode_azimuth',
    'dms_to_dd',
    'normalize_angle',
    # Encoder
    'encode',
    'encode_auto',
    'dd_to_dm',
    'dd_to_dms',
    # Validators
    'validate_dms_coordinate',
    'validate_latitude',
    'validate_longitude',
    'validate_angle',
    'validate_azimuth',
    'validate_lat_lon',
    # Error handling
    'handle_errors',
    'get_error_message',
    'format_error_message'
]
