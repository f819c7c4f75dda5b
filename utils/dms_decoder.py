# utils/dms_decoder.py
"""
Parsing of degree-minute-second strings into decimal degrees.

Supported formats (all of these give -20.51125):
- -20.51125
- 20d30'40.5"S
- -20°30'40.5
- -20d30.675
- N-20d30'40.5"
- -20:30:40.5

Components are labelled with d, ' and " (or the unicode degree, prime and
double prime glyphs) and must appear in that order, or they are separated
with colons. The last label may be dropped and is taken to be the next
smaller unit, so 33d10 means 33d10'. Only the final component may carry a
decimal fraction. A hemisphere letter (N, S, E, W) may lead or trail the
string and a single sign may follow a leading letter.
"""

import math
from typing import Optional, Tuple, Union

from constants import (
    HEMISPHERES,
    SIGNS,
    DIGITS,
    DMS_INDICATORS,
    COLON,
    COMPONENT_NAMES,
    SECOND_MARKER,
    GLYPH_REPLACEMENTS,
    RAW_BYTE_REPLACEMENTS,
    DOUBLE_MINUTE,
    NAN_TOKENS,
    INF_TOKENS,
    MAX_LATITUDE,
    LONGITUDE_RANGE,
    AZIMUTH_RANGE,
    MAX_COMPONENT
)
from core.angles import DecodedAngle, HemisphereFlag
from core.exceptions import ErrorCategory, MalformedInputError
from utils.logger import get_logger

logger = get_logger(__name__)

_MARKERS = "marker"


def _lookup(table: str, char: str) -> int:
    """ASCII case-insensitive position of char in table, -1 if absent."""
    if len(char) != 1 or not char.isascii():
        return -1
    return table.find(char.upper())


def _normalize_glyphs(dms: Union[str, bytes]) -> str:
    """Fold every accepted unit glyph onto d, ' or "."""
    if isinstance(dms, (bytes, bytearray)):
        raw = bytes(dms)
        for glyph, marker in GLYPH_REPLACEMENTS:
            raw = raw.replace(glyph.encode('utf-8'), marker.encode('ascii'))
        for byte, marker in RAW_BYTE_REPLACEMENTS:
            raw = raw.replace(byte, marker.encode('ascii'))
        text = raw.decode('latin-1')
    else:
        text = str(dms)
        for glyph, marker in GLYPH_REPLACEMENTS:
            text = text.replace(glyph, marker)
    return text.replace(DOUBLE_MINUTE, SECOND_MARKER)


def _hemisphere(index: int) -> Tuple[HemisphereFlag, int]:
    flag = HemisphereFlag.LONGITUDE if index // 2 else HemisphereFlag.LATITUDE
    return flag, 1 if index % 2 else -1


def _component_value(digits: str) -> Tuple[float, int]:
    """Value of a component and its integer part, taken from the digit text."""
    whole = digits.partition(".")[0].lstrip("0")
    if len(whole) > len(str(MAX_COMPONENT)):
        # Long digit runs overflow float to inf
        return float(digits), MAX_COMPONENT
    return float(digits), int(whole or 0)


def _parse_components(body: str) -> float:
    """
    Scan the numeric part of a DMS string.

    Args:
        body: String with hemisphere letters and the leading sign removed

    Returns:
        Unsigned angle in degrees

    Raises:
        MalformedInputError: If the components do not follow the grammar
    """
    values = [0.0, 0.0, 0.0]
    whole = [0, 0, 0]
    npiece = 0              # first component still open for reading
    current = ""
    style = None            # COLON or _MARKERS once a delimiter is seen
    point_seen = False
    point_piece = None
    last_piece = None

    for pos, char in enumerate(body):
        if char in DIGITS:
            current += char
            continue
        if char == ".":
            if point_seen:
                raise MalformedInputError(
                    f"Multiple decimal points in {body}", body)
            point_seen = True
            current += char
            continue

        k = _lookup(DMS_INDICATORS, char)
        if k < 0:
            if _lookup(SIGNS, char) >= 0:
                raise MalformedInputError(
                    f"Internal sign in DMS string {body}", body)
            raise MalformedInputError(
                f"Illegal character {char} in DMS string {body}", body)

        if char == COLON:
            if pos == len(body) - 1:
                raise MalformedInputError(
                    f"Illegal for : to appear at the end of {body}", body)
            delimiter = COLON
            k = npiece
        else:
            delimiter = _MARKERS
        if style is not None and style != delimiter:
            raise MalformedInputError(
                f"Mixed colon and unit-marker separators in {body}", body)
        style = delimiter

        if k >= len(COMPONENT_NAMES):
            raise MalformedInputError(
                f"Extra text following seconds in DMS string {body}", body,
                ErrorCategory.COMPONENT)
        if k == npiece - 1:
            raise MalformedInputError(
                f"Repeated {COMPONENT_NAMES[k]} component in {body}", body,
                ErrorCategory.COMPONENT)
        if k < npiece:
            raise MalformedInputError(
                f"{COMPONENT_NAMES[k].capitalize()} component follows "
                f"{COMPONENT_NAMES[npiece - 1]} component in {body}", body,
                ErrorCategory.COMPONENT)
        if not any(c in DIGITS for c in current):
            raise MalformedInputError(
                f"Missing numbers in {COMPONENT_NAMES[k]} component of {body}",
                body, ErrorCategory.COMPONENT)

        values[k], whole[k] = _component_value(current)
        if "." in current:
            point_piece = k
        last_piece = k
        npiece = k + 1
        current = ""

    if current:
        # Trailing component without a marker is the next smaller unit
        if npiece >= len(COMPONENT_NAMES):
            raise MalformedInputError(
                f"Extra text following seconds in DMS string {body}", body,
                ErrorCategory.COMPONENT)
        if not any(c in DIGITS for c in current):
            raise MalformedInputError(
                f"Missing numbers in trailing component of {body}", body,
                ErrorCategory.COMPONENT)
        values[npiece], whole[npiece] = _component_value(current)
        if "." in current:
            point_piece = npiece
        last_piece = npiece

    if point_piece is not None and point_piece != last_piece:
        raise MalformedInputError(
            f"Decimal point in non-terminal component of {body}", body,
            ErrorCategory.COMPONENT)

    # 59.999999 is accepted even though it may round to 60
    if whole[1] >= MAX_COMPONENT:
        raise MalformedInputError(
            f"Minutes {values[1]:g} not in range [0, {MAX_COMPONENT})", body,
            ErrorCategory.RANGE)
    if whole[2] >= MAX_COMPONENT:
        raise MalformedInputError(
            f"Seconds {values[2]:g} not in range [0, {MAX_COMPONENT})", body,
            ErrorCategory.RANGE)

    return dms_to_dd(values[0], values[1], values[2])


def _decode_dms(text: str) -> DecodedAngle:
    body = text.strip()
    beg, end = 0, len(body)
    sign = 1
    indicator = HemisphereFlag.NONE

    if end > beg:
        k = _lookup(HEMISPHERES, body[beg])
        if k >= 0:
            indicator, sign = _hemisphere(k)
            beg += 1
    if end > beg:
        k = _lookup(HEMISPHERES, body[end - 1])
        if k >= 0:
            if indicator != HemisphereFlag.NONE:
                first, last = body[beg - 1], body[end - 1]
                if first.upper() == last.upper():
                    message = f"Repeated hemisphere indicators {first} in {body}"
                else:
                    message = (f"Contradictory hemisphere indicators {first} "
                               f"and {last} in {body}")
                raise MalformedInputError(message, body, ErrorCategory.HEMISPHERE)
            indicator, sign = _hemisphere(k)
            end -= 1
    if end > beg:
        k = _lookup(SIGNS, body[beg])
        if k >= 0:
            sign *= 1 if k else -1
            beg += 1
    if end == beg:
        raise MalformedInputError(
            f"Empty or incomplete DMS string {body}", body, ErrorCategory.EMPTY)

    return DecodedAngle(sign * _parse_components(body[beg:end]), indicator)


def _match_non_finite(text: str) -> Optional[float]:
    """Return NaN or +/-inf for the usual spellings, None otherwise."""
    token = text.strip().upper()
    sign = -1 if token.startswith("-") else 1
    if token[:1] in ("-", "+"):
        token = token[1:]
    token = token.rstrip("0")
    if token in NAN_TOKENS:
        return math.nan
    if token in INF_TOKENS:
        return sign * math.inf
    return None


def decode(dms: Union[str, bytes]) -> DecodedAngle:
    """
    Convert a DMS string to an angle.

    Args:
        dms: DMS string; bytes are accepted with UTF-8 or single-byte glyphs

    Returns:
        DecodedAngle of (degrees, indicator), indicator being LATITUDE when
        N/S is present, LONGITUDE when E/W is present and NONE otherwise

    Raises:
        MalformedInputError: If the string is malformed

    No check is made on the range of the result.
    """
    text = _normalize_glyphs(dms)
    try:
        return _decode_dms(text)
    except MalformedInputError as exc:
        value = _match_non_finite(text)
        if value is None:
            logger.debug(f"Rejected DMS string {text!r}: {exc.message}")
            raise
        return DecodedAngle(value, HemisphereFlag.NONE)


def dms_to_dd(degrees: float, minutes: float = 0, seconds: float = 0) -> float:
    """
    Combine degrees, minutes and seconds into decimal degrees.

    The sign of degrees is not carried to the other components, so -3d20'
    is dms_to_dd(-3, -20) or -dms_to_dd(3, 20).
    """
    return degrees + (minutes + seconds / 60) / 60


def normalize_angle(angle: float) -> float:
    """Reduce an angle in [-540, 540) to [-180, 180)."""
    if angle >= 180:
        return angle - 360
    if angle < -180:
        return angle + 360
    return angle


def decode_lat_lon(dms_a: Union[str, bytes], dms_b: Union[str, bytes],
                   swap_lat_lon: bool = False) -> Tuple[float, float]:
    """
    Convert a pair of DMS strings to latitude and longitude.

    Args:
        dms_a: First string
        dms_b: Second string
        swap_lat_lon: Take the first string as longitude when neither
            string carries a hemisphere designator

    Returns:
        Tuple of (latitude, longitude), longitude reduced to [-180, 180)

    Raises:
        MalformedInputError: If either string is malformed, both resolve to
            the same axis, latitude is outside [-90, 90] or longitude is
            outside [-540, 540)
    """
    a, ind_a = decode(dms_a)
    b, ind_b = decode(dms_b)
    if ind_a == HemisphereFlag.NONE and ind_b == HemisphereFlag.NONE:
        ind_a = HemisphereFlag.LONGITUDE if swap_lat_lon else HemisphereFlag.LATITUDE
        ind_b = HemisphereFlag.LATITUDE if swap_lat_lon else HemisphereFlag.LONGITUDE
    elif ind_a == HemisphereFlag.NONE:
        ind_a = HemisphereFlag(HemisphereFlag.LATITUDE + HemisphereFlag.LONGITUDE - ind_b)
    elif ind_b == HemisphereFlag.NONE:
        ind_b = HemisphereFlag(HemisphereFlag.LATITUDE + HemisphereFlag.LONGITUDE - ind_a)

    if ind_a == ind_b:
        axis = "latitudes" if ind_a == HemisphereFlag.LATITUDE else "longitudes"
        raise MalformedInputError(
            f"Both {dms_a} and {dms_b} interpreted as {axis}",
            f"{dms_a}, {dms_b}", ErrorCategory.HEMISPHERE)

    lat, lon = (a, b) if ind_a == HemisphereFlag.LATITUDE else (b, a)
    if abs(lat) > MAX_LATITUDE:
        raise MalformedInputError(
            f"Latitude {lat:g}d not in [-{MAX_LATITUDE}d, {MAX_LATITUDE}d]",
            str(lat), ErrorCategory.RANGE)
    lon_min, lon_max = LONGITUDE_RANGE
    if lon < lon_min or lon >= lon_max:
        raise MalformedInputError(
            f"Longitude {lon:g}d not in [{lon_min}d, {lon_max}d)",
            str(lon), ErrorCategory.RANGE)

    return lat, normalize_angle(lon)


def decode_angle(angstr: Union[str, bytes]) -> float:
    """
    Convert a string to an arc angle in degrees.

    No hemisphere designator is allowed and the range is not checked.
    """
    angle, indicator = decode(angstr)
    if indicator != HemisphereFlag.NONE:
        raise MalformedInputError(
            f"Arc angle {angstr} includes a hemisphere, N/E/W/S",
            str(angstr), ErrorCategory.HEMISPHERE)
    return angle


def decode_azimuth(azistr: Union[str, bytes]) -> float:
    """
    Convert a string to an azimuth in degrees.

    An E/W designator is allowed (W negates the result); N/S is not.

    Returns:
        Azimuth reduced to [-180, 180)

    Raises:
        MalformedInputError: If the string is malformed, carries N/S, or
            decodes outside [-540, 540)
    """
    azimuth, indicator = decode(azistr)
    if indicator == HemisphereFlag.LATITUDE:
        raise MalformedInputError(
            f"Azimuth {azistr} has a latitude hemisphere, N/S",
            str(azistr), ErrorCategory.HEMISPHERE)
    azi_min, azi_max = AZIMUTH_RANGE
    if azimuth < azi_min or azimuth >= azi_max:
        raise MalformedInputError(
            f"Azimuth {azistr} not in range [{azi_min}d, {azi_max}d)",
            str(azistr), ErrorCategory.RANGE)
    return normalize_angle(azimuth)
