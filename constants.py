# constants.py
"""
Application-wide constants for the DMS toolkit.
Centralizes symbol tables, range limits, and logging configuration.
"""

# Application Information
APP_NAME = "DMS Toolkit"
APP_VERSION = "1.0.0"

# Symbol Tables
# Hemisphere letters: index // 2 selects the axis (0 latitude, 1 longitude),
# index % 2 selects the sign (0 negative, 1 positive).
HEMISPHERES = "SNWE"
SIGNS = "-+"
DIGITS = "0123456789"
# Unit indicators in component order; ':' separates instead of labelling
DMS_INDICATORS = "D'\":"
COLON = ":"
COMPONENT_NAMES = ("degrees", "minutes", "seconds")

# Output markers used when encoding
DEGREE_MARKER = "d"
MINUTE_MARKER = "'"
SECOND_MARKER = '"'

# Unicode glyphs collapsed onto the canonical markers before parsing
GLYPH_REPLACEMENTS = (
    ("\u00b0", DEGREE_MARKER),  # degree sign
    ("\u00ba", DEGREE_MARKER),  # masculine ordinal indicator
    ("\u2070", DEGREE_MARKER),  # superscript zero
    ("\u02da", DEGREE_MARKER),  # ring above
    ("\u2032", MINUTE_MARKER),  # prime
    ("\u00b4", MINUTE_MARKER),  # acute accent
    ("\u2019", MINUTE_MARKER),  # right single quote
    ("\u2033", SECOND_MARKER),  # double prime
    ("\u201d", SECOND_MARKER),  # right double quote
)

# Single-byte (Latin-1) forms accepted in raw byte input
RAW_BYTE_REPLACEMENTS = (
    (b"\xb0", DEGREE_MARKER),
    (b"\xba", DEGREE_MARKER),
    (b"\xb4", MINUTE_MARKER),
)

# Two minute marks stand for a second mark; applied after all glyphs are folded
DOUBLE_MINUTE = MINUTE_MARKER * 2

# Spellings of non-finite numbers accepted when the DMS grammar fails
NAN_TOKENS = ("NAN", "1.#QNAN", "1.#SNAN", "1.#IND", "1.#R")
INF_TOKENS = ("INF", "1.#INF")

# Range Limits
MAX_LATITUDE = 90
LONGITUDE_RANGE = (-540, 540)   # [min, max)
AZIMUTH_RANGE = (-540, 540)     # [min, max)
MAX_COMPONENT = 60              # minutes and seconds integer parts

# Encoding Limits
# Digits beyond which a double carries no information for angles in [-90, 90]
MAX_PRECISION_DEGREES = 15

# Logging Configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "dms.log"
LOG_DIR_NAME = ".dmstoolkit"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 3
