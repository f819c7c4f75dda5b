# tests/test_dms_decoder.py
"""
Unit tests for dms_decoder module.
Tests DMS grammar, hemisphere handling, lat/lon pairing, angles and azimuths.
"""

import math
import unittest
import sys
import os

# Add root directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core.angles import HemisphereFlag
from core.exceptions import ErrorCategory, MalformedInputError
from utils.dms_decoder import (
    decode,
    decode_lat_lon,
    decode_angle,
    decode_azimuth,
    dms_to_dd,
    normalize_angle
)


class TestDecodeLegal(unittest.TestCase):
    """Strings that must decode."""

    def test_equivalent_forms_of_minus_20_51125(self):
        """All notations of -20d30'40.5" agree."""
        cases = {
            "-20.51125": HemisphereFlag.NONE,
            "20d30'40.5\"S": HemisphereFlag.LATITUDE,
            "-20°30'40.5": HemisphereFlag.NONE,
            "-20d30.675": HemisphereFlag.NONE,
            "N-20d30'40.5\"": HemisphereFlag.LATITUDE,
            "-20:30:40.5": HemisphereFlag.NONE,
        }
        for text, indicator in cases.items():
            with self.subTest(text=text):
                value, ind = decode(text)
                self.assertAlmostEqual(value, -20.51125, places=10)
                self.assertEqual(ind, indicator)

    def test_equivalent_forms_of_4_0025(self):
        """All notations of 4d0'9" agree."""
        for text in ["4d0'9", "4d9\"", "4d9''", "4:0:9", "004:00:09",
                     "4.0025", "4.0025d", "4d0.15", "04:.15"]:
            with self.subTest(text=text):
                value, ind = decode(text)
                self.assertAlmostEqual(value, 4.0025, places=10)
                self.assertEqual(ind, HemisphereFlag.NONE)

    def test_unicode_glyphs(self):
        """Degree, prime and double prime glyphs are accepted."""
        value, ind = decode("20°30′40.5″W")
        self.assertAlmostEqual(value, -20.51125, places=10)
        self.assertEqual(ind, HemisphereFlag.LONGITUDE)

        for text in ["20º30’", "20⁰30´", "20˚30'"]:
            with self.subTest(text=text):
                self.assertAlmostEqual(decode(text).degrees, 20.5, places=10)

    def test_two_primes_are_seconds(self):
        """Two consecutive minute glyphs stand for seconds."""
        self.assertAlmostEqual(decode("4d9′′").degrees, 4.0025, places=10)
        self.assertAlmostEqual(decode("4d9”").degrees, 4.0025, places=10)

    def test_utf8_bytes(self):
        """UTF-8 encoded glyphs in byte input."""
        value, _ = decode("20°30'".encode('utf-8'))
        self.assertAlmostEqual(value, 20.5, places=10)

    def test_single_byte_glyphs(self):
        """Raw single-byte degree and acute accent in byte input."""
        self.assertAlmostEqual(decode(b"20\xb030\xb4").degrees, 20.5, places=10)
        self.assertAlmostEqual(decode(b"20\xba30'").degrees, 20.5, places=10)
        # UTF-8 and single-byte forms mixed in one string
        self.assertAlmostEqual(decode(b"20\xc2\xb030\xb4").degrees, 20.5, places=10)

    def test_lowercase_hemisphere(self):
        """Hemisphere letters are case-insensitive."""
        self.assertEqual(decode("20.5s"), (-20.5, HemisphereFlag.LATITUDE))
        self.assertEqual(decode("e30"), (30.0, HemisphereFlag.LONGITUDE))

    def test_uppercase_degree_marker(self):
        """D is a degree marker like d."""
        self.assertAlmostEqual(decode("4D30").degrees, 4.5, places=10)

    def test_trailing_sign_with_hemisphere(self):
        """A sign and a trailing designator multiply."""
        self.assertEqual(decode("-20W"), (20.0, HemisphereFlag.LONGITUDE))
        self.assertEqual(decode("+20S"), (-20.0, HemisphereFlag.LATITUDE))

    def test_surrounding_whitespace(self):
        """Leading and trailing whitespace is ignored."""
        self.assertEqual(decode("  33d10 \t"), (33 + 10 / 60, HemisphereFlag.NONE))

    def test_trailing_unit_inferred(self):
        """An unmarked trailing component is the next smaller unit."""
        self.assertAlmostEqual(decode("33d10").degrees, 33 + 10 / 60, places=10)
        self.assertAlmostEqual(decode("10'30").degrees, (10 + 30 / 60) / 60, places=12)

    def test_minutes_only(self):
        """5.5' may be written 0:5.5."""
        self.assertAlmostEqual(decode("5.5'").degrees, decode("0:5.5").degrees, places=12)

    def test_fraction_just_below_sixty(self):
        """59.9999 minutes is within range."""
        self.assertAlmostEqual(decode("4:59.9999").degrees, 4 + 59.9999 / 60, places=10)

    def test_negative_zero(self):
        """The sign survives a zero magnitude."""
        value, _ = decode("-0:00")
        self.assertEqual(value, 0.0)
        self.assertEqual(math.copysign(1.0, value), -1.0)

    def test_non_finite_tokens(self):
        """NaN and infinity spellings fall back to non-finite values."""
        self.assertTrue(math.isnan(decode("nan").degrees))
        self.assertTrue(math.isnan(decode("1.#QNAN").degrees))
        self.assertEqual(decode("inf"), (math.inf, HemisphereFlag.NONE))
        self.assertEqual(decode("-INF").degrees, -math.inf)
        self.assertEqual(decode("1.#INF00").degrees, math.inf)

    def test_long_digit_run(self):
        """A digit run too long for a float decodes to infinity."""
        self.assertEqual(decode("1" * 400), (math.inf, HemisphereFlag.NONE))
        self.assertEqual(decode("0" * 400 + "1d30").degrees, 1.5)


class TestDecodeIllegal(unittest.TestCase):
    """Strings that must be rejected."""

    def assertCategory(self, text, category):
        with self.assertRaises(MalformedInputError) as ctx:
            decode(text)
        self.assertEqual(ctx.exception.category, category)
        return ctx.exception

    def test_documented_illegal_strings(self):
        """Each documented bad string raises MalformedInputError."""
        for text in ["4d5\"4'", "4::5", "4:5:", ":4:5", "4d4.5'4\"",
                     "-N20.5", "1.8e2d", "4:60", "4d-5'"]:
            with self.subTest(text=text):
                with self.assertRaises(MalformedInputError):
                    decode(text)

    def test_component_order(self):
        exc = self.assertCategory("4d5\"4'", ErrorCategory.COMPONENT)
        self.assertIn("follows seconds", exc.message)

    def test_repeated_component(self):
        exc = self.assertCategory("4d5d", ErrorCategory.COMPONENT)
        self.assertIn("Repeated degrees", exc.message)

    def test_missing_numbers(self):
        self.assertCategory("4::5", ErrorCategory.COMPONENT)
        self.assertCategory(":4:5", ErrorCategory.COMPONENT)
        self.assertCategory("4d.", ErrorCategory.COMPONENT)

    def test_colon_at_end(self):
        exc = self.assertCategory("4:5:", ErrorCategory.SYNTAX)
        self.assertIn("end", exc.message)

    def test_decimal_in_non_terminal_component(self):
        exc = self.assertCategory("4d4.5'4\"", ErrorCategory.COMPONENT)
        self.assertIn("non-terminal", exc.message)
        self.assertCategory("4.5:30", ErrorCategory.COMPONENT)

    def test_multiple_decimal_points(self):
        exc = self.assertCategory("4.5.6", ErrorCategory.SYNTAX)
        self.assertIn("Multiple decimal points", exc.message)

    def test_sign_before_hemisphere(self):
        exc = self.assertCategory("-N20.5", ErrorCategory.SYNTAX)
        self.assertIn("Illegal character", exc.message)

    def test_exponent_not_allowed(self):
        self.assertCategory("1.8e2d", ErrorCategory.SYNTAX)

    def test_internal_sign(self):
        exc = self.assertCategory("4d-5'", ErrorCategory.SYNTAX)
        self.assertIn("Internal sign", exc.message)

    def test_interior_whitespace(self):
        self.assertCategory("20 30", ErrorCategory.SYNTAX)

    def test_non_ascii_letters_are_not_hemispheres(self):
        # U+017F upper-cases to S
        self.assertCategory("20\u017f", ErrorCategory.SYNTAX)
        self.assertCategory("\u017f20", ErrorCategory.SYNTAX)

    def test_long_digit_run_out_of_range(self):
        exc = self.assertCategory("4:" + "9" * 400, ErrorCategory.RANGE)
        self.assertIn("Minutes", exc.message)

    def test_minutes_and_seconds_range(self):
        exc = self.assertCategory("4:60", ErrorCategory.RANGE)
        self.assertIn("Minutes", exc.message)
        self.assertCategory("4:60.5", ErrorCategory.RANGE)
        exc = self.assertCategory("4:0:60", ErrorCategory.RANGE)
        self.assertIn("Seconds", exc.message)

    def test_mixed_delimiters(self):
        exc = self.assertCategory("4d30:15", ErrorCategory.SYNTAX)
        self.assertIn("Mixed", exc.message)
        self.assertCategory("4:30'", ErrorCategory.SYNTAX)

    def test_extra_text_after_seconds(self):
        self.assertCategory("4:5:6:7", ErrorCategory.COMPONENT)
        exc = self.assertCategory("4d5'6\"7", ErrorCategory.COMPONENT)
        self.assertIn("Extra text", exc.message)

    def test_hemisphere_at_both_ends(self):
        exc = self.assertCategory("N20N", ErrorCategory.HEMISPHERE)
        self.assertIn("Repeated", exc.message)
        exc = self.assertCategory("N20S", ErrorCategory.HEMISPHERE)
        self.assertIn("Contradictory", exc.message)

    def test_empty(self):
        for text in ["", "   ", "N", "-", "E+"]:
            with self.subTest(text=text):
                self.assertCategory(text, ErrorCategory.EMPTY)

    def test_fragment_reported(self):
        """The offending fragment travels with the error."""
        exc = self.assertCategory("N4d-5'", ErrorCategory.SYNTAX)
        self.assertEqual(exc.fragment, "4d-5'")
        self.assertIn("4d-5'", str(exc))


class TestDecodeLatLon(unittest.TestCase):
    """Tests for decode_lat_lon function."""

    def test_designators(self):
        self.assertEqual(decode_lat_lon("N20", "E30"), (20.0, 30.0))
        self.assertEqual(decode_lat_lon("E30", "N20"), (20.0, 30.0))
        self.assertEqual(decode_lat_lon("30W", "20S"), (-20.0, -30.0))

    def test_one_designator_decides(self):
        """The undesignated string takes the other axis."""
        self.assertEqual(decode_lat_lon("30", "N20"), (20.0, 30.0))
        self.assertEqual(decode_lat_lon("W30", "20"), (20.0, -30.0))

    def test_default_order(self):
        self.assertEqual(decode_lat_lon("20", "30"), (20.0, 30.0))

    def test_swap(self):
        self.assertEqual(decode_lat_lon("20", "30", swap_lat_lon=True), (30.0, 20.0))

    def test_swap_ignored_with_designators(self):
        self.assertEqual(decode_lat_lon("N20", "E30", swap_lat_lon=True), (20.0, 30.0))

    def test_both_latitudes(self):
        with self.assertRaises(MalformedInputError) as ctx:
            decode_lat_lon("N20", "S30")
        self.assertIn("latitudes", ctx.exception.message)
        self.assertEqual(ctx.exception.category, ErrorCategory.HEMISPHERE)

    def test_both_longitudes(self):
        with self.assertRaises(MalformedInputError) as ctx:
            decode_lat_lon("E20", "W30")
        self.assertIn("longitudes", ctx.exception.message)

    def test_latitude_range(self):
        self.assertEqual(decode_lat_lon("90", "0"), (90.0, 0.0))
        self.assertEqual(decode_lat_lon("-90", "0"), (-90.0, 0.0))
        with self.assertRaises(MalformedInputError) as ctx:
            decode_lat_lon("90.5", "0")
        self.assertEqual(ctx.exception.category, ErrorCategory.RANGE)
        with self.assertRaises(MalformedInputError):
            decode_lat_lon("S91", "0")

    def test_longitude_range(self):
        with self.assertRaises(MalformedInputError) as ctx:
            decode_lat_lon("0", "540")
        self.assertEqual(ctx.exception.category, ErrorCategory.RANGE)
        with self.assertRaises(MalformedInputError):
            decode_lat_lon("0", "-540.5")

    def test_longitude_reduced(self):
        self.assertEqual(decode_lat_lon("0", "-540"), (0.0, -180.0))
        self.assertEqual(decode_lat_lon("0", "180"), (0.0, -180.0))
        self.assertEqual(decode_lat_lon("0", "190"), (0.0, -170.0))
        self.assertEqual(decode_lat_lon("0", "539"), (0.0, 179.0))

    def test_malformed_member(self):
        with self.assertRaises(MalformedInputError):
            decode_lat_lon("N20", "4::5")


class TestDecodeAngle(unittest.TestCase):
    """Tests for decode_angle function."""

    def test_plain_angle(self):
        self.assertAlmostEqual(decode_angle("20d30'"), 20.5, places=12)
        self.assertEqual(decode_angle("-725"), -725.0)

    def test_hemisphere_rejected(self):
        for text in ["20N", "S20", "E20", "20w"]:
            with self.subTest(text=text):
                with self.assertRaises(MalformedInputError) as ctx:
                    decode_angle(text)
                self.assertEqual(ctx.exception.category, ErrorCategory.HEMISPHERE)


class TestDecodeAzimuth(unittest.TestCase):
    """Tests for decode_azimuth function."""

    def test_reduced(self):
        self.assertEqual(decode_azimuth("270"), -90.0)
        self.assertEqual(decode_azimuth("-540"), -180.0)
        self.assertEqual(decode_azimuth("539.5"), 179.5)
        self.assertAlmostEqual(decode_azimuth("45d30'"), 45.5, places=12)

    def test_east_west(self):
        self.assertEqual(decode_azimuth("90W"), -90.0)
        self.assertEqual(decode_azimuth("E90"), 90.0)

    def test_latitude_designator_rejected(self):
        with self.assertRaises(MalformedInputError) as ctx:
            decode_azimuth("N90")
        self.assertEqual(ctx.exception.category, ErrorCategory.HEMISPHERE)

    def test_range(self):
        for text in ["540", "-540.1", "720W"]:
            with self.subTest(text=text):
                with self.assertRaises(MalformedInputError) as ctx:
                    decode_azimuth(text)
                self.assertEqual(ctx.exception.category, ErrorCategory.RANGE)


class TestHelpers(unittest.TestCase):
    """Tests for dms_to_dd and normalize_angle."""

    def test_dms_to_dd(self):
        self.assertAlmostEqual(dms_to_dd(20, 30, 40.5), 20.51125, places=12)
        self.assertAlmostEqual(dms_to_dd(-3, -20), -(3 + 20 / 60), places=12)
        self.assertEqual(dms_to_dd(7), 7)

    def test_normalize_angle(self):
        self.assertEqual(normalize_angle(180), -180)
        self.assertEqual(normalize_angle(-180), -180)
        self.assertEqual(normalize_angle(-181), 179)
        self.assertEqual(normalize_angle(45), 45)


if __name__ == '__main__':
    unittest.main()
