import unittest

from xidgen.base import DOMAIN_MAX, ParseError
from xidgen.ranges import CodePointRange, build_membership, iter_ranges, parse_line

SAMPLE = """\
# DerivedCoreProperties excerpt
0041..005A    ; XID_Start # L&  [26] LATIN CAPITAL LETTER A..LATIN CAPITAL LETTER Z
0061..007A    ; XID_Start # L&  [26] LATIN SMALL LETTER A..LATIN SMALL LETTER Z
00AA          ; XID_Start # Lo       FEMININE ORDINAL INDICATOR

3134A         ; XID_Start # Lo       CJK UNIFIED IDEOGRAPH-3134A
"""


class TestParseLine(unittest.TestCase):
    def test_single_point(self):
        self.assertEqual(parse_line("00AA ; XID_Start # Lo"), CodePointRange(0xAA, 0xAA))

    def test_range(self):
        self.assertEqual(parse_line("0041..005A ; XID_Start"), CodePointRange(0x41, 0x5A))

    def test_whitespace_is_stripped(self):
        self.assertEqual(parse_line("  00 41 .. 00 5A\t; x"), CodePointRange(0x41, 0x5A))

    def test_no_separator(self):
        self.assertEqual(parse_line("0009"), CodePointRange(9, 9))

    def test_lowercase_hex(self):
        self.assertEqual(parse_line("ff..1ff;"), CodePointRange(0xFF, 0x1FF))

    def test_blank_and_comment_lines(self):
        self.assertIsNone(parse_line(""))
        self.assertIsNone(parse_line("   \t"))
        self.assertIsNone(parse_line("# Total code points: 131482"))

    def test_custom_separator_and_marker(self):
        r = parse_line("0041-005A | note", separator="|", range_marker="-")
        self.assertEqual(r, CodePointRange(0x41, 0x5A))

    def test_domain_max_is_accepted(self):
        self.assertEqual(parse_line("%X" % DOMAIN_MAX), CodePointRange(DOMAIN_MAX, DOMAIN_MAX))


class TestParseErrors(unittest.TestCase):
    def check(self, line, lineno=1, **kwargs):
        with self.assertRaises(ParseError) as cm:
            parse_line(line, lineno, **kwargs)
        self.assertEqual(cm.exception.lineno, lineno)
        self.assertEqual(cm.exception.line, line)
        return cm.exception

    def test_empty_after_truncation(self):
        self.check("   ; XID_Start")

    def test_prefixed_hex(self):
        self.check("0x41")

    def test_non_hex_residue(self):
        self.check("00G1 ; XID_Start", lineno=7)

    def test_signed(self):
        self.check("+41")

    def test_reversed_range(self):
        e = self.check("005A..0041")
        self.assertIn("reversed", str(e))

    def test_half_open_range(self):
        self.check("0041..")
        self.check("..0041")

    def test_double_range(self):
        self.check("0041..0050..0060")

    def test_valid_hex_beyond_domain_still_parses(self):
        self.assertEqual(parse_line("E0100..E01EF ; XID_Continue"), CodePointRange(0xE0100, 0xE01EF))


class TestBuildMembership(unittest.TestCase):
    def test_iter_ranges_skips_blank_and_comments(self):
        self.assertEqual(
            list(iter_ranges(SAMPLE)),
            [
                CodePointRange(0x41, 0x5A),
                CodePointRange(0x61, 0x7A),
                CodePointRange(0xAA, 0xAA),
                CodePointRange(DOMAIN_MAX, DOMAIN_MAX),
            ],
        )

    def test_members_are_union_of_ranges(self):
        m = build_membership(SAMPLE)
        expected = set(range(0x41, 0x5B)) | set(range(0x61, 0x7B)) | {0xAA, DOMAIN_MAX}
        self.assertEqual(set(m.members()), expected)
        self.assertEqual(len(m), DOMAIN_MAX + 1)

    def test_overlapping_ranges(self):
        m = build_membership("0000..0010\n0008..0018\n0010\n")
        self.assertEqual(set(m.members()), set(range(0, 0x19)))

    def test_progress_counts_inserted_points(self):
        seen = []
        build_membership(SAMPLE, progress=seen.append)
        self.assertEqual(seen, [26, 52, 53, 54])

    def test_error_reports_line_number(self):
        with self.assertRaises(ParseError) as cm:
            build_membership("0041\n\n00ZZ ; bad\n")
        self.assertEqual(cm.exception.lineno, 3)

    def test_empty_input(self):
        m = build_membership("")
        self.assertEqual(m.count(), 0)


class TestDomainClipping(unittest.TestCase):
    def test_range_above_domain_is_ignored(self):
        seen = []
        m = build_membership(
            "0030..0039 ; XID_Continue\n"
            "E0100..E01EF  ; XID_Continue # Mn [240] VARIATION SELECTOR-17..VARIATION SELECTOR-256\n",
            progress=seen.append,
        )
        self.assertEqual(set(m.members()), set(range(0x30, 0x3A)))
        self.assertEqual(seen, [10])

    def test_straddling_range_is_clipped(self):
        m = build_membership("30000..3FFFF ; XID_Start\n")
        self.assertEqual(set(m.members()), set(range(0x30000, DOMAIN_MAX + 1)))

    def test_clipping_to_small_domain(self):
        m = build_membership("0000..0010\n0020\n", domain_max=0xF)
        self.assertEqual(set(m.members()), set(range(0, 0x10)))
        self.assertEqual(len(m), 0x10)
