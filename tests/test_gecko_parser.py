import unittest

from pygecko.gecko import (
    GeckoCode,
    GeckoCodeLine,
    GeckoFormatWarning,
    mark_bootstrap_codes,
    mark_enabled_codes,
    parse_codes,
)


class ParseCodesTests(unittest.TestCase):
    def test_single_code_with_creator_code_and_note(self):
        codes = parse_codes(
            ["$Infinite Health [Author]", "04000000 3C000000", "*grants invincibility"],
            True,
        )
        self.assertEqual(len(codes), 1)
        code = codes[0]
        self.assertEqual(code.name, "Infinite Health")
        self.assertEqual(code.creator, "Author")
        self.assertEqual([c.original_line for c in code.codes], ["04000000 3C000000"])
        self.assertEqual(code.codes[0].address, 0x04000000)
        self.assertEqual(code.codes[0].data, 0x3C000000)
        self.assertEqual(code.notes, ["grants invincibility"])
        self.assertTrue(code.user_defined)
        self.assertFalse(code.enabled)
        self.assertFalse(code.bootstrap_enabled)

    def test_records_keep_declaration_order_and_duplicates(self):
        codes = parse_codes(["$B", "00000001 00000002", "$A", "$B"], False)
        self.assertEqual([c.name for c in codes], ["B", "A", "B"])
        self.assertEqual(len(codes[0].codes), 1)
        self.assertEqual(codes[1].codes, [])
        self.assertTrue(all(not c.user_defined for c in codes))

    def test_header_without_brackets_has_empty_creator(self):
        code = parse_codes(["$  Moon Jump  "])[0]
        self.assertEqual(code.name, "Moon Jump")
        self.assertEqual(code.creator, "")

    def test_unbalanced_brackets_are_tokenized_not_validated(self):
        open_only = parse_codes(["$Name [Someone"])[0]
        self.assertEqual(open_only.name, "Name")
        self.assertEqual(open_only.creator, "Someone")

        close_first = parse_codes(["$Name ]x[y] z"])[0]
        self.assertEqual(close_first.name, "Name ]x")
        self.assertEqual(close_first.creator, "y")

    def test_empty_lines_are_skipped(self):
        codes = parse_codes(["", "$A", "", "*note", ""])
        self.assertEqual(len(codes), 1)
        self.assertEqual(codes[0].notes, ["note"])

    def test_note_text_is_kept_verbatim(self):
        code = parse_codes(["$A", "*  spaced out  "])[0]
        self.assertEqual(code.notes, ["  spaced out  "])

    def test_notes_and_codes_keep_their_own_order(self):
        code = parse_codes(["$A", "*one", "00000001 00000000", "*two", "00000002 00000000"])[0]
        self.assertEqual(code.notes, ["one", "two"])
        self.assertEqual([c.address for c in code.codes], [1, 2])

    def test_lines_before_any_header_are_dropped_with_warning(self):
        with self.assertWarns(GeckoFormatWarning):
            codes = parse_codes(["*orphan note", "00000001 00000002", "$A"])
        self.assertEqual(len(codes), 1)
        self.assertEqual(codes[0].notes, [])
        self.assertEqual(codes[0].codes, [])

    def test_nameless_header_is_dropped_with_its_lines(self):
        with self.assertWarns(GeckoFormatWarning):
            codes = parse_codes(["$A", "$ [nobody]", "00000001 00000002", "*lost", "$B"])
        self.assertEqual([c.name for c in codes], ["A", "B"])
        self.assertEqual(codes[0].codes, [])
        self.assertEqual(codes[1].notes, [])

    def test_empty_input(self):
        self.assertEqual(parse_codes([]), [])


class CodeLineTests(unittest.TestCase):
    def test_hex_case_and_prefix(self):
        line = GeckoCodeLine.from_line("0x8000abcd FfFfFfFf")
        self.assertEqual(line.address, 0x8000ABCD)
        self.assertEqual(line.data, 0xFFFFFFFF)
        self.assertEqual(line.original_line, "0x8000abcd FfFfFfFf")

    def test_single_token_leaves_data_zero(self):
        line = GeckoCodeLine.from_line("04000000")
        self.assertEqual(line.address, 0x04000000)
        self.assertEqual(line.data, 0)

    def test_malformed_address_zeroes_both_fields(self):
        line = GeckoCodeLine.from_line("zzzz 12345678")
        self.assertEqual((line.address, line.data), (0, 0))
        self.assertEqual(line.original_line, "zzzz 12345678")

    def test_malformed_data_is_zero(self):
        line = GeckoCodeLine.from_line("04000000 nothex")
        self.assertEqual((line.address, line.data), (0x04000000, 0))

    def test_out_of_range_address_is_zero(self):
        line = GeckoCodeLine.from_line("123456789 00000001")
        self.assertEqual((line.address, line.data), (0, 0))

    def test_extra_tokens_are_kept_in_original_line(self):
        line = GeckoCodeLine.from_line("C2000000 00000001 ; trailing")
        self.assertEqual((line.address, line.data), (0xC2000000, 1))
        self.assertEqual(line.original_line, "C2000000 00000001 ; trailing")


class MarkCodesTests(unittest.TestCase):
    def _codes(self):
        return [GeckoCode(name="A"), GeckoCode(name="B"), GeckoCode(name="A")]

    def test_mark_enabled_sets_every_equal_name(self):
        codes = mark_enabled_codes(["$A"], self._codes())
        self.assertEqual([c.enabled for c in codes], [True, False, True])
        self.assertFalse(any(c.bootstrap_enabled for c in codes))

    def test_mark_bootstrap_only_touches_bootstrap_flag(self):
        codes = mark_bootstrap_codes(["$B"], self._codes())
        self.assertEqual([c.bootstrap_enabled for c in codes], [False, True, False])
        self.assertFalse(any(c.enabled for c in codes))

    def test_lines_without_marker_are_ignored(self):
        codes = mark_enabled_codes(["", "A", "*A", "+A", "$C"], self._codes())
        self.assertFalse(any(c.enabled for c in codes))

    def test_names_match_exactly(self):
        codes = mark_enabled_codes(["$a", "$A "], self._codes())
        self.assertFalse(any(c.enabled for c in codes))


if __name__ == "__main__":
    unittest.main()
