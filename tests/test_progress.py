import io
import unittest

from xidgen.progress import TerminalProgress, format_count, format_progress, generate_prog_bar


class TestProgress(unittest.TestCase):
    def test_format_count(self):
        self.assertTrue(format_count("Indexing code points", 131482).endswith(
            "Indexing code points: 131,482"))

    def test_format_progress(self):
        msg = format_progress("Generating lookup table", 25194, 25194)
        self.assertIn("100%", msg)
        self.assertTrue(msg.endswith("25,194/25,194"))

    def test_bar_width(self):
        self.assertEqual(generate_prog_bar(0, 1, 2), "")
        self.assertEqual(len(generate_prog_bar(10, 5, 10)), 10)
        self.assertEqual(generate_prog_bar(4, 4, 4), "████")

    def test_silent_when_not_a_tty(self):
        stream = io.StringIO()
        progress = TerminalProgress(stream)
        progress.indexing(10)
        progress.packing(1, 2)
        progress.finish()
        self.assertEqual(stream.getvalue(), "")
