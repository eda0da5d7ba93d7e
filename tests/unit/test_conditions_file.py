"""Tests for reading and writing conditions files."""

import shutil
import tempfile
import unittest

from pathlib import Path

from pbrtremodel.conditions import ConditionTable
from pbrtremodel.conditions.conditions_file import format_cell, parse_cell
from pbrtremodel.errors import ConditionFileError


class TestParseCell(unittest.TestCase):
    """Cell text becomes typed values."""

    def test_numbers(self):
        self.assertEqual(parse_cell("1024"), 1024)
        self.assertIsInstance(parse_cell("1024"), int)
        self.assertEqual(parse_cell("2.8"), 2.8)
        self.assertEqual(parse_cell("-1e3"), -1000.0)

    def test_vectors(self):
        self.assertEqual(parse_cell("[4 4]"), (4, 4))
        self.assertEqual(parse_cell("0 0"), (0, 0))
        self.assertEqual(parse_cell("[1.5, -2]"), (1.5, -2))
        self.assertEqual(parse_cell("[7]"), (7,))

    def test_strings_and_empty(self):
        self.assertEqual(parse_cell("dgauss.22deg.50.0mm"), "dgauss.22deg.50.0mm")
        self.assertEqual(parse_cell(" true "), "true")
        self.assertIsNone(parse_cell(""))
        self.assertIsNone(parse_cell("   "))

    def test_text_cells(self):
        self.assertEqual(parse_cell(" 007 ", as_text=True), "007")
        self.assertEqual(parse_cell("[4 4]", as_text=True), "[4 4]")
        self.assertIsNone(parse_cell("", as_text=True))

    def test_format_cell(self):
        self.assertEqual(format_cell((4, 4)), "[4 4]")
        self.assertEqual(format_cell(None), "")
        self.assertEqual(format_cell(True), "true")
        self.assertEqual(format_cell(2.8), "2.8")


class TestConditionTable(unittest.TestCase):
    """Test ConditionTable file handling."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_data_dir = Path(__file__).parent.parent / "test_data"
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        """Clean up test fixtures."""
        if self.temp_dir.exists():
            shutil.rmtree(self.temp_dir)

    def test_read_file(self):
        table = ConditionTable.from_file(self.test_data_dir / "conditions.txt")

        self.assertEqual(len(table), 3)
        self.assertEqual(table.names[0], "imageName")
        self.assertEqual(
            [row.name for row in table],
            ["001_lens", "002_lightfield", "003_pinhole_depth"],
        )

        first = table[0]
        self.assertEqual(first["lens"], "dgauss.22deg.50.0mm")
        self.assertEqual(first["pixelSamples"], 1024)
        self.assertEqual(first["microlens"], (0, 0))
        self.assertAlmostEqual(first["fNumber"], 2.8)

        pinhole = table[2]
        self.assertEqual(pinhole.index, 2)
        self.assertIsNone(pinhole["lens"])
        self.assertIsNone(pinhole.get("pixelSamples"))
        self.assertEqual(pinhole["mode"], "depth")

    def test_round_trip_file(self):
        table = ConditionTable.from_file(self.test_data_dir / "conditions.txt")
        path = table.write(self.temp_dir / "copy" / "conditions.txt")
        reread = ConditionTable.from_file(path)

        self.assertEqual(reread.names, table.names)
        for original, copy in zip(table, reread):
            self.assertEqual(dict(original), dict(copy))

    def test_identifier_columns_keep_text(self):
        text = "imageName\ttype\tfNumber\n007\tpinhole\t8\n"
        path = self.temp_dir / "padded.txt"
        path.write_text(text)

        table = ConditionTable.from_file(path)
        self.assertEqual(table[0].name, "007")
        self.assertEqual(table[0]["fNumber"], 8)

        copy = table.write(self.temp_dir / "copy.txt")
        self.assertEqual(copy.read_text(), text)
        self.assertEqual(ConditionTable.from_file(copy)[0].name, "007")

    def test_from_records(self):
        table = ConditionTable.from_records(
            [{"imageName": "a", "type": "pinhole"}, {"imageName": "b", "fog": "true"}]
        )
        self.assertEqual(table.names, ["imageName", "type", "fog"])
        self.assertIsNone(table[0]["fog"])
        self.assertEqual(table[1].index, 1)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            ConditionTable.from_file(self.temp_dir / "missing.txt")

    def test_empty_file(self):
        path = self.temp_dir / "empty.txt"
        path.write_text("# only a comment\n\n")
        with self.assertRaises(ConditionFileError):
            ConditionTable.from_file(path)

    def test_row_wider_than_header(self):
        path = self.temp_dir / "wide.txt"
        path.write_text("imageName\ttype\na\tpinhole\textra\n")
        with self.assertRaises(ConditionFileError):
            ConditionTable.from_file(path)

    def test_short_row_is_padded(self):
        path = self.temp_dir / "short.txt"
        path.write_text("imageName\ttype\tfog\na\tpinhole\n")
        table = ConditionTable.from_file(path)
        self.assertIsNone(table[0]["fog"])

    def test_duplicate_names(self):
        path = self.temp_dir / "dup.txt"
        path.write_text("type\ttype\na\tb\n")
        with self.assertRaises(ConditionFileError):
            ConditionTable.from_file(path)


if __name__ == "__main__":
    unittest.main()
