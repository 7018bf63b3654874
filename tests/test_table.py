import io
import os
import tempfile
import unittest

from submitter_pivot.exceptions import ColumnCountMismatch, IOFailure
from submitter_pivot.table import Table, load_table, read_table


class TestTable(unittest.TestCase):

    def setUp(self):
        self.table = read_table(io.StringIO(",2023-01,2023-02\nbasil,3,12\njglick,10,0\n"))

    def test_parts(self):
        self.assertEqual(self.table.header, ['', '2023-01', '2023-02'])
        self.assertEqual(self.table.periods, ['2023-01', '2023-02'])
        self.assertEqual(self.table.column_count, 3)
        self.assertEqual(len(self.table), 3)
        self.assertEqual(self.table.data_rows[1], ['jglick', '10', '0'])

    def test_ragged_rows_are_kept(self):
        table = read_table(io.StringIO(",2023-01\nbasil\n"))

        self.assertEqual(table.rows, [['', '2023-01'], ['basil']])
        with self.assertRaises(ColumnCountMismatch):
            table.check_consistency()

    def test_to_frame(self):
        frame = self.table.to_frame()

        self.assertEqual(list(frame.columns), ['2023-01', '2023-02'])
        self.assertEqual(list(frame.index), ['basil', 'jglick'])
        self.assertEqual(frame.loc['jglick', '2023-01'], '10')

    def test_to_frame_ragged(self):
        with self.assertRaises(ColumnCountMismatch):
            Table([['', '2023-01'], ['basil', '1', '2']]).to_frame()

    def test_empty_table(self):
        table = Table()

        self.assertEqual(table.header, [])
        self.assertEqual(table.column_count, 0)


class TestLoadTable(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)

    def test_load(self):
        path = os.path.join(self.tmp_dir.name, 'pivot.csv')
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(',2023-01\r\n"basil",7\r\n')

        self.assertEqual(load_table(path).rows, [['', '2023-01'], ['basil', '7']])

    def test_missing_file(self):
        with self.assertRaises(IOFailure):
            load_table(os.path.join(self.tmp_dir.name, 'missing.csv'))
