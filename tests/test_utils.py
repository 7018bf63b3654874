import os
import tempfile
import unittest

from submitter_pivot.exceptions import MissingDirectory
from submitter_pivot.utils import check_dir, is_file_valid, is_markdown_target


class TestFileHelpers(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)
        self.file_path = os.path.join(self.tmp_dir.name, 'not_a_csv.txt')
        with open(self.file_path, 'w') as f:
            f.write('junk\n')

    def test_is_file_valid(self):
        self.assertTrue(is_file_valid(self.file_path))
        self.assertFalse(is_file_valid(os.path.join(self.tmp_dir.name, 'unexistantFile.txt')))
        self.assertFalse(is_file_valid(self.tmp_dir.name))

    def test_check_dir(self):
        check_dir(os.path.join(self.tmp_dir.name, 'fle-1.txt'))
        check_dir('relative_output.md')

        with self.assertRaises(MissingDirectory) as raised:
            check_dir(os.path.join(self.tmp_dir.name, 'junkDir', 'fle-1.txt'))
        self.assertIn('junkDir', str(raised.exception))

    def test_is_markdown_target(self):
        cases = {
            'myfile.md': True,
            'myfile.mD': True,
            'dir/myfile.MD': True,
            'myfile.csv': False,
            'myfile': False,
            'myfile.': False,
            'myfile.md.csv': False,
        }
        for filename, expected in cases.items():
            with self.subTest(filename=filename):
                self.assertEqual(is_markdown_target(filename), expected)
