import io
import os
import tempfile
import unittest

from submitter_pivot.exceptions import ErrorKind
from submitter_pivot.validation import (
    FieldValidator,
    FileValidator,
    Severity,
    ValidationEngine,
    check_file,
    check_stream,
)

VALID_PIVOT = (
    ",2023-01,2023-02,2023-03\n"
    "basil,3,0,12\n"
    "MarkEWaite,1,5,0\n"
    "daniel-beck,0,0,2\n"
)


def check_text(text, verbose=False):
    return check_stream(io.StringIO(text), source='pivot.csv', verbose=verbose)


def first_error(results):
    return next(r for r in results if r.severity == Severity.ERROR)


class TestValidTables(unittest.TestCase):

    def test_valid_pivot(self):
        is_valid, results = check_text(VALID_PIVOT)

        self.assertTrue(is_valid)
        self.assertFalse(any(r.severity == Severity.ERROR for r in results))

    def test_header_only(self):
        is_valid, _ = check_text(",2023-01,2023-02\n")
        self.assertTrue(is_valid)

    def test_signed_counts_are_accepted(self):
        is_valid, _ = check_text(",2023-01,2023-02\nbasil,+3,-2\n")
        self.assertTrue(is_valid)

    def test_counts_have_no_range_limit(self):
        is_valid, _ = check_text(",2023-01\nbasil,123456789012345678901234567890\n")
        self.assertTrue(is_valid)

    def test_permissive_identifiers(self):
        """Hyphen leading, trailing or doubled names exist in the real datasets."""
        for name in ['-basil', 'basil-', 'bas--il', '-', 'a' * 39]:
            with self.subTest(name=name):
                is_valid, _ = check_text(f",2023-01\n{name},1\n")
                self.assertTrue(is_valid)

    def test_blank_lines_are_ignored(self):
        is_valid, _ = check_text(",2023-01\n\nbasil,1\n\n")
        self.assertTrue(is_valid)

    def test_verbose_reports_passed_checks(self):
        is_valid, results = check_text(VALID_PIVOT, verbose=True)
        messages = [r.message for r in results if r.severity == Severity.INFO]

        self.assertTrue(is_valid)
        self.assertIn('Number of columns defined in header: 4', messages)
        self.assertIn('Number of data columns match header columns', messages)
        self.assertTrue(any('(3 data records)' in m for m in messages))

    def test_quiet_mode_reports_nothing_on_success(self):
        _, results = check_text(VALID_PIVOT)
        self.assertEqual(results, [])


class TestMalformedHeader(unittest.TestCase):

    def test_non_empty_first_cell(self):
        is_valid, results = check_text("Submitter,2023-01\nbasil,1\n")

        self.assertFalse(is_valid)
        error = first_error(results)
        self.assertEqual(error.kind, ErrorKind.MALFORMED_HEADER)
        self.assertEqual(error.location['column'], 0)

    def test_bad_period_labels(self):
        for label in ['23-01', '2023-1', 'blaah']:
            with self.subTest(label=label):
                is_valid, results = check_text(f",2023-01,{label}\nbasil,1,2\n")

                self.assertFalse(is_valid)
                error = first_error(results)
                self.assertEqual(error.kind, ErrorKind.MALFORMED_HEADER)
                self.assertEqual(error.location['column'], 2)
                self.assertIn(label, error.message)

    def test_loose_period_labels_are_accepted(self):
        # Header labels only need to contain 20YY-MM text
        for label in ['2023-13', '2005-01', '2023-00', '2023-01x', 'from 2023-01']:
            with self.subTest(label=label):
                is_valid, results = check_text(f",{label}\nbasil,1\n")

                self.assertTrue(is_valid)
                self.assertFalse([r for r in results if r.severity == Severity.ERROR])

    def test_empty_input(self):
        is_valid, results = check_text("")

        self.assertFalse(is_valid)
        self.assertEqual(first_error(results).kind, ErrorKind.MALFORMED_HEADER)


class TestColumnCountMismatch(unittest.TestCase):

    def test_short_row(self):
        is_valid, results = check_text(",2023-01,2023-02\nbasil,1,2\njglick,1\n")

        self.assertFalse(is_valid)
        error = first_error(results)
        self.assertEqual(error.kind, ErrorKind.COLUMN_COUNT_MISMATCH)
        self.assertEqual(error.location['line'], 3)

    def test_long_row(self):
        is_valid, results = check_text(",2023-01\nbasil,1,2\n")

        self.assertFalse(is_valid)
        self.assertEqual(first_error(results).kind, ErrorKind.COLUMN_COUNT_MISMATCH)

    def test_detected_before_field_checks(self):
        is_valid, results = check_text(",2023-01\nbad_name,x\nbasil,1,2\n")

        self.assertFalse(is_valid)
        self.assertEqual(first_error(results).kind, ErrorKind.COLUMN_COUNT_MISMATCH)


class TestFieldErrors(unittest.TestCase):

    def test_invalid_identifier(self):
        for name in ['bad_name', 'with space', 'a' * 40, 'dot.name']:
            with self.subTest(name=name):
                is_valid, results = check_text(f",2023-01\nbasil,1\n{name},2\n")

                self.assertFalse(is_valid)
                error = first_error(results)
                self.assertEqual(error.kind, ErrorKind.INVALID_IDENTIFIER)
                self.assertEqual(error.location['line'], 3)
                self.assertEqual(error.location['column'], 0)

    def test_empty_identifier(self):
        is_valid, results = check_text(",2023-01\n,2\n")

        self.assertFalse(is_valid)
        self.assertEqual(first_error(results).kind, ErrorKind.INVALID_IDENTIFIER)

    def test_first_data_row_is_checked(self):
        is_valid, _ = check_text(",2023-01\nbad_name,1\n")
        self.assertFalse(is_valid)

    def test_invalid_count(self):
        for value in ['abc', '1.5', ' 3', '', '1_000', '0x10']:
            with self.subTest(value=value):
                is_valid, results = check_text(f",2023-01,2023-02\nbasil,1,{value}\n")

                self.assertFalse(is_valid)
                error = first_error(results)
                self.assertEqual(error.kind, ErrorKind.INVALID_COUNT)
                self.assertEqual(error.location['line'], 2)
                self.assertEqual(error.location['column'], 2)

    def test_stops_at_first_failure(self):
        _, results = check_text(",2023-01,2023-02\nbasil,x,y\nbad_name,1,1\n")
        errors = [r for r in results if r.severity == Severity.ERROR]

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].context, {'value': 'x'})


class TestValidationEngine(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)

    def write(self, name, content):
        path = os.path.join(self.tmp_dir.name, name)
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        return path

    def test_check_file(self):
        is_valid, _ = check_file(self.write('pivot.csv', VALID_PIVOT))
        self.assertTrue(is_valid)

    def test_check_file_failure_location(self):
        path = self.write('pivot.csv', ",2023-01\nbasil,many\n")
        is_valid, results = check_file(path)

        self.assertFalse(is_valid)
        self.assertEqual(first_error(results).location['file'], path)

    def test_engine_keeps_loaded_table(self):
        engine = ValidationEngine(FileValidator(), FieldValidator())
        engine.validate_file(self.write('pivot.csv', VALID_PIVOT))

        self.assertTrue(engine.is_valid)
        self.assertEqual(engine.table.periods, ['2023-01', '2023-02', '2023-03'])
        self.assertEqual(len(engine.table.data_rows), 3)

    def test_engine_without_field_layer(self):
        engine = ValidationEngine()
        engine.validate_stream(io.StringIO(",2023-01\nbad_name,1\n"))

        self.assertTrue(engine.is_valid)

    def test_no_table_on_failure(self):
        engine = ValidationEngine(FileValidator(), FieldValidator())
        engine.validate_stream(io.StringIO("x,2023-01\n"))

        self.assertFalse(engine.is_valid)
        self.assertIsNone(engine.table)
        self.assertEqual(len(engine.get_errors()), 1)

    def test_custom_delimiter(self):
        path = self.write('pivot.tsv', "\t2023-01\nbasil\t4\n")
        is_valid, _ = check_file(path, delimiter='\t')

        self.assertTrue(is_valid)
