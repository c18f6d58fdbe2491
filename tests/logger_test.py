import io
import os
import sys
import tempfile
import unittest

from grincodec.logger import (
    Logger,
    Log,
    LogLevel,
    CodingLog,
    FrequencyAnalysisLog,
    EncodingProgressStep,
)


class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123)

    def test_string_log_is_recorded_as_info(self):
        self.logger.log("hello")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].level, LogLevel.INFO)
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_warning_logging(self):
        self.logger.log(Log("WarningTest", LogLevel.WARNING, "This is a warning"))
        self.assertEqual(len(self.logger.logs), 1)
        self.assertIn("This is a warning", self.captured_output.getvalue())

    def test_error_logging(self):
        self.logger.log(Log("ErrorTest", LogLevel.ERROR, "This is an error"))
        self.assertEqual(len(self.logger.logs), 1)
        self.assertIn("This is an error", self.captured_output.getvalue())

    def test_progress_is_counted_and_printed_on_interval(self):
        self.logger.encoding_step_interval_count = 2
        self.logger.log(EncodingProgressStep("Encoding chunk"))
        self.assertEqual(self.captured_output.getvalue(), "")
        self.logger.log(EncodingProgressStep("Encoding chunk"))
        self.assertIn("Encoding chunk (2)", self.captured_output.getvalue())
        self.assertEqual(self.logger.encoding_progress_count, 2)
        self.assertEqual(len(self.logger.logs), 0)

    def test_get_logs_by_type(self):
        self.logger.log(CodingLog(32, 7))
        self.logger.log(FrequencyAnalysisLog(4, 3))
        coding_logs = self.logger.get_logs(CodingLog)
        self.assertEqual(len(coding_logs), 1)
        self.assertEqual(coding_logs[0].encoded_size, 7)
        self.assertEqual(len(self.logger.get_logs()), 2)
        self.logger.clear_logs()
        self.assertEqual(self.logger.get_logs(), [])

    def test_save(self):
        self.logger.log(CodingLog(32, 7))
        with tempfile.TemporaryDirectory() as folder:
            path = os.path.join(folder, "log.txt")
            self.logger.save(path)
            with open(path) as f:
                content = f.read()
        self.assertIn("Symbol size: 32, Encoded size: 7", content)


if __name__ == '__main__':
    unittest.main()
