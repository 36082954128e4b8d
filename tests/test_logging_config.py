"""
Tests for the logging configuration module.
"""
import io
import unittest
import logging
import os
import tempfile
from unittest.mock import patch, MagicMock

from nouncount.logging_config import setup_logging, log_with_context


class TestSetupLogging(unittest.TestCase):
    """Test suite for the setup_logging() function."""

    def setUp(self):
        """Clear root logger handlers before each test."""
        root_logger = logging.getLogger()
        self._saved_level = root_logger.level
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        with tempfile.NamedTemporaryFile(delete=False) as tmp_file:
            self.log_file = tmp_file.name

    def tearDown(self):
        """Clean up handlers after each test."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
        root_logger.setLevel(self._saved_level)
        if os.path.exists(self.log_file):
            os.remove(self.log_file)

    def test_setup_logging_console_only_without_log_file(self):
        handlers = setup_logging()

        self.assertEqual(len(handlers), 1)
        self.assertNotIsInstance(handlers[0], logging.FileHandler)
        self.assertEqual(logging.getLogger().handlers, handlers)

    def test_setup_logging_creates_file_and_console_handlers(self):
        setup_logging(log_file=self.log_file)

        root_logger = logging.getLogger()
        file_handlers = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]
        stream_handlers = [
            h for h in root_logger.handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(len(stream_handlers), 1)

    def test_setup_logging_sets_warning_level_by_default(self):
        setup_logging()
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_setup_logging_sets_debug_level_when_debug_true(self):
        setup_logging(level=logging.WARNING, debug=True)
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_setup_logging_uses_enhanced_format_in_debug_mode(self):
        setup_logging(log_file=self.log_file, debug=True)
        for handler in logging.getLogger().handlers:
            format_string = handler.formatter._fmt
            self.assertIn("%(filename)s", format_string)
            self.assertIn("%(lineno)d", format_string)

    def test_setup_logging_uses_simple_format_in_normal_mode(self):
        setup_logging(log_file=self.log_file, debug=False)
        for handler in logging.getLogger().handlers:
            format_string = handler.formatter._fmt
            self.assertNotIn("%(filename)s", format_string)

    def test_setup_logging_writes_run_separator_to_stream(self):
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)

        output = stream.getvalue()
        self.assertIn("=" * 80, output)
        self.assertIn("nouncount run started", output)

    def test_setup_logging_writes_run_separator_to_file(self):
        setup_logging(log_file=self.log_file, level=logging.INFO, stream=io.StringIO())
        for handler in logging.getLogger().handlers:
            handler.flush()

        with open(self.log_file, 'r', encoding='utf-8') as f:
            log_content = f.read()

        self.assertIn("nouncount run started", log_content)

    def test_setup_logging_quiet_by_default(self):
        """Tests that the run separator is below the default WARNING level."""
        stream = io.StringIO()
        setup_logging(stream=stream)
        self.assertEqual(stream.getvalue(), "")

    def test_setup_logging_clears_existing_handlers(self):
        """Tests that repeated setup does not stack handlers."""
        logging.getLogger().addHandler(logging.StreamHandler())
        setup_logging(log_file=self.log_file)
        for handler in logging.getLogger().handlers:
            handler.close()
        setup_logging(log_file=self.log_file)
        self.assertEqual(len(logging.getLogger().handlers), 2)


class TestLogWithContext(unittest.TestCase):
    """Test suite for the log_with_context() function."""

    @patch('nouncount.logging_config.logging.getLogger')
    def test_log_with_context_logs_main_message(self, mock_get_logger):
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger

        log_with_context("Parsed sentence", level=logging.INFO)

        mock_logger.log.assert_called_once_with(logging.INFO, "Parsed sentence")

    def test_log_with_context_uses_given_logger(self):
        mock_logger = MagicMock()
        mock_logger.isEnabledFor.return_value = True

        log_with_context("Parsed sentence", context={"content": "the dog"}, logger=mock_logger)

        mock_logger.log.assert_called_once_with(logging.DEBUG, "Parsed sentence")
        self.assertIn("the dog", mock_logger.debug.call_args[0][0])

    def test_log_with_context_skips_context_when_debug_disabled(self):
        mock_logger = MagicMock()
        mock_logger.isEnabledFor.return_value = False

        log_with_context("Message", context={"content": "x"}, level=logging.INFO, logger=mock_logger)

        mock_logger.log.assert_called_once()
        self.assertEqual(mock_logger.debug.call_count, 0)

    def test_log_with_context_truncates_long_values(self):
        mock_logger = MagicMock()
        mock_logger.isEnabledFor.return_value = True

        log_with_context("Message", context={"content": "x" * 300}, logger=mock_logger)

        last_debug_message = mock_logger.debug.call_args_list[-1][0][0]
        self.assertIn("...", last_debug_message)
        self.assertLess(len(last_debug_message), 250)

    def test_log_with_context_respects_max_length(self):
        mock_logger = MagicMock()
        mock_logger.isEnabledFor.return_value = True

        log_with_context("Message", context={"content": "abcdef"}, logger=mock_logger, max_length=3)

        mock_logger.debug.assert_called_once_with("  └─ content: abc...")


if __name__ == '__main__':
    unittest.main()
