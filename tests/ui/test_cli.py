"""
Tests for ui/cli.py and ui/output.py - the command-line driver.

stdout carries only the suggestion; diagnostics go to stderr.
"""

import unittest
from unittest.mock import patch

from typer.testing import CliRunner

from terminal_ai.core.configs import AdapterConfig
from terminal_ai.core.suggestion import Suggestion
from terminal_ai.ui import cli
from terminal_ai.ui.output import encode_line, format_suggestion


def _make_runner():
    """CliRunner that keeps stderr out of result.stdout."""
    try:
        return CliRunner(mix_stderr=False)
    except TypeError:
        # click 8.2+ always captures stderr separately
        return CliRunner()


class TestFormatSuggestion(unittest.TestCase):
    """Test cases for output formatting."""

    def test_plain(self):
        self.assertEqual(format_suggestion(Suggestion("ls -la")), "ls -la")

    def test_json_is_compact(self):
        self.assertEqual(
            format_suggestion(Suggestion("list files"), json_output=True),
            '{"command":"list files"}',
        )

    def test_json_escapes_quotes(self):
        self.assertEqual(
            format_suggestion(Suggestion('echo "hi"'), json_output=True),
            '{"command":"echo \\"hi\\""}',
        )

    def test_encode_line_restores_escaped_bytes(self):
        self.assertEqual(encode_line("caf\u00e9 \udcff"), b"caf\xc3\xa9 \xff")

    def test_encode_line_replaces_lone_surrogates(self):
        self.assertEqual(encode_line("a\ud800b"), b"a?b")


class TestCli(unittest.TestCase):
    """Test cases for the CLI entry point."""

    def setUp(self):
        self.runner = _make_runner()

    def tearDown(self):
        import logging

        logging.getLogger("terminal_ai").handlers.clear()

    def _invoke(self, args, config):
        with patch.object(cli, "load_config", return_value=config):
            return self.runner.invoke(cli.app, args)

    def test_no_arguments_exits_1_without_output(self):
        result = self._invoke([], AdapterConfig(offline=True))

        self.assertEqual(result.exit_code, 1)
        self.assertEqual(result.stdout, "")

    def test_offline_plain_output(self):
        result = self._invoke(["list", "files"], AdapterConfig(offline=True))

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "list files\n")

    def test_offline_json_output(self):
        result = self._invoke(["list files"], AdapterConfig(offline=True, json_output=True))

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, '{"command":"list files"}\n')

    def test_dash_words_are_part_of_the_query(self):
        result = self._invoke(["ls", "-la", "--color"], AdapterConfig(offline=True))

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "ls -la --color\n")

    def test_missing_credential_falls_back_with_exit_0(self):
        result = self._invoke(["list", "files"], AdapterConfig(api_key=""))

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "list files\n")
        self.assertIn("[terminal-ai] Error: GEMINI_API_KEY", result.stderr)

    def test_debug_offline_notice_goes_to_stderr(self):
        result = self._invoke(["list", "files"], AdapterConfig(offline=True, debug=True))

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, "list files\n")
        self.assertIn("[terminal-ai] offline mode enabled", result.stderr)

    def test_debug_missing_credential_goes_to_stderr(self):
        result = self._invoke(
            ["list", "files"], AdapterConfig(api_key="", debug=True, json_output=True)
        )

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, '{"command":"list files"}\n')
        self.assertIn("[terminal-ai] Error: GEMINI_API_KEY", result.stderr)

    def test_offline_without_debug_is_silent_on_stderr(self):
        result = self._invoke(["list", "files"], AdapterConfig(offline=True))

        self.assertEqual(result.stderr, "")

    def test_undecodable_argument_bytes_are_echoed_unchanged(self):
        # "\udcff" is how Python decodes the raw argv byte 0xff
        result = self._invoke(["list \udcff files"], AdapterConfig(offline=True))

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout_bytes, b"list \xff files\n")

    def test_uses_generator_result(self):
        from terminal_ai.core.suggestion import Suggested

        with patch.object(cli, "generate_suggestion", return_value=Suggested("ls -la")) as generate:
            result = self._invoke(["list", "files"], AdapterConfig(api_key="k", json_output=True))

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout, '{"command":"ls -la"}\n')
        self.assertEqual(generate.call_args[0][0], "list files")


class TestConfigureLogging(unittest.TestCase):
    """Test cases for stderr diagnostics."""

    def tearDown(self):
        import logging

        logging.getLogger("terminal_ai").handlers.clear()

    def test_debug_level(self):
        import logging

        cli.configure_logging(AdapterConfig(debug=True))
        logger = logging.getLogger("terminal_ai")

        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertFalse(logger.propagate)

    def test_quiet_by_default_and_idempotent(self):
        import logging

        cli.configure_logging(AdapterConfig())
        cli.configure_logging(AdapterConfig())
        logger = logging.getLogger("terminal_ai")

        self.assertEqual(logger.level, logging.WARNING)
        self.assertEqual(len(logger.handlers), 1)


if __name__ == "__main__":
    unittest.main()
