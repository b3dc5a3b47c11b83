# SPDX-License-Identifier: LGPL-3.0-or-later
import subprocess
import unittest
from unittest.mock import MagicMock, Mock, patch

from stackvm.core.exceptions import ToolInvocationError
from stackvm.core.utils import U


class TestUtilsCommandExecution(unittest.TestCase):
    """Test utility command execution."""

    def setUp(self):
        self.logger = Mock()

    @patch('subprocess.run')
    def test_run_cmd_executes_command(self, mock_run):
        mock_run.return_value = Mock(returncode=0, stdout="output", stderr="")

        result = U.run_cmd(self.logger, ["echo", "test"])

        self.assertTrue(mock_run.called)
        self.assertEqual(result.returncode, 0)

    @patch('subprocess.run')
    def test_run_cmd_captures_output(self, mock_run):
        mock_run.return_value = Mock(returncode=0, stdout="test output", stderr="")

        result = U.run_cmd(self.logger, ["echo", "test"], capture=True)

        self.assertEqual(result.stdout, "test output")
        self.assertTrue(mock_run.call_args[1]["capture_output"])

    @patch('subprocess.run')
    def test_run_cmd_check_false_returns_failure(self, mock_run):
        mock_run.return_value = Mock(returncode=1, stdout="", stderr="error")

        result = U.run_cmd(self.logger, ["false"], check=False)

        self.assertEqual(result.returncode, 1)

    @patch('subprocess.run')
    def test_run_cmd_reraises_without_fatal(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(5, ["x"], output="", stderr="bad")

        with self.assertRaises(subprocess.CalledProcessError):
            U.run_cmd(self.logger, ["x"])

    @patch('subprocess.run')
    def test_run_cmd_fatal_wraps_called_process_error(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(5, ["x"], output="out", stderr="bad")

        with self.assertRaises(ToolInvocationError) as ctx:
            U.run_cmd(self.logger, ["x"], fatal=True)

        self.assertEqual(ctx.exception.code, 5)
        self.assertEqual(ctx.exception.output, "out\nbad")
        self.logger.error.assert_called()

    @patch('subprocess.run', side_effect=FileNotFoundError(2, "missing"))
    def test_run_cmd_missing_binary(self, _mock_run):
        with self.assertRaises(ToolInvocationError) as ctx:
            U.run_cmd(self.logger, ["nope"], fatal=True)

        self.assertEqual(ctx.exception.code, 127)

    @patch('subprocess.run', side_effect=subprocess.TimeoutExpired(["slow"], 5))
    def test_run_cmd_timeout(self, _mock_run):
        with self.assertRaises(ToolInvocationError) as ctx:
            U.run_cmd(self.logger, ["slow"], timeout=5, fatal=True)

        self.assertEqual(ctx.exception.code, 124)

    @patch('subprocess.Popen')
    def test_run_cmd_stream_logs_each_line(self, mock_popen):
        proc = MagicMock()
        proc.stdout = iter(["Bringing machine 'default' up...\n", "==> default: Booting VM...\n"])
        proc.wait.return_value = 0
        mock_popen.return_value = proc

        cp = U.run_cmd(self.logger, ["vagrant", "up"], stream=True)

        self.assertEqual(cp.returncode, 0)
        self.assertIn("Booting VM", cp.stdout)
        self.logger.info.assert_any_call("==> default: Booting VM...")

    @patch('subprocess.Popen')
    def test_run_cmd_stream_nonzero_with_check(self, mock_popen):
        proc = MagicMock()
        proc.stdout = iter(["fail\n"])
        proc.wait.return_value = 9
        mock_popen.return_value = proc

        with self.assertRaises(ToolInvocationError) as ctx:
            U.run_cmd(self.logger, ["vagrant", "up"], stream=True, fatal=True)

        self.assertEqual(ctx.exception.code, 9)

    def test_which_returns_none_for_missing(self):
        self.assertIsNone(U.which("nonexistent-command-xyz123"))

    def test_pretty_cmd_quotes(self):
        self.assertEqual(U._pretty_cmd(["echo", "a b"]), "echo 'a b'")
