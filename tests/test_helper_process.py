import unittest
from unittest.mock import patch

from autoshow.helper.HelperProcess import HelperProcess


class TestHelperProcess(unittest.TestCase):
    """Tests for HelperProcess - show/hide via the helper's command line."""

    @patch('autoshow.helper.HelperProcess.subprocess.run')
    def test_show_runs_show_window(self, mock_run):
        HelperProcess().show()

        mock_run.assert_called_once_with(["cellwriter", "--show-window"], check=False)

    @patch('autoshow.helper.HelperProcess.subprocess.run')
    def test_hide_runs_hide_window(self, mock_run):
        HelperProcess().hide()

        mock_run.assert_called_once_with(["cellwriter", "--hide-window"], check=False)

    @patch('autoshow.helper.HelperProcess.subprocess.run')
    def test_custom_command_and_arguments(self, mock_run):
        helper = HelperProcess(command="onboard-ctl", show_args=["show"], hide_args=["hide", "--now"])

        helper.show()
        helper.hide()

        self.assertEqual(mock_run.call_args_list[0].args[0], ["onboard-ctl", "show"])
        self.assertEqual(mock_run.call_args_list[1].args[0], ["onboard-ctl", "hide", "--now"])

    @patch('autoshow.helper.HelperProcess.subprocess.run')
    def test_empty_argument_list_is_kept(self, mock_run):
        HelperProcess(show_args=[]).show()

        mock_run.assert_called_once_with(["cellwriter"], check=False)

    @patch('autoshow.helper.HelperProcess.logging')
    @patch('autoshow.helper.HelperProcess.subprocess.run', side_effect=FileNotFoundError("cellwriter"))
    def test_missing_executable_is_logged_not_raised(self, mock_run, mock_logging):
        HelperProcess().show()

        mock_logging.warning.assert_called_once()
        self.assertIn("cellwriter", mock_logging.warning.call_args.args[0])

    @patch('autoshow.helper.HelperProcess.logging')
    @patch('autoshow.helper.HelperProcess.subprocess.run')
    def test_verbose_logs_command(self, mock_run, mock_logging):
        HelperProcess(verbose=True).hide()

        mock_logging.info.assert_called_once_with("HelperProcess: running cellwriter --hide-window")


if __name__ == '__main__':
    unittest.main()
