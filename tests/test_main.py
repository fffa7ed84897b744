"""Tests for the autoshow entry script."""
import json

import pytest
from unittest.mock import MagicMock, patch

import main
from autoshow.errors import HelperWindowNotFoundError
from autoshow.settings import CONFIG_FILENAME


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / CONFIG_FILENAME
    path.write_text(json.dumps({"window_search": {"max_depth": 1}}), encoding="utf-8")
    return path


@pytest.fixture
def environment(tmp_path, config_file):
    """Patch logging setup, path resolution and the application class."""
    resolver = MagicMock()
    resolver.paths.logs_dir = tmp_path / "logs"
    resolver.get_config_path.return_value = config_file

    with patch('main.PathResolver', return_value=resolver), \
            patch('main.setup_logging') as mock_setup_logging, \
            patch('main.AutoShowApp') as MockApp:
        MockApp.return_value.run.return_value = 0
        yield {"resolver": resolver, "setup_logging": mock_setup_logging, "app_class": MockApp}


class TestParseArgs:

    def test_defaults(self):
        options = main._parse_args([])

        assert options == {"verbose": False, "detached": False, "config_path": None, "overrides": {}}

    def test_flags_and_overrides(self, tmp_path):
        options = main._parse_args([
            "-v", "--detached", f"--config={tmp_path}/custom.json",
            "--helper=onboard", "--window-class=onboard", "--depth=3", "--display=:1",
        ])

        assert options["verbose"] is True
        assert options["detached"] is True
        assert options["config_path"] == tmp_path / "custom.json"
        assert options["overrides"] == {
            ("helper", "command"): "onboard",
            ("helper", "window_class"): "onboard",
            ("window_search", "max_depth"): 3,
            ("display", "name"): ":1",
        }

    @pytest.mark.parametrize("depth", ["-1", "two", ""])
    def test_invalid_depth_rejected(self, depth):
        with pytest.raises(ValueError):
            main._parse_args([f"--depth={depth}"])


class TestMain:

    def test_normal_run_exits_zero(self, environment):
        assert main._main([]) == 0

        environment["app_class"].return_value.run.assert_called_once()
        environment["resolver"].ensure_local_dir_structure.assert_called_once()

    def test_logging_follows_flags(self, environment, tmp_path):
        main._main(["-v", "--detached"])

        environment["setup_logging"].assert_called_once_with(
            tmp_path / "logs", verbose=True, is_detached=True
        )

    def test_overrides_reach_application_config(self, environment):
        main._main(["--helper=onboard", "--depth=2"])

        config = environment["app_class"].call_args.kwargs["config"]
        assert config["helper"]["command"] == "onboard"
        assert config["window_search"]["max_depth"] == 2
        assert config["helper"]["window_class"] == "cellwriter"

    def test_explicit_config_path(self, environment, tmp_path):
        custom = tmp_path / "custom.json"
        custom.write_text(json.dumps({"display": {"name": ":5"}}), encoding="utf-8")

        main._main([f"--config={custom}"])

        config = environment["app_class"].call_args.kwargs["config"]
        assert config["display"]["name"] == ":5"
        environment["resolver"].get_config_path.assert_not_called()

    def test_missing_config_exits_one(self, environment, tmp_path):
        assert main._main([f"--config={tmp_path}/absent.json"]) == 1
        environment["app_class"].assert_not_called()

    def test_malformed_config_exits_one(self, environment, config_file):
        config_file.write_text("{", encoding="utf-8")

        assert main._main([]) == 1

    def test_startup_failure_exits_one(self, environment):
        environment["app_class"].return_value.run.side_effect = HelperWindowNotFoundError("no cellwriter")

        assert main._main([]) == 1

    def test_value_error_from_running_app_is_not_a_config_error(self, environment):
        environment["app_class"].return_value.run.side_effect = ValueError("bad state transition")

        with pytest.raises(ValueError, match="bad state transition"):
            main._main([])

    def test_keyboard_interrupt_exits_zero(self, environment):
        environment["app_class"].return_value.run.side_effect = KeyboardInterrupt

        assert main._main([]) == 0

    def test_invalid_arguments_exit_before_setup(self, environment, capsys):
        assert main._main(["--depth=x"]) == 1

        environment["setup_logging"].assert_not_called()
        assert "--depth" in capsys.readouterr().err
