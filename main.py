# main.py
"""autoshow entry script.

Shows the on-screen input helper whenever a text field gets keyboard focus
and hides it when focus moves elsewhere. The helper (CellWriter by default)
must already be running.

Options:
    -v                   Verbose (DEBUG) logging
    --detached           No console logging, log file only
    --config=PATH        Configuration file (default: <config dir>/autoshow_config.json)
    --helper=COMMAND     Helper executable
    --window-class=NAME  WM_CLASS instance name of the helper window
    --depth=N            Window tree search depth
    --display=NAME       X display to connect to
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from autoshow.AutoShowApp import AutoShowApp
from autoshow.PathResolver import PathResolver
from autoshow.LoggingSetup import setup_logging
from autoshow.errors import StartupError
from autoshow.settings import CONFIG_FILENAME, load_config

SCRIPT_PATH = Path(__file__).resolve()

_OVERRIDES = {
    "--helper=": ("helper", "command"),
    "--window-class=": ("helper", "window_class"),
    "--depth=": ("window_search", "max_depth"),
    "--display=": ("display", "name"),
}


def _parse_args(argv: List[str]) -> Dict[str, Any]:
    """Parse CLI arguments.

    Args:
        argv: Arguments without the program name.

    Returns:
        Dict with verbose, detached, config_path and overrides
        ({(section, key): value}).

    Raises:
        ValueError: If --depth is not a non-negative integer.
    """
    options: Dict[str, Any] = {
        "verbose": "-v" in argv,
        "detached": "--detached" in argv,
        "config_path": None,
        "overrides": {},
    }

    for arg in argv:
        if arg.startswith("--config="):
            options["config_path"] = Path(arg.split("=", 1)[1]).expanduser()
            continue
        for prefix, target in _OVERRIDES.items():
            if arg.startswith(prefix):
                options["overrides"][target] = arg.split("=", 1)[1]

    depth = options["overrides"].get(("window_search", "max_depth"))
    if depth is not None:
        if not depth.isdigit():
            raise ValueError(f"--depth must be a non-negative integer: {depth}")
        options["overrides"][("window_search", "max_depth")] = int(depth)

    return options


def _apply_overrides(config: Dict[str, Dict[str, Any]], overrides: Dict) -> None:
    for (section, key), value in overrides.items():
        config.setdefault(section, {})[key] = value


def _main(argv: Optional[List[str]] = None) -> int:
    """Run autoshow and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        options = _parse_args(argv)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    path_resolver = PathResolver(SCRIPT_PATH)
    path_resolver.ensure_local_dir_structure()
    paths = path_resolver.paths

    setup_logging(paths.logs_dir, verbose=options["verbose"], is_detached=options["detached"])

    config_path = options["config_path"] or path_resolver.get_config_path(CONFIG_FILENAME)

    try:
        config = load_config(config_path)
        _apply_overrides(config, options["overrides"])
    except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
        logging.error(f"ERROR: invalid configuration {config_path}: {e}")
        return 1

    try:
        app = AutoShowApp(config=config, verbose=options["verbose"])
        return app.run()
    except StartupError as e:
        logging.error(f"ERROR: {e}")
        return 1
    except KeyboardInterrupt:
        logging.info("Interrupted by user.")
        return 0


def main() -> None:
    sys.exit(_main())


if __name__ == "__main__":
    main()
