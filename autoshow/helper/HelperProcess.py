import logging
import subprocess
from typing import List, Optional, Sequence

DEFAULT_COMMAND = "cellwriter"
DEFAULT_SHOW_ARGS = ("--show-window",)
DEFAULT_HIDE_ARGS = ("--hide-window",)


class HelperProcess:
    """Drives the running helper through its command-line interface.

    Each call runs the helper executable with the show or hide arguments and
    waits for it to exit. The exit status is ignored; a missing executable is
    logged and otherwise ignored as well.

    Example:
        >>> helper = HelperProcess()
        >>> helper.show()  # runs: cellwriter --show-window
    """

    def __init__(
        self,
        command: str = DEFAULT_COMMAND,
        show_args: Optional[Sequence[str]] = None,
        hide_args: Optional[Sequence[str]] = None,
        verbose: bool = False
    ) -> None:
        self._command = command
        self._show_args: List[str] = list(DEFAULT_SHOW_ARGS if show_args is None else show_args)
        self._hide_args: List[str] = list(DEFAULT_HIDE_ARGS if hide_args is None else hide_args)
        self._verbose = verbose

    def show(self) -> None:
        self._run(self._show_args)

    def hide(self) -> None:
        self._run(self._hide_args)

    def _run(self, args: List[str]) -> None:
        argv = [self._command] + args
        if self._verbose:
            logging.info(f"HelperProcess: running {' '.join(argv)}")

        try:
            subprocess.run(argv, check=False)
        except OSError as e:
            logging.warning(f"HelperProcess: cannot run {self._command}: {e}")
