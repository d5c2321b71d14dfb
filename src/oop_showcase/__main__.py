"""``python -m oop_showcase`` entrypoint.

The first argument selects the front end: ``gui`` (or ``qt``) opens the
placeholder window, anything else is handed to :mod:`oop_showcase.cli`.
"""

from __future__ import annotations

import sys
from typing import List, Optional

GUI_COMMANDS = {"gui", "qt"}

GUI_INSTALL_HINT = (
    "GUI dependencies are not installed.\n"
    'Install them, then re-run:\n  pip install -e ".[gui]"\n'
    "Or use the CLI:\n  oop-showcase --help\n"
    "  python -m oop_showcase --help"
)


def _run_cli(argv: List[str]) -> int:
    from oop_showcase.cli import main as cli_main

    return int(cli_main(argv))


def _run_gui() -> int:
    """Open the window, or print an install hint when PySide6 is missing."""
    try:
        from oop_showcase.ui.app import main as gui_main
    except ModuleNotFoundError as e:
        if "PySide6" not in str(e):
            raise
        print(GUI_INSTALL_HINT)
        return 1
    return int(gui_main())


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0].lower() in GUI_COMMANDS:
        return _run_gui()
    return _run_cli(args)


if __name__ == "__main__":
    raise SystemExit(main())
