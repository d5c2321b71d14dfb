# build_gui_entry.py
from __future__ import annotations

from oop_showcase.ui.app import main

if __name__ == "__main__":
    raise SystemExit(main())
