from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from oop_showcase.ui.window import ContentView


def main() -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("OOP Showcase")

    win = ContentView()
    win.show()

    try:
        return app.exec()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
