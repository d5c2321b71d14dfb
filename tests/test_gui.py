import sys
from pathlib import Path

# Add the src directory to sys.path so that oop_showcase can be imported
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))

import pytest


def test_content_view_shows_greeting(monkeypatch):
    monkeypatch.setenv("QT_QPA_PLATFORM", "offscreen")
    pytest.importorskip("PySide6")
    from PySide6.QtWidgets import QApplication

    from oop_showcase.ui.window import GREETING, ContentView

    app = QApplication.instance() or QApplication([])
    win = ContentView()
    assert win.label.text() == GREETING == "Hello, world!"
    assert win.windowTitle() == "OOP Showcase"
    win.close()
    assert app is not None
