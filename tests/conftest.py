"""
Pytest configuration and fixtures.
"""
import os
import sys
from pathlib import Path

import pytest

# Add the repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from launchgrid.models import AppInfo, AppItem, ShortcutInfo, ShortcutItem


@pytest.fixture(scope="session")
def qapp():
    """A Qt application (offscreen); signals, thread pools and widgets need one."""
    app = QApplication.instance() or QApplication([])
    yield app


def make_app(label, package_name=None, activity_name="main.py", is_deprioritized=False):
    package_name = package_name or label.lower().replace(" ", "_")
    return AppItem(
        label=label,
        package_name=package_name,
        activity_name=activity_name,
        is_deprioritized=is_deprioritized,
        app=AppInfo(label=label, package_name=package_name, activity_name=activity_name),
    )


def make_shortcut(label, shortcut_id=None, package_name="notes"):
    shortcut_id = shortcut_id or label.lower().replace(" ", "-")
    return ShortcutItem(
        label=label,
        shortcut=ShortcutInfo(shortcut_id=shortcut_id, label=label, package_name=package_name),
    )


@pytest.fixture
def sample_items():
    """Three apps and a shortcut, in inventory order."""
    return [
        make_app("Calculator", "calc"),
        make_app("Café Menu", "cafe"),
        make_app("Terminal", "term"),
        make_shortcut("New note"),
    ]


@pytest.fixture
def apps_dir(tmp_path):
    """An applications folder with two Python apps, an exe and a website link."""
    d = tmp_path / "applications"
    d.mkdir()

    notes = d / "Notes"
    notes.mkdir()
    (notes / "main.py").write_text("print('notes')\n", encoding="utf-8")
    (notes / "icon.png").write_bytes(b"png")
    (notes / "new.png").write_bytes(b"png")

    timer = d / "Timer"
    timer.mkdir()
    (timer / "main_timer.py").write_text("print('timer')\n", encoding="utf-8")

    (d / "editor.exe").write_bytes(b"MZ")
    (d / "wiki.url").write_text("[InternetShortcut]\nURL=https://example.org\n", encoding="utf-8")

    # not launchable
    (d / "README.txt").write_text("hello\n", encoding="utf-8")
    (d / "empty_folder").mkdir()
    return d
