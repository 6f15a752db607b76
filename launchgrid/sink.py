#===============================================================================
#  LaunchGrid | sink.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Executes launch requests on the desktop: EXE/LNK/URL files and Python app
#  folders, app "details" (open location), pinned shortcuts and web searches.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
import subprocess
import sys
import webbrowser
from pathlib import Path
from typing import Protocol

import requests

from .constants import WEB_SEARCH_URL
from .models import AppItem, ShortcutItem


class ActionSink(Protocol):
    def launch_app(self, item: AppItem) -> None: ...

    def open_app_details(self, item: AppItem) -> None: ...

    def launch_shortcut(self, item: ShortcutItem) -> None: ...

    def open_web_search(self, query: str) -> None: ...


def _startfile(path: str) -> None:
    # Windows shortcut (.lnk) support uses os.startfile
    if hasattr(os, "startfile"):
        os.startfile(path)  # type: ignore[attr-defined]
    else:
        subprocess.Popen([path])


def web_search_url(query: str, base_url: str = WEB_SEARCH_URL) -> str:
    return requests.Request("GET", base_url, params={"q": query}).prepare().url


def open_in_explorer(folder: Path) -> None:
    if sys.platform.startswith("win"):
        subprocess.Popen(["explorer", str(folder)])
    elif sys.platform == "darwin":
        subprocess.Popen(["open", str(folder)])
    else:
        subprocess.Popen(["xdg-open", str(folder)])


class DesktopActionSink:
    """Starts processes / opens the browser. Errors propagate to the dispatcher."""

    def __init__(self, web_search_base_url: str = WEB_SEARCH_URL, python_exe: str = sys.executable):
        self.web_search_base_url = web_search_base_url
        self.python_exe = python_exe

    def launch_app(self, item: AppItem) -> None:
        """Launch an app item.

        kinds:
          - exe    : run directly
          - lnk    : open via OS (Windows shortcut)
          - urlfile: open in browser
          - py     : run main.py with the launcher's interpreter
        """
        app = item.app
        if app is None:
            raise RuntimeError(f"No inventory record for {item.id}")

        if app.kind == "urlfile":
            webbrowser.open(Path(app.launch_target).as_uri())
            return

        if app.kind == "lnk":
            _startfile(app.launch_target)
            return

        if app.kind == "exe":
            subprocess.Popen([app.launch_target], cwd=str(Path(app.launch_target).parent))
            return

        subprocess.Popen([self.python_exe, app.launch_target], cwd=app.path)

    def open_app_details(self, item: AppItem) -> None:
        app = item.app
        if app is None:
            raise RuntimeError(f"No inventory record for {item.id}")
        target = Path(app.path)
        # open folder for exe; open the folder itself for py apps
        open_in_explorer(target.parent if target.is_file() else target)

    def launch_shortcut(self, item: ShortcutItem) -> None:
        shortcut = item.shortcut
        if not shortcut.target:
            raise RuntimeError(f"Shortcut {shortcut.shortcut_id!r} has no target")
        argv = list(shortcut.target)
        # "python" in a manifest means the launcher's interpreter
        if argv[0] in ("python", "python3"):
            argv[0] = self.python_exe
        subprocess.Popen(argv, cwd=shortcut.cwd or None)

    def open_web_search(self, query: str) -> None:
        webbrowser.open(web_search_url(query, self.web_search_base_url))
