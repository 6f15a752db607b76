#===============================================================================
#  LaunchGrid | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Wires the store, inventories, engine, dispatcher and main window together.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from PySide6.QtWidgets import QApplication

from .actions import ActionDispatcher
from .constants import APP_FOLDER_NAME, STATE_FILE_NAME
from .engine import LaunchEngine
from .inventory import FolderAppInventory, ManifestShortcutInventory
from .log_setup import setup_logging
from .main_window import MainWindow
from .sink import DesktopActionSink
from .store import LaunchItemStore


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="launchgrid", description="Ranked app & shortcut launcher")
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=Path.cwd(),
        help=f"folder holding ./{APP_FOLDER_NAME} and {STATE_FILE_NAME} (default: current directory)",
    )
    parser.add_argument("--debug", action="store_true", help="verbose console logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    log = setup_logging(logging.DEBUG if args.debug else logging.INFO)

    app = QApplication(sys.argv[:1])

    base_dir = args.base_dir.resolve()
    apps_dir = base_dir / APP_FOLDER_NAME
    apps_dir.mkdir(parents=True, exist_ok=True)

    store = LaunchItemStore(base_dir / STATE_FILE_NAME)
    settings = store.settings()
    poll_ms = int(settings["poll_interval_ms"])

    app_inventory = FolderAppInventory(apps_dir, poll_ms=poll_ms)
    shortcut_inventory = ManifestShortcutInventory(apps_dir, poll_ms=poll_ms)
    engine = LaunchEngine(store, app_inventory, shortcut_inventory)
    dispatcher = ActionDispatcher(DesktopActionSink(settings["web_search_url"]), store)

    w = MainWindow(engine, dispatcher)
    w.resize(720, 640)
    w.show()

    app_inventory.start_watching()
    shortcut_inventory.start_watching()
    engine.refresh_items()
    log.info("launcher_started", base_dir=str(base_dir))

    rc = app.exec()
    store.flush()
    return rc
