#===============================================================================
#  LaunchGrid | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Central place for folder/file naming conventions, ranking constants and
#  UI sizing.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import QSize

APP_TITLE = "LaunchGrid"
APP_FOLDER_NAME = "applications"
STATE_FILE_NAME = "launcher_state.json"
SHORTCUTS_FILE_NAME = "shortcuts.json"
ICON_FILE_NAMES = ("icon.png", "icon.ico")

# Counter value marking an item the user pushed to the bottom of the grid.
DEPRIORITIZED = -1

SHORTCUT_ID_PREFIX = "shortcut/"

# Delay before a launch is counted, so the grid does not reorder mid-tap.
RECORD_LAUNCH_DELAY_MS = 1000

# Inventory polling (install / uninstall / shortcut manifest edits)
INVENTORY_POLL_MS = 1500

WEB_SEARCH_URL = "https://duckduckgo.com/"

TILE_SIZE = QSize(96, 96)
ICON_SIZE = QSize(48, 48)
