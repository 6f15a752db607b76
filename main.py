#===============================================================================
#  LaunchGrid  |  Ranked Application & Shortcut Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  A search-first launcher for the apps placed under ./applications and the
#  pinned shortcuts they publish. Tiles are ranked by how often they are
#  launched; apps can be pushed to the bottom (deprioritized) and shortcuts
#  can be removed. When a search matches nothing, Return searches the web.
#
#  Folder Conventions
#  ------------------
#    ./applications/
#      - *.exe / *.lnk / *.url              -> shown as launchable tile
#      - <PythonAppFolder>/main.py          -> shown as launchable tile
#      - <PythonAppFolder>/shortcuts.json   -> pinned shortcuts of that app
#    ./launcher_state.json                  -> usage counters, deleted items
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from launchgrid.app import main


if __name__ == "__main__":
    raise SystemExit(main())
