#===============================================================================
#  LaunchGrid | state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Load/save of persistent launcher state (usage counters, deleted items,
#  settings).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import structlog

from .constants import INVENTORY_POLL_MS, WEB_SEARCH_URL

log = structlog.get_logger(__name__)


def default_state() -> Dict[str, Any]:
    return {
        "counters": {},     # item id -> launch count (or -1 when deprioritized)
        "deleted": [],      # list of item ids
        "settings": {
            "web_search_url": WEB_SEARCH_URL,
            "poll_interval_ms": INVENTORY_POLL_MS,
        },
    }


def load_state(state_path: Path) -> Dict[str, Any]:
    """Load state from disk (or create defaults)."""
    d = default_state()
    if not state_path.exists():
        return d
    try:
        data = json.loads(state_path.read_text(encoding="utf-8"))
        for k in d:
            if k not in data:
                data[k] = d[k]
        for k, v in d["settings"].items():
            data["settings"].setdefault(k, v)
        data["counters"] = {str(k): int(v) for k, v in data["counters"].items()}
        data["deleted"] = [str(k) for k in data["deleted"]]
        return data
    except (OSError, ValueError, TypeError, AttributeError) as e:
        log.warning("state_load_failed", path=str(state_path), error=str(e))
        return d


def save_state(state_path: Path, state: Dict[str, Any]) -> None:
    """Persist state to disk."""
    state_path.parent.mkdir(parents=True, exist_ok=True)
    tmp = state_path.with_suffix(state_path.suffix + ".tmp")
    tmp.write_text(json.dumps(state, indent=2), encoding="utf-8")
    tmp.replace(state_path)
