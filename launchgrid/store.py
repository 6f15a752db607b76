#===============================================================================
#  LaunchGrid | store.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Usage counters and deleted items, persisted in launcher_state.json.
#  Every change is published as a full snapshot; disk writes run on a
#  single background thread so they never block the UI thread.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional

import structlog
from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from .constants import DEPRIORITIZED
from .state import load_state, save_state

log = structlog.get_logger(__name__)


class _SaveJob(QRunnable):
    def __init__(self, state_path: Path, state: Dict[str, Any]):
        super().__init__()
        self.state_path = state_path
        self.state = state

    def run(self):
        try:
            save_state(self.state_path, self.state)
        except OSError as e:
            log.warning("state_save_failed", path=str(self.state_path), error=str(e))


class LaunchItemStore(QObject):
    """Counters keyed by launch item id, plus the set of soft-deleted ids.

    Counter semantics:
      - absent     -> never launched (ranks as 0)
      - n >= 0     -> launched n times
      - -1         -> deprioritized by the user
    """

    countersChanged = Signal(object)
    deletedChanged = Signal(object)

    def __init__(self, state_path: Path, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.state_path = Path(state_path)
        self.state = load_state(self.state_path)

        # One thread keeps writes in submission order.
        self._io_pool = QThreadPool(self)
        self._io_pool.setMaxThreadCount(1)

    # ----------------------------
    # Snapshots
    # ----------------------------
    def counters(self) -> Dict[str, int]:
        return dict(self.state["counters"])

    def deleted_items(self) -> FrozenSet[str]:
        return frozenset(self.state["deleted"])

    def settings(self) -> Dict[str, Any]:
        return dict(self.state["settings"])

    # ----------------------------
    # Write intents
    # ----------------------------
    def record_launch(self, item_id: str) -> None:
        counters = self.state["counters"]
        current = counters.get(item_id, 0)
        if current == DEPRIORITIZED:
            # deprioritize/undeprioritize own the sentinel
            log.debug("record_launch_skipped", item_id=item_id, reason="deprioritized")
            return
        counters[item_id] = current + 1
        log.debug("record_launch", item_id=item_id, count=counters[item_id])
        self._counters_changed()

    def deprioritize(self, item_id: str) -> None:
        self.state["counters"][item_id] = DEPRIORITIZED
        log.debug("deprioritize", item_id=item_id)
        self._counters_changed()

    def undeprioritize(self, item_id: str) -> None:
        # Launch history is not restored: the item goes back to the 0 tier.
        self.state["counters"].pop(item_id, None)
        log.debug("undeprioritize", item_id=item_id)
        self._counters_changed()

    def delete_item(self, item_id: str) -> None:
        if item_id in self.state["deleted"]:
            return
        self.state["deleted"].append(item_id)
        log.debug("delete_item", item_id=item_id)
        self._persist()
        self.deletedChanged.emit(self.deleted_items())

    def flush(self) -> None:
        """Block until every pending write reached the disk."""
        self._io_pool.waitForDone()

    # ----------------------------
    # Helpers
    # ----------------------------
    def _counters_changed(self) -> None:
        self._persist()
        self.countersChanged.emit(self.counters())

    def _persist(self) -> None:
        self._io_pool.start(_SaveJob(self.state_path, copy.deepcopy(self.state)))
