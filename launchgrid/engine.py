#===============================================================================
#  LaunchGrid | engine.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Holds the latest value of every ranking input (items, query, counters,
#  deleted ids) and republishes the ranked grid whenever one of them changes.
#  All inputs are applied on the engine's own thread; slow inventory reads run
#  on a worker and come back as queued signals.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import AbstractSet, List, Mapping, Optional

import structlog
from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from .models import DuplicateLaunchItemError, LaunchItem, build_launch_items
from .ranking import rank_launch_items, should_offer_web_search

log = structlog.get_logger(__name__)


class LoadSignals(QObject):
    loaded = Signal(int, object)
    failed = Signal(int, str)


class LoadItemsJob(QRunnable):
    """Enumerate apps, then the shortcuts of those apps, off the UI thread."""

    def __init__(self, generation: int, app_inventory, shortcut_inventory, signals: LoadSignals):
        super().__init__()
        self.generation = generation
        self.app_inventory = app_inventory
        self.shortcut_inventory = shortcut_inventory
        self.signals = signals

    def run(self):
        apps = self.app_inventory.get_all_apps()
        shortcuts = []
        if self.shortcut_inventory is not None:
            shortcuts = self.shortcut_inventory.get_all_shortcuts([a.package_name for a in apps])
        try:
            items = build_launch_items(apps, shortcuts)
        except DuplicateLaunchItemError as e:
            self.signals.failed.emit(self.generation, str(e))
            return
        self.signals.loaded.emit(self.generation, items)


class LaunchEngine(QObject):
    resultsChanged = Signal(object)
    webSearchActiveChanged = Signal(bool)
    scrollToTopRequested = Signal()

    def __init__(
        self,
        store=None,
        app_inventory=None,
        shortcut_inventory=None,
        pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self.store = store
        self.app_inventory = app_inventory
        self.shortcut_inventory = shortcut_inventory
        self.pool = pool or QThreadPool.globalInstance()

        self._all_items: List[LaunchItem] = []
        self._query = ""
        self._counters: Mapping[str, int] = store.counters() if store is not None else {}
        self._deleted: AbstractSet[str] = store.deleted_items() if store is not None else frozenset()

        self._results: List[LaunchItem] = []
        self._web_search_active = True
        self._generation = 0

        self._load_signals = LoadSignals(self)
        self._load_signals.loaded.connect(self._on_items_loaded)
        self._load_signals.failed.connect(self._on_items_failed)

        if store is not None:
            store.countersChanged.connect(self.set_counters)
            store.deletedChanged.connect(self.set_deleted_items)
        if app_inventory is not None:
            app_inventory.packagesChanged.connect(self.refresh_items)
        if shortcut_inventory is not None:
            shortcut_inventory.shortcutsChanged.connect(self.refresh_items)

    # ----------------------------
    # Published state
    # ----------------------------
    @property
    def results(self) -> List[LaunchItem]:
        return list(self._results)

    @property
    def search_query(self) -> str:
        return self._query

    @property
    def is_web_search_active(self) -> bool:
        return self._web_search_active

    # ----------------------------
    # Inputs
    # ----------------------------
    def set_items(self, items: List[LaunchItem]) -> None:
        self._all_items = list(items)
        self._recompute()

    def set_search_query(self, query: str) -> None:
        self._query = query
        self.scrollToTopRequested.emit()
        self._recompute()

    def reset_search_query(self) -> None:
        self.set_search_query("")

    def set_counters(self, counters: Mapping[str, int]) -> None:
        self._counters = dict(counters)
        self._recompute()

    def set_deleted_items(self, deleted: AbstractSet[str]) -> None:
        self._deleted = frozenset(deleted)
        self._recompute()

    def refresh_items(self) -> None:
        """Reload the inventory in the background. Only the newest load is applied."""
        if self.app_inventory is None:
            return
        self._generation += 1
        self.pool.start(
            LoadItemsJob(self._generation, self.app_inventory, self.shortcut_inventory, self._load_signals)
        )

    # ----------------------------
    # Internals
    # ----------------------------
    def _on_items_loaded(self, generation: int, items: List[LaunchItem]) -> None:
        if generation != self._generation:
            log.debug("stale_items_discarded", generation=generation, current=self._generation)
            return
        log.debug("items_loaded", count=len(items))
        self.set_items(items)

    def _on_items_failed(self, generation: int, error: str) -> None:
        # keep the previous item set
        log.error("item_set_rejected", generation=generation, error=error)

    def _recompute(self) -> None:
        results = rank_launch_items(self._all_items, self._query, self._counters, self._deleted)
        self._results = results
        self.resultsChanged.emit(list(results))

        web_search = should_offer_web_search(results)
        if web_search != self._web_search_active:
            self._web_search_active = web_search
            self.webSearchActiveChanged.emit(web_search)
