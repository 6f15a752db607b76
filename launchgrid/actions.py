#===============================================================================
#  LaunchGrid | actions.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  What a tap / long-press option / keyboard "go" does for each kind of launch
#  item, and the dispatcher that carries those effects out.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Union

import structlog
from PySide6.QtCore import QTimer

from .constants import RECORD_LAUNCH_DELAY_MS
from .models import AppItem, LaunchItem, ShortcutItem

log = structlog.get_logger(__name__)


class ActionKind(str, Enum):
    PRIMARY = "primary"       # tap / keyboard go
    SECONDARY = "secondary"   # long-press option 1
    TERTIARY = "tertiary"     # long-press option 2 (apps only)


@dataclass(frozen=True)
class LaunchApp:
    item: AppItem


@dataclass(frozen=True)
class OpenAppDetails:
    item: AppItem


@dataclass(frozen=True)
class LaunchShortcut:
    item: ShortcutItem


@dataclass(frozen=True)
class OpenWebSearch:
    query: str


@dataclass(frozen=True)
class RecordLaunch:
    item_id: str
    delay_ms: int = RECORD_LAUNCH_DELAY_MS


@dataclass(frozen=True)
class DeleteItem:
    item_id: str


@dataclass(frozen=True)
class Deprioritize:
    item_id: str


@dataclass(frozen=True)
class Undeprioritize:
    item_id: str


Effect = Union[
    LaunchApp, OpenAppDetails, LaunchShortcut, OpenWebSearch,
    RecordLaunch, DeleteItem, Deprioritize, Undeprioritize,
]


def decide(item: LaunchItem, kind: ActionKind) -> List[Effect]:
    """Decision table. Effects are listed in the order they must happen."""
    if kind == ActionKind.PRIMARY:
        launch = LaunchApp(item) if isinstance(item, AppItem) else LaunchShortcut(item)
        return [launch, RecordLaunch(item.id)]

    if kind == ActionKind.SECONDARY:
        if isinstance(item, AppItem):
            return [OpenAppDetails(item)]
        return [DeleteItem(item.id)]

    if kind == ActionKind.TERTIARY:
        if not isinstance(item, AppItem):
            return []
        if item.is_deprioritized:
            return [Undeprioritize(item.id)]
        return [Deprioritize(item.id)]

    raise ValueError(f"Unknown action kind: {kind!r}")


def decide_go(query: str, results: Sequence[LaunchItem]) -> List[Effect]:
    """Keyboard commit: launch the top result, or search the web if nothing matched."""
    if not query.strip():
        return []
    if results:
        return decide(results[0], ActionKind.PRIMARY)
    return [OpenWebSearch(query)]


class ActionDispatcher:
    """Runs effects against the action sink and the counter store.

    Sink failures stop at this boundary: they are logged and otherwise ignored.
    """

    def __init__(self, sink, store, schedule: Optional[Callable[[int, Callable[[], None]], None]] = None):
        self.sink = sink
        self.store = store
        self.schedule = schedule or QTimer.singleShot

    def primary(self, item: LaunchItem) -> None:
        self.run(decide(item, ActionKind.PRIMARY))

    def secondary(self, item: LaunchItem) -> None:
        self.run(decide(item, ActionKind.SECONDARY))

    def tertiary(self, item: LaunchItem) -> None:
        self.run(decide(item, ActionKind.TERTIARY))

    def web_search(self, query: str) -> None:
        self.run([OpenWebSearch(query)])

    def keyboard_go(self, query: str, results: Sequence[LaunchItem]) -> None:
        self.run(decide_go(query, results))

    def run(self, effects: List[Effect]) -> None:
        for effect in effects:
            self._apply(effect)

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, RecordLaunch):
            item_id = effect.item_id
            self.schedule(effect.delay_ms, lambda: self.store.record_launch(item_id))
        elif isinstance(effect, DeleteItem):
            self.store.delete_item(effect.item_id)
        elif isinstance(effect, Deprioritize):
            self.store.deprioritize(effect.item_id)
        elif isinstance(effect, Undeprioritize):
            self.store.undeprioritize(effect.item_id)
        else:
            self._send(effect)

    def _send(self, effect: Effect) -> None:
        try:
            if isinstance(effect, LaunchApp):
                self.sink.launch_app(effect.item)
            elif isinstance(effect, OpenAppDetails):
                self.sink.open_app_details(effect.item)
            elif isinstance(effect, LaunchShortcut):
                self.sink.launch_shortcut(effect.item)
            elif isinstance(effect, OpenWebSearch):
                self.sink.open_web_search(effect.query)
        except Exception:
            log.warning("action_failed", effect=type(effect).__name__, exc_info=True)
