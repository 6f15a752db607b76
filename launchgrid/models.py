#===============================================================================
#  LaunchGrid | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shared data models: inventory records handed over by the app/shortcut
#  providers and the launch items shown in the grid.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

from .constants import SHORTCUT_ID_PREFIX
from .text import contains_ignore_accents


class DuplicateLaunchItemError(ValueError):
    """Two launch items resolved to the same id."""


@dataclass(frozen=True)
class AppInfo:
    """An installed application as reported by the app inventory."""
    label: str
    package_name: str       # entry name under ./applications
    activity_name: str      # launch target file name (main.py, foo.exe, ...)
    icon: Optional[str] = None
    kind: str = "py"        # "py" | "exe" | "lnk" | "urlfile"
    path: str = ""          # exe path OR folder path
    launch_target: str = "" # exe path OR main.py path


@dataclass(frozen=True)
class ShortcutInfo:
    """A pinned shortcut published by an application."""
    shortcut_id: str
    label: str
    package_name: str
    icon: Optional[str] = None
    target: Tuple[str, ...] = ()  # argv, run from the package folder
    cwd: str = ""


@dataclass(frozen=True)
class AppItem:
    label: str
    package_name: str
    activity_name: str
    icon: Optional[str] = None
    is_deprioritized: bool = False
    app: Optional[AppInfo] = field(default=None, compare=False, repr=False)

    @property
    def id(self) -> str:
        return f"{self.package_name}/{self.activity_name}"

    def matches_filter(self, query: str) -> bool:
        # package names are plain identifiers, no accent folding needed
        return (
            contains_ignore_accents(self.label, query)
            or query.casefold() in self.package_name.casefold()
        )


@dataclass(frozen=True)
class ShortcutItem:
    label: str
    shortcut: ShortcutInfo
    icon: Optional[str] = None

    @property
    def id(self) -> str:
        return f"{SHORTCUT_ID_PREFIX}{self.shortcut.shortcut_id}"

    @property
    def is_deprioritized(self) -> bool:
        return False

    def matches_filter(self, query: str) -> bool:
        return contains_ignore_accents(self.label, query)


LaunchItem = Union[AppItem, ShortcutItem]


def app_item_from_info(app: AppInfo) -> AppItem:
    return AppItem(
        label=app.label,
        package_name=app.package_name,
        activity_name=app.activity_name,
        icon=app.icon,
        is_deprioritized=False,
        app=app,
    )


def shortcut_item_from_info(shortcut: ShortcutInfo) -> ShortcutItem:
    return ShortcutItem(label=shortcut.label, shortcut=shortcut, icon=shortcut.icon)


def build_launch_items(apps: Iterable[AppInfo], shortcuts: Iterable[ShortcutInfo]) -> List[LaunchItem]:
    """Build the full item set: apps first, then shortcuts, inventory order kept.

    Raises DuplicateLaunchItemError if two items share an id; counters and
    deletions are keyed by id, so such a set cannot be ranked correctly.
    """
    items: List[LaunchItem] = [app_item_from_info(a) for a in apps]
    items += [shortcut_item_from_info(s) for s in shortcuts]

    seen = set()
    for item in items:
        if item.id in seen:
            raise DuplicateLaunchItemError(f"Duplicate launch item id: {item.id!r}")
        seen.add(item.id)
    return items
