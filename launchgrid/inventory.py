#===============================================================================
#  LaunchGrid | inventory.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  App and shortcut inventory providers backed by the ./applications folder.
#  Both poll for changes and publish a change signal; reads that fail degrade
#  to an empty contribution instead of an error.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import structlog
from PySide6.QtCore import QObject, QTimer, Signal

from .constants import ICON_FILE_NAMES, INVENTORY_POLL_MS, SHORTCUTS_FILE_NAME
from .models import AppInfo, ShortcutInfo

log = structlog.get_logger(__name__)


def find_python_main(folder: Path) -> Optional[Path]:
    """Find a launchable python entrypoint within *one* folder level.

    Rules:
    - Prefer ./main.py
    - Otherwise use the first file matching main*.py at the top level
    - Do not recurse into subfolders
    """
    if not folder.is_dir():
        return None

    main_py = folder / "main.py"
    if main_py.is_file():
        return main_py

    candidates = sorted(
        p for p in folder.iterdir()
        if p.is_file()
        and p.suffix.lower() == ".py"
        and p.name.lower().startswith("main")
    )
    return candidates[0] if candidates else None


def find_icon(folder: Path) -> Optional[str]:
    for name in ICON_FILE_NAMES:
        p = folder / name
        if p.is_file():
            return str(p)
    return None


FILE_KINDS = {".exe": "exe", ".lnk": "lnk", ".url": "urlfile"}


def scan_applications_folder(apps_dir: Path) -> List[AppInfo]:
    """Scan ./applications and return the installed apps, sorted by name.

    Supports:
      - .exe / .lnk (Windows shortcut) / .url (website shortcut)
      - Python app folders containing a main.py at top-level (no deep search)
    """
    apps: List[AppInfo] = []
    if not apps_dir.is_dir():
        return apps

    for item in sorted(apps_dir.iterdir(), key=lambda p: p.name.lower()):
        if item.is_file() and item.suffix.lower() in FILE_KINDS:
            apps.append(
                AppInfo(
                    label=item.stem,
                    package_name=item.stem,
                    activity_name=item.name,
                    icon=None,
                    kind=FILE_KINDS[item.suffix.lower()],
                    path=str(item),
                    launch_target=str(item),
                )
            )
            continue

        if item.is_dir():
            main_file = find_python_main(item)
            if main_file:
                apps.append(
                    AppInfo(
                        label=item.name,
                        package_name=item.name,
                        activity_name=main_file.name,
                        icon=find_icon(item),
                        kind="py",
                        path=str(item),
                        launch_target=str(main_file),
                    )
                )

    return apps


def read_shortcut_manifest(package_dir: Path, package_name: str) -> List[ShortcutInfo]:
    """Parse <package>/shortcuts.json, keeping pinned + enabled entries with an icon.

    Manifest format:
      [{"id": "new-note", "label": "New note", "icon": "note.png",
        "target": ["python", "main.py", "--new"], "pinned": true, "enabled": true}]
    """
    manifest = package_dir / SHORTCUTS_FILE_NAME
    if not manifest.is_file():
        return []

    entries = json.loads(manifest.read_text(encoding="utf-8"))
    if not isinstance(entries, list):
        raise ValueError(f"{manifest}: expected a JSON list")

    out: List[ShortcutInfo] = []
    for e in entries:
        if not e.get("pinned", False) or not e.get("enabled", True):
            continue
        icon = e.get("icon") or ""
        icon_path = package_dir / icon if icon else None
        if icon_path is None or not icon_path.is_file():
            log.debug("shortcut_skipped", package=package_name, shortcut_id=e.get("id"), reason="no icon")
            continue
        target = e.get("target", [])
        if not isinstance(target, list):
            raise ValueError(f"{manifest}: target of {e['id']!r} must be a list of arguments")
        out.append(
            ShortcutInfo(
                # manifest ids are only unique within their own package
                shortcut_id=f"{package_name}/{e['id']}",
                label=str(e.get("label") or e["id"]),
                package_name=package_name,
                icon=str(icon_path),
                target=tuple(str(a) for a in target),
                cwd=str(package_dir),
            )
        )
    return out


class FolderAppInventory(QObject):
    """Installed apps = launchable entries under the applications folder."""

    packagesChanged = Signal()

    def __init__(self, apps_dir: Path, poll_ms: int = INVENTORY_POLL_MS, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.apps_dir = Path(apps_dir)
        self._last_keys: Optional[List[str]] = None

        self.poll_timer = QTimer(self)
        self.poll_timer.setInterval(poll_ms)
        self.poll_timer.timeout.connect(self.check_for_changes)

    def start_watching(self) -> None:
        self._last_keys = self._scan_keys()
        self.poll_timer.start()

    def get_all_apps(self) -> List[AppInfo]:
        try:
            return scan_applications_folder(self.apps_dir)
        except OSError as e:
            log.warning("app_inventory_failed", apps_dir=str(self.apps_dir), error=str(e))
            return []

    def check_for_changes(self) -> None:
        # Only notify if the scanned set of keys changed.
        keys = self._scan_keys()
        if keys != self._last_keys:
            self._last_keys = keys
            self.packagesChanged.emit()

    def _scan_keys(self) -> List[str]:
        return sorted(f"{a.package_name}/{a.activity_name}" for a in self.get_all_apps())


class ManifestShortcutInventory(QObject):
    """Pinned shortcuts declared by each app in its shortcuts.json."""

    shortcutsChanged = Signal()

    def __init__(self, apps_dir: Path, poll_ms: int = INVENTORY_POLL_MS, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.apps_dir = Path(apps_dir)
        self._last_fingerprint: Optional[List[Tuple[str, float]]] = None

        self.poll_timer = QTimer(self)
        self.poll_timer.setInterval(poll_ms)
        self.poll_timer.timeout.connect(self.check_for_changes)

    def start_watching(self) -> None:
        self._last_fingerprint = self._fingerprint()
        self.poll_timer.start()

    def has_shortcut_host_permission(self) -> bool:
        return os.access(self.apps_dir, os.R_OK | os.X_OK)

    def get_all_shortcuts(self, package_names: Iterable[str]) -> List[ShortcutInfo]:
        if not self.has_shortcut_host_permission():
            return []

        shortcuts: List[ShortcutInfo] = []
        for package_name in package_names:
            try:
                shortcuts += read_shortcut_manifest(self.apps_dir / package_name, package_name)
            except (OSError, ValueError, KeyError, AttributeError) as e:
                log.warning("shortcut_manifest_unreadable", package=package_name, error=str(e))
        return shortcuts

    def notify_shortcuts_changed(self) -> None:
        self.shortcutsChanged.emit()

    def check_for_changes(self) -> None:
        fingerprint = self._fingerprint()
        if fingerprint != self._last_fingerprint:
            self._last_fingerprint = fingerprint
            self.notify_shortcuts_changed()

    def _fingerprint(self) -> List[Tuple[str, float]]:
        try:
            manifests = self.apps_dir.glob(f"*/{SHORTCUTS_FILE_NAME}")
            return sorted((str(p), p.stat().st_mtime) for p in manifests)
        except OSError:
            return []
