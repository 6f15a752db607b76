#===============================================================================
#  LaunchGrid | main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Main window: search field on top, ranked tile grid below.
#    - Tap (double-click / Enter on a tile) launches and counts the launch
#    - Return in the search field launches the top result or searches the web
#    - Right-click: app details / (un)deprioritize, or delete a shortcut
#    - Showing the window again starts from an empty search
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Dict, List

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QIcon
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMenu,
    QStyle,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from .actions import ActionDispatcher
from .constants import APP_TITLE, ICON_SIZE, TILE_SIZE
from .engine import LaunchEngine
from .models import AppItem, LaunchItem


class TileList(QListWidget):
    """A grid-ish tile view. Order comes from the engine, so no drag/drop."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setViewMode(QListWidget.IconMode)
        self.setMovement(QListWidget.Static)
        self.setResizeMode(QListWidget.Adjust)
        self.setUniformItemSizes(True)
        self.setIconSize(ICON_SIZE)
        self.setGridSize(TILE_SIZE)
        self.setSpacing(6)
        self.setWordWrap(False)
        self.setSelectionMode(QListWidget.SingleSelection)


class MainWindow(QMainWindow):
    def __init__(self, engine: LaunchEngine, dispatcher: ActionDispatcher):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.engine = engine
        self.dispatcher = dispatcher
        self.items_by_id: Dict[str, LaunchItem] = {}

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        header = QHBoxLayout()
        self.search = QLineEdit()
        self.search.setClearButtonEnabled(False)
        self.search.textChanged.connect(self.engine.set_search_query)
        self.search.returnPressed.connect(self.on_keyboard_go)
        header.addWidget(self.search, 1)

        self.btn_clear = QToolButton()
        self.btn_clear.setText("Clear")
        self.btn_clear.clicked.connect(self.reset_search)
        header.addWidget(self.btn_clear)

        self.btn_web = QToolButton()
        self.btn_web.setText("Web")
        self.btn_web.clicked.connect(lambda: self.dispatcher.web_search(self.search.text()))
        header.addWidget(self.btn_web)
        layout.addLayout(header)

        self.grid = TileList()
        self.grid.itemActivated.connect(self.launch_item)
        self.grid.setContextMenuPolicy(Qt.CustomContextMenu)
        self.grid.customContextMenuRequested.connect(self.open_context_menu)
        layout.addWidget(self.grid, 1)

        self.engine.resultsChanged.connect(self.rebuild_grid)
        self.engine.webSearchActiveChanged.connect(self.update_search_hint)
        self.engine.scrollToTopRequested.connect(self.grid.scrollToTop)

        self.update_search_hint(self.engine.is_web_search_active)
        self.rebuild_grid(self.engine.results)

    # ----------------------------
    # Grid
    # ----------------------------
    def rebuild_grid(self, results: List[LaunchItem]):
        self.items_by_id = {i.id: i for i in results}
        self.grid.clear()
        for launch_item in results:
            item = QListWidgetItem(launch_item.label)
            item.setData(Qt.UserRole, launch_item.id)
            item.setToolTip(launch_item.label)
            item.setTextAlignment(Qt.AlignHCenter | Qt.AlignTop)
            item.setSizeHint(TILE_SIZE)

            if launch_item.icon:
                icon = QIcon(launch_item.icon)
            elif isinstance(launch_item, AppItem):
                icon = self.style().standardIcon(QStyle.SP_DesktopIcon)
            else:
                icon = self.style().standardIcon(QStyle.SP_FileLinkIcon)
            if launch_item.is_deprioritized:
                # greyed out, same as a disabled icon
                icon = QIcon(icon.pixmap(ICON_SIZE, QIcon.Disabled))
                item.setForeground(self.palette().placeholderText())
            item.setIcon(icon)
            self.grid.addItem(item)

        self.btn_clear.setVisible(bool(self.search.text().strip()))
        self.btn_web.setVisible(bool(self.search.text().strip()))

    def update_search_hint(self, web_search_active: bool):
        self.search.setPlaceholderText("Search the web" if web_search_active else "Search apps")

    def reset_search(self):
        # the engine owns the query; mirror it into the field without echoing back
        self.engine.reset_search_query()
        self.search.blockSignals(True)
        self.search.setText(self.engine.search_query)
        self.search.blockSignals(False)
        self.rebuild_grid(self.engine.results)

    def showEvent(self, event):
        super().showEvent(event)
        self.reset_search()
        self.search.setFocus()

    # ----------------------------
    # Actions
    # ----------------------------
    def _item_for(self, list_item: QListWidgetItem):
        return self.items_by_id.get(list_item.data(Qt.UserRole)) if list_item else None

    def launch_item(self, list_item: QListWidgetItem):
        launch_item = self._item_for(list_item)
        if launch_item:
            self.dispatcher.primary(launch_item)

    def on_keyboard_go(self):
        self.dispatcher.keyboard_go(self.search.text(), self.engine.results)

    def open_context_menu(self, pos):
        launch_item = self._item_for(self.grid.itemAt(pos))
        if not launch_item:
            return

        menu = QMenu(self)
        if isinstance(launch_item, AppItem):
            act_secondary = QAction("App details", self)
            act_tertiary = QAction("Undeprioritize" if launch_item.is_deprioritized else "Deprioritize", self)
            menu.addAction(act_secondary)
            menu.addAction(act_tertiary)
        else:
            act_secondary = QAction("Delete shortcut", self)
            act_tertiary = None
            menu.addAction(act_secondary)

        chosen = menu.exec(self.grid.mapToGlobal(pos))
        if not chosen:
            return
        if chosen == act_secondary:
            self.dispatcher.secondary(launch_item)
        elif chosen == act_tertiary:
            self.dispatcher.tertiary(launch_item)
