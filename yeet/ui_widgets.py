#===============================================================================
#  Yeet | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Small reusable widgets for the picker window.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QListWidget, QListWidgetItem

from .models import App

ICON_SIZE = QSize(32, 32)


class AppList(QListWidget):
    """Single-selection result list; each row keeps its App in Qt.UserRole."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setIconSize(ICON_SIZE)
        self.setUniformItemSizes(True)
        self.setSelectionMode(QListWidget.SingleSelection)
        self.setFocusPolicy(Qt.NoFocus)

    def set_apps(self, apps: Sequence[App]) -> None:
        self.clear()
        for app in apps:
            item = QListWidgetItem(app.name)
            if app.icon:
                item.setIcon(QIcon.fromTheme(app.icon))
            if app.description:
                item.setToolTip(app.description)
            item.setData(Qt.UserRole, app)
            self.addItem(item)
        if self.count():
            self.setCurrentRow(0)

    def current_app(self) -> Optional[App]:
        item = self.currentItem()
        return item.data(Qt.UserRole) if item else None

    def move_selection(self, step: int) -> None:
        if not self.count():
            return
        row = max(0, min(self.count() - 1, self.currentRow() + step))
        self.setCurrentRow(row)
