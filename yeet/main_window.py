#===============================================================================
#  Yeet | main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Picker window: a search box over the app list. Enter launches the selected
#  app and closes the window, Escape closes it.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import List

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLineEdit, QMainWindow, QMessageBox, QVBoxLayout, QWidget

from .config import Config
from .constants import APP_TITLE
from .errors import LaunchError
from .history import HistoryLedger
from .launcher import launch_app
from .models import App
from .search import filter_apps
from .ui_widgets import AppList


class MainWindow(QMainWindow):
    def __init__(self, config: Config, apps: List[App], history: HistoryLedger):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.setWindowFlags(self.windowFlags() | Qt.FramelessWindowHint)

        self.config = config
        self.apps = apps
        self.history = history
        self.recent = history.load()

        self.setStyleSheet("""
        QMainWindow { background: #101010; }
        QLineEdit {
            color: white;
            background: #1a1a1a;
            border: 1px solid #2a2a2a;
            padding: 8px;
            font-size: 16px;
        }
        QListWidget { color: white; background: #101010; border: none; }
        QListWidget::item:selected { background: #0078D7; }
        """)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(6)

        self.search = QLineEdit()
        self.search.setPlaceholderText("Search applications…")
        self.search.textChanged.connect(self.refresh)
        self.search.returnPressed.connect(self.launch_selected)
        layout.addWidget(self.search)

        self.results = AppList()
        self.results.itemActivated.connect(lambda _item: self.launch_selected())
        layout.addWidget(self.results)

        self.setFixedWidth(config.appearance.width)
        self.refresh()
        self.search.setFocus()

    def refresh(self) -> None:
        results = filter_apps(
            self.apps,
            self.search.text(),
            self.recent,
            limit=self.config.general.max_results,
        )
        self.results.set_apps(results)

    def launch_selected(self) -> None:
        app = self.results.current_app()
        if app is None:
            return
        try:
            launch_app(app, self.config.general.terminal, self.history)
        except LaunchError as e:
            QMessageBox.critical(self, "Launch failed", str(e))
            return
        self.close()

    def keyPressEvent(self, event):
        key = event.key()
        if key == Qt.Key_Escape:
            self.close()
        elif key == Qt.Key_Down:
            self.results.move_selection(1)
        elif key == Qt.Key_Up:
            self.results.move_selection(-1)
        else:
            super().keyPressEvent(event)
