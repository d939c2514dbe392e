#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Fenetre principale BezierTools."""

import sys

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QHBoxLayout, QVBoxLayout
)
from PySide6.QtGui import QAction

from model.overlays import DisplayOptions
from .spline_canvas import SplineCanvas
from .control_panel import ControlPanel
from .bernstein_graph import BernsteinGraphCanvas


class MainWindow(QMainWindow):
    """Fenetre principale : canvas, panneau de controle et graphe."""

    def __init__(self, params=None):
        """
        :param params: parametres d'affichage (surchargent les defauts)
        :type params: dict or None
        """
        super().__init__()
        self.setWindowTitle("BezierTools")
        self.resize(1200, 750)

        self._options = DisplayOptions.from_params(params)
        self._build_menus()
        self._build_central()
        self.statusBar().showMessage(
            "Clic gauche : placer ou d\u00e9placer un point ; "
            "clic droit : terminer la spline")

    # ------------------------------------------------------------------
    # Menus
    # ------------------------------------------------------------------

    def _build_menus(self):
        """Construit la barre de menus."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&Fichier")
        act_clear = QAction("&Effacer tout", self)
        act_clear.setShortcut("Ctrl+N")
        act_clear.triggered.connect(self._on_clear)
        file_menu.addAction(act_clear)
        file_menu.addSeparator()
        act_quit = QAction("&Quitter", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        file_menu.addAction(act_quit)

        view_menu = menubar.addMenu("&Affichage")
        act_zoom_fit = QAction("Zoom &adapte", self)
        act_zoom_fit.setShortcut("Ctrl+0")
        act_zoom_fit.triggered.connect(self._on_zoom_fit)
        view_menu.addAction(act_zoom_fit)

        help_menu = menubar.addMenu("&Aide")
        act_about = QAction("A &propos...", self)
        act_about.triggered.connect(self._on_about)
        help_menu.addAction(act_about)

    def _build_central(self):
        """Construit le canvas et le panneau lateral."""
        central = QWidget()
        layout = QHBoxLayout(central)

        self._canvas = SplineCanvas(self._options, self)
        layout.addWidget(self._canvas, stretch=1)

        side = QVBoxLayout()
        self._panel = ControlPanel(self._options, self)
        side.addWidget(self._panel)
        self._graph = BernsteinGraphCanvas(self)
        self._graph.set_t(self._options.t_param)
        side.addWidget(self._graph)
        layout.addLayout(side)

        self.setCentralWidget(central)

        self._panel.options_changed.connect(self._canvas.set_options)
        self._panel.t_changed.connect(self._graph.set_t)
        self._panel.continuity_changed.connect(self._canvas.set_continuity)
        self._panel.clear_requested.connect(self._on_clear)
        self._canvas.status_message.connect(self.statusBar().showMessage)

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_clear(self):
        """Supprime toutes les splines."""
        self._canvas.clear()
        self.statusBar().showMessage("Canvas effac\u00e9")

    def _on_zoom_fit(self):
        """Zoom adapte sur le canvas."""
        self._canvas.zoom_fit()

    def _on_about(self):
        """Affiche la boite A propos."""
        from PySide6.QtWidgets import QMessageBox
        QMessageBox.about(
            self, "BezierTools",
            "BezierTools - Courbes de Bezier cubiques et splines\n\n"
            "Base de Bernstein, courbure, continuit\u00e9 C1\n"
            "\u00a9 Nervures"
        )


def main():
    """Point d'entree de l'application."""
    app = QApplication.instance() or QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
