#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Panneau de controle : constructions affichees, parametre t, continuite."""

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QCheckBox, QComboBox, QLabel,
    QGroupBox, QSlider, QPushButton
)
from PySide6.QtCore import Qt, Signal

from model.overlays import DisplayOptions
from model.spline import Spline

SLIDER_STEPS = 1000

# (attribut DisplayOptions, libelle)
_FLAG_LABELS = [
    ('show_tangent', "Tangente"),
    ('show_normal', "Normale"),
    ('show_osculating', "Cercle osculateur"),
    ('show_lc', "Combinaison lin\u00e9aire"),
    ('show_lerps', "Construction de De Casteljau"),
    ('show_handles', "Poign\u00e9es"),
    ('show_box', "Bo\u00eete englobante"),
]


class ControlPanel(QWidget):
    """Reglages d'affichage et de construction des splines."""

    options_changed = Signal(object)    # DisplayOptions
    t_changed = Signal(float)
    continuity_changed = Signal(int)    # Spline.C0 ou Spline.C1
    clear_requested = Signal()

    def __init__(self, options=None, parent=None):
        super().__init__(parent)
        self._options = options or DisplayOptions.from_params()
        self._checks = {}
        self._build_ui()

    def _build_ui(self):
        """Construit l'interface du panneau."""
        layout = QVBoxLayout(self)

        # --- Constructions ---
        grp_flags = QGroupBox("Affichage")
        flags_layout = QVBoxLayout(grp_flags)
        for attr, label in _FLAG_LABELS:
            chk = QCheckBox(label)
            chk.setChecked(getattr(self._options, attr))
            chk.stateChanged.connect(
                lambda state, a=attr: self._on_toggle(a, state))
            flags_layout.addWidget(chk)
            self._checks[attr] = chk
        layout.addWidget(grp_flags)

        # --- Parametre t ---
        t_layout = QHBoxLayout()
        t_layout.addWidget(QLabel("t ="))
        self._sld_t = QSlider(Qt.Horizontal)
        self._sld_t.setRange(0, SLIDER_STEPS)
        self._sld_t.setValue(int(round(self._options.t_param * SLIDER_STEPS)))
        self._sld_t.valueChanged.connect(self._on_t_changed)
        t_layout.addWidget(self._sld_t, stretch=1)
        self._lbl_t = QLabel("%.3f" % self._options.t_param)
        t_layout.addWidget(self._lbl_t)
        layout.addLayout(t_layout)

        # --- Continuite ---
        cont_layout = QHBoxLayout()
        cont_layout.addWidget(QLabel("Continuit\u00e9 :"))
        self._cmb_continuity = QComboBox()
        self._cmb_continuity.addItem("C0", Spline.C0)
        self._cmb_continuity.addItem("C1", Spline.C1)
        self._cmb_continuity.setCurrentIndex(
            self._cmb_continuity.findData(self._options.continuity))
        self._cmb_continuity.currentIndexChanged.connect(
            self._on_continuity_changed)
        cont_layout.addWidget(self._cmb_continuity)
        layout.addLayout(cont_layout)

        btn_clear = QPushButton("Effacer")
        btn_clear.clicked.connect(self.clear_requested.emit)
        layout.addWidget(btn_clear)

        layout.addStretch()

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_toggle(self, attr, state):
        """Active/desactive une construction."""
        setattr(self._options, attr, state == Qt.Checked.value)
        self.options_changed.emit(self._options)

    def _on_t_changed(self, value):
        """Deplace le point courant."""
        self._options.t_param = value / float(SLIDER_STEPS)
        self._lbl_t.setText("%.3f" % self._options.t_param)
        self.t_changed.emit(self._options.t_param)
        self.options_changed.emit(self._options)

    def _on_continuity_changed(self, index):
        """Change la continuite des prochaines splines."""
        self._options.continuity = self._cmb_continuity.itemData(index)
        self.continuity_changed.emit(self._options.continuity)

    @property
    def options(self):
        """Options d'affichage courantes."""
        return self._options
