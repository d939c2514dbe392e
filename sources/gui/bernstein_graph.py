#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Mini-graphe des quatre polynomes de la base de Bernstein.

Les courbes B0..B3 sont tracees sur [0, 1] avec un marqueur a t courant :
la hauteur de chaque marqueur est le poids du point de controle
correspondant dans B(t).
"""

from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg

from model.bernstein import BASIS_COLORS, graph_samples, BernsteinGraph


class BernsteinGraphCanvas(FigureCanvasQTAgg):
    """Graphe matplotlib de la base de Bernstein."""

    def __init__(self, parent=None):
        self._fig = Figure(figsize=(2.2, 2.2), dpi=100, facecolor='black')
        super().__init__(self._fig)
        self.setParent(parent)

        self._graph = BernsteinGraph()
        self._ax = self._fig.add_subplot(111)
        self._ax.set_facecolor('black')
        self._ax.set_xlim(0.0, 1.0)
        self._ax.set_ylim(0.0, 1.0)
        self._ax.set_xticks([])
        self._ax.set_yticks([])
        for spine in self._ax.spines.values():
            spine.set_color('white')

        t, values = graph_samples()
        self._markers = []
        for i, color in enumerate(BASIS_COLORS):
            self._ax.plot(t, values[:, i], '-', color=color, linewidth=1.2)
            marker, = self._ax.plot(
                [], [], 'o', markersize=6, markerfacecolor='black',
                markeredgecolor=color)
            self._markers.append(marker)
        self._fig.tight_layout()
        self.set_t(0.0)

    def set_t(self, t):
        """Deplace les marqueurs au parametre t."""
        self._graph.t_param = t
        for marker, value in zip(self._markers, self._graph.markers()):
            marker.set_data([t], [value])
        self.draw_idle()
