#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Canvas matplotlib interactif pour l'edition de splines de Bezier.

Affiche :
- Segments de chaque spline et leurs points de controle (draggables)
- Constructions choisies dans le panneau (tangente, normale, boite,
  lerps, combinaison lineaire, cercle osculateur)
- Points en cours de saisie pour le prochain segment

Chaque evenement de deplacement souris est un cycle : deplacement du
point, resolution des contraintes, puis retrace.
"""

import logging

import numpy as np

from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg

from PySide6.QtCore import Signal

from model.point import Point
from model.spline import Spline
from model.overlays import DisplayOptions
from model.render import MatplotlibRenderer, draw_spline, point_colors

logger = logging.getLogger(__name__)

PICK_RADIUS = 8                # pixels pour la detection clic
VIEW_WIDTH = 800.0
VIEW_HEIGHT = 600.0


class SplineCanvas(FigureCanvasQTAgg):
    """Canvas matplotlib pour le trace et l'edition interactive."""

    spline_edited = Signal()        # emis a la fin d'un drag
    status_message = Signal(str)    # message pour la barre de statut

    def __init__(self, options=None, parent=None):
        self._fig = Figure(figsize=(10, 7), dpi=100)
        super().__init__(self._fig)
        self.setParent(parent)

        self._options = options or DisplayOptions.from_params()
        self._ax = self._fig.add_subplot(111)
        self._renderer = MatplotlibRenderer(
            self._ax, background=self._options.colors['background'])
        self._fig.tight_layout()

        # Donnees modele
        self._splines = []
        self._continuity = self._options.continuity
        self._forming = []           # points du prochain segment

        # --- Drag state ---
        self._drag_point = None

        # --- Pan state (bouton milieu) ---
        self._panning = False
        self._pan_start_xy = None

        self._xlim = (0.0, VIEW_WIDTH)
        self._ylim = (0.0, VIEW_HEIGHT)

        self.mpl_connect('button_press_event', self._on_press)
        self.mpl_connect('motion_notify_event', self._on_motion)
        self.mpl_connect('button_release_event', self._on_release)
        self.mpl_connect('scroll_event', self._on_scroll)

        self.redraw()

    # ==================================================================
    # API publique
    # ==================================================================

    @property
    def splines(self):
        """Splines affichees (liste)."""
        return self._splines

    @property
    def options(self):
        """Options d'affichage courantes."""
        return self._options

    def set_options(self, options):
        """Remplace les options d'affichage et retrace."""
        self._options = options
        self.redraw()

    def set_continuity(self, continuity):
        """Continuite des prochaines splines (Spline.C0 ou Spline.C1)."""
        self._options.continuity = continuity
        self._continuity = self._options.continuity
        self.finish_spline()

    def finish_spline(self):
        """Termine la spline en cours : le prochain clic en cree une."""
        for spline in self._splines:
            spline.active = False
        self._forming = []
        self.redraw()

    def clear(self):
        """Supprime toutes les splines."""
        self._splines = []
        self._forming = []
        self.redraw()

    def zoom_fit(self):
        """Ajuste le zoom sur l'ensemble des splines."""
        boxes = [s.compute_bounds() for s in self._splines if len(s)]
        if not boxes:
            self._xlim = (0.0, VIEW_WIDTH)
            self._ylim = (0.0, VIEW_HEIGHT)
        else:
            xmin = min(b[0].x for b in boxes)
            ymin = min(b[0].y for b in boxes)
            xmax = max(b[1].x for b in boxes)
            ymax = max(b[1].y for b in boxes)
            margin = 0.1 * max(xmax - xmin, ymax - ymin, 1.0)
            self._xlim = (xmin - margin, xmax + margin)
            self._ylim = (ymin - margin, ymax + margin)
        self.redraw()

    # ==================================================================
    # Trace
    # ==================================================================

    def redraw(self):
        """Retrace toutes les splines et les points en cours de saisie."""
        self._renderer.clear()
        self._ax.set_aspect('equal', adjustable='datalim')
        self._ax.set_xticks([])
        self._ax.set_yticks([])

        for spline in self._splines:
            draw_spline(self._renderer, spline, self._options)

        for p in self._forming:
            fill, border = point_colors(p, self._options)
            self._renderer.draw_point(p.coords, p.radius, fill, border)

        self._ax.set_xlim(*self._xlim)
        self._ax.set_ylim(*self._ylim)
        self.draw_idle()

    # ==================================================================
    # Saisie et drag & drop des points
    # ==================================================================

    def _active_spline(self):
        """Spline en cours d'extension, creee si necessaire."""
        if self._splines and self._splines[-1].active:
            return self._splines[-1]
        spline = Spline(continuity=self._continuity,
                        name='Spline %d' % (len(self._splines) + 1))
        self._splines.append(spline)
        return spline

    def _add_forming_point(self, x, y):
        """Ajoute un point au prochain segment ; cree le segment si complet."""
        spline = self._active_spline()
        self._forming.append(Point(x, y, Point.FORMING_BEZIER))
        required = spline.next_curve_points
        if len(self._forming) < required:
            self.status_message.emit(
                "%d/%d points pour le prochain segment"
                % (len(self._forming), required))
            return
        try:
            spline.append_segment(self._forming)
        except ValueError as e:
            self.status_message.emit(str(e))
            logger.error("Ajout de segment refuse : %s", e)
        else:
            for p in self._forming:
                p.mode = Point.STANDARD
            self.status_message.emit(
                "%s : %d segment(s)" % (spline.name, len(spline)))
        self._forming = []

    def _on_press(self, event):
        """Clic gauche : drag d'un point ou saisie ; droit : fin de spline."""
        if event.button == 2:
            self._panning = True
            self._pan_start_xy = (event.x, event.y)
            return
        if event.inaxes != self._ax:
            return
        if event.button == 3:
            self.finish_spline()
            self.status_message.emit("Spline terminee")
            return
        if event.button != 1:
            return

        point = self._find_nearest_point(event)
        if point is not None:
            self._drag_point = point
            point.mode = Point.MOVING
        else:
            self._add_forming_point(event.xdata, event.ydata)
        self.redraw()

    def _on_motion(self, event):
        """Deplace le point pendant le drag, ou pan la vue."""
        if self._panning:
            if self._pan_start_xy is None:
                return
            dx_pix = event.x - self._pan_start_xy[0]
            dy_pix = event.y - self._pan_start_xy[1]
            self._pan_start_xy = (event.x, event.y)

            xlim = self._ax.get_xlim()
            ylim = self._ax.get_ylim()
            bbox = self._ax.get_window_extent()
            dx_data = -dx_pix * (xlim[1] - xlim[0]) / bbox.width
            dy_data = -dy_pix * (ylim[1] - ylim[0]) / bbox.height
            self._xlim = (xlim[0] + dx_data, xlim[1] + dx_data)
            self._ylim = (ylim[0] + dy_data, ylim[1] + dy_data)
            self.redraw()
            return

        if self._drag_point is None or event.inaxes != self._ax:
            return
        if event.xdata is None or event.ydata is None:
            return

        # Un cycle : deplacement, contraintes, retrace
        self._drag_point.move(event.xdata, event.ydata)
        for spline in self._splines:
            spline.resolve_constraints()
        self.redraw()

    def _on_release(self, event):
        """Finalise le drag ou le pan."""
        if self._panning:
            self._panning = False
            self._pan_start_xy = None
            return
        if self._drag_point is not None:
            self._drag_point.mode = Point.STANDARD
            self._drag_point = None
            self.redraw()
            self.spline_edited.emit()

    def _find_nearest_point(self, event):
        """Point le plus proche du clic (en pixels), ou None."""
        best_dist = PICK_RADIUS
        best = None
        candidates = []
        for spline in self._splines:
            candidates.extend(spline.control_points())
        for p in candidates:
            x_pix, y_pix = self._ax.transData.transform((p.x, p.y))
            dist = np.hypot(x_pix - event.x, y_pix - event.y)
            if dist < best_dist:
                best_dist = dist
                best = p
        return best

    # ==================================================================
    # Zoom molette
    # ==================================================================

    def _on_scroll(self, event):
        """Zoom avant/arriere centre sur la position du curseur."""
        if event.inaxes != self._ax:
            return

        base_scale = 1.2
        if event.button == 'up':
            scale_factor = 1.0 / base_scale
        elif event.button == 'down':
            scale_factor = base_scale
        else:
            return

        xdata = event.xdata
        ydata = event.ydata
        xlim = self._ax.get_xlim()
        ylim = self._ax.get_ylim()

        new_width = (xlim[1] - xlim[0]) * scale_factor
        new_height = (ylim[1] - ylim[0]) * scale_factor
        rel_x = (xdata - xlim[0]) / (xlim[1] - xlim[0])
        rel_y = (ydata - ylim[0]) / (ylim[1] - ylim[0])

        self._xlim = (xdata - new_width * rel_x,
                      xdata + new_width * (1 - rel_x))
        self._ylim = (ydata - new_height * rel_y,
                      ydata + new_height * (1 - rel_y))
        self.redraw()
