#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Trace des courbes, splines et constructions vers une surface de dessin.

:func:`draw_curve` et :func:`draw_spline` parcourent les donnees de
:func:`overlays.curve_overlays` et emettent les primitives d'un
:class:`base.AbstractRenderer`, dans l'ordre suivant : points de controle,
courbe, lerps ou poignees, point courant, boite englobante, tangente et
normale, combinaison lineaire, cercle osculateur.

:class:`MatplotlibRenderer` implemente la surface sur des axes matplotlib.

@author: Nervures
@date: 2026-10
"""

import numpy as np

from .base import AbstractRenderer
from .bernstein import BASIS_COLORS
from .overlays import DisplayOptions, curve_overlays
from .point import Point


def point_colors(point, options):
    """Couleurs (remplissage, bordure) d'un point selon son mode.

    point.color, s'il est defini, remplace la couleur de remplissage.

    :rtype: tuple(str, str)
    """
    fill = options.colors['points'][point.mode]
    border = options.colors['point_borders'][point.mode]
    if point.color is not None:
        fill = point.color
    return fill, border


def draw_curve(renderer, curve, options=None):
    """Trace une courbe et les constructions demandees.

    :param renderer: surface de dessin
    :type renderer: AbstractRenderer
    :param curve: courbe a tracer
    :type curve: CubicBezier
    :param options: options d'affichage (None = defauts)
    :type options: DisplayOptions or None
    :returns: donnees calculees (voir curve_overlays)
    :rtype: dict
    """
    if options is None:
        options = DisplayOptions()
    colors = options.colors
    data = curve_overlays(curve, options)

    # Points de controle
    for p in curve:
        if p.visible:
            fill, border = point_colors(p, options)
            renderer.draw_point(p.coords, p.radius, fill, border)

    # Courbe
    color = colors['bezier']
    if options.show_lerps or options.show_tangent or options.show_lc:
        color = colors['highlight']
    renderer.draw_polyline(data['curve'], color, width=2.0)

    # Construction de De Casteljau ou poignees
    if data['lerps'] is not None:
        lerp_colors = colors['lerps']
        layers = [list(data['control_points'])] + data['lerps']
        for level in range(len(layers) - 1):
            c = lerp_colors[level % len(lerp_colors)]
            renderer.draw_polyline(np.array(layers[level]), c)
            for xy in layers[level + 1]:
                renderer.draw_point(xy, Point.DRAW_RADIUS - 1, c, c)
    elif data['handles'] is not None:
        for a, b in data['handles']:
            renderer.draw_polyline(np.array([a, b]), colors['lerps'][0],
                                   alpha=0.5)

    # Point courant B(t)
    if data['current'] is not None:
        renderer.draw_point(data['current'], Point.DRAW_RADIUS + 1,
                            'red', 'red')

    if data['box'] is not None:
        pmin, pmax = data['box']
        renderer.draw_rect(pmin, pmax, colors['box'])

    if data['tangent'] is not None:
        renderer.draw_arrow(data['tangent'][0], data['tangent'][1],
                            colors['tangent'])
    if data['normal'] is not None:
        renderer.draw_arrow(data['normal'][0], data['normal'][1],
                            colors['normal'])

    # Combinaison lineaire : rayons origine -> Pi puis chaine ponderee
    lc = data['linear_combination']
    if lc is not None:
        fill, border = point_colors(Point(0, 0, Point.ORIGIN), options)
        renderer.draw_point(lc['origin'], Point.DRAW_RADIUS, fill, border)
        for i, (start, end) in enumerate(lc['spokes']):
            renderer.draw_arrow(start, end, BASIS_COLORS[i], width=2.0,
                                alpha=0.35, dashes=[3, 5], head=10)
        for i, (start, end) in enumerate(lc['chain']):
            renderer.draw_arrow(start, end, BASIS_COLORS[i], width=3.0,
                                head=5)

    osc = data['osculating']
    if osc is not None:
        renderer.draw_arrow(data['current'], osc['center'],
                            colors['osculating'], width=1.0, alpha=0.5,
                            dashes=[2, 5], head=3)
        renderer.draw_circle(osc['center'], osc['radius'],
                             colors['osculating'])

    return data


def draw_spline(renderer, spline, options=None):
    """Trace tous les segments d'une spline.

    :returns: liste des donnees calculees, une par segment
    :rtype: list[dict]
    """
    if options is None:
        options = DisplayOptions()
    return [draw_curve(renderer, curve, options) for curve in spline]


# --------------------------------------------------------------------------
#  Surface matplotlib
# --------------------------------------------------------------------------

class MatplotlibRenderer(AbstractRenderer):
    """Surface de dessin sur des axes matplotlib."""

    def __init__(self, ax, background=None):
        """
        :param ax: axes matplotlib
        :type ax: matplotlib.axes.Axes
        :param background: couleur de fond (None = inchangee)
        :type background: str or None
        """
        self.ax = ax
        self.background = background
        if background is not None:
            ax.set_facecolor(background)

    @staticmethod
    def _linestyle(dashes):
        if dashes:
            return (0, tuple(dashes))
        return '-'

    def clear(self):
        self.ax.cla()
        if self.background is not None:
            self.ax.set_facecolor(self.background)

    def draw_point(self, xy, radius, color, border_color):
        self.ax.plot([xy[0]], [xy[1]], 'o', markersize=2 * radius,
                     markerfacecolor=color, markeredgecolor=border_color,
                     zorder=5)

    def draw_polyline(self, points, color, width=1.0, alpha=1.0,
                      dashes=None):
        pts = np.asarray(points, dtype=float)
        self.ax.plot(pts[:, 0], pts[:, 1], color=color, linewidth=width,
                     alpha=alpha, linestyle=self._linestyle(dashes))

    def draw_arrow(self, start, end, color, width=1.0, alpha=1.0,
                   dashes=None, head=10):
        self.ax.annotate(
            '', xy=(end[0], end[1]), xytext=(start[0], start[1]),
            arrowprops=dict(arrowstyle='-|>', color=color, linewidth=width,
                            alpha=alpha, linestyle=self._linestyle(dashes),
                            mutation_scale=head, shrinkA=0, shrinkB=0))

    def draw_rect(self, pmin, pmax, color, alpha=0.5, fill_alpha=0.03):
        from matplotlib.patches import Rectangle

        width = pmax[0] - pmin[0]
        height = pmax[1] - pmin[1]
        self.ax.add_patch(Rectangle((pmin[0], pmin[1]), width, height,
                                    fill=True, facecolor=color,
                                    edgecolor='none', alpha=fill_alpha))
        self.ax.add_patch(Rectangle((pmin[0], pmin[1]), width, height,
                                    fill=False, edgecolor=color,
                                    alpha=alpha))

    def draw_circle(self, center, radius, color, width=2.0):
        from matplotlib.patches import Circle

        self.ax.add_patch(Circle((center[0], center[1]), radius, fill=False,
                                 edgecolor=color, linewidth=width))
