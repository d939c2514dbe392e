#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Options d'affichage et geometrie des constructions superposees.

:class:`DisplayOptions` regroupe les drapeaux lus par le rendu (le calcul
ne les interprete pas). :func:`curve_overlays` calcule, pour une courbe,
toutes les constructions a tracer sous forme de donnees neutres
(dicts + numpy arrays) : le rendu n'a plus qu'a les dessiner.

Usage::

    options = DisplayOptions.from_params({'SHOW_BOX': True})
    data = curve_overlays(curve, options)
    data['box']        # (ndarray(2,), ndarray(2,)) ou None

@author: Nervures
@date: 2026-10
"""

import logging

from .config import load_defaults, merge_params
from .errors import InvalidArgument, DegenerateGeometry
from .spline import Spline

logger = logging.getLogger(__name__)


class DisplayOptions:
    """Drapeaux et reglages du rendu.

    Les noms d'attributs correspondent aux cles du fichier
    defaults_display.cfg en minuscules.
    """

    FLAGS = ('show_lerps', 'show_handles', 'show_box', 'show_tangent',
             'show_normal', 'show_lc', 'show_osculating')

    def __init__(self, show_lerps=False, show_handles=False, show_box=False,
                 show_tangent=True, show_normal=True, show_lc=True,
                 show_osculating=True, t_param=0.5, vector_scale=0.2,
                 n_samples=200, continuity=Spline.C1, colors=None):
        """
        :param show_*: constructions a afficher
        :type show_*: bool
        :param t_param: parametre du point courant, dans [0, 1]
        :type t_param: float
        :param vector_scale: echelle des fleches tangente / normale
        :type vector_scale: float
        :param n_samples: nombre de points du trace de la courbe
        :type n_samples: int
        :param continuity: continuite des nouvelles splines (Spline.C0 ou
            Spline.C1)
        :type continuity: int
        :param colors: couleurs (cles en minuscules du fichier de
            configuration : 'bezier', 'tangent', 'lerps'...)
        :type colors: dict or None
        """
        self.show_lerps = bool(show_lerps)
        self.show_handles = bool(show_handles)
        self.show_box = bool(show_box)
        self.show_tangent = bool(show_tangent)
        self.show_normal = bool(show_normal)
        self.show_lc = bool(show_lc)
        self.show_osculating = bool(show_osculating)
        self.t_param = t_param
        self.vector_scale = float(vector_scale)
        if int(n_samples) < 2:
            raise InvalidArgument(
                "n_samples doit etre >= 2, recu %s" % n_samples)
        self.n_samples = int(n_samples)
        self.continuity = continuity
        self.colors = {
            'background': '#2A383E',
            'bezier': 'red',
            'highlight': 'tomato',
            'tangent': '#FF47A6',
            'normal': '#B6FF72',
            'box': 'blue',
            'osculating': 'white',
            'lerps': ['chocolate', 'coral', 'bisque'],
            'points': ['yellow', 'red', 'orange', 'black'],
            'point_borders': ['yellow', 'red', 'orange', 'white'],
        }
        if colors:
            self.colors.update(colors)

    def __repr__(self):
        on = [f[5:] for f in self.FLAGS if getattr(self, f)]
        return "DisplayOptions(t=%g, %s)" % (self._t_param, ', '.join(on))

    @property
    def t_param(self):
        """Parametre t du point courant, dans [0, 1]."""
        return self._t_param

    @t_param.setter
    def t_param(self, value):
        value = float(value)
        if not 0.0 <= value <= 1.0:
            raise InvalidArgument(
                "t_param doit etre dans [0, 1], recu %g" % value)
        self._t_param = value

    @property
    def continuity(self):
        """Continuite des nouvelles splines, Spline.C0 ou Spline.C1."""
        return self._continuity

    @continuity.setter
    def continuity(self, value):
        if isinstance(value, bool) or value not in (Spline.C0, Spline.C1):
            raise InvalidArgument(
                "Continuite inconnue %r. Attendu : Spline.C0, Spline.C1"
                % (value,))
        self._continuity = int(value)

    @property
    def shows_current_point(self):
        """True si une construction depend du point courant B(t)."""
        return (self.show_lerps or self.show_tangent or self.show_normal
                or self.show_lc or self.show_osculating)

    @classmethod
    def from_params(cls, params=None):
        """Construit les options depuis les defauts et des surcharges.

        :param params: parametres utilisateur (cles du fichier .cfg)
        :type params: dict or None
        :rtype: DisplayOptions
        """
        p = merge_params(load_defaults('display'), params)
        colors = {
            'background': p['BACKGROUND_COLOR'],
            'bezier': p['BEZIER_COLOR'],
            'highlight': p['HIGHLIGHT_COLOR'],
            'tangent': p['TANGENT_COLOR'],
            'normal': p['NORMAL_COLOR'],
            'box': p['BOX_COLOR'],
            'osculating': p['OSCULATING_COLOR'],
            'lerps': p['LERP_COLORS'],
            'points': p['POINT_COLORS'],
            'point_borders': p['POINT_BORDER_COLORS'],
        }
        kwargs = dict((f, p[f.upper()]) for f in cls.FLAGS)
        return cls(t_param=p['T_PARAM'], vector_scale=p['VECTOR_SCALE'],
                   n_samples=p['N_SAMPLES'], continuity=p['CONTINUITY'],
                   colors=colors, **kwargs)

    def as_params(self):
        """Drapeaux et reglages numeriques sous forme de parametres .cfg."""
        params = dict((f.upper(), getattr(self, f)) for f in self.FLAGS)
        params['T_PARAM'] = self.t_param
        params['VECTOR_SCALE'] = self.vector_scale
        params['N_SAMPLES'] = self.n_samples
        params['CONTINUITY'] = self.continuity
        return params


def curve_overlays(curve, options=None):
    """Calcule les constructions a tracer pour une courbe.

    Les cles des constructions desactivees valent None. Une normale ou un
    cercle osculateur indefini (derivee nulle) vaut aussi None et un
    message est ajoute a 'warnings'.

    :param curve: courbe a decorer
    :type curve: CubicBezier
    :param options: options d'affichage (None = defauts)
    :type options: DisplayOptions or None
    :returns: dict avec les cles 'curve', 'control_points', 'current',
        'tangent', 'normal', 'box', 'lerps', 'handles',
        'linear_combination', 'osculating', 'warnings'
    :rtype: dict
    """
    if options is None:
        options = DisplayOptions()
    t = options.t_param
    scale = options.vector_scale

    data = {
        'curve': curve.sample(options.n_samples),
        'control_points': curve.control_array(),
        'current': None,
        'tangent': None,
        'normal': None,
        'box': None,
        'lerps': None,
        'handles': None,
        'linear_combination': None,
        'osculating': None,
        'warnings': [],
    }

    current = curve.evaluate(t).as_array()
    if options.shows_current_point:
        data['current'] = current

    if options.show_lerps:
        data['lerps'] = [[p.as_array() for p in layer]
                         for layer in curve.lerp_layers(t)]
    elif options.show_handles:
        data['handles'] = [(a.as_array(), b.as_array())
                           for a, b in curve.handles()]

    if options.show_box:
        pmin, pmax = curve.compute_bounds()
        data['box'] = (pmin.as_array(), pmax.as_array())

    if options.show_tangent:
        d = curve.derivative(t)
        data['tangent'] = (current, current + d * scale)

    if options.show_normal:
        # Meme longueur que la fleche tangente
        d = curve.derivative(t)
        try:
            n = curve.normal(t)
        except DegenerateGeometry as e:
            _warn(data, curve, e)
        else:
            length = (d[0] ** 2 + d[1] ** 2) ** 0.5
            data['normal'] = (current, current + n * length * scale)

    if options.show_lc:
        data['linear_combination'] = curve.linear_combination_vectors(t)

    if options.show_osculating:
        try:
            circle = curve.compute_curvature(t)
        except DegenerateGeometry as e:
            _warn(data, curve, e)
        else:
            if circle.center is not None:
                data['osculating'] = {
                    'center': circle.center.as_array(),
                    'radius': circle.radius,
                }

    return data


def _warn(data, curve, error):
    """Enregistre une construction impossible dans data['warnings']."""
    msg = "%s : %s" % (curve.name, error)
    if msg not in data['warnings']:
        data['warnings'].append(msg)
        logger.warning(msg)
