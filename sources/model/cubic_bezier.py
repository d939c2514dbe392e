#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Courbe de Bezier cubique 2D.

Evaluation par combinaison lineaire sur la base de Bernstein (forme de
Horner), boite englobante exacte par recherche des zeros de la derivee,
courbure et cercle osculateur.

Les 4 points de controle sont des objets :class:`Point` stockes par
reference : deplacer un point deforme la courbe sans autre appel.

Creation::

    b = CubicBezier([Point(0, 0), Point(1, 2), Point(3, 2), Point(4, 0)])

    pt = b.evaluate(0.5)              # Point
    d = b.derivative(0.5)             # ndarray(2,)
    pmin, pmax = b.compute_bounds()   # (Point, Point)
    circle = b.compute_curvature(0.5)

@author: Nervures
@date: 2026-10
"""

import math
from collections import namedtuple

import numpy as np

from .bernstein import (basis, basis_derivative, basis_second_derivative,
                        linear_combination)
from .errors import InvalidArgument, DegenerateGeometry
from .point import Point, lerp

# Seuil relatif : les grandeurs sont comparees a l'echelle de la courbe
EPSILON = 1e-12

OsculatingCircle = namedtuple('OsculatingCircle', ['radius', 'center',
                                                   'normal'])
OsculatingCircle.__doc__ = """Cercle osculateur en un point de la courbe.

radius : rayon de courbure (math.inf si la courbe est localement droite)
center : centre du cercle (Point), None si le rayon est infini
normal : normale unitaire orientee vers la concavite, ndarray(2,)
"""


# --------------------------------------------------------------------------
#  Fonctions utilitaires
# --------------------------------------------------------------------------

def _quadratic_roots(a, b, c):
    """Racines reelles de a*t^2 + b*t + c = 0.

    Un coefficient est nul s'il est negligeable devant |a| + |b| + |c|.
    Si a est nul, l'equation est resolue comme une equation lineaire ;
    si a et b sont nuls, aucune racine n'est retournee.

    :returns: liste de 0 a 2 racines
    :rtype: list[float]
    """
    tol = EPSILON * (abs(a) + abs(b) + abs(c))
    if abs(a) <= tol:
        if abs(b) <= tol:
            return []
        return [-c / b]
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []
    sq = math.sqrt(discriminant)
    return [(-b + sq) / (2.0 * a), (-b - sq) / (2.0 * a)]


def _lerp_layers(points, t):
    """Construction de De Casteljau, couche par couche (recursif).

    :param points: couche courante (liste de Point)
    :param t: parametre
    :returns: liste des couches suivantes, la derniere contient un point
    :rtype: list[list[Point]]
    """
    if len(points) < 2:
        return []
    layer = [lerp(points[i], points[i + 1], t)
             for i in range(len(points) - 1)]
    return [layer] + _lerp_layers(layer, t)


# --------------------------------------------------------------------------
#  Classe CubicBezier
# --------------------------------------------------------------------------

class CubicBezier:
    """Courbe de Bezier cubique definie par 4 points de controle."""

    def __init__(self, points, name='Sans nom'):
        """
        :param points: exactement 4 points de controle (references)
        :type points: list[Point]
        :param name: nom de la courbe
        :type name: str
        :raises InvalidArgument: si points ne contient pas exactement
            4 objets Point
        """
        try:
            points = list(points)
        except TypeError:
            raise InvalidArgument(
                "Une courbe cubique est definie par 4 points, recu %r"
                % (points,))
        if len(points) != 4:
            raise InvalidArgument(
                "Une courbe cubique est definie par 4 points, recu %d"
                % len(points))
        for i, p in enumerate(points):
            if not isinstance(p, Point):
                raise InvalidArgument(
                    "Le point de controle %d n'est pas un Point (%s)"
                    % (i, type(p).__name__))
        self._points = points
        self._name = name

    def __repr__(self):
        return "CubicBezier('%s', %s)" % (
            self._name, ', '.join(repr(p) for p in self._points))

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def points(self):
        """Points de controle (liste des references, ne pas modifier)."""
        return self._points

    @property
    def name(self):
        """Nom de la courbe."""
        return self._name

    @name.setter
    def name(self, value):
        self._name = str(value)

    @property
    def origin(self):
        """Barycentre des 4 points de controle, recalcule a chaque acces.

        Sert d'origine aux vecteurs de la combinaison lineaire.
        """
        cpts = self.control_array()
        center = cpts.mean(axis=0)
        return Point(center[0], center[1], Point.ORIGIN)

    def control_array(self):
        """Coordonnees courantes des points de controle, ndarray(4, 2)."""
        return np.array([[p.x, p.y] for p in self._points], dtype=float)

    def _zero_tolerance(self):
        """Norme de derivee en dessous de laquelle elle est nulle.

        Proportionnelle a l'etendue du polygone de controle ; vaut 0 si
        les 4 points sont confondus.
        """
        return EPSILON * float(np.ptp(self.control_array(), axis=0).max())

    # ------------------------------------------------------------------
    #  Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, t):
        """Point de la courbe en t.

        :param t: parametre (non borne, extrapolation hors de [0, 1])
        :type t: float
        :returns: nouveau point
        :rtype: Point
        """
        x, y = linear_combination(basis(float(t)), self.control_array())
        return Point(x, y)

    def evaluate_array(self, t):
        """Points de la courbe pour un tableau de parametres.

        :param t: parametres, array-like (m,)
        :returns: ndarray(m, 2)
        """
        t = np.atleast_1d(np.asarray(t, dtype=float))
        return linear_combination(basis(t), self.control_array())

    def sample(self, n=100):
        """Echantillonne la courbe en n points uniformes en t.

        :param n: nombre de points (>= 2)
        :returns: ndarray(n, 2)
        """
        if n < 2:
            raise InvalidArgument("n doit etre >= 2, recu %d" % n)
        return self.evaluate_array(np.linspace(0.0, 1.0, n))

    def derivative(self, t):
        """Vecteur derivee premiere B'(t), ndarray(2,)."""
        return linear_combination(basis_derivative(float(t)),
                                  self.control_array())

    def second_derivative(self, t):
        """Vecteur derivee seconde B''(t), ndarray(2,)."""
        return linear_combination(basis_second_derivative(float(t)),
                                  self.control_array())

    def tangent(self, t):
        """Vecteur tangent unitaire en t.

        :raises DegenerateGeometry: si la derivee premiere est nulle
        """
        d = self.derivative(t)
        norm = math.hypot(d[0], d[1])
        if norm <= self._zero_tolerance():
            raise DegenerateGeometry(
                "Derivee nulle en t=%g : tangente indefinie" % t)
        return d / norm

    def normal(self, t):
        """Vecteur normal unitaire en t, oriente vers la concavite.

        La normale par defaut est (dy, -dx)/|d| ; elle est retournee si son
        produit scalaire avec la derivee seconde est negatif (un produit
        nul ne la retourne pas).

        :raises DegenerateGeometry: si la derivee premiere est nulle
        """
        tg = self.tangent(t)
        n = np.array([tg[1], -tg[0]])
        d2 = self.second_derivative(t)
        if n[0] * d2[0] + n[1] * d2[1] < 0.0:
            n = -n
        return n

    def curvature(self, t):
        """Courbure signee en t.

        kappa = (x' * y'' - y' * x'') / (x'^2 + y'^2)^(3/2)

        :raises DegenerateGeometry: si la derivee premiere est nulle
        """
        d = self.derivative(t)
        norm_sq = d[0] * d[0] + d[1] * d[1]
        if math.sqrt(norm_sq) <= self._zero_tolerance():
            raise DegenerateGeometry(
                "Derivee nulle en t=%g : courbure indefinie" % t)
        d2 = self.second_derivative(t)
        return float((d[0] * d2[1] - d[1] * d2[0]) / norm_sq ** 1.5)

    def compute_curvature(self, t):
        """Rayon et centre du cercle osculateur en t.

        radius = (dx^2 + dy^2)^1.5 / |dx*ddy - dy*ddx|
        center = B(t) + normal(t) * radius

        :returns: cercle osculateur ; rayon infini et centre None si la
            courbe est localement droite
        :rtype: OsculatingCircle
        :raises DegenerateGeometry: si la derivee premiere est nulle
        """
        n = self.normal(t)
        d = self.derivative(t)
        d2 = self.second_derivative(t)
        cross = abs(d[0] * d2[1] - d[1] * d2[0])
        norm_sq = d[0] * d[0] + d[1] * d[1]
        if cross < EPSILON * norm_sq:
            return OsculatingCircle(math.inf, None, n)
        radius = float(norm_sq ** 1.5 / cross)
        p = self.evaluate(t)
        center = Point(p.x + n[0] * radius, p.y + n[1] * radius)
        return OsculatingCircle(radius, center, n)

    # ------------------------------------------------------------------
    #  Boite englobante
    # ------------------------------------------------------------------

    def compute_bounds(self):
        """Boite englobante exacte de la courbe pour t dans [0, 1].

        Candidats : les extremites (la courbe passe par P0 et P3) et, pour
        chaque axe, les points ou la derivee de la composante s'annule.
        Derivee : a*t^2 + b*t + c avec
        a = [-3, 9, -9, 3].P, b = [6, -12, 6, 0].P, c = [-3, 3, 0, 0].P

        :returns: (coin min, coin max)
        :rtype: tuple(Point, Point)
        """
        cpts = self.control_array()
        a = linear_combination([-3.0, 9.0, -9.0, 3.0], cpts)
        b = linear_combination([6.0, -12.0, 6.0, 0.0], cpts)
        c = linear_combination([-3.0, 3.0, 0.0, 0.0], cpts)

        pmin = []
        pmax = []
        for axis in (0, 1):
            candidates = [cpts[0, axis], cpts[3, axis]]
            for root in _quadratic_roots(a[axis], b[axis], c[axis]):
                if 0.0 <= root <= 1.0:
                    value = linear_combination(basis(root), cpts)[axis]
                    candidates.append(value)
            pmin.append(min(candidates))
            pmax.append(max(candidates))
        return Point(pmin[0], pmin[1]), Point(pmax[0], pmax[1])

    # ------------------------------------------------------------------
    #  Constructions pedagogiques
    # ------------------------------------------------------------------

    def lerp_layers(self, t):
        """Couches de la construction de De Casteljau en t.

        :returns: 3 couches de 3, 2 puis 1 point ; le dernier point est
            B(t)
        :rtype: list[list[Point]]
        """
        return _lerp_layers(self._points, float(t))

    def handles(self):
        """Segments des poignees : (P0, P1) et (P2, P3)."""
        p = self._points
        return [(p[0], p[1]), (p[2], p[3])]

    def linear_combination_vectors(self, t):
        """Vecteurs de la combinaison lineaire B(t) = sum Bi(t) * Pi.

        Les rayons relient l'origine (barycentre) a chaque point de
        controle. La chaine met bout a bout les vecteurs
        Bi(t) * (Pi - origine) ; comme sum Bi(t) = 1, son extremite est
        B(t).

        :returns: dict avec 'origin' ndarray(2,), 'spokes' liste de
            (debut, fin) et 'chain' liste de (debut, fin)
        :rtype: dict
        """
        cpts = self.control_array()
        origin = cpts.mean(axis=0)
        weights = basis(float(t))
        spokes = [(origin.copy(), cpts[i].copy()) for i in range(4)]
        chain = []
        start = origin.copy()
        for i in range(4):
            end = start + (cpts[i] - origin) * weights[i]
            chain.append((start, end))
            start = end
        return {'origin': origin, 'spokes': spokes, 'chain': chain}

    # ------------------------------------------------------------------
    #  Transformations
    # ------------------------------------------------------------------

    def translate(self, dx, dy):
        """Translation des 4 points de controle (en place).

        :returns: self (pour chainage)
        """
        for p in self._points:
            p.translate(dx, dy)
        return self

    # ------------------------------------------------------------------
    #  Visualisation
    # ------------------------------------------------------------------

    def plot(self, ax=None, show=True, options=None):
        """Trace la courbe et ses constructions avec matplotlib.

        :param ax: axes matplotlib existants (None = creation)
        :param show: appeler plt.show() a la fin
        :param options: options d'affichage (None = defauts)
        :type options: DisplayOptions or None
        :returns: axes matplotlib
        """
        import matplotlib.pyplot as plt
        from .render import MatplotlibRenderer, draw_curve

        if ax is None:
            fig, ax = plt.subplots(1, 1, figsize=(10, 6))
        draw_curve(MatplotlibRenderer(ax), self, options)
        ax.set_aspect('equal')
        ax.set_title(self._name)

        if show:
            plt.show()
        return ax
