#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Base de Bernstein cubique.

Les quatre polynomes B0..B3, leurs derivees premieres et secondes,
exprimes sous forme de Horner. Toute evaluation de courbe se ramene a une
combinaison lineaire ``sum(c[i] * P[i])`` des points de controle avec
l'un de ces trois vecteurs de coefficients.

Le domaine de t n'est pas restreint : hors de [0, 1] les polynomes sont
simplement extrapoles.

Usage::

    c = basis(0.5)                       # ndarray(4,)
    c = basis(np.linspace(0, 1, 11))     # ndarray(11, 4)
    pt = linear_combination(c, cpts)     # cpts : ndarray(4, 2)

@author: Nervures
@date: 2026-10
"""

import numpy as np


def basis(t):
    """Coefficients de position [B0(t), B1(t), B2(t), B3(t)].

    :param t: parametre, scalaire ou array
    :type t: float or numpy.ndarray
    :returns: ndarray(4,) si t scalaire, ndarray(m, 4) si t array
    :rtype: numpy.ndarray
    """
    t = np.asarray(t, dtype=float)
    return np.stack([
        ((-t + 3.0) * t - 3.0) * t + 1.0,
        ((3.0 * t - 6.0) * t + 3.0) * t,
        ((-3.0 * t + 3.0) * t) * t,
        t * t * t,
    ], axis=-1)


def basis_derivative(t):
    """Coefficients de la derivee premiere [B0'(t), ..., B3'(t)].

    :param t: parametre, scalaire ou array
    :returns: ndarray(4,) ou ndarray(m, 4)
    """
    t = np.asarray(t, dtype=float)
    return np.stack([
        (-3.0 * t + 6.0) * t - 3.0,
        (9.0 * t - 12.0) * t + 3.0,
        (-9.0 * t + 6.0) * t,
        3.0 * t * t,
    ], axis=-1)


def basis_second_derivative(t):
    """Coefficients de la derivee seconde [B0''(t), ..., B3''(t)].

    :param t: parametre, scalaire ou array
    :returns: ndarray(4,) ou ndarray(m, 4)
    """
    t = np.asarray(t, dtype=float)
    return np.stack([
        -6.0 * t + 6.0,
        18.0 * t - 12.0,
        -18.0 * t + 6.0,
        6.0 * t,
    ], axis=-1)


def linear_combination(coefficients, points):
    """Combinaison lineaire des points de controle.

    :param coefficients: ndarray(4,) ou ndarray(m, 4)
    :param points: points de controle, ndarray(4, 2)
    :returns: ndarray(2,) ou ndarray(m, 2)
    :rtype: numpy.ndarray
    """
    return np.asarray(coefficients, dtype=float) @ np.asarray(points,
                                                              dtype=float)


# --------------------------------------------------------------------------
#  Fonctions individuelles (graphe de la base)
# --------------------------------------------------------------------------

BASIS_FUNCTIONS = (
    lambda t: ((-t + 3.0) * t - 3.0) * t + 1.0,
    lambda t: ((3.0 * t - 6.0) * t + 3.0) * t,
    lambda t: ((-3.0 * t + 3.0) * t) * t,
    lambda t: t * t * t,
)

BASIS_COLORS = ('magenta', 'royalblue', 'springgreen', 'yellow')


def graph_samples(n=151):
    """Echantillonne les quatre polynomes sur [0, 1].

    :param n: nombre d'echantillons
    :type n: int
    :returns: (t, valeurs) avec t ndarray(n,) et valeurs ndarray(n, 4)
    :rtype: tuple(numpy.ndarray, numpy.ndarray)
    """
    if n < 2:
        raise ValueError("n doit etre >= 2, recu %d" % n)
    t = np.linspace(0.0, 1.0, n)
    return t, basis(t)


class BernsteinGraph:
    """Geometrie du mini-graphe de la base de Bernstein.

    Le graphe occupe un carre de ``width`` x ``height`` pixels dans le coin
    inferieur droit du canvas, a ``padding`` pixels des bords. L'axe y du
    canvas est oriente vers le bas.
    """

    def __init__(self, width=150, height=150, padding=30):
        self.width = width
        self.height = height
        self.padding = padding
        self.t_param = 0.0

    def to_pixel_x(self, t, canvas_width):
        """Abscisse pixel correspondant au parametre t."""
        return canvas_width - self.width - self.padding + self.width * t

    def to_pixel_y(self, value, canvas_height):
        """Ordonnee pixel correspondant a une valeur de polynome."""
        return canvas_height - self.height * value - self.padding

    def from_pixel_x(self, x, canvas_width):
        """Parametre t correspondant a une abscisse pixel."""
        return (x - canvas_width + self.width + self.padding) / self.width

    def markers(self):
        """Valeurs des quatre polynomes en ``t_param``, ndarray(4,)."""
        return basis(self.t_param)
