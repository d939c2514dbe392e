#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Point 2D mutable partage par reference.

Un meme objet Point peut appartenir a deux segments consecutifs d'une
spline (noeud partage) et a une contrainte miroir : un deplacement via
:meth:`Point.move` est vu par tous les detenteurs de la reference.

Creation::

    p = Point(10, 20)
    p.move(12, 18)
    p.mode = Point.MOVING      # attribut d'affichage uniquement

@author: Nervures
@date: 2026-10
"""

import math
import numbers

import numpy as np

from .errors import InvalidArgument


def _check_coordinate(name, value):
    """Verifie qu'une coordonnee est un reel fini.

    :param name: nom de la coordonnee ('x' ou 'y') pour le message
    :param value: valeur a verifier
    :returns: la valeur convertie en float
    :raises InvalidArgument: si la valeur n'est pas un reel fini
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(
            "%s doit etre un nombre reel, recu %r (%s)"
            % (name, value, type(value).__name__))
    value = float(value)
    if not math.isfinite(value):
        raise InvalidArgument(
            "%s doit etre un nombre fini, recu %r" % (name, value))
    return value


class Point:
    """Point 2D avec un mode d'affichage.

    Le mode, le rayon, la visibilite et la couleur sont des attributs de
    presentation : le calcul geometrique ne les lit jamais.
    """

    # Modes d'affichage
    STANDARD = 0
    MOVING = 1
    FORMING_BEZIER = 2
    ORIGIN = 3

    DRAW_RADIUS = 3

    def __init__(self, x, y, mode=STANDARD):
        """
        :param x: abscisse
        :type x: float
        :param y: ordonnee
        :type y: float
        :param mode: mode d'affichage (STANDARD, MOVING, FORMING_BEZIER,
            ORIGIN)
        :type mode: int
        :raises InvalidArgument: si x ou y n'est pas un reel fini
        """
        self.move(x, y)
        self.mode = mode
        self.radius = self.DRAW_RADIUS
        self.visible = True
        # Couleur imposee (None = couleur du mode)
        self.color = None

    def __repr__(self):
        return "Point(%g, %g)" % (self.x, self.y)

    def move(self, x, y):
        """Deplace le point en place.

        :param x: nouvelle abscisse
        :param y: nouvelle ordonnee
        :returns: self (pour chainage)
        :raises InvalidArgument: si x ou y n'est pas un reel fini
        """
        x = _check_coordinate('x', x)
        y = _check_coordinate('y', y)
        self.x = x
        self.y = y
        return self

    def translate(self, dx, dy):
        """Translate le point de (dx, dy)."""
        return self.move(self.x + dx, self.y + dy)

    def copy(self):
        """Nouveau point aux memes coordonnees et avec le meme mode."""
        p = Point(self.x, self.y, self.mode)
        p.radius = self.radius
        p.visible = self.visible
        p.color = self.color
        return p

    @property
    def coords(self):
        """Coordonnees (x, y) sous forme de tuple."""
        return (self.x, self.y)

    def as_array(self):
        """Coordonnees sous forme de ndarray(2,)."""
        return np.array([self.x, self.y], dtype=float)


def lerp(a, b, t):
    """Interpolation lineaire entre deux points.

    :param a: point de depart (t=0)
    :type a: Point
    :param b: point d'arrivee (t=1)
    :type b: Point
    :param t: parametre (non borne)
    :type t: float
    :returns: nouveau point a*(1-t) + b*t
    :rtype: Point
    """
    return Point(a.x * (1.0 - t) + b.x * t, a.y * (1.0 - t) + b.y * t)
