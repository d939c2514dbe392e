#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Classe abstraite du rendu 2D.

Le noyau geometrique ne dessine rien lui-meme : il emet des primitives
vers une surface de dessin qui implemente :class:`AbstractRenderer`
(canvas matplotlib, QPainter, SVG...). La surface est un puits : elle ne
renvoie rien au noyau.

Les coordonnees sont des ndarray(2,) (ou tout couple x, y) exprimees dans
le repere des points de controle.

@author: Nervures
@date: 2026-10
"""

from abc import ABC, abstractmethod


class AbstractRenderer(ABC):
    """Surface de dessin 2D.

    Responsabilites :
    - Tracer les primitives (points, polylignes, fleches, rectangles,
      cercles) avec le style demande
    - Gerer elle-meme le rafraichissement de l'affichage
    """

    @abstractmethod
    def clear(self):
        """Efface la surface avant un nouveau trace."""
        pass

    @abstractmethod
    def draw_point(self, xy, radius, color, border_color):
        """Trace un point (disque plein avec bordure).

        :param xy: position (x, y)
        :param radius: rayon en pixels
        :type radius: float
        :param color: couleur de remplissage
        :type color: str
        :param border_color: couleur de bordure
        :type border_color: str
        """
        pass

    @abstractmethod
    def draw_polyline(self, points, color, width=1.0, alpha=1.0,
                      dashes=None):
        """Trace une polyligne ouverte.

        :param points: sommets, ndarray(n, 2)
        :param color: couleur du trait
        :param width: epaisseur du trait
        :param alpha: opacite dans [0, 1]
        :param dashes: motif de pointilles (liste de longueurs) ou None
        """
        pass

    @abstractmethod
    def draw_arrow(self, start, end, color, width=1.0, alpha=1.0,
                   dashes=None, head=10):
        """Trace une fleche de start vers end.

        :param head: taille de la pointe en pixels
        :type head: float
        """
        pass

    @abstractmethod
    def draw_rect(self, pmin, pmax, color, alpha=0.5, fill_alpha=0.03):
        """Trace un rectangle aligne sur les axes, contour et remplissage.

        :param pmin: coin min (x, y)
        :param pmax: coin max (x, y)
        :param alpha: opacite du contour
        :param fill_alpha: opacite du remplissage
        """
        pass

    @abstractmethod
    def draw_circle(self, center, radius, color, width=2.0):
        """Trace un cercle (contour seul).

        :param center: centre (x, y)
        :param radius: rayon dans le repere des points
        """
        pass
