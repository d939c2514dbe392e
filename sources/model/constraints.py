#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Contrainte de symetrie entre trois points.

Une contrainte miroir (start, center, end) maintient
``end = 2 * center - start`` : start et end sont symetriques par rapport a
center. Elle sert a garantir la continuite C1 a la jonction de deux
segments d'une spline.

Les points sont des references partagees avec les courbes. A chaque
verification, la contrainte compare leurs positions a celles observees
lors de la verification precedente pour savoir lequel a bouge :

1. center a bouge : start et end sont translates du meme vecteur ;
2. sinon start a bouge : end devient le symetrique de start ;
3. sinon end a bouge : start devient le symetrique de end.

Si plusieurs points ont bouge dans le meme cycle, seul le plus prioritaire
(center > start > end) est pris en compte, les autres deplacements sont
ecrases.

@author: Nervures
@date: 2026-10
"""

import logging

logger = logging.getLogger(__name__)


class MirrorConstraint:
    """Symetrie de start et end par rapport a center."""

    def __init__(self, start, center, end):
        """
        :param start: premier point (reference)
        :type start: Point
        :param center: centre de symetrie (reference)
        :type center: Point
        :param end: second point (reference)
        :type end: Point
        """
        self.start = start
        self.center = center
        self.end = end
        self._update_last_positions()

    def __repr__(self):
        return "MirrorConstraint(%r, %r, %r)" % (
            self.start, self.center, self.end)

    @property
    def points(self):
        """Les trois points (start, center, end)."""
        return (self.start, self.center, self.end)

    @staticmethod
    def mirror(center, endpoint):
        """Symetrique de endpoint par rapport a center.

        :returns: coordonnees (x, y)
        :rtype: tuple(float, float)
        """
        return (2.0 * center.x - endpoint.x, 2.0 * center.y - endpoint.y)

    def _update_last_positions(self):
        """Memorise les positions courantes comme reference."""
        self._start_last = self.start.coords
        self._center_last = self.center.coords
        self._end_last = self.end.coords

    def check_changes(self):
        """Propage le deplacement observe depuis la derniere verification.

        :returns: le point dont le deplacement a ete propage ('center',
            'start', 'end') ou None si rien n'a bouge
        :rtype: str or None
        """
        changed = None
        if self.center.coords != self._center_last:
            dx = self.center.x - self._center_last[0]
            dy = self.center.y - self._center_last[1]
            self.start.translate(dx, dy)
            self.end.translate(dx, dy)
            changed = 'center'
        elif self.start.coords != self._start_last:
            self.end.move(*self.mirror(self.center, self.start))
            changed = 'start'
        elif self.end.coords != self._end_last:
            self.start.move(*self.mirror(self.center, self.end))
            changed = 'end'

        if changed is not None:
            logger.debug("%r : deplacement de '%s' propage", self, changed)
        self._update_last_positions()
        return changed

    def is_satisfied(self, tol=1e-9):
        """Verifie end == 2*center - start a tol pres."""
        mx, my = self.mirror(self.center, self.start)
        return abs(mx - self.end.x) <= tol and abs(my - self.end.y) <= tol
