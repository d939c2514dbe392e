#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Spline : suite de courbes de Bezier cubiques raccordees.

Deux segments consecutifs partagent le meme objet Point a leur jonction
(le noeud). En continuite C1, une contrainte miroir relie l'avant-dernier
point de controle du segment precedent, le noeud et le deuxieme point de
controle du segment suivant : les tangentes restent alignees quand un
point est deplace.

Creation::

    s = Spline(continuity=Spline.C1)
    s.append_segment([Point(0, 0), Point(1, 2), Point(3, 2), Point(4, 0)])
    s.append_segment([Point(6, 1), Point(8, 0)])   # 2 points en C1

    # Un cycle de mise a jour
    s.curves[0][2].move(3, 3)
    s.resolve_constraints()

@author: Nervures
@date: 2026-10
"""

import logging

from .constraints import MirrorConstraint
from .cubic_bezier import CubicBezier
from .errors import InvalidArgument
from .point import Point

logger = logging.getLogger(__name__)


class Spline:
    """Suite de segments cubiques avec contraintes de continuite."""

    # Continuites
    C0 = 0
    C1 = 1

    def __init__(self, continuity=C1, name='Sans nom'):
        """
        :param continuity: Spline.C0 (position) ou Spline.C1 (tangente)
        :type continuity: int
        :param name: nom de la spline
        :type name: str
        :raises InvalidArgument: si la continuite est inconnue
        """
        if continuity not in (self.C0, self.C1):
            raise InvalidArgument(
                "Continuite inconnue %r. Attendu : Spline.C0, Spline.C1"
                % (continuity,))
        self._continuity = continuity
        self._name = name
        self.curves = []
        self.constraints = []
        # La spline accepte encore de nouveaux segments
        self.active = True
        logger.info("Spline '%s' creee (C%d)", name, continuity)

    def __repr__(self):
        return "Spline('%s', C%d, %d segments)" % (
            self._name, self._continuity, len(self.curves))

    def __len__(self):
        return len(self.curves)

    def __iter__(self):
        return iter(self.curves)

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def continuity(self):
        """Continuite aux jonctions (C0 ou C1), fixee a la creation."""
        return self._continuity

    @property
    def name(self):
        """Nom de la spline."""
        return self._name

    @property
    def next_curve_points(self):
        """Nombre de nouveaux points requis pour le prochain segment."""
        if not self.curves:
            return 4
        if self._continuity == self.C1:
            return 2
        return 3

    # ------------------------------------------------------------------
    #  Construction
    # ------------------------------------------------------------------

    def append_segment(self, points):
        """Ajoute un segment en fin de spline.

        Premier segment : les 4 points fournis.
        En C1 : [noeud, symetrique, P2, P3] ou le noeud est le dernier point
        du segment precedent et le symetrique un nouveau point, reflet de
        l'avant-dernier point du segment precedent par rapport au noeud.
        Une contrainte miroir est ajoutee.
        En C0 : [noeud, P1, P2, P3], sans contrainte.

        La liste fournie n'est pas modifiee.

        :param points: nouveaux points (4, puis 2 en C1 ou 3 en C0)
        :type points: list[Point]
        :returns: le segment cree
        :rtype: CubicBezier
        :raises InvalidArgument: si le nombre ou le type des points est
            incorrect
        """
        required = self.next_curve_points
        if isinstance(points, (str, bytes)):
            points = None
        try:
            points = list(points)
        except TypeError:
            raise InvalidArgument(
                "Le prochain segment requiert une liste de %d points"
                % required)
        if len(points) != required:
            raise InvalidArgument(
                "Le prochain segment requiert une liste de %d points, "
                "recu %d" % (required, len(points)))
        for p in points:
            if not isinstance(p, Point):
                raise InvalidArgument(
                    "Le prochain segment requiert une liste de %d points, "
                    "recu un %s" % (required, type(p).__name__))

        if not self.curves:
            curve = CubicBezier(points)
        else:
            last = self.curves[-1]
            knot = last[-1]
            if self._continuity == self.C1:
                last_control = last[-2]
                mirrored = Point(*MirrorConstraint.mirror(knot, last_control))
                curve = CubicBezier([knot, mirrored] + points)
                self.constraints.append(
                    MirrorConstraint(last_control, knot, mirrored))
            else:
                curve = CubicBezier([knot] + points)

        self.curves.append(curve)
        logger.info("%r : segment %d ajoute", self, len(self.curves))
        return curve

    # ------------------------------------------------------------------
    #  Contraintes
    # ------------------------------------------------------------------

    def resolve_constraints(self):
        """Verifie chaque contrainte miroir, dans l'ordre des jonctions.

        A appeler une fois par cycle de mise a jour, apres application
        des deplacements de points.
        """
        for constraint in self.constraints:
            constraint.check_changes()

    def is_c1(self, tol=1e-9):
        """True si toutes les contraintes miroir sont satisfaites."""
        return all(c.is_satisfied(tol) for c in self.constraints)

    # ------------------------------------------------------------------
    #  Interrogation
    # ------------------------------------------------------------------

    def knots(self):
        """Points de passage : debut, jonctions et fin de la spline."""
        if not self.curves:
            return []
        return [self.curves[0][0]] + [c[-1] for c in self.curves]

    def control_points(self):
        """Tous les points distincts (par identite), dans l'ordre."""
        seen = set()
        result = []
        for curve in self.curves:
            for p in curve:
                if id(p) not in seen:
                    seen.add(id(p))
                    result.append(p)
        return result

    def compute_bounds(self):
        """Boite englobante de l'ensemble des segments.

        :returns: (coin min, coin max) ou None si la spline est vide
        :rtype: tuple(Point, Point) or None
        """
        if not self.curves:
            return None
        boxes = [c.compute_bounds() for c in self.curves]
        return (Point(min(b[0].x for b in boxes), min(b[0].y for b in boxes)),
                Point(max(b[1].x for b in boxes), max(b[1].y for b in boxes)))
