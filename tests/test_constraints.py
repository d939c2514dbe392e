#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Tests pour la contrainte miroir.

Lance :
    python test_constraints.py

@author: Nervures
@date: 2026-10
"""

import os
import sys
import unittest

# Ajouter le repertoire sources/ au path
_here = os.path.dirname(os.path.abspath(__file__))
_src = os.path.normpath(os.path.join(_here, '..', 'sources'))
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.point import Point
from model.constraints import MirrorConstraint


class TestMirrorConstraint(unittest.TestCase):
    """Tests de propagation des deplacements."""

    def setUp(self):
        self.start = Point(3, 2)
        self.center = Point(4, 0)
        self.end = Point(5, -2)
        self.c = MirrorConstraint(self.start, self.center, self.end)

    def assertCoords(self, p, x, y):
        self.assertAlmostEqual(p.x, x)
        self.assertAlmostEqual(p.y, y)

    def test_mirror(self):
        """Symetrique d'un point par rapport a un centre."""
        self.assertEqual(MirrorConstraint.mirror(Point(4, 0), Point(3, 2)),
                         (5.0, -2.0))

    def test_points(self):
        """points -> (start, center, end) par reference."""
        self.assertEqual(self.c.points, (self.start, self.center, self.end))
        self.assertIs(self.c.points[1], self.center)

    def test_nothing_moved(self):
        """Aucun deplacement : rien ne change."""
        self.assertIsNone(self.c.check_changes())
        self.assertCoords(self.start, 3, 2)
        self.assertCoords(self.end, 5, -2)
        self.assertTrue(self.c.is_satisfied())

    def test_start_moved(self):
        """start deplace : end devient son symetrique."""
        self.start.move(3, 3)
        self.assertEqual(self.c.check_changes(), 'start')
        self.assertCoords(self.end, 5, -3)
        self.assertCoords(self.center, 4, 0)
        self.assertTrue(self.c.is_satisfied())

    def test_end_moved(self):
        """end deplace : start devient son symetrique."""
        self.end.move(6, 0)
        self.assertEqual(self.c.check_changes(), 'end')
        self.assertCoords(self.start, 2, 0)
        self.assertTrue(self.c.is_satisfied())

    def test_center_moved(self):
        """center deplace : start et end translates du meme vecteur."""
        self.center.move(5, 1)
        self.assertEqual(self.c.check_changes(), 'center')
        self.assertCoords(self.start, 4, 3)
        self.assertCoords(self.end, 6, -1)
        self.assertTrue(self.c.is_satisfied())

    def test_center_has_priority(self):
        """center et start deplaces : seule la translation est appliquee."""
        self.center.move(5, 1)
        self.start.move(0, 0)
        self.assertEqual(self.c.check_changes(), 'center')
        # start garde son deplacement plus la translation
        self.assertCoords(self.start, 1, 1)
        self.assertCoords(self.end, 6, -1)

    def test_start_has_priority_over_end(self):
        """start et end deplaces : end est ecrase par le symetrique."""
        self.start.move(2, 2)
        self.end.move(100, 100)
        self.assertEqual(self.c.check_changes(), 'start')
        self.assertCoords(self.end, 6, -2)
        self.assertTrue(self.c.is_satisfied())

    def test_snapshot_updated(self):
        """Apres propagation, la verification suivante ne voit rien."""
        self.start.move(1, 1)
        self.c.check_changes()
        self.assertIsNone(self.c.check_changes())
        self.assertCoords(self.end, 7, -1)

    def test_successive_moves(self):
        """Plusieurs cycles : l'invariant est conserve a chaque fois."""
        moves = [(self.start, (0, 5)), (self.end, (9, 9)),
                 (self.center, (-2, 3)), (self.start, (-10, 0)),
                 (self.end, (0.5, -0.25))]
        for point, (x, y) in moves:
            point.move(x, y)
            self.c.check_changes()
            self.assertTrue(self.c.is_satisfied())

    def test_is_satisfied_tolerance(self):
        """is_satisfied respecte la tolerance."""
        self.end.move(5.001, -2)
        self.assertFalse(self.c.is_satisfied())
        self.assertTrue(self.c.is_satisfied(tol=0.01))


if __name__ == '__main__':
    unittest.main()
