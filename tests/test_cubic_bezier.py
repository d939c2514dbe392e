#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Tests pour la classe CubicBezier.

Lance :
    python test_cubic_bezier.py

@author: Nervures
@date: 2026-10
"""

import math
import os
import sys
import unittest

import numpy as np

# Ajouter le repertoire sources/ au path
_here = os.path.dirname(os.path.abspath(__file__))
_src = os.path.normpath(os.path.join(_here, '..', 'sources'))
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.point import Point
from model.cubic_bezier import CubicBezier, _quadratic_roots
from model.errors import InvalidArgument, DegenerateGeometry

# Approximation d'un quart de cercle par une cubique
KAPPA = 0.5522847498


def _curve(coords):
    return CubicBezier([Point(x, y) for x, y in coords])


def _arch():
    return _curve([(0, 0), (1, 2), (3, 2), (4, 0)])


def _quarter_circle(radius=100.0):
    k = KAPPA * radius
    return _curve([(radius, 0), (radius, k), (k, radius), (0, radius)])


class TestConstruction(unittest.TestCase):
    """Tests de construction."""

    def test_four_points(self):
        """4 points -> courbe, points stockes par reference."""
        pts = [Point(0, 0), Point(1, 1), Point(2, 1), Point(3, 0)]
        b = CubicBezier(pts, name='arc')
        self.assertEqual(len(b), 4)
        self.assertEqual(b.name, 'arc')
        for i in range(4):
            self.assertIs(b[i], pts[i])

    def test_wrong_count(self):
        """3 ou 5 points -> InvalidArgument."""
        with self.assertRaises(InvalidArgument):
            CubicBezier([Point(0, 0)] * 3)
        with self.assertRaises(InvalidArgument):
            CubicBezier([Point(0, 0)] * 5)

    def test_wrong_type(self):
        """Elements non Point -> InvalidArgument."""
        with self.assertRaises(InvalidArgument):
            CubicBezier([(0, 0), (1, 1), (2, 1), (3, 0)])
        with self.assertRaises(InvalidArgument):
            CubicBezier(42)

    def test_repr(self):
        """__repr__ contient le nom."""
        self.assertIn("'Sans nom'", repr(_arch()))


class TestEvaluate(unittest.TestCase):
    """Tests d'evaluation."""

    def test_endpoints_interpolated(self):
        """B(0) = P0 et B(1) = P3 exactement."""
        for coords in [[(0, 0), (1, 2), (3, 2), (4, 0)],
                       [(-7.5, 3.25), (12, -40), (0.1, 0.2), (1e3, -1e3)]]:
            b = _curve(coords)
            self.assertEqual(b.evaluate(0.0).coords, b[0].coords)
            self.assertEqual(b.evaluate(1.0).coords, b[3].coords)

    def test_midpoint(self):
        """B(0.5) = (P0 + 3 P1 + 3 P2 + P3) / 8."""
        p = _arch().evaluate(0.5)
        self.assertAlmostEqual(p.x, 2.0)
        self.assertAlmostEqual(p.y, 1.5)

    def test_extrapolation(self):
        """t hors de [0, 1] : le polynome est prolonge."""
        b = _curve([(0, 0), (1, 1), (2, 2), (3, 3)])
        p = b.evaluate(2.0)
        self.assertAlmostEqual(p.x, 6.0)
        self.assertAlmostEqual(p.y, 6.0)

    def test_evaluate_array(self):
        """evaluate_array coincide avec evaluate."""
        b = _arch()
        t = np.array([0.0, 0.3, 0.7, 1.0])
        res = b.evaluate_array(t)
        self.assertEqual(res.shape, (4, 2))
        for i, ti in enumerate(t):
            np.testing.assert_allclose(res[i], b.evaluate(ti).as_array())

    def test_sample(self):
        """sample(n) -> ndarray(n, 2) de P0 a P3."""
        res = _arch().sample(50)
        self.assertEqual(res.shape, (50, 2))
        np.testing.assert_allclose(res[0], [0, 0])
        np.testing.assert_allclose(res[-1], [4, 0])
        with self.assertRaises(InvalidArgument):
            _arch().sample(1)

    def test_shared_point_moves_curve(self):
        """Deplacer un point de controle deforme la courbe."""
        b = _arch()
        b[3].move(8, 0)
        self.assertEqual(b.evaluate(1.0).coords, (8.0, 0.0))

    def test_translation_invariance(self):
        """B(t) translate = B(t) + (dx, dy)."""
        b = _curve([(0, 0), (10, 25), (30, -5), (40, 10)])
        before = b.sample(20)
        b.translate(5, -3)
        np.testing.assert_allclose(b.sample(20), before + [5, -3])


class TestDerivatives(unittest.TestCase):
    """Tests des derivees."""

    def setUp(self):
        self.b = _curve([(0, 0), (100, 200), (300, 200), (400, 0)])

    def test_derivative_endpoints(self):
        """B'(0) = 3 (P1 - P0), B'(1) = 3 (P3 - P2)."""
        np.testing.assert_allclose(self.b.derivative(0.0), [300, 600])
        np.testing.assert_allclose(self.b.derivative(1.0), [300, -600])

    def test_derivative_finite_difference(self):
        """B'(t) = difference centree de B(t)."""
        h = 1e-6
        for t in [0.1, 0.25, 0.5, 0.9]:
            fd = (self.b.evaluate(t + h).as_array()
                  - self.b.evaluate(t - h).as_array()) / (2 * h)
            np.testing.assert_allclose(self.b.derivative(t), fd, atol=1e-4)

    def test_second_derivative_finite_difference(self):
        """B''(t) = difference centree de B'(t)."""
        h = 1e-6
        for t in [0.1, 0.5, 0.9]:
            fd = (self.b.derivative(t + h) - self.b.derivative(t - h)) / (2 * h)
            np.testing.assert_allclose(self.b.second_derivative(t), fd,
                                       atol=1e-3)

    def test_second_derivative_start(self):
        """B''(0) = 6 (P0 - 2 P1 + P2)."""
        np.testing.assert_allclose(self.b.second_derivative(0.0),
                                   [6 * (0 - 200 + 300), 6 * (0 - 400 + 200)])

    def test_tangent_unit(self):
        """La tangente est unitaire et colineaire a B'."""
        tg = self.b.tangent(0.3)
        self.assertAlmostEqual(float(np.hypot(*tg)), 1.0)
        d = self.b.derivative(0.3)
        self.assertAlmostEqual(float(tg[0] * d[1] - tg[1] * d[0]), 0.0,
                               places=6)


class TestBounds(unittest.TestCase):
    """Tests de la boite englobante."""

    def _check_contains_samples(self, b):
        pmin, pmax = b.compute_bounds()
        samples = b.sample(1000)
        eps = 1e-9
        self.assertTrue(np.all(samples[:, 0] >= pmin.x - eps))
        self.assertTrue(np.all(samples[:, 1] >= pmin.y - eps))
        self.assertTrue(np.all(samples[:, 0] <= pmax.x + eps))
        self.assertTrue(np.all(samples[:, 1] <= pmax.y + eps))
        return pmin, pmax

    def test_arch_linear_fallback(self):
        """Composante y de degre 2 : derivee lineaire, racine t=0.5."""
        pmin, pmax = self._check_contains_samples(_arch())
        self.assertAlmostEqual(pmin.x, 0.0)
        self.assertAlmostEqual(pmin.y, 0.0)
        self.assertAlmostEqual(pmax.x, 4.0)
        self.assertAlmostEqual(pmax.y, 1.5)

    def test_straight_line(self):
        """Segment droit uniforme : boite = extremites."""
        pmin, pmax = _curve([(0, 0), (1, 1), (2, 2), (3, 3)]).compute_bounds()
        self.assertEqual(pmin.coords, (0.0, 0.0))
        self.assertEqual(pmax.coords, (3.0, 3.0))

    def test_overshooting_controls(self):
        """Points de controle hors de l'enveloppe des extremites."""
        b = _curve([(0, 0), (-5, 10), (15, -10), (10, 0)])
        pmin, pmax = self._check_contains_samples(b)
        # La boite est plus large que les extremites, plus etroite que
        # l'enveloppe des points de controle
        self.assertLess(pmin.x, 0.0)
        self.assertGreater(pmax.x, 10.0)
        self.assertGreater(pmin.x, -5.0)
        self.assertLess(pmax.x, 15.0)

    def test_loop(self):
        """Courbe avec boucle."""
        self._check_contains_samples(
            _curve([(0, 0), (30, 20), (-10, 20), (20, 0)]))

    def test_tiny_scale(self):
        """Coordonnees minuscules : meme boite a l'echelle pres."""
        coords = [(0, 0), (-5, 10), (15, -10), (10, 0)]
        scale = 1e-15
        pmin, pmax = _curve(coords).compute_bounds()
        tmin, tmax = _curve([(x * scale, y * scale)
                             for x, y in coords]).compute_bounds()
        self.assertAlmostEqual(tmin.x / scale, pmin.x, places=6)
        self.assertAlmostEqual(tmin.y / scale, pmin.y, places=6)
        self.assertAlmostEqual(tmax.x / scale, pmax.x, places=6)
        self.assertAlmostEqual(tmax.y / scale, pmax.y, places=6)

    def test_quadratic_roots(self):
        """Resolution de a t^2 + b t + c."""
        self.assertEqual(sorted(_quadratic_roots(1.0, -3.0, 2.0)), [1.0, 2.0])
        self.assertEqual(_quadratic_roots(0.0, -12.0, 6.0), [0.5])
        self.assertEqual(_quadratic_roots(0.0, 0.0, 1.0), [])
        self.assertEqual(_quadratic_roots(1.0, 0.0, 1.0), [])
        # Coefficients minuscules : toujours une equation du second degre
        roots = sorted(_quadratic_roots(1e-15, -3e-15, 2e-15))
        self.assertAlmostEqual(roots[0], 1.0)
        self.assertAlmostEqual(roots[1], 2.0)


class TestCurvature(unittest.TestCase):
    """Tests de courbure et du cercle osculateur."""

    def test_quarter_circle(self):
        """Quart de cercle de rayon 100 : rayon ~100, centre ~origine."""
        b = _quarter_circle(100.0)
        circle = b.compute_curvature(0.5)
        self.assertAlmostEqual(circle.radius, 100.0, delta=1.0)
        self.assertAlmostEqual(circle.center.x, 0.0, delta=1.0)
        self.assertAlmostEqual(circle.center.y, 0.0, delta=1.0)
        self.assertAlmostEqual(abs(b.curvature(0.5)), 0.01, delta=2e-4)

    def test_straight_line_infinite_radius(self):
        """Segment droit : rayon infini, pas de centre."""
        b = _curve([(0, 0), (1, 0), (2, 0), (3, 0)])
        for t in [0.0, 0.3, 1.0]:
            circle = b.compute_curvature(t)
            self.assertEqual(circle.radius, math.inf)
            self.assertIsNone(circle.center)
            self.assertEqual(b.curvature(t), 0.0)

    def test_cusp_raises(self):
        """Derivee nulle (P0 = P1) en t=0 -> DegenerateGeometry."""
        b = _curve([(0, 0), (0, 0), (1, 1), (2, 0)])
        with self.assertRaises(DegenerateGeometry):
            b.compute_curvature(0.0)
        with self.assertRaises(DegenerateGeometry):
            b.curvature(0.0)
        with self.assertRaises(DegenerateGeometry):
            b.normal(0.0)
        with self.assertRaises(ValueError):
            b.tangent(0.0)

    def test_tiny_scale_not_a_cusp(self):
        """Courbe minuscule : tangente et courbure definies."""
        coords = [(0, 0), (10, 25), (30, -5), (40, 10)]
        scale = 1e-15
        b = _curve(coords)
        tiny = _curve([(x * scale, y * scale) for x, y in coords])
        np.testing.assert_allclose(tiny.tangent(0.0), b.tangent(0.0))
        self.assertAlmostEqual(tiny.curvature(0.3) * scale, b.curvature(0.3))
        circle = tiny.compute_curvature(0.3)
        self.assertAlmostEqual(circle.radius / scale,
                               b.compute_curvature(0.3).radius, places=6)

    def test_coincident_points_cusp(self):
        """4 points confondus : derivee nulle partout."""
        b = _curve([(1, 1)] * 4)
        with self.assertRaises(DegenerateGeometry):
            b.tangent(0.5)

    def test_known_radius(self):
        """Arche : en t=0.5, B'=(4.5, 0), B''=(0, -12), rayon 1.6875."""
        b = _arch()
        circle = b.compute_curvature(0.5)
        self.assertAlmostEqual(circle.radius, 1.6875)
        self.assertAlmostEqual(circle.center.x, 2.0)
        self.assertAlmostEqual(circle.center.y, 1.5 - 1.6875)
        self.assertLess(b.curvature(0.5), 0.0)

    def test_normal_points_to_concavity(self):
        """La normale a un produit scalaire >= 0 avec B''."""
        b = _curve([(0, 0), (10, 25), (30, -5), (40, 10)])
        for t in np.linspace(0.05, 0.95, 10):
            n = b.normal(t)
            d2 = b.second_derivative(t)
            self.assertGreaterEqual(float(n @ d2), -1e-9)
            self.assertAlmostEqual(float(np.hypot(*n)), 1.0)

    def test_normal_default_orientation(self):
        """B'' nul : la normale par defaut (dy, -dx)/|d| est conservee."""
        b = _curve([(0, 0), (1, 0), (2, 0), (3, 0)])
        np.testing.assert_allclose(b.normal(0.5), [0.0, -1.0], atol=1e-12)


class TestConstructions(unittest.TestCase):
    """Tests des constructions pedagogiques."""

    def test_lerp_layers(self):
        """3 couches de 3, 2 et 1 point ; le dernier est B(t)."""
        b = _curve([(0, 0), (10, 25), (30, -5), (40, 10)])
        for t in [0.0, 0.25, 0.6, 1.0]:
            layers = b.lerp_layers(t)
            self.assertEqual([len(layer) for layer in layers], [3, 2, 1])
            p = b.evaluate(t)
            self.assertAlmostEqual(layers[-1][0].x, p.x)
            self.assertAlmostEqual(layers[-1][0].y, p.y)

    def test_handles(self):
        """Poignees (P0, P1) et (P2, P3)."""
        b = _arch()
        (a0, a1), (b0, b1) = b.handles()
        self.assertIs(a0, b[0])
        self.assertIs(a1, b[1])
        self.assertIs(b0, b[2])
        self.assertIs(b1, b[3])

    def test_linear_combination_chain(self):
        """La chaine de vecteurs se termine en B(t)."""
        b = _curve([(0, 0), (10, 25), (30, -5), (40, 10)])
        for t in [0.0, 0.4, 1.0]:
            lc = b.linear_combination_vectors(t)
            self.assertEqual(len(lc['spokes']), 4)
            self.assertEqual(len(lc['chain']), 4)
            np.testing.assert_allclose(lc['chain'][0][0], lc['origin'])
            np.testing.assert_allclose(lc['chain'][-1][1],
                                       b.evaluate(t).as_array(), atol=1e-9)
            for i, (start, end) in enumerate(lc['spokes']):
                np.testing.assert_allclose(start, lc['origin'])
                np.testing.assert_allclose(end, b[i].as_array())

    def test_origin_recomputed(self):
        """L'origine suit les points de controle."""
        b = _arch()
        self.assertEqual(b.origin.coords, (2.0, 1.0))
        self.assertEqual(b.origin.mode, Point.ORIGIN)
        b[3].move(8, 4)
        self.assertEqual(b.origin.coords, (3.0, 2.0))


class TestPlot(unittest.TestCase):
    """Tests du trace matplotlib."""

    def test_plot_on_axes(self):
        """plot sur des axes existants, sans affichage."""
        import matplotlib
        matplotlib.use('Agg')
        from matplotlib.figure import Figure
        ax = Figure().add_subplot(111)
        result = _arch().plot(ax=ax, show=False)
        self.assertIs(result, ax)
        self.assertGreater(len(ax.lines), 0)


if __name__ == '__main__':
    unittest.main()
