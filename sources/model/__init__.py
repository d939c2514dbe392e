#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Package beziertools : visualisation pedagogique des courbes de Bezier
cubiques et des splines.

Base de Bernstein, evaluation et derivees, boite englobante, courbure et
cercle osculateur, contraintes de continuite C1 entre segments.

Usage::

    from beziertools import Point, Spline

    s = Spline(continuity=Spline.C1)
    s.append_segment([Point(0, 0), Point(1, 2), Point(3, 2), Point(4, 0)])
    s.append_segment([Point(6, 1), Point(8, 0)])

@author: Nervures
@date: 2026-10
"""

from .errors import InvalidArgument, DegenerateGeometry
from .point import Point, lerp
from .bernstein import (basis, basis_derivative, basis_second_derivative,
                        linear_combination, BernsteinGraph)
from .cubic_bezier import CubicBezier, OsculatingCircle
from .constraints import MirrorConstraint
from .spline import Spline
from .overlays import DisplayOptions, curve_overlays
from .base import AbstractRenderer
from .render import draw_curve, draw_spline, point_colors, MatplotlibRenderer
from .config import (load_config, load_defaults, merge_params,
                     convert_value, parse_list)
