#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Exceptions du noyau geometrique.

Les deux classes derivent de ValueError : un appelant qui intercepte
ValueError (convention du package) reste compatible.

@author: Nervures
@date: 2026-10
"""


class InvalidArgument(ValueError):
    """Argument invalide fourni par l'appelant.

    Coordonnees non numeriques ou non finies, mauvais nombre de points
    pour une courbe ou un segment de spline, continuite inconnue,
    option d'affichage hors domaine.
    """


class DegenerateGeometry(ValueError):
    """Geometrie degeneree.

    Levee quand la derivee premiere est nulle (point de rebroussement)
    et qu'une normale, une courbure ou un cercle osculateur est demande.
    """
