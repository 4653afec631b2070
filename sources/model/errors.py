#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Exceptions du package foilsweep.

Chaque composant leve une exception typee au point de detection,
aucun composant ne termine le processus lui-meme.

@author: Nervures
@date: 2026-10
"""


class FoilSweepError(Exception):
    """Racine des erreurs foilsweep."""


# ----------------------------------------------------------------------
#  Geometrie
# ----------------------------------------------------------------------

class GeometryError(FoilSweepError, ValueError):
    """Coordonnees de profil inexploitables."""


class TooFewPointsError(GeometryError):
    """Pas assez de points valides pour normaliser le profil."""

    def __init__(self, n_points, min_points):
        """
        :param n_points: nombre de points recus
        :type n_points: int
        :param min_points: nombre minimal requis
        :type min_points: int
        """
        self.n_points = n_points
        self.min_points = min_points
        super(TooFewPointsError, self).__init__(
            "Pas assez de coordonnees pour charger le profil : "
            "%d points (minimum %d)" % (n_points, min_points))


# ----------------------------------------------------------------------
#  Selection Pareto
# ----------------------------------------------------------------------

class SelectionError(FoilSweepError, RuntimeError):
    """Echec de la selection de la configuration optimale."""


class EmptyFrontError(SelectionError):
    """Aucun point valide dans le front de Pareto."""

    def __init__(self):
        super(EmptyFrontError, self).__init__(
            "Front de Pareto vide : optimisation impossible")


class NoMatchError(SelectionError):
    """Le premier point du front est introuvable dans le balayage."""

    def __init__(self, point):
        """
        :param point: point du front non retrouve
        :type point: ParetoPoint
        """
        self.point = point
        super(NoMatchError, self).__init__(
            "Point optimal introuvable dans le balayage : "
            "CL=%r, L/D=%r" % (point.cl, point.efficiency))


# ----------------------------------------------------------------------
#  Configuration et resultats solveur
# ----------------------------------------------------------------------

class ConfigError(FoilSweepError, ValueError):
    """Parametre de configuration invalide."""


class PolarError(FoilSweepError, IOError):
    """Polaire absente ou sans aucune ligne de donnees."""
