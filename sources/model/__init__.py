#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Package foilsweep : optimisation d'un profil sur un balayage en incidence.

Mise au format des coordonnees pour le solveur, front de Pareto
(CL, finesse), choix de la configuration optimale.

Usage::

    from foilsweep import normalize, read_coordinates, optimize

    label, points = read_coordinates('clarky.dat')
    airfoil = normalize(points, label=label)
    front, optimal = optimize(sweep)

@author: Nervures
@date: 2026-10
"""

from .errors import (FoilSweepError, GeometryError, TooFewPointsError,
                     SelectionError, EmptyFrontError, NoMatchError,
                     ConfigError, PolarError)
from .geometry import (Point2D, CanonicalAirfoil, read_coordinates,
                       write_coordinates, normalize, format_airfoil_file)
from .pareto import (SweepRecord, ParetoPoint, OptimalConfig,
                     sweep_from_arrays, build_front, select_optimal, optimize)
from .foilconfig import (load_config, load_defaults, merge_params,
                         resolve_params, reynolds_number)
from .base import AbstractPreprocessor, AbstractSimulator, AbstractPostprocessor
from .replay import PolarReplaySimulator
from .results import SweepResults
from .report import format_recap, write_recap
from .pipeline import SweepPipeline, register_solver
