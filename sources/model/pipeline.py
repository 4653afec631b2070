#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Pipeline d'optimisation d'un profil sur un balayage en incidence.

Orchestre les etapes :
mise au format du profil -> Preprocessor -> Simulator -> Postprocessor
-> front de Pareto -> optimum -> recapitulatif.

Le simulateur (execution du solveur) est fourni par l'appelant.

Usage::

    from foilsweep.pipeline import SweepPipeline
    from foilsweep.replay import PolarReplaySimulator

    pipeline = SweepPipeline(PolarReplaySimulator('polar_clarky.dat'))
    results = pipeline.run('Input/clarky.dat', {'CHORD': 0.25},
                           recap_file='optimization_recap.txt')

@author: Nervures
@date: 2026-10
"""

import tempfile
import logging

from .errors import PolarError
from .foilconfig import resolve_params
from .geometry import format_airfoil_file
from .pareto import optimize
from .report import write_recap
from .results import SweepResults
from .xfoil_preprocessor import XFoilPreprocessor
from .xfoil_postprocessor import XFoilPostprocessor, sweep_from_polar

logger = logging.getLogger(__name__)

# Registre des solveurs disponibles
# Chaque entree : 'nom' -> (classe preprocesseur, classe postprocesseur)
_SOLVER_REGISTRY = {
    'xfoil': (XFoilPreprocessor, XFoilPostprocessor),
}


def register_solver(name, preprocessor_cls, postprocessor_cls):
    """Enregistre un nouveau solveur dans le registre.

    :param name: nom du solveur (ex: 'xfoil')
    :type name: str
    :param preprocessor_cls: classe du preprocesseur
    :param postprocessor_cls: classe du postprocesseur
    """
    _SOLVER_REGISTRY[name] = (preprocessor_cls, postprocessor_cls)


class SweepPipeline(object):
    """Orchestre une optimisation complete.

    Les etapes peuvent aussi etre appelees individuellement.
    """

    def __init__(self, simulator, solver='xfoil', work_dir=None):
        """
        :param simulator: execution du solveur (collaborateur externe)
        :type simulator: AbstractSimulator
        :param solver: nom du solveur ('xfoil', etc.)
        :type solver: str
        :param work_dir: repertoire de travail (None = temporaire)
        :type work_dir: str or None
        """
        if solver not in _SOLVER_REGISTRY:
            raise ValueError(
                "Solveur '%s' inconnu. Disponibles : %s"
                % (solver, ', '.join(sorted(_SOLVER_REGISTRY.keys()))))

        pre_cls, post_cls = _SOLVER_REGISTRY[solver]

        self.solver_name = solver
        if work_dir is None:
            work_dir = tempfile.mkdtemp(prefix='foilsweep_')
        self.work_dir = work_dir

        self.preprocessor = pre_cls(work_dir)
        self.simulator = simulator
        self.postprocessor = post_cls()

    def run(self, airfoil_file, params=None, recap_file=None):
        """Execute le pipeline complet.

        :param airfoil_file: fichier de coordonnees (reecrit sur place)
        :type airfoil_file: str
        :param params: parametres utilisateur (surchargent les defauts)
        :type params: dict or None
        :param recap_file: fichier recapitulatif (None = pas d'ecriture)
        :type recap_file: str or None
        :returns: resultats du balayage
        :rtype: SweepResults
        :raises ConfigError: parametres invalides
        :raises TooFewPointsError: profil inexploitable
        :raises PolarError: aucune polaire exploitable
        :raises SelectionError: front vide ou optimum introuvable
        """
        logger.info("=== Demarrage optimisation [%s] ===", self.solver_name)
        logger.info("  Repertoire de travail : %s", self.work_dir)

        params = resolve_params(params)

        logger.info("--- Etape 1/4 : Mise au format du profil ---")
        airfoil = self.format_only(airfoil_file)

        logger.info("--- Etape 2/4 : Preprocessing ---")
        input_files = self.prepare_only(airfoil, params)
        logger.info("  %d fichiers generes", len(input_files))

        logger.info("--- Etape 3/4 : Simulation (Re=%g) ---", params['RE'])
        if not self.simulate_only(input_files):
            logger.warning("La simulation a rencontre des problemes")

        logger.info("--- Etape 4/4 : Postprocessing ---")
        raw = self.parse_only()
        for w in raw['warnings']:
            logger.warning("  %s", w)
        if raw['polar'] is None:
            raise PolarError(
                "Aucune polaire exploitable dans %s" % self.work_dir)

        results = self.analyse(sweep_from_polar(raw['polar']), params,
                               label=airfoil.label,
                               warnings=raw['warnings'])

        if recap_file is not None:
            write_recap(recap_file, results)

        logger.info("=== Optimisation terminee : %r ===", results)
        return results

    def format_only(self, airfoil_file):
        """Met au format le fichier de coordonnees (sur place).

        :param airfoil_file: fichier de coordonnees
        :type airfoil_file: str
        :returns: profil ordonne
        :rtype: CanonicalAirfoil
        """
        return format_airfoil_file(airfoil_file)

    def prepare_only(self, airfoil, params):
        """Execute uniquement le preprocessing.

        :param airfoil: profil ordonne
        :type airfoil: CanonicalAirfoil
        :param params: parametres resolus
        :type params: dict
        :returns: liste des fichiers generes
        :rtype: list[str]
        """
        return self.preprocessor.prepare(airfoil, params)

    def simulate_only(self, input_files):
        """Execute uniquement la simulation.

        :param input_files: fichiers d'entree
        :type input_files: list[str]
        :returns: succes
        :rtype: bool
        """
        return self.simulator.run(self.work_dir, input_files)

    def parse_only(self):
        """Execute uniquement le postprocessing.

        :returns: {'polar': dict or None, 'warnings': [str]}
        :rtype: dict
        """
        return self.postprocessor.parse(self.work_dir)

    @staticmethod
    def analyse(sweep, params, label='', warnings=None):
        """Front de Pareto et optimum d'un balayage deja disponible.

        :param sweep: enregistrements tries par alpha croissant
        :type sweep: list[SweepRecord]
        :param params: parametres du balayage
        :type params: dict
        :param label: nom du profil
        :type label: str
        :param warnings: messages d'avertissement a conserver
        :type warnings: list or None
        :returns: resultats du balayage
        :rtype: SweepResults
        """
        front, optimal = optimize(sweep)
        return SweepResults(label, params, sweep, front, optimal,
                            warnings=warnings)
