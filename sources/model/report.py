#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Recapitulatif texte d'une optimisation.

Le fichier est ecrase a chaque balayage.

@author: Nervures
@date: 2026-10
"""

import logging

from .geometry import FILE_ENCODING

logger = logging.getLogger(__name__)


def format_recap(results):
    """Met en forme le recapitulatif d'un balayage.

    :param results: resultats du balayage
    :type results: SweepResults
    :returns: texte du recapitulatif
    :rtype: str
    """
    p = results.params
    opt = results.optimal
    lines = [
        '',
        '--- OPTIMIZATION RESULTS ---',
        '',
        'Airfoil model: %s' % results.label,
        '',
        'Parameters:',
        '  -Chord: %g' % p['CHORD'],
        '  -Cruise Speed: %g' % p['CRUISE_SPEED'],
        '  -Kinematic Viscosity: %g' % p['KINEMATIC_VISCOSITY'],
        '  -Reynolds Number: %g' % p['RE'],
        '',
        'Optimal Values:',
        '  -Alpha: %.3f' % opt.alpha,
        '  -CL: %.3f' % opt.cl,
        '  -CD: %.3f' % opt.cd,
        '  -L/D: %.3f' % opt.efficiency,
    ]
    return '\n'.join(lines) + '\n'


def write_recap(filepath, results):
    """Ecrit le recapitulatif (ecrase le fichier existant).

    :param filepath: chemin du fichier de sortie
    :type filepath: str
    :param results: resultats du balayage
    :type results: SweepResults
    :returns: chemin du fichier ecrit
    :rtype: str
    """
    with open(filepath, 'w', encoding=FILE_ENCODING) as f:
        f.write(format_recap(results))
    logger.info("Recapitulatif ecrit dans %s", filepath)
    return filepath
