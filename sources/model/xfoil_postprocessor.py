#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Postprocesseur XFoil : lit la polaire accumulee pendant le balayage.

Format XFoil (PACC / PWRT) : en-tete, ligne de separation '----', puis
alpha    CL        CD       CDp       CM     Top_Xtr  Bot_Xtr

@author: Nervures
@date: 2026-10
"""

import os
import logging

import numpy as np

from .base import AbstractPostprocessor
from .errors import PolarError
from .pareto import sweep_from_arrays
from .xfoil_preprocessor import POLAR_FILE

logger = logging.getLogger(__name__)

POLAR_COLUMNS = ('alpha', 'CL', 'CD', 'CDp', 'CM', 'Top_Xtr', 'Bot_Xtr')


def read_polar(filepath):
    """Parse un fichier polaire XFoil.

    :param filepath: chemin du fichier
    :type filepath: str
    :returns: dict de numpy arrays, une entree par colonne
    :rtype: dict
    :raises PolarError: si le fichier est illisible ou sans donnees
    """
    try:
        with open(filepath, 'r') as f:
            lines = f.readlines()
    except IOError as e:
        raise PolarError("Impossible de lire %s : %s" % (filepath, e))

    # Trouver la ligne de separation '---'
    data_start = 0
    for i, line in enumerate(lines):
        if '----' in line:
            data_start = i + 1
            break

    data_lines = []
    for line in lines[data_start:]:
        parts = line.split()
        if len(parts) >= len(POLAR_COLUMNS):
            try:
                values = [float(x) for x in parts[:len(POLAR_COLUMNS)]]
                data_lines.append(values)
            except ValueError:
                continue

    if not data_lines:
        raise PolarError("Polaire vide : %s" % filepath)

    data = np.array(data_lines)
    return dict((name, data[:, i]) for i, name in enumerate(POLAR_COLUMNS))


def sweep_from_polar(polar):
    """Enregistrements de balayage depuis une polaire parsee.

    :param polar: polaire (voir read_polar)
    :type polar: dict
    :returns: enregistrements tries comme la polaire
    :rtype: list[SweepRecord]
    """
    return sweep_from_arrays(polar['alpha'], polar['CL'], polar['CD'])


class XFoilPostprocessor(AbstractPostprocessor):
    """Parse la polaire XFoil en structures de donnees neutres."""

    def parse(self, work_dir):
        """Lit polar.dat dans work_dir.

        :param work_dir: repertoire contenant les fichiers de sortie XFoil
        :type work_dir: str
        :returns: {'polar': dict or None, 'warnings': [str, ...]}
        :rtype: dict
        """
        results = {
            'polar': None,
            'warnings': []
        }

        filepath = os.path.join(work_dir, POLAR_FILE)
        if not os.path.isfile(filepath):
            results['warnings'].append(
                "Polaire introuvable : %s" % filepath)
            return results

        try:
            results['polar'] = read_polar(filepath)
        except PolarError as e:
            results['warnings'].append(str(e))
            return results

        alpha = results['polar']['alpha']
        logger.info("Polaire parsee : %d points, alpha %g -> %g",
                    len(alpha), alpha.min(), alpha.max())
        if len(alpha) > 1 and np.any(np.diff(alpha) < 0):
            results['warnings'].append(
                "Polaire non triee par alpha croissant : %s" % filepath)
        return results
