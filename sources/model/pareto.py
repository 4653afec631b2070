#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Front de Pareto (CL, finesse) d'un balayage en incidence et choix de
la configuration optimale.

Le front est construit en une seule passe vers l'avant, sur les
enregistrements deja tries par alpha croissant. Quand un point i est
domine par un point j (CL et finesse strictement superieurs), le
parcours saute directement a j : les points intermediaires ne sont
jamais compares. Le front obtenu n'est donc pas un skyline exhaustif.

L'optimum retenu est le premier point du front, retrouve par egalite
stricte dans le balayage.

Usage::

    sweep = sweep_from_arrays(alpha, cl, cd)
    front, optimal = optimize(sweep)
    print(optimal.alpha, optimal.efficiency)

@author: Nervures
@date: 2026-10
"""

import logging
from collections import namedtuple

import numpy as np

from .errors import EmptyFrontError, NoMatchError

logger = logging.getLogger(__name__)


SweepRecord = namedtuple('SweepRecord', 'alpha cl cd efficiency')
SweepRecord.__doc__ = "Resultat solveur pour un alpha : (alpha, CL, CD, CL/CD)."

ParetoPoint = namedtuple('ParetoPoint', 'cl efficiency')
ParetoPoint.__doc__ = "Point du front de Pareto : (CL, CL/CD)."

OptimalConfig = namedtuple('OptimalConfig', 'alpha cl cd efficiency')
OptimalConfig.__doc__ = "Configuration optimale retenue : (alpha, CL, CD, CL/CD)."


def is_valid(record):
    """False pour les lignes sentinelles (CL = CD = 0)."""
    return not (record.cl == 0.0 and record.cd == 0.0)


def sweep_from_arrays(alpha, cl, cd, efficiency=None):
    """Assemble les tableaux paralleles d'un balayage en enregistrements.

    :param alpha: angles d'attaque (croissants)
    :type alpha: array_like
    :param cl: coefficients de portance
    :type cl: array_like
    :param cd: coefficients de trainee
    :type cd: array_like
    :param efficiency: finesses CL/CD (None = calculees ; 0/0 -> nan)
    :type efficiency: array_like or None
    :returns: enregistrements, dans l'ordre des tableaux
    :rtype: list[SweepRecord]
    :raises ValueError: si les tableaux n'ont pas la meme longueur
    """
    alpha = np.asarray(alpha, dtype=float)
    cl = np.asarray(cl, dtype=float)
    cd = np.asarray(cd, dtype=float)
    if efficiency is None:
        with np.errstate(divide='ignore', invalid='ignore'):
            efficiency = cl / cd
    else:
        efficiency = np.asarray(efficiency, dtype=float)

    lengths = set(len(a) for a in (alpha, cl, cd, efficiency))
    if len(lengths) != 1:
        raise ValueError(
            "Tableaux de longueurs differentes : alpha=%d, CL=%d, CD=%d, "
            "L/D=%d" % (len(alpha), len(cl), len(cd), len(efficiency)))

    return [SweepRecord(float(a), float(l), float(d), float(e))
            for a, l, d, e in zip(alpha, cl, cd, efficiency)]


def build_front(sweep):
    """Construit le front de Pareto (CL, finesse) par balayage avant.

    Un point i est domine par le premier j > i valide tel que
    CL[j] > CL[i] et L/D[j] > L/D[i] ; le parcours reprend alors en j.
    Un point non domine est ajoute au front et le parcours reprend en i+1.
    Les lignes invalides ne sont ni retenues ni dominantes.

    :param sweep: enregistrements tries par alpha croissant
    :type sweep: list[SweepRecord]
    :returns: front, dans l'ordre d'alpha croissant
    :rtype: list[ParetoPoint]
    """
    front = []
    n = len(sweep)
    i = 0
    while i < n:
        current = sweep[i]
        if not is_valid(current):
            i += 1
            continue

        dominated = False
        for j in range(i + 1, n):
            other = sweep[j]
            if not is_valid(other):
                continue
            if (other.cl > current.cl
                    and other.efficiency > current.efficiency):
                dominated = True
                i = j
                break

        if not dominated:
            front.append(ParetoPoint(current.cl, current.efficiency))
            i += 1

    logger.debug("Front de Pareto : %d points sur %d", len(front), n)
    return front


def select_optimal(front, sweep):
    """Retient le premier point du front et le retrouve dans le balayage.

    :param front: front de Pareto
    :type front: list[ParetoPoint]
    :param sweep: balayage ayant servi a construire le front
    :type sweep: list[SweepRecord]
    :returns: configuration optimale
    :rtype: OptimalConfig
    :raises EmptyFrontError: si le front est vide
    :raises NoMatchError: si (CL, L/D) du premier point est introuvable
    """
    if not front:
        raise EmptyFrontError()

    best = front[0]
    for record in sweep:
        if record.cl == best.cl and record.efficiency == best.efficiency:
            return OptimalConfig(record.alpha, record.cl, record.cd,
                                 record.efficiency)

    raise NoMatchError(best)


def optimize(sweep):
    """Front de Pareto puis configuration optimale.

    :param sweep: enregistrements tries par alpha croissant
    :type sweep: list[SweepRecord]
    :returns: (front, optimum)
    :rtype: tuple(list[ParetoPoint], OptimalConfig)
    """
    front = build_front(sweep)
    optimal = select_optimal(front, sweep)
    logger.info("Optimum : alpha=%.5f  CL=%.5f  CD=%.5f  L/D=%.5f",
                optimal.alpha, optimal.cl, optimal.cd, optimal.efficiency)
    return front, optimal
