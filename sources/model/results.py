#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Resultats d'un balayage : enregistrements, front de Pareto, optimum.

Une instance est construite a chaque execution du pipeline, aucun etat
n'est partage entre deux balayages.

Comparaison graphique entre profils::

    ax = res_a.plot_front(label='Clark Y', show=False)
    res_b.plot_front(ax=ax, color='red', label='NACA 2412')

@author: Nervures
@date: 2026-10
"""

import logging

import numpy as np

from .pareto import is_valid

logger = logging.getLogger(__name__)


class SweepResults(object):
    """Resultats structures d'un balayage en incidence."""

    # Couleur par defaut : bleu matplotlib
    DEFAULT_COLOR = '#1f77b4'

    # Couleur du point optimal
    OPTIMAL_COLOR = 'red'

    def __init__(self, label, params, sweep, front, optimal, warnings=None):
        """
        :param label: nom du profil
        :type label: str
        :param params: parametres du balayage
        :type params: dict
        :param sweep: enregistrements du balayage
        :type sweep: list[SweepRecord]
        :param front: front de Pareto
        :type front: list[ParetoPoint]
        :param optimal: configuration optimale
        :type optimal: OptimalConfig
        :param warnings: messages d'avertissement
        :type warnings: list or None
        """
        self._label = label
        self._params = dict(params)
        self._sweep = list(sweep)
        self._front = list(front)
        self._optimal = optimal
        self._warnings = list(warnings) if warnings is not None else []

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def label(self):
        """Nom du profil."""
        return self._label

    @property
    def params(self):
        """Parametres du balayage (copie)."""
        return dict(self._params)

    @property
    def sweep(self):
        """Enregistrements du balayage, alpha croissant."""
        return self._sweep

    @property
    def front(self):
        """Front de Pareto, dans l'ordre d'alpha croissant."""
        return self._front

    @property
    def optimal(self):
        """Configuration optimale (OptimalConfig)."""
        return self._optimal

    @property
    def warnings(self):
        """Messages d'avertissement."""
        return self._warnings

    @property
    def reynolds(self):
        """Nombre de Reynolds du balayage (None si inconnu)."""
        return self._params.get('RE')

    @property
    def alpha(self):
        """Angles d'attaque, ndarray."""
        return np.array([r.alpha for r in self._sweep], dtype=float)

    @property
    def cl(self):
        """Coefficients de portance, ndarray."""
        return np.array([r.cl for r in self._sweep], dtype=float)

    @property
    def cd(self):
        """Coefficients de trainee, ndarray."""
        return np.array([r.cd for r in self._sweep], dtype=float)

    @property
    def efficiency(self):
        """Finesses CL/CD, ndarray."""
        return np.array([r.efficiency for r in self._sweep], dtype=float)

    @property
    def n_valid(self):
        """Nombre d'enregistrements exploitables (hors sentinelles CL=CD=0)."""
        return sum(1 for r in self._sweep if is_valid(r))

    # ------------------------------------------------------------------
    #  Traces
    # ------------------------------------------------------------------

    def _get_or_create_ax(self, ax):
        """Retourne (ax, created) : l'ax fourni ou un nouveau."""
        if ax is not None:
            return ax, False
        import matplotlib.pyplot as plt
        fig, ax = plt.subplots()
        return ax, True

    def plot_front(self, ax=None, color=None, label=None, show=True):
        """Trace L/D(CL) : balayage, front de Pareto et optimum.

        :param ax: axes existants (None = nouveau)
        :param color: couleur (defaut : bleu)
        :param label: etiquette pour la legende (defaut : nom du profil)
        :param show: appeler plt.show() si nouveau ax
        :returns: axes matplotlib
        """
        if color is None:
            color = self.DEFAULT_COLOR
        if label is None:
            label = self._label
        ax, created = self._get_or_create_ax(ax)

        valid = [r for r in self._sweep if is_valid(r)]
        ax.plot([r.cl for r in valid], [r.efficiency for r in valid],
                'o', color=color, alpha=0.3, markersize=4,
                label='%s balayage' % label)
        if self._front:
            ax.plot([p.cl for p in self._front],
                    [p.efficiency for p in self._front],
                    '-s', color=color, markersize=5,
                    label='%s front' % label)
        if self._optimal is not None:
            ax.plot(self._optimal.cl, self._optimal.efficiency, '*',
                    color=self.OPTIMAL_COLOR, markersize=12,
                    label='Optimum alpha=%.2f' % self._optimal.alpha)

        ax.set_xlabel('CL')
        ax.set_ylabel('CL/CD')
        ax.set_title('Front de Pareto')
        ax.grid(True)
        ax.legend(fontsize=8)
        if created and show:
            import matplotlib.pyplot as plt
            plt.show()
        return ax

    def plot_efficiency(self, ax=None, color=None, label=None, show=True):
        """Trace CL/CD(alpha) avec l'optimum.

        :param ax: axes existants (None = nouveau)
        :param color: couleur (defaut : bleu)
        :param label: etiquette pour la legende (defaut : nom du profil)
        :param show: appeler plt.show() si nouveau ax
        :returns: axes matplotlib
        """
        if color is None:
            color = self.DEFAULT_COLOR
        if label is None:
            label = self._label
        ax, created = self._get_or_create_ax(ax)

        valid = [r for r in self._sweep if is_valid(r)]
        ax.plot([r.alpha for r in valid], [r.efficiency for r in valid],
                color=color, label=label)
        if self._optimal is not None:
            ax.axvline(self._optimal.alpha, color=self.OPTIMAL_COLOR,
                       linestyle='--', linewidth=0.8)

        ax.set_xlabel('alpha (deg)')
        ax.set_ylabel('CL/CD')
        ax.set_title('Finesse(alpha)')
        ax.grid(True)
        ax.legend(fontsize=8)
        if created and show:
            import matplotlib.pyplot as plt
            plt.show()
        return ax

    # ------------------------------------------------------------------
    #  Representation
    # ------------------------------------------------------------------

    def __repr__(self):
        return "SweepResults('%s', %d pts, %d front, alpha_opt=%s)" % (
            self._label, len(self._sweep), len(self._front),
            '%g' % self._optimal.alpha if self._optimal is not None
            else None)
