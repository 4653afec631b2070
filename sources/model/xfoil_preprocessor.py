#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Preprocesseur XFoil : genere les fichiers d'entree d'un balayage en alpha.

- Fichier profil (.dat) : nom + x y, deja dans l'ordre BF -> BA -> BF
- Fichier de commandes (.cmd) pour piloter XFoil

@author: Nervures
@date: 2026-10
"""

import os
import logging

from .base import AbstractPreprocessor
from .geometry import write_coordinates

logger = logging.getLogger(__name__)

# Noms des fichiers echanges avec XFoil
AIRFOIL_FILE = 'airfoil.dat'
COMMAND_FILE = 'xfoil_sweep.cmd'
POLAR_FILE = 'polar.dat'


class XFoilPreprocessor(AbstractPreprocessor):
    """Genere les fichiers d'entree pour XFoil.

    Cree dans work_dir :
    - airfoil.dat : coordonnees du profil ordonne
    - xfoil_sweep.cmd : script de commandes du balayage alpha
    """

    def prepare(self, airfoil, params):
        """Genere tous les fichiers d'entree XFoil.

        :param airfoil: profil ordonne
        :type airfoil: CanonicalAirfoil
        :param params: parametres resolus (voir foilconfig.resolve_params)
        :type params: dict
        :returns: liste des fichiers generes
        :rtype: list[str]
        """
        self.params = params

        if not os.path.isdir(self.work_dir):
            os.makedirs(self.work_dir)

        generated = [self._write_airfoil(airfoil),
                     self._write_sweep_commands()]
        logger.debug("Fichiers XFoil generes : %s", ', '.join(generated))
        return generated

    def _write_airfoil(self, airfoil):
        """Ecrit le profil dans le repertoire de travail.

        :param airfoil: profil ordonne
        :type airfoil: CanonicalAirfoil
        :returns: chemin du fichier cree
        :rtype: str
        """
        filepath = os.path.join(self.work_dir, AIRFOIL_FILE)
        label = airfoil.label or 'Profil'
        write_coordinates(filepath, label, airfoil.points)
        return filepath

    def _write_sweep_commands(self):
        """Genere le script XFoil du balayage alpha.

        Chargement, repaneling, mode visqueux au Re demande, accumulation
        de la polaire dans polar.dat pendant ASEQ.

        :returns: chemin du fichier commande
        :rtype: str
        """
        p = self.params
        filepath = os.path.join(self.work_dir, COMMAND_FILE)
        lines = []

        # Chargement du profil
        lines.append('LOAD %s' % AIRFOIL_FILE)

        # Repaneling
        lines.append('PPAR')
        lines.append('N %d' % p.get('NPANEL', 160))
        lines.append('')  # ligne vide pour valider PPAR
        lines.append('')

        lines.append('OPER')
        if p.get('VISCOUS', True):
            lines.append('VISC %g' % p['RE'])
        lines.append('MACH %g' % p.get('MACH', 0.0))
        lines.append('ITER %d' % p.get('ITER', 100))

        # Accumulation polaire
        lines.append('PACC')
        lines.append(POLAR_FILE)
        lines.append('')  # pas de dump file

        lines.append('ASEQ %g %g %g' % (p['ALPHA_MIN'], p['ALPHA_MAX'],
                                        p['ALPHA_STEP']))

        # Desactiver l'accumulation polaire
        lines.append('PACC')

        # Sortir de OPER et quitter
        lines.append('')
        lines.append('QUIT')

        with open(filepath, 'w') as f:
            f.write('\n'.join(lines))
        return filepath
