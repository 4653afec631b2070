#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Simulateur de rejeu : reutilise une polaire deja calculee.

Remplace l'execution du solveur par la copie d'un fichier polaire
enregistre dans le repertoire de travail, pour post-traiter des
resultats existants avec le meme pipeline.

@author: Nervures
@date: 2026-10
"""

import os
import shutil
import logging

from .base import AbstractSimulator
from .xfoil_preprocessor import POLAR_FILE

logger = logging.getLogger(__name__)


class PolarReplaySimulator(AbstractSimulator):
    """Depose une polaire enregistree a la place d'un calcul."""

    def __init__(self, polar_path):
        """
        :param polar_path: fichier polaire a rejouer
        :type polar_path: str
        """
        super(PolarReplaySimulator, self).__init__(exe_path=None)
        self.polar_path = polar_path

    def run(self, work_dir, input_files):
        """Copie la polaire dans work_dir.

        :param work_dir: repertoire de travail
        :type work_dir: str
        :param input_files: fichiers generes par le preprocesseur (ignores)
        :type input_files: list[str]
        :returns: True si la polaire a ete copiee
        :rtype: bool
        """
        if not os.path.isfile(self.polar_path):
            logger.error("Polaire a rejouer introuvable : %s",
                         self.polar_path)
            return False

        target = os.path.join(work_dir, POLAR_FILE)
        if os.path.abspath(target) != os.path.abspath(self.polar_path):
            shutil.copyfile(self.polar_path, target)
        logger.info("Rejeu de la polaire %s", self.polar_path)
        return True
