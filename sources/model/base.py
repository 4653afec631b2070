#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Classes abstraites des adaptateurs solveur.

Chaque solveur fournit un Preprocessor (fichiers d'entree) et un
Postprocessor (lecture de la polaire). L'execution du solveur lui-meme
est un collaborateur externe : l'hote fournit une implementation de
AbstractSimulator.

@author: Nervures
@date: 2026-10
"""

from abc import ABC, abstractmethod


class AbstractPreprocessor(ABC):
    """Prepare les donnees d'entree d'un balayage en incidence.

    Responsabilites :
    - Recevoir le profil ordonne et les parametres du balayage
    - Generer les fichiers d'entree specifiques au solveur
    - Gerer le repertoire de travail
    """

    def __init__(self, work_dir):
        """
        :param work_dir: repertoire de travail pour les fichiers generes
        :type work_dir: str
        """
        self.work_dir = work_dir

    @abstractmethod
    def prepare(self, airfoil, params):
        """Genere les fichiers d'entree du solveur.

        :param airfoil: profil ordonne
        :type airfoil: CanonicalAirfoil
        :param params: parametres du balayage (voir foilconfig.resolve_params)
        :type params: dict
        :returns: liste des fichiers generes
        :rtype: list[str]
        """
        pass


class AbstractSimulator(ABC):
    """Execute le solveur aerodynamique (collaborateur externe).

    Le solveur doit deposer sa polaire dans le repertoire de travail,
    sous le nom attendu par le postprocesseur. Une implementation qui
    lance un processus l'interrompt au-dela de ``timeout`` secondes et
    retourne alors False.
    """

    def __init__(self, exe_path=None, timeout=30):
        """
        :param exe_path: chemin vers l'executable du solveur
        :type exe_path: str or None
        :param timeout: duree maximale du calcul, en secondes
        :type timeout: int
        """
        self.exe_path = exe_path
        self.timeout = timeout

    @abstractmethod
    def run(self, work_dir, input_files):
        """Lance le solveur.

        :param work_dir: repertoire de travail
        :type work_dir: str
        :param input_files: fichiers d'entree generes par le preprocessor
        :type input_files: list[str]
        :returns: True si le calcul s'est termine normalement
        :rtype: bool
        """
        pass


class AbstractPostprocessor(ABC):
    """Lit la polaire produite par le solveur.

    Le dictionnaire retourne par parse() contient :
    - 'polar' : dict de numpy arrays ('alpha', 'CL', 'CD', ...) ou None
    - 'warnings' : liste de messages d'avertissement
    """

    @abstractmethod
    def parse(self, work_dir):
        """Lit et structure les resultats du solveur.

        :param work_dir: repertoire contenant les fichiers de sortie
        :type work_dir: str
        :returns: resultats structures
        :rtype: dict
        """
        pass
