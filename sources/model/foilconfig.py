#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Lecture des fichiers de configuration du balayage.

Format : cle=valeur, une par ligne. Les lignes commencant par # sont ignorees.
Les types sont inferes automatiquement (bool, int, float, str).

Le nombre de Reynolds est deduit de la corde, de la vitesse de croisiere
et de la viscosite cinematique, sauf si RE est donne explicitement.

@author: Nervures
@date: 2026-10
"""

import os
import logging

from .errors import ConfigError

logger = logging.getLogger(__name__)

# Parametres physiques qui doivent etre strictement positifs
_POSITIVE_KEYS = ('CHORD', 'CRUISE_SPEED', 'KINEMATIC_VISCOSITY', 'ALPHA_STEP')


def _parse_value(value_str):
    """Infere le type d'une valeur depuis sa representation texte.

    :param value_str: valeur brute lue depuis le fichier
    :type value_str: str
    :returns: valeur typee (bool, int, float ou str)
    """
    s = value_str.strip()
    # Booleens
    if s.lower() in ('true', 'yes', 'on'):
        return True
    if s.lower() in ('false', 'no', 'off'):
        return False
    # Entier
    try:
        return int(s)
    except ValueError:
        pass
    # Flottant
    try:
        return float(s)
    except ValueError:
        pass
    # Chaine
    return s


def load_config(filepath):
    """Charge un fichier de configuration cle=valeur.

    :param filepath: chemin du fichier .cfg
    :type filepath: str
    :returns: dictionnaire des parametres
    :rtype: dict
    :raises ConfigError: si le fichier n'existe pas
    """
    if not os.path.isfile(filepath):
        raise ConfigError(
            "Fichier de configuration introuvable : %s" % filepath)
    params = {}
    with open(filepath, 'r') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            if '=' not in line:
                continue
            key, value = line.split('=', 1)
            params[key.strip()] = _parse_value(value)
    return params


def load_defaults(name='sweep'):
    """Charge les parametres par defaut.

    Cherche le fichier defaults_<name>.cfg dans le meme repertoire.

    :param name: nom du jeu de parametres (ex: 'sweep')
    :type name: str
    :returns: parametres par defaut
    :rtype: dict
    """
    cfg_dir = os.path.dirname(os.path.abspath(__file__))
    cfg_file = os.path.join(cfg_dir, 'defaults_%s.cfg' % name)
    return load_config(cfg_file)


def merge_params(defaults, user_params):
    """Fusionne les parametres utilisateur avec les defauts.

    Les parametres utilisateur surchargent les defauts.

    :param defaults: parametres par defaut
    :type defaults: dict
    :param user_params: parametres utilisateur (peuvent etre None)
    :type user_params: dict or None
    :returns: parametres fusionnes
    :rtype: dict
    """
    merged = dict(defaults)
    if user_params:
        for key, value in user_params.items():
            merged[key] = value
    return merged


def reynolds_number(chord, speed, viscosity):
    """Nombre de Reynolds Re = c * V / nu.

    :param chord: corde (m)
    :type chord: float
    :param speed: vitesse (m/s)
    :type speed: float
    :param viscosity: viscosite cinematique (m^2/s)
    :type viscosity: float
    :rtype: float
    """
    return chord * speed / viscosity


def validate_params(params):
    """Verifie la coherence des parametres de balayage.

    :param params: parametres fusionnes
    :type params: dict
    :raises ConfigError: parametre manquant, non numerique ou hors domaine
    """
    for key in _POSITIVE_KEYS + ('ALPHA_MIN', 'ALPHA_MAX'):
        if key not in params:
            raise ConfigError("Parametre manquant : %s" % key)
        value = params[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(
                "Parametre %s non numerique : %r" % (key, value))
    for key in _POSITIVE_KEYS:
        if params[key] <= 0:
            raise ConfigError(
                "Parametre %s doit etre strictement positif (recu %r)"
                % (key, params[key]))
    if params['ALPHA_MAX'] < params['ALPHA_MIN']:
        raise ConfigError(
            "ALPHA_MAX (%r) inferieur a ALPHA_MIN (%r)"
            % (params['ALPHA_MAX'], params['ALPHA_MIN']))


def resolve_params(user_params=None):
    """Parametres complets d'un balayage : defauts + utilisateur + Re.

    :param user_params: parametres utilisateur (surchargent les defauts)
    :type user_params: dict or None
    :returns: parametres valides, avec la cle 'RE'
    :rtype: dict
    :raises ConfigError: si un parametre est invalide
    """
    params = merge_params(load_defaults('sweep'), user_params)
    validate_params(params)
    if 'RE' not in params:
        params['RE'] = reynolds_number(params['CHORD'],
                                       params['CRUISE_SPEED'],
                                       params['KINEMATIC_VISCOSITY'])
    logger.debug("Parametres resolus : Re=%g, alpha %g -> %g (pas %g)",
                 params['RE'], params['ALPHA_MIN'], params['ALPHA_MAX'],
                 params['ALPHA_STEP'])
    return params
