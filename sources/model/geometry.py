#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Mise au format des coordonnees de profil pour un solveur a panneaux.

Les fichiers de coordonnees du commerce arrivent dans des ordres varies
(Selig, Lednicer, extrados croissant...). Le solveur attend un ordre
unique : BF -> extrados -> BA -> intrados -> BF.

Usage::

    from foilsweep.geometry import format_airfoil_file

    airfoil = format_airfoil_file('Input/clarky.dat')   # reecrit sur place
    print(airfoil.leading_edge, len(airfoil))

Conventions retenues :

- BA = premier point de x minimal, BF = premier point de x maximal
  (ordre du fichier).
- Le point de BA est exclu de l'extrados dedoublonne ; il n'est present
  dans la sortie que s'il figure aussi dans la partie intrados.
- Egalite des points stricte (pas de tolerance).

@author: Nervures
@date: 2026-10
"""

import os
import math
import logging
from collections import namedtuple

import numpy as np

from .errors import TooFewPointsError

logger = logging.getLogger(__name__)

# Nombre minimal de points pour qu'un profil soit exploitable
MIN_POINTS = 10

# Module maximal d'une coordonnee normalisee (corde = 1)
MAX_COORD = 1.0

# Le nom du profil est transmis octet par octet (fichiers souvent en Latin-1)
FILE_ENCODING = 'latin-1'


class Point2D(namedtuple('Point2D', 'x y')):
    """Point 2D immuable.

    L'ordre (<, >) ne porte que sur x ; l'egalite porte sur (x, y).
    """

    __slots__ = ()

    def __lt__(self, other):
        return self.x < other.x

    def __gt__(self, other):
        return self.x > other.x


class CanonicalAirfoil(object):
    """Profil ordonne pour le solveur : BF -> extrados -> BA -> intrados -> BF.

    Produit uniquement par :func:`normalize`.
    """

    def __init__(self, points, label, leading_edge, trailing_edge,
                 reversed_upper, n_upper):
        self._points = tuple(points)
        self.label = label
        self.leading_edge = leading_edge
        self.trailing_edge = trailing_edge
        self.reversed_upper = reversed_upper
        self.n_upper = n_upper

    @property
    def points(self):
        """Points ordonnes (tuple de Point2D)."""
        return self._points

    @property
    def upper(self):
        """Extrados dedoublonne, BF -> BA."""
        return self._points[:self.n_upper]

    @property
    def lower(self):
        """Intrados, dans l'ordre du fichier source."""
        return self._points[self.n_upper:]

    def as_array(self):
        """Coordonnees sous forme de tableau.

        :returns: coordonnees (x, y)
        :rtype: numpy.ndarray, shape (n, 2)
        """
        return np.array(self._points, dtype=float).reshape(-1, 2)

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __repr__(self):
        return "CanonicalAirfoil('%s', %d pts)" % (self.label, len(self))


# ----------------------------------------------------------------------
#  Lecture / ecriture
# ----------------------------------------------------------------------

def _parse_point(line):
    """Lit une ligne 'x y' ; None si la ligne n'est pas un point valide."""
    parts = line.split()
    if len(parts) < 2:
        return None
    try:
        x = float(parts[0])
        y = float(parts[1])
    except ValueError:
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    if abs(x) > MAX_COORD or abs(y) > MAX_COORD:
        return None
    return Point2D(x, y)


def read_coordinates(source):
    """Lit un fichier de coordonnees.

    La premiere ligne est le nom du profil, conservee telle quelle.
    Les lignes suivantes qui ne sont pas deux reels finis de module <= 1
    sont ignorees (en-tetes, compteurs Lednicer, lignes vides).

    :param source: chemin du fichier ou objet fichier ouvert en lecture
    :type source: str or file
    :returns: (nom, liste de Point2D)
    :rtype: tuple
    """
    if hasattr(source, 'readline'):
        return _read_stream(source)
    with open(source, 'r', encoding=FILE_ENCODING) as f:
        return _read_stream(f)


def _read_stream(stream):
    label = stream.readline().rstrip('\r\n')
    points = []
    n_skipped = 0
    for line in stream:
        point = _parse_point(line)
        if point is None:
            if line.strip():
                n_skipped += 1
            continue
        points.append(point)
    if n_skipped:
        logger.debug("%d lignes non retenues dans '%s'", n_skipped, label)
    return label, points


def write_coordinates(target, label, points):
    """Ecrit le nom puis une ligne 'x y' par point.

    Aucun arrondi : representation texte par defaut des flottants.

    :param target: chemin du fichier ou objet fichier ouvert en ecriture
    :type target: str or file
    :param label: nom du profil (premiere ligne)
    :type label: str
    :param points: points a ecrire, dans l'ordre
    :type points: iterable of Point2D
    """
    if hasattr(target, 'write'):
        _write_stream(target, label, points)
        return
    with open(target, 'w', encoding=FILE_ENCODING) as f:
        _write_stream(f, label, points)


def _write_stream(stream, label, points):
    stream.write('%s\n' % label)
    for x, y in points:
        stream.write('%r %r\n' % (float(x), float(y)))


# ----------------------------------------------------------------------
#  Normalisation
# ----------------------------------------------------------------------

def find_edges(points):
    """Trouve le BA (x minimal) et le BF (x maximal) en un seul parcours.

    En cas d'egalite, le premier point rencontre est retenu.

    :param points: points du profil (non vide)
    :type points: list[Point2D]
    :returns: (bord d'attaque, bord de fuite)
    :rtype: tuple(Point2D, Point2D)
    """
    leading = trailing = points[0]
    for p in points[1:]:
        if p < leading:
            leading = p
        elif p > trailing:
            trailing = p
    return leading, trailing


def normalize(points, label=''):
    """Remet les points dans l'ordre attendu par le solveur.

    1. BA et BF par x min / x max.
    2. Sens : si x[1] > x[0], l'extrados est croissant et sera inverse.
    3. Les points vont dans l'extrados jusqu'a la premiere decroissance
       de x, puis definitivement dans l'intrados.
    4. Extrados dedoublonne (ordre conserve), sans le point de BA.
    5. Inversion eventuelle de l'extrados, puis ajout de l'intrados.

    :param points: points bruts, dans l'ordre du fichier
    :type points: list[Point2D] or list[tuple]
    :param label: nom du profil
    :type label: str
    :returns: profil ordonne
    :rtype: CanonicalAirfoil
    :raises TooFewPointsError: si moins de MIN_POINTS points
    """
    points = [Point2D(float(x), float(y)) for x, y in points]
    if len(points) < MIN_POINTS:
        raise TooFewPointsError(len(points), MIN_POINTS)

    leading_edge, trailing_edge = find_edges(points)
    needs_reversing = points[1].x > points[0].x

    upper = []
    seen = set()
    lower = []
    on_lower = False
    previous = None
    for p in points:
        if not on_lower and previous is not None and p.x < previous.x:
            on_lower = True
        previous = p

        if on_lower:
            lower.append(p)
        elif p != leading_edge and p not in seen:
            seen.add(p)
            upper.append(p)

    if needs_reversing:
        upper.reverse()

    logger.debug("Extrados %d pts (inverse=%s), intrados %d pts",
                 len(upper), needs_reversing, len(lower))

    return CanonicalAirfoil(upper + lower, label, leading_edge,
                            trailing_edge, needs_reversing, len(upper))


def file_exists(filepath):
    """True si le fichier de coordonnees existe (avertit sinon).

    :param filepath: chemin du fichier
    :type filepath: str
    :rtype: bool
    """
    if os.path.isfile(filepath):
        return True
    logger.warning("Fichier de coordonnees introuvable : %s", filepath)
    return False


def format_airfoil_file(filepath):
    """Lit, normalise et reecrit sur place un fichier de coordonnees.

    :param filepath: chemin du fichier (ecrase)
    :type filepath: str
    :returns: profil ordonne
    :rtype: CanonicalAirfoil
    :raises IOError: si le fichier n'existe pas
    :raises TooFewPointsError: si moins de MIN_POINTS points valides
    """
    filepath = str(filepath)
    if not os.path.isfile(filepath):
        raise IOError("Fichier introuvable : %s" % filepath)

    label, points = read_coordinates(filepath)
    airfoil = normalize(points, label=label)
    write_coordinates(filepath, label, airfoil.points)

    logger.info("Profil '%s' mis au format (%d -> %d points) : %s",
                label, len(points), len(airfoil), filepath)
    return airfoil
