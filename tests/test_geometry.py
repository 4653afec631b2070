#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Tests de la mise au format des coordonnees de profil.

Lance :
    python -m pytest tests/test_geometry.py

@author: Nervures
@date: 2026-10
"""

import io
import os
import sys
import shutil
import tempfile
import unittest

# Ajouter le repertoire sources/ au path
_here = os.path.dirname(os.path.abspath(__file__))
_src = os.path.normpath(os.path.join(_here, '..', 'sources'))
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.errors import TooFewPointsError, GeometryError
from model.geometry import (Point2D, normalize, find_edges, read_coordinates,
                            write_coordinates, format_airfoil_file,
                            file_exists, MIN_POINTS)


# Extrados BA -> BF puis intrados BA -> BF (x croissant des deux cotes)
UPPER_ASC = [(0.0, 0.0), (0.1, 0.05), (0.3, 0.07),
             (0.5, 0.06), (0.8, 0.03), (1.0, 0.0)]
LOWER_ASC = [(0.0, 0.0), (0.1, -0.04), (0.3, -0.05),
             (0.5, -0.04), (0.8, -0.02), (1.0, 0.0)]

# Ordre solveur : BF -> extrados -> BA -> intrados -> BF
SELIG = [(1.0, 0.0), (0.8, 0.03), (0.5, 0.06), (0.3, 0.07), (0.1, 0.05),
         (0.0, 0.0), (0.1, -0.04), (0.3, -0.05), (0.5, -0.04),
         (0.8, -0.02), (1.0, 0.0)]


def write_lednicer_file(filepath, name='TEST FOIL'):
    """Ecrit un fichier Lednicer (compteurs + deux blocs)."""
    with open(filepath, 'w') as f:
        f.write('%s\n' % name)
        f.write('      6.       6.\n')
        f.write('\n')
        for x, y in UPPER_ASC:
            f.write(' %.6f %.6f\n' % (x, y))
        f.write('\n')
        for x, y in LOWER_ASC:
            f.write(' %.6f %.6f\n' % (x, y))


class TestPoint2D(unittest.TestCase):
    """Tests du point 2D."""

    def test_order_by_x_only(self):
        """< et > ne comparent que x."""
        self.assertTrue(Point2D(0.1, 5.0) < Point2D(0.2, -5.0))
        self.assertTrue(Point2D(0.3, -1.0) > Point2D(0.2, 1.0))
        self.assertFalse(Point2D(0.2, 0.0) < Point2D(0.2, 1.0))

    def test_equality_full(self):
        """Egalite sur (x, y)."""
        self.assertEqual(Point2D(0.5, 0.1), Point2D(0.5, 0.1))
        self.assertNotEqual(Point2D(0.5, 0.1), Point2D(0.5, -0.1))

    def test_immutable(self):
        """Point non modifiable."""
        p = Point2D(0.5, 0.1)
        with self.assertRaises(AttributeError):
            p.x = 0.0


class TestNormalize(unittest.TestCase):
    """Tests de la normalisation de l'ordre des points."""

    def test_ascending_input_reversed(self):
        """12 points extrados croissant / intrados : 11 points en sortie."""
        airfoil = normalize(UPPER_ASC + LOWER_ASC)
        self.assertEqual(len(airfoil), 11)
        self.assertTrue(airfoil.reversed_upper)
        self.assertEqual(airfoil.n_upper, 5)
        expected = [Point2D(*p) for p in SELIG]
        self.assertEqual(list(airfoil.points), expected)

    def test_upper_descending_x(self):
        """Extrados de sortie : x strictement decroissant."""
        airfoil = normalize(UPPER_ASC + LOWER_ASC)
        xs = [p.x for p in airfoil.upper]
        self.assertEqual(xs, sorted(xs, reverse=True))
        self.assertEqual(len(set(xs)), len(xs))

    def test_lower_kept_in_order(self):
        """Intrados recopie dans l'ordre d'origine."""
        airfoil = normalize(UPPER_ASC + LOWER_ASC)
        self.assertEqual(list(airfoil.lower), [Point2D(*p) for p in LOWER_ASC])

    def test_idempotent_on_canonical(self):
        """Normaliser une sortie deja ordonnee la laisse inchangee."""
        first = normalize(UPPER_ASC + LOWER_ASC)
        second = normalize(first.points)
        self.assertEqual(second.points, first.points)
        self.assertFalse(second.reversed_upper)

    def test_descending_input_unchanged(self):
        """Fichier Selig : ordre conserve, pas d'inversion."""
        airfoil = normalize(SELIG)
        self.assertFalse(airfoil.reversed_upper)
        self.assertEqual(list(airfoil.points), [Point2D(*p) for p in SELIG])

    def test_leading_edge_omitted_from_upper(self):
        """Le BA n'apparait pas dans l'extrados dedoublonne."""
        airfoil = normalize(UPPER_ASC + LOWER_ASC)
        self.assertEqual(airfoil.leading_edge, Point2D(0.0, 0.0))
        self.assertNotIn(airfoil.leading_edge, airfoil.upper)

    def test_leading_edge_absent_when_not_in_lower(self):
        """Sans BA dans l'intrados, la sortie ne contient pas le BA."""
        lower = [(0.05, -0.03)] + LOWER_ASC[1:]
        airfoil = normalize(UPPER_ASC + lower)
        self.assertNotIn(Point2D(0.0, 0.0), airfoil.points)
        self.assertEqual(len(airfoil), 11)

    def test_upper_duplicates_removed(self):
        """Doublons de l'extrados supprimes, ordre conserve."""
        upper = UPPER_ASC[:3] + [UPPER_ASC[2]] + UPPER_ASC[3:]
        airfoil = normalize(upper + LOWER_ASC)
        self.assertEqual(airfoil.n_upper, 5)
        self.assertEqual(len(airfoil), 11)

    def test_lower_duplicates_kept(self):
        """Pas de dedoublonnage dans l'intrados."""
        lower = LOWER_ASC[:2] + [LOWER_ASC[1]] + LOWER_ASC[2:]
        airfoil = normalize(UPPER_ASC + lower)
        self.assertEqual(len(airfoil.lower), 7)

    def test_switch_is_permanent(self):
        """Apres la premiere decroissance de x, tout va dans l'intrados."""
        lower = [(0.0, 0.0), (0.2, -0.04), (0.1, -0.045),
                 (0.5, -0.04), (0.4, -0.03), (1.0, 0.0)]
        airfoil = normalize(UPPER_ASC + lower)
        self.assertEqual(list(airfoil.lower), [Point2D(*p) for p in lower])

    def test_exact_equality_fragility(self):
        """Egalite stricte : 0.1 + 0.2 et 0.3 sont deux points distincts."""
        upper = [(0.0, 0.0), (0.1, 0.05), (0.3, 0.07), (0.1 + 0.2, 0.07),
                 (0.5, 0.06), (0.8, 0.03), (1.0, 0.0)]
        airfoil = normalize(upper + LOWER_ASC)
        self.assertEqual(airfoil.n_upper, 6)

    def test_too_few_points(self):
        """Moins de 10 points -> TooFewPointsError."""
        with self.assertRaises(TooFewPointsError) as ctx:
            normalize(SELIG[:MIN_POINTS - 1])
        self.assertEqual(ctx.exception.n_points, 9)
        self.assertEqual(ctx.exception.min_points, 10)
        self.assertIsInstance(ctx.exception, GeometryError)
        self.assertIsInstance(ctx.exception, ValueError)

    def test_exactly_min_points(self):
        """10 points : accepte."""
        airfoil = normalize(SELIG[:MIN_POINTS])
        self.assertEqual(len(airfoil), 10)

    def test_label_and_array(self):
        """Nom conserve, conversion numpy (n, 2)."""
        airfoil = normalize(UPPER_ASC + LOWER_ASC, label='CLARK Y')
        self.assertEqual(airfoil.label, 'CLARK Y')
        arr = airfoil.as_array()
        self.assertEqual(arr.shape, (11, 2))
        self.assertAlmostEqual(arr[0, 0], 1.0)
        self.assertIn('CLARK Y', repr(airfoil))


class TestFindEdges(unittest.TestCase):
    """Tests du choix BA / BF en cas d'egalite sur x."""

    def test_first_min_wins(self):
        """Deux points de x minimal : le premier rencontre est le BA."""
        upper = [(0.0, 0.001)] + UPPER_ASC[1:]
        lower = [(0.0, -0.001)] + LOWER_ASC[1:]
        airfoil = normalize(upper + lower)
        self.assertEqual(airfoil.leading_edge, Point2D(0.0, 0.001))
        self.assertNotIn(Point2D(0.0, 0.001), airfoil.points)
        self.assertIn(Point2D(0.0, -0.001), airfoil.lower)

    def test_first_max_wins(self):
        """Deux points de x maximal : le premier rencontre est le BF."""
        upper = UPPER_ASC[:-1] + [(1.0, 0.002)]
        lower = LOWER_ASC[:-1] + [(1.0, -0.002)]
        airfoil = normalize(upper + lower)
        self.assertEqual(airfoil.trailing_edge, Point2D(1.0, 0.002))

    def test_single_scan(self):
        """find_edges sur une liste simple."""
        pts = [Point2D(0.5, 0.0), Point2D(0.0, 0.1), Point2D(1.0, 0.0),
               Point2D(0.0, -0.1), Point2D(1.0, 0.2)]
        le, te = find_edges(pts)
        self.assertEqual(le, Point2D(0.0, 0.1))
        self.assertEqual(te, Point2D(1.0, 0.0))


class TestReadWrite(unittest.TestCase):
    """Tests de lecture / ecriture des fichiers de coordonnees."""

    def test_read_filters_lines(self):
        """Compteurs Lednicer, texte et valeurs > 1 ignores."""
        content = ('CLARK Y AIRFOIL  \n'
                   ' 61. 61.\n'
                   '\n'
                   ' 0.0 0.0\n'
                   ' abc def\n'
                   ' 1.5 0.2\n'
                   ' 0.5 -1.2\n'
                   ' 0.5 0.1 extra\n'
                   ' -0.01 -0.05\n'
                   ' 0.7\n')
        label, points = read_coordinates(io.StringIO(content))
        self.assertEqual(label, 'CLARK Y AIRFOIL  ')
        self.assertEqual(points, [Point2D(0.0, 0.0), Point2D(0.5, 0.1),
                                  Point2D(-0.01, -0.05)])

    def test_read_rejects_non_finite(self):
        """Lignes nan / inf ignorees comme du texte."""
        content = ('N\n'
                   'nan nan\n'
                   '0.2 nan\n'
                   'inf 0.0\n'
                   '-inf -inf\n'
                   '0.5 0.1\n')
        label, points = read_coordinates(io.StringIO(content))
        self.assertEqual(points, [Point2D(0.5, 0.1)])

    def test_write_format(self):
        """Nom puis 'x y' par ligne, sans arrondi."""
        out = io.StringIO()
        write_coordinates(out, 'NAME', [Point2D(1.0, 0.0),
                                        Point2D(0.123456789, 0.03)])
        self.assertEqual(out.getvalue(),
                         'NAME\n1.0 0.0\n0.123456789 0.03\n')

    def test_write_read_same_points(self):
        """Les points relus sont identiques aux points ecrits."""
        airfoil = normalize(UPPER_ASC + LOWER_ASC, label='FOIL')
        out = io.StringIO()
        write_coordinates(out, airfoil.label, airfoil.points)
        label, points = read_coordinates(io.StringIO(out.getvalue()))
        self.assertEqual(label, 'FOIL')
        self.assertEqual(tuple(points), airfoil.points)


class TestFormatAirfoilFile(unittest.TestCase):
    """Tests de la reecriture sur place."""

    def setUp(self):
        self.work_dir = tempfile.mkdtemp(prefix='test_foilsweep_geo_')

    def tearDown(self):
        shutil.rmtree(self.work_dir, ignore_errors=True)

    def test_overwrite_in_place(self):
        """Fichier Lednicer reecrit dans l'ordre solveur."""
        filepath = os.path.join(self.work_dir, 'foil.dat')
        write_lednicer_file(filepath, name='TEST FOIL')
        airfoil = format_airfoil_file(filepath)
        self.assertEqual(len(airfoil), 11)

        with open(filepath, 'r') as f:
            lines = f.read().splitlines()
        self.assertEqual(lines[0], 'TEST FOIL')
        self.assertEqual(len(lines), 12)
        self.assertEqual(lines[1], '1.0 0.0')

        label, points = read_coordinates(filepath)
        self.assertEqual(tuple(points), airfoil.points)

    def test_second_pass_stable(self):
        """Reformater un fichier deja formate ne change rien."""
        filepath = os.path.join(self.work_dir, 'foil.dat')
        write_lednicer_file(filepath)
        format_airfoil_file(filepath)
        with open(filepath, 'r') as f:
            first = f.read()
        format_airfoil_file(filepath)
        with open(filepath, 'r') as f:
            second = f.read()
        self.assertEqual(first, second)

    def test_latin1_label_preserved(self):
        """Nom non UTF-8 (Latin-1) : octets conserves a la reecriture."""
        filepath = os.path.join(self.work_dir, 'foil.dat')
        label = b'Profil \xe0 cambrure'
        with open(filepath, 'wb') as f:
            f.write(label + b'\n')
            for x, y in SELIG:
                f.write(b'%.6f %.6f\n' % (x, y))
        airfoil = format_airfoil_file(filepath)
        self.assertEqual(airfoil.label, 'Profil \xe0 cambrure')
        with open(filepath, 'rb') as f:
            self.assertEqual(f.readline(), label + b'\n')

    def test_missing_file(self):
        """Fichier absent -> IOError."""
        filepath = os.path.join(self.work_dir, 'absent.dat')
        self.assertFalse(file_exists(filepath))
        with self.assertRaises(IOError):
            format_airfoil_file(filepath)

    def test_too_few_points_file_untouched(self):
        """Profil trop court : erreur, fichier non modifie."""
        filepath = os.path.join(self.work_dir, 'short.dat')
        content = 'SHORT\n0.0 0.0\n0.5 0.1\n1.0 0.0\n'
        with open(filepath, 'w') as f:
            f.write(content)
        with self.assertRaises(TooFewPointsError):
            format_airfoil_file(filepath)
        with open(filepath, 'r') as f:
            self.assertEqual(f.read(), content)


if __name__ == '__main__':
    unittest.main()
