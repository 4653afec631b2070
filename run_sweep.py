#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Lanceur en ligne de commande : mise au format d'un profil et optimisation
a partir d'une polaire enregistree."""

import sys
import os
import argparse
import logging

# Ajouter sources/ au path pour les imports model.*
_root = os.path.dirname(os.path.abspath(__file__))
_src = os.path.join(_root, 'sources')
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.errors import FoilSweepError
from model.foilconfig import load_config
from model.pipeline import SweepPipeline
from model.replay import PolarReplaySimulator

logger = logging.getLogger('run_sweep')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Met au format un fichier de coordonnees de profil et "
                    "selectionne l'incidence optimale (front de Pareto "
                    "CL / finesse).")
    parser.add_argument('airfoil',
                        help="fichier de coordonnees (reecrit sur place)")
    parser.add_argument('--polar', required=True,
                        help="polaire XFoil du balayage a post-traiter")
    parser.add_argument('--recap', default='optimization_recap.txt',
                        help="fichier recapitulatif (defaut: %(default)s)")
    parser.add_argument('--config',
                        help="fichier .cfg surchargeant les defauts")
    parser.add_argument('--chord', type=float, help="corde (m)")
    parser.add_argument('--speed', type=float,
                        help="vitesse de croisiere (m/s)")
    parser.add_argument('--viscosity', type=float,
                        help="viscosite cinematique (m^2/s)")
    parser.add_argument('--work-dir',
                        help="repertoire de travail (defaut: temporaire)")
    parser.add_argument('--plot', action='store_true',
                        help="tracer le front de Pareto")
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(name)-20s %(levelname)-8s %(message)s'
    )

    try:
        params = load_config(args.config) if args.config else {}
        for key, value in (('CHORD', args.chord),
                           ('CRUISE_SPEED', args.speed),
                           ('KINEMATIC_VISCOSITY', args.viscosity)):
            if value is not None:
                params[key] = value

        pipeline = SweepPipeline(PolarReplaySimulator(args.polar),
                                 work_dir=args.work_dir)
        results = pipeline.run(args.airfoil, params, recap_file=args.recap)
    except (FoilSweepError, IOError) as e:
        logger.error("%s", e)
        return 1

    opt = results.optimal
    print("\nOptimal values:")
    print("  Alpha: %.5f\n  CL: %.5f\n  CD: %.5f\n  L/D: %.5f"
          % (opt.alpha, opt.cl, opt.cd, opt.efficiency))
    print("\nResults stored in '%s'." % args.recap)

    if args.plot:
        results.plot_front()
    return 0


if __name__ == '__main__':
    sys.exit(main())
