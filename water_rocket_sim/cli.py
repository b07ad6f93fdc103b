"""
Water Rocket Flight Simulation - CLI

The single entry point for running a flight from per-stage water volume and
pressure, exporting the trajectory and sweeping launch parameters.
"""

import argparse
import logging
import sys

from . import constants as C
from .config import SimulationConfig
from .main import run_simulation
from .stages import create_stage_configs
from .studies import pressure_grid, run_parameter_sweep, water_grid
from .validation import ValidationError

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Three-stage water rocket flight simulation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    for i in range(C.NUM_STAGES):
        n = i + 1
        parser.add_argument(
            f"--water{n}",
            type=int,
            default=C.DEFAULT_WATER_ML[i],
            help=f"Stage {n} water volume in mL "
                 f"[{C.WATER_MIN_ML[i]}-{C.WATER_MAX_ML[i]}]"
        )
        parser.add_argument(
            f"--pressure{n}",
            type=float,
            default=C.DEFAULT_PRESSURE_ATM[i],
            help=f"Stage {n} absolute pressure in atm "
                 f"[{C.PRESSURE_MIN_ATM}-{C.PRESSURE_MAX_ATM}, step {C.PRESSURE_STEP_ATM}]"
        )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Write the trajectory to this CSV file"
    )
    parser.add_argument(
        "--sweep",
        type=int,
        choices=range(1, C.NUM_STAGES + 1),
        default=None,
        metavar="STAGE",
        help="Sweep water and pressure of this stage instead of a single run "
             "(cannot be combined with --csv or --verbose)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print the step-by-step progress table"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )
    args = parser.parse_args(argv)
    if args.sweep is not None and (args.csv or args.verbose):
        parser.error("--sweep prints a sweep summary only; --csv and --verbose "
                     "apply to a single run")
    return args


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    water_ml = [getattr(args, f"water{n}") for n in range(1, C.NUM_STAGES + 1)]
    pressure_atm = [getattr(args, f"pressure{n}") for n in range(1, C.NUM_STAGES + 1)]

    try:
        if args.sweep is not None:
            logger.info(f"Sweeping stage {args.sweep}...")
            results = run_parameter_sweep(
                water_grid(args.sweep), pressure_grid(),
                stage=args.sweep,
                base_water_ml=water_ml,
                base_pressure_atm=pressure_atm,
            )
            print(results.summary())
            return 0

        stage_configs = create_stage_configs(water_ml, pressure_atm)
        config = SimulationConfig(verbose=args.verbose)

        logger.info("Starting simulation...")
        result = run_simulation(stage_configs, config=config)

        print("\n" + "=" * 60)
        print("SIMULATION SUMMARY")
        print("=" * 60)
        print(result.summary_text())
        print("=" * 60 + "\n")

        if args.csv:
            result.to_csv(args.csv)
            logger.info(f"Trajectory written to {args.csv}")

    except ValidationError as e:
        logger.error(f"Invalid input: {e}")
        print(f"\n[ERROR] Invalid input: {e}")
        return 2
    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n[ERROR] Simulation failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
