#!/usr/bin/env python3
"""
===============================================================================
ROTMATH - COMMAND LINE ENTRY POINT
===============================================================================
Small front end over the quaternion primitives for quick conversions from a
shell.

USAGE:
    rotmath from-euler 0.1 0.2 0.3              # Euler XYZ -> quaternion
    rotmath to-euler 1 0 0 0                    # quaternion -> Euler XYZ
    rotmath --degrees axis-angle 0 0 1 90       # axis-angle -> quaternion
    rotmath multiply 1 0 0 0  0.7071 0 0 0.7071 # Hamilton product
    rotmath angle 1 0 0 0  0.7071 0 0 0.7071    # angle between two
    rotmath norm 1 1 1 1                        # Euclidean norm
    rotmath --single --config my.yaml ...       # float32, custom config

Results go to stdout as space-separated numbers; logs go to stderr.
===============================================================================
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

import yaml

from rotmath.config import load_config
from rotmath.constants import DEG2RAD, RAD2DEG
from rotmath.quaternion import Quaternion, QuaternionF

logger = logging.getLogger('rotmath.main')


def setup_logging(config: dict, verbose: bool = False) -> None:
    """Configure root logging from the ``logging`` config section."""
    level = 'DEBUG' if verbose else str(config['logging']['level']).upper()
    logging.basicConfig(
        level=level,
        format=config['logging']['format'],
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger('rotmath').setLevel(level)


def format_values(values: Iterable, precision: int) -> str:
    # + 0.0 turns -0.0 into 0.0
    return ' '.join(f"{float(v) + 0.0:.{precision}f}" for v in values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rotmath',
        description='Quaternion / Euler XYZ conversions',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rotmath from-euler 0.1 0.2 0.3
  rotmath --degrees to-euler 0.7071068 0 0.7071068 0
  rotmath --single axis-angle 0 0 1 1.5707963
        """
    )

    parser.add_argument('--config', type=str, default=None,
                        help='Path to config YAML')
    parser.add_argument('--degrees', action='store_true',
                        help='Angle inputs and outputs in degrees')
    parser.add_argument('--single', action='store_true',
                        help='Use single-precision (float32) arithmetic')
    parser.add_argument('--precision', type=int, default=None,
                        help='Decimals printed (overrides config)')
    parser.add_argument('--verbose', action='store_true',
                        help='Debug logging')

    sub = parser.add_subparsers(dest='command', metavar='COMMAND')
    sub.required = True

    p = sub.add_parser('from-euler', help='Euler XYZ angles -> quaternion')
    p.add_argument('euler', type=float, nargs=3, metavar='E')

    p = sub.add_parser('to-euler', help='Quaternion -> Euler XYZ angles')
    p.add_argument('q', type=float, nargs=4, metavar='Q')

    p = sub.add_parser('axis-angle', help='Axis and angle -> quaternion')
    p.add_argument('axis', type=float, nargs=3, metavar='A')
    p.add_argument('angle', type=float, metavar='ANGLE')

    for name, text in (('multiply', 'Hamilton product q1 * q2'),
                       ('angle', 'Rotation angle between q1 and q2')):
        p = sub.add_parser(name, help=text)
        p.add_argument('q1', type=float, nargs=4, metavar='Q1')
        p.add_argument('q2', type=float, nargs=4, metavar='Q2')

    p = sub.add_parser('norm', help='Euclidean norm of a quaternion')
    p.add_argument('q', type=float, nargs=4, metavar='Q')

    return parser


def run_command(args: argparse.Namespace, config: dict) -> List:
    """
    Execute one subcommand and return the values to print.

    Args:
        args: Parsed command line
        config: Merged configuration (command line overrides applied)

    Returns:
        List of scalars, angles already in the configured units
    """
    qcls = QuaternionF if config['scalar']['type'] == 'single' else Quaternion
    degrees = config['output']['angle_units'] == 'degrees'
    to_rad = DEG2RAD if degrees else 1.0
    from_rad = RAD2DEG if degrees else 1.0

    logger.debug("Command %s with %s, angles in %s", args.command,
                 qcls.__name__, config['output']['angle_units'])

    if args.command == 'from-euler':
        q = qcls.from_euler([a * to_rad for a in args.euler])
        return list(q)
    elif args.command == 'to-euler':
        e = qcls(*args.q).to_euler_xyz()
        return [a * from_rad for a in e]
    elif args.command == 'axis-angle':
        q = qcls.from_axis_angle(args.axis, args.angle * to_rad)
        return list(q)
    elif args.command == 'multiply':
        return list(qcls(*args.q1) * qcls(*args.q2))
    elif args.command == 'angle':
        return [qcls(*args.q1).angle(qcls(*args.q2)) * from_rad]
    elif args.command == 'norm':
        return [qcls(*args.q).norm()]
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point. Parses the command line, loads configuration and
    prints the result of the requested conversion.

    Returns:
        Process exit status (0 success, 1 configuration error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        setup_logging(load_config(), args.verbose)
        logger.error("Could not load configuration: %s", exc)
        return 1

    if args.degrees:
        config['output']['angle_units'] = 'degrees'
    if args.single:
        config['scalar']['type'] = 'single'
    if args.precision is not None:
        if args.precision < 0:
            parser.error("--precision must be non-negative")
        config['output']['precision'] = args.precision

    setup_logging(config, args.verbose)

    values = run_command(args, config)
    print(format_values(values, config['output']['precision']))
    return 0


if __name__ == '__main__':
    sys.exit(main())
