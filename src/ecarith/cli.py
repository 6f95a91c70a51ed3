import argparse
import logging
import sys

from .curve import CURVES, get_curve
from .errors import EllipticCurveError
from . import operations as ops

logger = logging.getLogger(__name__)


def integer(value):
    """Parse a decimal or 0x-prefixed hex integer argument."""
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")


def print_point(xy):
    x, y = xy
    print(f"X: 0x{ops.to_hex(x)}")
    print(f"Y: 0x{ops.to_hex(y)}")


def mul(args):
    curve = args.curve
    x = curve.gx if args.x is None else args.x
    y = curve.gy if args.y is None else args.y
    print_point(ops.ec_mul(args.k, x, y, curve.aa, curve.pp))


def add(args):
    curve = args.curve
    print_point(ops.ec_add(args.x1, args.y1, args.x2, args.y2, curve.aa, curve.pp))


def sub(args):
    curve = args.curve
    print_point(ops.ec_sub(args.x1, args.y1, args.x2, args.y2, curve.aa, curve.pp))


def inv(args):
    print_point(ops.ec_inv(args.x, args.y, args.curve.pp))


def derive_y(args):
    curve = args.curve
    y = ops.derive_y(args.prefix, args.x, curve.aa, curve.bb, curve.pp)
    print(f"0x{ops.to_hex(y)}")


def on_curve(args):
    curve = args.curve
    result = ops.is_on_curve(args.x, args.y, curve.aa, curve.bb, curve.pp)
    print("true" if result else "false")
    return 0 if result else 1


def inv_mod(args):
    print(f"0x{ops.to_hex(ops.inv_mod(args.x, args.curve.pp))}")


def exp_mod(args):
    print(f"0x{ops.to_hex(ops.exp_mod(args.base, args.exp, args.curve.pp))}")


def to_affine(args):
    print_point(ops.to_affine(args.x, args.y, args.z, args.curve.pp))


def curves(args):
    for name, curve in CURVES.items():
        print(f"{name}: {curve.bits}-bit, p = 0x{ops.to_hex(curve.pp)}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ecarith", description="Elliptic-curve arithmetic on named curves."
    )
    parser.add_argument(
        "--curve",
        type=get_curve,
        default=get_curve("secp256k1"),
        help="Curve preset (%s). Defaults to secp256k1." % ", ".join(CURVES),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers()

    parser_mul = subparsers.add_parser("mul", help="Multiply a point by a scalar.")
    parser_mul.add_argument("--k", type=integer, required=True, help="Scalar.")
    parser_mul.add_argument("--x", type=integer, help="Point x. Defaults to the generator.")
    parser_mul.add_argument("--y", type=integer, help="Point y. Defaults to the generator.")
    parser_mul.set_defaults(func=mul)

    for name, func, text in (("add", add, "Add two points."), ("sub", sub, "Subtract two points.")):
        parser_two = subparsers.add_parser(name, help=text)
        for coord in ("x1", "y1", "x2", "y2"):
            parser_two.add_argument(f"--{coord}", type=integer, required=True)
        parser_two.set_defaults(func=func)

    parser_inv = subparsers.add_parser("inv", help="Negate a point.")
    parser_inv.add_argument("--x", type=integer, required=True)
    parser_inv.add_argument("--y", type=integer, required=True)
    parser_inv.set_defaults(func=inv)

    parser_derive = subparsers.add_parser("derive-y", help="Decompress a point.")
    parser_derive.add_argument("--prefix", type=integer, required=True, help="0x02/0x03 or 0/1.")
    parser_derive.add_argument("--x", type=integer, required=True)
    parser_derive.set_defaults(func=derive_y)

    parser_on_curve = subparsers.add_parser("on-curve", help="Check a point is on the curve.")
    parser_on_curve.add_argument("--x", type=integer, required=True)
    parser_on_curve.add_argument("--y", type=integer, required=True)
    parser_on_curve.set_defaults(func=on_curve)

    parser_inv_mod = subparsers.add_parser("inv-mod", help="Invert modulo the curve prime.")
    parser_inv_mod.add_argument("--x", type=integer, required=True)
    parser_inv_mod.set_defaults(func=inv_mod)

    parser_exp_mod = subparsers.add_parser("exp-mod", help="Exponentiate modulo the curve prime.")
    parser_exp_mod.add_argument("--base", type=integer, required=True)
    parser_exp_mod.add_argument("--exp", type=integer, required=True)
    parser_exp_mod.set_defaults(func=exp_mod)

    parser_affine = subparsers.add_parser("to-affine", help="Convert a Jacobian point to affine.")
    for coord in ("x", "y", "z"):
        parser_affine.add_argument(f"--{coord}", type=integer, required=True)
    parser_affine.set_defaults(func=to_affine)

    parser_curves = subparsers.add_parser("curves", help="List the curve presets.")
    parser_curves.set_defaults(func=curves)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return 2

    try:
        return args.func(args) or 0
    except EllipticCurveError as e:
        logger.debug("%s failed", args.func.__name__, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
