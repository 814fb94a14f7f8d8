"""Command line access to the shelving rules and permutation generator."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from warehouse_shelving.enterprise.config.settings import get_settings
from warehouse_shelving.enterprise.core import (
    ShelfType,
    WarehouseFamily,
    allowed_types,
    families,
    iter_permutations,
    permutation_count,
    validate,
)
from warehouse_shelving.observability import configure_logging


def _families_command(_args: argparse.Namespace) -> int:
    for family in families():
        print(f"{family.value}: {', '.join(t.value for t in allowed_types(family))}")
    return 0


def _validate_command(args: argparse.Namespace) -> int:
    result = validate(args.family, args.max_shelves, args.types)
    if result.error is not None:
        print(f"invalid ({result.error.kind.value}): {result.error.message}")
        return 1
    print("valid")
    return 0


def _permutations_command(args: argparse.Namespace) -> int:
    if args.length < 0:
        print(f"Permutation length must be non-negative, got {args.length}.", file=sys.stderr)
        return 2
    limit = get_settings().permutations.max_length
    if args.length > limit and not args.force:
        total = permutation_count(len(allowed_types(args.family)), args.length)
        print(f"Length {args.length} exceeds the limit of {limit} ({total} results); use --force.", file=sys.stderr)
        return 2
    for permutation in iter_permutations(allowed_types(args.family), args.length):
        print(permutation)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect warehouse shelf rules.")
    subcommands = parser.add_subparsers(dest="command", required=True)

    families_parser = subcommands.add_parser("families", help="List families and their allowed shelf types.")
    families_parser.set_defaults(handler=_families_command)

    validate_parser = subcommands.add_parser("validate", help="Check a shelf configuration.")
    validate_parser.add_argument("family", type=WarehouseFamily)
    validate_parser.add_argument("max_shelves", type=int)
    validate_parser.add_argument("types", type=ShelfType, nargs="*")
    validate_parser.set_defaults(handler=_validate_command)

    permutations_parser = subcommands.add_parser("permutations", help="Enumerate shelf permutations.")
    permutations_parser.add_argument("family", type=WarehouseFamily)
    permutations_parser.add_argument("length", type=int)
    permutations_parser.add_argument("--force", action="store_true", help="Ignore the configured length limit.")
    permutations_parser.set_defaults(handler=_permutations_command)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging(get_settings().logging)
    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
