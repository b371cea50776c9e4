"""
city-search CLI - main entry point.

Loads the city data file once, then either answers a single query
(--city/--radius) or runs the interactive prompt loop.
"""

import argparse
import sys

from city_search.app.build import build
from city_search.config.models import AppModel
from city_search.domain.metrics import Norm
from city_search.errors import DataSourceError, FormatError, InvalidArgument
from city_search.io.config import load_config


def _norm_arg(text: str) -> Norm:
    try:
        return Norm.coerce(int(text) if text.lstrip("+-").isdigit() else text)
    except InvalidArgument as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="city-search",
        description="Find cities within a radius of a given city",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive loop over data.txt (enter 0 to quit)
  city-search

  # Single query with the Manhattan norm
  city-search --data cities.txt --city Oslo --radius 5 --norm l1
""",
    )
    parser.add_argument("--data", help="City data file (default: data.txt)")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for the JSON logs on stderr",
    )
    parser.add_argument("--city", help="Reference city name (one-shot mode)")
    parser.add_argument("--radius", type=float, help="Search radius (one-shot mode)")
    parser.add_argument(
        "--norm",
        type=_norm_arg,
        help="0/l2/euclidean, 1/linf/chebyshev, 2/l1/manhattan (default: 0)",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> AppModel:
    model = load_config(args.config) if args.config else AppModel()
    raw = model.model_dump()
    if args.data:
        raw["data"]["path"] = args.data
    if args.log_level:
        raw["log"]["level"] = args.log_level
    return AppModel.model_validate(raw)


def main(argv: list[str] | None = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)
    if args.city is not None and args.radius is None:
        parser.error("--city requires --radius")

    try:
        model = resolve_config(args)
    except DataSourceError as e:
        print(f"Error while reading the config: {e}", file=sys.stderr)
        return 1

    try:
        app = build(model)
    except (DataSourceError, FormatError) as e:
        print(f"Error while reading the file: {e}", file=sys.stderr)
        return 1

    if args.city is None:
        app.shell.run()
        return 0

    norm = args.norm
    if norm is None:
        norm = model.shell.default_norm if model.shell.default_norm is not None else Norm.L2
    try:
        result = app.shell.run_once(args.city, args.radius, norm)
    except InvalidArgument as e:
        print(str(e))
        return 1
    return 0 if result is not None else 1


if __name__ == "__main__":
    sys.exit(main())
