"""Command-line interface for the Namma Metro route finder.

Usage:
    # Shortest route with up to 3 alternates
    namma-metro route "Challaghatta" "Nagawara"

    # Save a TXT report of the route
    namma-metro route "kengeri" "mg road" --export route.txt

    # List stations, optionally hiding planned ones
    namma-metro stations --exclude-planned

    # Station name suggestions for a prefix
    namma-metro suggest "jay"
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.exceptions import MetroRouterError
from .core.models.results import NoRoute, RouteFound
from .core.services.route_formatter import RouteFormatter
from .core.services.service_factory import ServiceFactory
from .managers.config_manager import ConfigData, ConfigManager, ConfigurationError
from .version import get_version_string

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_CONFIG_ERROR = 2


def setup_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Setup console logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def cmd_route(args: argparse.Namespace, factory: ServiceFactory) -> int:
    """
    Find and print a route.

    Args:
        args: Parsed command-line arguments
        factory: Service factory with a loaded network

    Returns:
        Exit code (0 for success, 1 if the route cannot be found)
    """
    route_service = factory.get_route_service()
    result = route_service.find_route(args.source, args.destination)

    if not isinstance(result, RouteFound):
        if isinstance(result, NoRoute):
            print(f"No route found between '{args.source}' and '{args.destination}'.", file=sys.stderr)
            return EXIT_NOT_FOUND

        print(result.message, file=sys.stderr)
        station_service = factory.get_station_service()
        for raw_name in result.raw_names:
            suggestions = station_service.get_station_suggestions(
                raw_name, limit=factory.config.routing.suggestion_limit)
            if suggestions:
                print(f"Did you mean ({raw_name}): {', '.join(suggestions)}", file=sys.stderr)
        return EXIT_NOT_FOUND

    route = route_service.describe_route(result.path)
    estimate = route_service.estimate(route)

    max_alternates = args.alternates
    if max_alternates is None:
        max_alternates = factory.config.routing.max_alternates
    alternates = [route_service.describe_route(path)
                  for path in route_service.find_alternates(result.path, max_alternates)]

    formatter = RouteFormatter()
    print(formatter.format_summary(route, estimate, alternates), end="")

    if args.export:
        per_hop = route_service.estimator.estimate(1, 0)
        report = formatter.format_report(route, estimate, per_hop)
        try:
            path = formatter.export_txt(report, args.export)
        except OSError as e:
            print(f"Failed to create {args.export}: {e}", file=sys.stderr)
            return EXIT_CONFIG_ERROR
        print(f"Saved TXT report: {path}")

    return EXIT_OK


def cmd_stations(args: argparse.Namespace, factory: ServiceFactory) -> int:
    """Print all visible stations with their lines."""
    stations = factory.get_station_service().list_stations()
    print(f"Station list (total: {len(stations)})")
    for station in stations:
        suffix = " [planned]" if station.planned else ""
        print(f" - {station.name} ({', '.join(station.lines)}){suffix}")
    return EXIT_OK


def cmd_suggest(args: argparse.Namespace, factory: ServiceFactory) -> int:
    """Print stations whose key starts with the given prefix."""
    suggestions = factory.get_station_service().get_station_suggestions(
        args.prefix, limit=factory.config.routing.suggestion_limit)
    print(f'Matches for "{args.prefix}":')
    if not suggestions:
        print("  (no prefix matches)")
        return EXIT_NOT_FOUND
    for name in suggestions:
        print(f"  - {name}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="namma-metro", description=get_version_string())
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--data-dir", help="Directory holding network_index.json")
    parser.add_argument("--exclude-planned", action="store_true",
                        help="Hide planned stations from the network")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=get_version_string())

    subparsers = parser.add_subparsers(dest="command", required=True)

    route_parser = subparsers.add_parser("route", help="Find a route between two stations")
    route_parser.add_argument("source", help="Starting station")
    route_parser.add_argument("destination", help="Destination station")
    route_parser.add_argument("--alternates", type=int, default=None,
                              help="Maximum number of alternate routes")
    route_parser.add_argument("--export", metavar="FILE", help="Save a TXT route report")
    route_parser.set_defaults(handler=cmd_route)

    stations_parser = subparsers.add_parser("stations", help="List all stations")
    stations_parser.set_defaults(handler=cmd_stations)

    suggest_parser = subparsers.add_parser("suggest", help="Suggest stations for a prefix")
    suggest_parser.add_argument("prefix", help="Beginning of a station name")
    suggest_parser.set_defaults(handler=cmd_suggest)

    return parser


def load_config(args: argparse.Namespace) -> ConfigData:
    """Load configuration from --config, or use defaults."""
    config = ConfigManager(args.config).load_config() if args.config else ConfigData()
    if args.data_dir:
        config.network.data_directory = args.data_dir
    if args.exclude_planned:
        config.network.include_planned = False
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigurationError as e:
        setup_logging(verbose=args.verbose)
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(config.log_level, args.verbose)

    try:
        factory = ServiceFactory(config)
        return args.handler(args, factory)
    except (MetroRouterError, FileNotFoundError) as e:
        logger.error(f"Failed to load metro network: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
