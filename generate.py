#!/usr/bin/env python3
"""Subsector Generator - Main entry point.

Generates (or loads) a subsector of worlds and prints it as a T5-style sector
table, optionally saving JSON, a player-safe JSON copy, or a map preview.
"""

import argparse
import logging
import sys

from subsector.analysis.histogram import world_histograms
from subsector.engine.subsector_generator import WorldAbundance, generate_subsector
from subsector.engine.tables import load_tables
from subsector.interface.renderer import MapRenderer
from subsector.interface.t5_table import t5_table
from subsector.utils.errors import SubsectorError
from subsector.utils.rng import DiceRNG
from subsector.utils.serialization import load_subsector, save_subsector


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Subsector Generator - Traveller-style world and subsector generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                      # Generate a random subsector
  %(prog)s --seed 42 --abundance dense          # Reproducible, densely populated subsector
  %(prog)s --name "Spinward Reach" --map        # Named subsector with ASCII map preview
  %(prog)s --load reach.json --table reach.txt  # Export a saved subsector as a sector table
  %(prog)s --save reach.json --player-safe players.json
  %(prog)s --stats 10000                        # Attribute distributions over 10000 worlds
        """,
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for generation (default: unseeded)",
    )
    parser.add_argument(
        "--abundance",
        choices=[a.name.lower() for a in WorldAbundance],
        default="nominal",
        help="World abundance: rift=-2, sparse=-1, nominal=0, dense=+1, abundant=+2 (default: nominal)",
    )
    parser.add_argument("--name", type=str, default=None, help="Subsector name (default: random)")
    parser.add_argument("--load", type=str, metavar="FILE", help="Load subsector from JSON file")
    parser.add_argument("--save", type=str, metavar="FILE", help="Save subsector to JSON file")
    parser.add_argument(
        "--table",
        type=str,
        metavar="FILE",
        help="Write the T5 sector table to FILE instead of printing it",
    )
    parser.add_argument(
        "--player-safe",
        type=str,
        metavar="FILE",
        help="Save a player-safe JSON copy (no factions, cultures, tags or notes)",
    )
    parser.add_argument("--map", action="store_true", help="Print an ASCII map of the subsector")
    parser.add_argument(
        "--stats",
        type=int,
        metavar="N",
        default=None,
        help="Print attribute histograms over N generated worlds and exit",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        tables = load_tables()
    except SubsectorError as e:
        print(f"Error loading reference tables: {e}")
        sys.exit(1)

    rng = DiceRNG(args.seed)

    if args.stats is not None:
        for histogram in world_histograms(tables, rng, args.stats).values():
            print(histogram.render(scale=max(1, args.stats // 100), percent=True))
            print()
        return

    if args.load:
        try:
            subsector = load_subsector(args.load, tables)
        except FileNotFoundError:
            print(f"Error: File {args.load} not found.")
            sys.exit(1)
        except SubsectorError as e:
            print(f"Error loading subsector: {e}")
            sys.exit(1)
        if args.name:
            subsector.rename(args.name)
    else:
        abundance = WorldAbundance.from_name(args.abundance)
        subsector = generate_subsector(tables, rng, abundance.modifier, args.name)

    if args.map:
        print(MapRenderer().render_with_coords(subsector))
        print()

    table = t5_table(subsector)
    if args.table:
        try:
            with open(args.table, "w", encoding="utf-8") as f:
                f.write(table + "\n")
        except OSError as e:
            print(f"Error writing table: {e}")
            sys.exit(1)
        print(f"Sector table written to {args.table}")
    else:
        print(table)

    try:
        if args.save:
            save_subsector(subsector, args.save)
        if args.player_safe:
            save_subsector(subsector.copy_player_safe(tables), args.player_safe)
    except OSError as e:
        print(f"Error saving subsector: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
